# topmark:header:start
#
#   project      : lintoml
#   file         : rendering.py
#   file_relpath : src/lintoml/rendering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML lexical rendering for keys and values.

This module turns already-validated values into TOML text fragments:

- bare keys (``[A-Za-z0-9_-]+``) are written as-is, every other key is quoted;
- strings are TOML *basic strings* with all significant characters escaped;
- arrays are always inline (``[ 1, 4 ]``); Records nested in arrays become
  inline tables (``{ line = 3, ruleId = "semi" }``).

Inputs are assumed to have passed [`lintoml.validation`][lintoml.validation];
nothing here checks types beyond dispatching on them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Final

BARE_KEY_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]+")

_SHORT_ESCAPES: Final[dict[str, str]] = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}

ARRAY_ITEM_INDENT: Final[str] = "    "


def _escape_char(ch: str) -> str:
    short: str | None = _SHORT_ESCAPES.get(ch)
    if short is not None:
        return short
    code: int = ord(ch)
    if code < 0x20 or code == 0x7F:
        return f"\\u{code:04X}"
    return ch


def render_string(value: str) -> str:
    """Render a TOML basic string.

    Args:
        value: The string to quote. Must not contain lone surrogates.

    Returns:
        The double-quoted, escaped string.
    """
    return '"' + "".join(_escape_char(ch) for ch in value) + '"'


def render_key(key: str) -> str:
    """Render a single (non-dotted) TOML key.

    Args:
        key: The key.

    Returns:
        The key itself when it is a valid bare key, otherwise a quoted string.
    """
    if BARE_KEY_RE.fullmatch(key):
        return key
    return render_string(key)


def render_table_header(path: tuple[str, ...]) -> str:
    """Render a ``[dotted.section]`` header from the ancestor keys.

    Args:
        path: Keys from the document root to the table.

    Returns:
        The bracketed header line.
    """
    return "[" + ".".join(render_key(k) for k in path) + "]"


def render_inline(value: object) -> str:
    """Render a validated value on a single line.

    Args:
        value: A `str`, `int`, `bool`, `list` or `dict` produced by validation.

    Returns:
        The TOML fragment for ``value``.
    """
    # bool first: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return render_string(value)
    if isinstance(value, list):
        if not value:
            return "[]"
        return "[ " + ", ".join(render_inline(v) for v in value) + " ]"
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        items: str = ", ".join(f"{render_key(k)} = {render_inline(v)}" for k, v in value.items())
        return "{ " + items + " }"
    raise TypeError(f"Cannot render value of type {type(value).__name__}")


def render_array(items: list[object]) -> str:
    """Render an array assigned to a key at section level.

    Arrays of scalars stay on one line. Arrays holding Records or Arrays are
    written one element per line; each element is itself single-line, since
    inline tables cannot span lines.

    Args:
        items: Validated array elements.

    Returns:
        The TOML array fragment (possibly multi-line, without trailing newline).
    """
    if not any(isinstance(v, (list, Mapping)) for v in items):
        return render_inline(items)
    lines: list[str] = ["["]
    lines.extend(f"{ARRAY_ITEM_INDENT}{render_inline(v)}," for v in items)
    lines.append("]")
    return "\n".join(lines)


def render_key_value(key: str, value: object) -> str:
    """Render a ``key = value`` line for a section-level entry."""
    if isinstance(value, list):
        return f"{render_key(key)} = {render_array(value)}"
    return f"{render_key(key)} = {render_inline(value)}"
