# topmark:header:start
#
#   project      : lintoml
#   file         : parsing.py
#   file_relpath : src/lintoml/parsing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse TOML back into plain Python values and check round trips.

Parsing is delegated to `tomlkit`; the parsed document is unwrapped into
plain `dict`/`list`/scalar values so it compares directly against a
normalized Document.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from lintoml.config.logging import get_logger
from lintoml.errors import RoundTripError
from lintoml.model import RecordPairs
from lintoml.validation import is_array, is_record

logger = get_logger(__name__)


def parse_toml(text: str) -> dict[str, Any]:
    """Parse a TOML document into plain Python values.

    Args:
        text: TOML content.

    Returns:
        The top-level table as a plain `dict`.

    Raises:
        tomlkit.exceptions.ParseError: If ``text`` is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def to_plain(value: object) -> object:
    """Convert Records to `dict` and Arrays to `list`, recursively.

    `RecordPairs` with repeated keys keep the last value, as `dict` would.
    Use this to compare caller-side Documents with parsed output.
    """
    if is_record(value):
        items = value.pairs if isinstance(value, RecordPairs) else value.items()
        return {k: to_plain(v) for k, v in items}
    if is_array(value):
        return [to_plain(v) for v in value]
    return value


def documents_equal(left: object, right: object) -> bool:
    """Compare two plain value trees, distinguishing `bool` from `int`.

    Python treats ``True == 1``; TOML does not, so the comparison checks the
    scalar type as well as the value. Record key order is not significant.
    """
    if isinstance(left, dict) and isinstance(right, dict):
        if left.keys() != right.keys():
            return False
        return all(documents_equal(left[k], right[k]) for k in left)
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(
            documents_equal(a, b) for a, b in zip(left, right)
        )
    return type(left) is type(right) and left == right


def verify_round_trip(normalized: Mapping[str, object], text: str) -> None:
    """Check that ``text`` parses back to ``normalized``.

    Args:
        normalized: The Document as produced by validation.
        text: The TOML rendered from it.

    Raises:
        RoundTripError: If ``text`` is invalid TOML or parses to a different Document.
    """
    try:
        parsed: dict[str, Any] = parse_toml(text)
    except TomlkitParseError as exc:
        raise RoundTripError(f"rendered TOML does not parse: {exc}") from exc
    if not documents_equal(dict(normalized), parsed):
        raise RoundTripError("rendered TOML does not parse back to the input document")
    logger.debug("Round trip verified")
