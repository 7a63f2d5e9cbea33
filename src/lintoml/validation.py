# topmark:header:start
#
#   project      : lintoml
#   file         : validation.py
#   file_relpath : src/lintoml/validation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural validation and normalization of Documents.

`normalize_document` walks the whole Document once and returns a plain copy
made only of `dict`, `list`, `str`, `int` and `bool`, or raises a
[`ValidationError`][lintoml.errors.ValidationError] naming the offending key
path. Rendering works exclusively on that copy, so a failure never leaves
partial output behind and the caller's objects are never mutated.

Checks, in the order they apply to a value:
    * `None` is dropped when ``drop_none`` is set, otherwise rejected;
    * containers already on the current path are cyclic references;
    * containers beyond ``max_depth`` exceed the recursion limit;
    * Record keys must be `str` and unique;
    * integers must fit TOML's signed 64-bit range;
    * strings must not contain lone surrogates (TOML text is Unicode scalars);
    * anything else (floats, sets, bytes, ...) is unsupported.

Domain meaning is not checked: an ``errorCount`` is just an integer here.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, Final, TypeGuard, cast

from lintoml.config.logging import TRACE_LEVEL, get_logger
from lintoml.config.model import SerializerConfig
from lintoml.constants import TOML_INT_MAX, TOML_INT_MIN
from lintoml.errors import (
    DuplicateKeyError,
    RecursionLimitExceededError,
    UnsupportedValueTypeError,
)
from lintoml.model import RecordPairs, format_key_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lintoml.config.logging import LintomlLogger
    from lintoml.model import KeyPath

logger: LintomlLogger = get_logger(__name__)

# Marks a `None` that `drop_none` asked us to omit.
_DROPPED: Final[object] = object()


def is_record(obj: object) -> TypeGuard[Mapping[object, object] | RecordPairs]:
    """Return True if ``obj`` is shaped like a Record (Mapping or RecordPairs)."""
    return isinstance(obj, (Mapping, RecordPairs))


def is_array(obj: object) -> TypeGuard[list[object] | tuple[object, ...]]:
    """Return True if ``obj`` is shaped like an Array (list or tuple)."""
    return isinstance(obj, (list, tuple))


class _Normalizer:
    """Single-use walker holding the state of one normalization pass."""

    def __init__(self, config: SerializerConfig) -> None:
        self.config: SerializerConfig = config
        # ids of the containers on the current path, for cycle detection
        self._active: set[int] = set()

    def record(self, value: object, path: KeyPath, depth: int) -> dict[str, object]:
        entries: Iterable[tuple[object, object]]
        if isinstance(value, RecordPairs):
            entries = value.pairs
        else:
            entries = cast("Mapping[object, object]", value).items()

        self._enter(value, path, depth)
        out: dict[str, object] = {}
        for key, item in entries:
            if not isinstance(key, str):
                raise UnsupportedValueTypeError(
                    (*path, repr(key)),
                    f"record keys must be strings, got {type(key).__name__}",
                )
            child_path: KeyPath = (*path, key)
            _check_string(key, child_path)
            if key in out:
                raise DuplicateKeyError(child_path)
            normalized: object = self.value(item, child_path, depth)
            if normalized is _DROPPED:
                # Still reserve the key so a later duplicate is reported
                out[key] = _DROPPED
                continue
            out[key] = normalized
        self._active.discard(id(value))
        return {k: v for k, v in out.items() if v is not _DROPPED}

    def array(self, value: list[object] | tuple[object, ...], path: KeyPath, depth: int) -> list[object]:
        self._enter(value, path, depth)
        out: list[object] = []
        for index, item in enumerate(value):
            normalized: object = self.value(item, (*path, index), depth)
            if normalized is not _DROPPED:
                out.append(normalized)
        self._active.discard(id(value))
        return out

    def value(self, value: object, path: KeyPath, depth: int) -> object:
        if value is None:
            if self.config.drop_none:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Dropping `None` at %s", format_key_path(path))
                return _DROPPED
            raise UnsupportedValueTypeError(path, "null values cannot be represented in TOML")
        if isinstance(value, bool):
            return bool(value)
        if isinstance(value, int):
            if not TOML_INT_MIN <= value <= TOML_INT_MAX:
                raise UnsupportedValueTypeError(
                    path, f"integer {value} is outside the signed 64-bit range"
                )
            return int(value)
        if isinstance(value, str):
            _check_string(value, path)
            return str(value)
        if isinstance(value, float):
            kind: str = "non-finite float" if not math.isfinite(value) else "float"
            raise UnsupportedValueTypeError(path, f"{kind} value {value!r} is not supported")
        if is_record(value):
            return self.record(value, path, depth + 1)
        if is_array(value):
            return self.array(value, path, depth + 1)
        raise UnsupportedValueTypeError(
            path, f"values of type {type(value).__name__} are not supported"
        )

    def _enter(self, container: object, path: KeyPath, depth: int) -> None:
        if id(container) in self._active:
            raise UnsupportedValueTypeError(path, "cyclic reference")
        if depth > self.config.max_depth:
            raise RecursionLimitExceededError(path, self.config.max_depth)
        self._active.add(id(container))
        if logger.isEnabledFor(TRACE_LEVEL):
            logger.trace("Entering %s (depth %d)", format_key_path(path), depth)


def _check_string(value: str, path: KeyPath) -> None:
    for ch in value:
        if 0xD800 <= ord(ch) <= 0xDFFF:
            raise UnsupportedValueTypeError(
                path, f"string contains a lone surrogate U+{ord(ch):04X}"
            )


def normalize_document(document: object, config: SerializerConfig | None = None) -> dict[str, object]:
    """Validate a Document and return a plain, ordered copy of it.

    Args:
        document: The root Record (a `Mapping` with `str` keys, or `RecordPairs`).
        config: Serializer settings; defaults to `SerializerConfig()`.

    Returns:
        A new `dict` tree holding only `dict`, `list`, `str`, `int` and `bool`,
        with insertion order preserved.

    Raises:
        UnsupportedValueTypeError: A value (or the root) is outside the supported union.
        DuplicateKeyError: A Record holds the same key twice.
        RecursionLimitExceededError: Nesting exceeds ``config.max_depth``.
    """
    cfg: SerializerConfig = config or SerializerConfig()
    if not is_record(document):
        raise UnsupportedValueTypeError(
            (), f"the document must be a record, got {type(document).__name__}"
        )
    return _Normalizer(cfg).record(document, (), 1)
