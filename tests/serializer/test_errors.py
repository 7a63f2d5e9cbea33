# topmark:header:start
#
#   project      : lintoml
#   file         : test_errors.py
#   file_relpath : tests/serializer/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for fail-fast validation: unsupported values, duplicate keys, depth and cycles."""

from __future__ import annotations

import math
from typing import Any

import pytest

from lintoml import (
    DuplicateKeyError,
    RecordPairs,
    RecursionLimitExceededError,
    SerializerConfig,
    UnsupportedValueTypeError,
    serialize,
)
from lintoml.exit_codes import ExitCode
from tests.conftest import parametrize


@parametrize(
    "bad",
    [math.nan, math.inf, -math.inf, 1.5, None, {1, 2}, b"bytes", object(), len],
)
def test_unsupported_values_are_rejected(bad: object) -> None:
    """Values outside the union fail with their key path, never a partial token."""
    with pytest.raises(UnsupportedValueTypeError) as excinfo:
        serialize({"ok": 1, "rules": {"semi": [1, bad]}})

    assert excinfo.value.path == ("rules", "semi", 1)
    assert excinfo.value.dotted_path == "rules.semi[1]"
    assert str(excinfo.value).startswith("rules.semi[1]: ")


def test_nan_is_reported_as_non_finite() -> None:
    """NaN never renders as `nan`; the message names the problem."""
    with pytest.raises(UnsupportedValueTypeError, match="non-finite float"):
        serialize({"score": math.nan})


@parametrize("bad", [2**63, -(2**63) - 1])
def test_integers_outside_64_bits_are_rejected(bad: int) -> None:
    """TOML integers are signed 64-bit."""
    with pytest.raises(UnsupportedValueTypeError, match="64-bit"):
        serialize({"n": bad})


def test_lone_surrogates_are_rejected_in_values_and_keys() -> None:
    """TOML text is made of Unicode scalar values only."""
    with pytest.raises(UnsupportedValueTypeError, match="surrogate"):
        serialize({"s": "\ud800"})
    with pytest.raises(UnsupportedValueTypeError, match="surrogate"):
        serialize({"k\udfff": 1})


def test_non_string_keys_are_rejected() -> None:
    """Record keys must be strings."""
    with pytest.raises(UnsupportedValueTypeError, match="keys must be strings"):
        serialize({"t": {1: "one"}})


@parametrize("root", [[1, 2], "text", 3, None])
def test_root_must_be_a_record(root: object) -> None:
    """Only a Record can be a Document."""
    with pytest.raises(UnsupportedValueTypeError) as excinfo:
        serialize(root)  # type: ignore[arg-type]
    assert excinfo.value.path == ()
    assert excinfo.value.dotted_path == "<document>"


def test_duplicate_keys_are_rejected() -> None:
    """Repeated keys in one Record fail instead of overwriting."""
    doc = RecordPairs.from_pairs(
        [("rules", RecordPairs.from_pairs([("semi", 1), ("indent", 2), ("semi", 2)]))]
    )
    with pytest.raises(DuplicateKeyError) as excinfo:
        serialize(doc)
    assert excinfo.value.path == ("rules", "semi")
    assert "duplicate key 'semi'" in str(excinfo.value)


def test_duplicate_key_is_reported_even_when_first_value_is_dropped() -> None:
    """A `None` dropped by `drop_none` still claims its key."""
    doc = RecordPairs.from_pairs([("a", None), ("a", 1)])
    with pytest.raises(DuplicateKeyError):
        serialize(doc, SerializerConfig(drop_none=True))


def test_same_key_at_different_levels_is_fine() -> None:
    """Uniqueness is per Record, not per Document."""
    text: str = serialize({"name": "a", "sub": {"name": "b"}})
    assert 'name = "a"' in text
    assert 'name = "b"' in text


def _nest(depth: int) -> dict[str, Any]:
    doc: dict[str, Any] = {"leaf": 1}
    for _ in range(depth - 1):
        doc = {"n": doc}
    return doc


def test_depth_limit_is_enforced() -> None:
    """Nesting beyond `max_depth` fails before anything is rendered."""
    config = SerializerConfig(max_depth=5)
    assert serialize(_nest(5), config).endswith("leaf = 1\n")

    with pytest.raises(RecursionLimitExceededError) as excinfo:
        serialize(_nest(6), config)
    assert excinfo.value.limit == 5
    assert excinfo.value.path == ("n",) * 5


def test_arrays_count_towards_depth() -> None:
    """An Array is a nesting level like a Record."""
    with pytest.raises(RecursionLimitExceededError):
        serialize({"a": [[1]]}, SerializerConfig(max_depth=2))


def test_very_deep_documents_fail_cleanly() -> None:
    """Default limits turn pathological nesting into an error, not a stack overflow."""
    with pytest.raises(RecursionLimitExceededError):
        serialize(_nest(10_000))


def test_cyclic_references_are_rejected() -> None:
    """A Record containing itself is unsupported."""
    doc: dict[str, Any] = {"a": 1}
    doc["self"] = doc
    with pytest.raises(UnsupportedValueTypeError, match="cyclic reference") as excinfo:
        serialize(doc)
    assert excinfo.value.path == ("self",)

    items: list[Any] = []
    items.append(items)
    with pytest.raises(UnsupportedValueTypeError, match="cyclic reference"):
        serialize({"items": items})


def test_shared_but_acyclic_values_are_fine() -> None:
    """The same object may appear twice as long as it does not contain itself."""
    shared: list[int] = [1, 4]
    text: str = serialize({"a": shared, "b": shared})
    assert text == "a = [ 1, 4 ]\nb = [ 1, 4 ]\n"


def test_validation_errors_map_to_data_error_exit_code() -> None:
    """All validation failures share the sysexits data-error code."""
    for exc_type in (UnsupportedValueTypeError, DuplicateKeyError, RecursionLimitExceededError):
        assert exc_type.exit_code == ExitCode.DATA_ERROR


@parametrize("bad", [0, 257, True, "8"])
def test_config_rejects_bad_max_depth(bad: Any) -> None:
    """`max_depth` must be an int within 1..256."""
    with pytest.raises((TypeError, ValueError)):
        SerializerConfig(max_depth=bad)
