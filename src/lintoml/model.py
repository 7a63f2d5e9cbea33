# topmark:header:start
#
#   project      : lintoml
#   file         : model.py
#   file_relpath : src/lintoml/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data model accepted by the serializer.

Sections:
    * Scalar / Value / Record / Document: the closed value union.
    * RecordPairs: an ordered sequence of key/value pairs that stands in for a
      Record whose source may contain duplicate keys (e.g. JSON objects).
    * KeyPath: location of a value inside a Document, used in error messages.

A Record is any `Mapping` with `str` keys, or a `RecordPairs`. Arrays are
`list` or `tuple`. Everything else (floats, `None`, sets, bytes, ...) is
outside the union and rejected by
[`lintoml.validation`][lintoml.validation].
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import TypeAlias, Union

from lintoml.constants import ROOT_PATH_LABEL
from lintoml.rendering import render_key

Scalar: TypeAlias = Union[str, int, bool]
Value: TypeAlias = Union[Scalar, Sequence["Value"], Mapping[str, "Value"], "RecordPairs"]
Record: TypeAlias = Union[Mapping[str, Value], "RecordPairs"]
Document: TypeAlias = Record

KeyPath: TypeAlias = tuple[Union[str, int], ...]


@dataclass(frozen=True)
class RecordPairs:
    """Ordered key/value pairs forming one Record.

    Unlike a `dict`, this container keeps every pair it is given, so a
    duplicated key survives until validation can report it with its location.
    Use [`RecordPairs.from_pairs`][lintoml.model.RecordPairs.from_pairs] as a
    `json` ``object_pairs_hook``.
    """

    pairs: tuple[tuple[str, object], ...]

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, object]]) -> RecordPairs:
        """Build a RecordPairs from an iterable of ``(key, value)`` tuples.

        Args:
            pairs: Key/value pairs in document order.

        Returns:
            A new RecordPairs holding the pairs as given.
        """
        return cls(pairs=tuple((k, v) for k, v in pairs))

    def __iter__(self) -> Iterator[tuple[str, object]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


def format_key_path(path: KeyPath) -> str:
    """Render a key path as a dotted string with ``[i]`` array indices.

    Keys that are not bare TOML keys are quoted the way they would be in the
    output, so ``("rules", "no else", 1)`` renders as ``rules."no else"[1]``.

    Args:
        path: Keys and array indices from the document root.

    Returns:
        The formatted path, or ``<document>`` for the root.
    """
    if not path:
        return ROOT_PATH_LABEL
    out: list[str] = []
    for part in path:
        if isinstance(part, int):
            out.append(f"[{part}]")
        else:
            if out:
                out.append(".")
            out.append(render_key(part))
    return "".join(out)
