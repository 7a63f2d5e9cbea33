# topmark:header:start
#
#   project      : lintoml
#   file         : serializer.py
#   file_relpath : src/lintoml/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialize a Document to TOML.

`ResultSerializer` turns a Record into TOML text in two passes:

1. [`normalize_document`][lintoml.validation.normalize_document] validates the
   whole tree and builds a plain copy (or raises, before any output exists);
2. each Record is rendered as its scalar/array entries first, then its nested
   Records as ``[dotted.path]`` sections, keeping the relative order within
   both groups. TOML requires this: a key written after a section header
   belongs to that section.

A nested Record gets its own header when it holds at least one scalar/array
entry or is empty; a Record holding only sub-Records is implied by their
headers. Sections are separated by a blank line and the document ends with a
newline. An empty Document renders as the empty string.

The serializer holds no Document between calls; instances are safe to share.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from lintoml.config.logging import get_logger
from lintoml.config.model import SerializerConfig
from lintoml.parsing import verify_round_trip
from lintoml.rendering import render_key_value, render_table_header
from lintoml.validation import normalize_document

if TYPE_CHECKING:
    from lintoml.config.logging import LintomlLogger
    from lintoml.model import Document

logger: LintomlLogger = get_logger(__name__)


def partition_entries(
    table: Mapping[str, object],
) -> tuple[list[tuple[str, object]], list[tuple[str, Mapping[str, object]]]]:
    """Split a normalized Record into ``(key/value entries, sub-tables)``.

    Both lists keep the Record's insertion order.

    Args:
        table: A normalized Record.

    Returns:
        The scalar/array entries and the nested Records.
    """
    values: list[tuple[str, object]] = []
    tables: list[tuple[str, Mapping[str, object]]] = []
    for key, value in table.items():
        if isinstance(value, Mapping):
            tables.append((key, value))
        else:
            values.append((key, value))
    return values, tables


class ResultSerializer:
    """Stateless Document-to-TOML serializer.

    Args:
        config: Serializer settings; defaults to `SerializerConfig()`.
    """

    def __init__(self, config: SerializerConfig | None = None) -> None:
        self.config: SerializerConfig = config or SerializerConfig()

    def serialize(self, document: Document) -> str:
        """Render ``document`` as a TOML string.

        Args:
            document: The root Record.

        Returns:
            The complete TOML document.

        Raises:
            UnsupportedValueTypeError: A value is outside the supported union.
            DuplicateKeyError: A Record holds the same key twice.
            RecursionLimitExceededError: Nesting exceeds ``config.max_depth``.
            RoundTripError: ``config.verify`` is set and the output does not
                parse back to the input.
        """
        normalized: dict[str, object] = normalize_document(document, self.config)

        blocks: list[list[str]] = []
        self._render_table(normalized, (), blocks)
        text: str = "\n\n".join("\n".join(block) for block in blocks if block)
        if text:
            text += "\n"

        logger.debug(
            "Rendered %d section(s), %d character(s)", sum(1 for b in blocks if b), len(text)
        )
        if self.config.verify:
            verify_round_trip(normalized, text)
        return text

    def _render_table(
        self,
        table: Mapping[str, object],
        path: tuple[str, ...],
        blocks: list[list[str]],
    ) -> None:
        values, tables = partition_entries(table)
        if not path:
            blocks.append([render_key_value(k, v) for k, v in values])
        elif values or not tables:
            block: list[str] = [render_table_header(path)]
            block.extend(render_key_value(k, v) for k, v in values)
            blocks.append(block)
        else:
            logger.trace("Section %s implied by its sub-tables", path)

        for key, sub in tables:
            self._render_table(sub, (*path, key), blocks)


def serialize(document: Document, config: SerializerConfig | None = None) -> str:
    """Render ``document`` as a TOML string.

    Convenience wrapper around [`ResultSerializer`][lintoml.serializer.ResultSerializer].

    Args:
        document: The root Record.
        config: Serializer settings; defaults to `SerializerConfig()`.

    Returns:
        The complete TOML document.
    """
    return ResultSerializer(config).serialize(document)
