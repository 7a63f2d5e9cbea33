# topmark:header:start
#
#   project      : lintoml
#   file         : model.py
#   file_relpath : src/lintoml/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer configuration.

`SerializerConfig` is an immutable snapshot passed to
[`ResultSerializer`][lintoml.serializer.ResultSerializer]. Build it directly,
or from a parsed TOML table with
[`SerializerConfig.from_toml_table`][lintoml.config.model.SerializerConfig.from_toml_table],
which records user mistakes as warnings instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from lintoml.config.keys import Toml
from lintoml.config.logging import get_logger
from lintoml.constants import DEFAULT_MAX_DEPTH, MAX_DEPTH_CEILING

if TYPE_CHECKING:
    from lintoml.config.logging import LintomlLogger
    from lintoml.diagnostics import DiagnosticLog

logger: LintomlLogger = get_logger(__name__)

TomlTable = dict[str, Any]


@dataclass(frozen=True)
class SerializerConfig:
    """Immutable serializer settings.

    Attributes:
        max_depth: Maximum container nesting, counting the root Record as 1.
        drop_none: Omit `None` entries instead of rejecting them. TOML has no null.
        verify: Re-parse the rendered TOML and compare it to the input.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    drop_none: bool = False
    verify: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise TypeError(f"max_depth must be an int, got {type(self.max_depth).__name__}")
        if not 1 <= self.max_depth <= MAX_DEPTH_CEILING:
            raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_CEILING}, got {self.max_depth}")

    @classmethod
    def from_toml_table(
        cls,
        table: TomlTable,
        *,
        diagnostics: DiagnosticLog,
        where: str = "config",
    ) -> SerializerConfig:
        """Build a config from a parsed TOML table.

        Unknown keys, wrongly typed values and an out-of-range ``max_depth`` are
        recorded as warnings in ``diagnostics``; the default is kept for those keys.

        Args:
            table: The ``[tool.lintoml]`` table or the top level of ``lintoml.toml``.
            diagnostics: Log receiving one warning per rejected entry.
            where: Source label used in warning messages.

        Returns:
            The resulting config.
        """
        for key in table:
            if key not in Toml.ALL_KEYS:
                _warn(diagnostics, f"{where}: unknown key {key!r} ignored")

        max_depth: int = DEFAULT_MAX_DEPTH
        value: Any = table.get(Toml.KEY_MAX_DEPTH)
        if value is not None:
            if isinstance(value, bool) or not isinstance(value, int):
                _warn(diagnostics, f"{where}: {Toml.KEY_MAX_DEPTH} must be an integer, got {value!r}")
            elif not 1 <= value <= MAX_DEPTH_CEILING:
                _warn(
                    diagnostics,
                    f"{where}: {Toml.KEY_MAX_DEPTH} must be between 1 and {MAX_DEPTH_CEILING}, "
                    f"got {value}",
                )
            else:
                max_depth = int(value)

        return cls(
            max_depth=max_depth,
            drop_none=_get_bool_checked(table, Toml.KEY_DROP_NONE, diagnostics=diagnostics, where=where),
            verify=_get_bool_checked(table, Toml.KEY_VERIFY, diagnostics=diagnostics, where=where),
        )


def _warn(diagnostics: DiagnosticLog, message: str) -> None:
    diagnostics.add_warning(message)
    logger.warning(message)


def _get_bool_checked(
    table: TomlTable,
    key: str,
    *,
    diagnostics: DiagnosticLog,
    where: str,
    default: bool = False,
) -> bool:
    value: Any = table.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    _warn(diagnostics, f"{where}: {key} must be a boolean, got {value!r}")
    return default
