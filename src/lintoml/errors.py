# topmark:header:start
#
#   project      : lintoml
#   file         : errors.py
#   file_relpath : src/lintoml/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by lintoml.

Usage:
    Validation errors are raised before anything is rendered, so a caller
    receives either a complete TOML document or one of these exceptions,
    never both. Each class carries the exit code used by ``python -m lintoml``.

Hierarchy:
    * LintomlError
        * ValidationError (carries the offending key path)
            * UnsupportedValueTypeError
            * DuplicateKeyError
            * RecursionLimitExceededError
        * RoundTripError
        * ConfigError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lintoml.exit_codes import ExitCode
from lintoml.model import format_key_path

if TYPE_CHECKING:
    from pathlib import Path

    from lintoml.model import KeyPath


class LintomlError(Exception):
    """Base class for all lintoml errors."""

    exit_code: ExitCode = ExitCode.UNEXPECTED_ERROR


class ValidationError(LintomlError):
    """A Document does not conform to the supported value union.

    Attributes:
        path: Keys and array indices leading to the offending value.
    """

    exit_code = ExitCode.DATA_ERROR

    def __init__(self, path: KeyPath, message: str) -> None:
        self.path: KeyPath = path
        super().__init__(f"{format_key_path(path)}: {message}")

    @property
    def dotted_path(self) -> str:
        """Return the key path formatted for display."""
        return format_key_path(self.path)


class UnsupportedValueTypeError(ValidationError):
    """Value outside {String, Integer, Boolean, Array, Record}, or unrepresentable in TOML."""


class DuplicateKeyError(ValidationError):
    """A Record holds the same key twice at one nesting level."""

    def __init__(self, path: KeyPath) -> None:
        super().__init__(path, f"duplicate key {path[-1]!r}")


class RecursionLimitExceededError(ValidationError):
    """Nesting is deeper than the configured ``max_depth``."""

    def __init__(self, path: KeyPath, limit: int) -> None:
        self.limit: int = limit
        super().__init__(path, f"nesting depth exceeds the limit of {limit}")


class RoundTripError(LintomlError):
    """Rendered TOML does not parse back to the input Document."""

    exit_code = ExitCode.INTERNAL_ERROR


class ConfigError(LintomlError):
    """Configuration file is unreadable or malformed."""

    exit_code = ExitCode.CONFIG_ERROR

    def __init__(self, path: Path, reason: str) -> None:
        self.path: Path = path
        super().__init__(f"{path}: {reason}")
