# topmark:header:start
#
#   project      : lintoml
#   file         : loaders.py
#   file_relpath : src/lintoml/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discover and load lintoml configuration.

Configuration lives either in ``lintoml.toml`` (keys at the top level) or in
the ``[tool.lintoml]`` table of ``pyproject.toml``. Discovery walks from a
start directory up to the filesystem root; the first directory holding a
usable source wins, and ``lintoml.toml`` takes precedence over
``pyproject.toml`` in the same directory. A ``pyproject.toml`` without a
``[tool.lintoml]`` table is not a source.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from lintoml.config.logging import get_logger
from lintoml.config.model import SerializerConfig
from lintoml.constants import LINTOML_CONFIG_NAME, PYPROJECT_CONFIG_NAME, PYPROJECT_SECTION
from lintoml.diagnostics import DiagnosticLog
from lintoml.errors import ConfigError

if TYPE_CHECKING:
    from lintoml.config.logging import LintomlLogger
    from lintoml.config.model import TomlTable

logger: LintomlLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into a plain dict.

    Args:
        path: File to read.

    Returns:
        The parsed top-level table.

    Raises:
        ConfigError: If the file cannot be read, decoded or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(path, f"cannot read file: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(path, f"invalid TOML: {exc}") from exc
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def _pyproject_section(path: Path) -> TomlTable | None:
    node: Any = load_toml_dict(path)
    for key in PYPROJECT_SECTION:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    if not isinstance(node, dict):
        raise ConfigError(path, f"[{'.'.join(PYPROJECT_SECTION)}] must be a table")
    return node


def find_config_table(start: Path) -> tuple[Path, TomlTable] | None:
    """Locate the nearest configuration source at or above ``start``.

    Args:
        start: Directory (or file, whose parent is used) to search from.

    Returns:
        ``(path, table)`` for the first source found, or ``None``.

    Raises:
        ConfigError: If a candidate file is unreadable or malformed.
    """
    directory: Path = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        dedicated: Path = candidate_dir / LINTOML_CONFIG_NAME
        if dedicated.is_file():
            logger.debug("Using config file %s", dedicated)
            return dedicated, load_toml_dict(dedicated)
        pyproject: Path = candidate_dir / PYPROJECT_CONFIG_NAME
        if pyproject.is_file():
            section: TomlTable | None = _pyproject_section(pyproject)
            if section is not None:
                logger.debug("Using [%s] from %s", ".".join(PYPROJECT_SECTION), pyproject)
                return pyproject, section
            logger.trace("No [%s] table in %s", ".".join(PYPROJECT_SECTION), pyproject)
    return None


def load_config(start: Path | None = None) -> tuple[SerializerConfig, DiagnosticLog]:
    """Discover and load the serializer configuration.

    Args:
        start: Directory to start discovery from; defaults to the working directory.

    Returns:
        The config (defaults when no source is found) and the diagnostics
        recorded while reading it.

    Raises:
        ConfigError: If a configuration file is unreadable or malformed.
    """
    diagnostics = DiagnosticLog()
    found: tuple[Path, TomlTable] | None = find_config_table(start or Path.cwd())
    if found is None:
        logger.debug("No configuration found; using defaults")
        return SerializerConfig(), diagnostics
    path, table = found
    config: SerializerConfig = SerializerConfig.from_toml_table(
        table, diagnostics=diagnostics, where=str(path)
    )
    return config, diagnostics
