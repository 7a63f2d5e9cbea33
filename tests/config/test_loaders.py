# topmark:header:start
#
#   project      : lintoml
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for configuration discovery and loading (`lintoml.config`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lintoml import ConfigError, SerializerConfig, load_config
from lintoml.config import find_config_table
from lintoml.constants import DEFAULT_MAX_DEPTH
from lintoml.diagnostics import DiagnosticLevel, DiagnosticLog
from lintoml.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def test_lintoml_toml_is_loaded(tmp_path: Path) -> None:
    """Top-level keys of lintoml.toml configure the serializer."""
    (tmp_path / "lintoml.toml").write_text(
        "max_depth = 8\ndrop_none = true\nverify = true\n", encoding="utf-8"
    )
    config, diagnostics = load_config(tmp_path)

    assert config == SerializerConfig(max_depth=8, drop_none=True, verify=True)
    assert len(diagnostics) == 0


def test_pyproject_section_is_loaded(tmp_path: Path) -> None:
    """[tool.lintoml] in pyproject.toml is a config source."""
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.lintoml]\ndrop_none = true\n', encoding="utf-8"
    )
    config, _ = load_config(tmp_path)
    assert config.drop_none is True
    assert config.max_depth == DEFAULT_MAX_DEPTH


def test_lintoml_toml_wins_over_pyproject(tmp_path: Path) -> None:
    """In one directory, the dedicated file takes precedence."""
    (tmp_path / "pyproject.toml").write_text("[tool.lintoml]\nmax_depth = 3\n", encoding="utf-8")
    (tmp_path / "lintoml.toml").write_text("max_depth = 9\n", encoding="utf-8")

    config, _ = load_config(tmp_path)
    assert config.max_depth == 9


def test_discovery_walks_up_and_skips_unrelated_pyproject(tmp_path: Path) -> None:
    """A pyproject.toml without [tool.lintoml] does not stop discovery."""
    (tmp_path / "lintoml.toml").write_text("verify = true\n", encoding="utf-8")
    nested: Path = tmp_path / "pkg" / "src"
    nested.mkdir(parents=True)
    (tmp_path / "pkg" / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    found = find_config_table(nested)
    assert found is not None
    path, table = found
    assert path == tmp_path / "lintoml.toml"
    assert table == {"verify": True}


def test_no_config_means_defaults(isolation: Path) -> None:
    """An empty config file yields the defaults without diagnostics."""
    config, diagnostics = load_config()
    assert config == SerializerConfig()
    assert len(diagnostics) == 0


def test_bad_entries_become_warnings(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys and wrong types keep defaults and are reported."""
    caplog.set_level("WARNING")
    (tmp_path / "lintoml.toml").write_text(
        'max_depth = "deep"\ndrop_none = 1\ncolour = "red"\n', encoding="utf-8"
    )
    config, diagnostics = load_config(tmp_path)

    assert config == SerializerConfig()
    messages: list[str] = [d.message for d in diagnostics]
    assert len(messages) == 3
    assert any("unknown key 'colour'" in m for m in messages)
    assert any("max_depth must be an integer" in m for m in messages)
    assert any("drop_none must be a boolean" in m for m in messages)
    assert all(d.level is DiagnosticLevel.WARNING for d in diagnostics)
    assert "unknown key 'colour'" in caplog.text


def test_out_of_range_max_depth_is_a_warning() -> None:
    """`from_toml_table` never raises for user values."""
    diagnostics = DiagnosticLog()
    config: SerializerConfig = SerializerConfig.from_toml_table(
        {"max_depth": 0}, diagnostics=diagnostics
    )
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert len(diagnostics) == 1
    assert all(d.level is DiagnosticLevel.WARNING for d in diagnostics)


def test_malformed_toml_raises_config_error(tmp_path: Path) -> None:
    """Unparseable files are hard errors with the config exit code."""
    (tmp_path / "lintoml.toml").write_text("max_depth = = 3\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)
    assert excinfo.value.path == tmp_path / "lintoml.toml"
    assert excinfo.value.exit_code == ExitCode.CONFIG_ERROR


def test_tool_lintoml_must_be_a_table(tmp_path: Path) -> None:
    """A scalar [tool] lintoml entry is malformed."""
    (tmp_path / "pyproject.toml").write_text("[tool]\nlintoml = 3\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a table"):
        load_config(tmp_path)
