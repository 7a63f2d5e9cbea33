# topmark:header:start
#
#   project      : lintoml
#   file         : __init__.py
#   file_relpath : src/lintoml/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for lintoml."""

from __future__ import annotations

from lintoml.config.loaders import find_config_table, load_config, load_toml_dict
from lintoml.config.model import SerializerConfig

__all__ = [
    "SerializerConfig",
    "find_config_table",
    "load_config",
    "load_toml_dict",
]
