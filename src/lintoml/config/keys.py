# topmark:header:start
#
#   project      : lintoml
#   file         : keys.py
#   file_relpath : src/lintoml/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for lintoml configuration.

Keys defined here are the *external configuration API* as it appears in
``lintoml.toml`` and in ``[tool.lintoml]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by lintoml configuration."""

    KEY_MAX_DEPTH: Final[str] = "max_depth"
    KEY_DROP_NONE: Final[str] = "drop_none"
    KEY_VERIFY: Final[str] = "verify"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_MAX_DEPTH, KEY_DROP_NONE, KEY_VERIFY})
