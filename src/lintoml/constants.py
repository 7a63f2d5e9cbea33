# topmark:header:start
#
#   project      : lintoml
#   file         : constants.py
#   file_relpath : src/lintoml/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""lintoml Constants."""

from __future__ import annotations

from typing import Final

# Config discovery
LINTOML_CONFIG_NAME: Final[str] = "lintoml.toml"
PYPROJECT_CONFIG_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, ...]] = ("tool", "lintoml")

# Environment variable consulted by `setup_logging()`
LOG_LEVEL_ENV_VAR: Final[str] = "LINTOML_LOG_LEVEL"

# Nesting bounds (containers counted from the root Record, which is depth 1)
DEFAULT_MAX_DEPTH: Final[int] = 64
MAX_DEPTH_CEILING: Final[int] = 256

# TOML integers are signed 64-bit
TOML_INT_MIN: Final[int] = -(2**63)
TOML_INT_MAX: Final[int] = 2**63 - 1

# Aggregate counters carried by every lint result, in output order
RESULT_COUNTERS: Final[tuple[str, ...]] = (
    "errorCount",
    "fatalErrorCount",
    "warningCount",
    "fixableErrorCount",
    "fixableWarningCount",
)
RESULTS_KEY: Final[str] = "results"

ROOT_PATH_LABEL: Final[str] = "<document>"
