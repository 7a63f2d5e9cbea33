# topmark:header:start
#
#   project      : lintoml
#   file         : exit_codes.py
#   file_relpath : src/lintoml/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ``python -m lintoml`` formatter hook.

The values follow the BSD `sysexits` convention so that the invoking lint tool
(or a CI script) can tell bad input apart from a broken configuration or an
internal failure.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the lintoml formatter hook.

    Attributes:
        SUCCESS: TOML was written to stdout.
        DATA_ERROR: Input could not be serialized (invalid JSON, unsupported
            value, duplicate key, nesting too deep). Mirrors BSD ``EX_DATAERR (65)``.
        INTERNAL_ERROR: Rendered output failed round-trip verification. Mirrors
            BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: Reading stdin or writing stdout failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration file unreadable or malformed. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0

    # sysexits-aligned values
    DATA_ERROR = 65  # EX_DATAERR
    INTERNAL_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
