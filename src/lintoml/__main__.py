# topmark:header:start
#
#   project      : lintoml
#   file         : __main__.py
#   file_relpath : src/lintoml/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line formatter hook: ``python -m lintoml``.

Reads lint results as JSON on stdin (e.g. ``eslint --format json``), writes
the TOML rendering to stdout. There are no arguments; settings come from
``lintoml.toml`` or ``[tool.lintoml]`` discovered from the working directory,
and logging from ``LINTOML_LOG_LEVEL``.

On failure nothing is written to stdout; the error goes to stderr and the exit
status is one of [`ExitCode`][lintoml.exit_codes.ExitCode].

Examples:
    Convert a lint run to TOML::

        eslint --format json src | python -m lintoml > lint-results.toml
"""

from __future__ import annotations

import json
import sys
from typing import IO, TYPE_CHECKING

from yachalk import chalk

from lintoml.config.loaders import load_config
from lintoml.config.logging import get_logger, setup_logging
from lintoml.errors import LintomlError
from lintoml.exit_codes import ExitCode
from lintoml.formatter import format_results
from lintoml.model import RecordPairs

if TYPE_CHECKING:
    from pathlib import Path

    from lintoml.config.logging import LintomlLogger

logger: LintomlLogger = get_logger(__name__)


def _report(stderr: IO[str], message: str) -> None:
    stderr.write(chalk.red_bright(f"lintoml: {message}") + "\n")


def main(
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
    *,
    cwd: Path | None = None,
) -> int:
    """Run the formatter hook once.

    Args:
        stdin: Source of the results JSON; defaults to `sys.stdin`.
        stdout: Destination of the TOML; defaults to `sys.stdout`.
        stderr: Destination of diagnostics and errors; defaults to `sys.stderr`.
        cwd: Directory to discover configuration from; defaults to the working directory.

    Returns:
        The process exit code.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    setup_logging()

    try:
        return _run(stdin, stdout, stderr, cwd)
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        _report(stderr, f"unexpected error: {type(exc).__name__}: {exc}")
        return ExitCode.UNEXPECTED_ERROR


def _run(stdin: IO[str], stdout: IO[str], stderr: IO[str], cwd: Path | None) -> int:
    try:
        config, diagnostics = load_config(cwd)
        for diagnostic in diagnostics:
            stderr.write(diagnostic.render(color=True) + "\n")

        try:
            raw: str = stdin.read()
        except OSError as exc:
            _report(stderr, f"cannot read stdin: {exc}")
            return ExitCode.IO_ERROR
        except UnicodeDecodeError as exc:
            _report(stderr, f"stdin is not valid UTF-8: {exc}")
            return ExitCode.DATA_ERROR

        try:
            results = json.loads(raw, object_pairs_hook=RecordPairs.from_pairs)
        except json.JSONDecodeError as exc:
            _report(stderr, f"invalid JSON input: {exc}")
            return ExitCode.DATA_ERROR
        except RecursionError:
            _report(stderr, "invalid JSON input: nesting is too deep to decode")
            return ExitCode.DATA_ERROR

        text: str = format_results(results, config=config)
    except LintomlError as exc:
        _report(stderr, str(exc))
        return exc.exit_code

    try:
        stdout.write(text)
        stdout.flush()
    except OSError as exc:
        _report(stderr, f"cannot write output: {exc}")
        return ExitCode.IO_ERROR
    return ExitCode.SUCCESS


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
