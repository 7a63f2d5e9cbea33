# topmark:header:start
#
#   project      : lintoml
#   file         : formatter.py
#   file_relpath : src/lintoml/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lint-results formatter hook.

Lint tools call custom formatters as ``format(results, context)``: the
results array comes first, the context object is optional. `format_results`
honours that calling convention and ignores the context.

The Document it serializes holds the run-wide counters first, summed over
every result, then the results themselves as an inline array:

```toml
errorCount = 3
fatalErrorCount = 0
warningCount = 1
fixableErrorCount = 1
fixableWarningCount = 0
results = [
    { filePath = "/src/app.js", messages = [ ... ], errorCount = 3, ... },
]
```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from lintoml.config.logging import get_logger
from lintoml.constants import RESULT_COUNTERS, RESULTS_KEY
from lintoml.errors import UnsupportedValueTypeError
from lintoml.model import RecordPairs
from lintoml.serializer import ResultSerializer
from lintoml.validation import is_array

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lintoml.config.logging import LintomlLogger
    from lintoml.config.model import SerializerConfig

logger: LintomlLogger = get_logger(__name__)


def _counter(result: object, key: str) -> int:
    """Return an integer counter from one result, or 0 when absent or malformed.

    Malformed counters are still serialized as part of ``results``, where
    validation reports them with their full key path.
    """
    value: object = None
    if isinstance(result, RecordPairs):
        for k, v in result.pairs:
            if k == key:
                value = v
    elif isinstance(result, Mapping):
        value = result.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def summarize_results(results: Sequence[object]) -> dict[str, object]:
    """Build the Document for a results array.

    Args:
        results: Lint results, one Record per linted file.

    Returns:
        A Document with the summed counters followed by ``results``.

    Raises:
        UnsupportedValueTypeError: If ``results`` is not an array.
    """
    if not is_array(results):
        raise UnsupportedValueTypeError(
            (), f"results must be an array, got {type(results).__name__}"
        )
    document: dict[str, object] = {
        key: sum(_counter(r, key) for r in results) for key in RESULT_COUNTERS
    }
    document[RESULTS_KEY] = list(results)
    return document


def format_results(
    results: Sequence[object],
    context: object | None = None,
    *,
    config: SerializerConfig | None = None,
) -> str:
    """Format lint results as TOML.

    Args:
        results: Lint results, one Record per linted file.
        context: Formatter context supplied by the lint tool; ignored.
        config: Serializer settings; defaults to `SerializerConfig()`.

    Returns:
        The TOML document.
    """
    if context is not None:
        logger.trace("Ignoring formatter context of type %s", type(context).__name__)
    document: dict[str, object] = summarize_results(results)
    logger.debug("Formatting %d result(s)", len(results))
    return ResultSerializer(config).serialize(document)
