# topmark:header:start
#
#   project      : lintoml
#   file         : __init__.py
#   file_relpath : src/lintoml/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""lintoml package.

lintoml renders lint results, or any other hierarchical diagnostic record,
as TOML. The rendering rules (section ordering, inline arrays, escaping,
type mapping) are owned here rather than delegated to a generic converter,
and every output parses back to the input.

```python
from lintoml import serialize

serialize({"extends": "eslint:recommended", "rules": {"indent": [1, 4]}})
# 'extends = "eslint:recommended"\\n\\n[rules]\\nindent = [ 1, 4 ]\\n'
```
"""

from __future__ import annotations

from lintoml.config import SerializerConfig, load_config
from lintoml.errors import (
    ConfigError,
    DuplicateKeyError,
    LintomlError,
    RecursionLimitExceededError,
    RoundTripError,
    UnsupportedValueTypeError,
    ValidationError,
)
from lintoml.formatter import format_results
from lintoml.model import RecordPairs
from lintoml.parsing import parse_toml
from lintoml.serializer import ResultSerializer, serialize

__all__ = [
    "ConfigError",
    "DuplicateKeyError",
    "LintomlError",
    "RecordPairs",
    "RecursionLimitExceededError",
    "ResultSerializer",
    "RoundTripError",
    "SerializerConfig",
    "UnsupportedValueTypeError",
    "ValidationError",
    "format_results",
    "load_config",
    "parse_toml",
    "serialize",
]
