"""spa-json: an indentation-based, comma-free alternative to JSON."""

__version__ = "0.1.0"

from spa_json.contracts import (  # noqa: E402
    MessageError,
    NestingError,
    Serialize,
    Serializer,
    SpaIOError,
    SpaJsonError,
)
from spa_json.engine import TextEmitter, describe, serialize_value, to_file, to_string  # noqa: E402
from spa_json import adapters  # noqa: E402,F401

__all__ = [
    "MessageError",
    "NestingError",
    "Serialize",
    "Serializer",
    "SpaIOError",
    "SpaJsonError",
    "TextEmitter",
    "__version__",
    "describe",
    "serialize_value",
    "to_file",
    "to_string",
]
