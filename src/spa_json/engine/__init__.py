"""Serialization engine: text emitter, escaping, and value producers."""

from spa_json.engine.emitter import TextEmitter, to_file, to_string
from spa_json.engine.escape import escape_string
from spa_json.engine.producers import describe, serialize_value

__all__ = [
    "TextEmitter",
    "describe",
    "escape_string",
    "serialize_value",
    "to_file",
    "to_string",
]
