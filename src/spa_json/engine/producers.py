"""Protocol descriptions for plain Python values.

``serialize_value`` is what every serializer calls for a nested value. Types
that implement :class:`~spa_json.contracts.protocol.Serialize` describe
themselves (the check looks for a callable ``serialize`` on the
type, so instance attributes or fields named ``serialize`` do not count);
enum members become unit variants; everything else goes through
the :func:`describe` registry. Add a foreign type with::

    @describe.register
    def _(value: Decimal, serializer: Serializer) -> None:
        serializer.emit_str(str(value))
"""

from __future__ import annotations

import dataclasses
import datetime
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from functools import singledispatch
from typing import Any

from spa_json.contracts.common import MessageError
from spa_json.contracts.protocol import Serializer


def serialize_value(value: Any, serializer: Serializer) -> None:
    """Describe ``value`` to ``serializer`` through protocol calls."""
    if callable(getattr(type(value), "serialize", None)):
        value.serialize(serializer)
    elif isinstance(value, Enum):
        serializer.begin_variant_unit(value.name)
    else:
        describe(value, serializer)


@singledispatch
def describe(value: Any, serializer: Serializer) -> None:
    """Fallback for unregistered types: dataclasses become records."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = dataclasses.fields(value)
        serializer.begin_record(len(fields))
        for f in fields:
            serializer.emit_field(f.name, getattr(value, f.name))
        serializer.end_record()
        return
    raise MessageError.custom(f"cannot serialize value of type {type(value).__name__}")


@describe.register(type(None))
def _describe_none(value: None, serializer: Serializer) -> None:
    serializer.emit_null()


@describe.register(bool)
def _describe_bool(value: bool, serializer: Serializer) -> None:
    serializer.emit_bool(value)


@describe.register(int)
def _describe_int(value: int, serializer: Serializer) -> None:
    serializer.emit_int(value)


@describe.register(float)
def _describe_float(value: float, serializer: Serializer) -> None:
    serializer.emit_float(value)


@describe.register(str)
def _describe_str(value: str, serializer: Serializer) -> None:
    serializer.emit_str(value)


@describe.register(bytes)
@describe.register(bytearray)
@describe.register(memoryview)
def _describe_bytes(value: bytes | bytearray | memoryview, serializer: Serializer) -> None:
    serializer.emit_bytes(bytes(value))


@describe.register(datetime.date)
@describe.register(datetime.time)
def _describe_temporal(value: datetime.date | datetime.time, serializer: Serializer) -> None:
    serializer.emit_str(value.isoformat())


@describe.register(Sequence)
def _describe_sequence(value: Sequence[Any], serializer: Serializer) -> None:
    serializer.begin_sequence(len(value))
    for item in value:
        serializer.emit_element(item)
    serializer.end_sequence()


@describe.register(Mapping)
def _describe_mapping(value: Mapping[Any, Any], serializer: Serializer) -> None:
    serializer.begin_map(len(value))
    for key, item in value.items():
        serializer.emit_key(key)
        serializer.emit_value(item)
    serializer.end_map()


@describe.register(Set)
def _describe_set(value: Set[Any], serializer: Serializer) -> None:
    """Sets have no order of their own; emit them sorted so output is stable."""
    try:
        items = sorted(value)
    except TypeError:
        items = sorted(value, key=repr)
    _describe_sequence(items, serializer)
