"""The data-model protocol: how a producer describes a value to a serializer.

A producer walks its own value tree and, for every node, issues the matching
call on a :class:`Serializer`. Compounds are bracketed by ``begin_*``/``end_*``
pairs and their children are passed as plain Python values, which the
serializer describes in turn through ``serialize_value``.

Call shapes:

- primitive: ``emit_primitive(kind, value)`` or one of the typed shorthands
- sequence: ``begin_sequence`` / ``emit_element``* / ``end_sequence``
- map: ``begin_map`` / (``emit_key``, ``emit_value``)* / ``end_map``
- record: ``begin_record`` / ``emit_field``* / ``end_record``
- unit variant: ``begin_variant_unit`` (self-closing)
- newtype variant: ``begin_variant_newtype`` (carries its value, self-closing)
- tuple variant: ``begin_variant_tuple`` / ``emit_element``* / ``end_variant_tuple``
- struct variant: ``begin_variant_struct`` / ``emit_field``* / ``end_variant_struct``
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class PrimitiveKind(Enum):
    """Leaf value kinds."""

    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    CHAR = "char"
    STR = "str"
    BYTES = "bytes"
    NULL = "null"


class Compound(Enum):
    """Kinds of compound that can be open on a serializer."""

    SEQUENCE = "sequence"
    MAP = "map"
    RECORD = "record"
    TUPLE_VARIANT = "tuple_variant"
    STRUCT_VARIANT = "struct_variant"


class Serializer(Protocol):
    """Receiver of protocol calls."""

    def emit_primitive(self, kind: PrimitiveKind, value: Any) -> None: ...

    def emit_bool(self, value: bool) -> None: ...

    def emit_int(self, value: int) -> None: ...

    def emit_uint(self, value: int) -> None: ...

    def emit_float(self, value: float) -> None: ...

    def emit_char(self, value: str) -> None: ...

    def emit_str(self, value: str) -> None: ...

    def emit_bytes(self, value: bytes) -> None: ...

    def emit_null(self) -> None: ...

    def emit_unit_struct(self, name: str) -> None: ...

    def emit_newtype_struct(self, name: str, value: Any) -> None: ...

    def begin_sequence(self, len_hint: int | None = None) -> None: ...

    def emit_element(self, value: Any) -> None: ...

    def end_sequence(self) -> None: ...

    def begin_map(self, len_hint: int | None = None) -> None: ...

    def emit_key(self, value: Any) -> None: ...

    def emit_value(self, value: Any) -> None: ...

    def end_map(self) -> None: ...

    def begin_record(self, field_count_hint: int) -> None: ...

    def emit_field(self, name: str, value: Any) -> None: ...

    def end_record(self) -> None: ...

    def begin_variant_unit(self, variant_name: str) -> None: ...

    def begin_variant_newtype(self, variant_name: str, value: Any) -> None: ...

    def begin_variant_tuple(self, variant_name: str, len_hint: int) -> None: ...

    def end_variant_tuple(self) -> None: ...

    def begin_variant_struct(self, variant_name: str, field_count_hint: int) -> None: ...

    def end_variant_struct(self) -> None: ...


@runtime_checkable
class Serialize(Protocol):
    """Capability of a value type that can describe itself to a serializer."""

    def serialize(self, serializer: Serializer) -> None: ...
