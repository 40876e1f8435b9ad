"""An explicit value tree for building tagged-union values without new classes.

Each node implements :class:`~spa_json.contracts.protocol.Serialize`, so a
tree of these can be handed straight to ``to_string``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from spa_json.contracts.protocol import Serializer


@dataclass(frozen=True)
class UnitVariant:
    """``Name``"""

    name: str

    def serialize(self, serializer: Serializer) -> None:
        serializer.begin_variant_unit(self.name)


@dataclass(frozen=True)
class NewtypeVariant:
    """``{ Name = value }``"""

    name: str
    value: Any

    def serialize(self, serializer: Serializer) -> None:
        serializer.begin_variant_newtype(self.name, self.value)


@dataclass(frozen=True)
class TupleVariant:
    """A variant wrapping an ordered list of unnamed values."""

    name: str
    items: tuple[Any, ...] = ()

    def serialize(self, serializer: Serializer) -> None:
        serializer.begin_variant_tuple(self.name, len(self.items))
        for item in self.items:
            serializer.emit_element(item)
        serializer.end_variant_tuple()


@dataclass(frozen=True)
class StructVariant:
    """A variant wrapping named fields, kept in the given order."""

    name: str
    fields: tuple[tuple[str, Any], ...] = ()

    def serialize(self, serializer: Serializer) -> None:
        serializer.begin_variant_struct(self.name, len(self.fields))
        for key, value in self.fields:
            serializer.emit_field(key, value)
        serializer.end_variant_struct()


@dataclass(frozen=True)
class Record:
    """A named record; the name is not part of the output."""

    name: str
    fields: tuple[tuple[str, Any], ...] = ()

    def serialize(self, serializer: Serializer) -> None:
        serializer.begin_record(len(self.fields))
        for key, value in self.fields:
            serializer.emit_field(key, value)
        serializer.end_record()


@dataclass(frozen=True)
class UnitStruct:
    name: str

    def serialize(self, serializer: Serializer) -> None:
        serializer.emit_unit_struct(self.name)


@dataclass(frozen=True)
class NewtypeStruct:
    name: str
    value: Any = field(default=None)

    def serialize(self, serializer: Serializer) -> None:
        serializer.emit_newtype_struct(self.name, self.value)


@dataclass(frozen=True)
class Char:
    """A single character; Python has no separate char type."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"Char needs exactly one character, got {len(self.value)}")

    def serialize(self, serializer: Serializer) -> None:
        serializer.emit_char(self.value)


@dataclass(frozen=True)
class UInt:
    """An integer the producer declares unsigned."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"UInt must be non-negative, got {self.value}")

    def serialize(self, serializer: Serializer) -> None:
        serializer.emit_uint(self.value)
