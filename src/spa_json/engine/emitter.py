"""Text emitter: turns protocol calls into spa-json text.

Layout rules:

- sequences are ``[`` + one indented child per line + ``]``
- maps and records are ``{`` + one ``key = value`` line per entry + ``}``
- a unit variant is its bare name; a newtype variant is ``{ Name = value }``
- tuple and struct variants wrap their body in ``{ Name = ... }`` blocks
- strings are escaped but never quoted

Children are indented two spaces per nesting level. The closing delimiter of
a compound carries no trailing newline; the enclosing line adds it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from spa_json.contracts.common import NestingError
from spa_json.contracts.protocol import Compound, PrimitiveKind
from spa_json.engine.escape import escape_string
from spa_json.engine.producers import serialize_value
from spa_json.io.fileops import write_text

INDENT_WIDTH = 2


class TextEmitter:
    """Stateful :class:`~spa_json.contracts.protocol.Serializer` writing spa-json.

    One instance serves one top-level call. Nested values are described by
    :func:`serialize_value`, so the emitter never needs to know the concrete
    producer types.
    """

    def __init__(self) -> None:
        self._output: list[str] = []
        self._indent = 0
        self._open: list[Compound] = []
        # one flag per open map: True while a key waits for its value
        self._pending_key: list[bool] = []

    @property
    def indent_level(self) -> int:
        """Current number of leading spaces for child lines."""
        return self._indent

    @property
    def depth(self) -> int:
        """Number of compounds currently open."""
        return len(self._open)

    def finish(self) -> str:
        """Return the accumulated text. All compounds must be closed."""
        if self._open:
            names = ", ".join(kind.value for kind in self._open)
            raise NestingError(f"Unclosed compounds at end of value: {names}")
        return "".join(self._output)

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------
    def indent(self) -> None:
        self._indent += INDENT_WIDTH

    def dedent(self) -> None:
        self._indent = max(0, self._indent - INDENT_WIDTH)

    def write_indent(self) -> None:
        self._output.append(" " * self._indent)

    def _write(self, text: str) -> None:
        self._output.append(text)

    def _open_compound(self, kind: Compound) -> None:
        self._open.append(kind)

    def _close_compound(self, kind: Compound) -> None:
        if not self._open:
            raise NestingError(f"end of {kind.value} without a matching begin")
        current = self._open[-1]
        if current is not kind:
            raise NestingError(f"end of {kind.value} while a {current.value} is open")
        self._open.pop()

    def _require(self, operation: str, *kinds: Compound) -> None:
        if not self._open or self._open[-1] not in kinds:
            current = self._open[-1].value if self._open else "top level"
            raise NestingError(f"{operation} is not valid inside {current}")

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------
    def emit_primitive(self, kind: PrimitiveKind, value: Any = None) -> None:
        if kind is PrimitiveKind.NULL:
            self.emit_null()
            return
        handlers = {
            PrimitiveKind.BOOL: self.emit_bool,
            PrimitiveKind.INT: self.emit_int,
            PrimitiveKind.UINT: self.emit_uint,
            PrimitiveKind.FLOAT: self.emit_float,
            PrimitiveKind.CHAR: self.emit_char,
            PrimitiveKind.STR: self.emit_str,
            PrimitiveKind.BYTES: self.emit_bytes,
        }
        handlers[kind](value)

    def emit_bool(self, value: bool) -> None:
        self._write("true" if value else "false")

    def emit_int(self, value: int) -> None:
        self._write(str(int(value)))

    def emit_uint(self, value: int) -> None:
        self.emit_int(value)

    def emit_float(self, value: float) -> None:
        self._write(repr(float(value)))

    def emit_char(self, value: str) -> None:
        self.emit_str(value)

    def emit_str(self, value: str) -> None:
        self._write(escape_string(value))

    def emit_bytes(self, value: bytes) -> None:
        data = bytes(value)
        self.begin_sequence(len(data))
        for byte in data:
            self.write_indent()
            self.emit_uint(byte)
            self._write("\n")
        self.end_sequence()

    def emit_null(self) -> None:
        self._write("null")

    def emit_unit_struct(self, name: str) -> None:
        self.emit_null()

    def emit_newtype_struct(self, name: str, value: Any) -> None:
        serialize_value(value, self)

    # ------------------------------------------------------------------
    # Sequences
    # ------------------------------------------------------------------
    def begin_sequence(self, len_hint: int | None = None) -> None:
        self._write("[\n")
        self.indent()
        self._open_compound(Compound.SEQUENCE)

    def emit_element(self, value: Any) -> None:
        self._require("emit_element", Compound.SEQUENCE, Compound.TUPLE_VARIANT)
        self.write_indent()
        serialize_value(value, self)
        self._write("\n")

    def end_sequence(self) -> None:
        self._close_compound(Compound.SEQUENCE)
        self.dedent()
        self.write_indent()
        self._write("]")

    # ------------------------------------------------------------------
    # Maps and records
    # ------------------------------------------------------------------
    def begin_map(self, len_hint: int | None = None) -> None:
        self._write("{\n")
        self.indent()
        self._open_compound(Compound.MAP)
        self._pending_key.append(False)

    def emit_key(self, value: Any) -> None:
        self._require("emit_key", Compound.MAP)
        if self._pending_key[-1]:
            raise NestingError("emit_key called twice without emit_value")
        self.write_indent()
        serialize_value(value, self)
        self._pending_key[-1] = True

    def emit_value(self, value: Any) -> None:
        self._require("emit_value", Compound.MAP)
        if not self._pending_key[-1]:
            raise NestingError("emit_value called without a preceding emit_key")
        self._pending_key[-1] = False
        self._write(" = ")
        serialize_value(value, self)
        self._write("\n")

    def end_map(self) -> None:
        if self._open and self._open[-1] is Compound.MAP and self._pending_key[-1]:
            raise NestingError("end of map while a key is waiting for its value")
        self._close_compound(Compound.MAP)
        self._pending_key.pop()
        self.dedent()
        self.write_indent()
        self._write("}")

    def begin_record(self, field_count_hint: int = 0) -> None:
        self._write("{\n")
        self.indent()
        self._open_compound(Compound.RECORD)

    def emit_field(self, name: str, value: Any) -> None:
        self._require("emit_field", Compound.RECORD, Compound.STRUCT_VARIANT)
        self.write_indent()
        self.emit_str(name)
        self._write(" = ")
        serialize_value(value, self)
        self._write("\n")

    def end_record(self) -> None:
        self._close_compound(Compound.RECORD)
        self.dedent()
        self.write_indent()
        self._write("}")

    # ------------------------------------------------------------------
    # Tagged-union variants
    # ------------------------------------------------------------------
    def begin_variant_unit(self, variant_name: str) -> None:
        self.emit_str(variant_name)

    def begin_variant_newtype(self, variant_name: str, value: Any) -> None:
        self._write("{ ")
        self.emit_str(variant_name)
        self._write(" = ")
        serialize_value(value, self)
        self._write(" }")

    def begin_variant_tuple(self, variant_name: str, len_hint: int = 0) -> None:
        self._begin_variant_block(variant_name, "[")
        self._open_compound(Compound.TUPLE_VARIANT)

    def end_variant_tuple(self) -> None:
        self._close_compound(Compound.TUPLE_VARIANT)
        self._end_variant_block("]")

    def begin_variant_struct(self, variant_name: str, field_count_hint: int = 0) -> None:
        self._begin_variant_block(variant_name, "{")
        self._open_compound(Compound.STRUCT_VARIANT)

    def end_variant_struct(self) -> None:
        self._close_compound(Compound.STRUCT_VARIANT)
        self._end_variant_block("}")

    def _begin_variant_block(self, variant_name: str, opener: str) -> None:
        self._write("{\n")
        self.indent()
        self.write_indent()
        self.emit_str(variant_name)
        self._write(f" = {opener}\n")
        self.indent()

    def _end_variant_block(self, closer: str) -> None:
        self.dedent()
        self.write_indent()
        self._write(f"{closer}\n")
        self.dedent()
        self.write_indent()
        self._write("}")


def to_string(value: Any) -> str:
    """Serialize ``value`` to spa-json text.

    Raises whatever the producer raises (normally
    :class:`~spa_json.contracts.common.MessageError`); no partial text is
    returned on failure.
    """
    emitter = TextEmitter()
    serialize_value(value, emitter)
    return emitter.finish()


def to_file(value: Any, path: str | Path) -> Path:
    """Serialize ``value`` and write it atomically to ``path``.

    Storage failures are raised as :class:`~spa_json.contracts.common.SpaIOError`.
    """
    text = to_string(value)
    target = Path(path)
    write_text(target, text)
    return target
