"""Describe pydantic models through the data-model protocol.

A model is a record of its declared fields, in declaration order and under
their Python names. A ``RootModel`` is a transparent newtype around ``root``.
"""

from __future__ import annotations

from pydantic import BaseModel, RootModel

from spa_json.contracts.protocol import Serializer
from spa_json.engine.producers import describe


@describe.register(BaseModel)
def describe_model(model: BaseModel, serializer: Serializer) -> None:
    names = list(type(model).model_fields)
    serializer.begin_record(len(names))
    for name in names:
        serializer.emit_field(name, getattr(model, name))
    serializer.end_record()


@describe.register(RootModel)
def describe_root_model(model: RootModel, serializer: Serializer) -> None:
    serializer.emit_newtype_struct(type(model).__name__, model.root)
