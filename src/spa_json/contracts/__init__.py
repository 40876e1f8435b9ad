"""Protocol contract, value tree, errors, and response models."""

from spa_json.contracts.common import (
    ErrorDetail,
    MessageError,
    Metrics,
    NestingError,
    ResponseEnvelope,
    SpaIOError,
    SpaJsonError,
    Target,
    WarningDetail,
)
from spa_json.contracts.protocol import (
    Compound,
    PrimitiveKind,
    Serialize,
    Serializer,
)
from spa_json.contracts.values import (
    Char,
    NewtypeStruct,
    NewtypeVariant,
    Record,
    StructVariant,
    TupleVariant,
    UInt,
    UnitStruct,
    UnitVariant,
)

__all__ = [
    "Char",
    "Compound",
    "ErrorDetail",
    "MessageError",
    "Metrics",
    "NestingError",
    "NewtypeStruct",
    "NewtypeVariant",
    "PrimitiveKind",
    "Record",
    "ResponseEnvelope",
    "Serialize",
    "Serializer",
    "SpaIOError",
    "SpaJsonError",
    "StructVariant",
    "Target",
    "TupleVariant",
    "UInt",
    "UnitStruct",
    "UnitVariant",
    "WarningDetail",
]
