# schemast/descriptor.py
"""Declarative description of a single schema field.

A :class:`FieldDescriptor` is what the synthesizer turns into a
``field.<Type>("name")...`` call chain, and what the runtime DSL in
:mod:`schemast.ent.field` produces when such a chain is executed.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, NamedTuple, Tuple

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["FieldType", "EnumPair", "FieldDescriptor"]


class FieldType(str, Enum):
    """Type category of a field."""

    BOOL = "bool"
    TIME = "time"
    JSON = "json"
    UUID = "uuid"
    BYTES = "bytes"
    ENUM = "enum"
    STRING = "string"
    OTHER = "other"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT = "int"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT = "uint"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def numeric(self) -> bool:
        return self in _NUMERIC

    @property
    def constructor(self) -> str:
        """Name of the ``field`` constructor declaring this type, e.g. ``Int64``."""
        return _CONSTRUCTORS[self]

    @property
    def const_name(self) -> str:
        return "Type" + self.constructor


_NUMERIC = frozenset(
    {
        FieldType.INT8,
        FieldType.INT16,
        FieldType.INT32,
        FieldType.INT,
        FieldType.INT64,
        FieldType.UINT8,
        FieldType.UINT16,
        FieldType.UINT32,
        FieldType.UINT,
        FieldType.UINT64,
        FieldType.FLOAT32,
        FieldType.FLOAT64,
    }
)

_CONSTRUCTORS: dict[FieldType, str] = {
    FieldType.BOOL: "Bool",
    FieldType.TIME: "Time",
    FieldType.JSON: "JSON",
    FieldType.UUID: "UUID",
    FieldType.BYTES: "Bytes",
    FieldType.ENUM: "Enum",
    FieldType.STRING: "String",
    FieldType.OTHER: "Other",
    FieldType.INT8: "Int8",
    FieldType.INT16: "Int16",
    FieldType.INT32: "Int32",
    FieldType.INT: "Int",
    FieldType.INT64: "Int64",
    FieldType.UINT8: "Uint8",
    FieldType.UINT16: "Uint16",
    FieldType.UINT32: "Uint32",
    FieldType.UINT: "Uint",
    FieldType.UINT64: "Uint64",
    FieldType.FLOAT32: "Float32",
    FieldType.FLOAT64: "Float64",
}


class EnumPair(NamedTuple):
    """One enum member: the Python-facing name and the stored value."""

    name: str
    value: str


class FieldDescriptor(BaseModel):
    """Immutable description of one schema field."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name")
    type: FieldType = Field(..., description="Type category")

    nillable: bool = False
    optional: bool = False
    unique: bool = False
    sensitive: bool = False
    immutable: bool = False

    comment: str = Field("", description="Field comment; empty means not set")
    struct_tag: str = Field("", description="Struct tag; empty means not set")
    storage_key: str = Field("", description="Column name override; empty means not set")
    schema_type: Dict[str, str] = Field(
        default_factory=dict,
        description="Dialect name -> column type override",
    )
    enum_values: Tuple[EnumPair, ...] = Field(
        default=(),
        description="Ordered (name, value) pairs for enum fields",
    )

    # Not encodable: setting any of these makes synthesis fail.
    annotations: Tuple[Any, ...] = ()
    validators: Tuple[Any, ...] = ()
    default: Any = None
    update_default: Any = None
