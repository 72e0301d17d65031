# schemast/ent/field.py
"""Field constructors used inside schema ``fields`` methods.

Executing a declaration such as::

    field.String("email").unique().comment("login address")

yields a :class:`FieldBuilder`; :meth:`FieldBuilder.descriptor` turns it into
the :class:`~schemast.descriptor.FieldDescriptor` it declares.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from ..descriptor import EnumPair, FieldDescriptor, FieldType


class FieldBuilder:
    """Collects the modifiers chained onto a field constructor."""

    def __init__(self, type_: FieldType, name: str):
        self._attrs: dict[str, Any] = {"name": name, "type": type_}

    def _set(self, key: str, value: Any) -> "FieldBuilder":
        self._attrs[key] = value
        return self

    def nillable(self) -> "FieldBuilder":
        return self._set("nillable", True)

    def optional(self) -> "FieldBuilder":
        return self._set("optional", True)

    def unique(self) -> "FieldBuilder":
        return self._set("unique", True)

    def sensitive(self) -> "FieldBuilder":
        return self._set("sensitive", True)

    def immutable(self) -> "FieldBuilder":
        return self._set("immutable", True)

    def comment(self, text: str) -> "FieldBuilder":
        return self._set("comment", text)

    def struct_tag(self, tag: str) -> "FieldBuilder":
        return self._set("struct_tag", tag)

    def storage_key(self, key: str) -> "FieldBuilder":
        return self._set("storage_key", key)

    def schema_type(self, types: Mapping[str, str]) -> "FieldBuilder":
        return self._set("schema_type", dict(types))

    def values(self, *values: str) -> "FieldBuilder":
        pairs = self._attrs.get("enum_values", ())
        return self._set("enum_values", pairs + tuple(EnumPair(v, v) for v in values))

    def named_values(self, *name_values: str) -> "FieldBuilder":
        if len(name_values) % 2:
            raise ValueError("named_values expects name/value pairs")
        pairs = self._attrs.get("enum_values", ())
        it = iter(name_values)
        return self._set("enum_values", pairs + tuple(EnumPair(n, v) for n, v in zip(it, it)))

    def default(self, value: Any) -> "FieldBuilder":
        return self._set("default", value)

    def update_default(self, value: Any) -> "FieldBuilder":
        return self._set("update_default", value)

    def validate(self, *fns: Callable[[Any], Any]) -> "FieldBuilder":
        return self._set("validators", self._attrs.get("validators", ()) + fns)

    def annotations(self, *annotations: Any) -> "FieldBuilder":
        return self._set("annotations", self._attrs.get("annotations", ()) + annotations)

    def descriptor(self) -> FieldDescriptor:
        return FieldDescriptor(**self._attrs)


def _constructor(type_: FieldType) -> Callable[[str], FieldBuilder]:
    def new(name: str) -> FieldBuilder:
        return FieldBuilder(type_, name)

    new.__name__ = new.__qualname__ = type_.constructor
    new.__doc__ = f"Declare a {type_.value} field."
    return new


Bool = _constructor(FieldType.BOOL)
Time = _constructor(FieldType.TIME)
JSON = _constructor(FieldType.JSON)
UUID = _constructor(FieldType.UUID)
Bytes = _constructor(FieldType.BYTES)
Enum = _constructor(FieldType.ENUM)
String = _constructor(FieldType.STRING)
Other = _constructor(FieldType.OTHER)
Int8 = _constructor(FieldType.INT8)
Int16 = _constructor(FieldType.INT16)
Int32 = _constructor(FieldType.INT32)
Int = _constructor(FieldType.INT)
Int64 = _constructor(FieldType.INT64)
Uint8 = _constructor(FieldType.UINT8)
Uint16 = _constructor(FieldType.UINT16)
Uint32 = _constructor(FieldType.UINT32)
Uint = _constructor(FieldType.UINT)
Uint64 = _constructor(FieldType.UINT64)
Float32 = _constructor(FieldType.FLOAT32)
Float64 = _constructor(FieldType.FLOAT64)
