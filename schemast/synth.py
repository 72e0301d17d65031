# schemast/synth.py
"""Field descriptor -> ``field.<Type>("name")...`` call expression.

The produced tree is what a developer would write by hand in a schema's
``fields`` method::

    field.String("email").unique().comment("login address")
    field.Enum("status").values("active", "disabled")

Modifiers are appended in a fixed order so generated text is reproducible.
"""

from __future__ import annotations

import ast

from .builder import BuilderChain, str_lit, str_map_lit
from .descriptor import FieldDescriptor, FieldType
from .errors import UnsupportedFeatureError, UnsupportedTypeError

__all__ = ["FIELD_PACKAGE", "synthesize", "field_constructor"]

# Identifier every field constructor is reached through.
FIELD_PACKAGE = "field"

_FLAG_MODIFIERS = ("nillable", "optional", "unique", "sensitive", "immutable")
_STRING_MODIFIERS = ("comment", "struct_tag", "storage_key")


def synthesize(desc: FieldDescriptor) -> ast.Call:
    """Convert a descriptor into the call expression that declares it.

    Raises
    ------
    UnsupportedTypeError
        The descriptor's type is not numeric, string, bool or enum.
    UnsupportedFeatureError
        Annotations, validators or default generators are set.
    """
    t = desc.type
    if t.numeric or t in (FieldType.STRING, FieldType.BOOL):
        return _from_simple_type(desc)
    if t is FieldType.ENUM:
        return _from_enum_type(desc)
    raise UnsupportedTypeError(f"schemast: unsupported type {t.const_name}")


def field_constructor(desc: FieldDescriptor) -> str:
    return desc.type.const_name[len("Type"):]


def _new_field_call(desc: FieldDescriptor) -> BuilderChain:
    return BuilderChain.field_constructor(FIELD_PACKAGE, field_constructor(desc), desc.name)


def _from_simple_type(desc: FieldDescriptor) -> ast.Call:
    builder = _new_field_call(desc)
    for flag in _FLAG_MODIFIERS:
        if getattr(desc, flag):
            builder.extend(flag)
    for attr in _STRING_MODIFIERS:
        value = getattr(desc, attr)
        if value:
            builder.extend(attr, str_lit(value))
    if desc.schema_type:
        builder.extend("schema_type", str_map_lit(desc.schema_type))

    unsupported: list[str] = []
    if desc.annotations:
        unsupported.append("FieldDescriptor.annotations")
    if desc.validators:
        unsupported.append("FieldDescriptor.validators")
    if desc.default is not None:
        unsupported.append("FieldDescriptor.default")
    if desc.update_default is not None:
        unsupported.append("FieldDescriptor.update_default")
    if unsupported:
        raise UnsupportedFeatureError(unsupported)
    return builder.curr


def _from_enum_type(desc: FieldDescriptor) -> ast.Call:
    call = _from_simple_type(desc)
    named = any(pair.name != pair.value for pair in desc.enum_values)
    args: list[ast.expr] = []
    for pair in desc.enum_values:
        args.append(str_lit(pair.name))
        if named:
            args.append(str_lit(pair.value))
    builder = BuilderChain(call)
    builder.extend("named_values" if named else "values", *args)
    return builder.curr
