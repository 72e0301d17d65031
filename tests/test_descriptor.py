# tests/test_descriptor.py
"""Tests for FieldType and FieldDescriptor."""

import pytest
from pydantic import ValidationError


class TestFieldType:

    def test_numeric_kinds(self):
        from schemast.descriptor import FieldType

        assert FieldType.INT.numeric
        assert FieldType.UINT64.numeric
        assert FieldType.FLOAT32.numeric
        assert not FieldType.STRING.numeric
        assert not FieldType.BOOL.numeric
        assert not FieldType.ENUM.numeric

    def test_const_name_and_constructor(self):
        from schemast.descriptor import FieldType

        assert FieldType.INT64.const_name == "TypeInt64"
        assert FieldType.INT64.constructor == "Int64"
        assert FieldType.STRING.const_name == "TypeString"
        assert FieldType.JSON.constructor == "JSON"

    def test_lookup_by_value(self):
        from schemast.descriptor import FieldType

        assert FieldType("uint8") is FieldType.UINT8


class TestFieldDescriptor:

    def test_defaults_are_unset(self):
        from schemast.descriptor import FieldDescriptor, FieldType

        desc = FieldDescriptor(name="name", type=FieldType.STRING)
        assert desc.comment == ""
        assert desc.schema_type == {}
        assert desc.enum_values == ()
        assert desc.default is None
        assert not desc.optional

    def test_is_immutable(self):
        from schemast.descriptor import FieldDescriptor, FieldType

        desc = FieldDescriptor(name="name", type=FieldType.STRING)
        with pytest.raises(ValidationError):
            desc.name = "other"

    def test_enum_pairs_coerced_from_sequences(self):
        from schemast.descriptor import EnumPair, FieldDescriptor

        desc = FieldDescriptor(name="status", type="enum", enum_values=[["A", "a"], ("b", "b")])
        assert desc.enum_values == (EnumPair("A", "a"), EnumPair("b", "b"))
        assert desc.enum_values[0].name == "A"
        assert desc.enum_values[0].value == "a"

    def test_unknown_type_rejected(self):
        from schemast.descriptor import FieldDescriptor

        with pytest.raises(ValidationError):
            FieldDescriptor(name="x", type="decimal")
