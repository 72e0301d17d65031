# schemast/loader.py
"""YAML batch input: schema types and the fields to add to them.

Document format::

    types:
      - name: User
        fields:
          - name: email
            type: string
            unique: true
          - name: status
            type: enum
            enum_values: [[active, active], [disabled, disabled]]
      - name: Group
        fields: []

Each field entry is validated as a :class:`~schemast.descriptor.FieldDescriptor`.
For enum fields ``values: [a, b]`` is accepted as shorthand for pairs whose
name equals their value.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

import yaml
from pydantic import BaseModel, Field, field_validator

from .descriptor import FieldDescriptor

__all__ = ["TypeSpec", "SchemaDocument", "parse_type_specs", "load_type_specs"]


class TypeSpec(BaseModel):
    """One schema type and the fields to append to it."""

    name: str
    fields: List[FieldDescriptor] = Field(default_factory=list)

    @field_validator("fields", mode="before")
    @classmethod
    def _expand_values_shorthand(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        out = []
        for item in value:
            if isinstance(item, dict) and "values" in item:
                item = dict(item)
                if "enum_values" in item:
                    raise ValueError(
                        f"field {item.get('name')!r} gives both values and enum_values"
                    )
                values = item.pop("values") or []
                item["enum_values"] = [(str(v), str(v)) for v in values]
            out.append(item)
        return out


class SchemaDocument(BaseModel):
    types: List[TypeSpec] = Field(default_factory=list)


def parse_type_specs(yaml_content: str) -> list[TypeSpec]:
    """Parse a YAML document into :class:`TypeSpec` entries."""
    data = yaml.safe_load(yaml_content) or {}
    return SchemaDocument(**data).types


def load_type_specs(path: str | Path) -> list[TypeSpec]:
    return parse_type_specs(Path(path).read_text(encoding="utf-8"))
