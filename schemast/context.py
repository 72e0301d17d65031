# schemast/context.py
"""The parsed schema package that edits are applied to.

A :class:`Context` holds one :class:`~schemast.unit.SchemaUnit` per schema
module plus the units scaffolded for new types, resolves ``Type.method``
lookups over all of them, and writes back whatever was edited.

Not thread-safe: serialize edits on a shared context.
"""

from __future__ import annotations

import ast
from pathlib import Path
from typing import Iterator, Mapping, Optional

from . import editor, scaffold
from .config import get_config
from .descriptor import FieldDescriptor
from .errors import MethodNotFoundError, TypeNotFoundError
from .printer import render_unit
from .unit import SchemaUnit
from .utils.logging import get_logger, log_unit_written

__all__ = ["Context"]

_logger = get_logger(__name__)


class Context:
    """Schema modules of one package, editable in place."""

    def __init__(
        self,
        schema_dir: Optional[Path] = None,
        units: Optional[list[SchemaUnit]] = None,
        indent: Optional[int] = None,
    ):
        cfg = get_config()
        self.schema_dir = Path(schema_dir) if schema_dir is not None else cfg.schema_dir
        self.indent = indent if indent is not None else cfg.indent
        self.units: list[SchemaUnit] = list(units or [])
        self.new_types: dict[str, SchemaUnit] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, schema_dir: Path | str, **kwargs) -> "Context":
        """Parse every ``*.py`` module of *schema_dir*."""
        schema_dir = Path(schema_dir)
        units = [
            SchemaUnit.parse(path, path.read_text(encoding="utf-8"))
            for path in sorted(schema_dir.glob("*.py"))
        ]
        _logger.debug(f"Loaded {len(units)} schema module(s) from {schema_dir}")
        return cls(schema_dir=schema_dir, units=units, **kwargs)

    @classmethod
    def from_sources(cls, sources: Mapping[str, str], schema_dir: Path | str = ".", **kwargs) -> "Context":
        """Build a context from in-memory ``{filename: source}`` pairs."""
        schema_dir = Path(schema_dir)
        units = [SchemaUnit.parse(schema_dir / name, text) for name, text in sources.items()]
        return cls(schema_dir=schema_dir, units=units, **kwargs)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def all_units(self) -> Iterator[SchemaUnit]:
        yield from self.units
        yield from self.new_types.values()

    def _find_type(self, type_name: str) -> Optional[tuple[SchemaUnit, ast.ClassDef]]:
        for unit in self.all_units():
            for node in unit.module.body:
                if isinstance(node, ast.ClassDef) and node.name == type_name:
                    return unit, node
        return None

    def has_type(self, type_name: str) -> bool:
        return type_name in self.new_types or self._find_type(type_name) is not None

    def lookup_type(self, type_name: str) -> tuple[SchemaUnit, ast.ClassDef]:
        found = self._find_type(type_name)
        if found is None:
            raise TypeNotFoundError(f"schemast: could not find type {type_name!r}")
        return found

    def lookup_method(self, type_name: str, method: str) -> tuple[SchemaUnit, ast.FunctionDef]:
        unit, cls_def = self.lookup_type(type_name)
        for node in cls_def.body:
            if isinstance(node, ast.FunctionDef) and node.name == method:
                return unit, node
        raise MethodNotFoundError(
            f"schemast: type {type_name!r} has no method {method!r}"
        )

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def add_type(self, type_name: str) -> SchemaUnit:
        return scaffold.add_type(self, type_name)

    def append_field(self, type_name: str, desc: FieldDescriptor) -> None:
        editor.append_field(self, type_name, desc)

    def remove_field(self, type_name: str, field_name: str) -> None:
        editor.remove_field(self, type_name, field_name)

    def find_field(self, type_name: str, field_name: str) -> ast.Call:
        return editor.find_field(self, type_name, field_name)

    def field_names(self, type_name: str) -> list[str]:
        return editor.field_names(self, type_name)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self, unit: SchemaUnit) -> str:
        return render_unit(unit, indent=self.indent)

    def print(self, out_dir: Optional[Path | str] = None) -> list[Path]:
        """Write every created or edited module and return the paths written.

        Modules go back to where they were loaded from unless *out_dir* is
        given.  Untouched modules are never rewritten.
        """
        written: list[Path] = []
        for unit in self.all_units():
            if not unit.modified:
                continue
            source = self.render(unit)
            path = Path(out_dir) / unit.path.name if out_dir is not None else unit.path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
            unit.refresh(source)
            log_unit_written(_logger, path, source)
            written.append(path)
        return written
