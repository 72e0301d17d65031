# schemast/unit.py
"""A parsed schema source file and the edits pending on it."""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ParseFailureError

__all__ = ["SchemaUnit", "parse_source"]


def parse_source(source: str, filename: str) -> ast.Module:
    """Parse *source* with the standard parser, surfacing failures verbatim."""
    try:
        return ast.parse(source, filename=filename)
    except SyntaxError as exc:
        raise ParseFailureError(str(exc)) from exc


@dataclass
class SchemaUnit:
    """One schema module: where it lives, its text and its syntax tree.

    ``dirty`` collects the ``return`` statements whose values were edited in
    the tree; the printer re-renders only those spans of ``source``.
    """

    path: Path
    source: str
    module: ast.Module
    created: bool = False
    dirty: list[ast.Return] = field(default_factory=list)

    @classmethod
    def parse(cls, path: Path, source: str, *, created: bool = False) -> "SchemaUnit":
        return cls(path=path, source=source, module=parse_source(source, path.name), created=created)

    @property
    def modified(self) -> bool:
        return self.created or bool(self.dirty)

    def mark_dirty(self, stmt: ast.Return) -> None:
        if not any(s is stmt for s in self.dirty):
            self.dirty.append(stmt)

    def refresh(self, source: str) -> None:
        """Adopt *source* as the new baseline after it has been written out."""
        self.module = parse_source(source, self.path.name)
        self.source = source
        self.dirty.clear()
        self.created = False
