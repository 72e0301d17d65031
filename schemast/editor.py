# schemast/editor.py
"""Edits on the list returned by a schema type's ``fields`` method.

Only the canonical shape is editable::

    def fields(self):
        return [...]        # or: return None

Anything else in the body is refused up front rather than guessed at.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from .descriptor import FieldDescriptor
from .errors import (
    FieldNotFoundError,
    MalformedMethodBodyError,
    NotAFieldChainError,
    UnexpectedReturnShapeError,
)
from .extract import extract_field_name
from .synth import synthesize
from .unit import SchemaUnit
from .utils.logging import get_logger, log_field_edit

if TYPE_CHECKING:
    from .context import Context

__all__ = [
    "FIELDS_METHOD",
    "fields_return_stmt",
    "append_field",
    "remove_field",
    "find_field",
    "field_names",
]

_logger = get_logger(__name__)

FIELDS_METHOD = "fields"


def fields_return_stmt(ctx: "Context", type_name: str) -> tuple[SchemaUnit, ast.Return]:
    """Resolve the single ``return`` statement of ``type_name.fields``."""
    unit, fd = ctx.lookup_method(type_name, FIELDS_METHOD)
    if len(fd.body) != 1:
        raise MalformedMethodBodyError(
            f"schemast: {type_name}.{FIELDS_METHOD}() body must have a single statement"
        )
    stmt = fd.body[0]
    if not isinstance(stmt, ast.Return):
        raise MalformedMethodBodyError(
            f"schemast: {type_name}.{FIELDS_METHOD}() body must contain a return statement"
        )
    return unit, stmt


def _is_empty_sentinel(value: ast.expr | None) -> bool:
    return value is None or (isinstance(value, ast.Constant) and value.value is None)


def append_field(ctx: "Context", type_name: str, desc: FieldDescriptor) -> None:
    """Add a field declaration at the end of the list returned by ``fields``."""
    unit, stmt = fields_return_stmt(ctx, type_name)
    new_field = synthesize(desc)
    returned = stmt.value
    if _is_empty_sentinel(returned):
        stmt.value = ast.List(elts=[new_field], ctx=ast.Load())
    elif isinstance(returned, ast.List):
        returned.elts.append(new_field)
    else:
        raise UnexpectedReturnShapeError(
            f"schemast: unexpected AST component type {type(returned).__name__}, "
            "expected None or a list literal"
        )
    unit.mark_dirty(stmt)
    log_field_edit(_logger, "append", type_name, desc.name)


def _returned_list(ctx: "Context", type_name: str) -> tuple[SchemaUnit, ast.Return, ast.List]:
    unit, stmt = fields_return_stmt(ctx, type_name)
    returned = stmt.value
    if not isinstance(returned, ast.List):
        shape = "None" if _is_empty_sentinel(returned) else type(returned).__name__
        raise UnexpectedReturnShapeError(
            f"schemast: unexpected AST component type {shape}, nothing to remove from"
        )
    return unit, stmt, returned


def _index_of(returned: ast.List, field_name: str) -> int:
    for i, item in enumerate(returned.elts):
        if not isinstance(item, ast.Call):
            raise NotAFieldChainError(
                "schemast: expected return statement elements to be call expressions"
            )
        if extract_field_name(item) == field_name:
            return i
    return -1


def remove_field(ctx: "Context", type_name: str, field_name: str) -> None:
    """Remove the first declaration named *field_name* from ``fields``."""
    unit, stmt, returned = _returned_list(ctx, type_name)
    i = _index_of(returned, field_name)
    if i < 0:
        raise FieldNotFoundError(field_name, type_name)
    del returned.elts[i]
    unit.mark_dirty(stmt)
    log_field_edit(_logger, "remove", type_name, field_name)


def find_field(ctx: "Context", type_name: str, field_name: str) -> ast.Call:
    """Return the declaration of *field_name* in ``type_name.fields``."""
    _, stmt = fields_return_stmt(ctx, type_name)
    returned = stmt.value
    if isinstance(returned, ast.List):
        i = _index_of(returned, field_name)
        if i >= 0:
            return returned.elts[i]  # type: ignore[return-value]
    elif not _is_empty_sentinel(returned):
        raise UnexpectedReturnShapeError(
            f"schemast: unexpected AST component type {type(returned).__name__}"
        )
    raise FieldNotFoundError(field_name, type_name)


def field_names(ctx: "Context", type_name: str) -> list[str]:
    """Names declared by ``type_name.fields``, in declaration order."""
    _, stmt = fields_return_stmt(ctx, type_name)
    returned = stmt.value
    if _is_empty_sentinel(returned):
        return []
    if not isinstance(returned, ast.List):
        raise UnexpectedReturnShapeError(
            f"schemast: unexpected AST component type {type(returned).__name__}"
        )
    names = []
    for item in returned.elts:
        if not isinstance(item, ast.Call):
            raise NotAFieldChainError(
                "schemast: expected return statement elements to be call expressions"
            )
        names.append(extract_field_name(item))
    return names
