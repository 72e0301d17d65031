# schemast/scaffold.py
"""Skeleton modules for brand-new schema types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import NameCollisionError
from .unit import SchemaUnit
from .utils.logging import get_logger, log_type_scaffolded
from .utils.naming import to_snake_case

if TYPE_CHECKING:
    from .context import Context

__all__ = ["SKELETON", "render_skeleton", "type_filename", "add_type"]

_logger = get_logger(__name__)

SKELETON = '''\
from schemast import ent
from schemast.ent import field


class {type_name}(ent.Schema):
    def fields(self):
        return None

    def edges(self):
        return None
'''


def render_skeleton(type_name: str) -> str:
    return SKELETON.format(type_name=type_name)


def type_filename(type_name: str) -> str:
    """``UserProfile`` -> ``user_profile.py``."""
    return to_snake_case(type_name) + ".py"


def add_type(ctx: "Context", type_name: str) -> SchemaUnit:
    """Create and register an empty schema module declaring *type_name*.

    Raises
    ------
    NameCollisionError
        The type is already declared, or its file name is already in use.
    ParseFailureError
        The skeleton does not parse, e.g. because *type_name* is not a
        valid identifier.
    """
    if ctx.has_type(type_name):
        raise NameCollisionError(f"schemast: type {type_name!r} already exists")
    path = ctx.schema_dir / type_filename(type_name)
    if any(unit.path.name == path.name for unit in ctx.all_units()):
        raise NameCollisionError(f"schemast: file {path.name!r} already exists")
    unit = SchemaUnit.parse(path, render_skeleton(type_name), created=True)
    ctx.new_types[type_name] = unit
    log_type_scaffolded(_logger, type_name, path.name)
    return unit
