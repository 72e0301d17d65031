"""Runtime side of the schema DSL.

Schema modules written (or generated) against this package import and run::

    from schemast import ent
    from schemast.ent import field


    class User(ent.Schema):
        def fields(self):
            return [field.String("name")]
"""

from __future__ import annotations

from ..descriptor import FieldDescriptor
from . import field

__all__ = ["Schema", "field"]


class Schema:
    """Base class of every schema type."""

    def fields(self):
        return None

    def edges(self):
        return None

    @classmethod
    def field_descriptors(cls) -> list[FieldDescriptor]:
        """Descriptors of everything ``fields`` declares, in order."""
        return [f.descriptor() for f in cls().fields() or []]
