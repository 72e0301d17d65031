"""
schemast - Schema field declarations as syntax trees

Overview:
---------
Turn structured field descriptors into the exact ``field.<Type>("name")...``
call chains a developer would write in a schema module, and edit the list of
such declarations returned by a schema type's ``fields`` method: append one,
remove one by name, or locate one.  New schema types can be scaffolded from a
name alone.

Composition:
------------
- ``descriptor``: the ``FieldDescriptor`` input model.
- ``builder`` / ``synth``: call-chain construction from a descriptor.
- ``extract``: recovering a declaration's field name from its call chain.
- ``editor`` / ``scaffold``: edits on a parsed schema package.
- ``context`` / ``printer``: loading a package and writing edits back.
- ``ent``: the runtime DSL the generated modules import.
"""

from .context import Context
from .descriptor import EnumPair, FieldDescriptor, FieldType
from .errors import (
    FieldNotFoundError,
    MalformedMethodBodyError,
    MethodNotFoundError,
    NameCollisionError,
    NotAFieldChainError,
    ParseFailureError,
    SchemastError,
    TypeNotFoundError,
    UnexpectedReturnShapeError,
    UnsupportedFeatureError,
    UnsupportedTypeError,
)
from .extract import extract_field_name
from .synth import synthesize

__version__ = "0.1.0"

__all__ = [
    "Context",
    "EnumPair",
    "FieldDescriptor",
    "FieldType",
    "synthesize",
    "extract_field_name",
    # Errors
    "SchemastError",
    "UnsupportedTypeError",
    "UnsupportedFeatureError",
    "MalformedMethodBodyError",
    "UnexpectedReturnShapeError",
    "NotAFieldChainError",
    "FieldNotFoundError",
    "NameCollisionError",
    "ParseFailureError",
    "TypeNotFoundError",
    "MethodNotFoundError",
]
