# schemast/errors.py
"""Exception types raised by schemast.

Every operation raises to its immediate caller.  Catch :class:`SchemastError`
to handle any of them in one place (the CLI does exactly that).
"""

from __future__ import annotations

from typing import Sequence


class SchemastError(Exception):
    """Base class for all schemast errors."""


class UnsupportedTypeError(SchemastError):
    """Raised when a descriptor's type cannot be turned into a field call."""


class UnsupportedFeatureError(SchemastError):
    """Raised when a descriptor sets features that cannot be encoded.

    ``violations`` holds every offending attribute, in a stable order, so
    callers converting many descriptors see the complete picture at once.
    """

    def __init__(self, violations: Sequence[str]):
        self.violations = list(violations)
        super().__init__(
            "schemast: unsupported feature(s): " + ", ".join(self.violations)
        )


class MalformedMethodBodyError(SchemastError):
    """Raised when a method body is not a single return statement."""


class UnexpectedReturnShapeError(SchemastError):
    """Raised when a method returns neither ``None`` nor a list literal."""


class NotAFieldChainError(SchemastError):
    """Raised when an expression is not a ``field.<Type>("name")...`` chain."""


class FieldNotFoundError(SchemastError):
    """Raised when a named field is absent from a type's field list."""

    def __init__(self, field_name: str, type_name: str):
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(
            f"schemast: could not find field {field_name!r} in type {type_name!r}"
        )


class NameCollisionError(SchemastError):
    """Raised when scaffolding a type whose name or file is already taken."""


class ParseFailureError(SchemastError):
    """Raised when source text fails to parse."""


class TypeNotFoundError(SchemastError):
    """Raised when no class declares the requested schema type."""


class MethodNotFoundError(SchemastError):
    """Raised when a schema type does not define the requested method."""
