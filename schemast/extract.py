# schemast/extract.py
"""Recover the declared name of a ``field.<Type>("name")...`` chain."""

from __future__ import annotations

import ast

from .errors import NotAFieldChainError
from .synth import FIELD_PACKAGE

__all__ = ["extract_field_name"]


def extract_field_name(call: ast.Call) -> str:
    """Return the name literal of the constructor call at the root of *call*.

    Modifiers appended on top of the constructor are skipped by drilling into
    the receiver until it is the ``field`` name itself.
    """
    func = call.func
    if not isinstance(func, ast.Attribute):
        raise NotAFieldChainError(
            f"schemast: unexpected callee {type(func).__name__}, expected attribute access"
        )
    receiver = func.value
    if isinstance(receiver, ast.Call):
        return extract_field_name(receiver)
    if not isinstance(receiver, ast.Name) or receiver.id != FIELD_PACKAGE:
        raise NotAFieldChainError(
            f'schemast: expected field AST to be of form {FIELD_PACKAGE}.<Type>("name")'
        )
    if not call.args:
        raise NotAFieldChainError(
            "schemast: expected field constructor to have at least name arg"
        )
    name = call.args[0]
    if not isinstance(name, ast.Constant) or not isinstance(name.value, str):
        raise NotAFieldChainError("schemast: expected field name to be a string literal")
    return name.value
