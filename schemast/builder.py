# schemast/builder.py
"""Growing ``receiver.method(args)`` call chains one link at a time."""

from __future__ import annotations

import ast
from typing import Mapping

__all__ = ["BuilderChain", "str_lit", "str_map_lit"]


def str_lit(value: str) -> ast.Constant:
    return ast.Constant(value=value)


def str_map_lit(mapping: Mapping[str, str]) -> ast.Dict:
    """Build a ``{"key": "value"}`` literal with keys in sorted order."""
    keys = sorted(mapping)
    return ast.Dict(
        keys=[str_lit(k) for k in keys],
        values=[str_lit(mapping[k]) for k in keys],
    )


class BuilderChain:
    """Owns the outermost call of a chain and wraps it on every extension.

    Each :meth:`extend` retires the previous call as the receiver of the new
    one, so the chain is never shared.  Read :attr:`curr` once building is done.
    """

    def __init__(self, call: ast.Call):
        self.curr = call

    @classmethod
    def field_constructor(cls, namespace: str, constructor: str, name: str) -> "BuilderChain":
        """Start a chain with ``<namespace>.<constructor>("name")``."""
        return cls(
            ast.Call(
                func=ast.Attribute(
                    value=ast.Name(id=namespace, ctx=ast.Load()),
                    attr=constructor,
                    ctx=ast.Load(),
                ),
                args=[str_lit(name)],
                keywords=[],
            )
        )

    def extend(self, method: str, *args: ast.expr) -> None:
        self.curr = ast.Call(
            func=ast.Attribute(value=self.curr, attr=method, ctx=ast.Load()),
            args=list(args),
            keywords=[],
        )
