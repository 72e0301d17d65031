# schemast/printer.py
"""Render edited schema units back to source text.

Only the span of each edited ``return`` statement is touched; every other
byte of the file (other methods, blank lines, comments) is kept as is.

A list literal written on a single line stays on a single line.  When the
edited value is a multi-line list literal that still holds some of its original
declarations, the original list text is spliced: removed declarations are cut
out together with their trailing comma (and their whole line, comment
included, when nothing else shares it), and new declarations are inserted
after the last surviving one, copying its indentation.  Comments on the
surviving declarations stay where they were.

Otherwise (``return None`` turned into a list, or every original declaration
gone) the value is rendered afresh, one declaration per line::

    return [
        field.String("name"),
        field.Int("age").optional(),
    ]

Newly synthesized declarations are rendered with :func:`ast.unparse`.
"""

from __future__ import annotations

import ast
from typing import Optional

from .unit import SchemaUnit, parse_source

__all__ = ["render_unit", "render_value"]

# Edits at the same offset apply cuts before inserts, and new lines before
# the comma that precedes them.
_CUT, _LINES, _COMMA = 2, 1, 0


def _positioned(node: ast.AST) -> bool:
    return getattr(node, "lineno", None) is not None and getattr(node, "end_lineno", None) is not None


def _render_element(node: ast.expr, source: str) -> str:
    if _positioned(node):
        segment = ast.get_source_segment(source, node)
        if segment is not None:
            return segment
    return ast.unparse(node)


def render_value(value: ast.expr | None, source: str, base: str, indent: int = 4) -> str:
    """Render a returned value whose ``return`` keyword sits at indentation *base*."""
    if value is None or (isinstance(value, ast.Constant) and value.value is None):
        return "None"
    if isinstance(value, ast.List):
        if not value.elts:
            return "[]"
        inner = base + " " * indent
        body = "".join(f"{inner}{_render_element(e, source)},\n" for e in value.elts)
        return f"[\n{body}{base}]"
    return _render_element(value, source)


class _Offsets:
    """Maps ast (line, UTF-8 byte column) positions to string offsets."""

    def __init__(self, source: str):
        self.source = source
        self.lines = source.split("\n")
        self.starts: list[int] = []
        pos = 0
        for line in self.lines:
            self.starts.append(pos)
            pos += len(line) + 1

    def at(self, lineno: int, col: int) -> int:
        line = self.lines[lineno - 1]
        chars = len(line.encode("utf-8")[:col].decode("utf-8", errors="ignore"))
        return self.starts[lineno - 1] + chars

    def start(self, node: ast.AST) -> int:
        return self.at(node.lineno, node.col_offset)

    def end(self, node: ast.AST) -> int:
        return self.at(node.end_lineno, node.end_col_offset)

    def line_start(self, pos: int) -> int:
        return self.source.rfind("\n", 0, pos) + 1

    def line_end(self, pos: int) -> int:
        end = self.source.find("\n", pos)
        if end < 0:
            end = len(self.source)
        if end > 0 and self.source[end - 1] == "\r":
            end -= 1
        return end


def _comma_after(source: str, pos: int) -> Optional[int]:
    """Offset just past the separator comma following *pos*, if there is one."""
    i = pos
    while i < len(source) and source[i] in " \t\r\n":
        i += 1
    if i < len(source) and source[i] == ",":
        return i + 1
    return None


def _cut(off: _Offsets, node: ast.expr) -> tuple[int, int]:
    source = off.source
    start = off.start(node)
    stop = _comma_after(source, off.end(node)) or off.end(node)

    head = source[off.line_start(start):start]
    tail_end = off.line_end(stop)
    tail = source[stop:tail_end].strip()
    if not head.strip() and (not tail or tail.startswith("#")):
        # the declaration owns its lines: drop them, newline included
        first = off.line_start(start)
        nl = source.find("\n", tail_end)
        return first, (len(source) if nl < 0 else nl + 1)

    while stop < len(source) and source[stop] in " \t":
        stop += 1
    return start, stop


def _splice_list(
    off: _Offsets, original: ast.List, current: ast.List
) -> Optional[list[tuple[int, int, int, str]]]:
    """Edits turning *original*'s text into *current*, or ``None`` to re-render."""
    if original.lineno == original.end_lineno:
        items = ", ".join(_render_element(e, off.source) for e in current.elts)
        return [(off.start(original), _CUT, off.end(original), f"[{items}]")]

    kept = [e for e in current.elts if _positioned(e)]
    added = [e for e in current.elts if not _positioned(e)]
    if not kept or current.elts[: len(kept)] != kept:
        return None

    kept_at = {(e.lineno, e.col_offset) for e in kept}
    edits: list[tuple[int, int, int, str]] = []
    for elt in original.elts:
        if (elt.lineno, elt.col_offset) not in kept_at:
            start, stop = _cut(off, elt)
            edits.append((start, _CUT, stop, ""))

    if added:
        source = off.source
        last = kept[-1]
        last_end = off.end(last)
        comma = _comma_after(source, last_end)
        anchor = comma if comma is not None else last_end
        close = off.end(original) - 1
        texts = [ast.unparse(e) for e in added]

        if "\n" in source[anchor:close]:
            first = off.start(last)
            lead = source[off.line_start(first):first]
            if lead.strip():
                lead = " " * len(lead)
            newline = "\r\n" if source[off.line_end(anchor):].startswith("\r\n") else "\n"
            at = off.line_end(anchor)
            edits.append((at, _LINES, at, "".join(f"{newline}{lead}{t}," for t in texts)))
            if comma is None:
                edits.append((last_end, _COMMA, last_end, ","))
        elif comma is not None:
            edits.append((anchor, _LINES, anchor, "".join(f" {t}," for t in texts)))
        else:
            edits.append((anchor, _LINES, anchor, "".join(f", {t}" for t in texts)))
    return edits


def render_unit(unit: SchemaUnit, indent: int = 4) -> str:
    """Return the source of *unit* with every dirty ``return`` re-rendered."""
    if not unit.dirty:
        return unit.source

    source = unit.source
    off = _Offsets(source)
    originals = {
        (node.lineno, node.col_offset): node
        for node in ast.walk(parse_source(source, unit.path.name))
        if isinstance(node, ast.Return)
    }

    edits: list[tuple[int, int, int, str]] = []
    for stmt in unit.dirty:
        before = originals.get((stmt.lineno, stmt.col_offset))
        if (
            isinstance(stmt.value, ast.List)
            and _positioned(stmt.value)
            and before is not None
            and isinstance(before.value, ast.List)
        ):
            spliced = _splice_list(off, before.value, stmt.value)
            if spliced is not None:
                edits.extend(spliced)
                continue

        line = off.lines[stmt.lineno - 1]
        base = line[: len(line) - len(line.lstrip())]
        start, end = off.start(stmt), off.end(stmt)
        edits.append((start, _CUT, end, "return " + render_value(stmt.value, source, base, indent)))

    for start, _, end, text in sorted(edits, reverse=True):
        source = source[:start] + text + source[end:]
    return source
