"""Identifier normalisation helpers."""

from __future__ import annotations

import re

_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_RE = re.compile(r"([a-z\d])([A-Z])")
_NON_IDENTIFIER_RE = re.compile(r"[^0-9a-zA-Z_]+")
_MULTI_UNDERSCORE_RE = re.compile(r"_+")


def to_snake_case(raw: str, *, default: str = "schema") -> str:
    """``UserProfile`` -> ``user_profile``, ``HTTPServer`` -> ``http_server``."""
    text = str(raw or "").strip()
    if not text:
        return default
    text = _ACRONYM_RE.sub(r"\1_\2", text)
    text = _CAMEL_RE.sub(r"\1_\2", text)
    text = _NON_IDENTIFIER_RE.sub("_", text)
    text = _MULTI_UNDERSCORE_RE.sub("_", text).strip("_").lower()
    if not text:
        return default
    if text[0].isdigit():
        text = f"f_{text}"
    return text
