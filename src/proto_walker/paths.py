"""Structural paths — dot-joined field names from the traversal root.

Paths are only used to look up overrides and depth overrides; they never
identify a value.  Elements of a repeated field share the field's path, map
values live under ``<map field>.value``.
"""

from __future__ import annotations

from typing import Any, List

import regex

_NAME = r"[A-Za-z_][A-Za-z0-9_]*"
_DOTTED_RE = regex.compile(rf"{_NAME}(?:\.{_NAME})*")

# Paths and type names come from configuration; keep matching bounded.
_MATCH_TIMEOUT = 1.0


def join_path(parent: str, name: str) -> str:
    """Append *name* to *parent* (``join_path("", "a") → "a"``)."""
    return f"{parent}.{name}" if parent else name


def split_path(path: str) -> List[str]:
    return path.split(".") if path else []


def is_valid_path(path: Any) -> bool:
    return isinstance(path, str) and _DOTTED_RE.fullmatch(path, timeout=_MATCH_TIMEOUT) is not None


def is_valid_type_name(name: Any) -> bool:
    """Type names share the dotted-identifier syntax (``pkg.sub.Message``)."""
    return is_valid_path(name)
