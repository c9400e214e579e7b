"""Field classifier — maps a field descriptor onto a ``FieldCategory``."""

from __future__ import annotations

from .core import FieldCategory, FieldDescriptor


def classify(field: FieldDescriptor) -> FieldCategory:
    """Return the category of *field*.

    Maps are physically repeated key/value entry structures in most schema
    systems, so ``is_map`` is checked before the generic repeated rule.

    ::

        classify(map<string, int32> labels)   → MAP
        classify(repeated Method methods)     → LIST
        classify(SourceContext source_ctx)    → STRUCTURE
        classify(int64 seconds)               → SCALAR
    """
    if field.is_map:
        return FieldCategory.MAP
    if field.is_repeated:
        return FieldCategory.LIST
    if field.kind.is_structure:
        return FieldCategory.STRUCTURE
    return FieldCategory.SCALAR
