"""Built-in conversion hooks used when the caller supplies none.

All ``basic_*`` hooks are identity conversions that honour one
configuration-wide ``keep_empty`` flag: with ``keep_empty=False`` default
scalars (``0``, ``""``, ``False`` …), empty structures, empty lists and empty
maps become ``None`` and are therefore omitted from the parent.

Exports
-------
basic_scalar_func, basic_structure_func, basic_list_func, basic_map_func
    Default hooks, one per field category.

key_value_map_func
    Map hook producing ``[{"key": k, "value": v}, …]`` rows in canonical key
    order (see ``ordering``).

is_default_scalar, check_scalar
    Runtime scalar inspection; both raise ``ConfigurationError`` on values
    they do not recognise.
"""

from __future__ import annotations

from typing import Any, List, Optional

from .core import (
    FLOAT_KINDS,
    INTEGER_KINDS,
    ConfigurationError,
    FieldDescriptor,
    KeyValue,
    Kind,
    ListFunc,
    MapFunc,
    MapShape,
    ScalarFunc,
    StructureFunc,
)
from .ordering import order_pairs, ordered_map_items

# ─────────────────────────────────────────────────────────────────────────────
# Scalar inspection
# ─────────────────────────────────────────────────────────────────────────────


def is_default_scalar(value: Any) -> bool:
    """Return ``True`` if *value* is the zero value of its runtime type.

    Raises ``ConfigurationError`` for runtime types no scalar kind maps to —
    that means the host library and the hooks disagree, which must not be
    silently coerced.
    """
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (bytes, bytearray)):
        return len(value) == 0
    raise ConfigurationError(f"unexpected scalar type {type(value).__name__}")


def _matches_kind(kind: Kind, value: Any) -> bool:
    if kind == Kind.BOOL:
        return isinstance(value, bool)
    if kind in INTEGER_KINDS:
        return isinstance(value, int) and not isinstance(value, bool)
    if kind in FLOAT_KINDS:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if kind == Kind.STRING:
        return isinstance(value, str)
    if kind == Kind.BYTES:
        return isinstance(value, (bytes, bytearray))
    return False


def check_scalar(kind: Kind, value: Any, path: str = "") -> None:
    """Raise ``ConfigurationError`` unless *value* is a valid *kind* scalar."""
    if not _matches_kind(kind, value):
        where = f" at {path!r}" if path else ""
        raise ConfigurationError(
            f"scalar{where} declared {Kind(kind).name} holds {type(value).__name__} {value!r}"
        )


# ─────────────────────────────────────────────────────────────────────────────
# Default hooks
# ─────────────────────────────────────────────────────────────────────────────


def basic_scalar_func(keep_empty: bool = False) -> ScalarFunc:
    """Identity for scalars; ``None`` (no instance) stays ``None``."""

    def convert(_field: FieldDescriptor, value: Any) -> Any:
        if value is None or (not keep_empty and is_default_scalar(value)):
            return None
        return value

    return convert


def basic_structure_func(keep_empty: bool = False, keep_order: bool = False) -> StructureFunc:
    """Fold converted children into a ``dict`` or an ordered ``list[KeyValue]``."""

    def convert(_field: Optional[FieldDescriptor], pairs: List[KeyValue]) -> Any:
        if not keep_empty and not pairs:
            return None
        return order_pairs(pairs, keep_order)

    return convert


def basic_list_func(keep_empty: bool = False) -> ListFunc:
    def convert(_field: FieldDescriptor, items: List[Any]) -> Any:
        if not keep_empty and not items:
            return None
        return list(items)

    return convert


def basic_map_func(keep_empty: bool = False) -> MapFunc:
    def convert(_field: FieldDescriptor, association: dict) -> Any:
        if not keep_empty and not association:
            return None
        return association

    return convert


def key_value_map_func(keep_empty: bool = False, sort_keys: bool = True) -> MapFunc:
    """Render a map as ``[{"key": k, "value": v}, …]`` rows.

    With *sort_keys* the rows follow the canonical key order, so equal maps
    always render identically.  A schema-only ``MapShape`` has no keys to
    sort and is returned as a plain ``dict``.
    """

    def convert(field: FieldDescriptor, association: dict) -> Any:
        if isinstance(association, MapShape):
            return dict(association)
        if not keep_empty and not association:
            return None
        items = ordered_map_items(field, association) if sort_keys else list(association.items())
        return [{"key": k, "value": v} for k, v in items]

    return convert
