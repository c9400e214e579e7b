"""Ordering policy — field order within a structure and map key order.

Two independent facets:

* **Fields** are always processed by ascending declared field number.  The
  folded result is either a ``dict`` (default) or a ``list[KeyValue]`` that
  keeps that order.
* **Map keys** have no inherent order.  The helpers here give map hooks a
  canonical order derived from the key kind; the walker never imposes it.

Canonical key order::

    BOOL                  False < True
    integers / ENUM       numeric ascending
    FLOAT / DOUBLE        numeric ascending, NaN last
    STRING / BYTES        byte-wise lexicographic (text as UTF-8)
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, List, Mapping, Tuple, Union

from .core import (
    FLOAT_KINDS,
    INTEGER_KINDS,
    ConfigurationError,
    FieldDescriptor,
    KeyValue,
    Kind,
    StructureDescriptor,
)


# ─────────────────────────────────────────────────────────────────────────────
# Field ordering
# ─────────────────────────────────────────────────────────────────────────────


def fields_by_number(descriptor: StructureDescriptor) -> List[FieldDescriptor]:
    """Fields of *descriptor* sorted by declared number, not declaration order."""
    return sorted(descriptor.fields, key=lambda f: f.number)


def order_pairs(pairs: Iterable[KeyValue], keep_order: bool) -> Union[List[KeyValue], dict]:
    """Fold converted fields into the structure-level result."""
    if keep_order:
        return [KeyValue(*kv) for kv in pairs]
    return {k: v for k, v in pairs}


# ─────────────────────────────────────────────────────────────────────────────
# Map key ordering
# ─────────────────────────────────────────────────────────────────────────────


def _bool_key(x: Any) -> int:
    if not isinstance(x, bool):
        raise ConfigurationError(f"expected bool map key, got {type(x).__name__}")
    return int(x)


def _int_key(x: Any) -> int:
    if isinstance(x, bool) or not isinstance(x, int):
        raise ConfigurationError(f"expected integer map key, got {type(x).__name__}")
    return x


def _float_key(x: Any) -> Tuple[bool, float]:
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        raise ConfigurationError(f"expected float map key, got {type(x).__name__}")
    # NaN sorts after every number and ties with other NaNs.
    if math.isnan(x):
        return True, 0.0
    return False, float(x)


def _bytes_key(x: Any) -> bytes:
    if isinstance(x, str):
        return x.encode("utf-8")
    if isinstance(x, (bytes, bytearray)):
        return bytes(x)
    raise ConfigurationError(f"expected text or bytes map key, got {type(x).__name__}")


def map_key_sort_key(kind: Kind) -> Callable[[Any], Any]:
    """Return a ``sorted(key=…)`` function for map keys of *kind*."""
    if kind == Kind.BOOL:
        return _bool_key
    if kind in INTEGER_KINDS:
        return _int_key
    if kind in FLOAT_KINDS:
        return _float_key
    if kind in (Kind.STRING, Kind.BYTES):
        return _bytes_key
    raise ConfigurationError(f"unsupported map key kind {Kind(kind).name}")


def _key_kind(field: FieldDescriptor) -> Kind:
    key_field = field.map_key
    if key_field is None:
        raise ConfigurationError(f"field {field.name!r} is not a map field")
    return key_field.kind


def sort_map_keys(field: FieldDescriptor, keys: Iterable[Any]) -> List[Any]:
    """Sort the raw *keys* of map *field* in canonical order."""
    return sorted(keys, key=map_key_sort_key(_key_kind(field)))


def ordered_map_items(field: FieldDescriptor, association: Mapping[Any, Any]) -> List[Tuple[Any, Any]]:
    """``(key, value)`` pairs of *association* in canonical key order."""
    return [(k, association[k]) for k in sort_map_keys(field, association.keys())]
