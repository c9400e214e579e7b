"""Keyword constructors for ``Walker``.

``build_walker`` turns flags and hook tables into a frozen ``WalkerConfig``.
Hooks the caller leaves out come from ``converters``, parameterised by the
``keep_empty`` / ``keep_order`` flags.

Customisation points:

* **scalar_funcs**    – ``{Kind: fn}`` per scalar kind.
* **default_func**    – fallback for scalar kinds without their own function.
* **structure_func**  – ``(field, [KeyValue, …]) → R``.
* **list_func**       – ``(field, [R, …]) → R``.
* **map_func**        – ``(field, {key: R}) → R``.
* **path_overrides**  – ``{"a.b": fn}`` or ``[("a.b", fn), …]``.
* **type_overrides**  – ``{"pkg.Message": fn}`` or pairs.
* **max_depth**, **depth_overrides** – recursion bounds.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .converters import basic_list_func, basic_map_func, basic_scalar_func, basic_structure_func
from .core import Kind, ListFunc, MapFunc, ScalarFunc, SchemaHost, StructureFunc
from .depth import DEFAULT_MAX_DEPTH
from .overrides import Entries, normalize_entries
from .settings import WalkerSettings
from .walker import Walker, WalkerConfig


def build_walker(
        *,
        scalar_funcs: Optional[Mapping[Kind, ScalarFunc]] = None,
        default_func: Optional[ScalarFunc] = None,
        structure_func: Optional[StructureFunc] = None,
        list_func: Optional[ListFunc] = None,
        map_func: Optional[MapFunc] = None,
        path_overrides: Entries = None,
        type_overrides: Entries = None,
        keep_empty: bool = False,
        keep_order: bool = False,
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
        depth_overrides: Optional[Mapping[str, int]] = None,
        host: Optional[SchemaHost] = None,
) -> Walker:
    """Assemble a ``Walker``.

    What gets wired
    ---------------
    default_func    ``basic_scalar_func(keep_empty)`` — identity, drops zero
                    values unless *keep_empty*.
    structure_func  ``basic_structure_func(keep_empty, keep_order)`` —
                    ``dict``, or ``list[KeyValue]`` by field number.
    list_func       ``basic_list_func(keep_empty)``.
    map_func        ``basic_map_func(keep_empty)``.
    host            ``NativeHost`` unless given.

    Args:
        keep_empty:  Retain default scalars and empty containers.
        keep_order:  Default structure results keep field-number order.
        max_depth:   Nested structure crossings allowed below the root.
                     ``None`` → unbounded, negative → ``DEFAULT_MAX_DEPTH``.

    Returns:
        Walker ready for ``apply`` / ``apply_descriptor``.

    Example::

        walker = build_walker(
            host=ProtobufHost(),
            path_overrides={"methods.name": lambda fd, v: v.upper()},
        )
        walker.apply(api)
        # → {"name": "foo", "methods": [{"name": "FOO_METHOD"}, …]}
    """
    config = WalkerConfig(
        default_func=default_func or basic_scalar_func(keep_empty),
        structure_func=structure_func or basic_structure_func(keep_empty, keep_order),
        list_func=list_func or basic_list_func(keep_empty),
        map_func=map_func or basic_map_func(keep_empty),
        scalar_funcs=normalize_entries(scalar_funcs, "scalar func"),
        path_overrides=normalize_entries(path_overrides, "path override"),
        type_overrides=normalize_entries(type_overrides, "type override"),
        keep_empty=keep_empty,
        keep_order=keep_order,
        max_depth=max_depth,
        depth_overrides=depth_overrides or {},
    )
    return Walker(config, host=host)


def build_walker_from_settings(settings: WalkerSettings, **hooks: Any) -> Walker:
    """``build_walker`` with flags and depth bounds taken from *settings*.

    *hooks* are passed through (``scalar_funcs``, ``path_overrides``, ``host`` …).
    """
    return build_walker(
        keep_empty=settings.keep_empty,
        keep_order=settings.keep_order,
        max_depth=settings.max_depth,
        depth_overrides=settings.depth_overrides,
        **hooks,
    )
