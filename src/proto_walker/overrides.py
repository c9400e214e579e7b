"""Override resolution — picks the conversion hook for one location.

Precedence, highest first::

    1. path override        keyed by the exact structural path ("methods.name")
    2. type override        keyed by the structure's full type name
       / scalar-kind func   keyed by ``Kind`` (scalars)
    3. kind default         ``structure_func`` / ``default_func``

Exports
-------
OverrideResolver
    Immutable lookup tables built once per walker configuration.

normalize_entries
    Turn a mapping or an iterable of ``(key, fn)`` pairs into a plain dict,
    last registration winning.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

from .core import (
    ConfigurationError,
    Kind,
    ListFunc,
    MapFunc,
    ScalarFunc,
    StructureFunc,
    as_kind,
)
from .paths import is_valid_path, is_valid_type_name

logger = logging.getLogger(__name__)

Entries = Union[Mapping[Any, Callable], Iterable[Tuple[Any, Callable]], None]


def normalize_entries(entries: Entries, label: str) -> dict[Any, Callable]:
    """Collect *entries* into a dict; a repeated key replaces the earlier one."""
    if entries is None:
        return {}
    pairs = entries.items() if isinstance(entries, Mapping) else entries
    out: dict[Any, Callable] = {}
    for key, fn in pairs:
        if not callable(fn):
            raise ConfigurationError(f"{label} for {key!r} is not callable: {fn!r}")
        if key in out:
            logger.warning("%s for %r registered twice; last registration wins", label, key)
        out[key] = fn
    return out


def _require_callable(fn: Any, label: str) -> None:
    if not callable(fn):
        raise ConfigurationError(f"{label} is not callable: {fn!r}")


class OverrideResolver:
    """Resolve the hook for a path / type name / scalar kind.

    All tables are wrapped in ``MappingProxyType`` — they cannot change once
    the resolver exists, so one resolver can serve concurrent traversals.
    """

    def __init__(
            self,
            *,
            default_func: ScalarFunc,
            structure_func: StructureFunc,
            list_func: ListFunc,
            map_func: MapFunc,
            scalar_funcs: Entries = None,
            path_overrides: Entries = None,
            type_overrides: Entries = None,
    ) -> None:
        _require_callable(default_func, "default_func")
        _require_callable(structure_func, "structure_func")
        _require_callable(list_func, "list_func")
        _require_callable(map_func, "map_func")
        self.default_func = default_func
        self.structure_func = structure_func
        self.list_func = list_func
        self.map_func = map_func

        kinds: dict[Kind, ScalarFunc] = {}
        for key, fn in normalize_entries(scalar_funcs, "scalar func").items():
            kind = as_kind(key)
            if kind.is_structure:
                raise ConfigurationError(f"scalar func registered for non-scalar kind {kind.name}")
            kinds[kind] = fn
        self._scalar_funcs = MappingProxyType(kinds)

        paths = normalize_entries(path_overrides, "path override")
        for path in paths:
            if not is_valid_path(path):
                raise ConfigurationError(f"invalid override path: {path!r}")
        self._paths = MappingProxyType(paths)

        types = normalize_entries(type_overrides, "type override")
        for name in types:
            if not is_valid_type_name(name):
                raise ConfigurationError(f"invalid override type name: {name!r}")
        self._types = MappingProxyType(types)

    # -- introspection ------------------------------------------------------

    @property
    def scalar_funcs(self) -> Mapping[Kind, ScalarFunc]:
        return self._scalar_funcs

    @property
    def path_overrides(self) -> Mapping[str, Callable]:
        return self._paths

    @property
    def type_overrides(self) -> Mapping[str, Callable]:
        return self._types

    # -- resolution ---------------------------------------------------------

    def resolve(
            self,
            path: str,
            type_name: Optional[str] = None,
            kind: Optional[Kind] = None,
    ) -> Optional[Callable]:
        """Return the most specific configured override, or ``None``.

        Kind defaults are *not* considered here; see the ``*_hook`` helpers.
        """
        fn = self._paths.get(path)
        if fn is not None:
            return fn
        if type_name is not None:
            fn = self._types.get(type_name)
            if fn is not None:
                return fn
        if kind is not None:
            return self._scalar_funcs.get(kind)
        return None

    def scalar_hook(self, path: str, kind: Kind) -> ScalarFunc:
        return self.resolve(path, kind=kind) or self.default_func

    def structure_hook(self, path: str, type_name: str) -> StructureFunc:
        return self.resolve(path, type_name=type_name) or self.structure_func

    def list_hook(self, path: str) -> ListFunc:
        # A path override on a repeated field targets its elements, never
        # the collection.
        return self.list_func

    def map_hook(self, path: str) -> MapFunc:
        return self._paths.get(path) or self.map_func
