"""Walker — the orchestrator / public entry point.

Composes the classifier, depth guard, override resolver and ordering policy
into one recursive descent over a structure descriptor and, optionally, an
instance of it.

Algorithm (``_convert_structure``)::

    for field in fields_by_number(descriptor):
        SCALAR     check runtime kind → drop defaults unless keep_empty
                   → path / kind / default hook
        STRUCTURE  depth guard → recurse → path / type / structure_func
        LIST       each element by the non-repeated rule, drop None → list_func
        MAP        each value at "<path>.value", keys unchanged
                   → path override or map_func
    instance walk:  omit fields that converted to None; unless keep_empty,
                    empty structures, lists and maps skip their hook too
    schema walk:    keep every field, None is the "no instance" marker
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional

from .classifier import classify
from .core import (
    FieldCategory,
    FieldDescriptor,
    KeyValue,
    Kind,
    ListFunc,
    MapFunc,
    MapShape,
    ScalarFunc,
    SchemaHost,
    StructureDescriptor,
    StructureFunc,
    StructureInstance,
)
from .converters import check_scalar, is_default_scalar
from .depth import DEFAULT_MAX_DEPTH, DepthGuard
from .hosts.native import NativeHost
from .ordering import fields_by_number
from .overrides import OverrideResolver
from .paths import join_path
from .validation import validate_against

logger = logging.getLogger(__name__)


def _frozen(mapping: Optional[Mapping]) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class WalkerConfig:
    """Everything a ``Walker`` needs; read-only once built.

    Use ``factory.build_walker`` rather than filling this in by hand — it
    derives the default hooks from ``keep_empty`` / ``keep_order``.
    """

    default_func: ScalarFunc
    structure_func: StructureFunc
    list_func: ListFunc
    map_func: MapFunc
    scalar_funcs: Mapping[Kind, ScalarFunc] = field(default_factory=dict)
    path_overrides: Mapping[str, Callable] = field(default_factory=dict)
    type_overrides: Mapping[str, Callable] = field(default_factory=dict)
    keep_empty: bool = False
    keep_order: bool = False
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    depth_overrides: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("scalar_funcs", "path_overrides", "type_overrides", "depth_overrides"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))


class Walker:
    """Walk a structure instance or descriptor into a caller-defined result.

    One walker may be reused for any number of traversals, concurrently too:
    the only per-traversal state (path, depth budget, instance) is passed on
    the call stack.
    """

    def __init__(self, config: WalkerConfig, host: Optional[SchemaHost] = None) -> None:
        if host is None:
            host = NativeHost()
        self.config = config
        self.host = host
        self.guard = DepthGuard(config.max_depth, config.depth_overrides)
        self.resolver = OverrideResolver(
            default_func=config.default_func,
            structure_func=config.structure_func,
            list_func=config.list_func,
            map_func=config.map_func,
            scalar_funcs=config.scalar_funcs,
            path_overrides=config.path_overrides,
            type_overrides=config.type_overrides,
        )
        logger.debug(
            "walker ready: host=%s keep_empty=%s keep_order=%s max_depth=%s "
            "path_overrides=%d type_overrides=%d depth_overrides=%d",
            type(host).__name__, config.keep_empty, config.keep_order, config.max_depth,
            len(config.path_overrides), len(config.type_overrides), len(config.depth_overrides),
        )

    # -- public API ---------------------------------------------------------

    def apply(self, instance: Any) -> Any:
        """Convert a structure *instance* (anything the host can adapt)."""
        inst = self.host.instance(instance)
        pairs = self._convert_structure(inst.descriptor, inst, "", self.guard.initial())
        if not pairs and not self.config.keep_empty:
            return None
        return self.resolver.structure_func(None, pairs)

    def apply_descriptor(self, descriptor: Any) -> Any:
        """Convert a schema alone; every value is treated as absent.

        The result has the shape of an ``apply`` result with ``None`` in place
        of every value (``keep_empty`` does not drop these placeholders).
        """
        desc = self.host.descriptor(descriptor)
        pairs = self._convert_structure(desc, None, "", self.guard.initial())
        return self.resolver.structure_func(None, pairs)

    def validate(self, descriptor: Any) -> None:
        """Raise ``ConfigurationError`` if overrides name paths or types that
        do not exist in *descriptor*'s schema."""
        validate_against(self, self.host.descriptor(descriptor))

    # -- recursion ----------------------------------------------------------

    def _convert_structure(
            self,
            descriptor: StructureDescriptor,
            instance: Optional[StructureInstance],
            path: str,
            budget: int,
    ) -> List[KeyValue]:
        live = instance is not None
        pairs: List[KeyValue] = []
        for fd in fields_by_number(descriptor):
            field_path = join_path(path, fd.name)
            raw = instance.get(fd) if live else None
            value = self._convert_field(fd, raw, field_path, budget, live)
            if value is not None or not live:
                pairs.append(KeyValue(fd.name, value))
        return pairs

    def _convert_field(self, fd: FieldDescriptor, raw: Any, path: str, budget: int, live: bool) -> Any:
        category = classify(fd)
        if category is FieldCategory.MAP:
            return self._convert_map(fd, raw, path, budget, live)
        if category is FieldCategory.LIST:
            return self._convert_list(fd, raw, path, budget, live)
        return self._convert_single(fd, raw, path, budget, live)

    def _convert_single(self, fd: FieldDescriptor, raw: Any, path: str, budget: int, live: bool) -> Any:
        """Convert one non-repeated value: a singular field, a list element or
        a map value."""
        if fd.kind.is_structure:
            if live and raw is None:
                return None
            child_budget = self.guard.enter(path, budget)
            if child_budget is None:
                return None
            pairs = self._convert_structure(fd.message, raw if live else None, path, child_budget)
            if live and not pairs and not self.config.keep_empty:
                return None
            return self.resolver.structure_hook(path, fd.message.full_name)(fd, pairs)

        if live:
            check_scalar(fd.kind, raw, path)
            # Default scalars are absent unless retained; no hook sees them.
            if not self.config.keep_empty and is_default_scalar(raw):
                return None
        return self.resolver.scalar_hook(path, fd.kind)(fd, raw if live else None)

    def _convert_list(self, fd: FieldDescriptor, raw: Any, path: str, budget: int, live: bool) -> Any:
        items: List[Any] = []
        if live:
            for element in raw or ():
                converted = self._convert_single(fd, element, path, budget, live)
                if converted is not None:
                    items.append(converted)
            if not items and not self.config.keep_empty:
                return None
        return self.resolver.list_hook(path)(fd, items)

    def _convert_map(self, fd: FieldDescriptor, raw: Any, path: str, budget: int, live: bool) -> Any:
        hook = self.resolver.map_hook(path)
        if not live:
            # The entry structure is a container, not a nested structure: it
            # costs no depth budget.
            entry = self._convert_structure(fd.message, None, path, budget)
            return hook(fd, MapShape(entry))

        value_fd = fd.map_value
        value_path = join_path(path, value_fd.name)
        association: dict = {}
        for key, value in (raw or {}).items():
            converted = self._convert_single(value_fd, value, value_path, budget, live)
            if converted is not None:
                association[key] = converted
        if not association and not self.config.keep_empty:
            return None
        return hook(fd, association)
