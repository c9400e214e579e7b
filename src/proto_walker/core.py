"""Core abstractions: kinds, field categories, host interfaces and errors.

This module owns every *interface* in the system.  Nothing here depends on a
concrete schema library — host adapters live in the ``hosts`` sub-package,
the engine in ``walker`` and the wiring in ``factory``.

Traversal flow (``Walker.apply`` entry point)::

    host object (message / descriptor)
      │
      ▼
    SchemaHost.instance(obj) / SchemaHost.descriptor(obj)
      │
      ▼
    for field in fields_by_number(descriptor):
        classify(field)  → SCALAR | STRUCTURE | LIST | MAP
        DepthGuard.enter(path, budget)          ← structures only
        OverrideResolver.resolve(path, type)    ← path > type > default
      │
      ▼
    structure_func(None, [KeyValue, …])  → caller's representation
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Callable, List, NamedTuple, Optional, Sequence


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────


class WalkerError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(WalkerError):
    """Fatal misconfiguration: a hook, override or value that cannot be used.

    Raised at construction time whenever possible (bad kinds, malformed paths,
    negative depth overrides) and at traversal time when a scalar's runtime
    representation does not match its declared kind.
    """


# ─────────────────────────────────────────────────────────────────────────────
# Kinds and categories
# ─────────────────────────────────────────────────────────────────────────────


class Kind(enum.IntEnum):
    """Declared kind of a field.

    Numeric values match ``google.protobuf.descriptor.FieldDescriptor.TYPE_*``
    so that protobuf descriptors map onto kinds without a lookup table.
    """

    DOUBLE = 1
    FLOAT = 2
    INT64 = 3
    UINT64 = 4
    INT32 = 5
    FIXED64 = 6
    FIXED32 = 7
    BOOL = 8
    STRING = 9
    GROUP = 10
    MESSAGE = 11
    BYTES = 12
    UINT32 = 13
    ENUM = 14
    SFIXED32 = 15
    SFIXED64 = 16
    SINT32 = 17
    SINT64 = 18

    @property
    def is_structure(self) -> bool:
        return self in (Kind.MESSAGE, Kind.GROUP)

    @property
    def is_scalar(self) -> bool:
        return not self.is_structure


#: Integer family, enums included (enums are integers at runtime).
INTEGER_KINDS = frozenset({
    Kind.INT32, Kind.INT64, Kind.UINT32, Kind.UINT64,
    Kind.SINT32, Kind.SINT64, Kind.FIXED32, Kind.FIXED64,
    Kind.SFIXED32, Kind.SFIXED64, Kind.ENUM,
})

FLOAT_KINDS = frozenset({Kind.FLOAT, Kind.DOUBLE})


class FieldCategory(enum.Enum):
    """Closed set of shapes the walker dispatches on."""

    SCALAR = "scalar"
    STRUCTURE = "structure"
    LIST = "list"
    MAP = "map"


def as_kind(value: Any) -> Kind:
    """Coerce *value* to a ``Kind`` or raise ``ConfigurationError``."""
    try:
        return Kind(value)
    except ValueError:
        raise ConfigurationError(f"unknown kind: {value!r}") from None


# ─────────────────────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────────────────────


class KeyValue(NamedTuple):
    """One converted field: ``(field name, converted value)``."""

    key: str
    value: Any


class MapShape(dict):
    """Schema-only rendition of a map field: the converted map-entry structure.

    Handed to map hooks instead of a real key → value association when no
    instance is being walked.  Compares equal to a plain ``dict``.
    """


# ─────────────────────────────────────────────────────────────────────────────
# Host schema capability
# ─────────────────────────────────────────────────────────────────────────────


class FieldDescriptor(ABC):
    """Static description of one field.

    Any schema system can satisfy this interface; see ``hosts.native`` and
    ``hosts.protobuf``.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def number(self) -> int:
        """Declared numeric identifier, unique within the owning structure."""

    @property
    @abstractmethod
    def kind(self) -> Kind: ...

    @property
    @abstractmethod
    def is_repeated(self) -> bool: ...

    @property
    @abstractmethod
    def message(self) -> Optional['StructureDescriptor']:
        """Nested structure descriptor (structures and maps), else ``None``."""

    @property
    def is_map(self) -> bool:
        return False

    @property
    def map_key(self) -> Optional['FieldDescriptor']:
        """The ``key`` field of the map-entry structure."""
        if not self.is_map or self.message is None:
            return None
        return self.message.field_by_name("key")

    @property
    def map_value(self) -> Optional['FieldDescriptor']:
        """The ``value`` field of the map-entry structure."""
        if not self.is_map or self.message is None:
            return None
        return self.message.field_by_name("value")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}={self.number} {self.kind.name}>"


class StructureDescriptor(ABC):
    """Static description of a named composite type."""

    @property
    @abstractmethod
    def full_name(self) -> str:
        """Globally unique type name (e.g. ``google.protobuf.Timestamp``)."""

    @property
    @abstractmethod
    def fields(self) -> Sequence[FieldDescriptor]:
        """Fields in declaration order."""

    def field_by_name(self, name: str) -> Optional[FieldDescriptor]:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.full_name}>"


class StructureInstance(ABC):
    """A concrete value of some ``StructureDescriptor``."""

    @property
    @abstractmethod
    def descriptor(self) -> StructureDescriptor: ...

    @abstractmethod
    def get(self, field: FieldDescriptor) -> Any:
        """Return the raw value of *field*.

        * scalar       → plain Python value (``bool``, ``int``, ``float``,
                         ``str``, ``bytes``)
        * structure    → ``StructureInstance`` or ``None`` when absent
        * list         → sequence of scalars / ``StructureInstance``
        * map          → mapping of raw key → scalar / ``StructureInstance``
        """


class SchemaHost(ABC):
    """Adapts a schema library's objects to the interfaces above."""

    @abstractmethod
    def instance(self, obj: Any) -> StructureInstance: ...

    @abstractmethod
    def descriptor(self, obj: Any) -> StructureDescriptor: ...


# ─────────────────────────────────────────────────────────────────────────────
# Hook signatures
# ─────────────────────────────────────────────────────────────────────────────

#: ``(field, raw scalar or None) → converted``
ScalarFunc = Callable[[FieldDescriptor, Any], Any]

#: ``(field or None for the root, converted children) → converted``
StructureFunc = Callable[[Optional[FieldDescriptor], List[KeyValue]], Any]

#: ``(field, converted elements) → converted``
ListFunc = Callable[[FieldDescriptor, List[Any]], Any]

#: ``(field, raw key → converted value) → converted``
MapFunc = Callable[[FieldDescriptor, dict], Any]
