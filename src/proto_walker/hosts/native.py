"""In-memory schema host.

Plain Python descriptors and dict-backed instances, for schemas that do not
come from a schema library (and for tests).  Self-referential schemas are
built by adding fields after the structure exists::

    node = Structure("tree.Node")
    node.add(
        Field("label", 1, Kind.STRING),
        Field("children", 2, Kind.MESSAGE, repeated=True, message=node),
    )
    Record(node, label="root", children=[Record(node, label="leaf")])
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Tuple

from ..core import (
    FLOAT_KINDS,
    INTEGER_KINDS,
    ConfigurationError,
    FieldDescriptor,
    Kind,
    SchemaHost,
    StructureDescriptor,
    StructureInstance,
    as_kind,
)


def _zero(kind: Kind) -> Any:
    if kind == Kind.BOOL:
        return False
    if kind in INTEGER_KINDS:
        return 0
    if kind in FLOAT_KINDS:
        return 0.0
    if kind == Kind.STRING:
        return ""
    if kind == Kind.BYTES:
        return b""
    return None


class Field(FieldDescriptor):
    """Field descriptor with explicit attributes."""

    def __init__(
            self,
            name: str,
            number: int,
            kind: Kind,
            *,
            repeated: bool = False,
            message: Optional['Structure'] = None,
            is_map: bool = False,
    ) -> None:
        self._name = name
        self._number = number
        self._kind = as_kind(kind)
        self._repeated = repeated
        self._message = message
        self._is_map = is_map

    @classmethod
    def map_field(
            cls,
            name: str,
            number: int,
            key_kind: Kind,
            value_kind: Kind,
            *,
            value_message: Optional['Structure'] = None,
            owner: str = "",
    ) -> 'Field':
        """Build a map field backed by a synthetic ``<Name>Entry`` structure."""
        entry_name = "".join(part.capitalize() for part in name.split("_")) + "Entry"
        entry = Structure(
            f"{owner}.{entry_name}" if owner else entry_name,
            [
                Field("key", 1, key_kind),
                Field("value", 2, value_kind, message=value_message),
            ],
        )
        return cls(name, number, Kind.MESSAGE, repeated=True, message=entry, is_map=True)

    @property
    def name(self) -> str:
        return self._name

    @property
    def number(self) -> int:
        return self._number

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def is_repeated(self) -> bool:
        return self._repeated

    @property
    def is_map(self) -> bool:
        return self._is_map

    @property
    def message(self) -> Optional['Structure']:
        return self._message

    def zero(self) -> Any:
        """Value read for this field when a record does not set it."""
        if self._is_map:
            return {}
        if self._repeated:
            return []
        return _zero(self._kind)


class Structure(StructureDescriptor):
    """Named structure; fields keep their declaration order."""

    def __init__(self, full_name: str, fields: Sequence[Field] = ()) -> None:
        self._full_name = full_name
        self._fields: list[Field] = list(fields)

    def add(self, *fields: Field) -> 'Structure':
        self._fields.extend(fields)
        return self

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(self._fields)


class Record(StructureInstance):
    """Instance of a ``Structure`` backed by a ``name → value`` dict.

    Unset fields read as their zero value: ``0``, ``""``, ``[]``, ``{}`` …
    and ``None`` for nested structures.
    """

    def __init__(
            self,
            descriptor: Structure,
            values: Optional[Mapping[str, Any]] = None,
            **kwargs: Any,
    ) -> None:
        self._descriptor = descriptor
        self._values = {**(values or {}), **kwargs}

    @property
    def descriptor(self) -> Structure:
        return self._descriptor

    def get(self, field: FieldDescriptor) -> Any:
        if field.name in self._values:
            return self._values[field.name]
        return field.zero() if isinstance(field, Field) else None

    def __repr__(self) -> str:
        return f"Record({self._descriptor.full_name}, {self._values!r})"


class NativeHost(SchemaHost):
    """Accepts objects that already implement the core interfaces."""

    def instance(self, obj: Any) -> StructureInstance:
        if isinstance(obj, StructureInstance):
            return obj
        raise ConfigurationError(f"cannot walk {type(obj).__name__}: not a StructureInstance")

    def descriptor(self, obj: Any) -> StructureDescriptor:
        if isinstance(obj, StructureDescriptor):
            return obj
        if isinstance(obj, StructureInstance):
            return obj.descriptor
        raise ConfigurationError(f"cannot describe {type(obj).__name__}: not a StructureDescriptor")
