"""Schema host for Protocol Buffers (``google.protobuf``).

Wraps protobuf descriptors and messages in the core interfaces.  Values are
read the way protobuf exposes them: an unset singular message field reads as
its default (empty) message, enums read as ``int``.

::

    walker = build_walker(host=ProtobufHost())
    walker.apply(timestamp_pb2.Timestamp(seconds=1, nanos=2))
    # → {"seconds": 1, "nanos": 2}
    walker.apply_descriptor(timestamp_pb2.Timestamp.DESCRIPTOR)
    # → {"seconds": None, "nanos": None}
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from google.protobuf import descriptor as pb_descriptor
from google.protobuf.message import Message

from ..core import (
    ConfigurationError,
    FieldDescriptor,
    Kind,
    SchemaHost,
    StructureDescriptor,
    StructureInstance,
    as_kind,
)


class ProtobufField(FieldDescriptor):
    """``FieldDescriptor`` view of a ``google.protobuf.descriptor.FieldDescriptor``."""

    def __init__(self, fd: pb_descriptor.FieldDescriptor) -> None:
        self._fd = fd

    @property
    def raw(self) -> pb_descriptor.FieldDescriptor:
        return self._fd

    @property
    def name(self) -> str:
        return self._fd.name

    @property
    def number(self) -> int:
        return self._fd.number

    @property
    def kind(self) -> Kind:
        return as_kind(self._fd.type)

    @property
    def is_repeated(self) -> bool:
        # Newer protobuf releases deprecate ``label`` in favour of ``is_repeated``.
        repeated = getattr(self._fd, "is_repeated", None)
        if repeated is None:
            return self._fd.label == pb_descriptor.FieldDescriptor.LABEL_REPEATED
        return bool(repeated)

    @property
    def is_map(self) -> bool:
        entry = self._fd.message_type
        return entry is not None and entry.GetOptions().map_entry

    @property
    def message(self) -> Optional['ProtobufStructure']:
        if self._fd.message_type is None:
            return None
        return ProtobufStructure(self._fd.message_type)


class ProtobufStructure(StructureDescriptor):
    """``StructureDescriptor`` view of a protobuf message ``Descriptor``."""

    def __init__(self, descriptor: pb_descriptor.Descriptor) -> None:
        self._descriptor = descriptor

    @property
    def raw(self) -> pb_descriptor.Descriptor:
        return self._descriptor

    @property
    def full_name(self) -> str:
        return self._descriptor.full_name

    @property
    def fields(self) -> Tuple[ProtobufField, ...]:
        return tuple(ProtobufField(fd) for fd in self._descriptor.fields)

    def field_by_name(self, name: str) -> Optional[ProtobufField]:
        fd = self._descriptor.fields_by_name.get(name)
        return ProtobufField(fd) if fd is not None else None


class ProtobufInstance(StructureInstance):
    """``StructureInstance`` view of a protobuf ``Message``."""

    def __init__(self, message: Message) -> None:
        self._message = message

    @property
    def raw(self) -> Message:
        return self._message

    @property
    def descriptor(self) -> ProtobufStructure:
        return ProtobufStructure(self._message.DESCRIPTOR)

    def get(self, field: FieldDescriptor) -> Any:
        value = getattr(self._message, field.name)
        if field.is_map:
            if field.map_value.kind.is_structure:
                return {k: ProtobufInstance(v) for k, v in value.items()}
            return dict(value)
        if field.kind.is_structure:
            if field.is_repeated:
                return [ProtobufInstance(m) for m in value]
            return ProtobufInstance(value)
        if field.is_repeated:
            return list(value)
        return value


class ProtobufHost(SchemaHost):
    """Adapts protobuf messages, message classes and descriptors.

    Objects that already implement the core interfaces pass through, so a
    protobuf walker can still walk native ``Record`` instances.
    """

    def instance(self, obj: Any) -> StructureInstance:
        if isinstance(obj, StructureInstance):
            return obj
        if isinstance(obj, Message):
            return ProtobufInstance(obj)
        raise ConfigurationError(f"cannot walk {type(obj).__name__}: not a protobuf message")

    def descriptor(self, obj: Any) -> StructureDescriptor:
        if isinstance(obj, StructureDescriptor):
            return obj
        if isinstance(obj, StructureInstance):
            return obj.descriptor
        if isinstance(obj, pb_descriptor.Descriptor):
            return ProtobufStructure(obj)
        desc = getattr(obj, "DESCRIPTOR", None)
        if isinstance(desc, pb_descriptor.Descriptor):
            return ProtobufStructure(desc)
        raise ConfigurationError(f"cannot describe {type(obj).__name__}: not a protobuf descriptor")
