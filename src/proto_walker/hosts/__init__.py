"""Host sub-package — adapters from schema libraries to the core interfaces.

native   – in-memory ``Structure`` / ``Field`` / ``Record`` (default host)
protobuf – ``google.protobuf`` descriptors and messages
"""

from .native import Field, NativeHost, Record, Structure
from .protobuf import ProtobufField, ProtobufHost, ProtobufInstance, ProtobufStructure

__all__ = [
    # native
    "Field",
    "NativeHost",
    "Record",
    "Structure",
    # protobuf
    "ProtobufField",
    "ProtobufHost",
    "ProtobufInstance",
    "ProtobufStructure",
]
