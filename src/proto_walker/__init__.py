from .classifier import classify
from .converters import (
    basic_list_func,
    basic_map_func,
    basic_scalar_func,
    basic_structure_func,
    check_scalar,
    is_default_scalar,
    key_value_map_func,
)
from .core import (
    ConfigurationError,
    FieldCategory,
    FieldDescriptor,
    KeyValue,
    Kind,
    MapShape,
    SchemaHost,
    StructureDescriptor,
    StructureInstance,
    WalkerError,
)
from .depth import DEFAULT_MAX_DEPTH, DepthGuard
from .factory import build_walker, build_walker_from_settings
from .hosts import Field, NativeHost, ProtobufHost, Record, Structure
from .ordering import fields_by_number, map_key_sort_key, order_pairs, ordered_map_items, sort_map_keys
from .overrides import OverrideResolver
from .paths import join_path
from .settings import WalkerSettings, load_settings, settings_from_mapping
from .walker import Walker, WalkerConfig

__all__ = [
    # core
    "ConfigurationError",
    "FieldCategory",
    "FieldDescriptor",
    "KeyValue",
    "Kind",
    "MapShape",
    "SchemaHost",
    "StructureDescriptor",
    "StructureInstance",
    "WalkerError",
    # engine
    "classify",
    "DEFAULT_MAX_DEPTH",
    "DepthGuard",
    "OverrideResolver",
    "Walker",
    "WalkerConfig",
    "join_path",
    # ordering
    "fields_by_number",
    "map_key_sort_key",
    "order_pairs",
    "ordered_map_items",
    "sort_map_keys",
    # converters
    "basic_list_func",
    "basic_map_func",
    "basic_scalar_func",
    "basic_structure_func",
    "check_scalar",
    "is_default_scalar",
    "key_value_map_func",
    # factory / settings
    "build_walker",
    "build_walker_from_settings",
    "WalkerSettings",
    "load_settings",
    "settings_from_mapping",
    # hosts
    "Field",
    "NativeHost",
    "ProtobufHost",
    "Record",
    "Structure",
]
