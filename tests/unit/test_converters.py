"""Tests for the built-in hooks and scalar inspection."""

import pytest

from proto_walker import (
    ConfigurationError,
    Field,
    KeyValue,
    Kind,
    MapShape,
    basic_list_func,
    basic_map_func,
    basic_scalar_func,
    basic_structure_func,
    check_scalar,
    is_default_scalar,
    key_value_map_func,
)

FD = Field("x", 1, Kind.STRING)


class TestIsDefaultScalar:
    @pytest.mark.parametrize("value", [False, 0, 0.0, "", b""])
    def test_defaults(self, value):
        assert is_default_scalar(value)

    @pytest.mark.parametrize("value", [True, 1, -1, 0.5, "a", b"\x00"])
    def test_non_defaults(self, value):
        assert not is_default_scalar(value)

    def test_unknown_type(self):
        with pytest.raises(ConfigurationError, match="unexpected scalar type"):
            is_default_scalar(object())


class TestCheckScalar:
    @pytest.mark.parametrize("kind, value", [
        (Kind.BOOL, True),
        (Kind.INT32, 7),
        (Kind.ENUM, 2),
        (Kind.DOUBLE, 1.5),
        (Kind.FLOAT, 3),
        (Kind.STRING, "s"),
        (Kind.BYTES, b"b"),
    ])
    def test_accepts(self, kind, value):
        check_scalar(kind, value)

    @pytest.mark.parametrize("kind, value", [
        (Kind.BOOL, 1),
        (Kind.INT64, True),
        (Kind.INT64, "1"),
        (Kind.DOUBLE, "1.0"),
        (Kind.STRING, b"s"),
        (Kind.BYTES, "b"),
    ])
    def test_rejects(self, kind, value):
        with pytest.raises(ConfigurationError, match="declared"):
            check_scalar(kind, value, "a.b")

    def test_message_names_path(self):
        with pytest.raises(ConfigurationError, match="'a.b'"):
            check_scalar(Kind.INT32, "x", "a.b")


class TestBasicHooks:
    def test_scalar_identity(self):
        assert basic_scalar_func()(FD, "v") == "v"

    def test_scalar_default_dropped(self):
        assert basic_scalar_func()(FD, "") is None

    def test_scalar_default_kept(self):
        assert basic_scalar_func(keep_empty=True)(FD, "") == ""

    def test_scalar_absent_stays_absent(self):
        assert basic_scalar_func(keep_empty=True)(FD, None) is None

    def test_structure_dict(self):
        assert basic_structure_func()(None, [KeyValue("a", 1)]) == {"a": 1}

    def test_structure_ordered(self):
        out = basic_structure_func(keep_order=True)(None, [KeyValue("a", 1)])
        assert out == [KeyValue("a", 1)]

    def test_structure_empty(self):
        assert basic_structure_func()(None, []) is None
        assert basic_structure_func(keep_empty=True)(None, []) == {}

    def test_list(self):
        assert basic_list_func()(FD, [1, 2]) == [1, 2]
        assert basic_list_func()(FD, []) is None
        assert basic_list_func(keep_empty=True)(FD, []) == []

    def test_map(self):
        assert basic_map_func()(FD, {"k": 1}) == {"k": 1}
        assert basic_map_func()(FD, {}) is None
        assert basic_map_func(keep_empty=True)(FD, {}) == {}


class TestKeyValueMapFunc:
    """Maps rendered as key/value rows in canonical key order."""

    def test_rows_sorted(self):
        fd = Field.map_field("labels", 1, Kind.STRING, Kind.INT32)
        rows = key_value_map_func()(fd, {"b": 2, "a": 1})
        assert rows == [{"key": "a", "value": 1}, {"key": "b", "value": 2}]

    def test_unsorted(self):
        fd = Field.map_field("labels", 1, Kind.STRING, Kind.INT32)
        rows = key_value_map_func(sort_keys=False)(fd, {"b": 2, "a": 1})
        assert rows == [{"key": "b", "value": 2}, {"key": "a", "value": 1}]

    def test_empty(self):
        fd = Field.map_field("labels", 1, Kind.STRING, Kind.INT32)
        assert key_value_map_func()(fd, {}) is None
        assert key_value_map_func(keep_empty=True)(fd, {}) == []

    def test_schema_shape_passes_through(self):
        fd = Field.map_field("labels", 1, Kind.STRING, Kind.INT32)
        out = key_value_map_func()(fd, MapShape(key=None, value=None))
        assert out == {"key": None, "value": None}
        assert type(out) is dict
