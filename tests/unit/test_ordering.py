"""Tests for field and map-key ordering."""

import pytest

from proto_walker import (
    ConfigurationError,
    Field,
    KeyValue,
    Kind,
    fields_by_number,
    map_key_sort_key,
    order_pairs,
    ordered_map_items,
    sort_map_keys,
)


class TestFieldOrder:
    def test_by_number_not_declaration(self, timestamp):
        assert [f.name for f in fields_by_number(timestamp)] == ["seconds", "nanos"]

    def test_order_pairs_as_dict(self):
        out = order_pairs([KeyValue("b", 1), KeyValue("a", 2)], keep_order=False)
        assert out == {"b": 1, "a": 2}

    def test_order_pairs_keeps_sequence(self):
        out = order_pairs([KeyValue("b", 1), KeyValue("a", 2)], keep_order=True)
        assert out == [KeyValue("b", 1), KeyValue("a", 2)]
        assert out[0].key == "b"


class TestMapKeyOrder:
    """Canonical order: bools false first, numbers ascending, text byte-wise."""

    def test_bool(self):
        fd = Field.map_field("m", 1, Kind.BOOL, Kind.STRING)
        assert sort_map_keys(fd, [True, False]) == [False, True]

    @pytest.mark.parametrize("kind", [Kind.INT32, Kind.SINT64, Kind.UINT64, Kind.FIXED32, Kind.SFIXED64])
    def test_integers(self, kind):
        fd = Field.map_field("m", 1, kind, Kind.STRING)
        assert sort_map_keys(fd, [10, -3, 2]) == [-3, 2, 10]

    def test_strings_byte_wise(self):
        fd = Field.map_field("m", 1, Kind.STRING, Kind.STRING)
        # "Z" (0x5A) sorts before "a" (0x61); "é" is multi-byte and sorts last.
        assert sort_map_keys(fd, ["a", "é", "Z", "ab"]) == ["Z", "a", "ab", "é"]

    def test_bytes(self):
        assert sorted([b"\x02", b"\x01\xff", b""], key=map_key_sort_key(Kind.BYTES)) == [b"", b"\x01\xff", b"\x02"]

    def test_float(self):
        assert sorted([1.5, -2.0, 0], key=map_key_sort_key(Kind.DOUBLE)) == [-2.0, 0, 1.5]

    def test_nan_sorts_last(self):
        nan = float("nan")
        fd = Field.map_field("m", 1, Kind.DOUBLE, Kind.STRING)
        keys = sort_map_keys(fd, [nan, 2.0, -1.0, nan, 0.5])
        assert keys[:3] == [-1.0, 0.5, 2.0]
        assert all(k != k for k in keys[3:])

    def test_nan_position_independent_of_input_order(self):
        nan = float("nan")
        key = map_key_sort_key(Kind.FLOAT)
        assert sorted([1.0, nan, 0.0], key=key)[:2] == sorted([nan, 0.0, 1.0], key=key)[:2] == [0.0, 1.0]

    def test_items(self):
        fd = Field.map_field("m", 1, Kind.STRING, Kind.INT32)
        assert ordered_map_items(fd, {"b": 2, "a": 1}) == [("a", 1), ("b", 2)]

    def test_mismatched_key_type(self):
        fd = Field.map_field("m", 1, Kind.INT32, Kind.STRING)
        with pytest.raises(ConfigurationError, match="integer map key"):
            sort_map_keys(fd, ["1", "2"])

    def test_bool_is_not_an_integer_key(self):
        with pytest.raises(ConfigurationError):
            map_key_sort_key(Kind.INT64)(True)

    def test_unsupported_key_kind(self):
        with pytest.raises(ConfigurationError, match="unsupported map key kind"):
            map_key_sort_key(Kind.MESSAGE)

    def test_not_a_map(self):
        with pytest.raises(ConfigurationError, match="not a map field"):
            sort_map_keys(Field("x", 1, Kind.STRING), [])
