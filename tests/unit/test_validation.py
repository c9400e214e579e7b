"""Tests for Walker.validate against a concrete schema."""

import pytest

from proto_walker import ConfigurationError, build_walker
from proto_walker.validation import find_field, reachable_type_names


class TestFindField:
    def test_nested(self, catalog):
        assert find_field(catalog, "updated.seconds").name == "seconds"

    def test_map_value(self, catalog):
        assert find_field(catalog, "featured.value.sku").name == "sku"

    def test_missing(self, catalog):
        assert find_field(catalog, "updated.minutes") is None
        assert find_field(catalog, "name.length") is None


class TestReachableTypes:
    def test_cycle(self, node):
        assert reachable_type_names(node) == {"test.Node"}

    def test_nested(self, catalog):
        names = reachable_type_names(catalog)
        assert {"test.Catalog", "test.Item", "test.Timestamp", "test.Catalog.StockEntry"} <= names


class TestValidate:
    def test_valid(self, catalog):
        walker = build_walker(
            path_overrides={"items.sku": lambda fd, v: v, "stock.value": lambda fd, v: v},
            type_overrides={"test.Timestamp": lambda fd, kvs: kvs},
            depth_overrides={"featured.value": 0},
        )
        walker.validate(catalog)

    def test_unknown_path(self, catalog):
        walker = build_walker(path_overrides={"items.colour": lambda fd, v: v})
        with pytest.raises(ConfigurationError, match="'items.colour' matches no field"):
            walker.validate(catalog)

    def test_depth_on_scalar(self, catalog):
        walker = build_walker(depth_overrides={"name": 1})
        with pytest.raises(ConfigurationError, match="targets a STRING field"):
            walker.validate(catalog)

    def test_unused_type(self, catalog):
        walker = build_walker(type_overrides={"other.Thing": lambda fd, kvs: kvs})
        with pytest.raises(ConfigurationError, match="'other.Thing' is not used by test.Catalog"):
            walker.validate(catalog)

    def test_reports_every_problem(self, catalog):
        walker = build_walker(
            path_overrides={"nope": lambda fd, v: v},
            depth_overrides={"also_nope": 1},
        )
        with pytest.raises(ConfigurationError) as exc_info:
            walker.validate(catalog)
        assert "'nope'" in str(exc_info.value)
        assert "'also_nope'" in str(exc_info.value)
