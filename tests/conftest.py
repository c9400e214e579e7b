"""pytest configuration and shared fixtures."""

import pytest

from proto_walker import Field, Kind, Record, Structure


@pytest.fixture
def timestamp():
    """Timestamp-like structure; fields declared out of number order."""
    return Structure("test.Timestamp", [
        Field("nanos", 2, Kind.INT32),
        Field("seconds", 1, Kind.INT64),
    ])


@pytest.fixture
def node():
    """Self-referential tree node."""
    node = Structure("test.Node")
    node.add(
        Field("label", 1, Kind.STRING),
        Field("child", 2, Kind.MESSAGE, message=node),
        Field("children", 3, Kind.MESSAGE, repeated=True, message=node),
    )
    return node


@pytest.fixture
def catalog(timestamp):
    """Structure with every field category."""
    item = Structure("test.Item", [
        Field("sku", 1, Kind.STRING),
        Field("price", 2, Kind.DOUBLE),
    ])
    return Structure("test.Catalog", [
        Field("name", 1, Kind.STRING),
        Field("tags", 2, Kind.STRING, repeated=True),
        Field("items", 3, Kind.MESSAGE, repeated=True, message=item),
        Field.map_field("stock", 4, Kind.STRING, Kind.INT32, owner="test.Catalog"),
        Field.map_field("featured", 5, Kind.STRING, Kind.MESSAGE, value_message=item, owner="test.Catalog"),
        Field("updated", 6, Kind.MESSAGE, message=timestamp),
        Field("active", 7, Kind.BOOL),
    ])


@pytest.fixture
def chain(node):
    """Three-level node chain: root → a → b."""
    return Record(node, label="root", child=Record(node, label="a", child=Record(node, label="b")))
