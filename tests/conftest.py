"""Pytest configuration and fixtures."""

import pytest

from kgraph.config import Settings, get_test_settings
from kgraph.models import Node


def make_node(node_id: str, depth: int, parent_id: str | None = None, **kwargs) -> Node:
    """Build a node with a topic derived from its id."""
    return Node(
        id=node_id,
        topic=kwargs.pop("topic", f"Topic {node_id}"),
        depth=depth,
        parent_id=parent_id,
        **kwargs,
    )


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with defaults."""
    return get_test_settings()


@pytest.fixture
def valid_tree() -> list[Node]:
    """Consistent forest: A -> B -> C, A -> D, plus a second root E."""
    return [
        make_node("A", 0),
        make_node("B", 1, "A"),
        make_node("C", 2, "B"),
        make_node("D", 1, "A"),
        make_node("E", 0),
    ]


@pytest.fixture
def drifted_chain() -> list[Node]:
    """A -> B -> C with C recorded far too deep."""
    return [
        make_node("A", 0),
        make_node("B", 1, "A"),
        make_node("C", 5, "B"),
    ]


@pytest.fixture(name="make_node")
def make_node_fixture():
    """Factory for nodes in tests."""
    return make_node
