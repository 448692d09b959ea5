"""
Tests for node models.
"""

import pytest

from roadgraph.core.enums import NodeRole
from roadgraph.core.models import Node


def test_node_creation():
    """Test basic node creation and properties."""
    node = Node("A", label="Depot", role=NodeRole.ORIGIN)

    assert node.id == "A"
    assert node.label == "Depot"
    assert node.role is NodeRole.ORIGIN


def test_node_label_defaults_to_id():
    """Test that an empty label is replaced by the node id."""
    node = Node("junction-7")
    assert node.label == "junction-7"
    assert node.role is NodeRole.NORMAL


@pytest.mark.parametrize("bad_id", ["", "   ", None, 42])
def test_node_rejects_invalid_id(bad_id):
    """Test that node ids must be non-empty strings."""
    with pytest.raises(ValueError, match="id must be a non-empty string"):
        Node(bad_id)


def test_node_rejects_role_string():
    """Test that roles must be NodeRole members, not their values."""
    with pytest.raises(TypeError, match="role must be a NodeRole"):
        Node("A", role="origin")


def test_node_rejects_non_string_label():
    """Test runtime type checking of the label field."""
    with pytest.raises(TypeError, match="Invalid field types in Node: label"):
        Node("A", label=5)


def test_node_is_immutable():
    """Test that nodes cannot be modified after creation."""
    node = Node("A")
    with pytest.raises(AttributeError):
        node.id = "B"
