"""
Tests for edge models.
"""

import math

import pytest

from roadgraph.core.models import Edge


def test_edge_creation():
    """Test basic edge creation and properties."""
    edge = Edge("e1", "A", "B", 4.5)

    assert edge.endpoints == ("A", "B")
    assert edge.weight == pytest.approx(4.5)
    assert edge.blocked is False
    assert not edge.is_self_loop


def test_edge_weight_coerced_to_float():
    """Test that integer weights are stored as floats."""
    edge = Edge("e1", "A", "B", 3)
    assert isinstance(edge.weight, float)
    assert edge.weight == 3.0


def test_edge_accepts_negative_weight():
    """Test that tolls (negative weights) are allowed."""
    assert Edge("toll", "A", "B", -2).weight == -2.0


@pytest.mark.parametrize("bad_weight", [True, "4", None, math.nan, math.inf, -math.inf])
def test_edge_rejects_invalid_weight(bad_weight):
    """Test that weights must be finite real numbers."""
    with pytest.raises(ValueError, match="weight must be"):
        Edge("e1", "A", "B", bad_weight)


def test_edge_rejects_non_boolean_blocked():
    """Test that the blocked flag must be a boolean."""
    with pytest.raises(TypeError, match="blocked must be a boolean"):
        Edge("e1", "A", "B", 1.0, blocked=1)


def test_edge_rejects_empty_endpoint():
    """Test that endpoints must be non-empty strings."""
    with pytest.raises(ValueError, match="endpoint_b"):
        Edge("e1", "A", "", 1.0)


def test_other_end():
    """Test endpoint lookup from either side."""
    edge = Edge("e1", "A", "B")
    assert edge.other_end("A") == "B"
    assert edge.other_end("B") == "A"
    with pytest.raises(ValueError, match="not an endpoint"):
        edge.other_end("C")


def test_connects_is_undirected():
    """Test that connects ignores direction."""
    edge = Edge("e1", "A", "B")
    assert edge.connects("A", "B")
    assert edge.connects("B", "A")
    assert not edge.connects("A", "C")


def test_self_loop():
    """Test self-loop detection."""
    edge = Edge("loop", "A", "A")
    assert edge.is_self_loop
    assert edge.other_end("A") == "A"
