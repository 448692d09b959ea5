"""
Tests for graph snapshots.
"""

import pytest

from roadgraph.core.enums import NodeRole
from roadgraph.core.models import Edge, GraphSnapshot, Node


def test_snapshot_normalises_containers():
    """Test that lists are stored as tuples."""
    snapshot = GraphSnapshot(nodes=[Node("A"), Node("B")], edges=[Edge("e1", "A", "B")])

    assert isinstance(snapshot.nodes, tuple)
    assert isinstance(snapshot.edges, tuple)
    assert snapshot.node_ids == ["A", "B"]


def test_empty_snapshot():
    """Test a snapshot with no nodes or edges."""
    snapshot = GraphSnapshot()
    assert snapshot.node_ids == []
    assert snapshot.active_edges() == []
    assert snapshot.origin is None
    assert snapshot.destination is None


def test_duplicate_node_ids_rejected():
    """Test that node ids must be unique."""
    with pytest.raises(ValueError, match="duplicate node id: A"):
        GraphSnapshot(nodes=[Node("A"), Node("A")])


def test_duplicate_edge_ids_rejected():
    """Test that edge ids must be unique."""
    with pytest.raises(ValueError, match="duplicate edge id: e1"):
        GraphSnapshot(
            nodes=[Node("A"), Node("B")],
            edges=[Edge("e1", "A", "B"), Edge("e1", "B", "A")],
        )


def test_single_origin_enforced():
    """Test that at most one node may be the origin."""
    with pytest.raises(ValueError, match="at most one node may hold role origin"):
        GraphSnapshot(
            nodes=[Node("A", role=NodeRole.ORIGIN), Node("B", role=NodeRole.ORIGIN)]
        )


def test_non_node_members_rejected():
    """Test that only Node objects are accepted."""
    with pytest.raises(TypeError, match="only Node objects"):
        GraphSnapshot(nodes=["A"])


def test_role_lookup():
    """Test origin and destination lookups."""
    snapshot = GraphSnapshot.build("ABC", [], origin="A", destination="C")
    assert snapshot.origin == "A"
    assert snapshot.destination == "C"
    assert snapshot.get_node("B").role is NodeRole.NORMAL
    assert snapshot.get_node("Q") is None
    assert snapshot.has_node("C")
    assert not snapshot.has_node("Q")


def test_build_generates_unique_edge_ids():
    """Test that parallel edges get distinct generated ids."""
    snapshot = GraphSnapshot.build("AB", [("A", "B", 1), ("A", "B", 2), ("A", "B", 3)])
    assert [edge.id for edge in snapshot.edges] == ["A-B", "A-B#2", "A-B#3"]


def test_build_marks_blocked_pairs():
    """Test that blocked pairs match edges in either direction."""
    snapshot = GraphSnapshot.build("ABC", [("A", "B", 1), ("B", "C", 1)], blocked=[("C", "B")])
    assert [edge.blocked for edge in snapshot.edges] == [False, True]


def test_active_edges_skip_blocked_and_dangling():
    """Test that blocked edges and edges to unknown nodes are inactive."""
    snapshot = GraphSnapshot(
        nodes=[Node("A"), Node("B")],
        edges=[
            Edge("open", "A", "B"),
            Edge("closed", "A", "B", blocked=True),
            Edge("dangling", "A", "Z"),
        ],
    )
    assert [edge.id for edge in snapshot.active_edges()] == ["open"]


def test_has_negative_weights_ignores_blocked_edges():
    """Test negative weight detection over unblocked edges only."""
    snapshot = GraphSnapshot.build("AB", [("A", "B", -1)], blocked=[("A", "B")])
    assert not snapshot.has_negative_weights()

    snapshot = GraphSnapshot.build("ABC", [("A", "B", 2), ("B", "C", -1)])
    assert snapshot.has_negative_weights()


def test_snapshot_is_immutable(road_network):
    """Test that snapshots cannot be modified after creation."""
    with pytest.raises(AttributeError):
        road_network.nodes = ()


def test_has_negative_weights_ignores_dangling_edges():
    """Test that a negative edge to an unknown node is not counted."""
    snapshot = GraphSnapshot(
        nodes=[Node("A"), Node("B")],
        edges=[Edge("ab", "A", "B", 2.0), Edge("dangling", "A", "Z", -3.0)],
    )
    assert not snapshot.has_negative_weights()
