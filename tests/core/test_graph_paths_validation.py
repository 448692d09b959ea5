"""
Tests for route result validation and path utilities.
"""

import pytest

from roadgraph.core.enums import Algorithm, ErrorKind
from roadgraph.core.exceptions import GraphOperationError
from roadgraph.core.graph_paths import PathValidationError, RouteResult, RouteStep
from roadgraph.core.graph_paths.utils import (
    PriorityQueue,
    build_weighted_adjacency,
    is_better_cost,
    reconstruct_path,
)
from roadgraph.core.models import Edge, GraphSnapshot


def test_valid_route_passes():
    """Test validation of a consistent route."""
    result = RouteResult(
        found=True,
        path=["A", "B", "C"],
        total_cost=3.0,
        steps=[RouteStep("A", "B", 1.0, "e1"), RouteStep("B", "C", 2.0, "e2")],
    )
    result.validate("A", "C")
    assert len(result) == 2
    assert result.length == 2


def test_found_route_needs_a_path():
    """Test that a found route cannot be empty."""
    with pytest.raises(PathValidationError, match="at least one node"):
        RouteResult(found=True)


def test_found_route_cannot_carry_error():
    """Test that success and an error kind are exclusive."""
    with pytest.raises(PathValidationError, match="cannot carry an error kind"):
        RouteResult(found=True, path=["A"], error_kind=ErrorKind.NO_PATH)


def test_wrong_endpoints_rejected():
    """Test that the path must join origin and destination."""
    result = RouteResult(found=True, path=["A", "B"], total_cost=1.0,
                         steps=[RouteStep("A", "B", 1.0, "e1")])
    with pytest.raises(PathValidationError, match="expected C"):
        result.validate("A", "C")


def test_broken_step_chain_rejected():
    """Test that steps must follow the path."""
    result = RouteResult(found=True, path=["A", "B"], total_cost=1.0,
                         steps=[RouteStep("B", "A", 1.0, "e1")])
    with pytest.raises(PathValidationError, match="does not follow path"):
        result.validate("A", "B")


def test_cost_mismatch_rejected():
    """Test that the total must match the step costs."""
    result = RouteResult(found=True, path=["A", "B"], total_cost=5.0,
                         steps=[RouteStep("A", "B", 1.0, "e1")])
    with pytest.raises(PathValidationError, match="Cost mismatch"):
        result.validate("A", "B")


def test_failure_result():
    """Test failure construction and serialisation."""
    result = RouteResult.failure(
        ErrorKind.NEGATIVE_CYCLE_AFFECTS_DESTINATION, "undefined", Algorithm.BELLMAN_FORD, True
    )
    result.validate("A", "B")
    assert result.to_dict() == {
        "found": False,
        "path": [],
        "total_cost": 0.0,
        "steps": [],
        "has_negative_cycle": True,
        "error_kind": "negative_cycle_affects_destination",
        "algorithm": "bellman-ford",
        "message": "undefined",
    }


def test_step_serialisation():
    """Test step rendering with editor field names."""
    assert RouteStep("A", "B", 2.5, "e1").to_dict() == {
        "from": "A",
        "to": "B",
        "cost": 2.5,
        "edge_id": "e1",
    }


def test_is_better_cost():
    """Test tolerant cost comparison."""
    assert is_better_cost(1.0, 2.0)
    assert not is_better_cost(2.0, 2.0)
    assert not is_better_cost(2.0 - 1e-12, 2.0)
    assert is_better_cost(-3.0, -1.0)


def test_priority_queue_decrease_key():
    """Test that lowering a priority moves the item forward."""
    pq = PriorityQueue()
    pq.add_or_update("A", 5.0)
    pq.add_or_update("B", 3.0)
    pq.add_or_update("A", 1.0)
    pq.add_or_update("B", 4.0)  # Worse priority is ignored

    assert len(pq) == 2
    assert pq.pop() == (1.0, "A")
    assert pq.pop() == (3.0, "B")
    assert pq.empty()
    assert pq.pop() is None


def test_priority_queue_ties_pop_in_insertion_order():
    """Test deterministic tie breaking."""
    pq = PriorityQueue()
    for item in ["C", "A", "B"]:
        pq.add_or_update(item, 1.0)
    assert [pq.pop()[1] for _ in range(3)] == ["C", "A", "B"]


def test_weighted_adjacency_is_undirected():
    """Test that each active edge is registered from both ends."""
    snapshot = GraphSnapshot.build("ABC", [("A", "B", 1), ("B", "C", 2), ("C", "C", 1)],
                                   blocked=[("A", "B")])
    adjacency = build_weighted_adjacency(snapshot)

    assert adjacency["A"] == []
    assert [(n, e.id) for n, e in adjacency["B"]] == [("C", "B-C")]
    assert [(n, e.id) for n, e in adjacency["C"]] == [("B", "B-C"), ("C", "C-C")]


def test_reconstruct_path():
    """Test predecessor walking."""
    ab = Edge("ab", "A", "B", 1.0)
    bc = Edge("bc", "B", "C", 2.0)
    path, steps = reconstruct_path({"B": ("A", ab), "C": ("B", bc)}, "A", "C")

    assert path == ["A", "B", "C"]
    assert [step.edge_id for step in steps] == ["ab", "bc"]


def test_reconstruct_path_broken_chain():
    """Test that a chain that never reaches the start is an error."""
    bc = Edge("bc", "B", "C", 2.0)
    with pytest.raises(GraphOperationError, match="stops at B"):
        reconstruct_path({"C": ("B", bc)}, "A", "C")
