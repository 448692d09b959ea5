"""
Tests for the public engine entry points.
"""

import pytest

import roadgraph
from roadgraph import (
    Algorithm,
    Certainty,
    ErrorKind,
    GraphSnapshot,
    compute_eulerian_analysis,
    compute_full_analysis,
    compute_hamiltonian_analysis,
    compute_shortest_path,
)


def test_end_to_end_route(road_network):
    """Test the reference scenario through the public API."""
    result = compute_shortest_path(road_network, "A", "F", Algorithm.DIJKSTRA)

    assert result.found
    assert result.path == ["A", "C", "B", "D", "E", "F"]
    assert result.total_cost == pytest.approx(13)


def test_route_defaults_to_snapshot_roles(road_network):
    """Test that origin and destination default to the role holders."""
    result = compute_shortest_path(road_network)
    assert result.path[0] == "A"
    assert result.path[-1] == "F"


def test_route_without_origin_role(path_graph):
    """Test that a snapshot with no origin reports a missing node."""
    result = compute_shortest_path(path_graph, destination_id="C")

    assert not result.found
    assert result.error_kind is ErrorKind.NODE_NOT_FOUND
    assert result.message == "No origin node selected"


def test_string_algorithm_hint(negative_triangle):
    """Test that hints may be given as strings."""
    result = compute_shortest_path(negative_triangle, "S", "Z", "bellman-ford")
    assert result.has_negative_cycle


def test_unknown_algorithm_hint(road_network):
    """Test that an unknown hint is a caller error."""
    with pytest.raises(ValueError):
        compute_shortest_path(road_network, "A", "F", "a-star")


def test_structural_entry_points(four_cycle, sparse_nine):
    """Test the structural analyses through the public API."""
    assert compute_eulerian_analysis(four_cycle).circuit_exists is True
    assert compute_hamiltonian_analysis(four_cycle).circuit_exists is True
    assert compute_hamiltonian_analysis(sparse_nine).certainty is Certainty.INDETERMINATE


def test_full_analysis(road_network):
    """Test running every analysis at once."""
    results = compute_full_analysis(road_network)

    assert set(results) == {"route", "eulerian", "hamiltonian"}
    assert results["route"].total_cost == pytest.approx(13)
    assert results["eulerian"].start_end_vertices == ["B", "E"]
    assert results["hamiltonian"].is_definite


def test_entry_points_do_not_mutate_snapshot(road_network):
    """Test that analysis leaves the snapshot unchanged."""
    before = GraphSnapshot(nodes=road_network.nodes, edges=road_network.edges)
    compute_full_analysis(road_network)
    assert road_network == before


@pytest.mark.parametrize(
    "operation",
    [compute_shortest_path, compute_eulerian_analysis, compute_hamiltonian_analysis],
)
def test_entry_points_are_idempotent(road_network, operation):
    """Test that unchanged snapshots give identical results."""
    assert operation(road_network).to_dict() == operation(road_network).to_dict()


def test_package_version():
    """Test package metadata."""
    assert roadgraph.__version__ == "0.1.0"
