"""Shared test fixtures."""

import pytest

from roadgraph.core.models import GraphSnapshot

ROAD_EDGES = [
    ("A", "B", 4),
    ("A", "C", 2),
    ("B", "C", 1),
    ("B", "D", 5),
    ("C", "D", 8),
    ("C", "E", 10),
    ("D", "E", 2),
    ("D", "F", 6),
    ("E", "F", 3),
]


@pytest.fixture
def road_network() -> GraphSnapshot:
    """
    Fixture providing the reference road network, origin A and destination F.

    The cheapest route is A-C-B-D-E-F with cost 13.
    """
    return GraphSnapshot.build("ABCDEF", ROAD_EDGES, origin="A", destination="F")


@pytest.fixture
def four_cycle() -> GraphSnapshot:
    """Fixture providing the cycle A-B-C-D-A."""
    return GraphSnapshot.build(
        "ABCD", [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("D", "A", 1)]
    )


@pytest.fixture
def path_graph() -> GraphSnapshot:
    """Fixture providing the path A-B-C."""
    return GraphSnapshot.build("ABC", [("A", "B", 1), ("B", "C", 1)])


@pytest.fixture
def complete_k4() -> GraphSnapshot:
    """Fixture providing the complete graph on four nodes."""
    return GraphSnapshot.build(
        "ABCD",
        [("A", "B", 1), ("A", "C", 1), ("A", "D", 1), ("B", "C", 1), ("B", "D", 1), ("C", "D", 1)],
    )


@pytest.fixture
def star_graph() -> GraphSnapshot:
    """Fixture providing a star: center H joined to four mutually unjoined leaves."""
    return GraphSnapshot.build(
        ["H", "L1", "L2", "L3", "L4"],
        [("H", "L1", 1), ("H", "L2", 1), ("H", "L3", 1), ("H", "L4", 1)],
    )


@pytest.fixture
def sparse_nine() -> GraphSnapshot:
    """Fixture providing a 9-node path N1-...-N9, which satisfies neither Dirac nor Ore."""
    ids = [f"N{i}" for i in range(1, 10)]
    return GraphSnapshot.build(ids, [(a, b, 1) for a, b in zip(ids, ids[1:])])


@pytest.fixture
def negative_triangle() -> GraphSnapshot:
    """
    Fixture providing a negative cycle X-Y-Z (weights 1, 1, -5) reachable from S.

    U is isolated, so it stays unreachable.
    """
    return GraphSnapshot.build(
        ["S", "X", "Y", "Z", "U"],
        [("S", "X", 1), ("X", "Y", 1), ("Y", "Z", 1), ("Z", "X", -5)],
        origin="S",
        destination="Z",
    )
