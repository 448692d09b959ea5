"""
Enumerations shared by the route and structural analysis engine.

This module defines the small vocabularies used throughout the system:
- NodeRole: Marks a node as an ordinary junction, the route origin or the destination
- Algorithm: Selects the shortest path strategy
- Certainty: States whether a structural verdict is conclusive
- ErrorKind: Classifies non-success outcomes reported inside result records
"""

from enum import Enum


class NodeRole(Enum):
    """Role a node plays in route computation."""

    NORMAL = "normal"
    ORIGIN = "origin"  # Route start (the editor's ambulance marker)
    DESTINATION = "destination"  # Route end (the editor's hospital marker)


class Algorithm(Enum):
    """Shortest path strategies."""

    DIJKSTRA = "dijkstra"  # Non-negative weights only
    BELLMAN_FORD = "bellman-ford"  # Supports negative weights, detects negative cycles
    AUTO = "auto"  # Bellman-Ford if any unblocked edge is negative, else Dijkstra


class Certainty(Enum):
    """Whether a structural verdict is conclusive."""

    DEFINITE = "definite"
    INDETERMINATE = "indeterminate"


class ErrorKind(Enum):
    """
    Outcome classification carried by result records.

    These are reported values, not exceptions. A result with an error kind is
    still a complete record the caller can render.
    """

    NODE_NOT_FOUND = "node_not_found"
    NO_PATH = "no_path"
    NEGATIVE_CYCLE_AFFECTS_DESTINATION = "negative_cycle_affects_destination"
    DISCONNECTED = "disconnected"
    INDETERMINATE_COMPLEXITY = "indeterminate_complexity"
