"""Shortest route finding over road-network snapshots."""

import logging
from typing import Optional, Type, Union

from ..config import AnalysisConfig
from ..enums import Algorithm, ErrorKind
from ..exceptions import NodeNotFoundError
from ..models import GraphSnapshot
from .algorithms.bellman_ford import BellmanFordFinder
from .algorithms.dijkstra import DijkstraFinder
from .base import PathFinder
from .models import PathValidationError, RouteResult, RouteStep

logger = logging.getLogger(__name__)

__all__ = [
    "PathFinder",
    "PathFinding",
    "PathValidationError",
    "RouteResult",
    "RouteStep",
    "find_path",
    "parse_algorithm",
]

_FINDERS: dict[Algorithm, Type[PathFinder]] = {
    Algorithm.DIJKSTRA: DijkstraFinder,
    Algorithm.BELLMAN_FORD: BellmanFordFinder,
}


def parse_algorithm(hint: Union[Algorithm, str, None]) -> Algorithm:
    """Turn an algorithm hint into an ``Algorithm`` member.

    Accepts members, their values (``"dijkstra"``, ``"bellman-ford"``,
    ``"auto"``) and underscore spellings. ``None`` means ``AUTO``.

    Raises:
        ValueError: If the hint names no known algorithm
    """
    if hint is None:
        return Algorithm.AUTO
    if isinstance(hint, Algorithm):
        return hint
    if isinstance(hint, str):
        normalized = hint.strip().lower().replace("_", "-")
        for algorithm in Algorithm:
            if algorithm.value == normalized:
                return algorithm
    raise ValueError(f"Unknown algorithm: {hint!r}")


class PathFinding:
    """Static interface for route finding operations."""

    @staticmethod
    def select_algorithm(snapshot: GraphSnapshot, hint: Union[Algorithm, str, None]) -> Algorithm:
        """Resolve ``AUTO`` to a concrete strategy.

        Bellman-Ford is chosen when any unblocked edge has a negative weight,
        Dijkstra otherwise. Explicit hints are returned unchanged.
        """
        algorithm = parse_algorithm(hint)
        if algorithm is Algorithm.AUTO:
            algorithm = (
                Algorithm.BELLMAN_FORD if snapshot.has_negative_weights() else Algorithm.DIJKSTRA
            )
        return algorithm

    @classmethod
    def shortest_path(
        cls,
        snapshot: GraphSnapshot,
        origin: str,
        destination: str,
        algorithm: Union[Algorithm, str, None] = Algorithm.AUTO,
        config: Optional[AnalysisConfig] = None,
    ) -> RouteResult:
        """Find the cheapest route between ``origin`` and ``destination``.

        Always returns a complete result. A missing origin or destination is
        reported as ``ErrorKind.NODE_NOT_FOUND``.
        """
        chosen = cls.select_algorithm(snapshot, algorithm)
        finder = _FINDERS[chosen](snapshot, config)
        try:
            result = finder.find_path(origin, destination)
        except NodeNotFoundError as e:
            logger.debug("Route query rejected: %s", e)
            return RouteResult.failure(ErrorKind.NODE_NOT_FOUND, str(e), chosen)

        result.validate(origin, destination, finder.config.cost_epsilon * max(1, len(result)))
        return result


def find_path(
    snapshot: GraphSnapshot,
    origin: str,
    destination: str,
    algorithm: Union[Algorithm, str, None] = Algorithm.AUTO,
    config: Optional[AnalysisConfig] = None,
) -> RouteResult:
    """Find the cheapest route; see ``PathFinding.shortest_path``."""
    return PathFinding.shortest_path(snapshot, origin, destination, algorithm, config)
