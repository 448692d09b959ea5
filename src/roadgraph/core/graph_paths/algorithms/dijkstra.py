"""
Dijkstra's algorithm for road networks with non-negative weights.
"""

import logging
from typing import Dict, Set

from ...enums import Algorithm, ErrorKind
from ..base import PathFinder
from ..models import RouteResult
from ..utils import (
    PriorityQueue,
    Predecessors,
    build_weighted_adjacency,
    create_route_result,
    is_better_cost,
)

logger = logging.getLogger(__name__)


class DijkstraFinder(PathFinder):
    """Greedy label-setting shortest path search.

    Correct only when every unblocked weight is non-negative. Negative
    weights are not rejected: a warning is logged and the search runs
    anyway, so callers should route such snapshots to Bellman-Ford.
    """

    algorithm = Algorithm.DIJKSTRA

    def find_path(self, start_node: str, end_node: str) -> RouteResult:
        """Find the cheapest route, stopping as soon as ``end_node`` is settled."""
        self.validate_nodes(start_node, end_node)
        if start_node == end_node:
            return RouteResult.trivial(start_node, self.algorithm)

        for edge in self.snapshot.active_edges():
            if edge.weight < 0:
                logger.warning(
                    "Negative weight %s on edge %s (%s-%s) passed to Dijkstra; "
                    "result may not be the cheapest route",
                    edge.weight,
                    edge.id,
                    edge.endpoint_a,
                    edge.endpoint_b,
                )

        epsilon = self.config.cost_epsilon
        adjacency = build_weighted_adjacency(self.snapshot)
        logger.debug("Starting Dijkstra's algorithm from %s to %s", start_node, end_node)

        pq = PriorityQueue(epsilon)
        pq.add_or_update(start_node, 0.0)
        distances: Dict[str, float] = {start_node: 0.0}
        predecessors: Predecessors = {}
        settled: Set[str] = set()

        while not pq.empty():
            current = pq.pop()
            if not current:
                break

            current_dist, current_node = current
            settled.add(current_node)
            logger.debug("Settled %s at distance %s", current_node, current_dist)

            if current_node == end_node:
                break

            for neighbor, edge in adjacency[current_node]:
                if neighbor in settled:
                    continue

                new_dist = current_dist + edge.weight
                if neighbor not in distances or is_better_cost(
                    new_dist, distances[neighbor], epsilon
                ):
                    logger.debug("  Updating distance to %s: %s via %s", neighbor, new_dist, edge.id)
                    distances[neighbor] = new_dist
                    predecessors[neighbor] = (current_node, edge)
                    pq.add_or_update(neighbor, new_dist)

        if end_node not in settled:
            logger.debug("No path exists between %s and %s", start_node, end_node)
            return RouteResult.failure(
                ErrorKind.NO_PATH,
                f"No route exists between {start_node} and {end_node}",
                self.algorithm,
            )

        return create_route_result(
            predecessors, start_node, end_node, distances[end_node], self.algorithm, epsilon
        )
