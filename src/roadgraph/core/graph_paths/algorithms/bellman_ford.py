"""
Bellman-Ford algorithm for road networks with tolls (negative weights).

Undirected edges are relaxed in both directions, so a single negative edge
reachable from the origin already forms a negative cycle (walk it back and
forth). Nodes affected by a negative cycle are found by flooding outward
from every node that can still be relaxed after ``|V| - 1`` passes.
"""

import logging
from collections import deque
from typing import Dict, List, Set, Tuple

from ...enums import Algorithm, ErrorKind
from ...models import Edge
from ..base import PathFinder
from ..models import RouteResult
from ..utils import (
    Adjacency,
    Predecessors,
    build_weighted_adjacency,
    create_route_result,
    is_better_cost,
)

logger = logging.getLogger(__name__)

INFINITY = float("inf")


class BellmanFordFinder(PathFinder):
    """Shortest path search for arbitrary weights with negative-cycle detection."""

    algorithm = Algorithm.BELLMAN_FORD

    def find_path(self, start_node: str, end_node: str) -> RouteResult:
        """Find the cheapest route, or report a negative cycle affecting it."""
        self.validate_nodes(start_node, end_node)
        if start_node == end_node:
            return RouteResult.trivial(start_node, self.algorithm)

        epsilon = self.config.cost_epsilon
        adjacency = build_weighted_adjacency(self.snapshot)
        arcs: List[Tuple[str, str, Edge]] = [
            (node, neighbor, edge) for node, out in adjacency.items() for neighbor, edge in out
        ]

        distances: Dict[str, float] = {node: INFINITY for node in adjacency}
        distances[start_node] = 0.0
        predecessors: Predecessors = {}

        # Relax edges |V| - 1 times
        passes = 0
        for _ in range(len(adjacency) - 1):
            passes += 1
            updated = False
            for node, neighbor, edge in arcs:
                if distances[node] == INFINITY:
                    continue
                new_dist = distances[node] + edge.weight
                if is_better_cost(new_dist, distances[neighbor], epsilon):
                    distances[neighbor] = new_dist
                    predecessors[neighbor] = (node, edge)
                    updated = True

            if not updated:
                break

        logger.debug("Bellman-Ford converged after %d of %d passes", passes, len(adjacency) - 1)

        tainted = self._negative_cycle_taint(arcs, adjacency, distances, epsilon)
        if tainted:
            logger.debug("Nodes affected by a negative cycle: %s", sorted(tainted))

        if end_node in tainted:
            return RouteResult.failure(
                ErrorKind.NEGATIVE_CYCLE_AFFECTS_DESTINATION,
                f"A negative cycle is reachable on the way to {end_node}; "
                "the cheapest route is undefined",
                self.algorithm,
                has_negative_cycle=True,
            )

        if distances[end_node] == INFINITY:
            return RouteResult.failure(
                ErrorKind.NO_PATH,
                f"No route exists between {start_node} and {end_node}",
                self.algorithm,
                has_negative_cycle=bool(tainted),
            )

        result = create_route_result(
            predecessors, start_node, end_node, distances[end_node], self.algorithm, epsilon
        )
        result.has_negative_cycle = bool(tainted)
        return result

    @staticmethod
    def _negative_cycle_taint(
        arcs: List[Tuple[str, str, Edge]],
        adjacency: Adjacency,
        distances: Dict[str, float],
        epsilon: float,
    ) -> Set[str]:
        """Return every node whose distance a negative cycle can drive down.

        Seeds are the heads of arcs that still relax after the main passes;
        everything reachable from a seed over unblocked edges is affected.
        """
        tainted: Set[str] = set()
        worklist = deque()
        for node, neighbor, edge in arcs:
            if distances[node] == INFINITY or neighbor in tainted:
                continue
            if is_better_cost(distances[node] + edge.weight, distances[neighbor], epsilon):
                tainted.add(neighbor)
                worklist.append(neighbor)

        while worklist:
            current = worklist.popleft()
            for neighbor, _ in adjacency[current]:
                if neighbor not in tainted:
                    tainted.add(neighbor)
                    worklist.append(neighbor)

        return tainted
