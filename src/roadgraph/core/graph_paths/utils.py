"""
Utility functions for route finding operations.
"""

import logging
from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from ..config import DEFAULT_COST_EPSILON
from ..exceptions import GraphOperationError
from ..enums import Algorithm
from ..models import Edge, GraphSnapshot
from .models import RouteResult, RouteStep

logger = logging.getLogger(__name__)

# Neighbour id paired with the edge that reaches it
Adjacency = Dict[str, List[Tuple[str, Edge]]]

# Node id to (predecessor id, edge used to arrive)
Predecessors = Dict[str, Tuple[str, Edge]]


def is_better_cost(new_cost: float, old_cost: float, epsilon: float = DEFAULT_COST_EPSILON) -> bool:
    """Compare costs with floating point tolerance.

    Returns True if ``new_cost`` is lower than ``old_cost`` by more than
    ``epsilon``. More negative is better, so tolls are handled the same way
    as ordinary weights.
    """
    return (new_cost - old_cost) < -epsilon


def build_weighted_adjacency(snapshot: GraphSnapshot) -> Adjacency:
    """Register every unblocked edge in both directions.

    Every snapshot node gets an entry, so isolated nodes map to an empty
    list. Edges with an endpoint missing from the snapshot are skipped.
    """
    adjacency: Adjacency = {node_id: [] for node_id in snapshot.node_ids}
    for edge in snapshot.active_edges():
        adjacency[edge.endpoint_a].append((edge.endpoint_b, edge))
        if not edge.is_self_loop:
            adjacency[edge.endpoint_b].append((edge.endpoint_a, edge))
    return adjacency


def reconstruct_path(
    predecessors: Predecessors, start_node: str, end_node: str
) -> Tuple[List[str], List[RouteStep]]:
    """Walk predecessor pointers back from ``end_node``.

    Returns:
        The node sequence from start to end and the matching steps, each
        step carrying the weight of the edge actually relaxed.

    Raises:
        GraphOperationError: If the chain loops or stops before ``start_node``
    """
    path = [end_node]
    steps: List[RouteStep] = []
    seen = {end_node}
    current = end_node
    while current != start_node:
        if current not in predecessors:
            raise GraphOperationError(
                f"Predecessor chain from {end_node} stops at {current} before {start_node}"
            )
        prev, edge = predecessors[current]
        if prev in seen:
            raise GraphOperationError(f"Predecessor chain from {end_node} loops at {prev}")
        seen.add(prev)
        steps.append(RouteStep(prev, current, edge.weight, edge.id))
        path.append(prev)
        current = prev

    path.reverse()
    steps.reverse()
    return path, steps


def create_route_result(
    predecessors: Predecessors,
    start_node: str,
    end_node: str,
    settled_cost: float,
    algorithm: Algorithm,
    cost_epsilon: float = DEFAULT_COST_EPSILON,
) -> RouteResult:
    """Create a found RouteResult from predecessor pointers.

    The total is the sum of the step costs, which by construction equals the
    settled distance of ``end_node``; a disagreement is logged.
    """
    path, steps = reconstruct_path(predecessors, start_node, end_node)
    total_cost = sum(step.cost for step in steps)
    if abs(total_cost - settled_cost) > cost_epsilon * max(1, len(steps)):
        logger.warning(
            "Settled cost %s of %s differs from step total %s", settled_cost, end_node, total_cost
        )
    return RouteResult(
        found=True,
        path=path,
        total_cost=total_cost,
        steps=steps,
        algorithm=algorithm,
        message=f"Route found with {len(steps)} steps and total cost {total_cost:g}",
    )


class PriorityQueue:
    """Priority queue with decrease-key.

    Backed by a binary heap. Superseded entries stay in the heap and are
    skipped on pop. Equal priorities pop in insertion order.
    """

    def __init__(self, epsilon: float = DEFAULT_COST_EPSILON):
        self._queue: List[Tuple[float, int, str]] = []
        self._entry_finder: Dict[str, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties
        self._epsilon = epsilon

    def add_or_update(self, item: str, priority: float) -> None:
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            # Only update if new priority is lower (better)
            if not is_better_cost(priority, old_priority, self._epsilon):
                return

        entry = (priority, self._counter, item)
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, entry)
        self._counter += 1

    def pop(self) -> Optional[Tuple[float, str]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            stored_priority, stored_count = self._entry_finder.get(item, (None, None))
            if stored_priority == priority and stored_count == count:
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)
