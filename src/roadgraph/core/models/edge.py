"""
Edge model for road-network snapshots.

Edges are undirected roads. A blocked edge stays in the snapshot so the
editor can display it, but the engine never traverses it or counts it
towards a degree.
"""

from dataclasses import dataclass
from typing import Tuple

from .base import coerce_weight, validate_dataclass, validate_identifier


@validate_dataclass
@dataclass(frozen=True)
class Edge:
    """
    An undirected road between two nodes.

    Attributes:
        id (str): Unique identifier for the edge
        endpoint_a (str): One endpoint node id
        endpoint_b (str): The other endpoint node id
        weight (float): Traversal cost; negative values model tolls
        blocked (bool): Whether the road is closed
    """

    id: str
    endpoint_a: str
    endpoint_b: str
    weight: float = 1.0
    blocked: bool = False

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_identifier("id", self.id)
        validate_identifier("endpoint_a", self.endpoint_a)
        validate_identifier("endpoint_b", self.endpoint_b)
        object.__setattr__(self, "weight", coerce_weight(self.weight))
        if not isinstance(self.blocked, bool):
            raise TypeError("blocked must be a boolean")

    @property
    def endpoints(self) -> Tuple[str, str]:
        """Both endpoint ids."""
        return (self.endpoint_a, self.endpoint_b)

    @property
    def is_self_loop(self) -> bool:
        return self.endpoint_a == self.endpoint_b

    def other_end(self, node_id: str) -> str:
        """
        Get the endpoint opposite ``node_id``.

        Raises:
            ValueError: If ``node_id`` is not an endpoint of this edge
        """
        if node_id == self.endpoint_a:
            return self.endpoint_b
        if node_id == self.endpoint_b:
            return self.endpoint_a
        raise ValueError(f"Node {node_id} is not an endpoint of edge {self.id}")

    def connects(self, u: str, v: str) -> bool:
        """Check whether this edge joins ``u`` and ``v`` in either direction."""
        return (self.endpoint_a == u and self.endpoint_b == v) or (
            self.endpoint_a == v and self.endpoint_b == u
        )
