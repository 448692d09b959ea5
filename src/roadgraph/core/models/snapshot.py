"""
Graph snapshot model.

A snapshot is the immutable input to every computation. The editor builds a
fresh one after each user action; the engine reads it and never mutates it.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .base import validate_dataclass
from .edge import Edge
from .node import Node
from ..enums import NodeRole


@validate_dataclass
@dataclass(frozen=True)
class GraphSnapshot:
    """
    Immutable view of the road network at one moment.

    Attributes:
        nodes (Tuple[Node, ...]): Nodes in editor order
        edges (Tuple[Edge, ...]): Edges in editor order, blocked ones included

    Example:
        >>> snapshot = GraphSnapshot(
        ...     nodes=[Node("A", role=NodeRole.ORIGIN), Node("B", role=NodeRole.DESTINATION)],
        ...     edges=[Edge("e1", "A", "B", 4.0)],
        ... )
        >>> snapshot.origin, snapshot.destination
        ('A', 'B')
    """

    nodes: Tuple[Node, ...] = field(default_factory=tuple)
    edges: Tuple[Edge, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Normalise containers and check identity constraints."""
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

        index: Dict[str, Node] = {}
        for node in self.nodes:
            if not isinstance(node, Node):
                raise TypeError("nodes must contain only Node objects")
            if node.id in index:
                raise ValueError(f"duplicate node id: {node.id}")
            index[node.id] = node

        edge_ids = set()
        for edge in self.edges:
            if not isinstance(edge, Edge):
                raise TypeError("edges must contain only Edge objects")
            if edge.id in edge_ids:
                raise ValueError(f"duplicate edge id: {edge.id}")
            edge_ids.add(edge.id)

        for role in (NodeRole.ORIGIN, NodeRole.DESTINATION):
            holders = [node.id for node in self.nodes if node.role is role]
            if len(holders) > 1:
                raise ValueError(
                    f"at most one node may hold role {role.value}, found {', '.join(holders)}"
                )

        object.__setattr__(self, "_node_index", index)

    @classmethod
    def build(
        cls,
        node_ids: Iterable[str],
        edges: Iterable[Tuple[str, str, float]] = (),
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        blocked: Iterable[Tuple[str, str]] = (),
    ) -> "GraphSnapshot":
        """
        Convenience constructor from plain ids and ``(a, b, weight)`` triples.

        Edge ids are generated as ``"a-b"`` (suffixed on repeats). Pairs listed
        in ``blocked`` mark the matching edges as blocked.
        """
        blocked_pairs = {frozenset(pair) for pair in blocked}
        nodes = []
        for node_id in node_ids:
            role = NodeRole.NORMAL
            if node_id == origin:
                role = NodeRole.ORIGIN
            elif node_id == destination:
                role = NodeRole.DESTINATION
            nodes.append(Node(node_id, role=role))

        built: List[Edge] = []
        seen: Dict[str, int] = {}
        for a, b, weight in edges:
            edge_id = f"{a}-{b}"
            seen[edge_id] = seen.get(edge_id, 0) + 1
            if seen[edge_id] > 1:
                edge_id = f"{edge_id}#{seen[edge_id]}"
            built.append(
                Edge(edge_id, a, b, weight, blocked=frozenset((a, b)) in blocked_pairs)
            )
        return cls(nodes=tuple(nodes), edges=tuple(built))

    @property
    def node_ids(self) -> List[str]:
        """Node ids in snapshot order."""
        return [node.id for node in self.nodes]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._node_index

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._node_index.get(node_id)

    def active_edges(self) -> List[Edge]:
        """Unblocked edges whose endpoints are both present in the snapshot."""
        return [
            edge
            for edge in self.edges
            if not edge.blocked
            and edge.endpoint_a in self._node_index
            and edge.endpoint_b in self._node_index
        ]

    def _role_holder(self, role: NodeRole) -> Optional[str]:
        for node in self.nodes:
            if node.role is role:
                return node.id
        return None

    @property
    def origin(self) -> Optional[str]:
        """Id of the node holding the origin role, if any."""
        return self._role_holder(NodeRole.ORIGIN)

    @property
    def destination(self) -> Optional[str]:
        """Id of the node holding the destination role, if any."""
        return self._role_holder(NodeRole.DESTINATION)

    def has_negative_weights(self) -> bool:
        """Check whether any active edge (unblocked, both endpoints known) is negative."""
        return any(edge.weight < 0 for edge in self.active_edges())
