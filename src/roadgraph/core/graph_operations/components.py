"""Degree and connectivity analysis for road-network snapshots.

This module provides the shared first stage of structural analysis:
- Vertex degrees over unblocked edges (a self-loop contributes 2)
- Connected components found by depth-first traversal over unblocked edges
- The simple-graph neighbour sets used by the degree-based Hamiltonian tests

Both the Eulerian and Hamiltonian analyzers consume a single
``ConnectivityReport`` computed here.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set

from ..models import GraphSnapshot

logger = logging.getLogger(__name__)


@dataclass
class ConnectivityReport:
    """Degrees and connectivity of a snapshot.

    Attributes:
        degrees: Node id to number of incident unblocked edges
        connected: Whether every node is reachable from every other
        component_count: Number of depth-first traversals needed to cover all nodes
        components: Node ids of each component, in discovery order
    """

    degrees: Dict[str, int]
    connected: bool
    component_count: int
    components: List[List[str]] = field(default_factory=list)

    @property
    def odd_degree_vertices(self) -> List[str]:
        """Nodes with odd degree, in snapshot order."""
        return [node_id for node_id, degree in self.degrees.items() if degree % 2 == 1]

    @property
    def min_degree(self) -> int:
        return min(self.degrees.values()) if self.degrees else 0

    @property
    def max_degree(self) -> int:
        return max(self.degrees.values()) if self.degrees else 0


class ConnectivityAnalysis:
    """Degree and connectivity analysis over unblocked edges.

    Implemented as static methods so any snapshot can be analysed without
    keeping state between calls.
    """

    @staticmethod
    def build_adjacency(snapshot: GraphSnapshot) -> Dict[str, List[str]]:
        """Build undirected adjacency lists over unblocked edges.

        Each edge is registered from both endpoints, so parallel edges appear
        more than once and a self-loop lists its node twice. Every snapshot
        node has an entry, isolated ones included.

        Args:
            snapshot (GraphSnapshot): The snapshot to analyse.

        Returns:
            Dict[str, List[str]]: Node id to neighbour ids.
        """
        adjacency: Dict[str, List[str]] = {node_id: [] for node_id in snapshot.node_ids}
        for edge in snapshot.active_edges():
            for node_id in edge.endpoints:
                adjacency[node_id].append(edge.other_end(node_id))
        return adjacency

    @staticmethod
    def simple_neighbours(snapshot: GraphSnapshot) -> Dict[str, Set[str]]:
        """Distinct neighbours of each node, ignoring self-loops and parallel edges."""
        neighbours: Dict[str, Set[str]] = {node_id: set() for node_id in snapshot.node_ids}
        for edge in snapshot.active_edges():
            if edge.is_self_loop:
                continue
            neighbours[edge.endpoint_a].add(edge.endpoint_b)
            neighbours[edge.endpoint_b].add(edge.endpoint_a)
        return neighbours

    @staticmethod
    def calculate_degrees(snapshot: GraphSnapshot) -> Dict[str, int]:
        """Count unblocked edges incident to each node.

        An edge between A and B adds one to each endpoint, so a self-loop on
        A adds two to A.

        Args:
            snapshot (GraphSnapshot): The snapshot to analyse.

        Returns:
            Dict[str, int]: Node id to degree, in snapshot order.
        """
        degrees = {node_id: 0 for node_id in snapshot.node_ids}
        for edge in snapshot.active_edges():
            degrees[edge.endpoint_a] += 1
            degrees[edge.endpoint_b] += 1
        return degrees

    @staticmethod
    def find_components(snapshot: GraphSnapshot) -> List[List[str]]:
        """Find connected components with an explicit-stack depth-first search.

        Traversals start from each not-yet-visited node in snapshot order,
        so the result is deterministic for a given snapshot.

        Args:
            snapshot (GraphSnapshot): The snapshot to analyse.

        Returns:
            List[List[str]]: One list of node ids per component.
        """
        adjacency = ConnectivityAnalysis.build_adjacency(snapshot)
        visited: Set[str] = set()
        components: List[List[str]] = []

        for start_node in snapshot.node_ids:
            if start_node in visited:
                continue

            component = []
            stack = [start_node]
            visited.add(start_node)
            while stack:
                current_node = stack.pop()
                component.append(current_node)
                for neighbor in adjacency[current_node]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)

            components.append(component)

        return components

    @staticmethod
    def analyze(snapshot: GraphSnapshot) -> ConnectivityReport:
        """Compute degrees and connectivity in one pass over the snapshot.

        A snapshot with no nodes is connected with zero components; a single
        node is connected with one component.

        Args:
            snapshot (GraphSnapshot): The snapshot to analyse.

        Returns:
            ConnectivityReport: Degrees, connectivity flag and components.
        """
        degrees = ConnectivityAnalysis.calculate_degrees(snapshot)
        components = ConnectivityAnalysis.find_components(snapshot)
        component_count = len(components)
        report = ConnectivityReport(
            degrees=degrees,
            connected=component_count <= 1,
            component_count=component_count,
            components=components,
        )
        logger.debug(
            "Connectivity: %d nodes, %d components, degrees %s",
            len(degrees),
            component_count,
            degrees,
        )
        return report
