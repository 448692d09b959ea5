from abc import ABC, abstractmethod
from typing import Optional

from roadgraph.core.config import DEFAULT_CONFIG, AnalysisConfig
from roadgraph.core.enums import Algorithm
from roadgraph.core.exceptions import NodeNotFoundError
from roadgraph.core.graph_paths.models import RouteResult
from roadgraph.core.models import GraphSnapshot


class PathFinder(ABC):
    """Abstract base class for shortest path strategies."""

    algorithm: Algorithm

    def __init__(self, snapshot: GraphSnapshot, config: Optional[AnalysisConfig] = None):
        """Initialize finder with a snapshot."""
        self.snapshot = snapshot
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def find_path(self, start_node: str, end_node: str) -> RouteResult:
        """Find the cheapest route between nodes."""
        pass

    def validate_nodes(self, start_node: str, end_node: str) -> None:
        """Validate that nodes exist in the snapshot."""
        if not self.snapshot.has_node(start_node):
            raise NodeNotFoundError(f"Start node '{start_node}' not found", start_node)
        if not self.snapshot.has_node(end_node):
            raise NodeNotFoundError(f"End node '{end_node}' not found", end_node)
