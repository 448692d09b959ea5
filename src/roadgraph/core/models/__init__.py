"""
Core domain models package for roadgraph.

This package provides the immutable snapshot the editor hands to the engine:
nodes, undirected weighted edges and the snapshot that groups them.
"""

from .base import coerce_weight, validate_identifier
from .edge import Edge
from .node import Node
from .snapshot import GraphSnapshot

__all__ = [
    "coerce_weight",
    "validate_identifier",
    "Node",
    "Edge",
    "GraphSnapshot",
]
