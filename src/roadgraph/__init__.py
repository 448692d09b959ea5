"""
roadgraph - Route and structural analysis for small road networks

This package provides the analysis engine behind an interactive road network
editor. It includes:

- Shortest routes with Dijkstra's algorithm or Bellman-Ford, including
  negative-cycle detection
- Eulerian path and circuit analysis via Euler's theorem
- Hamiltonian path and circuit analysis via Dirac's and Ore's theorems and
  bounded exhaustive search
- JSON serialization of graph snapshots with schema validation
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("roadgraph requires Python 3.12 or higher")

from .core.config import AnalysisConfig
from .core.enums import Algorithm, Certainty, ErrorKind, NodeRole
from .core.models import Edge, GraphSnapshot, Node
from .engine import (
    compute_eulerian_analysis,
    compute_full_analysis,
    compute_hamiltonian_analysis,
    compute_shortest_path,
)

__all__ = [
    "AnalysisConfig",
    "Algorithm",
    "Certainty",
    "ErrorKind",
    "NodeRole",
    "Edge",
    "GraphSnapshot",
    "Node",
    "compute_eulerian_analysis",
    "compute_full_analysis",
    "compute_hamiltonian_analysis",
    "compute_shortest_path",
]
