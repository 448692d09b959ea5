"""Core graph analysis functionality."""

from .config import DEFAULT_CONFIG, AnalysisConfig
from .enums import Algorithm, Certainty, ErrorKind, NodeRole
from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import Edge, GraphSnapshot, Node
from .graph_operations.components import ConnectivityAnalysis, ConnectivityReport
from .graph_operations.serialization import GraphSerializer
from .graph_paths import PathFinding, RouteResult, RouteStep, find_path
from .graph_structure import (
    EulerianResult,
    HamiltonianResult,
    ReasoningStep,
    StructuralResult,
    analyze_eulerian,
    analyze_hamiltonian,
)

__all__ = [
    "AnalysisConfig",
    "DEFAULT_CONFIG",
    "Algorithm",
    "Certainty",
    "ErrorKind",
    "NodeRole",
    "ConfigurationError",
    "GraphOperationError",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "ValidationError",
    "Edge",
    "GraphSnapshot",
    "Node",
    "ConnectivityAnalysis",
    "ConnectivityReport",
    "GraphSerializer",
    "PathFinding",
    "RouteResult",
    "RouteStep",
    "find_path",
    "EulerianResult",
    "HamiltonianResult",
    "ReasoningStep",
    "StructuralResult",
    "analyze_eulerian",
    "analyze_hamiltonian",
]
