"""
Public entry points of the analysis engine.

The editor calls these after every change to the road network. Each call is
a pure function of its snapshot: nothing is cached and the snapshot is never
modified, so calling twice on the same snapshot gives identical results.
"""

import logging
from typing import Any, Dict, Optional, Union

from .core.config import AnalysisConfig
from .core.enums import Algorithm, ErrorKind
from .core.graph_operations.components import ConnectivityAnalysis
from .core.graph_paths import PathFinding, RouteResult, find_path
from .core.graph_structure import (
    EulerianResult,
    HamiltonianResult,
    analyze_eulerian,
    analyze_hamiltonian,
)
from .core.models import GraphSnapshot

logger = logging.getLogger(__name__)


def compute_shortest_path(
    snapshot: GraphSnapshot,
    origin_id: Optional[str] = None,
    destination_id: Optional[str] = None,
    algorithm: Union[Algorithm, str, None] = Algorithm.AUTO,
    config: Optional[AnalysisConfig] = None,
) -> RouteResult:
    """
    Find the cheapest route between two nodes.

    Args:
        snapshot: The road network
        origin_id: Start node, defaults to the node holding the origin role
        destination_id: End node, defaults to the node holding the destination role
        algorithm: ``"dijkstra"``, ``"bellman-ford"`` or ``"auto"``
        config: Optional analysis limits

    Returns:
        A complete RouteResult; a missing origin or destination is reported
        as ``ErrorKind.NODE_NOT_FOUND``.

    Raises:
        ValueError: If ``algorithm`` names no known strategy
    """
    origin_id = origin_id if origin_id is not None else snapshot.origin
    destination_id = destination_id if destination_id is not None else snapshot.destination

    if origin_id is None or destination_id is None:
        missing = "origin" if origin_id is None else "destination"
        return RouteResult.failure(
            ErrorKind.NODE_NOT_FOUND,
            f"No {missing} node selected",
            PathFinding.select_algorithm(snapshot, algorithm),
        )

    result = find_path(snapshot, origin_id, destination_id, algorithm, config)
    logger.info(
        "Route %s -> %s via %s: found=%s cost=%s",
        origin_id,
        destination_id,
        result.algorithm.value if result.algorithm else None,
        result.found,
        result.total_cost,
    )
    return result


def compute_eulerian_analysis(
    snapshot: GraphSnapshot, config: Optional[AnalysisConfig] = None
) -> EulerianResult:
    """Apply Euler's theorem to the snapshot."""
    result = analyze_eulerian(snapshot, config)
    logger.info(
        "Eulerian analysis: circuit=%s path=%s", result.circuit_exists, result.path_exists
    )
    return result


def compute_hamiltonian_analysis(
    snapshot: GraphSnapshot, config: Optional[AnalysisConfig] = None
) -> HamiltonianResult:
    """Run the staged Hamiltonian analysis on the snapshot."""
    result = analyze_hamiltonian(snapshot, config)
    logger.info(
        "Hamiltonian analysis (%s): circuit=%s path=%s",
        result.theorem_applied,
        result.circuit_exists,
        result.path_exists,
    )
    return result


def compute_full_analysis(
    snapshot: GraphSnapshot,
    origin_id: Optional[str] = None,
    destination_id: Optional[str] = None,
    algorithm: Union[Algorithm, str, None] = Algorithm.AUTO,
    config: Optional[AnalysisConfig] = None,
) -> Dict[str, Any]:
    """
    Run all three analyses, as the editor does after each change.

    Degrees and connectivity are computed once and shared by both
    structural analyzers.

    Returns:
        Mapping with ``route``, ``eulerian`` and ``hamiltonian`` results
    """
    report = ConnectivityAnalysis.analyze(snapshot)
    return {
        "route": compute_shortest_path(snapshot, origin_id, destination_id, algorithm, config),
        "eulerian": analyze_eulerian(snapshot, config, report=report),
        "hamiltonian": analyze_hamiltonian(snapshot, config, report=report),
    }
