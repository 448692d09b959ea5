"""Eulerian path and circuit analysis.

Euler's theorem (1736) gives an exact, polynomial answer for undirected
graphs: a connected graph has an Eulerian circuit if and only if every
vertex has even degree, and an Eulerian path if and only if it has zero or
two vertices of odd degree. Results from this module are therefore always
definite.

When a walk exists, a witness is built with Hierholzer's algorithm so the
editor can animate it.
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from ..config import AnalysisConfig
from ..enums import Certainty, ErrorKind
from ..graph_operations.components import ConnectivityAnalysis, ConnectivityReport
from ..models import GraphSnapshot
from .models import EulerianResult, ReasoningTrace

logger = logging.getLogger(__name__)


def hierholzer_trail(snapshot: GraphSnapshot, start: str) -> List[str]:
    """Build an Eulerian trail over the unblocked edges with Hierholzer's algorithm.

    The caller must already know a trail exists from ``start``: the active
    edges are connected and ``start`` is odd when two vertices are odd.

    Returns:
        Node ids visited in order; one more entry than there are edges.
    """
    incidence: Dict[str, List[Tuple[str, str]]] = {node_id: [] for node_id in snapshot.node_ids}
    for edge in snapshot.active_edges():
        incidence[edge.endpoint_a].append((edge.endpoint_b, edge.id))
        if not edge.is_self_loop:
            incidence[edge.endpoint_b].append((edge.endpoint_a, edge.id))

    used: Set[str] = set()
    cursor = {node_id: 0 for node_id in incidence}
    stack = [start]
    trail: List[str] = []

    while stack:
        u = stack[-1]
        options = incidence[u]
        while cursor[u] < len(options) and options[cursor[u]][1] in used:
            cursor[u] += 1
        if cursor[u] < len(options):
            v, edge_id = options[cursor[u]]
            used.add(edge_id)
            stack.append(v)
        else:
            trail.append(stack.pop())

    trail.reverse()
    return trail


def _degree_listing(degrees: Dict[str, int]) -> str:
    return ", ".join(f"{node_id}:{degree}" for node_id, degree in degrees.items())


def _edgeless_result(
    snapshot: GraphSnapshot, report: ConnectivityReport, trace: ReasoningTrace
) -> EulerianResult:
    n = len(snapshot.nodes)
    trivial = n <= 1
    if n == 0:
        explanation = "Empty graph (trivially Eulerian)"
    elif n == 1:
        explanation = "Single vertex with no edges (trivially Eulerian)"
    else:
        explanation = "Graph has vertices but no usable edges, so it is not connected"

    trace.add(
        "Check Edge Count",
        "Counted unblocked edges before applying Euler's theorem",
        inputs={"vertices": n, "edges": 0},
        value=0,
        result="No unblocked edges",
        conclusion=(
            "Trivially satisfied by convention"
            if trivial
            else "Isolated vertices cannot be joined by any walk"
        ),
        passed=trivial,
    )

    return EulerianResult(
        circuit_exists=trivial,
        path_exists=trivial,
        certainty=Certainty.DEFINITE,
        witness_path=list(snapshot.node_ids) if trivial else None,
        reasoning_trace=trace,
        error_kind=None if trivial else ErrorKind.DISCONNECTED,
        explanation=explanation,
        mathematical_reasoning=(
            "A graph with no edges and at most one vertex is considered to have an "
            "Eulerian circuit by convention."
            if trivial
            else "A disconnected graph with isolated vertices cannot have an Eulerian "
            "path or circuit."
        ),
        degrees=report.degrees,
        connected=report.connected,
        component_count=report.component_count,
        odd_degree_vertices=[],
    )


def analyze_eulerian(
    snapshot: GraphSnapshot,
    config: Optional[AnalysisConfig] = None,
    report: Optional[ConnectivityReport] = None,
) -> EulerianResult:
    """Decide whether the snapshot has an Eulerian circuit or path.

    Args:
        snapshot: The road network to analyse
        config: Unused by Euler's theorem; accepted for a uniform signature
        report: Precomputed degrees and connectivity, computed here if omitted

    Returns:
        A definite ``EulerianResult`` with a reasoning trace and, when a walk
        exists, a Hierholzer witness.
    """
    report = report or ConnectivityAnalysis.analyze(snapshot)
    trace = ReasoningTrace()
    edge_count = len(snapshot.active_edges())
    n = len(snapshot.nodes)

    if edge_count == 0:
        return _edgeless_result(snapshot, report, trace)

    trace.add(
        "Check Graph Connectivity",
        "Used depth-first search over unblocked edges to count components",
        inputs={"vertices": n, "components": report.components},
        value=report.component_count,
        result=(
            f"Graph is connected ({report.component_count} component)"
            if report.connected
            else f"Graph is disconnected ({report.component_count} components)"
        ),
        passed=report.connected,
    )

    trace.add(
        "Calculate Vertex Degrees",
        "Counted unblocked edges incident to each vertex",
        inputs={"vertices": n, "edges": edge_count},
        value=sum(report.degrees.values()),
        result=f"Degrees: {{{_degree_listing(report.degrees)}}}",
    )

    odd = report.odd_degree_vertices
    k = len(odd)
    if k == 0:
        odd_result = "No odd-degree vertices (all even)"
    else:
        odd_result = f"Found {k} odd-degree vertices: {', '.join(odd)}"
    trace.add(
        "Identify Odd-Degree Vertices",
        "Found vertices whose degree is an odd number",
        inputs={"odd_degree_vertices": odd},
        value=k,
        result=odd_result,
        passed=k in (0, 2),
    )

    circuit = False
    path = False
    witness: Optional[List[str]] = None
    start_end: Optional[List[str]] = None
    error_kind: Optional[ErrorKind] = None

    if not report.connected:
        error_kind = ErrorKind.DISCONNECTED
        trace.add(
            "Apply Euler's Theorem",
            "The graph must be connected for any Eulerian walk",
            inputs={"components": report.component_count},
            value=report.component_count,
            result="Failed: graph is disconnected",
            conclusion="No Eulerian path or circuit can exist",
            passed=False,
        )
        explanation = (
            f"Graph is not connected ({report.component_count} components). "
            "Eulerian paths and circuits require connectivity."
        )
        reasoning = (
            "An Eulerian path or circuit traverses every edge, which is impossible "
            "when the edges lie in separate components."
        )
    elif k == 0:
        circuit = path = True
        start = next(node_id for node_id, degree in report.degrees.items() if degree > 0)
        witness = hierholzer_trail(snapshot, start)
        trace.add(
            "Apply Euler's Theorem (Circuit)",
            "Connected graph with all even degrees has an Eulerian circuit",
            inputs={"odd_degree_count": 0},
            value=0,
            result="Passed: every vertex has even degree",
            conclusion="Eulerian circuit exists, and therefore an Eulerian path",
            passed=True,
        )
        explanation = (
            "Graph has an Eulerian circuit (and therefore an Eulerian path). "
            "All vertices have even degree."
        )
        reasoning = (
            "Euler's theorem: a connected graph has an Eulerian circuit if and only if "
            "every vertex has even degree. A circuit is also a path."
        )
    elif k == 2:
        path = True
        start_end = [odd[0], odd[1]]
        witness = hierholzer_trail(snapshot, odd[0])
        trace.add(
            "Apply Euler's Theorem (Path)",
            "Connected graph with exactly two odd-degree vertices has an Eulerian path",
            inputs={"odd_degree_vertices": odd},
            value=2,
            result="Passed: exactly two odd-degree vertices",
            conclusion="Eulerian path exists; no Eulerian circuit since start and end differ",
            passed=True,
        )
        trace.add(
            "Determine Path Endpoints",
            "The path must start and end at the odd-degree vertices",
            inputs={"start": odd[0], "end": odd[1]},
            value=len(start_end),
            result=f"Start: {odd[0]}, End: {odd[1]}",
            conclusion="Walk direction is fixed by these two vertices",
        )
        explanation = (
            "Graph has an Eulerian path but not an Eulerian circuit. "
            "Exactly 2 vertices have odd degree."
        )
        reasoning = (
            "A connected graph has an Eulerian path if and only if it has 0 or 2 "
            "vertices of odd degree. With 2, the path runs between them, so it cannot close."
        )
    else:
        trace.add(
            "Apply Euler's Theorem",
            "Need exactly 0 or 2 odd-degree vertices",
            inputs={"odd_degree_count": k},
            value=k,
            result=f"Failed: {k} odd-degree vertices",
            conclusion="Neither an Eulerian path nor a circuit exists",
            passed=False,
        )
        explanation = (
            f"Graph has neither an Eulerian path nor a circuit. "
            f"{k} vertices have odd degree (need 0 or 2)."
        )
        reasoning = (
            "A walk entering an intermediate vertex must also leave it, so every vertex "
            f"except the two ends needs even degree. {k} odd vertices leave {k - 2} "
            "that cannot be endpoints."
        )

    logger.debug("Eulerian analysis: circuit=%s path=%s odd=%s", circuit, path, odd)

    return EulerianResult(
        circuit_exists=circuit,
        path_exists=path,
        certainty=Certainty.DEFINITE,
        witness_path=witness,
        reasoning_trace=trace,
        error_kind=error_kind,
        explanation=explanation,
        mathematical_reasoning=reasoning,
        degrees=report.degrees,
        connected=report.connected,
        component_count=report.component_count,
        odd_degree_vertices=odd,
        start_end_vertices=start_end,
    )
