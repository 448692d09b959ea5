"""Hamiltonian path and circuit analysis.

Deciding whether a graph has a Hamiltonian path is NP-complete, so there is
no exact polynomial test to mirror Euler's theorem. The analyzer runs
stages from cheapest to most expensive and stops at the first conclusive
one:

1. Trivial sizes (0, 1 or 2 vertices)
2. Connectivity gate
3. Dirac's sufficient condition (1952)
4. Ore's sufficient condition (1960)
5. Exhaustive backtracking search, for graphs up to
   ``AnalysisConfig.exhaustive_search_limit`` vertices
6. Indeterminate result for larger graphs

Dirac's and Ore's theorems are stated for simple graphs, so both are
evaluated on distinct neighbours, ignoring self-loops and parallel edges.
"""

import logging
import math
from typing import Dict, List, Optional, Set, Tuple

from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..enums import Certainty, ErrorKind
from ..graph_operations.components import ConnectivityAnalysis, ConnectivityReport
from ..models import GraphSnapshot
from .models import HamiltonianResult, ReasoningTrace

logger = logging.getLogger(__name__)

NP_COMPLETE_SUGGESTION = (
    "Reduce the graph to {limit} or fewer vertices for a definite answer, or add edges "
    "until every vertex has degree at least n/2 (Dirac's condition)."
)


class HamiltonianSearch:
    """Backtracking search for Hamiltonian paths and circuits.

    The visited set and path stack are shared across start vertices and
    unwound by backtracking, so a search allocates them once.

    Attributes:
        node_ids: Vertices in snapshot order
        neighbours: Distinct neighbours of each vertex, in snapshot order
        branches: Number of partial paths extended so far
    """

    def __init__(self, node_ids: List[str], neighbours: Dict[str, Set[str]]):
        self.node_ids = list(node_ids)
        self.neighbours = {
            node_id: [other for other in self.node_ids if other in neighbours[node_id]]
            for node_id in self.node_ids
        }
        self.branches = 0
        self._visited: Set[str] = set()
        self._path: List[str] = []

    def find_circuit(self) -> Optional[List[str]]:
        """Find a Hamiltonian circuit, or None if there is none.

        Every circuit passes through the first vertex, so anchoring the
        search there keeps it complete.
        """
        if len(self.node_ids) < 3:
            return None
        start = self.node_ids[0]
        if self._extend(start, close_to=start):
            return list(self._path)
        return None

    def find_path(self) -> Optional[List[str]]:
        """Find a Hamiltonian path starting from each vertex in turn."""
        for start in self.node_ids:
            if self._extend(start, close_to=None):
                return list(self._path)
        return None

    def _extend(self, current: str, close_to: Optional[str]) -> bool:
        self._visited.add(current)
        self._path.append(current)
        self.branches += 1

        if len(self._path) == len(self.node_ids):
            if close_to is None or close_to in self.neighbours[current]:
                return True
        else:
            for neighbor in self.neighbours[current]:
                if neighbor not in self._visited and self._extend(neighbor, close_to):
                    return True

        # Backtrack
        self._visited.discard(current)
        self._path.pop()
        return False


def _trivial_result(snapshot: GraphSnapshot, trace: ReasoningTrace) -> HamiltonianResult:
    n = len(snapshot.nodes)
    trace.add(
        "Check Graph Size",
        "Graphs with fewer than two vertices are Hamiltonian by convention",
        inputs={"vertices": n},
        value=n,
        result="Empty graph" if n == 0 else "Single vertex",
        conclusion="Hamiltonian path and circuit trivially exist",
        passed=True,
    )
    return HamiltonianResult(
        circuit_exists=True,
        path_exists=True,
        certainty=Certainty.DEFINITE,
        witness_path=list(snapshot.node_ids),
        reasoning_trace=trace,
        explanation=(
            "Empty graph (trivially Hamiltonian)"
            if n == 0
            else "Single vertex (trivially Hamiltonian)"
        ),
        mathematical_reasoning=(
            "By convention a graph with at most one vertex has both a Hamiltonian "
            "path and a Hamiltonian circuit."
        ),
        theorem_applied="Convention",
    )


def _two_vertex_result(
    snapshot: GraphSnapshot,
    neighbours: Dict[str, Set[str]],
    report: ConnectivityReport,
    trace: ReasoningTrace,
) -> HamiltonianResult:
    a, b = snapshot.node_ids
    has_edge = any(edge.connects(a, b) for edge in snapshot.active_edges())
    trace.add(
        "Check Graph Size",
        "With two vertices a circuit would need to reuse the only edge",
        inputs={"vertices": 2, "edge_present": has_edge},
        value=2,
        result=f"Edge {a}-{b} {'present' if has_edge else 'absent'}",
        conclusion=(
            "Hamiltonian path exists; no circuit"
            if has_edge
            else "No Hamiltonian path or circuit"
        ),
        passed=has_edge,
    )
    return HamiltonianResult(
        circuit_exists=False,
        path_exists=has_edge,
        certainty=Certainty.DEFINITE,
        witness_path=[a, b] if has_edge else None,
        reasoning_trace=trace,
        error_kind=None if has_edge else ErrorKind.DISCONNECTED,
        explanation=(
            "Two vertices joined by an edge form a Hamiltonian path but not a circuit"
            if has_edge
            else "Two vertices with no edge between them have no Hamiltonian path"
        ),
        mathematical_reasoning=(
            "A Hamiltonian circuit needs at least 3 vertices. With 2 vertices a "
            "Hamiltonian path exists exactly when they are adjacent."
        ),
        degrees=report.degrees,
        min_degree=min(len(neighbours[a]), len(neighbours[b])),
        theorem_applied="Definition",
    )


def _ore_check(
    node_ids: List[str], neighbours: Dict[str, Set[str]], simple_degrees: Dict[str, int]
) -> Tuple[Optional[Tuple[str, str, int]], int, Optional[int]]:
    """Scan every non-adjacent pair for Ore's condition.

    Returns:
        The first pair whose degree sum is below n (or None), the number of
        non-adjacent pairs checked and the smallest degree sum among them.
    """
    n = len(node_ids)
    violation: Optional[Tuple[str, str, int]] = None
    pairs_checked = 0
    min_pair_sum: Optional[int] = None
    for i, u in enumerate(node_ids):
        for v in node_ids[i + 1 :]:
            if v in neighbours[u]:
                continue
            pairs_checked += 1
            degree_sum = simple_degrees[u] + simple_degrees[v]
            if min_pair_sum is None or degree_sum < min_pair_sum:
                min_pair_sum = degree_sum
            if violation is None and degree_sum < n:
                violation = (u, v, degree_sum)
    return violation, pairs_checked, min_pair_sum


def analyze_hamiltonian(
    snapshot: GraphSnapshot,
    config: Optional[AnalysisConfig] = None,
    report: Optional[ConnectivityReport] = None,
) -> HamiltonianResult:
    """Decide whether the snapshot has a Hamiltonian circuit or path.

    Args:
        snapshot: The road network to analyse
        config: Limits for the exhaustive search stage
        report: Precomputed degrees and connectivity, computed here if omitted

    Returns:
        A ``HamiltonianResult``. It is indeterminate only when the graph is
        larger than the search limit and satisfies neither Dirac's nor Ore's
        condition.
    """
    config = config or DEFAULT_CONFIG
    trace = ReasoningTrace()
    node_ids = snapshot.node_ids
    n = len(node_ids)

    if n <= 1:
        return _trivial_result(snapshot, trace)

    report = report or ConnectivityAnalysis.analyze(snapshot)
    neighbours = ConnectivityAnalysis.simple_neighbours(snapshot)

    if n == 2:
        return _two_vertex_result(snapshot, neighbours, report, trace)

    if not report.connected:
        trace.add(
            "Check Graph Connectivity",
            "Used depth-first search over unblocked edges to count components",
            inputs={"vertices": n, "components": report.components},
            value=report.component_count,
            result=f"Graph is disconnected ({report.component_count} components)",
            conclusion="Hamiltonian path impossible: not every vertex can be reached",
            passed=False,
        )
        return HamiltonianResult(
            circuit_exists=False,
            path_exists=False,
            certainty=Certainty.DEFINITE,
            reasoning_trace=trace,
            error_kind=ErrorKind.DISCONNECTED,
            explanation=(
                f"Graph is not connected ({report.component_count} components). "
                "Hamiltonian paths require visiting all vertices."
            ),
            mathematical_reasoning=(
                "A Hamiltonian path visits every vertex, which is impossible when no "
                "walk joins vertices in different components."
            ),
            degrees=report.degrees,
            theorem_applied="Connectivity requirement",
        )

    trace.add(
        "Check Graph Connectivity",
        "Used depth-first search over unblocked edges to count components",
        inputs={"vertices": n},
        value=1,
        result="Graph is connected",
        conclusion="A Hamiltonian path may be possible",
        passed=True,
    )

    simple_degrees = {node_id: len(neighbours[node_id]) for node_id in node_ids}
    min_degree = min(simple_degrees.values())
    max_degree = max(simple_degrees.values())
    trace.add(
        "Calculate Vertex Degrees",
        "Counted distinct neighbours of each vertex",
        inputs={"vertices": n, "min_degree": min_degree, "max_degree": max_degree},
        value=min_degree,
        result="Degrees: {" + ", ".join(f"{k}:{v}" for k, v in simple_degrees.items()) + "}",
    )

    common = dict(degrees=report.degrees, min_degree=min_degree)

    # Dirac: every vertex has degree >= n/2
    half = n / 2
    dirac = min_degree >= half
    trace.add(
        "Check Dirac's Theorem (1952)",
        "Sufficient condition: n >= 3 and deg(v) >= n/2 for every vertex",
        inputs={"n": n, "n/2": half, "min_degree": min_degree},
        value=min_degree,
        result=(
            f"Satisfied: min(deg) = {min_degree} >= {half:g}"
            if dirac
            else f"Not satisfied: min(deg) = {min_degree} < {half:g}"
        ),
        conclusion=(
            "Hamiltonian circuit guaranteed to exist"
            if dirac
            else "Cannot conclude from Dirac's theorem"
        ),
        passed=dirac,
    )
    if dirac:
        return HamiltonianResult(
            circuit_exists=True,
            path_exists=True,
            certainty=Certainty.DEFINITE,
            reasoning_trace=trace,
            explanation=(
                f"Graph has a Hamiltonian circuit (by Dirac's theorem). "
                f"Minimum degree {min_degree} >= n/2 = {half:g}"
            ),
            mathematical_reasoning=(
                "Dirac's theorem: a simple graph with n >= 3 vertices in which every "
                "vertex has degree at least n/2 has a Hamiltonian circuit."
            ),
            theorem_applied="Dirac's Theorem",
            **common,
        )

    violation, pairs_checked, min_pair_sum = _ore_check(node_ids, neighbours, simple_degrees)
    ore = violation is None
    if ore:
        calculation = (
            f"All {pairs_checked} non-adjacent pairs satisfy deg(u) + deg(v) >= {n} "
            f"(smallest sum {min_pair_sum})"
        )
    else:
        u, v, degree_sum = violation
        calculation = (
            f"Counter-example: {u} and {v} are non-adjacent with degree sum "
            f"{degree_sum} < {n}"
        )
    trace.add(
        "Check Ore's Theorem (1960)",
        "Sufficient condition: n >= 3 and deg(u) + deg(v) >= n for every non-adjacent pair",
        inputs={
            "n": n,
            "non_adjacent_pairs": pairs_checked,
            "violation": list(violation) if violation else None,
        },
        value=min_pair_sum if min_pair_sum is not None else pairs_checked,
        result=("Satisfied: " if ore else "Not satisfied: ") + calculation,
        conclusion=(
            "Hamiltonian circuit guaranteed to exist"
            if ore
            else "Cannot conclude from Ore's theorem"
        ),
        passed=ore,
    )
    if ore:
        return HamiltonianResult(
            circuit_exists=True,
            path_exists=True,
            certainty=Certainty.DEFINITE,
            reasoning_trace=trace,
            explanation=(
                "Graph has a Hamiltonian circuit (by Ore's theorem). "
                "For all non-adjacent vertices u, v: deg(u) + deg(v) >= n"
            ),
            mathematical_reasoning=(
                "Ore's theorem: a simple graph with n >= 3 vertices in which every pair "
                "of non-adjacent vertices has degree sum at least n has a Hamiltonian circuit."
            ),
            theorem_applied="Ore's Theorem",
            **common,
        )

    limit = config.exhaustive_search_limit
    if n > limit:
        trace.add(
            "Graph Size Analysis",
            f"Graph has {n} vertices (> {limit})",
            inputs={"n": n, "limit": limit},
            value=n,
            result="Too large for exhaustive search",
            conclusion=f"Exhaustive search would examine up to {math.factorial(n):,} orderings",
            passed=False,
        )
        trace.add(
            "NP-Completeness Limitation",
            "The Hamiltonian path problem is NP-complete (Karp, 1972)",
            inputs={"n": n},
            value=n,
            result="Unknown: cannot determine definitively",
            conclusion="No known efficient algorithm decides this graph",
        )
        logger.debug("Hamiltonian analysis indeterminate for n=%d", n)
        return HamiltonianResult(
            circuit_exists=None,
            path_exists=None,
            certainty=Certainty.INDETERMINATE,
            reasoning_trace=trace,
            error_kind=ErrorKind.INDETERMINATE_COMPLEXITY,
            explanation=(
                "Graph is too large for exhaustive search and does not satisfy "
                "Dirac's or Ore's sufficient condition"
            ),
            mathematical_reasoning=(
                "The Hamiltonian path problem is NP-complete, so no polynomial-time "
                f"algorithm is known. With {n} vertices exhaustive search is infeasible, "
                "and neither sufficient condition holds."
            ),
            theorem_applied="NP-completeness",
            suggestion=NP_COMPLETE_SUGGESTION.format(limit=limit),
            **common,
        )

    trace.add(
        "Attempt Exhaustive Backtracking Search",
        f"Graph is small ({n} <= {limit} vertices), so every ordering can be tried",
        inputs={"n": n, "limit": limit},
        value=math.factorial(n),
        result=f"At most {math.factorial(n):,} orderings to check",
    )

    search = HamiltonianSearch(node_ids, neighbours)
    circuit = search.find_circuit()
    path = circuit if circuit is not None else search.find_path()
    logger.debug(
        "Hamiltonian search over %d vertices explored %d branches", n, search.branches
    )

    if circuit is not None:
        outcome = "Hamiltonian circuit found"
        explanation = "Hamiltonian circuit found by exhaustive search"
        reasoning = (
            "Backtracking found an ordering that visits every vertex once and returns "
            "to the start."
        )
    elif path is not None:
        outcome = "Hamiltonian path found (no circuit)"
        explanation = "Hamiltonian path found (but no circuit) by exhaustive search"
        reasoning = (
            "Backtracking found an ordering that visits every vertex once; no ordering "
            "closes back to its start."
        )
    else:
        outcome = "No Hamiltonian path or circuit found"
        explanation = "No Hamiltonian path found by exhaustive search"
        reasoning = (
            "Exhaustive backtracking found no Hamiltonian path. The search is complete "
            "for this graph size, so none exists."
        )

    trace.add(
        "Backtracking Search Results",
        "Exhaustive search completed",
        inputs={"branches_explored": search.branches},
        value=search.branches,
        result=outcome,
        conclusion=(
            "Definite answer: Hamiltonian structure exists"
            if path is not None
            else "Definite answer: no Hamiltonian structure exists"
        ),
        passed=path is not None,
    )

    return HamiltonianResult(
        circuit_exists=circuit is not None,
        path_exists=path is not None,
        certainty=Certainty.DEFINITE,
        witness_path=path,
        reasoning_trace=trace,
        explanation=explanation,
        mathematical_reasoning=reasoning,
        theorem_applied="Exhaustive search",
        **common,
    )
