"""
Data models for structural (Eulerian and Hamiltonian) analysis.

Both analyzers return a ``StructuralResult`` subclass carrying the verdicts,
how certain they are, an optional witness walk and a reasoning trace that
explains each stage the analyzer went through.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..enums import Certainty, ErrorKind


def _plain(value: Any) -> Any:
    """Render enums, tuples and nested mappings as JSON-compatible values."""
    if isinstance(value, (Certainty, ErrorKind)):
        return value.value
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass
class ReasoningStep:
    """
    One stage of a structural analysis.

    Attributes:
        step: 1-based position in the trace
        title: Short name of the check
        description: What was checked and how
        inputs: The values the check looked at
        value: Numeric result of the check, if it has one
        result: Outcome of the check in words
        conclusion: What the outcome means for the verdict
        passed: Whether the check succeeded, if that notion applies
    """

    step: int
    title: str
    description: str
    inputs: Dict[str, Any] = field(default_factory=dict)
    value: Optional[float] = None
    result: str = ""
    conclusion: str = ""
    passed: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step,
            "title": self.title,
            "description": self.description,
            "inputs": _plain(self.inputs),
            "value": self.value,
            "result": self.result,
            "conclusion": self.conclusion,
            "passed": self.passed,
        }


class ReasoningTrace(list):
    """List of reasoning steps that numbers entries as they are added."""

    def add(self, title: str, description: str, **details: Any) -> ReasoningStep:
        entry = ReasoningStep(step=len(self) + 1, title=title, description=description, **details)
        self.append(entry)
        return entry


@dataclass
class StructuralResult:
    """
    Verdicts on circuit and path existence.

    ``circuit_exists`` and ``path_exists`` are ``None`` when the analyzer
    could not decide; ``certainty`` is then ``Certainty.INDETERMINATE``.

    Attributes:
        circuit_exists: Whether a closed walk of the required kind exists
        path_exists: Whether an open or closed walk of the required kind exists
        certainty: Whether the verdicts are conclusive
        witness_path: A walk demonstrating the verdict, when one was built
        reasoning_trace: Stages of the analysis, in order
        error_kind: Non-success classification, if any
        explanation: One-sentence summary
        mathematical_reasoning: Theorem or argument behind the verdict
    """

    circuit_exists: Optional[bool]
    path_exists: Optional[bool]
    certainty: Certainty = Certainty.DEFINITE
    witness_path: Optional[List[str]] = None
    reasoning_trace: List[ReasoningStep] = field(default_factory=ReasoningTrace)
    error_kind: Optional[ErrorKind] = None
    explanation: str = ""
    mathematical_reasoning: str = ""

    def __post_init__(self):
        """Check verdicts agree with certainty."""
        undecided = self.circuit_exists is None or self.path_exists is None
        if undecided and self.certainty is Certainty.DEFINITE:
            raise ValueError("definite results must decide both circuit and path existence")
        if self.circuit_exists and self.path_exists is False:
            raise ValueError("a circuit is also a path")

    @property
    def is_definite(self) -> bool:
        return self.certainty is Certainty.DEFINITE

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the result to dictionary format.

        Returns:
            Dictionary containing every field, enums rendered as their values
        """
        data = {
            name: _plain(getattr(self, name))
            for name in self.__dataclass_fields__
            if name != "reasoning_trace"
        }
        data["reasoning_trace"] = [entry.to_dict() for entry in self.reasoning_trace]
        return data


@dataclass
class EulerianResult(StructuralResult):
    """
    Outcome of Euler's theorem applied to a snapshot.

    Attributes:
        degrees: Node id to degree over unblocked edges
        connected: Whether the snapshot is connected
        component_count: Number of connected components
        odd_degree_vertices: Nodes of odd degree, in snapshot order
        start_end_vertices: The two odd vertices an Eulerian path must join
    """

    degrees: Dict[str, int] = field(default_factory=dict)
    connected: bool = True
    component_count: int = 0
    odd_degree_vertices: List[str] = field(default_factory=list)
    start_end_vertices: Optional[List[str]] = None

    @property
    def odd_degree_count(self) -> int:
        return len(self.odd_degree_vertices)


@dataclass
class HamiltonianResult(StructuralResult):
    """
    Outcome of the staged Hamiltonian analysis.

    Attributes:
        degrees: Node id to degree over unblocked edges
        min_degree: Smallest degree in the simple underlying graph
        theorem_applied: Name of the stage that settled the verdict
        suggestion: Advice for turning an indeterminate result into a definite one
    """

    degrees: Dict[str, int] = field(default_factory=dict)
    min_degree: Optional[int] = None
    theorem_applied: str = ""
    suggestion: Optional[str] = None
