"""Eulerian and Hamiltonian structure analysis."""

from .eulerian import analyze_eulerian, hierholzer_trail
from .hamiltonian import HamiltonianSearch, analyze_hamiltonian
from .models import (
    EulerianResult,
    HamiltonianResult,
    ReasoningStep,
    ReasoningTrace,
    StructuralResult,
)

__all__ = [
    "analyze_eulerian",
    "analyze_hamiltonian",
    "hierholzer_trail",
    "HamiltonianSearch",
    "EulerianResult",
    "HamiltonianResult",
    "ReasoningStep",
    "ReasoningTrace",
    "StructuralResult",
]
