"""Whole-graph operations: degree/connectivity analysis and serialization."""

from .components import ConnectivityAnalysis, ConnectivityReport
from .serialization import GraphSerializer

__all__ = ["ConnectivityAnalysis", "ConnectivityReport", "GraphSerializer"]
