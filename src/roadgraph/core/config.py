"""
Analysis configuration.

Holds the tunable limits of the engine. Every public operation accepts an
optional ``AnalysisConfig``; ``DEFAULT_CONFIG`` applies otherwise.
"""

import math
from dataclasses import dataclass

from .exceptions import ConfigurationError

# Constants
DEFAULT_EXHAUSTIVE_SEARCH_LIMIT = 8  # Largest n searched exhaustively for Hamiltonian paths
DEFAULT_COST_EPSILON = 1e-10  # Floating point comparison tolerance


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Tunable limits for route and structural analysis.

    Attributes:
        exhaustive_search_limit: Largest node count for which the Hamiltonian
            analyzer runs backtracking search. Larger graphs that satisfy no
            sufficient condition are reported as indeterminate.
        cost_epsilon: Tolerance used when comparing path costs during
            relaxation and when checking cost consistency of a route.
    """

    exhaustive_search_limit: int = DEFAULT_EXHAUSTIVE_SEARCH_LIMIT
    cost_epsilon: float = DEFAULT_COST_EPSILON

    def __post_init__(self):
        """Validate configuration values."""
        if isinstance(self.exhaustive_search_limit, bool) or not isinstance(
            self.exhaustive_search_limit, int
        ):
            raise ConfigurationError("exhaustive_search_limit must be an integer")
        if self.exhaustive_search_limit < 2:
            raise ConfigurationError("exhaustive_search_limit must be at least 2")
        if isinstance(self.cost_epsilon, bool) or not isinstance(self.cost_epsilon, (int, float)):
            raise ConfigurationError("cost_epsilon must be a numeric value")
        if not math.isfinite(self.cost_epsilon) or self.cost_epsilon <= 0:
            raise ConfigurationError("cost_epsilon must be a positive finite number")


DEFAULT_CONFIG = AnalysisConfig()
