"""
Data models for route finding.

This module provides the result records produced by the shortest path engine:
- RouteStep: One traversed road with its cost
- RouteResult: Complete outcome of a route query, successful or not
- PathValidationError: Exception for routes that break their invariants

Example:
    >>> result = RouteResult(found=True, path=["A", "C"], total_cost=2.0,
    ...                      steps=[RouteStep("A", "C", 2.0, "e2")])
    >>> result.validate("A", "C")
    >>> result.length
    1
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..enums import Algorithm, ErrorKind


class PathValidationError(Exception):
    """
    Raised when a route fails validation checks.

    This exception indicates issues such as:
    - A found route that does not start at the origin or end at the destination
    - Steps that do not chain through the path's nodes
    - A total cost that differs from the sum of step costs
    """

    pass


@dataclass(frozen=True)
class RouteStep:
    """
    One leg of a route.

    Attributes:
        from_node: Node the leg leaves
        to_node: Node the leg arrives at
        cost: Weight of the traversed edge
        edge_id: Id of the traversed edge
    """

    from_node: str
    to_node: str
    cost: float
    edge_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_node,
            "to": self.to_node,
            "cost": self.cost,
            "edge_id": self.edge_id,
        }


@dataclass
class RouteResult:
    """
    Container for route finding results.

    A result is always returned, whether or not a route exists. When
    ``found`` is False, ``error_kind`` says why and ``message`` explains it
    in words the editor can show.

    Attributes:
        found: Whether a route from origin to destination exists
        path: Node ids from origin to destination
        total_cost: Sum of the step costs
        steps: Per-edge cost breakdown
        has_negative_cycle: Whether a negative cycle is reachable from the origin
        error_kind: Reason the route was not found, if any
        algorithm: Strategy that produced the result
        message: Human-readable explanation
    """

    found: bool
    path: List[str] = field(default_factory=list)
    total_cost: float = 0.0
    steps: List[RouteStep] = field(default_factory=list)
    has_negative_cycle: bool = False
    error_kind: Optional[ErrorKind] = None
    algorithm: Optional[Algorithm] = None
    message: str = ""

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.path, list):
            raise TypeError("path must be a list")

        if not all(isinstance(step, RouteStep) for step in self.steps):
            raise TypeError("steps must contain only RouteStep objects")

        if isinstance(self.total_cost, bool) or not isinstance(self.total_cost, (int, float)):
            raise TypeError("total_cost must be a numeric value")

        if self.found and not self.path:
            raise PathValidationError("a found route must contain at least one node")

        if self.found and self.error_kind is not None:
            raise PathValidationError("a found route cannot carry an error kind")

    def __len__(self) -> int:
        """Return the number of steps in the route."""
        return len(self.steps)

    @property
    def length(self) -> int:
        """Number of edges traversed."""
        return len(self.steps)

    @classmethod
    def trivial(cls, node_id: str, algorithm: Optional[Algorithm] = None) -> "RouteResult":
        """Route from a node to itself: a zero-cost singleton path."""
        return cls(
            found=True,
            path=[node_id],
            total_cost=0.0,
            steps=[],
            algorithm=algorithm,
            message="Origin and destination are the same node",
        )

    @classmethod
    def failure(
        cls,
        error_kind: ErrorKind,
        message: str,
        algorithm: Optional[Algorithm] = None,
        has_negative_cycle: bool = False,
    ) -> "RouteResult":
        """Result for a query that produced no route."""
        return cls(
            found=False,
            error_kind=error_kind,
            algorithm=algorithm,
            has_negative_cycle=has_negative_cycle,
            message=message,
        )

    def validate(self, origin: str, destination: str, cost_epsilon: float = 1e-9) -> None:
        """
        Validate the route's consistency.

        Performs checks for found routes:
        - Path starts at ``origin`` and ends at ``destination``
        - Steps chain through consecutive path nodes
        - Total cost matches the sum of step costs within ``cost_epsilon``

        Raises:
            PathValidationError: If any validation check fails
        """
        if not self.found:
            return

        if self.path[0] != origin:
            raise PathValidationError(f"Route starts at {self.path[0]}, expected {origin}")
        if self.path[-1] != destination:
            raise PathValidationError(f"Route ends at {self.path[-1]}, expected {destination}")

        if len(self.steps) != len(self.path) - 1:
            raise PathValidationError(
                f"Route has {len(self.steps)} steps for {len(self.path)} nodes"
            )

        for i, step in enumerate(self.steps):
            if step.from_node != self.path[i] or step.to_node != self.path[i + 1]:
                raise PathValidationError(
                    f"Step {i} ({step.from_node}->{step.to_node}) does not follow path "
                    f"{self.path[i]}->{self.path[i + 1]}"
                )

        step_total = sum(step.cost for step in self.steps)
        if not math.isclose(step_total, self.total_cost, rel_tol=0.0, abs_tol=cost_epsilon):
            raise PathValidationError(
                f"Cost mismatch: steps sum to {step_total}, total is {self.total_cost}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the result to dictionary format.

        Returns:
            Dictionary containing all result fields with enums rendered as values
        """
        return {
            "found": self.found,
            "path": list(self.path),
            "total_cost": self.total_cost,
            "steps": [step.to_dict() for step in self.steps],
            "has_negative_cycle": self.has_negative_cycle,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "algorithm": self.algorithm.value if self.algorithm else None,
            "message": self.message,
        }
