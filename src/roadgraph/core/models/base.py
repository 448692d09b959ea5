"""
Shared validation helpers for the snapshot models.
"""

import math
from typing import Any

from ...utils.validation import validate_dataclass

__all__ = ["validate_dataclass", "validate_identifier", "coerce_weight"]


def validate_identifier(name: str, value: Any) -> None:
    """Validate that an identifier is a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def coerce_weight(value: Any) -> float:
    """Return an edge weight as a finite float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("weight must be a numeric value")
    weight = float(value)
    if math.isnan(weight) or math.isinf(weight):
        raise ValueError("weight must be a finite number")
    return weight
