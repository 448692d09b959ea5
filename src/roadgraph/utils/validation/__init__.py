"""
Validation package for roadgraph.

This package provides runtime type checking for the snapshot dataclasses and
JSON schema validation for snapshot documents received from the editor.
"""

from .base import (
    ValidationResult,
    DataclassRule,
    validate_dataclass,
)
from .schema import SNAPSHOT_SCHEMA, SchemaValidator

__all__ = [
    "ValidationResult",
    "DataclassRule",
    "validate_dataclass",
    "SNAPSHOT_SCHEMA",
    "SchemaValidator",
]
