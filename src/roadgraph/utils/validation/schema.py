"""
Schema Validation Components for roadgraph

This module provides JSON schema-based validation for graph snapshot
documents as produced by the graph editor. It supports:
- Structural validation of node and edge records against SNAPSHOT_SCHEMA
- Reference checks that the schema language cannot express (duplicate ids,
  dangling origin/destination ids, edges with unknown endpoints)
- Reporting through ValidationResult so callers see every problem at once
"""

from typing import Any, Dict, List

from jsonschema import Draft7Validator

from .base import ValidationResult

NODE_ROLES = ["normal", "origin", "destination"]

SNAPSHOT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "nodes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "label": {"type": "string"},
                    "role": {"enum": NODE_ROLES},
                    # The editor stores the role under "type"
                    "type": {"enum": NODE_ROLES},
                },
                "required": ["id"],
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "from": {"type": "string", "minLength": 1},
                    "to": {"type": "string", "minLength": 1},
                    "weight": {"type": "number"},
                    "blocked": {"type": "boolean"},
                },
                "required": ["id", "from", "to", "weight"],
            },
        },
        "origin": {"type": ["string", "null"]},
        "destination": {"type": ["string", "null"]},
    },
    "required": ["nodes", "edges"],
}


class SchemaValidator:
    """
    JSON Schema-based validator for graph snapshot documents.

    Attributes:
        schema (Dict[str, Any]): The JSON schema documents are checked against
    """

    def __init__(self, schema: Dict[str, Any] = SNAPSHOT_SCHEMA):
        """
        Initialize the validator.

        Args:
            schema: JSON schema definition as a dictionary
        """
        Draft7Validator.check_schema(schema)
        self.schema = schema
        self._validator = Draft7Validator(schema)

    def validate_snapshot(self, data: Any) -> ValidationResult:
        """
        Validate a snapshot document.

        Schema violations and broken references are errors. Edges whose
        endpoints are not listed among the nodes are only warnings: the
        engine treats such edges as absent.

        Args:
            data: Parsed JSON document

        Returns:
            ValidationResult containing validation details and any errors or warnings

        Example:
            >>> validator = SchemaValidator()
            >>> result = validator.validate_snapshot({"nodes": [{"id": "A"}], "edges": []})
            >>> result.is_valid
            True
        """
        errors: List[str] = []
        warnings: List[str] = []

        schema_errors = sorted(
            self._validator.iter_errors(data), key=lambda e: [str(part) for part in e.path]
        )
        for error in schema_errors:
            location = "/".join(str(part) for part in error.path) or "<root>"
            errors.append(f"Schema validation failed at {location}: {error.message}")

        if errors:
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        node_ids = [node["id"] for node in data["nodes"]]
        known = set(node_ids)
        if len(known) != len(node_ids):
            errors.append("Duplicate node ids in snapshot")

        edge_ids = [edge["id"] for edge in data["edges"]]
        if len(set(edge_ids)) != len(edge_ids):
            errors.append("Duplicate edge ids in snapshot")

        for key in ("origin", "destination"):
            ref = data.get(key)
            if ref is not None and ref not in known:
                errors.append(f"{key} references unknown node '{ref}'")

        for edge in data["edges"]:
            for endpoint in ("from", "to"):
                if edge[endpoint] not in known:
                    warnings.append(
                        f"Edge '{edge['id']}' references unknown node '{edge[endpoint]}'"
                    )

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"node_count": len(node_ids), "edge_count": len(edge_ids)},
        )
