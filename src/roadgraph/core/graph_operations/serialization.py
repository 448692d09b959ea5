"""
Conversion between graph snapshots and the editor's JSON documents.

The editor stores a graph as::

    {
        "nodes": [{"id": "A", "label": "Depot", "role": "origin"}, ...],
        "edges": [{"id": "e1", "from": "A", "to": "B", "weight": 4, "blocked": false}, ...],
        "origin": "A",
        "destination": "F"
    }

``role`` may also be spelled ``type``. The optional top-level ``origin`` and
``destination`` ids override any roles given on the nodes themselves.
Documents are checked against ``SNAPSHOT_SCHEMA`` before conversion.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..enums import NodeRole
from ..exceptions import ValidationError
from ..models import Edge, GraphSnapshot, Node
from ...utils.validation import SchemaValidator

logger = logging.getLogger(__name__)


class GraphSerializer:
    """
    Reads and writes graph snapshots in the editor's document format.

    Attributes:
        validator (SchemaValidator): Checks documents before conversion
    """

    def __init__(self, validator: Optional[SchemaValidator] = None):
        self.validator = validator or SchemaValidator()

    def snapshot_from_dict(self, data: Any) -> GraphSnapshot:
        """
        Build a snapshot from a parsed editor document.

        Args:
            data: Parsed JSON document

        Returns:
            The equivalent GraphSnapshot

        Raises:
            ValidationError: If the document violates the schema, references
                unknown nodes as origin or destination, or holds values the
                models reject
        """
        result = self.validator.validate_snapshot(data)
        if not result.is_valid:
            raise ValidationError("; ".join(result.errors))
        for warning in result.warnings:
            logger.warning(warning)

        origin = data.get("origin")
        destination = data.get("destination")

        try:
            nodes: List[Node] = []
            for record in data["nodes"]:
                role = NodeRole(record.get("role", record.get("type", NodeRole.NORMAL.value)))
                # Top-level ids take precedence over per-node roles
                if origin is not None and role is NodeRole.ORIGIN and record["id"] != origin:
                    role = NodeRole.NORMAL
                if destination is not None and role is NodeRole.DESTINATION and record["id"] != destination:
                    role = NodeRole.NORMAL
                if record["id"] == origin:
                    role = NodeRole.ORIGIN
                elif record["id"] == destination:
                    role = NodeRole.DESTINATION
                nodes.append(Node(record["id"], label=record.get("label", ""), role=role))

            edges = [
                Edge(
                    record["id"],
                    record["from"],
                    record["to"],
                    record["weight"],
                    blocked=record.get("blocked", False),
                )
                for record in data["edges"]
            ]
            snapshot = GraphSnapshot(nodes=tuple(nodes), edges=tuple(edges))
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e)) from e

        logger.debug(
            "Loaded snapshot with %d nodes and %d edges", len(snapshot.nodes), len(snapshot.edges)
        )
        return snapshot

    @staticmethod
    def snapshot_to_dict(snapshot: GraphSnapshot) -> Dict[str, Any]:
        """
        Render a snapshot as an editor document.

        Returns:
            Dictionary accepted by ``snapshot_from_dict``
        """
        return {
            "nodes": [
                {"id": node.id, "label": node.label, "role": node.role.value}
                for node in snapshot.nodes
            ],
            "edges": [
                {
                    "id": edge.id,
                    "from": edge.endpoint_a,
                    "to": edge.endpoint_b,
                    "weight": edge.weight,
                    "blocked": edge.blocked,
                }
                for edge in snapshot.edges
            ],
            "origin": snapshot.origin,
            "destination": snapshot.destination,
        }

    def from_json(self, text: str) -> GraphSnapshot:
        """
        Parse an editor document from JSON text.

        Raises:
            ValidationError: If the text is not valid JSON or not a valid document
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON input: {e}") from e
        return self.snapshot_from_dict(data)

    def to_json(self, snapshot: GraphSnapshot, indent: Optional[int] = 2) -> str:
        """Serialize a snapshot as JSON text."""
        return json.dumps(self.snapshot_to_dict(snapshot), indent=indent)
