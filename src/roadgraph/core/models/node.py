"""
Node model for road-network snapshots.
"""

from dataclasses import dataclass

from .base import validate_dataclass, validate_identifier
from ..enums import NodeRole


@validate_dataclass
@dataclass(frozen=True)
class Node:
    """
    A junction in the road network.

    Attributes:
        id (str): Unique identifier for the node
        label (str): Display label, defaults to the id
        role (NodeRole): Whether the node is the route origin, destination or neither
    """

    id: str
    label: str = ""
    role: NodeRole = NodeRole.NORMAL

    def __post_init__(self):
        """Validate node after initialization."""
        validate_identifier("id", self.id)
        if not self.label:
            object.__setattr__(self, "label", self.id)
        if not isinstance(self.role, NodeRole):
            raise TypeError("role must be a NodeRole enum")
