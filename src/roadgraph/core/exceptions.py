"""
Custom exceptions for the route and structural analysis engine.

Routine outcomes such as an unreachable destination or a negative cycle are
reported inside result records (see ``ErrorKind``). The exceptions below are
reserved for caller errors that can be detected before any computation runs:
malformed snapshot data, bad configuration, or references to missing nodes
inside the path finders.
"""


class ValidationError(Exception):
    """
    Raised when incoming graph data fails validation.

    Examples:
        * A JSON document that does not match the snapshot schema
        * A node role value outside the known roles
        * Edge records missing an endpoint
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when a graph operation cannot be carried out.

    Examples:
        * A finder invoked on a snapshot it cannot interpret
        * An unsupported algorithm requested from a finder
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when analysis configuration is invalid.

    Examples:
        * An exhaustive-search limit below 2 or not an integer
        * A non-positive cost tolerance
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not present in the snapshot.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not present in the snapshot.

    The public path finding entry point converts this into a result with
    ``ErrorKind.NODE_NOT_FOUND`` rather than letting it reach the caller.
    """

    def __init__(self, message: str, node_id: str = ""):
        super().__init__(message)
        self.node_id = node_id
