"""Custom exceptions for knowledge graph sessions."""


class KGraphError(Exception):
    """Base exception for knowledge graph operations."""
    pass


class NodeNotFoundError(KGraphError):
    """Raised when a node is not found in the session."""
    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' not found")
