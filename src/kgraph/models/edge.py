"""Edge model - display links between nodes."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from kgraph.models.node import parse_timestamp, utcnow

EdgeType = Literal["parent_child", "cross_file", "ai_suggested", "manual"]


@dataclass
class Edge:
    """
    A typed link between two nodes.

    Parent/child edges are derived from ``Node.parent_id`` and carry no
    validation logic of their own.
    """

    id: str
    source_node_id: str
    target_node_id: str
    relationship_type: EdgeType = "parent_child"
    knowledge_map_id: str = "demo-map"
    created_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "source_node_id": self.source_node_id,
            "target_node_id": self.target_node_id,
            "relationship_type": self.relationship_type,
            "knowledge_map_id": self.knowledge_map_id,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            source_node_id=data["source_node_id"],
            target_node_id=data["target_node_id"],
            relationship_type=data.get("relationship_type", "parent_child"),
            knowledge_map_id=data.get("knowledge_map_id", "demo-map"),
            created_at=parse_timestamp(data.get("created_at")) or utcnow(),
        )
