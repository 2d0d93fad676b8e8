"""Node model - a topic in the knowledge map hierarchy."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal, get_args

TaxonomyType = Literal["concept", "process", "component", "cause", "context", "complementary"]

TAXONOMY_TYPES: tuple[str, ...] = get_args(TaxonomyType)


def utcnow() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a timestamp from a datetime, ISO string or epoch milliseconds."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    # Epoch milliseconds, as produced by Date.now()-style clients
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    return datetime.fromisoformat(str(value))


@dataclass
class Node:
    """
    Represents a topic in a knowledge map.

    Nodes form a forest through ``parent_id``. ``depth`` is a cached value
    that must equal the parent's depth + 1 (0 for roots); see
    ``kgraph.graph.depth`` for validation and repair.
    """

    id: str
    topic: str  # Display label
    content: str = ""
    taxonomy: TaxonomyType = "concept"
    depth: int = 0
    knowledge_map_id: str = "demo-map"

    # Hierarchy
    parent_id: str | None = None

    # Layout hint, owned by the force simulation
    position_x: float | None = None
    position_y: float | None = None

    created_at: datetime = field(default_factory=utcnow)

    @property
    def is_root(self) -> bool:
        """True if the node has no parent reference."""
        return not self.parent_id

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "topic": self.topic,
            "content": self.content,
            "taxonomy": self.taxonomy,
            "depth": self.depth,
            "knowledge_map_id": self.knowledge_map_id,
            "parent_id": self.parent_id,
            "position_x": self.position_x,
            "position_y": self.position_y,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            topic=data["topic"],
            content=data.get("content", ""),
            taxonomy=data.get("taxonomy", "concept"),
            depth=data.get("depth", 0),
            knowledge_map_id=data.get("knowledge_map_id", "demo-map"),
            parent_id=data.get("parent_id") or None,
            position_x=data.get("position_x"),
            position_y=data.get("position_y"),
            created_at=parse_timestamp(data.get("created_at")) or utcnow(),
        )
