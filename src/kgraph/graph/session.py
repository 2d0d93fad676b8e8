"""Per-session editing state for a knowledge map view."""

from __future__ import annotations

import logging
import random
import uuid
from collections.abc import Iterable

from kgraph.config import settings
from kgraph.exceptions import NodeNotFoundError
from kgraph.graph.depth import (
    DepthConsistencyResult,
    calculate_correct_depth,
    fix_depth_inconsistencies,
    validate_graph_depth_consistency,
)
from kgraph.graph.edges import derive_parent_child_edges
from kgraph.models import TAXONOMY_TYPES, Edge, Node

logger = logging.getLogger(__name__)


class GraphSession:
    """Node list plus the current selection for one open knowledge map.

    Tapping a node selects it; tapping the selected node again signals the
    caller to open the editor. Topic and content edits are trimmed and blank
    input is ignored.
    """

    def __init__(
        self,
        nodes: Iterable[Node] = (),
        knowledge_map_id: str | None = None,
    ) -> None:
        self.knowledge_map_id = knowledge_map_id or settings.default_knowledge_map_id
        self._nodes: list[Node] = list(nodes)
        self.selected_node_id: str | None = None

    @classmethod
    def demo(cls) -> GraphSession:
        """Session preloaded with the three-node demo map."""
        map_id = settings.default_knowledge_map_id
        nodes = [
            Node(
                id="1",
                topic="Knowledge Graphs",
                content="A knowledge graph is a network of real-world entities and their relationships.",
                taxonomy="concept",
                depth=0,
                knowledge_map_id=map_id,
                position_x=0,
                position_y=20,
            ),
            Node(
                id="2",
                topic="Nodes",
                content="Nodes represent entities or concepts in the knowledge graph.",
                taxonomy="component",
                depth=1,
                knowledge_map_id=map_id,
                parent_id="1",
                position_x=-80,
                position_y=120,
            ),
            Node(
                id="3",
                topic="Edges",
                content="Edges represent relationships between nodes.",
                taxonomy="component",
                depth=1,
                knowledge_map_id=map_id,
                parent_id="1",
                position_x=80,
                position_y=120,
            ),
        ]
        return cls(nodes, knowledge_map_id=map_id)

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes)

    @property
    def edges(self) -> list[Edge]:
        return derive_parent_child_edges(self._nodes, self.knowledge_map_id)

    @property
    def selected_node(self) -> Node | None:
        if self.selected_node_id is None:
            return None
        return self._find(self.selected_node_id)

    def get_node(self, node_id: str) -> Node:
        """Look up a node, raising NodeNotFoundError if absent."""
        node = self._find(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def _find(self, node_id: str) -> Node | None:
        return next((n for n in self._nodes if n.id == node_id), None)

    def create_node(
        self,
        topic: str = "New Node",
        content: str = "Enter content here...",
        taxonomy: str = "concept",
        parent_id: str | None = None,
    ) -> Node:
        """Add a node and select it.

        Depth is derived from the parent; a missing parent makes a root.
        """
        if taxonomy not in TAXONOMY_TYPES:
            raise ValueError(f"Unknown taxonomy: {taxonomy}")

        node = Node(
            id=str(uuid.uuid4()),
            topic=topic,
            content=content,
            taxonomy=taxonomy,
            depth=calculate_correct_depth(parent_id, self._nodes),
            knowledge_map_id=self.knowledge_map_id,
            parent_id=parent_id,
            position_x=random.uniform(-100, 100),
            position_y=random.uniform(-100, 100),
        )
        self._nodes.append(node)
        self.selected_node_id = node.id

        logger.info(f"Created node {node.id} at depth {node.depth}")
        return node

    def press_node(self, node_id: str) -> bool:
        """Handle a tap on a node.

        Returns:
            True if the node was already selected (open the editor),
            False if this tap selected it.
        """
        self.get_node(node_id)
        if self.selected_node_id == node_id:
            return True
        self.selected_node_id = node_id
        return False

    def clear_selection(self) -> None:
        self.selected_node_id = None

    def edit_topic(self, node_id: str, text: str | None) -> bool:
        """Replace a node's topic. Blank input is ignored."""
        return self._edit(node_id, "topic", text)

    def edit_content(self, node_id: str, text: str | None) -> bool:
        """Replace a node's content. Blank input is ignored."""
        return self._edit(node_id, "content", text)

    def _edit(self, node_id: str, attr: str, text: str | None) -> bool:
        node = self.get_node(node_id)
        if not text or not text.strip():
            return False
        setattr(node, attr, text.strip())
        logger.debug(f"Updated {attr} of node {node_id}")
        return True

    def validate(self) -> DepthConsistencyResult:
        return validate_graph_depth_consistency(self._nodes)

    def repair(self) -> DepthConsistencyResult:
        """Repair all depths in place of the current node list and re-validate."""
        self._nodes = fix_depth_inconsistencies(self._nodes)
        return self.validate()
