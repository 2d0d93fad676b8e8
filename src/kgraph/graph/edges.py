"""Derive display edges from the node hierarchy."""

from collections.abc import Sequence

from kgraph.models import Edge, Node


def derive_parent_child_edges(
    nodes: Sequence[Node],
    knowledge_map_id: str | None = None,
) -> list[Edge]:
    """Build one parent_child edge per node that has a parent reference.

    Dangling parent references still produce an edge; the renderer drops
    links whose endpoints it cannot place.
    """
    return [
        Edge(
            id=f"edge-{node.id}",
            source_node_id=node.parent_id,
            target_node_id=node.id,
            relationship_type="parent_child",
            knowledge_map_id=knowledge_map_id or node.knowledge_map_id,
        )
        for node in nodes
        if node.parent_id
    ]
