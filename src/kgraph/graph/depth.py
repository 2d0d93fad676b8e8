"""Depth consistency checks and repair for the node hierarchy.

Every node caches its distance from the hierarchy root in ``depth``. The
invariant is simple: roots have depth 0 and every other node sits exactly one
level below its parent, which must exist in the same collection. Editing can
leave cached depths stale; this module detects that drift and recomputes
depths from the tree shape.

All functions work on a caller-supplied snapshot and never mutate it. Nothing
here raises for a malformed graph: problems come back as booleans or as a
DepthConsistencyResult.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from kgraph.config import settings
from kgraph.models import Node

logger = logging.getLogger(__name__)


@dataclass
class DepthConsistencyResult:
    """Outcome of a whole-graph depth check."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    invalid_node_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to the shape presentation code expects."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
        }


def _index_by_id(nodes: Sequence[Node]) -> dict[str, Node]:
    # First occurrence wins, like a linear search would
    index: dict[str, Node] = {}
    for node in nodes:
        index.setdefault(node.id, node)
    return index


def _children_by_parent(nodes: Sequence[Node]) -> dict[str, list[Node]]:
    children: dict[str, list[Node]] = {}
    for node in nodes:
        if node.parent_id:
            children.setdefault(node.parent_id, []).append(node)
    return children


def _parent_link_ok(node: Node, index: dict[str, Node]) -> bool:
    """Check the node against its own parent reference."""
    if node.depth < 0:
        return False

    # Roots sit at depth 0, everything else needs a parent
    if node.depth == 0 and node.parent_id:
        return False
    if node.depth > 0 and not node.parent_id:
        return False

    if node.parent_id:
        parent = index.get(node.parent_id)
        if parent is None:
            return False
        if parent.depth >= node.depth:
            return False
        if node.depth != parent.depth + 1:
            return False

    return True


def _child_links_ok(node: Node, children: dict[str, list[Node]]) -> bool:
    """Check the node's direct children against it."""
    return all(child.depth == node.depth + 1 for child in children.get(node.id, []))


def validate_node_depth(node: Node, all_nodes: Sequence[Node]) -> bool:
    """Validate a node's depth against its parent and its direct children.

    Returns False when the node is a depth-0 node with a parent, a deeper node
    without one, references a parent missing from ``all_nodes``, does not sit
    exactly one level below its parent, or has a child that does not sit
    exactly one level below it.
    """
    if not _parent_link_ok(node, _index_by_id(all_nodes)):
        logger.debug(f"Node {node.id} fails parent depth check (depth {node.depth})")
        return False
    if not _child_links_ok(node, _children_by_parent(all_nodes)):
        logger.debug(f"Node {node.id} has a child at the wrong depth")
        return False
    return True


def calculate_correct_depth(parent_id: str | None, all_nodes: Sequence[Node]) -> int:
    """Depth a node should have under ``parent_id``.

    Missing or dangling parent references are treated as roots.
    """
    if not parent_id:
        return 0

    parent = _index_by_id(all_nodes).get(parent_id)
    if parent is None:
        return 0

    return parent.depth + 1


def get_nodes_at_depth(depth: int, all_nodes: Sequence[Node]) -> list[Node]:
    """All nodes recorded at ``depth``, in input order."""
    return [node for node in all_nodes if node.depth == depth]


def get_max_depth(all_nodes: Sequence[Node]) -> int:
    """Deepest recorded depth, 0 for an empty collection."""
    return max(0, max((node.depth for node in all_nodes), default=0))


def format_depth_error(node: Node) -> str:
    return f'Node "{node.topic}" (depth {node.depth}) has invalid depth relationship'


def validate_graph_depth_consistency(all_nodes: Sequence[Node]) -> DepthConsistencyResult:
    """Validate every node and collect one message per inconsistent node.

    A bad parent/child link is reported on the child. A parent whose only
    problem is that child is not reported a second time.
    """
    index = _index_by_id(all_nodes)
    errors: list[str] = []
    invalid_ids: list[str] = []

    for node in all_nodes:
        if not _parent_link_ok(node, index):
            errors.append(format_depth_error(node))
            invalid_ids.append(node.id)

    if errors:
        logger.debug(f"Depth check found {len(errors)} inconsistent node(s) of {len(all_nodes)}")

    return DepthConsistencyResult(
        is_valid=not errors,
        errors=errors,
        invalid_node_ids=invalid_ids,
    )


def fix_depth_inconsistencies(all_nodes: Sequence[Node]) -> list[Node]:
    """Recompute every depth with one top-down walk from the roots.

    Roots are nodes without a parent reference or whose parent is missing;
    they get depth 0 and each child gets its parent's depth + 1. Nodes caught
    in a parent cycle are unreachable from any root and keep their recorded
    depth.

    Returns copies in input order; the input nodes are left untouched.
    """
    fixed = [replace(node) for node in all_nodes]
    index = _index_by_id(fixed)
    children = _children_by_parent(fixed)

    roots = [node for node in fixed if not node.parent_id or node.parent_id not in index]
    visited: set[str] = set()
    corrected = 0

    for root in roots:
        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if node.id in visited:
                continue
            visited.add(node.id)

            if node.depth != depth:
                logger.debug(f"Node {node.id}: depth {node.depth} -> {depth}")
                node.depth = depth
                corrected += 1

            for child in children.get(node.id, []):
                stack.append((child, depth + 1))

    unreachable = [node.id for node in fixed if node.id not in visited]
    if unreachable:
        logger.warning(f"Parent cycle detected, depths left unchanged for: {', '.join(unreachable)}")

    logger.info(f"Depth repair corrected {corrected} of {len(fixed)} nodes")
    return fixed


def fix_depth_inconsistencies_legacy(
    all_nodes: Sequence[Node],
    max_depth: int | None = None,
) -> list[Node]:
    """Level-by-level depth repair, kept for parity with older clients.

    Walks levels 0..max_depth by *recorded* depth. Each unprocessed node at
    the level is recomputed from its parent, then its unprocessed children are
    pushed to its depth + 1. Subtrees whose stale depth sits above their true
    level can be skipped or corrected twice; prefer
    fix_depth_inconsistencies.
    """
    if max_depth is None:
        max_depth = settings.max_supported_depth

    fixed = [replace(node) for node in all_nodes]
    children = _children_by_parent(fixed)
    processed: set[str] = set()
    corrected = 0

    for level in range(max_depth + 1):
        nodes_at_level = [n for n in fixed if n.depth == level and n.id not in processed]

        for node in nodes_at_level:
            correct_depth = calculate_correct_depth(node.parent_id, fixed)
            if node.depth != correct_depth:
                node.depth = correct_depth
                corrected += 1

            processed.add(node.id)

            for child in children.get(node.id, []):
                if child.id not in processed:
                    child.depth = node.depth + 1

    logger.info(f"Legacy depth repair corrected {corrected} node(s) up to level {max_depth}")
    return fixed


class DepthValidator:
    """Single entry point over the depth functions for presentation code."""

    validate_node_depth = staticmethod(validate_node_depth)
    calculate_correct_depth = staticmethod(calculate_correct_depth)
    get_nodes_at_depth = staticmethod(get_nodes_at_depth)
    get_max_depth = staticmethod(get_max_depth)
    validate_graph_depth_consistency = staticmethod(validate_graph_depth_consistency)
    fix_depth_inconsistencies = staticmethod(fix_depth_inconsistencies)
    fix_depth_inconsistencies_legacy = staticmethod(fix_depth_inconsistencies_legacy)
