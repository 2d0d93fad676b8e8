"""Knowledge map hierarchy: depth validation, derived edges, session state.

Provides:
- Depth consistency checks and repair
- Parent/child edge derivation
- Electron shell ring helpers for renderers
- Per-session selection and editing state
"""

from kgraph.graph.depth import (
    DepthConsistencyResult,
    DepthValidator,
    calculate_correct_depth,
    fix_depth_inconsistencies,
    fix_depth_inconsistencies_legacy,
    get_max_depth,
    get_nodes_at_depth,
    validate_graph_depth_consistency,
    validate_node_depth,
)
from kgraph.graph.edges import derive_parent_child_edges
from kgraph.graph.session import GraphSession
from kgraph.graph.shells import (
    DEPTH_RING_COLORS,
    TAXONOMY_COLORS,
    get_depth_ring_color,
    get_electron_shell_radius,
    get_taxonomy_color,
)

__all__ = [
    # Depth
    "DepthConsistencyResult",
    "DepthValidator",
    "calculate_correct_depth",
    "fix_depth_inconsistencies",
    "fix_depth_inconsistencies_legacy",
    "get_max_depth",
    "get_nodes_at_depth",
    "validate_graph_depth_consistency",
    "validate_node_depth",
    # Edges
    "derive_parent_child_edges",
    # Session
    "GraphSession",
    # Shells
    "DEPTH_RING_COLORS",
    "TAXONOMY_COLORS",
    "get_depth_ring_color",
    "get_electron_shell_radius",
    "get_taxonomy_color",
]
