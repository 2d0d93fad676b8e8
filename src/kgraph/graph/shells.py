"""Electron shell rings: radius and colour per depth level."""

from kgraph.config import Settings, settings

# Depth 0..10, 8-digit hex with low alpha
DEPTH_RING_COLORS = (
    "#FF6B6B20",  # light red
    "#4ECDC420",  # light teal
    "#45B7D120",  # light blue
    "#96CEB420",  # light green
    "#FFEAA720",  # light yellow
    "#DDA0DD20",  # light purple
    "#F4A46120",  # light orange
    "#98D8C820",  # light mint
    "#F7DC6F20",  # light gold
    "#BB8FCE20",  # light lavender
    "#85C1E920",  # light sky
)

TAXONOMY_COLORS = {
    "concept": "#7c3aed",  # purple
    "process": "#059669",  # emerald
    "component": "#dc2626",  # red
    "cause": "#ea580c",  # orange
    "context": "#0284c7",  # sky blue
    "complementary": "#7c2d12",  # brown
}

DEFAULT_NODE_COLOR = "#6b7280"


def get_electron_shell_radius(depth: int, config: Settings | None = None) -> float:
    """Ring radius for a depth level."""
    config = config or settings
    return config.shell_base_radius + depth * config.shell_depth_spacing


def get_depth_ring_color(depth: int) -> str:
    """Ring colour for a depth level; out-of-table depths use the last entry."""
    if 0 <= depth < len(DEPTH_RING_COLORS):
        return DEPTH_RING_COLORS[depth]
    return DEPTH_RING_COLORS[-1]


def get_taxonomy_color(taxonomy: str) -> str:
    return TAXONOMY_COLORS.get(taxonomy, DEFAULT_NODE_COLOR)
