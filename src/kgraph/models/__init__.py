"""kgraph data models."""

from kgraph.models.edge import Edge, EdgeType
from kgraph.models.node import TAXONOMY_TYPES, Node, TaxonomyType, parse_timestamp

__all__ = [
    "Node",
    "TaxonomyType",
    "TAXONOMY_TYPES",
    "Edge",
    "EdgeType",
    "parse_timestamp",
]
