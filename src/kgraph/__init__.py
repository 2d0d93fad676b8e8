"""kgraph: knowledge map hierarchy with depth validation and repair."""
