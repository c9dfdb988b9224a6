"""Build a dependency index from a graph file."""

from __future__ import annotations

from depindex.config.schema import GraphSpec
from depindex.graph.index import DependencyIndex


def build_index(spec: GraphSpec) -> DependencyIndex:
    """Return an index holding (dep, node.id) for every dep in node.depends_on."""
    index = DependencyIndex()
    for node in spec.nodes:
        index.replace_dependees(node.id, node.depends_on)
    return index
