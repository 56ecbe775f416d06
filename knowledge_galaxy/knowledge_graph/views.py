"""Derived, filtered views of a validated graph."""

from __future__ import annotations

from typing import Optional, Set

from ..models.graph import GraphData, GraphFilterOptions, GraphNode


def filter_graph(graph: GraphData, options: Optional[GraphFilterOptions] = None) -> GraphData:
    """
    Return a new graph holding only nodes that match every given criterion.

    Links survive only when both endpoints survive. The input graph is not
    modified. The result may have no nodes at all; it is a view for display
    and is not re-validated.

    Args:
        graph: Source graph.
        options: Criteria; unset fields do not constrain the result.

    Returns:
        Filtered GraphData.
    """
    if options is None:
        return graph

    query = (options.search_query or "").strip().lower()
    categories = set(options.categories) if options.categories else None

    def matches(node: GraphNode) -> bool:
        if categories is not None and node.category not in categories:
            return False
        if options.min_importance is not None and node.importance < options.min_importance:
            return False
        if options.max_importance is not None and node.importance > options.max_importance:
            return False
        if query:
            haystack = f"{node.name} {node.description or ''}".lower()
            if query not in haystack:
                return False
        return True

    nodes = tuple(node for node in graph.nodes if matches(node))
    kept: Set[str] = {node.id for node in nodes}
    links = tuple(
        link for link in graph.links if link.source_id in kept and link.target_id in kept
    )
    return GraphData(nodes=nodes, links=links)
