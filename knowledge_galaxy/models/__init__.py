"""Data model for knowledge graphs."""

from __future__ import annotations

from .graph import (
    GraphData,
    GraphFilterOptions,
    GraphLink,
    GraphNode,
    LinkEndpoint,
    NodeCategory,
    endpoint_id,
)

__all__ = [
    "GraphData",
    "GraphFilterOptions",
    "GraphLink",
    "GraphNode",
    "LinkEndpoint",
    "NodeCategory",
    "endpoint_id",
]
