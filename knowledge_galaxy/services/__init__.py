"""Services layer for graph ingestion."""

from __future__ import annotations

from .graph_service import KnowledgeGraphService, build_graph_service

__all__ = [
    "KnowledgeGraphService",
    "build_graph_service",
]
