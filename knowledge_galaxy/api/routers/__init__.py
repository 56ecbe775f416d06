"""API routers for Knowledge Galaxy."""

from __future__ import annotations

from . import graph, health

__all__ = [
    "graph",
    "health",
]
