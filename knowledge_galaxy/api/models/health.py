"""Health and status models."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str
    services: Dict[str, Any]
    templates: int
    timestamp: str
