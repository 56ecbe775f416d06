"""Health and monitoring endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from ..models.health import HealthResponse

router = APIRouter(tags=["health"])


def get_app_state() -> Any:
    """Get application state from FastAPI app."""
    from ..main import state

    return state


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report service readiness.

    Checks:
    - Graph service initialized
    - Generative model client configured

    Returns:
        HealthResponse with overall status and individual service statuses.
    """
    state = get_app_state()
    service = state.graph_service

    services: Dict[str, str] = {
        "api": "up",
        "graph_service": "up" if service is not None else "down",
        "model_client": (
            "configured"
            if service is not None and service.model_client is not None
            else "disabled"
        ),
    }

    return HealthResponse(
        status="healthy" if service is not None else "degraded",
        services=services,
        templates=len(service.templates) if service is not None else 0,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
