"""
Knowledge Galaxy API.

Serves validated knowledge graphs to renderers: template and generated graphs
by topic, validation of raw generative model output, and optional
model-backed generation.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .. import __version__
from ..services.graph_service import KnowledgeGraphService, build_graph_service
from ..utils.logging_config import setup_logging
from .config import config
from .middleware import setup_cors, setup_error_handlers
from .routers import graph, health

logger = logging.getLogger(__name__)


# ==================== Application State ====================


class AppState:
    """Global application state container."""

    graph_service: Optional[KnowledgeGraphService] = None


state = AppState()


# ==================== Lifespan ====================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup resources.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application runtime.
    """
    setup_logging(level=config.LOG_LEVEL)
    logger.info(f"Starting Knowledge Galaxy API ({config.ENVIRONMENT} mode)")

    state.graph_service = build_graph_service(config)
    logger.info(
        "Graph service ready with templates: %s",
        ", ".join(state.graph_service.template_keys()),
    )

    yield

    state.graph_service = None
    logger.info("Shutdown complete")


# ==================== FastAPI App ====================

app = FastAPI(
    title="Knowledge Galaxy",
    description="Validated knowledge graph ingestion for 3D graph renderers",
    version=__version__,
    lifespan=lifespan,
)

# Setup middleware
setup_cors(app)
setup_error_handlers(app)

# Register routers
app.include_router(health.router)
app.include_router(graph.router)
