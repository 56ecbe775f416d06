"""Knowledge graph endpoints."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Query

from ...knowledge_graph.views import filter_graph
from ...models.graph import GraphFilterOptions
from ...utils.types import JSON
from ..models.graph import GenerateRequest, ParseRequest, TemplateListResponse

router = APIRouter(prefix="/api/v1/graph", tags=["graph"])


def get_app_state() -> Any:
    """Get application state from FastAPI app."""
    from ..main import state

    return state


def _get_service():
    state = get_app_state()
    if state.graph_service is None:
        raise HTTPException(status_code=503, detail="Graph service not initialized")
    return state.graph_service


@router.get("/templates", response_model=TemplateListResponse)
async def list_templates() -> TemplateListResponse:
    """List the topic keys served from pre-built templates."""
    keys = _get_service().template_keys()
    return TemplateListResponse(templates=keys, count=len(keys))


@router.get("")
async def get_graph(
    topic: str = Query(..., max_length=200, description="Topic to build a graph for"),
    categories: Optional[str] = Query(
        None, description="Comma-separated categories to keep"
    ),
    min_importance: Optional[float] = Query(None, ge=0, le=100),
    max_importance: Optional[float] = Query(None, ge=0, le=100),
    q: Optional[str] = Query(None, description="Search in node names and descriptions"),
) -> JSON:
    """Get a validated knowledge graph for a topic.

    Known topics are served from templates; anything else gets a generated
    graph. Optional filters narrow the returned view.

    Args:
        topic: Arbitrary topic text.
        categories: Comma-separated category names.
        min_importance: Lower importance bound.
        max_importance: Upper importance bound.
        q: Case-insensitive search text.

    Returns:
        Graph in wire format (``nodes`` and ``links``).
    """
    graph = await _get_service().fetch_graph(topic)

    if any(value is not None for value in (categories, min_importance, max_importance, q)):
        options = GraphFilterOptions(
            categories=[c for c in categories.split(",") if c.strip()] if categories else None,
            min_importance=min_importance,
            max_importance=max_importance,
            search_query=q,
        )
        graph = filter_graph(graph, options)

    return graph.to_payload()


@router.post("/parse")
async def parse_graph(request: ParseRequest) -> JSON:
    """Validate raw generative model output.

    Returns:
        The validated graph in wire format.

    Raises:
        ParseError: Mapped to 400 when the text is not JSON.
        GraphValidationError: Mapped to 422 with the error kind and offending id.
    """
    graph = _get_service().parse_external_response(request.raw_text)
    return graph.to_payload()


@router.post("/generate")
async def generate_graph(request: GenerateRequest) -> JSON:
    """Generate a graph with the configured generative model.

    Returns 503 when no model client is configured. Failures are not retried
    and do not fall back to a generated graph.
    """
    graph = await _get_service().generate_from_model(request.topic)
    return graph.to_payload()
