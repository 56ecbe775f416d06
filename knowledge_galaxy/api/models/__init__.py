"""API request and response models."""

from __future__ import annotations

from .error import ErrorResponse, GraphRejection
from .graph import GenerateRequest, ParseRequest, TemplateListResponse
from .health import HealthResponse

__all__ = [
    "ErrorResponse",
    "GenerateRequest",
    "GraphRejection",
    "HealthResponse",
    "ParseRequest",
    "TemplateListResponse",
]
