"""
Standard error response models.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard API error response."""

    error: str = Field(..., description="Error code or type")
    message: str = Field(..., description="Human-readable error message")
    request_id: Optional[str] = Field(None, description="Request ID for tracing")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Additional error context"
    )


class GraphRejection(BaseModel):
    """Why an externally produced graph was rejected.

    Carried in ``ErrorResponse.details`` so clients can show a retry message
    or fall back to a generated graph.
    """

    kind: str = Field(..., description="Error kind, e.g. duplicate_id or parse_error")
    entity_id: Optional[str] = Field(None, description="Offending node id")
    field: Optional[str] = Field(None, description="Offending field name")
    position: Optional[int] = Field(None, description="Index of the offending entry")
    endpoint: Optional[str] = Field(None, description="Link side (source/target)")
    line: Optional[int] = Field(None, description="JSON line of a parse error")
    column: Optional[int] = Field(None, description="JSON column of a parse error")
