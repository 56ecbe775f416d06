"""Knowledge graph request/response models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    """Request model for validating raw generative model output."""

    raw_text: str = Field(..., description="Raw text expected to hold graph JSON")


class GenerateRequest(BaseModel):
    """Request model for model-backed graph generation."""

    topic: str = Field(..., min_length=1, max_length=200)


class TemplateListResponse(BaseModel):
    """Response model listing template topic keys."""

    templates: List[str]
    count: int
