"""Generative model prompts and clients for Knowledge Galaxy."""

from __future__ import annotations

from .prompts import KNOWLEDGE_GRAPH_SYSTEM_PROMPT, build_topic_prompt
from .remote_clients import AnthropicGraphClient

__all__ = [
    "AnthropicGraphClient",
    "KNOWLEDGE_GRAPH_SYSTEM_PROMPT",
    "build_topic_prompt",
]
