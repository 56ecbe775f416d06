"""
Utility modules for Knowledge Galaxy.

This package provides common utilities, exceptions, constants, type aliases,
topic normalization, and logging configuration used throughout the application.
"""

from __future__ import annotations

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_REQUEST_TIMEOUT,
    MAX_IMPORTANCE,
    MIN_IMPORTANCE,
    ROOT_IMPORTANCE,
)
from .exceptions import (
    ConfigurationError,
    DanglingReferenceError,
    DuplicateIdError,
    FieldError,
    GalaxyGraphError,
    GraphIntegrityError,
    GraphValidationError,
    LLMError,
    LLMTimeoutError,
    ParseError,
    RateLimitError,
    StructuralError,
)
from .logging_config import (
    RequestIDFilter,
    bind_request_id,
    current_request_id,
    reset_request_id,
    setup_logging,
)
from .topic_keys import (
    is_valid_topic_key,
    normalize_topic,
    topic_display_name,
    topic_to_node_id,
)
from .types import JSON, GraphPayload, LLMResponse, Metadata

__all__ = [
    # Constants
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_MODEL",
    "DEFAULT_REQUEST_TIMEOUT",
    "MAX_IMPORTANCE",
    "MIN_IMPORTANCE",
    "ROOT_IMPORTANCE",
    # Exceptions
    "ConfigurationError",
    "DanglingReferenceError",
    "DuplicateIdError",
    "FieldError",
    "GalaxyGraphError",
    "GraphIntegrityError",
    "GraphValidationError",
    "LLMError",
    "LLMTimeoutError",
    "ParseError",
    "RateLimitError",
    "StructuralError",
    # Logging
    "RequestIDFilter",
    "bind_request_id",
    "current_request_id",
    "reset_request_id",
    "setup_logging",
    # Topic keys
    "is_valid_topic_key",
    "normalize_topic",
    "topic_display_name",
    "topic_to_node_id",
    # Types
    "JSON",
    "GraphPayload",
    "LLMResponse",
    "Metadata",
]
