"""
Custom exception hierarchy for Knowledge Galaxy.

This module defines all custom exceptions used throughout the application.
Graph validation errors carry enough structured context (error kind,
offending node id, field name) for callers to explain why externally
generated data was rejected.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GalaxyGraphError(Exception):
    """Base exception for all Knowledge Galaxy errors."""

    pass


class ConfigurationError(GalaxyGraphError):
    """Raised when configuration is invalid or missing."""

    pass


class GraphValidationError(GalaxyGraphError):
    """Raised when a candidate graph violates a structural invariant.

    Attributes:
        kind: Short machine-readable error kind (e.g. "duplicate_id").
        entity_id: Id of the offending node, when one is known.
        field: Name of the violated field, when the error is field-specific.
    """

    kind = "validation_error"

    def __init__(
        self,
        message: str,
        entity_id: Optional[str] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.entity_id = entity_id
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable description of the failure."""
        return {
            "kind": self.kind,
            "message": self.message,
            "entity_id": self.entity_id,
            "field": self.field,
        }


class StructuralError(GraphValidationError):
    """Raised when the node or link container is absent, malformed or empty."""

    kind = "structural_error"


class FieldError(GraphValidationError):
    """Raised when a node or link field violates its type or range constraint."""

    kind = "field_error"

    def __init__(
        self,
        message: str,
        entity_id: Optional[str] = None,
        field: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message, entity_id=entity_id, field=field)
        self.position = position

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["position"] = self.position
        return data


class DuplicateIdError(GraphValidationError):
    """Raised when two nodes share an id."""

    kind = "duplicate_id"

    def __init__(self, node_id: str):
        super().__init__(f"Duplicate node id: {node_id}", entity_id=node_id, field="id")


class DanglingReferenceError(GraphValidationError):
    """Raised when a link endpoint references a node id absent from the graph."""

    kind = "dangling_reference"

    def __init__(self, node_id: str, endpoint: str):
        super().__init__(
            f"Invalid link: {endpoint} node {node_id} not found in nodes",
            entity_id=node_id,
            field=endpoint,
        )
        self.endpoint = endpoint

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["endpoint"] = self.endpoint
        return data


class ParseError(GalaxyGraphError):
    """Raised when raw external text is not parseable as JSON at all."""

    kind = "parse_error"

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "line": self.line,
            "column": self.column,
        }


class GraphIntegrityError(GalaxyGraphError):
    """Raised when a trusted internal source (template, generator) yields an invalid graph."""

    def __init__(self, message: str, cause: GraphValidationError):
        super().__init__(message)
        self.cause = cause


class LLMError(GalaxyGraphError):
    """Raised for generative model invocation errors."""

    retryable = False


class LLMTimeoutError(LLMError):
    """Raised when a generative model call exceeds the configured timeout."""

    retryable = True


class RateLimitError(LLMError):
    """Raised when the model provider returns HTTP 429."""

    retryable = True
