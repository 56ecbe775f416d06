"""
Global exception handling middleware.
"""

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...utils.exceptions import (
    ConfigurationError,
    GraphIntegrityError,
    GraphValidationError,
    LLMError,
    LLMTimeoutError,
    ParseError,
    RateLimitError,
)
from ...utils.logging_config import bind_request_id, reset_request_id
from ..models.error import ErrorResponse, GraphRejection

logger = logging.getLogger(__name__)


def setup_error_handlers(app: FastAPI):
    """
    Register global exception handlers.

    Handles:
    - HTTP Exceptions (FastAPI/Starlette)
    - Validation Errors (Pydantic request bodies)
    - Rejected graph data (parse and validation failures)
    - Generative model failures
    - Unhandled Server Errors
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle standard HTTP exceptions."""
        return _create_error_response(
            status_code=exc.status_code,
            error=str(exc.status_code),
            message=str(exc.detail),
            request_id=_request_id(request)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors."""
        return _create_error_response(
            status_code=422,
            error="validation_error",
            message="Request validation failed",
            details={"errors": exc.errors()},
            request_id=_request_id(request)
        )

    @app.exception_handler(ParseError)
    async def parse_error_handler(request: Request, exc: ParseError):
        """Handle graph text that is not valid JSON."""
        return _create_error_response(
            status_code=400,
            error=exc.kind,
            message=exc.message,
            details=_rejection_details(exc.to_dict()),
            request_id=_request_id(request)
        )

    @app.exception_handler(GraphValidationError)
    async def graph_validation_handler(request: Request, exc: GraphValidationError):
        """Handle graph data that violates a structural invariant."""
        return _create_error_response(
            status_code=422,
            error=exc.kind,
            message=exc.message,
            details=_rejection_details(exc.to_dict()),
            request_id=_request_id(request)
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        """Handle features disabled by configuration."""
        return _create_error_response(
            status_code=503,
            error="service_unavailable",
            message=str(exc),
            request_id=_request_id(request)
        )

    @app.exception_handler(LLMError)
    async def llm_error_handler(request: Request, exc: LLMError):
        """Handle generative model failures."""
        if isinstance(exc, LLMTimeoutError):
            status_code, error = 504, "model_timeout"
        elif isinstance(exc, RateLimitError):
            status_code, error = 502, "model_rate_limited"
        else:
            status_code, error = 502, "model_error"
        logger.warning(f"Generative model call failed: {exc}")
        return _create_error_response(
            status_code=status_code,
            error=error,
            message=str(exc),
            details={"retryable": exc.retryable},
            request_id=_request_id(request)
        )

    @app.exception_handler(GraphIntegrityError)
    async def integrity_error_handler(request: Request, exc: GraphIntegrityError):
        """Handle invalid graphs from templates or the generator."""
        error_id = uuid.uuid4().hex
        logger.error(f"Graph integrity failure {error_id}: {exc}")
        return _create_error_response(
            status_code=500,
            error="graph_integrity_error",
            message="An internal graph source produced invalid data.",
            details={"error_id": error_id},
            request_id=_request_id(request)
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle catch-all unhandled exceptions."""
        error_id = uuid.uuid4().hex
        logger.error(f"Unhandled exception {error_id}: {exc}", exc_info=True)

        return _create_error_response(
            status_code=500,
            error="internal_server_error",
            message="An internal server error occurred.",
            details={"error_id": error_id},
            request_id=_request_id(request)
        )

    # Every request gets an id, echoed back and stamped on its log lines
    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        if not hasattr(request.state, "request_id"):
            request.state.request_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
        token = bind_request_id(request.state.request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)
        response.headers["X-Request-ID"] = request.state.request_id
        return response


def _request_id(request: Request):
    return getattr(request.state, "request_id", None)


def _rejection_details(data: dict) -> dict:
    return GraphRejection(**data).model_dump(exclude_none=True)


def _create_error_response(
    status_code: int,
    error: str,
    message: str,
    details: dict = None,
    request_id: str = None
) -> JSONResponse:
    """Create standardized JSON error response."""
    content = ErrorResponse(
        error=error,
        message=message,
        details=details,
        request_id=request_id
    ).model_dump(exclude_none=True)

    return JSONResponse(
        status_code=status_code,
        content=content
    )
