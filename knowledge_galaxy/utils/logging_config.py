"""
Logging setup for Knowledge Galaxy.

Log lines carry the id of the HTTP request that produced them. The request-id
middleware binds the id for the duration of a request; outside a request
(startup, scripts) records show ``-``.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar, Token
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL, LOG_FORMAT

PLAIN_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
NO_REQUEST_ID = "-"

_current_request_id: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)

# Chatty client libraries only log warnings and above.
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(level: Optional[str] = None, include_request_id: bool = True) -> None:
    """
    Configure the root logger to write to stdout.

    Args:
        level: Level name; falls back to ``LOG_LEVEL`` and then INFO.
        include_request_id: Use the request-aware format. CLI tools turn it off.
    """
    level_name = (level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT if include_request_id else PLAIN_LOG_FORMAT,
        handlers=[handler],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging configured with level: %s", level_name)


def bind_request_id(request_id: str) -> Token:
    """Attach a request id to log records emitted in the current context."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)


def current_request_id() -> str:
    return _current_request_id.get()


class RequestIDFilter(logging.Filter):
    """Stamp records with the bound request id unless one was passed via ``extra``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = _current_request_id.get()
        return True
