"""CORS middleware configuration."""

from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import config


def setup_cors(app: FastAPI, origins: Optional[List[str]] = None) -> None:
    """Configure CORS middleware for the FastAPI application.

    Args:
        app: FastAPI application instance to configure.
        origins: Allowed origins, defaults to ``ALLOWED_ORIGINS``.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins if origins is not None else config.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        allow_credentials=False,
    )
