"""API configuration."""

from __future__ import annotations

import os
import logging
import sys

from dotenv import load_dotenv

from ..utils.constants import (
    DEFAULT_FETCH_DELAY_SECONDS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_MODEL_ENDPOINT,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TEMPERATURE,
)

load_dotenv()

# Configure logger for configuration validation
logger = logging.getLogger(__name__)


def _optional_int(name: str):
    value = os.getenv(name, "").strip()
    return int(value) if value else None


class GalaxyConfig:
    """Knowledge Galaxy configuration.

    Manages environment-based configuration for:
    - Graph ingestion (artificial latency, category strictness, generator seed)
    - Generative model client (endpoint, model, limits, timeout, API key)
    - Security (CORS)
    """

    # Environment mode
    ENVIRONMENT = os.getenv(
        "ENVIRONMENT", "development"
    )  # development, staging, production
    LOG_LEVEL = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)

    # CORS settings
    ALLOWED_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173"
        ).split(",")
        if origin.strip()
    ]

    # Generative model settings
    GRAPH_MODEL_ENDPOINT = os.getenv("GRAPH_MODEL_ENDPOINT", DEFAULT_MODEL_ENDPOINT)
    GRAPH_MODEL = os.getenv("GRAPH_MODEL", DEFAULT_MODEL)
    GRAPH_MAX_TOKENS = int(os.getenv("GRAPH_MAX_TOKENS", str(DEFAULT_MAX_TOKENS)))
    GRAPH_TEMPERATURE = float(os.getenv("GRAPH_TEMPERATURE", str(DEFAULT_TEMPERATURE)))
    GRAPH_TIMEOUT_SECONDS = float(
        os.getenv("GRAPH_TIMEOUT_SECONDS", str(DEFAULT_REQUEST_TIMEOUT))
    )
    ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")  # Enables /generate

    # Ingestion settings
    # Simulated latency before resolving a topic (0 disables it)
    GRAPH_FETCH_DELAY_SECONDS = float(
        os.getenv("GRAPH_FETCH_DELAY_SECONDS", str(DEFAULT_FETCH_DELAY_SECONDS))
    )
    # Reject categories outside the enumerated set instead of mapping them to "other"
    GRAPH_STRICT_CATEGORIES = (
        os.getenv("GRAPH_STRICT_CATEGORIES", "false").lower() == "true"
    )
    GRAPH_GENERATOR_SEED = _optional_int("GRAPH_GENERATOR_SEED")

    @classmethod
    def validate_production_config(cls) -> None:
        """Validate that required configuration is set for production deployment.

        Exits the process if a required setting is missing.
        """
        if cls.ENVIRONMENT != "production":
            logger.info(
                f"Running in {cls.ENVIRONMENT} mode - skipping strict validation"
            )
            return

        errors = []

        # CORS validation
        if not cls.ALLOWED_ORIGINS or cls.ALLOWED_ORIGINS == ["*"]:
            errors.append(
                "ALLOWED_ORIGINS must be explicitly configured (wildcards not allowed in production)"
            )

        if not cls.ANTHROPIC_API_KEY:
            logger.warning(
                "ANTHROPIC_API_KEY is not set - model-backed graph generation is disabled"
            )

        if errors:
            error_msg = "Production configuration validation failed:\n" + "\n".join(
                f"  - {e}" for e in errors
            )
            logger.error(error_msg)
            sys.exit(1)

        logger.info("Production configuration validated successfully")

    @staticmethod
    def mask_sensitive(value: str, visible_chars: int = 4) -> str:
        """Mask sensitive configuration values for logging.

        Args:
            value: The sensitive value to mask
            visible_chars: Number of characters to show at the end

        Returns:
            Masked string like "***xyz" or "***" if value is too short
        """
        if not value or len(value) <= visible_chars:
            return "***"
        return "*" * (len(value) - visible_chars) + value[-visible_chars:]

    @classmethod
    def model_client_enabled(cls) -> bool:
        """Return True when a generative model API key is configured."""
        return bool(cls.ANTHROPIC_API_KEY)


config = GalaxyConfig()

# Validate production configuration on module import
if config.ENVIRONMENT == "production":
    config.validate_production_config()
