"""
Application constants for Knowledge Galaxy.

This module contains the magic numbers, default values, and configuration
constants used throughout the application.
"""

from __future__ import annotations

# Node importance bounds
MIN_IMPORTANCE = 0
MAX_IMPORTANCE = 100
ROOT_IMPORTANCE = 100  # Reserved for the single central node

# Generic generator shape
GENERIC_PRIMARY_CONCEPTS = (
    "Fundamentals",
    "Core Concepts",
    "Applications",
    "Tools & Resources",
    "Advanced Topics",
    "Best Practices",
)
GENERIC_DETAILS_PER_CONCEPT = 3
GENERIC_CONCEPT_IMPORTANCE = (70.0, 90.0)  # [low, high)
GENERIC_DETAIL_IMPORTANCE = (40.0, 70.0)  # [low, high)
GENERIC_CONCEPT_LINK_STRENGTH = 12
GENERIC_DETAIL_LINK_STRENGTH = 10
GENERIC_LINK_LABEL = "includes"

# Topic normalization
UNTITLED_TOPIC_ID = "untitled-topic"
UNTITLED_TOPIC_NAME = "Untitled Topic"

# Generative model defaults
DEFAULT_MODEL_ENDPOINT = "https://api.anthropic.com/v1/messages"
DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.7
DEFAULT_REQUEST_TIMEOUT = 30  # seconds
ANTHROPIC_API_VERSION = "2023-06-01"

# Simulated network latency for fetch_graph
DEFAULT_FETCH_DELAY_SECONDS = 0.5

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] - %(message)s"
