"""
Type aliases and custom types for Knowledge Galaxy.

This module defines common type aliases used throughout the application
to improve code readability and type safety.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

# Common type aliases
JSON = Dict[str, Any]
Metadata = Dict[str, Any]

# Graph wire-format payload (untrusted, as decoded from JSON)
GraphPayload = Mapping[str, Any]

# LLM types
LLMResponse = str
