"""Topic normalization utilities for template keys and node identifiers."""

from __future__ import annotations

import re

from .constants import UNTITLED_TOPIC_ID, UNTITLED_TOPIC_NAME

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_topic(topic: str) -> str:
    """Normalize a topic into a lookup key: lowercase, whitespace runs become hyphens.

    Leading and trailing whitespace is dropped before joining, so
    ``"  Machine   Learning "`` becomes ``"machine-learning"``. The result may
    be empty for blank input.
    """
    if topic is None:
        return ""
    return _WHITESPACE_RUN.sub("-", str(topic).strip().lower())


def topic_to_node_id(topic: str) -> str:
    """Build a non-empty node id for a topic."""
    return normalize_topic(topic) or UNTITLED_TOPIC_ID


def topic_display_name(topic: str) -> str:
    """Return the human-readable label for a topic, never empty."""
    if topic is None:
        return UNTITLED_TOPIC_NAME
    name = _WHITESPACE_RUN.sub(" ", str(topic).strip())
    return name or UNTITLED_TOPIC_NAME


def is_valid_topic_key(key: str) -> bool:
    """Return True when ``key`` is already in normalized form."""
    return bool(key) and normalize_topic(key) == key
