"""Knowledge graph validation, templates, generation and parsing."""

from __future__ import annotations

from .generator import GenericGraphGenerator, generate_generic, generate_random_graph
from .parser import parse_graph_response
from .templates import (
    DEFAULT_TEMPLATE_LIBRARY,
    TemplateLibrary,
    build_graph,
    lookup_template,
)
from .validator import find_violation, validate_graph
from .views import filter_graph

__all__ = [
    "DEFAULT_TEMPLATE_LIBRARY",
    "GenericGraphGenerator",
    "TemplateLibrary",
    "build_graph",
    "filter_graph",
    "find_violation",
    "generate_generic",
    "generate_random_graph",
    "lookup_template",
    "parse_graph_response",
    "validate_graph",
]
