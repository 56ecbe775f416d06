"""
Template library of pre-built knowledge graphs.

Templates are keyed by normalized topic (lowercase, words joined by hyphens)
and map to zero-argument constructors so each lookup yields a fresh,
deterministic GraphData. The registry is read-only after construction.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

from ..models.graph import GraphData, GraphLink, GraphNode
from . import template_data

logger = logging.getLogger(__name__)

TemplateFactory = Callable[[], GraphData]


def build_graph(
    node_rows: Iterable[Tuple[str, str, float, str, str]],
    link_rows: Iterable[Tuple[str, str, float, str]],
) -> GraphData:
    """Build a GraphData from ``(id, name, val, category, description)`` and
    ``(source, target, value, label)`` rows."""
    nodes = tuple(
        GraphNode(
            id=node_id,
            name=name,
            importance=importance,
            category=category,
            description=description,
        )
        for node_id, name, importance, category, description in node_rows
    )
    links = tuple(
        GraphLink(source=source, target=target, strength=strength, label=label)
        for source, target, strength, label in link_rows
    )
    return GraphData(nodes=nodes, links=links)


def machine_learning_template() -> GraphData:
    return build_graph(
        template_data.MACHINE_LEARNING_NODES, template_data.MACHINE_LEARNING_LINKS
    )


def web_development_template() -> GraphData:
    return build_graph(
        template_data.WEB_DEVELOPMENT_NODES, template_data.WEB_DEVELOPMENT_LINKS
    )


def quantum_computing_template() -> GraphData:
    return build_graph(
        template_data.QUANTUM_COMPUTING_NODES, template_data.QUANTUM_COMPUTING_LINKS
    )


class TemplateLibrary:
    """Immutable registry of topic key -> template factory.

    Example:
        >>> library = TemplateLibrary({"demo": lambda: graph})
        >>> library.lookup("demo") is not None
        True
        >>> library.lookup("Demo") is None  # exact key match only
        True
    """

    def __init__(self, factories: Mapping[str, TemplateFactory]):
        self._factories = MappingProxyType(dict(factories))

    def lookup(self, key: str) -> Optional[GraphData]:
        """Return a fresh graph for an exact normalized key, or None if absent."""
        factory = self._factories.get(key)
        if factory is None:
            return None
        logger.debug("Template hit for key '%s'", key)
        return factory()

    def keys(self) -> List[str]:
        return sorted(self._factories)

    @property
    def factories(self) -> Mapping[str, TemplateFactory]:
        return self._factories

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"TemplateLibrary(keys={self.keys()!r})"


DEFAULT_TEMPLATE_LIBRARY = TemplateLibrary(
    {
        "machine-learning": machine_learning_template,
        "web-development": web_development_template,
        "quantum-computing": quantum_computing_template,
    }
)


def lookup_template(key: str) -> Optional[GraphData]:
    """Look up ``key`` in the default template library."""
    return DEFAULT_TEMPLATE_LIBRARY.lookup(key)
