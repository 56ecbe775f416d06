"""
Programmatic graph generators.

GenericGraphGenerator is the safety net for topics without a template: its
topology is fixed (root, primary concepts, detail leaves) and only importance
values are random. All randomness comes from an injectable ``random.Random``
so a fixed seed reproduces the exact output.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from ..models.graph import GraphData, GraphLink, GraphNode, NodeCategory
from ..utils.constants import (
    GENERIC_CONCEPT_IMPORTANCE,
    GENERIC_CONCEPT_LINK_STRENGTH,
    GENERIC_DETAIL_IMPORTANCE,
    GENERIC_DETAIL_LINK_STRENGTH,
    GENERIC_DETAILS_PER_CONCEPT,
    GENERIC_LINK_LABEL,
    GENERIC_PRIMARY_CONCEPTS,
    ROOT_IMPORTANCE,
)
from ..utils.topic_keys import topic_display_name, topic_to_node_id

logger = logging.getLogger(__name__)

SAMPLE_COLORS = ("#00f3ff", "#bc13fe", "#00ff88", "#ff006e", "#ffbe0b")


class GenericGraphGenerator:
    """
    Generates a structurally fixed graph for an arbitrary topic string.

    The output always has one root (importance 100, category ``topic``), one
    concept per entry in ``primary_concepts`` linked from the root, and
    ``details_per_concept`` leaves linked from each concept. Ids come from a
    counter, so they never collide regardless of the topic text.

    Args:
        rng: Random source for importance values. Takes precedence over ``seed``.
        seed: Seed for a private ``random.Random`` when ``rng`` is not given.
        primary_concepts: Names of the second-tier concepts.
        details_per_concept: Number of leaves under each concept.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        primary_concepts: Tuple[str, ...] = GENERIC_PRIMARY_CONCEPTS,
        details_per_concept: int = GENERIC_DETAILS_PER_CONCEPT,
    ):
        self.rng = rng if rng is not None else random.Random(seed)
        self.primary_concepts = tuple(primary_concepts)
        self.details_per_concept = details_per_concept

    def generate(self, topic: str) -> GraphData:
        """Generate a graph for ``topic``. Never raises for any string input."""
        root_id = topic_to_node_id(topic)
        display_name = topic_display_name(topic)

        nodes: List[GraphNode] = [
            GraphNode(
                id=root_id,
                name=display_name,
                importance=ROOT_IMPORTANCE,
                category=NodeCategory.TOPIC,
                description=f"Comprehensive knowledge graph for {display_name}",
            )
        ]
        links: List[GraphLink] = []
        counter = 0

        for concept in self.primary_concepts:
            concept_id = f"{root_id}-concept-{counter}"
            counter += 1
            nodes.append(
                GraphNode(
                    id=concept_id,
                    name=concept,
                    importance=self._draw(GENERIC_CONCEPT_IMPORTANCE),
                    category=NodeCategory.CONCEPT,
                    description=f"{concept} related to {display_name}",
                )
            )
            links.append(
                GraphLink(
                    source=root_id,
                    target=concept_id,
                    strength=GENERIC_CONCEPT_LINK_STRENGTH,
                    label=GENERIC_LINK_LABEL,
                )
            )

            for detail in range(self.details_per_concept):
                detail_id = f"{root_id}-sub-{counter}"
                counter += 1
                nodes.append(
                    GraphNode(
                        id=detail_id,
                        name=f"{concept} Detail {detail + 1}",
                        importance=self._draw(GENERIC_DETAIL_IMPORTANCE),
                        category=NodeCategory.CONCEPT,
                        description=f"Specific aspect of {concept}",
                    )
                )
                links.append(
                    GraphLink(
                        source=concept_id,
                        target=detail_id,
                        strength=GENERIC_DETAIL_LINK_STRENGTH,
                        label=GENERIC_LINK_LABEL,
                    )
                )

        logger.debug("Generated generic graph for '%s' with %d nodes", root_id, len(nodes))
        return GraphData(nodes=tuple(nodes), links=tuple(links))

    def _draw(self, bounds: Tuple[float, float]) -> float:
        low, high = bounds
        return low + self.rng.random() * (high - low)


def generate_generic(topic: str, rng: Optional[random.Random] = None) -> GraphData:
    """Generate a generic graph for ``topic`` with a one-off generator."""
    return GenericGraphGenerator(rng=rng).generate(topic)


def generate_random_graph(
    node_count: int,
    link_count: int,
    rng: Optional[random.Random] = None,
) -> GraphData:
    """
    Generate a random graph with numbered nodes and arbitrary links.

    Links connect random existing nodes; self-links and parallel links are
    possible. Useful as sample data and for exercising consumers of
    GraphData with irregular shapes.

    Args:
        node_count: Number of nodes, at least 1.
        link_count: Number of links, at least 0.
        rng: Random source, defaults to a fresh unseeded ``random.Random``.

    Raises:
        ValueError: If the counts are out of range.
    """
    if node_count < 1:
        raise ValueError("node_count must be at least 1")
    if link_count < 0:
        raise ValueError("link_count must not be negative")

    rng = rng if rng is not None else random.Random()
    categories = [category for category in NodeCategory if category is not NodeCategory.OTHER]

    nodes = tuple(
        GraphNode(
            id=str(index),
            name=f"Node {index}",
            importance=rng.random() * 30 + 10,
            category=rng.choice(categories),
            description=f"Description for node {index}",
            color=rng.choice(SAMPLE_COLORS),
        )
        for index in range(node_count)
    )
    links = tuple(
        GraphLink(
            source=str(rng.randrange(node_count)),
            target=str(rng.randrange(node_count)),
            strength=rng.random() * 10 + 5,
        )
        for _ in range(link_count)
    )
    return GraphData(nodes=nodes, links=links)
