"""Unit tests for the template library."""

import pytest

from knowledge_galaxy.knowledge_graph.templates import (
    DEFAULT_TEMPLATE_LIBRARY,
    TemplateLibrary,
    build_graph,
    lookup_template,
)
from knowledge_galaxy.knowledge_graph.validator import find_violation
from knowledge_galaxy.models.graph import NodeCategory
from knowledge_galaxy.utils.topic_keys import is_valid_topic_key

TEMPLATE_KEYS = ["machine-learning", "quantum-computing", "web-development"]


def test_default_library_keys():
    assert DEFAULT_TEMPLATE_LIBRARY.keys() == TEMPLATE_KEYS
    assert len(DEFAULT_TEMPLATE_LIBRARY) == 3
    assert all(is_valid_topic_key(key) for key in DEFAULT_TEMPLATE_LIBRARY.keys())


@pytest.mark.parametrize("key", TEMPLATE_KEYS)
def test_every_template_passes_strict_validation(key):
    graph = lookup_template(key)
    assert graph is not None
    assert find_violation(graph, strict_categories=True) is None


@pytest.mark.parametrize("key", TEMPLATE_KEYS)
def test_template_root_matches_key(key):
    graph = lookup_template(key)
    root = graph.root_node()
    assert root is not None
    assert root.id == key
    assert root.category is NodeCategory.TOPIC


@pytest.mark.parametrize("key", TEMPLATE_KEYS)
def test_template_is_deterministic(key):
    first = DEFAULT_TEMPLATE_LIBRARY.lookup(key)
    second = DEFAULT_TEMPLATE_LIBRARY.lookup(key)
    assert first is not second
    assert first == second
    assert first.to_json() == second.to_json()


def test_previously_undeclared_link_targets_are_nodes():
    assert lookup_template("machine-learning").get_node("gradient-descent") is not None
    assert lookup_template("quantum-computing").get_node("quantum-supremacy") is not None


def test_lookup_is_exact_match_only():
    assert lookup_template("Machine Learning") is None
    assert lookup_template("machine") is None
    assert lookup_template("") is None
    assert "machine-learning" in DEFAULT_TEMPLATE_LIBRARY
    assert "machine learning" not in DEFAULT_TEMPLATE_LIBRARY


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_TEMPLATE_LIBRARY.factories["new-topic"] = lambda: None


def test_library_copies_input_mapping():
    graph = build_graph([("solo", "Solo", 100, "topic", "Only node")], [])
    factories = {"solo": lambda: graph}
    library = TemplateLibrary(factories)
    factories["other"] = lambda: graph

    assert library.keys() == ["solo"]
    assert library.lookup("solo") == graph


def test_build_graph_maps_rows():
    graph = build_graph(
        [("a", "A", 100, "topic", "Root"), ("b", "B", 40, "skill", "Leaf")],
        [("a", "b", 9, "has")],
    )
    assert graph.node_ids() == ["a", "b"]
    link = graph.links[0]
    assert (link.source_id, link.target_id, link.strength, link.label) == ("a", "b", 9, "has")
