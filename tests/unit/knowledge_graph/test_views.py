"""Unit tests for filtered graph views."""

from knowledge_galaxy.knowledge_graph.templates import machine_learning_template
from knowledge_galaxy.knowledge_graph.views import filter_graph
from knowledge_galaxy.models.graph import GraphFilterOptions, NodeCategory


def _assert_links_closed(graph):
    ids = set(graph.node_ids())
    for link in graph.links:
        assert link.source_id in ids
        assert link.target_id in ids


def test_no_options_returns_same_graph():
    graph = machine_learning_template()
    assert filter_graph(graph) is graph
    assert filter_graph(graph, GraphFilterOptions()) == graph


def test_filter_by_category():
    graph = machine_learning_template()
    view = filter_graph(graph, GraphFilterOptions(categories=["person"]))

    assert {node.id for node in view.nodes} == {"yann-lecun", "yoshua-bengio", "geoffrey-hinton"}
    assert view.links == ()


def test_category_strings_are_coerced():
    options = GraphFilterOptions(categories=["Person", "galaxy"])
    assert options.categories == [NodeCategory.PERSON, NodeCategory.OTHER]


def test_filter_by_importance_keeps_closed_links():
    graph = machine_learning_template()
    view = filter_graph(graph, GraphFilterOptions(min_importance=80))

    assert all(node.importance >= 80 for node in view.nodes)
    assert "machine-learning" in view.node_ids()
    assert len(view.links) > 0
    _assert_links_closed(view)


def test_filter_by_max_importance_drops_root():
    graph = machine_learning_template()
    view = filter_graph(graph, GraphFilterOptions(max_importance=99))
    assert view.root_node() is None
    _assert_links_closed(view)


def test_search_matches_name_and_description_case_insensitively():
    graph = machine_learning_template()
    view = filter_graph(graph, GraphFilterOptions(search_query="  NEURAL "))

    ids = set(view.node_ids())
    assert "neural-networks" in ids
    assert "activation-functions" in ids  # matched via description
    assert "svm" not in ids


def test_criteria_combine():
    graph = machine_learning_template()
    view = filter_graph(
        graph,
        GraphFilterOptions(categories=["skill"], min_importance=65, search_query="learning"),
    )
    assert view.node_ids() == ["q-learning"]


def test_filter_can_empty_the_graph_without_mutating_input():
    graph = machine_learning_template()
    before = graph.to_json()
    view = filter_graph(graph, GraphFilterOptions(search_query="no such node anywhere"))

    assert view.nodes == ()
    assert view.links == ()
    assert graph.to_json() == before
