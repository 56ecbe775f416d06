"""Unit tests for parsing external graph responses."""

import json

import pytest
from pydantic import ValidationError

from knowledge_galaxy.knowledge_graph.parser import _field_error, parse_graph_response
from knowledge_galaxy.knowledge_graph.templates import DEFAULT_TEMPLATE_LIBRARY
from knowledge_galaxy.knowledge_graph.validator import find_violation
from knowledge_galaxy.models.graph import GraphData, GraphNode, NodeCategory
from knowledge_galaxy.utils.exceptions import (
    DanglingReferenceError,
    FieldError,
    GraphValidationError,
    ParseError,
    StructuralError,
)

MODEL_REPLY = json.dumps(
    {
        "nodes": [
            {"id": "rust", "name": "Rust", "val": 100, "category": "topic",
             "description": "Systems programming language"},
            {"id": "ownership", "name": "Ownership", "val": 75, "category": "concept"},
            {"id": "borrowck", "name": "Borrow Checker", "val": 55, "category": "tooling"},
        ],
        "links": [
            {"source": "rust", "target": "ownership", "value": 12, "label": "includes"},
            {"source": "ownership", "target": "borrowck", "value": 10},
        ],
    }
)


def test_parses_valid_reply():
    graph = parse_graph_response(MODEL_REPLY)

    assert graph.node_ids() == ["rust", "ownership", "borrowck"]
    assert graph.root_node().id == "rust"
    assert graph.links[0].strength == 12
    assert graph.links[0].label == "includes"


def test_unknown_category_degrades_to_other():
    graph = parse_graph_response(MODEL_REPLY)
    assert graph.get_node("borrowck").category is NodeCategory.OTHER


def test_unknown_category_rejected_when_strict():
    with pytest.raises(FieldError) as exc_info:
        parse_graph_response(MODEL_REPLY, strict_categories=True)
    assert exc_info.value.entity_id == "borrowck"


def test_empty_node_set_is_a_validation_failure():
    with pytest.raises(GraphValidationError) as exc_info:
        parse_graph_response('{"nodes": []}')
    assert isinstance(exc_info.value, StructuralError)
    assert not isinstance(exc_info.value, ParseError)


def test_not_json_is_a_parse_error():
    with pytest.raises(ParseError) as exc_info:
        parse_graph_response("not json")
    assert not isinstance(exc_info.value, GraphValidationError)
    assert exc_info.value.line == 1
    assert exc_info.value.column == 1


def test_markdown_fenced_json_is_rejected():
    with pytest.raises(ParseError):
        parse_graph_response("```json\n" + MODEL_REPLY + "\n```")


def test_trailing_text_is_rejected():
    with pytest.raises(ParseError):
        parse_graph_response(MODEL_REPLY + "\nHope this helps!")


@pytest.mark.parametrize("raw", ["[]", "42", '"graph"', "null"])
def test_non_object_json_is_structural(raw):
    with pytest.raises(StructuralError):
        parse_graph_response(raw)


def test_non_string_input_is_a_parse_error():
    with pytest.raises(ParseError):
        parse_graph_response(b'{"nodes": []}')


def test_dangling_reference_propagates():
    payload = json.loads(MODEL_REPLY)
    payload["links"].append({"source": "rust", "target": "lifetimes"})
    with pytest.raises(DanglingReferenceError) as exc_info:
        parse_graph_response(json.dumps(payload))
    assert exc_info.value.entity_id == "lifetimes"
    assert exc_info.value.endpoint == "target"


def test_embedded_endpoint_becomes_graph_node():
    payload = json.loads(MODEL_REPLY)
    payload["links"][0]["target"] = payload["nodes"][1]
    graph = parse_graph_response(json.dumps(payload))

    target = graph.links[0].target
    assert isinstance(target, GraphNode)
    assert graph.links[0].target_id == "ownership"


def test_embedded_id_reference_resolves_to_graph_node():
    payload = json.loads(MODEL_REPLY)
    payload["links"][0]["source"] = {"id": "rust"}
    payload["links"][0]["target"] = {"id": "ownership"}
    assert find_violation(payload) is None

    graph = parse_graph_response(json.dumps(payload))

    link = graph.links[0]
    assert link.source_id == "rust"
    assert link.target_id == "ownership"
    assert link.target == graph.get_node("ownership")


def test_model_coercion_error_names_the_real_field():
    payload = json.loads(MODEL_REPLY)
    payload["links"][0]["source"] = {"id": "rust"}
    with pytest.raises(ValidationError) as exc_info:
        GraphData.model_validate(payload)

    error = _field_error(payload, exc_info.value)

    assert isinstance(error, FieldError)
    assert error.field == "source"
    assert error.entity_id == "rust"
    assert error.position == 0
    assert ".str:" not in error.message


HUGE_INT = "1" + "0" * 400


def _reply_with(node_val="75", link_value="12"):
    return (
        '{"nodes": [{"id": "a", "name": "A", "val": 100, "category": "topic"},'
        ' {"id": "b", "name": "B", "val": ' + node_val + ', "category": "concept"}],'
        ' "links": [{"source": "a", "target": "b", "value": ' + link_value + "}]}"
    )


def test_importance_beyond_float_range_is_a_field_error():
    with pytest.raises(FieldError) as exc_info:
        parse_graph_response(_reply_with(node_val=HUGE_INT))
    assert exc_info.value.field == "val"
    assert exc_info.value.entity_id == "b"


def test_link_value_beyond_float_range_is_a_field_error():
    with pytest.raises(FieldError) as exc_info:
        parse_graph_response(_reply_with(link_value=HUGE_INT))
    assert exc_info.value.field == "value"


def test_integer_literal_too_long_to_convert():
    # Rejected while decoding where the interpreter caps integer digits
    with pytest.raises((ParseError, FieldError)):
        parse_graph_response(_reply_with(node_val="1" + "0" * 5000))


def test_deeply_nested_arrays_are_a_parse_error():
    with pytest.raises(ParseError):
        parse_graph_response("[" * 100000 + "]" * 100000)


@pytest.mark.parametrize("key", DEFAULT_TEMPLATE_LIBRARY.keys())
def test_template_round_trip(key):
    original = DEFAULT_TEMPLATE_LIBRARY.lookup(key)
    parsed = parse_graph_response(original.to_json())

    assert find_violation(parsed) is None
    assert parsed.node_ids() == original.node_ids()
    assert [(l.source_id, l.target_id) for l in parsed.links] == [
        (l.source_id, l.target_id) for l in original.links
    ]
    assert parsed == original
