"""Parse raw text from an external generative source into a validated graph."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from ..models.graph import GraphData, endpoint_id
from ..utils.exceptions import FieldError, ParseError, StructuralError
from ..utils.types import GraphPayload
from .validator import validate_graph

logger = logging.getLogger(__name__)

# Union members pydantic appends to error locations for LinkEndpoint
_UNION_BRANCHES = {"str", "GraphNode"}


def parse_graph_response(raw_text: Any, *, strict_categories: bool = False) -> GraphData:
    """
    Turn raw external text into a GraphData, or fail with a typed error.

    The whole document must be a single JSON object. Nothing is repaired or
    dropped: any violation rejects the entire response. Embedded link
    endpoints are resolved by id against the graph's own nodes, so a
    reference such as ``{"id": "a"}`` is accepted.

    Args:
        raw_text: Text expected to contain the JSON serialization of a graph.
        strict_categories: Reject categories outside the enumerated set.

    Returns:
        The validated graph.

    Raises:
        ParseError: If ``raw_text`` is not a string or not valid JSON.
        GraphValidationError: If the JSON parses but violates a graph invariant.
    """
    if not isinstance(raw_text, str):
        raise ParseError(f"Expected text, got {type(raw_text).__name__}")

    payload = _load_json(raw_text)

    if not isinstance(payload, Mapping):
        raise StructuralError(
            f"Invalid graph data: expected an object, got {type(payload).__name__}"
        )

    validate_graph(payload, strict_categories=strict_categories)
    payload = _resolve_embedded_endpoints(payload)

    try:
        return GraphData.model_validate(payload)
    except ValidationError as e:
        raise _field_error(payload, e) from e


def _load_json(raw_text: str) -> Any:
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Response is not valid JSON: {e.msg}", line=e.lineno, column=e.colno
        ) from e
    except (ValueError, RecursionError) as e:
        # Oversized integer literals and pathologically deep nesting
        raise ParseError(f"Response is not parseable JSON: {e}") from e


def _resolve_embedded_endpoints(payload: Mapping[str, Any]) -> GraphPayload:
    """Replace embedded endpoint objects with the node they reference.

    Runs after validation, so every endpoint id is known to exist.
    """
    nodes_by_id: Dict[str, Any] = {node["id"]: node for node in payload["nodes"]}
    links = []
    for link in payload["links"]:
        resolved = dict(link)
        for side in ("source", "target"):
            if isinstance(link[side], Mapping):
                resolved[side] = nodes_by_id[endpoint_id(link[side])]
        links.append(resolved)
    return {**payload, "links": links}


def _field_error(payload: Mapping[str, Any], error: ValidationError) -> FieldError:
    errors = error.errors()
    # Prefer the error that names the real cause over a failed union branch
    cause = next(
        (err for err in reversed(errors) if str(err["loc"][-1]) not in _UNION_BRANCHES),
        errors[-1],
    )
    loc = cause["loc"]
    location = ".".join(str(part) for part in loc)
    logger.warning("Graph passed validation but failed model coercion at %s", location)

    collection = loc[0] if loc else None
    position = loc[1] if len(loc) > 1 and isinstance(loc[1], int) else None
    field = next(
        (part for part in loc[2:] if isinstance(part, str) and part not in _UNION_BRANCHES),
        None,
    )
    return FieldError(
        f"Invalid graph data at {location}: {cause['msg']}",
        entity_id=_entity_id(payload, collection, position),
        field=field,
        position=position,
    )


def _entity_id(payload: Mapping[str, Any], collection: Any, position: Optional[int]) -> Optional[str]:
    if position is None or collection not in ("nodes", "links"):
        return None
    entity = payload[collection][position]
    if collection == "nodes":
        return entity.get("id")
    return endpoint_id(entity.get("source"))
