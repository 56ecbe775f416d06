"""
Fail-fast structural validator for knowledge graph data.

Checks a candidate graph (a GraphData or a raw JSON-like mapping) against
every invariant a renderer relies on and reports the first violation with a
specific, human-readable diagnostic. The check order is fixed:

1. node collection present and list-like
2. link collection present and list-like
3. node collection non-empty
4. per node: id, name, importance, category (then duplicate id, then
   optional fields)
5. per link: endpoints resolvable, endpoints known, optional fields

No partial recovery is attempted; a single violation rejects the graph.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Set

from ..models.graph import GraphData, NodeCategory, endpoint_id
from ..utils.constants import MAX_IMPORTANCE, MIN_IMPORTANCE
from ..utils.exceptions import (
    DanglingReferenceError,
    DuplicateIdError,
    FieldError,
    GraphValidationError,
    StructuralError,
)
from ..utils.types import GraphPayload

MISSING_ID = "missing id"


def validate_graph(candidate: Any, *, strict_categories: bool = False) -> None:
    """Validate a candidate graph, raising the first violation found.

    Args:
        candidate: GraphData instance or raw mapping with ``nodes`` and ``links``.
        strict_categories: Reject categories outside the enumerated set.

    Raises:
        StructuralError: Node/link container missing, not list-like, or empty.
        FieldError: A node or link field violates its constraint.
        DuplicateIdError: Two nodes share an id.
        DanglingReferenceError: A link references an unknown node id.
    """
    payload = _as_payload(candidate)

    nodes = payload.get("nodes")
    if not _is_list_like(nodes):
        raise StructuralError(
            "Invalid graph data: missing or invalid nodes array", field="nodes"
        )

    links = payload.get("links")
    if not _is_list_like(links):
        raise StructuralError(
            "Invalid graph data: missing or invalid links array", field="links"
        )

    if len(nodes) == 0:
        raise StructuralError("Invalid graph data: nodes array is empty", field="nodes")

    node_ids: Set[str] = set()
    for position, node in enumerate(nodes):
        node_id = _check_node(node, position, strict_categories)
        if node_id in node_ids:
            raise DuplicateIdError(node_id)
        node_ids.add(node_id)
        _check_node_optional_fields(node, node_id, position)

    for position, link in enumerate(links):
        _check_link(link, position, node_ids)


def find_violation(
    candidate: Any, *, strict_categories: bool = False
) -> Optional[GraphValidationError]:
    """Return the first violation in ``candidate``, or None if it is valid."""
    try:
        validate_graph(candidate, strict_categories=strict_categories)
    except GraphValidationError as exc:
        return exc
    return None


def _as_payload(candidate: Any) -> GraphPayload:
    if isinstance(candidate, GraphData):
        return candidate.to_payload()
    if not isinstance(candidate, Mapping):
        raise StructuralError(
            f"Invalid graph data: expected an object, got {type(candidate).__name__}"
        )
    return candidate


def _is_list_like(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # JSON integers are unbounded; anything past the float range is rejected
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def _check_node(node: Any, position: int, strict_categories: bool) -> str:
    """Check required node fields and return the node id."""
    if not isinstance(node, Mapping):
        raise FieldError(
            f"Invalid node at position {position}: expected an object",
            entity_id=MISSING_ID,
            field="node",
            position=position,
        )

    node_id = node.get("id")
    if not _is_non_empty_string(node_id):
        raise FieldError(
            "Invalid node: missing or non-string id",
            entity_id=MISSING_ID,
            field="id",
            position=position,
        )

    if not _is_non_empty_string(node.get("name")):
        raise FieldError(
            f"Invalid node {node_id}: missing or non-string name",
            entity_id=node_id,
            field="name",
            position=position,
        )

    importance_key = "val" if "val" in node else "importance"
    importance = node.get(importance_key)
    if (
        not _is_number(importance)
        or importance < MIN_IMPORTANCE
        or importance > MAX_IMPORTANCE
    ):
        raise FieldError(
            f"Invalid node {node_id}: {importance_key} must be a number "
            f"between {MIN_IMPORTANCE}-{MAX_IMPORTANCE}",
            entity_id=node_id,
            field=importance_key,
            position=position,
        )

    category = node.get("category")
    if not _is_non_empty_string(category):
        raise FieldError(
            f"Invalid node {node_id}: missing or non-string category",
            entity_id=node_id,
            field="category",
            position=position,
        )
    if strict_categories and category not in NodeCategory.values():
        allowed = ", ".join(sorted(NodeCategory.values()))
        raise FieldError(
            f"Invalid node {node_id}: category '{category}' is not one of {allowed}",
            entity_id=node_id,
            field="category",
            position=position,
        )

    return node_id


def _check_node_optional_fields(node: Mapping[str, Any], node_id: str, position: int) -> None:
    for field_name in ("description", "color"):
        value = node.get(field_name)
        if value is not None and not isinstance(value, str):
            raise FieldError(
                f"Invalid node {node_id}: {field_name} must be a string",
                entity_id=node_id,
                field=field_name,
                position=position,
            )

    metadata = node.get("metadata")
    if metadata is not None and not isinstance(metadata, Mapping):
        raise FieldError(
            f"Invalid node {node_id}: metadata must be an object",
            entity_id=node_id,
            field="metadata",
            position=position,
        )


def _check_link(link: Any, position: int, node_ids: Set[str]) -> None:
    if not isinstance(link, Mapping):
        raise FieldError(
            f"Invalid link at position {position}: expected an object",
            field="link",
            position=position,
        )

    source_id = endpoint_id(link.get("source"))
    target_id = endpoint_id(link.get("target"))
    if not source_id or not target_id:
        raise FieldError(
            "Invalid link: source and target must be specified",
            field="source" if not source_id else "target",
            position=position,
        )

    if source_id not in node_ids:
        raise DanglingReferenceError(source_id, "source")
    if target_id not in node_ids:
        raise DanglingReferenceError(target_id, "target")

    strength_key = "value" if "value" in link else "strength"
    strength = link.get(strength_key)
    if strength is not None and not _is_number(strength):
        raise FieldError(
            f"Invalid link {source_id} -> {target_id}: {strength_key} must be a number",
            field=strength_key,
            position=position,
        )

    label = link.get("label")
    if label is not None and not isinstance(label, str):
        raise FieldError(
            f"Invalid link {source_id} -> {target_id}: label must be a string",
            field="label",
            position=position,
        )
