"""Knowledge graph data model.

Nodes, links and graphs are frozen pydantic models. The wire format shared
with renderers and generative models names node importance ``val`` and link
strength ``value``; both the wire names and the Python field names are
accepted on input.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.constants import MAX_IMPORTANCE, MIN_IMPORTANCE, ROOT_IMPORTANCE
from ..utils.types import JSON, Metadata


class NodeCategory(str, Enum):
    """Closed set of node categories, with OTHER as the fallback."""

    CONCEPT = "concept"
    PERSON = "person"
    TOPIC = "topic"
    RESOURCE = "resource"
    SKILL = "skill"
    PROJECT = "project"
    OTHER = "other"

    @classmethod
    def values(cls) -> FrozenSet[str]:
        return frozenset(member.value for member in cls)

    @classmethod
    def coerce(cls, value: Any) -> "NodeCategory":
        """Map any category string onto the enum, degrading unknown values to OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


class GraphNode(BaseModel):
    """One concept or entity in the knowledge graph."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Unique node identifier")
    name: str = Field(..., min_length=1, description="Display label")
    importance: float = Field(
        ...,
        alias="val",
        ge=MIN_IMPORTANCE,
        le=MAX_IMPORTANCE,
        allow_inf_nan=False,
        description="Visual prominence between 0 and 100",
    )
    category: NodeCategory = Field(..., description="Node category")
    description: Optional[str] = None
    color: Optional[str] = None
    metadata: Optional[Metadata] = None

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> NodeCategory:
        return NodeCategory.coerce(value)


LinkEndpoint = Union[str, GraphNode]


def endpoint_id(endpoint: Any) -> Optional[str]:
    """Resolve a link endpoint to a node id.

    Endpoints are either a bare id string or an embedded node (a GraphNode,
    or a mapping carrying an ``id`` in raw payloads). Returns None when the
    endpoint cannot be resolved.
    """
    if isinstance(endpoint, str):
        return endpoint
    if isinstance(endpoint, GraphNode):
        return endpoint.id
    if isinstance(endpoint, Mapping):
        value = endpoint.get("id")
        return value if isinstance(value, str) else None
    return None


class GraphLink(BaseModel):
    """Directed relationship between two nodes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: LinkEndpoint
    target: LinkEndpoint
    strength: Optional[float] = Field(None, alias="value", allow_inf_nan=False)
    label: Optional[str] = None

    @property
    def source_id(self) -> Optional[str]:
        return endpoint_id(self.source)

    @property
    def target_id(self) -> Optional[str]:
        return endpoint_id(self.target)


class GraphData(BaseModel):
    """Immutable aggregate of nodes and links."""

    model_config = ConfigDict(frozen=True)

    nodes: Tuple[GraphNode, ...]
    links: Tuple[GraphLink, ...]

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def root_nodes(self) -> Tuple[GraphNode, ...]:
        """Nodes carrying the reserved root importance."""
        return tuple(node for node in self.nodes if node.importance == ROOT_IMPORTANCE)

    def root_node(self) -> Optional[GraphNode]:
        """The single root node, or None when there is not exactly one."""
        roots = self.root_nodes()
        return roots[0] if len(roots) == 1 else None

    def to_payload(self) -> JSON:
        """Serialize to the JSON-compatible wire format."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


class GraphFilterOptions(BaseModel):
    """Criteria for deriving a filtered view of a graph."""

    categories: Optional[List[NodeCategory]] = None
    min_importance: Optional[float] = None
    max_importance: Optional[float] = None
    search_query: Optional[str] = None

    @field_validator("categories", mode="before")
    @classmethod
    def _coerce_categories(cls, value: Any) -> Any:
        if value is None:
            return None
        return [NodeCategory.coerce(item) for item in value]
