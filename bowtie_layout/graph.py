"""Positioned graph handed to the presentation layer."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .state import ToggleKind

NodeKind = Literal["hazard-sign", "top-event", "box"]

# Named connection points on the top-event node
ANCHOR_TOP = "top"
ANCHOR_LEFT = "left"
ANCHOR_RIGHT = "right"


class _Schema(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Position(_Schema):
    x: float
    y: float


class ToggleTag(_Schema):
    """What to toggle when the node is activated."""

    kind: ToggleKind
    derived_id: str


class NodePayload(_Schema):
    title: str
    side: Optional[Literal["left", "right"]] = None
    header_color: Optional[str] = None
    chips: List[str] = Field(default_factory=list)
    assurances: List[str] = Field(default_factory=list)
    expanded: bool = False
    toggle: Optional[ToggleTag] = None


class GraphNode(_Schema):
    id: str
    kind: NodeKind
    position: Position
    payload: NodePayload


class GraphEdge(_Schema):
    id: str
    source_node_id: str
    target_node_id: str
    source_anchor: Optional[str] = None
    target_anchor: Optional[str] = None


class PositionedGraph(_Schema):
    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)

    def node(self, node_id: str) -> Optional[GraphNode]:
        return next((n for n in self.nodes if n.id == node_id), None)

    def edge(self, edge_id: str) -> Optional[GraphEdge]:
        return next((e for e in self.edges if e.id == edge_id), None)

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def edge_ids(self) -> List[str]:
        return [e.id for e in self.edges]

    def positions(self) -> Dict[str, Position]:
        return {n.id: n.position for n in self.nodes}

    def edges_from(self, node_id: str) -> List[GraphEdge]:
        return [e for e in self.edges if e.source_node_id == node_id]

    def edges_to(self, node_id: str) -> List[GraphEdge]:
        return [e for e in self.edges if e.target_node_id == node_id]

    def to_jsonable(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
