"""Bowtie layout engine.

``compute_graph(model, state)`` is a pure function of the risk model and the
expansion state. Node ids are derived from model ids (``threat-<id>``,
``cons-<id>``, ``bar-<id>``) and edge ids from their endpoints, so the same
inputs always give the same graph.

Left side, per threat (one row each, model order):
  collapsed  threat ──────────────────────────────▶ top(left)
  expanded   threat ─▶ bar ─▶ ... ─▶ bar ───────────▶ top(left)
             the last barrier sits one column left of the top event and the
             threat moves to one column left of the first barrier.

Right side is the mirror, except that an expanded consequence moves outward
while its chain starts at the fixed right-barrier column.
"""

import logging
from typing import Dict, List, Optional, Sequence

from . import geometry
from .geometry import DEFAULT_LAYOUT, LayoutConfig
from .graph import (
    ANCHOR_LEFT, ANCHOR_RIGHT, ANCHOR_TOP,
    GraphEdge, GraphNode, NodePayload, Position, PositionedGraph, ToggleTag,
)
from .model import Barrier, Consequence, RiskModel, Threat
from .state import ExpansionState, ToggleKind
from .style import CONSEQUENCE_COLOR, THREAT_COLOR, barrier_chips, color_for_type

logger = logging.getLogger(__name__)

HAZARD_ID = "hazard"
TOP_ID = "top"


class LayoutError(RuntimeError):
    """Internal layout defect, e.g. two model entities mapping to one node id."""


def threat_node_id(threat_id: str) -> str:
    return f"threat-{threat_id}"


def consequence_node_id(consequence_id: str) -> str:
    return f"cons-{consequence_id}"


def barrier_node_id(barrier_id: str) -> str:
    return f"bar-{barrier_id}"


def edge_id(source: str, target: str) -> str:
    return f"{source}->{target}"


class _GraphBuilder:
    def __init__(self):
        self.nodes: List[GraphNode] = []
        self.edges: List[GraphEdge] = []
        self._seen: Dict[str, str] = {}

    def add_node(self, node_id: str, kind: str, x: float, y: float, payload: NodePayload) -> None:
        if node_id in self._seen:
            raise LayoutError(f"Node id {node_id!r} produced twice; model ids must be unique")
        self._seen[node_id] = kind
        self.nodes.append(GraphNode(id=node_id, kind=kind, position=Position(x=x, y=y), payload=payload))

    def link(self, source: str, target: str, source_anchor: Optional[str] = None,
             target_anchor: Optional[str] = None) -> None:
        self.edges.append(GraphEdge(
            id=edge_id(source, target),
            source_node_id=source,
            target_node_id=target,
            source_anchor=source_anchor,
            target_anchor=target_anchor,
        ))

    def chain(self, ids: Sequence[str], first_anchor: Optional[str] = None,
              last_anchor: Optional[str] = None) -> None:
        """Link consecutive ids; anchors apply to the first source and the last target."""
        for i in range(len(ids) - 1):
            self.link(
                ids[i], ids[i + 1],
                source_anchor=first_anchor if i == 0 else None,
                target_anchor=last_anchor if i == len(ids) - 2 else None,
            )

    def build(self) -> PositionedGraph:
        return PositionedGraph(nodes=self.nodes, edges=self.edges)


def _barrier_payload(barrier: Barrier, side: str, state: ExpansionState) -> NodePayload:
    node_id = barrier_node_id(barrier.id)
    return NodePayload(
        title=barrier.title,
        side=side,
        header_color=color_for_type(barrier.type),
        chips=barrier_chips(barrier),
        assurances=[a.title for a in barrier.assurances],
        expanded=state.is_expanded(ToggleKind.BARRIER, node_id),
        toggle=ToggleTag(kind=ToggleKind.BARRIER, derived_id=node_id),
    )


def _layout_threat(b: _GraphBuilder, cfg: LayoutConfig, state: ExpansionState,
                   threat: Threat, row: int) -> None:
    node_id = threat_node_id(threat.id)
    is_open = node_id in state.expanded_threats
    n = len(threat.barriers)
    y = geometry.row_y(cfg, row)

    b.add_node(node_id, "box", geometry.threat_x(cfg, is_open, n), y, NodePayload(
        title=threat.title,
        side="left",
        header_color=THREAT_COLOR,
        expanded=is_open,
        toggle=ToggleTag(kind=ToggleKind.THREAT, derived_id=node_id),
    ))

    chain = [node_id]
    if is_open:
        for i, barrier in enumerate(threat.barriers):
            bar_id = barrier_node_id(barrier.id)
            x = geometry.threat_barrier_x(cfg, n - 1 - i)
            b.add_node(bar_id, "box", x, y, _barrier_payload(barrier, "left", state))
            chain.append(bar_id)
    chain.append(TOP_ID)
    b.chain(chain, last_anchor=ANCHOR_LEFT)


def _layout_consequence(b: _GraphBuilder, cfg: LayoutConfig, state: ExpansionState,
                        consequence: Consequence, row: int) -> None:
    node_id = consequence_node_id(consequence.id)
    is_open = node_id in state.expanded_consequences
    n = len(consequence.barriers)
    y = geometry.row_y(cfg, row)

    b.add_node(node_id, "box", geometry.consequence_x(cfg, is_open), y, NodePayload(
        title=consequence.title,
        side="right",
        header_color=CONSEQUENCE_COLOR,
        expanded=is_open,
        toggle=ToggleTag(kind=ToggleKind.CONSEQUENCE, derived_id=node_id),
    ))

    chain = [TOP_ID]
    if is_open:
        for i, barrier in enumerate(consequence.barriers):
            bar_id = barrier_node_id(barrier.id)
            b.add_node(bar_id, "box", geometry.consequence_barrier_x(cfg, i), y,
                       _barrier_payload(barrier, "right", state))
            chain.append(bar_id)
    chain.append(node_id)
    b.chain(chain, first_anchor=ANCHOR_RIGHT)


def compute_graph(model: RiskModel, state: ExpansionState,
                  config: Optional[LayoutConfig] = None) -> PositionedGraph:
    """Lay out the whole bowtie for the given expansion state."""
    cfg = config or DEFAULT_LAYOUT
    b = _GraphBuilder()

    hx, hy = geometry.hazard_pos(cfg)
    b.add_node(HAZARD_ID, "hazard-sign", hx, hy, NodePayload(title=model.hazard))
    tx, ty = geometry.top_event_pos(cfg)
    b.add_node(TOP_ID, "top-event", tx, ty, NodePayload(title=model.top_event))
    b.link(HAZARD_ID, TOP_ID, target_anchor=ANCHOR_TOP)

    for row, threat in enumerate(model.threats):
        _layout_threat(b, cfg, state, threat, row)
    for row, consequence in enumerate(model.consequences):
        _layout_consequence(b, cfg, state, consequence, row)

    graph = b.build()
    logger.debug("graph: %d nodes, %d edges", len(graph.nodes), len(graph.edges))
    return graph
