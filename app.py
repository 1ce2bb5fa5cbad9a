import html
import logging
import os

import streamlit as st

# React Flow wrapper
from streamlit_flow import streamlit_flow
from streamlit_flow.elements import StreamlitFlowNode, StreamlitFlowEdge
from streamlit_flow.state import StreamlitFlowState

from bowtie_layout import (
    BowtieSession, GraphEdge, GraphNode, PositionedGraph, RiskModelError,
    graph_to_json, load_risk_model,
)
from bowtie_layout.sample import sample_model

logging.basicConfig(level=os.environ.get("BOWTIE_LOG_LEVEL", "INFO"))
logger = logging.getLogger("app")

# ======================== Page setup ========================
st.set_page_config(page_title="Bow-Tie Diagram", layout="wide")
st.title("Bow-Tie Risk (Threats → Top Event → Consequences)")

# ======================== Session state bootstrap ========================
if "bowtie" not in st.session_state:
    st.session_state.bowtie = BowtieSession(sample_model())
if "flow_state" not in st.session_state:
    st.session_state.flow_state = None

session: BowtieSession = st.session_state.bowtie

# ======================== Node/Edge factories ========================
ICONS = {"threat": "⚠️", "consequence": "❗", "barrier": "🛡️"}


def box_content(node: GraphNode) -> str:
    p = node.payload
    kind = p.toggle.kind.value if p.toggle else ""
    lines = [f"{ICONS.get(kind, '')} <strong>{html.escape(p.title)}</strong>"]
    if p.chips:
        chips = " ".join(
            f"<span style='font-size:10px;padding:2px 6px;border-radius:6px;"
            f"background:#f3f4f6;border:1px solid #e5e7eb;'>{html.escape(c)}</span>"
            for c in p.chips
        )
        lines.append(f"<div style='margin-top:6px;'>{chips}</div>")
    return "".join(lines)


def make_flow_node(node: GraphNode) -> StreamlitFlowNode:
    x, y = node.position.x, node.position.y
    p = node.payload

    if node.kind == "hazard-sign":
        return StreamlitFlowNode(
            id=node.id,
            pos=(x, y),
            data={"content": f"**HAZARD**\n\n{p.title}"},
            node_type="input",
            source_position="bottom",
            style={"width": 260, "background": "#fffbeb", "border": "1px solid #111827", "borderRadius": 10},
        )
    if node.kind == "top-event":
        return StreamlitFlowNode(
            id=node.id,
            pos=(x, y),
            data={"content": f"🎯 **{p.title}**"},
            node_type="default",
            source_position="right",
            target_position="left",
            style={"width": 180, "height": 180, "borderRadius": 9999, "background": "#fb923c",
                   "display": "flex", "alignItems": "center", "justifyContent": "center"},
        )

    kind = p.toggle.kind.value if p.toggle else "barrier"
    node_type = {"threat": "input", "consequence": "output"}.get(kind, "default")
    return StreamlitFlowNode(
        id=node.id,
        pos=(x, y),
        data={"content": box_content(node)},
        node_type=node_type,
        source_position="right",
        target_position="left",
        style={
            "width": 240,
            "borderRadius": 12,
            "background": "#ffffff",
            "border": f"2px solid {p.header_color or '#475569'}",
            "borderTop": f"8px solid {p.header_color or '#475569'}",
        },
    )


def make_flow_edge(edge: GraphEdge) -> StreamlitFlowEdge:
    # streamlit_flow nodes expose one handle per side; the node's source/target
    # positions stand in for the top event's named anchors
    return StreamlitFlowEdge(
        id=edge.id,
        source=edge.source_node_id,
        target=edge.target_node_id,
        marker_end={"type": "arrowclosed"},
    )


def to_flow_state(graph: PositionedGraph) -> StreamlitFlowState:
    return StreamlitFlowState([make_flow_node(n) for n in graph.nodes],
                              [make_flow_edge(e) for e in graph.edges])


if st.session_state.flow_state is None:
    st.session_state.flow_state = to_flow_state(session.graph)

# Wider canvas column; small side column
middle, right = st.columns([3.6, 0.9])

# ======================== RIGHT: model / export ========================
with right:
    st.subheader("Risk model")
    up_json = st.file_uploader("Load model JSON", type=["json"], key="load_json")
    if up_json and st.button("Use uploaded model", key="use_model"):
        try:
            session.reset(load_risk_model(up_json.read()))
            st.session_state.flow_state = to_flow_state(session.graph)
            st.success("Loaded risk model.")
        except RiskModelError as e:
            logger.warning("Rejected uploaded model: %s", e)
            st.error(f"Could not load file: {e}")

    if st.button("Collapse all", key="collapse_all"):
        st.session_state.flow_state = to_flow_state(session.reset())

    st.divider()
    st.download_button(
        "Download graph JSON",
        data=graph_to_json(session.graph).encode("utf-8"),
        file_name="bowtie_graph.json",
        mime="application/json",
        key="dl_json",
    )

# ======================== MIDDLE: canvas (render LAST) ========================
with middle:
    st.subheader("Canvas")
    st.caption("Click a threat or consequence to show its barriers. Drag to reposition, scroll to zoom.")
    shown: StreamlitFlowState = st.session_state.flow_state
    returned = streamlit_flow(
        key="bowtie",
        state=shown,
        height=900,
        fit_view=True,
        get_node_on_click=True,
    )

    # Only a click newer than the snapshot we rendered counts
    clicked = getattr(returned, "selected_id", None)
    is_new = getattr(returned, "timestamp", 0) > getattr(shown, "timestamp", 0)
    node = session.graph.node(clicked) if clicked and is_new else None

    if node is not None and node.payload.toggle is not None:
        # Drag offsets are dropped: the recomputed snapshot replaces the canvas
        st.session_state.flow_state = to_flow_state(session.handle(node.payload.toggle))
        st.rerun()
