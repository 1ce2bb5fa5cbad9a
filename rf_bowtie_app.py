# rf_bowtie_app.py

import logging
import os

import streamlit as st

from bowtie_flow_component import bowtie_flow
from bowtie_layout import BowtieSession, RiskModelError, graph_to_json, load_risk_model
from bowtie_layout.sample import sample_model

logging.basicConfig(level=os.environ.get("BOWTIE_LOG_LEVEL", "INFO"))
logger = logging.getLogger("rf_bowtie_app")

st.set_page_config(page_title="Bowtie Diagram", layout="wide")
st.title("Bowtie Diagram")


def _bump_revision(_graph) -> None:
    # New snapshot -> new revision -> the frontend refits the viewport
    st.session_state.rf_revision += 1


# ---------- Session defaults ----------

if "rf_revision" not in st.session_state:
    st.session_state.rf_revision = 0

if "bowtie" not in st.session_state:
    st.session_state.bowtie = BowtieSession(sample_model(), on_fit_view=_bump_revision)

session: BowtieSession = st.session_state.bowtie

# ---------- Model / export toolbar ----------

with st.sidebar:
    st.subheader("Risk model")
    up_json = st.file_uploader("Load model JSON", type=["json"], key="load_model")
    if up_json and st.button("Use uploaded model"):
        try:
            session.reset(load_risk_model(up_json.read()))
            st.success("Loaded risk model.")
        except RiskModelError as e:
            logger.warning("Rejected uploaded model: %s", e)
            st.error(f"Could not load model: {e}")

    if st.button("Collapse all"):
        session.reset()

    st.download_button(
        "Download graph JSON",
        data=graph_to_json(session.graph).encode("utf-8"),
        file_name="bowtie_graph.json",
        mime="application/json",
        key="dl_graph",
    )

# ---------- Canvas ----------

tag = bowtie_flow(
    session.graph,
    revision=st.session_state.rf_revision,
    height=800,
    key="bowtie_rf",
)

if tag is not None:
    session.handle(tag)
    st.rerun()

st.markdown(
"""
### Canvas controls

- **Click a threat** → show/hide its preventive barriers between the threat and the Top Event
- **Click a consequence** → show/hide its mitigative barriers between the Top Event and the consequence
- **Click a barrier** → mark it expanded (reserved for barrier detail, no layout change yet)
- **Drag** nodes to reposition; the layout is restored on the next expand/collapse
- The view re-fits after every expand/collapse
"""
)
