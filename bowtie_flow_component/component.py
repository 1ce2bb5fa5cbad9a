import os
import json
from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

from bowtie_layout import PositionedGraph, ToggleTag, to_reactflow
from bowtie_layout.reactflow import parse_component_value

_IS_DEV = bool(os.environ.get("BOWTIE_DEV"))

if _IS_DEV:
    dev_url = os.environ.get("BOWTIE_DEV_URL", "http://localhost:3000")
    st.write(f"bowtie_flow_component running in DEV mode, url={dev_url}")
    _bowtie_flow_impl = components.declare_component(
        "bowtie_flow",
        url=dev_url,
    )
else:
    frontend_dir = os.path.join(os.path.dirname(__file__), "frontend", "dist")
    _bowtie_flow_impl = components.declare_component(
        "bowtie_flow",
        path=frontend_dir,
    )


def bowtie_flow(
    graph: PositionedGraph,
    *,
    revision: int = 0,
    height: int = 800,
    fit_padding: float = 0.2,
    key: str = "bowtie_rf",
) -> Optional[ToggleTag]:
    """Render the ReactFlow bowtie and return the toggle the user just clicked, if any.

    ``revision`` changes whenever the graph is recomputed; the frontend fits the
    viewport when it sees a new revision and tags its events with it, so a
    click is only reported once.
    """
    rf = to_reactflow(graph)

    result = _bowtie_flow_impl(
        nodes=json.dumps(rf["nodes"]),
        edges=json.dumps(rf["edges"]),
        revision=revision,
        fitPadding=fit_padding,
        height=height,
        key=key,
        default=None,
    )

    return parse_component_value(result, revision)
