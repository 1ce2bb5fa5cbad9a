"""Bowtie risk diagram layout engine."""

from .geometry import DEFAULT_LAYOUT, LayoutConfig
from .graph import GraphEdge, GraphNode, NodePayload, Position, PositionedGraph, ToggleTag
from .layout import (
    HAZARD_ID, TOP_ID, LayoutError,
    barrier_node_id, compute_graph, consequence_node_id, threat_node_id,
)
from .model import Assurance, Barrier, Consequence, RiskModel, RiskModelError, Threat, load_risk_model
from .reactflow import graph_to_json, parse_toggle_event, to_reactflow
from .session import BowtieSession
from .state import ExpansionState, ToggleKind

__all__ = [
    "Assurance", "Barrier", "Consequence", "RiskModel", "RiskModelError", "Threat", "load_risk_model",
    "ExpansionState", "ToggleKind",
    "LayoutConfig", "DEFAULT_LAYOUT",
    "GraphEdge", "GraphNode", "NodePayload", "Position", "PositionedGraph", "ToggleTag",
    "HAZARD_ID", "TOP_ID", "LayoutError",
    "barrier_node_id", "compute_graph", "consequence_node_id", "threat_node_id",
    "graph_to_json", "parse_toggle_event", "to_reactflow",
    "BowtieSession",
]
