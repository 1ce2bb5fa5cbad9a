"""Conversion between the positioned graph and the ReactFlow frontend."""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .graph import GraphEdge, GraphNode, PositionedGraph, ToggleTag

logger = logging.getLogger(__name__)

# Engine node kind -> ReactFlow nodeTypes key registered by the frontend
NODE_TYPES = {
    "hazard-sign": "sign",
    "top-event": "top",
    "box": "box",
}


def node_to_dict(node: GraphNode) -> Dict[str, Any]:
    data = node.payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if node.payload.toggle is not None:
        # Flattened for the frontend click handler
        data["kind"] = node.payload.toggle.kind.value
    return {
        "id": node.id,
        "type": NODE_TYPES[node.kind],
        "position": {"x": node.position.x, "y": node.position.y},
        "data": data,
    }


def edge_to_dict(edge: GraphEdge) -> Dict[str, Any]:
    d = {"id": edge.id, "source": edge.source_node_id, "target": edge.target_node_id}
    if edge.source_anchor:
        d["sourceHandle"] = edge.source_anchor
    if edge.target_anchor:
        d["targetHandle"] = edge.target_anchor
    return d


def to_reactflow(graph: PositionedGraph) -> Dict[str, List[Dict[str, Any]]]:
    return {"nodes": [node_to_dict(n) for n in graph.nodes],
            "edges": [edge_to_dict(e) for e in graph.edges]}


def graph_to_json(graph: PositionedGraph, indent: Optional[int] = 2) -> str:
    return json.dumps(graph.to_jsonable(), indent=indent)


def parse_toggle_event(raw: Any) -> Optional[ToggleTag]:
    """Turn whatever the frontend sent back into a ToggleTag.

    Accepts ``None``, a dict (``{"kind": ..., "derivedId": ...}``, optionally
    wrapped as ``{"toggle": {...}}``) or the same as a JSON string. Anything
    else is logged and ignored.
    """
    if raw is None:
        return None
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring non-JSON frontend event: %r", raw)
            return None
    if isinstance(raw, dict) and isinstance(raw.get("toggle"), dict):
        raw = raw["toggle"]
    if not isinstance(raw, dict):
        logger.warning("Ignoring frontend event of type %s", type(raw).__name__)
        return None
    try:
        return ToggleTag.model_validate(raw)
    except ValidationError as e:
        logger.warning("Ignoring malformed toggle event %r: %s", raw, e)
        return None


def parse_component_value(value: Any, revision: int) -> Optional[ToggleTag]:
    """Read the custom component's return value for the snapshot at ``revision``.

    The component keeps returning its last value on every rerun, so only an
    event tagged with the current revision is a fresh click.
    """
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Unreadable component value: %r", value)
            return None
    if not isinstance(value, dict) or value.get("revision") != revision:
        return None
    return parse_toggle_event(value)
