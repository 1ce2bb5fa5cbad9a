"""ReactFlow conversion and frontend event parsing."""

import json

import pytest

from bowtie_layout import ToggleKind, compute_graph, graph_to_json, parse_toggle_event, to_reactflow
from bowtie_layout.reactflow import parse_component_value


class TestToReactflow:
    def test_node_types_and_handles(self, model, state):
        state.toggle("threat", "threat-t1")
        rf = to_reactflow(compute_graph(model, state))
        types = {n["id"]: n["type"] for n in rf["nodes"]}
        assert types["hazard"] == "sign"
        assert types["top"] == "top"
        assert types["bar-b1"] == "box"

        edges = {e["id"]: e for e in rf["edges"]}
        assert edges["hazard->top"]["targetHandle"] == "top"
        assert edges["bar-b3->top"]["targetHandle"] == "left"
        assert edges["top->cons-c1"]["sourceHandle"] == "right"
        assert "sourceHandle" not in edges["threat-t1->bar-b1"]
        assert "targetHandle" not in edges["threat-t1->bar-b1"]

    def test_box_data_carries_event_tag(self, model, state):
        rf = to_reactflow(compute_graph(model, state))
        threat = next(n for n in rf["nodes"] if n["id"] == "threat-t1")
        assert threat["position"] == {"x": 0, "y": 0}
        assert threat["data"]["kind"] == "threat"
        assert threat["data"]["toggle"] == {"kind": "threat", "derivedId": "threat-t1"}
        assert threat["data"]["headerColor"] == "#2563eb"
        assert threat["data"]["side"] == "left"

    def test_sign_has_no_toggle(self, model, state):
        rf = to_reactflow(compute_graph(model, state))
        hazard = next(n for n in rf["nodes"] if n["id"] == "hazard")
        assert "toggle" not in hazard["data"]
        assert "kind" not in hazard["data"]

    def test_graph_json_uses_contract_names(self, model, state):
        blob = json.loads(graph_to_json(compute_graph(model, state)))
        edge = next(e for e in blob["edges"] if e["id"] == "threat-t1->top")
        assert edge["sourceNodeId"] == "threat-t1"
        assert edge["targetNodeId"] == "top"
        assert edge["targetAnchor"] == "left"
        assert blob["nodes"][0]["kind"] == "hazard-sign"


class TestParseToggleEvent:
    @pytest.mark.parametrize("raw", [
        {"kind": "consequence", "derivedId": "cons-c1"},
        {"toggle": {"kind": "consequence", "derivedId": "cons-c1"}, "revision": 3},
        '{"kind": "consequence", "derivedId": "cons-c1"}',
    ])
    def test_accepted_shapes(self, raw):
        tag = parse_toggle_event(raw)
        assert tag.kind is ToggleKind.CONSEQUENCE
        assert tag.derived_id == "cons-c1"

    @pytest.mark.parametrize("raw", [
        None,
        "not json",
        [1, 2],
        {"kind": "hazard", "derivedId": "hazard"},
        {"kind": "threat"},
    ])
    def test_ignored(self, raw):
        assert parse_toggle_event(raw) is None


class TestParseComponentValue:
    """Only clicks tagged with the snapshot currently on screen count."""

    def test_current_revision_accepted(self):
        value = {"toggle": {"kind": "threat", "derivedId": "threat-t1"}, "revision": 4}
        assert parse_component_value(value, 4).derived_id == "threat-t1"
        assert parse_component_value(json.dumps(value), 4).kind is ToggleKind.THREAT

    @pytest.mark.parametrize("value", [
        None,
        "{broken",
        {"toggle": {"kind": "threat", "derivedId": "threat-t1"}, "revision": 3},
        {"toggle": {"kind": "threat", "derivedId": "threat-t1"}},
        {"kind": "threat", "derivedId": "threat-t1"},
    ])
    def test_stale_or_untagged_ignored(self, value):
        assert parse_component_value(value, 4) is None
