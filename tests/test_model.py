"""Risk model construction and validation."""

import json

import pytest
from pydantic import ValidationError

from bowtie_layout import Barrier, RiskModel, RiskModelError, Threat, load_risk_model
from bowtie_layout.sample import SAMPLE_DATA, sample_model


class TestRiskModel:
    def test_aliases_from_json_names(self, model):
        assert model.top_event == "Loss of containment"
        assert model.threats[0].barriers[2].assurances[0].title == "Quarterly alarm test"

    def test_python_names_accepted(self):
        m = RiskModel(hazard="H", top_event="T", threats=[Threat(id="t", title="Threat")])
        assert m.top_event == "T"

    def test_barrier_order_is_preserved(self, model):
        assert [b.id for b in model.threats[0].barriers] == ["b1", "b2", "b3"]

    def test_all_barriers_threat_side_first(self, model):
        assert [b.id for b in model.all_barriers()] == [f"b{i}" for i in range(1, 10)]

    def test_model_is_frozen(self, model):
        with pytest.raises(ValidationError):
            model.hazard = "Other"

    def test_sample_model_is_valid(self):
        m = sample_model()
        assert len(m.threats) == 4
        assert len(m.consequences) == 3


class TestModelValidation:
    """Bad models fail at construction, never during layout."""

    def test_duplicate_barrier_across_sides(self, model_data):
        model_data["consequences"][0]["barriers"] = [{"id": "b1", "title": "Clash"}]
        with pytest.raises(ValidationError) as exc_info:
            RiskModel.model_validate(model_data)
        assert "duplicate barrier id(s): b1" in str(exc_info.value)

    def test_duplicate_threat_id(self, model_data):
        model_data["threats"][1]["id"] = "t1"
        with pytest.raises(ValidationError, match="duplicate threat"):
            RiskModel.model_validate(model_data)

    def test_duplicate_consequence_id(self, model_data):
        model_data["consequences"][1]["id"] = "c1"
        with pytest.raises(ValidationError, match="duplicate consequence"):
            RiskModel.model_validate(model_data)

    def test_threat_and_consequence_may_share_id(self, model_data):
        model_data["consequences"][0]["id"] = "t1"
        RiskModel.model_validate(model_data)

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_barrier_title(self, title):
        with pytest.raises(ValidationError):
            Barrier(id="b", title=title)

    def test_blank_top_event(self, model_data):
        model_data["topEvent"] = " "
        with pytest.raises(ValidationError):
            RiskModel.model_validate(model_data)


class TestLoadRiskModel:
    def test_from_mapping(self, model_data):
        assert len(load_risk_model(model_data).threats) == 2

    def test_from_json_text_and_bytes(self):
        text = json.dumps(SAMPLE_DATA)
        assert load_risk_model(text) == load_risk_model(text.encode("utf-8"))

    def test_bad_json(self):
        with pytest.raises(RiskModelError, match="Invalid JSON"):
            load_risk_model("{not json")

    def test_non_utf8_bytes(self):
        with pytest.raises(RiskModelError, match="Invalid JSON"):
            load_risk_model(b"\x80{}")

    def test_not_an_object(self):
        with pytest.raises(RiskModelError, match="list"):
            load_risk_model("[]")

    def test_invalid_model_wrapped(self, model_data):
        del model_data["hazard"]
        with pytest.raises(RiskModelError) as exc_info:
            load_risk_model(model_data)
        assert isinstance(exc_info.value.__cause__, ValidationError)
