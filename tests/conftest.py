"""
Shared fixtures.

All tests are pure: no Streamlit, no I/O.
"""

import pytest

from bowtie_layout import ExpansionState, RiskModel


@pytest.fixture
def model_data():
    """Raw model: threats with 3 and 0 barriers, consequences with 0, 2 and 4."""
    return {
        "hazard": "Stored flammable liquid",
        "topEvent": "Loss of containment",
        "threats": [
            {
                "id": "t1",
                "title": "Corrosion",
                "barriers": [
                    {"id": "b1", "title": "Coating", "type": "Passive hardware", "owner": "Maintenance"},
                    {"id": "b2", "title": "Inspection", "type": "Active Human"},
                    {
                        "id": "b3",
                        "title": "Wall thickness alarm",
                        "type": "Active hardware",
                        "assures": [{"id": "a1", "title": "Quarterly alarm test"}],
                    },
                ],
            },
            {"id": "t2", "title": "Overfilling", "barriers": []},
        ],
        "consequences": [
            {"id": "c1", "title": "Pool fire", "barriers": []},
            {
                "id": "c2",
                "title": "Soil contamination",
                "barriers": [
                    {"id": "b4", "title": "Bund wall", "type": "Passive hardware"},
                    {"id": "b5", "title": "Spill response", "owner": "HSE"},
                ],
            },
            {
                "id": "c3",
                "title": "Explosion",
                "barriers": [
                    {"id": "b6", "title": "Gas detection"},
                    {"id": "b7", "title": "Ignition control"},
                    {"id": "b8", "title": "Blast walls"},
                    {"id": "b9", "title": "Emergency evacuation"},
                ],
            },
        ],
    }


@pytest.fixture
def model(model_data):
    return RiskModel.model_validate(model_data)


@pytest.fixture
def state():
    return ExpansionState()
