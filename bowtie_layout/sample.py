"""Demonstration bowtie: loss of control of a commercial vehicle."""

from .model import RiskModel, load_risk_model

SAMPLE_DATA = {
    "hazard": "Driving a commercial vehicle on a highway",
    "topEvent": "Loss of control over the vehicle at 70 mph",
    "threats": [
        {
            "id": "t_intox",
            "title": "Intoxicated driving",
            "barriers": [
                {
                    "id": "b_selfreport",
                    "title": "Driver reports unwell/impaired; supervisor assigns replacement",
                    "type": "Active Human",
                    "owner": "Supervisor",
                    "assures": [
                        {"id": "a_policy", "title": "Company policy & training (FIT for duty)", "type": "Admin"},
                    ],
                },
                {
                    "id": "b_interlock",
                    "title": "Ignition interlock prevents starting the engine",
                    "type": "Active hardware",
                    "owner": "Engineering Manager",
                },
                {
                    "id": "b_detect",
                    "title": "Dispatcher/supervisor detects impairment and assigns replacement",
                    "type": "Active Human",
                    "owner": "Operations Manager",
                },
            ],
        },
        {
            "id": "t_distract",
            "title": "Distractive driving",
            "barriers": [
                {
                    "id": "b_voice",
                    "title": "Voice-activated dispatch reduces manual input while driving",
                    "type": "Active hardware",
                    "owner": "Engineering Manager",
                },
                {
                    "id": "b_ldw",
                    "title": "Lane departure warning alerts; driver corrects and prevents drift",
                    "type": "Active hardware + Human",
                    "owner": "Supervisor",
                },
            ],
        },
        {
            "id": "t_slippery",
            "title": "Driving on slippery road",
            "barriers": [
                {
                    "id": "b_weather",
                    "title": "Driver checks weather and adjusts schedule to avoid rain",
                    "type": "Active Human",
                    "owner": "Supervisor",
                },
                {
                    "id": "b_abs",
                    "title": "Anti-lock braking system (ABS) maintains steering control",
                    "type": "Active hardware",
                    "owner": "Engineering Manager",
                },
            ],
        },
        {
            "id": "t_visibility",
            "title": "Driving with poor visibility",
            "barriers": [
                {
                    "id": "b_weather2",
                    "title": "Driver checks weather and adjusts schedule to avoid fog",
                    "type": "Active Human",
                    "owner": "Supervisor",
                },
                {"id": "b_def", "title": "Defensive driving", "type": "Active Human", "owner": "HSE Manager"},
            ],
        },
    ],
    "consequences": [
        {
            "id": "c_fixed",
            "title": "Crash into a fixed object",
            "barriers": [
                {
                    "id": "b_fcw",
                    "title": "Forward collision warning & defensive driving",
                    "type": "Active hardware + Human",
                    "owner": "Supervisor",
                },
                {"id": "b_crumple", "title": "Crumple zone", "type": "Passive hardware", "owner": "EN Engineer"},
            ],
        },
        {
            "id": "c_internal",
            "title": "Driver impacts internals of the vehicle",
            "barriers": [
                {
                    "id": "b_seatbelt",
                    "title": "Seatbelt prevents driver from colliding with internals",
                    "type": "Passive hardware",
                    "owner": "Engineering Manager",
                },
                {"id": "b_airbag", "title": "Airbag", "type": "Passive hardware", "owner": "Engineering Manager"},
            ],
        },
        {
            "id": "c_rollover",
            "title": "Vehicle roll-over",
            "barriers": [
                {
                    "id": "b_rollprot",
                    "title": "Rollover protection (reinforced structure)",
                    "type": "Passive hardware",
                    "owner": "Engineering Manager",
                },
            ],
        },
    ],
}


def sample_model() -> RiskModel:
    return load_risk_model(SAMPLE_DATA)
