"""Static risk model: hazard, top event, threats, consequences and their barriers."""

import json
import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)


class RiskModelError(ValueError):
    """Raised when a risk model cannot be built from its input."""


def _require_text(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("must not be empty")
    return value


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("id", "title", check_fields=False)
    @classmethod
    def check_id_and_title(cls, value: str) -> str:
        return _require_text(value)


class Assurance(_Frozen):
    """Supporting measure that keeps a barrier effective. Descriptive only."""

    id: str = Field(..., description="Unique identifier for the assurance")
    title: str = Field(..., description="Short description")
    type: Optional[str] = Field(None, description="Free-text category")


class Barrier(_Frozen):
    """A preventive or mitigating control on a threat or consequence pathway."""

    id: str = Field(..., description="Identifier, unique across the whole model")
    title: str = Field(..., description="Short name of the barrier")
    type: Optional[str] = Field(None, description="Category used for color and chips")
    owner: Optional[str] = Field(None, description="Responsible party")
    assurances: List[Assurance] = Field(default_factory=list, alias="assures")


class Threat(_Frozen):
    """A causal pathway leading to the top event."""

    id: str = Field(..., description="Unique identifier for the threat")
    title: str = Field(..., description="Short name of the threat")
    barriers: List[Barrier] = Field(default_factory=list, description="Ordered threat to top event")


class Consequence(_Frozen):
    """An outcome that can follow from the top event."""

    id: str = Field(..., description="Unique identifier for the consequence")
    title: str = Field(..., description="Short name of the consequence")
    barriers: List[Barrier] = Field(default_factory=list, description="Ordered top event to consequence")


class RiskModel(_Frozen):
    """The full bowtie: one hazard, one top event, threats on the left, consequences on the right."""

    hazard: str = Field(..., description="The background hazard")
    top_event: str = Field(..., alias="topEvent", description="The central undesired event")
    threats: List[Threat] = Field(default_factory=list)
    consequences: List[Consequence] = Field(default_factory=list)

    @field_validator("hazard", "top_event")
    @classmethod
    def check_headline(cls, value: str) -> str:
        return _require_text(value)

    @model_validator(mode="after")
    def check_unique_ids(self) -> "RiskModel":
        _reject_duplicates("threat", [t.id for t in self.threats])
        _reject_duplicates("consequence", [c.id for c in self.consequences])
        _reject_duplicates("barrier", [b.id for b in self.all_barriers()])
        return self

    def all_barriers(self) -> List[Barrier]:
        """Every barrier in the model, threat side first, in model order."""
        out = []
        for path in [*self.threats, *self.consequences]:
            out.extend(path.barriers)
        return out


def _reject_duplicates(kind: str, ids: List[str]) -> None:
    seen = set()
    dupes = []
    for i in ids:
        if i in seen and i not in dupes:
            dupes.append(i)
        seen.add(i)
    if dupes:
        raise ValueError(f"duplicate {kind} id(s): {', '.join(dupes)}")


def load_risk_model(source: Union[Mapping[str, Any], str, bytes]) -> RiskModel:
    """Build a validated RiskModel from a mapping or a JSON document.

    Raises:
        RiskModelError: if the JSON is malformed or the model is invalid
    """
    if isinstance(source, (str, bytes)):
        try:
            source = json.loads(source)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RiskModelError(f"Invalid JSON: {e}") from e
    if not isinstance(source, Mapping):
        raise RiskModelError(f"Expected a JSON object, got {type(source).__name__}")
    try:
        model = RiskModel.model_validate(source)
    except ValidationError as e:
        raise RiskModelError(str(e)) from e
    logger.info(
        "Loaded risk model: %d threats, %d consequences, %d barriers",
        len(model.threats), len(model.consequences), len(model.all_barriers()),
    )
    return model
