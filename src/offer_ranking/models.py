"""Pydantic v2 data models — the data contracts flowing through the system."""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field, field_validator


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------

def as_number(raw: Any) -> float:
    """Lenient numeric coercion: anything unusable becomes 0."""
    if isinstance(raw, bool):
        return float(raw)
    try:
        number = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def as_text(raw: Any) -> str | None:
    if raw is None or isinstance(raw, str):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    if isinstance(raw, (int, float)):
        return str(raw)
    return None


Number = Annotated[float, BeforeValidator(as_number)]
Text = Annotated[Union[str, None], BeforeValidator(as_text)]


# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

DimensionKind = Literal[
    "text",
    "numeric",
    "select",
    "slider",
    "salary",
    "workload",
    "location",
]


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------

class DimensionOption(BaseModel):
    model_config = {"frozen": True}

    value: str
    label: str = ""
    score: float = 0.0


class Dimension(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str = ""
    kind: DimensionKind = "numeric"
    description: str | None = None
    is_default: bool = False
    active: bool = True
    is_penalty: bool = False
    options: list[DimensionOption] = Field(default_factory=list)

    def option_for(self, value: str | None) -> DimensionOption | None:
        if value is None:
            return None
        return next((o for o in self.options if o.value == value), None)


# ---------------------------------------------------------------------------
# Value variants — one shape per dimension kind
# ---------------------------------------------------------------------------

class NumericValue(BaseModel):
    model_config = {"frozen": True}

    tag: Literal["numeric"] = "numeric"
    amount: Number = 0.0
    unsure: bool = False


class SalaryValue(BaseModel):
    model_config = {"frozen": True}

    tag: Literal["salary"] = "salary"
    monthly: Number = 0.0
    months: Number = 0.0
    bonus: Number = 0.0

    @property
    def yearly(self) -> float:
        return self.monthly * self.months + self.bonus


class WorkloadValue(BaseModel):
    model_config = {"frozen": True}

    tag: Literal["workload"] = "workload"
    hours_per_day: Number = Field(
        default=0.0,
        validation_alias=AliasChoices("hours_per_day", "hoursPerDay"),
    )
    days_per_week: Number = Field(
        default=0.0,
        validation_alias=AliasChoices("days_per_week", "daysPerWeek"),
    )

    @property
    def weekly_hours(self) -> float:
        return self.hours_per_day * self.days_per_week


class LocationValue(BaseModel):
    model_config = {"frozen": True}

    tag: Literal["location"] = "location"
    city: Text = None
    preference: Text = None


class SelectValue(BaseModel):
    model_config = {"frozen": True}

    tag: Literal["select"] = "select"
    choice: Text = None


DimensionValue = Annotated[
    Union[NumericValue, SalaryValue, WorkloadValue, LocationValue, SelectValue],
    Field(discriminator="tag"),
]


# ---------------------------------------------------------------------------
# Offers
# ---------------------------------------------------------------------------

class ExtraBonus(BaseModel):
    model_config = {"frozen": True}

    dimension_id: str
    points: Number = 0.0

    @field_validator("points")
    @classmethod
    def _clamp_points(cls, value: float) -> float:
        return min(max(value, 0.0), 100.0)


class Offer(BaseModel):
    model_config = {"frozen": True}

    id: str = Field(default_factory=lambda: uuid4().hex)
    values: dict[str, Any] = Field(default_factory=dict)
    extra_bonuses: list[ExtraBonus] = Field(default_factory=list)

    def bonus_for(self, dimension_id: str) -> ExtraBonus | None:
        return next(
            (b for b in self.extra_bonuses if b.dimension_id == dimension_id),
            None,
        )


class BoardState(BaseModel):
    """Snapshot of everything the user has configured: dimensions in
    priority order plus the offers being compared."""

    model_config = {"frozen": True}

    dimensions: list[Dimension] = Field(default_factory=list)
    offers: list[Offer] = Field(default_factory=list)

    def dimension(self, dimension_id: str) -> Dimension | None:
        return next((d for d in self.dimensions if d.id == dimension_id), None)

    def offer(self, offer_id: str) -> Offer | None:
        return next((o for o in self.offers if o.id == offer_id), None)


# ---------------------------------------------------------------------------
# Scoring / output types
# ---------------------------------------------------------------------------

class ScoringResult(BaseModel):
    model_config = {"frozen": True}

    offer_id: str
    base_score: float = 0.0
    bonus_score: float = 0.0
    total_score: float = 0.0
    dimension_scores: dict[str, float] = Field(default_factory=dict)


class Ranking(BaseModel):
    model_config = {"frozen": True}

    weights: dict[str, float] = Field(default_factory=dict)
    results: list[ScoringResult] = Field(default_factory=list)

    def for_offer(self, offer_id: str) -> ScoringResult | None:
        return next((r for r in self.results if r.offer_id == offer_id), None)
