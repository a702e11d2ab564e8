"""Raw snapshot values -> tagged value variants.

Offers arrive with ``values`` filled in incrementally by the user, so any
entry may be missing, half-typed, or the wrong shape.  ``to_value`` decides
which variant a dimension expects and builds it; all default-value policy
lives in the variant models themselves.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.offer_ranking.models import (
    Dimension,
    DimensionValue,
    LocationValue,
    NumericValue,
    SalaryValue,
    SelectValue,
    WorkloadValue,
    as_number,
    as_text,
)

UNSURE = "unsure"

_RECORD_SHAPES: dict[str, type[SalaryValue | WorkloadValue | LocationValue]] = {
    "salary": SalaryValue,
    "workload": WorkloadValue,
    "location": LocationValue,
}

_NUMERIC_IDS = frozenset({"annualLeave", "turnover", "salaryIncrease"})
_OPTION_KINDS = frozenset({"select", "location"})

_VARIANTS: TypeAdapter[DimensionValue] = TypeAdapter(DimensionValue)


def _tagged(raw: Any) -> Any:
    """Rebuild a variant from its dumped form, e.g. after a snapshot reload."""
    if not isinstance(raw, Mapping) or "tag" not in raw:
        return raw
    try:
        return _VARIANTS.validate_python(raw)
    except ValidationError:
        return raw


def _record(shape: type[SalaryValue | WorkloadValue | LocationValue], raw: Any):
    if isinstance(raw, shape):
        return raw
    if isinstance(raw, Mapping):
        return shape.model_validate({k: v for k, v in raw.items() if k != "tag"})
    return shape()


def _numeric(raw: Any, *, allow_unsure: bool = False) -> NumericValue:
    if isinstance(raw, NumericValue):
        return raw
    if allow_unsure and raw == UNSURE:
        return NumericValue(unsure=True)
    return NumericValue(amount=as_number(raw))


def to_value(dimension: Dimension, raw: Any) -> DimensionValue:
    """Build the value variant *dimension* scores against."""
    raw = _tagged(raw)
    shape = _RECORD_SHAPES.get(dimension.id)
    if shape is not None:
        return _record(shape, raw)

    if dimension.id in _NUMERIC_IDS:
        return _numeric(raw, allow_unsure=dimension.id == "salaryIncrease")

    if dimension.kind in _OPTION_KINDS:
        if isinstance(raw, (SelectValue, LocationValue)):
            return raw
        if isinstance(raw, Mapping):
            return _record(LocationValue, raw)
        return SelectValue(choice=as_text(raw))

    return _numeric(raw)


def yearly_salary(raw: Any) -> float:
    """monthly x months + bonus, with absent parts counted as 0."""
    return _record(SalaryValue, raw).yearly


def weekly_hours(raw: Any) -> float:
    return _record(WorkloadValue, raw).weekly_hours
