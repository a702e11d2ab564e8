"""Per-dimension scores in [-100, 100].

Built-in dimensions with their own formulas are matched by id first; every
other dimension (custom ones included) falls back to the rule for its kind.
Salary, annual leave and generic numeric dimensions are normalized against
the best offer on the board, so those scores are relative to the current
comparison set.

Every score is clamped to [0, 100], or to [-100, 0] on a penalty dimension.
A non-finite result (an overflowing salary record, say) counts as 0.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from typing import Any

from src.offer_ranking.config import settings
from src.offer_ranking.domain_model import IDENTITY_DIMENSION_ID
from src.offer_ranking.models import (
    Dimension,
    DimensionValue,
    LocationValue,
    NumericValue,
    Offer,
    SalaryValue,
    WorkloadValue,
)
from src.offer_ranking.values import to_value

logger = logging.getLogger(__name__)

ScoreRule = Callable[[Dimension, Any, Sequence[Offer]], float]


def _peer_values(dimension: Dimension, offers: Sequence[Offer]) -> list[DimensionValue]:
    return [to_value(dimension, o.values.get(dimension.id)) for o in offers]


def _relative(amount: float, peers: list[float]) -> float:
    top = max([*peers, settings.rules.normalization_floor])
    return amount / top * 100.0


# ---------------------------------------------------------------------------
# Built-in dimensions (by id)
# ---------------------------------------------------------------------------

def _score_salary(
    dimension: Dimension, value: SalaryValue, offers: Sequence[Offer],
) -> float:
    peers = [v.yearly for v in _peer_values(dimension, offers)]
    return _relative(value.yearly, peers)


def _score_location(
    dimension: Dimension, value: LocationValue, offers: Sequence[Offer],
) -> float:
    preference = value.preference or settings.rules.location_default_preference
    option = dimension.option_for(preference)
    return option.score if option else settings.rules.location_fallback_score


def _score_workload(
    dimension: Dimension, value: WorkloadValue, offers: Sequence[Offer],
) -> float:
    rule = settings.workload
    return max(0.0, 100.0 - (value.weekly_hours - rule.baseline_hours) * rule.hour_penalty)


def _score_turnover(
    dimension: Dimension, value: NumericValue, offers: Sequence[Offer],
) -> float:
    return max(0.0, 100.0 - value.amount * settings.rules.turnover_penalty)


def _score_salary_increase(
    dimension: Dimension, value: NumericValue, offers: Sequence[Offer],
) -> float:
    if value.unsure:
        return settings.rules.unsure_score
    return min(100.0, value.amount * 100.0 / settings.rules.salary_increase_full_pct)


# ---------------------------------------------------------------------------
# Generic kinds
# ---------------------------------------------------------------------------

def _score_relative_amount(
    dimension: Dimension, value: NumericValue, offers: Sequence[Offer],
) -> float:
    peers = [v.amount for v in _peer_values(dimension, offers)]
    return _relative(value.amount, peers)


def _score_option(
    dimension: Dimension, value: Any, offers: Sequence[Offer],
) -> float:
    choice = value.preference if value.tag == "location" else value.choice
    option = dimension.option_for(choice)
    return option.score if option else settings.rules.option_fallback_score


def _score_slider(
    dimension: Dimension, value: NumericValue, offers: Sequence[Offer],
) -> float:
    return value.amount


_BY_ID: dict[str, ScoreRule] = {
    "salary": _score_salary,
    "location": _score_location,
    "workload": _score_workload,
    "annualLeave": _score_relative_amount,
    "turnover": _score_turnover,
    "salaryIncrease": _score_salary_increase,
}

_BY_KIND: dict[str, ScoreRule] = {
    "select": _score_option,
    "location": _score_option,
    "slider": _score_slider,
    "numeric": _score_relative_amount,
}


def clamp_score(dimension: Dimension, score: float) -> float:
    if not math.isfinite(score):
        score = 0.0
    if dimension.is_penalty:
        return min(max(score, -100.0), 0.0)
    return min(max(score, 0.0), 100.0)


def score_dimension(
    dimension: Dimension, raw: Any, offers: Sequence[Offer] = (),
) -> float:
    """Score one raw value on *dimension* in the context of *offers*."""
    if dimension.id == IDENTITY_DIMENSION_ID:
        return 0.0

    rule = _BY_ID.get(dimension.id) or _BY_KIND.get(dimension.kind)
    if rule is None:
        return 0.0

    value = to_value(dimension, raw)
    unclamped = rule(dimension, value, offers)
    result = clamp_score(dimension, unclamped)
    logger.debug(
        "Dimension %s (%s): %s -> %.2f (clamped %.2f)",
        dimension.id, dimension.kind, value.tag, unclamped, result,
    )
    return result
