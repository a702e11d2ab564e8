"""Composite ranker — weighted dimension scores plus weighted bonuses."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from src.offer_ranking.config import settings
from src.offer_ranking.domain_model import is_scoring_eligible
from src.offer_ranking.models import Dimension, Offer, ScoringResult
from src.offer_ranking.scoring.dimension import score_dimension

logger = logging.getLogger(__name__)


def _bonus_score(
    offer: Offer,
    dimensions: Mapping[str, Dimension],
    weights: Mapping[str, float],
) -> float:
    total = 0.0
    for bonus in offer.extra_bonuses:
        dim = dimensions.get(bonus.dimension_id)
        if dim is None:
            continue
        if dim.is_penalty:
            logger.warning(
                "Ignoring %.1f bonus points on penalty dimension %s (offer %s)",
                bonus.points, dim.id, offer.id,
            )
            continue
        total += weights.get(dim.id, 0.0) * bonus.points
    return total


def score_offer(
    offer: Offer,
    dimensions: Sequence[Dimension],
    weights: Mapping[str, float],
    offers: Sequence[Offer],
) -> ScoringResult:
    dimension_scores: dict[str, float] = {}
    base = 0.0
    for dim in dimensions:
        # First occurrence of a repeated id wins, as in assign_weights.
        if not is_scoring_eligible(dim) or dim.id in dimension_scores:
            continue
        score = score_dimension(dim, offer.values.get(dim.id), offers)
        dimension_scores[dim.id] = score
        base += weights.get(dim.id, 0.0) * score

    first_seen: dict[str, Dimension] = {}
    for dim in dimensions:
        first_seen.setdefault(dim.id, dim)
    bonus = _bonus_score(offer, first_seen, weights)
    total = base + bonus
    if settings.clamp_total:
        total = min(max(total, 0.0), 100.0)

    logger.debug(
        "Offer %s: base=%.2f bonus=%.2f -> %.2f", offer.id, base, bonus, total,
    )
    return ScoringResult(
        offer_id=offer.id,
        base_score=base,
        bonus_score=bonus,
        total_score=total,
        dimension_scores=dimension_scores,
    )


def score_offers(
    offers: Sequence[Offer],
    dimensions: Sequence[Dimension],
    weights: Mapping[str, float],
) -> list[ScoringResult]:
    """Score every offer and rank them, best first.

    Ties keep their input order.
    """
    results = [score_offer(o, dimensions, weights, offers) for o in offers]
    results.sort(key=lambda r: r.total_score, reverse=True)
    return results
