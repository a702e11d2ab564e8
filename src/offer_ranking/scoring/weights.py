"""Rank-derived weights — earlier dimensions count for more.

For n eligible dimensions the one at position i (0-based) gets
(n - i) / S with S = n(n+1)/2, so weights fall linearly and sum to 1.
"""

from __future__ import annotations

from src.offer_ranking.domain_model import is_scoring_eligible
from src.offer_ranking.models import Dimension


def assign_weights(dimensions: list[Dimension]) -> dict[str, float]:
    ranked: list[str] = []
    for dim in dimensions:
        if is_scoring_eligible(dim) and dim.id not in ranked:
            ranked.append(dim.id)

    n = len(ranked)
    if n == 0:
        return {}
    total = n * (n + 1) / 2
    return {dim_id: (n - i) / total for i, dim_id in enumerate(ranked)}
