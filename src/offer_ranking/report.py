"""Ranking as a table, one row per offer in ranked order."""

from __future__ import annotations

import pandas as pd

from src.offer_ranking.domain_model import IDENTITY_DIMENSION_ID
from src.offer_ranking.models import BoardState, Ranking

_SUMMARY_COLUMNS = [
    "rank", "offer_id", "company", "total_score", "base_score", "bonus_score",
]


def ranking_frame(ranking: Ranking, board: BoardState) -> pd.DataFrame:
    labels = {d.id: d.name or d.id for d in board.dimensions}
    scored_ids = [
        dim_id for dim_id in ranking.weights
        if any(dim_id in r.dimension_scores for r in ranking.results)
    ]

    rows = []
    for rank, result in enumerate(ranking.results, 1):
        offer = board.offer(result.offer_id)
        company = offer.values.get(IDENTITY_DIMENSION_ID) if offer else None
        row = {
            "rank": rank,
            "offer_id": result.offer_id,
            "company": company if isinstance(company, str) else "",
            "total_score": result.total_score,
            "base_score": result.base_score,
            "bonus_score": result.bonus_score,
        }
        for dim_id in scored_ids:
            row[labels.get(dim_id, dim_id)] = result.dimension_scores.get(dim_id)
        rows.append(row)

    columns = _SUMMARY_COLUMNS + [labels.get(d, d) for d in scored_ids]
    return pd.DataFrame(rows, columns=columns)
