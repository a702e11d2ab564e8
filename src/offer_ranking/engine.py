"""Top-level orchestrator — board snapshot in, ranking out.

Pipeline:
  1. Load / receive a board (dimensions in priority order + offers)
  2. Keep the active dimensions, in order
  3. Derive rank weights from that order
  4. Score every offer on every eligible dimension, add weighted bonuses
  5. Sort best first and return the weights alongside the results

Nothing is cached between runs; callers re-run on every edit.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from src.offer_ranking.models import BoardState, Dimension, Ranking
from src.offer_ranking.scoring.composite import score_offers
from src.offer_ranking.scoring.weights import assign_weights

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"


def load_sample_board() -> BoardState:
    path = DATA_DIR / "sample_board.json"
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return load_board_from_json(raw)


def load_board_from_json(data: Mapping[str, Any]) -> BoardState:
    return BoardState.model_validate(data)


def active_dimensions(board: BoardState) -> list[Dimension]:
    return [d for d in board.dimensions if d.active]


def run(board: BoardState) -> Ranking:
    dims = active_dimensions(board)
    weights = assign_weights(dims)
    results = score_offers(board.offers, dims, weights)

    leader = results[0] if results else None
    logger.info(
        "Ranked %d offers on %d weighted dimensions (leader: %s at %.2f)",
        len(results), len(weights),
        leader.offer_id if leader else "none",
        leader.total_score if leader else 0.0,
    )
    return Ranking(weights=weights, results=results)
