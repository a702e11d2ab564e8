"""Board edits as pure functions.

Every operation takes a ``BoardState`` and returns a new one; the input is
never touched.  Ids that match nothing leave the board unchanged, except
where an edit would break an invariant of the data model, which raises
``ValueError``.
"""

from __future__ import annotations

import logging
from typing import Any

from src.offer_ranking.config import settings
from src.offer_ranking.domain_model import auto_score_options, initial_dimensions
from src.offer_ranking.models import (
    BoardState,
    Dimension,
    DimensionOption,
    ExtraBonus,
    Offer,
)

logger = logging.getLogger(__name__)


def initial_board() -> BoardState:
    return BoardState(dimensions=initial_dimensions(), offers=[])


def clear_all(board: BoardState) -> BoardState:
    return initial_board()


# ---------------------------------------------------------------------------
# Offers
# ---------------------------------------------------------------------------

def _replace_offer(board: BoardState, offer_id: str, **updates: Any) -> BoardState:
    if board.offer(offer_id) is None:
        return board
    offers = [
        o.model_copy(update=updates) if o.id == offer_id else o
        for o in board.offers
    ]
    return board.model_copy(update={"offers": offers})


def add_offer(board: BoardState, offer: Offer | None = None) -> BoardState:
    offer = offer or Offer()
    return board.model_copy(update={"offers": [*board.offers, offer]})


def remove_offer(board: BoardState, offer_id: str) -> BoardState:
    offers = [o for o in board.offers if o.id != offer_id]
    return board.model_copy(update={"offers": offers})


def set_offer_value(
    board: BoardState, offer_id: str, dimension_id: str, raw: Any,
) -> BoardState:
    offer = board.offer(offer_id)
    if offer is None:
        return board
    return _replace_offer(
        board, offer_id, values={**offer.values, dimension_id: raw},
    )


def set_bonus(
    board: BoardState, offer_id: str, dimension_id: str, points: float,
) -> BoardState:
    offer = board.offer(offer_id)
    if offer is None:
        return board

    dim = board.dimension(dimension_id)
    if dim is None:
        raise ValueError(f"Unknown dimension {dimension_id!r}")
    if dim.is_penalty:
        raise ValueError(f"Dimension {dimension_id!r} is a penalty dimension; bonuses are not allowed")

    bonus = ExtraBonus(dimension_id=dimension_id, points=points)
    if offer.bonus_for(dimension_id) is not None:
        bonuses = [
            bonus if b.dimension_id == dimension_id else b
            for b in offer.extra_bonuses
        ]
    elif len(offer.extra_bonuses) >= settings.max_bonus_dimensions:
        raise ValueError(
            f"Offer {offer_id!r} already has bonuses on "
            f"{settings.max_bonus_dimensions} dimensions"
        )
    else:
        bonuses = [*offer.extra_bonuses, bonus]
    return _replace_offer(board, offer_id, extra_bonuses=bonuses)


def clear_bonus(board: BoardState, offer_id: str, dimension_id: str) -> BoardState:
    offer = board.offer(offer_id)
    if offer is None:
        return board
    bonuses = [b for b in offer.extra_bonuses if b.dimension_id != dimension_id]
    return _replace_offer(board, offer_id, extra_bonuses=bonuses)


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------

def update_dimension(
    board: BoardState, dimension_id: str, **updates: Any,
) -> BoardState:
    if board.dimension(dimension_id) is None:
        return board
    dims = [
        d.model_copy(update=updates) if d.id == dimension_id else d
        for d in board.dimensions
    ]
    return board.model_copy(update={"dimensions": dims})


def toggle_dimension(board: BoardState, dimension_id: str) -> BoardState:
    dim = board.dimension(dimension_id)
    if dim is None:
        return board
    return update_dimension(board, dimension_id, active=not dim.active)


def reorder_dimensions(board: BoardState, dimension_ids: list[str]) -> BoardState:
    """Put *dimension_ids* first, in that order; everything else follows."""
    remaining = {d.id: d for d in board.dimensions}
    ordered: list[Dimension] = []
    for dim_id in dimension_ids:
        dim = remaining.pop(dim_id, None)
        if dim is not None:
            ordered.append(dim)
    ordered.extend(d for d in board.dimensions if d.id in remaining)
    return board.model_copy(update={"dimensions": ordered})


def add_custom_dimension(board: BoardState, dimension: Dimension) -> BoardState:
    if board.dimension(dimension.id) is not None:
        raise ValueError(f"Dimension {dimension.id!r} already exists")
    return board.model_copy(update={"dimensions": [*board.dimensions, dimension]})


def remove_custom_dimension(board: BoardState, dimension_id: str) -> BoardState:
    if board.dimension(dimension_id) is None:
        return board
    dims = [d for d in board.dimensions if d.id != dimension_id]
    offers = [
        o.model_copy(update={
            "extra_bonuses": [
                b for b in o.extra_bonuses if b.dimension_id != dimension_id
            ],
        })
        for o in board.offers
    ]
    logger.debug("Removed dimension %s from %d offers", dimension_id, len(offers))
    return board.model_copy(update={"dimensions": dims, "offers": offers})


def edit_options(
    board: BoardState, dimension_id: str, options: list[DimensionOption],
) -> BoardState:
    """Replace a dimension's options and re-score them by position."""
    dim = board.dimension(dimension_id)
    if dim is None:
        return board
    scored = auto_score_options(options, dim.is_penalty)
    return update_dimension(board, dimension_id, options=scored)
