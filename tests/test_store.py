"""Board operations — every edit returns a new board."""

from __future__ import annotations

import pytest

from src.offer_ranking import store
from src.offer_ranking.config import settings
from src.offer_ranking.models import (
    BoardState,
    Dimension,
    DimensionOption,
    ExtraBonus,
    Offer,
)


def _board(*offers: Offer) -> BoardState:
    return store.initial_board().model_copy(update={"offers": list(offers)})


class TestInitialBoard:
    def test_catalog_and_no_offers(self):
        board = store.initial_board()
        assert len(board.dimensions) == 19
        assert board.offers == []

    def test_clear_all_resets(self):
        board = store.add_offer(store.toggle_dimension(store.initial_board(), "turnover"))
        assert store.clear_all(board) == store.initial_board()


class TestOffers:
    def test_add_offer_generates_id(self):
        board = store.add_offer(store.initial_board())
        [offer] = board.offers
        assert offer.id
        assert offer.values == {}
        assert offer.extra_bonuses == []

    def test_add_offer_preserves_existing(self):
        board = _board(Offer(id="a"), Offer(id="b"))
        new = store.add_offer(board, Offer(id="c"))
        assert [o.id for o in new.offers] == ["a", "b", "c"]
        assert [o.id for o in board.offers] == ["a", "b"]

    def test_remove_offer(self):
        board = _board(Offer(id="a"), Offer(id="b"))
        assert [o.id for o in store.remove_offer(board, "a").offers] == ["b"]
        assert store.remove_offer(board, "missing") == board

    def test_set_offer_value(self):
        board = _board(Offer(id="a", values={"company": "Acme"}))
        new = store.set_offer_value(board, "a", "isCore", "yes")
        assert new.offer("a").values == {"company": "Acme", "isCore": "yes"}
        assert board.offer("a").values == {"company": "Acme"}

    def test_set_offer_value_unknown_offer(self):
        board = _board()
        assert store.set_offer_value(board, "nope", "isCore", "yes") is board


class TestBonuses:
    def test_add_and_update_bonus(self):
        board = store.set_bonus(_board(Offer(id="a")), "a", "salary", 30)
        board = store.set_bonus(board, "a", "salary", 45)
        assert board.offer("a").extra_bonuses == [ExtraBonus(dimension_id="salary", points=45)]

    def test_limit(self):
        board = _board(Offer(id="a"))
        for dim_id in ("salary", "isCore", "workload"):
            board = store.set_bonus(board, "a", dim_id, 10)
        with pytest.raises(ValueError, match="3 dimensions"):
            store.set_bonus(board, "a", "location", 10)
        # Updating an existing entry is still allowed at the limit.
        board = store.set_bonus(board, "a", "isCore", 90)
        assert board.offer("a").bonus_for("isCore").points == 90

    def test_limit_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "max_bonus_dimensions", 1)
        board = store.set_bonus(_board(Offer(id="a")), "a", "salary", 10)
        with pytest.raises(ValueError):
            store.set_bonus(board, "a", "isCore", 10)

    def test_penalty_rejected(self):
        with pytest.raises(ValueError, match="penalty"):
            store.set_bonus(_board(Offer(id="a")), "a", "pua", 10)

    def test_unknown_dimension_rejected(self):
        with pytest.raises(ValueError, match="Unknown"):
            store.set_bonus(_board(Offer(id="a")), "a", "nope", 10)

    def test_clear_bonus(self):
        board = store.set_bonus(_board(Offer(id="a")), "a", "salary", 30)
        assert store.clear_bonus(board, "a", "salary").offer("a").extra_bonuses == []


class TestDimensions:
    def test_toggle(self):
        board = store.toggle_dimension(store.initial_board(), "turnover")
        assert board.dimension("turnover").active
        assert not store.initial_board().dimension("turnover").active
        assert not store.toggle_dimension(board, "turnover").dimension("turnover").active

    def test_toggle_unknown(self):
        board = store.initial_board()
        assert store.toggle_dimension(board, "nope") is board

    def test_update_dimension(self):
        board = store.update_dimension(store.initial_board(), "salary", name="Pay")
        assert board.dimension("salary").name == "Pay"

    def test_reorder(self):
        board = BoardState(dimensions=[Dimension(id=i) for i in "abcde"])
        new = store.reorder_dimensions(board, ["d", "zz", "b"])
        assert [d.id for d in new.dimensions] == ["d", "b", "a", "c", "e"]

    def test_add_custom_dimension(self):
        custom = Dimension(id="commute", name="Commute", kind="slider")
        board = store.add_custom_dimension(store.initial_board(), custom)
        assert board.dimensions[-1] == custom

    def test_add_duplicate_rejected(self):
        with pytest.raises(ValueError, match="already exists"):
            store.add_custom_dimension(store.initial_board(), Dimension(id="salary"))

    def test_remove_strips_bonuses(self):
        board = store.add_custom_dimension(
            _board(Offer(id="a"), Offer(id="b")),
            Dimension(id="commute", kind="slider"),
        )
        board = store.set_bonus(board, "a", "commute", 40)
        board = store.set_bonus(board, "a", "salary", 10)
        board = store.set_bonus(board, "b", "commute", 20)

        new = store.remove_custom_dimension(board, "commute")
        assert new.dimension("commute") is None
        assert [b.dimension_id for b in new.offer("a").extra_bonuses] == ["salary"]
        assert new.offer("b").extra_bonuses == []

    def test_edit_options_rescored(self):
        options = [
            DimensionOption(value="great", label="Great"),
            DimensionOption(value="ok", label="OK"),
            DimensionOption(value="bad", label="Bad"),
        ]
        board = store.edit_options(store.initial_board(), "isCore", options)
        assert [(o.value, o.score) for o in board.dimension("isCore").options] == [
            ("great", 100), ("ok", 50), ("bad", 0),
        ]

    def test_edit_options_penalty(self):
        options = [DimensionOption(value="v1"), DimensionOption(value="v2")]
        board = store.edit_options(store.initial_board(), "pua", options)
        assert [o.score for o in board.dimension("pua").options] == [-100, 0]
