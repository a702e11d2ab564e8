"""Board persistence behind a small repository interface.

The scoring core never sees storage: callers load a ``BoardState`` here,
hand it to the engine, and save edits back.  A snapshot that cannot be read
(missing, not JSON, wrong shape, written by a newer version) loads as
``None`` so the caller can fall back to ``store.initial_board()``.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, ValidationError

from src.offer_ranking.config import settings
from src.offer_ranking.models import BoardState, Dimension, Offer

logger = logging.getLogger(__name__)


class Snapshot(BaseModel):
    version: int
    last_updated: int
    dimensions: list[Dimension] = Field(default_factory=list)
    offers: list[Offer] = Field(default_factory=list)

    @classmethod
    def of(cls, board: BoardState) -> Snapshot:
        return cls(
            version=settings.snapshot_version,
            last_updated=int(time.time() * 1000),
            dimensions=board.dimensions,
            offers=board.offers,
        )

    def board(self) -> BoardState:
        return BoardState(dimensions=self.dimensions, offers=self.offers)


class BoardRepository(Protocol):
    def load(self) -> BoardState | None: ...

    def save(self, board: BoardState) -> None: ...

    def clear(self) -> None: ...


class InMemoryRepository:
    def __init__(self, board: BoardState | None = None) -> None:
        self._board = board

    def load(self) -> BoardState | None:
        return self._board

    def save(self, board: BoardState) -> None:
        self._board = board

    def clear(self) -> None:
        self._board = None


class JsonFileRepository:
    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path if path is not None else settings.snapshot_path)

    def load(self) -> BoardState | None:
        if not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Snapshot %s is not valid JSON: %s", self.path, exc)
            return None

        try:
            snapshot = Snapshot.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                "Snapshot %s has an invalid structure (%d errors)",
                self.path, exc.error_count(),
            )
            return None

        if snapshot.version > settings.snapshot_version:
            logger.warning(
                "Snapshot %s is version %d; this build reads up to %d",
                self.path, snapshot.version, settings.snapshot_version,
            )
            return None
        return snapshot.board()

    def save(self, board: BoardState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            Snapshot.of(board).model_dump_json(indent=2), encoding="utf-8",
        )
        logger.debug(
            "Saved %d dimensions and %d offers to %s",
            len(board.dimensions), len(board.offers), self.path,
        )

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
