"""
ScoreRecorder: receives finished rounds and keeps the leaderboard.

The leaderboard is ordered by ascending time (ties keep insertion order)
and capped at MAX_SCORES entries. Recording the same (moves, time, date)
twice stores it once.
"""

from __future__ import annotations
import logging
import uuid
from datetime import date
from typing import Callable, Protocol, Sequence

from switchgrid.scoring.scores import MAX_SCORES, Score
from switchgrid.scoring.storage import MemoryStore, ScoreStore

logger = logging.getLogger(__name__)


class ScoreRecorder(Protocol):
    """Protocol for score sinks consumed by the state machine."""

    def record(self, moves: int, time: int) -> Score:
        ...

    def list(self) -> Sequence[Score]:
        ...

    def clear(self) -> None:
        ...


def _today() -> str:
    return date.today().isoformat()


def _new_id() -> str:
    return uuid.uuid4().hex


class ScoreBoard:
    """Leaderboard backed by a ScoreStore."""

    def __init__(
        self,
        store: ScoreStore | None = None,
        today: Callable[[], str] = _today,
        max_scores: int = MAX_SCORES,
        id_factory: Callable[[], str] = _new_id,
    ):
        """
        Create a leaderboard.

        Args:
            store: Persistence backend (in-memory if None)
            today: Returns the date string stamped on new scores
            max_scores: Leaderboard length
            id_factory: Returns a unique id for new scores
        """
        if max_scores < 1:
            raise ValueError(f"max_scores must be at least 1, got {max_scores}")
        self.store = store if store is not None else MemoryStore()
        self.max_scores = max_scores
        self._today = today
        self._id_factory = id_factory
        self._scores: list[Score] = self.store.load()

    def record(self, moves: int, time: int) -> Score:
        """
        Record a finished round.

        Returns:
            The new Score, or the already-stored one if this is a duplicate

        Raises:
            ValueError: if moves < 1 or time < 0
        """
        score = Score(moves=moves, time=time, date=self._today(), id=self._id_factory())

        for existing in self._scores:
            if existing.key == score.key:
                logger.debug("Duplicate score %s ignored", score.key)
                return existing

        # sorted() is stable, so equal times keep insertion order
        self._scores = sorted([*self._scores, score], key=lambda s: s.time)[: self.max_scores]
        self.store.save(self._scores)
        return score

    def list(self) -> tuple[Score, ...]:
        """Scores ordered by ascending time."""
        return tuple(self._scores)

    def best(self) -> Score | None:
        """Fastest recorded score."""
        return self._scores[0] if self._scores else None

    def clear(self) -> None:
        self._scores = []
        self.store.save(self._scores)

    def __len__(self) -> int:
        return len(self._scores)
