"""
Score persistence.

Scores are kept as one ordered list under a single named key. A missing
or damaged store never breaks the game: it reads as an empty list.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Protocol, Sequence

from switchgrid.scoring.scores import Score

logger = logging.getLogger(__name__)


DEFAULT_KEY = "switchGameScores"


class ScoreStore(Protocol):
    """Protocol for score storage backends."""

    def load(self) -> list[Score]:
        ...

    def save(self, scores: Sequence[Score]) -> None:
        ...


class MemoryStore:
    """In-process store, lost when the process exits."""

    def __init__(self, scores: Sequence[Score] | None = None):
        self._scores = list(scores or [])

    def load(self) -> list[Score]:
        return list(self._scores)

    def save(self, scores: Sequence[Score]) -> None:
        self._scores = list(scores)


class JsonFileStore:
    """
    Stores scores in a JSON document under a named key.

    The document may hold other keys; they are preserved on save.
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_KEY):
        self.path = Path(path)
        self.key = key

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Could not read scores from %s: %s", self.path, exc)
            return {}
        if not isinstance(document, dict):
            logger.warning("Ignoring scores file %s: top level is not an object", self.path)
            return {}
        return document

    def load(self) -> list[Score]:
        raw = self._read_document().get(self.key, [])
        if not isinstance(raw, list):
            logger.warning("Ignoring key %r in %s: not a list", self.key, self.path)
            return []
        try:
            return [Score.from_dict(item) for item in raw]
        except ValueError as exc:
            logger.warning("Ignoring corrupt scores in %s: %s", self.path, exc)
            return []

    def save(self, scores: Sequence[Score]) -> None:
        """Write scores; a failed write is logged and the file left as it was."""
        document = self._read_document()
        document[self.key] = [score.to_dict() for score in scores]
        try:
            text = json.dumps(document, indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not write scores to %s: %s", self.path, exc)
