"""
Score records and their display format.

A Score is created once per won round and never mutated. Time is measured
in ticks (tenths of a second).
"""

from __future__ import annotations
from dataclasses import asdict, dataclass


MAX_SCORES = 20  # Leaderboard length


@dataclass(frozen=True)
class Score:
    """A finished round."""

    moves: int  # Clicks taken, at least 1
    time: int  # Tenths of a second
    date: str
    id: str

    def __post_init__(self):
        if isinstance(self.moves, bool) or not isinstance(self.moves, int) or self.moves < 1:
            raise ValueError(f"Score moves must be a positive integer, got {self.moves!r}")
        if isinstance(self.time, bool) or not isinstance(self.time, int) or self.time < 0:
            raise ValueError(f"Score time must be a non-negative integer, got {self.time!r}")
        if not isinstance(self.date, str) or not isinstance(self.id, str):
            raise ValueError("Score date and id must be strings")

    @property
    def key(self) -> tuple[int, int, str]:
        """Identity used for duplicate detection."""
        return self.moves, self.time, self.date

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Score:
        """
        Build a Score from its serialised form.

        Raises:
            ValueError: if fields are missing or invalid
        """
        if not isinstance(data, dict):
            raise ValueError(f"Score record must be an object, got {type(data).__name__}")
        try:
            return cls(
                moves=data["moves"],
                time=data["time"],
                date=data["date"],
                id=data["id"],
            )
        except KeyError as exc:
            raise ValueError(f"Score record missing field {exc}") from None


def format_time(tenths: int) -> str:
    """Format a tick count as m:ss.t (e.g. 1234 -> '2:03.4')."""
    total_seconds, remaining_tenths = divmod(int(tenths), 10)
    mins, secs = divmod(total_seconds, 60)
    return f"{mins}:{secs:02d}.{remaining_tenths}"
