"""
Level generation.

A Level describes one round: grid size, toggle pattern and how many random
clicks scramble the solved grid. It is created when a round starts and
never changes afterwards.

Today there is a single fixed configuration (5x5, cross, 12 scramble
moves). LevelConfig exists so size, pattern and scramble length can be
varied without changing generate_level's contract.
"""

from __future__ import annotations
from dataclasses import dataclass

from switchgrid.core.patterns import DEFAULT_PATTERN, lookup


DEFAULT_GRID_SIZE = 5
DEFAULT_SCRAMBLE_MOVES = 12


@dataclass
class LevelConfig:
    """Configuration for level generation."""

    size: int = DEFAULT_GRID_SIZE  # Cells per side
    pattern: str = DEFAULT_PATTERN  # Pattern id from the catalog
    scramble_moves: int = DEFAULT_SCRAMBLE_MOVES  # Random clicks from solved

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Grid size must be at least 1, got {self.size}")
        if self.scramble_moves < 0:
            raise ValueError(f"Scramble moves must be non-negative, got {self.scramble_moves}")


@dataclass(frozen=True)
class Level:
    """An immutable round descriptor."""

    size: int
    pattern: str
    scramble_moves: int
    name: str
    number: int = 1


def generate_level(config: LevelConfig | None = None) -> Level:
    """
    Build the Level for a new round.

    Args:
        config: Level parameters (documented defaults if None)

    Returns:
        Level named after its pattern

    Raises:
        UnknownPattern: if config.pattern is not in the catalog
    """
    if config is None:
        config = LevelConfig()

    pattern = lookup(config.pattern)

    return Level(
        size=config.size,
        pattern=pattern.pattern_id,
        scramble_moves=config.scramble_moves,
        name=pattern.name,
    )
