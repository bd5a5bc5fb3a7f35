"""
Scramble generation: random but always-solvable starting grids.

The scrambled grid is produced by clicking random cells of the solved grid.
Because every click is an XOR with a fixed mask, replaying the same picks
(in any order) returns to the solved grid, so every scramble is solvable.

No rejection sampling is done. A scramble can cancel itself out (the same
cell picked twice, for example) and leave the grid solved; that round is
then won in zero moves.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Protocol

import numpy as np

from switchgrid.core.grid import Grid, solved, toggle
from switchgrid.core.level import Level
from switchgrid.core.patterns import Pattern, lookup


class RandomSource(Protocol):
    """The part of numpy.random.Generator the scrambler needs."""

    def integers(self, low: int, high: int) -> int:
        ...


@dataclass(frozen=True)
class Scramble:
    """A scrambled grid together with the clicks that produced it."""

    grid: Grid
    picks: tuple[tuple[int, int], ...]


def replay(grid: Grid, picks: Iterable[tuple[int, int]], pattern: Pattern | str) -> Grid:
    """Apply a sequence of clicks to a grid."""
    if not isinstance(pattern, Pattern):
        pattern = lookup(pattern)
    for row, col in picks:
        grid = toggle(grid, row, col, pattern)
    return grid


def scramble(
    solved_grid: Grid,
    level: Level,
    rng: RandomSource | None = None,
) -> Scramble:
    """
    Scramble a solved grid with level.scramble_moves random clicks.

    Args:
        solved_grid: The solved grid the round is laid out on
        level: Round descriptor (size, pattern, scramble length)
        rng: Random source; a fresh unseeded numpy Generator if None

    Returns:
        Scramble with the resulting grid and the ordered picks

    Raises:
        ValueError: if solved_grid does not match level.size
        UnknownPattern: if level.pattern is not registered
    """
    if solved_grid.size != level.size:
        raise ValueError(
            f"Grid size {solved_grid.size} does not match level size {level.size}"
        )
    if rng is None:
        rng = np.random.default_rng()

    pattern = lookup(level.pattern)
    n_cells = level.size * level.size

    grid = solved(level.size)
    picks: list[tuple[int, int]] = []
    for _ in range(level.scramble_moves):
        row, col = divmod(int(rng.integers(0, n_cells)), level.size)
        grid = toggle(grid, row, col, pattern)
        picks.append((row, col))

    return Scramble(grid=grid, picks=tuple(picks))
