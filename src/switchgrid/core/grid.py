"""
Grid: the n×n board of binary cells and the toggle operations on it.

A cell is "lit" when it still needs to be turned off. The solved grid has
every cell unlit.

Grids are immutable values. toggle() returns a new Grid and leaves its
input untouched, so a caller can keep any earlier grid (the initial
scrambled state, for instance) without copying.

Toggle algebra:
- A click XORs the grid with a fixed mask (the pattern placed around the
  clicked cell, clipped at the border).
- XOR is its own inverse: clicking the same cell twice restores the grid.
- XOR is commutative and associative: any ordering of the same multiset of
  clicks yields the same grid.
"""

from __future__ import annotations
import operator
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np
from scipy.ndimage import convolve

from switchgrid.core.errors import OutOfBounds
from switchgrid.core.patterns import Pattern, lookup


@dataclass(frozen=True)
class Cell:
    """One cell of a grid."""

    row: int
    col: int
    lit: bool

    @property
    def id(self) -> str:
        return f"{self.row}-{self.col}"


class Grid:
    """
    Immutable square board of lit/unlit cells.

    Exactly one cell exists per (row, col) pair: the state is a single
    (size, size) boolean array, indexed [row, col].
    """

    def __init__(self, lit: np.ndarray):
        state = np.array(lit, dtype=bool)
        if state.ndim != 2 or state.shape[0] != state.shape[1]:
            raise ValueError(f"Grid state must be a square 2D array, got shape {state.shape}")
        state.setflags(write=False)
        self._lit = state

    @classmethod
    def empty(cls) -> Grid:
        """The 0x0 grid: an uninitialised board, never a win."""
        return cls(np.zeros((0, 0), dtype=bool))

    @classmethod
    def from_array(cls, lit: np.ndarray) -> Grid:
        """Build a grid from a square boolean (or 0/1) array."""
        return cls(lit)

    @classmethod
    def from_lit(cls, size: int, cells: Iterable[tuple[int, int]]) -> Grid:
        """Build a size×size grid where exactly the given cells are lit."""
        state = np.zeros((size, size), dtype=bool)
        for row, col in cells:
            if not (0 <= row < size and 0 <= col < size):
                raise OutOfBounds(row, col, size)
            state[row, col] = True
        return cls(state)

    @property
    def size(self) -> int:
        """Cells per side."""
        return self._lit.shape[0]

    @property
    def lit(self) -> np.ndarray:
        """Read-only view of the [row, col] state array."""
        return self._lit

    @property
    def lit_count(self) -> int:
        return int(self._lit.sum())

    def __len__(self) -> int:
        return self._lit.size

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Cell:
        row, col = _check_cell(row, col, self.size)
        return Cell(row, col, bool(self._lit[row, col]))

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield Cell(row, col, bool(self._lit[row, col]))

    def lit_cells(self) -> list[tuple[int, int]]:
        """Coordinates of lit cells in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self._lit)]

    def as_array(self) -> np.ndarray:
        """Writable copy of the state array."""
        return self._lit.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._lit.shape == other._lit.shape and bool(np.array_equal(self._lit, other._lit))

    def __hash__(self) -> int:
        return hash((self._lit.shape, self._lit.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, lit={self.lit_count})"

    def __str__(self) -> str:
        return "\n".join(
            "".join("#" if v else "." for v in row) for row in self._lit
        )


def solved(size: int) -> Grid:
    """A size×size grid with every cell unlit."""
    if size < 0:
        raise ValueError(f"Grid size must be non-negative, got {size}")
    return Grid(np.zeros((size, size), dtype=bool))


def _check_cell(row, col, size: int) -> tuple[int, int]:
    """Validate a clicked cell, returning it as plain ints."""
    try:
        row, col = operator.index(row), operator.index(col)
    except TypeError:
        raise OutOfBounds(row, col, size) from None
    if not (0 <= row < size and 0 <= col < size):
        raise OutOfBounds(row, col, size)
    return row, col


def _resolve(pattern: Pattern | str) -> Pattern:
    if isinstance(pattern, Pattern):
        return pattern
    return lookup(pattern)


def toggle_mask(size: int, row: int, col: int, pattern: Pattern | str) -> np.ndarray:
    """
    Cells flipped by clicking (row, col) on a size×size grid.

    Offsets that land outside the grid are clipped, not wrapped.

    Returns:
        (size, size) boolean mask

    Raises:
        OutOfBounds: if (row, col) is outside the grid
        UnknownPattern: if pattern is an unregistered id
    """
    row, col = _check_cell(row, col, size)
    pattern = _resolve(pattern)

    impulse = np.zeros((size, size), dtype=np.uint8)
    impulse[row, col] = 1

    # Zero padding outside the board is what clips the pattern at the edges
    placed = convolve(impulse, pattern.footprint(), mode="constant", cval=0)
    return placed > 0


def toggle(grid: Grid, row: int, col: int, pattern: Pattern | str) -> Grid:
    """
    Apply one click and return the resulting grid.

    The input grid is not modified.

    Raises:
        OutOfBounds: if (row, col) is outside the grid
        UnknownPattern: if pattern is an unregistered id
    """
    mask = toggle_mask(grid.size, row, col, pattern)
    return Grid(np.logical_xor(grid.lit, mask))


def is_won(grid: Grid) -> bool:
    """True iff the grid has at least one cell and none of them is lit."""
    if len(grid) == 0:
        return False
    return not bool(grid.lit.any())
