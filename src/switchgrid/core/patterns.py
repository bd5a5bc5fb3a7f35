"""
Pattern catalog: the named toggle patterns a click can apply.

A pattern is a set of (row_delta, col_delta) offsets relative to the
clicked cell. Every offset that lands inside the grid gets flipped.

Shipped patterns:
- cross: the clicked cell and its 4 orthogonal neighbours (default)
- square2x2: the clicked cell, the cell above, the cell to the left and
  the up-left diagonal
- lshape: the cell to the left, the clicked cell and the up-left diagonal

Patterns are read-only constants. There is no registration API.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType

import numpy as np

from switchgrid.core.errors import UnknownPattern


@dataclass(frozen=True)
class Pattern:
    """A named, immutable set of toggle offsets."""

    pattern_id: str
    name: str
    offsets: frozenset[tuple[int, int]]

    @property
    def radius(self) -> int:
        """Largest absolute row or column offset."""
        if not self.offsets:
            return 0
        return max(max(abs(dr), abs(dc)) for dr, dc in self.offsets)

    @property
    def includes_self(self) -> bool:
        """Whether the clicked cell flips itself."""
        return (0, 0) in self.offsets

    def footprint(self) -> np.ndarray:
        """
        Return the pattern as an odd-sized 0/1 kernel.

        The kernel has shape (2r+1, 2r+1) with r = radius, and the clicked
        cell sits at the centre [r, r]. Offset (dr, dc) is stored at
        [r + dr, r + dc], so convolving a one-hot grid with this kernel
        places the pattern around the hot cell.
        """
        r = self.radius
        kernel = np.zeros((2 * r + 1, 2 * r + 1), dtype=np.uint8)
        for dr, dc in self.offsets:
            kernel[r + dr, r + dc] = 1
        return kernel


def _pattern(pattern_id: str, name: str, offsets: list[tuple[int, int]]) -> Pattern:
    return Pattern(pattern_id=pattern_id, name=name, offsets=frozenset(offsets))


PATTERNS = MappingProxyType({
    "cross": _pattern(
        "cross", "Cross Pattern",
        [(0, 0), (-1, 0), (1, 0), (0, -1), (0, 1)],
    ),
    "square2x2": _pattern(
        "square2x2", "2×2 Square",
        [(0, 0), (-1, 0), (0, -1), (-1, -1)],
    ),
    "lshape": _pattern(
        "lshape", "L-Shape",
        [(0, -1), (0, 0), (-1, -1)],
    ),
})

DEFAULT_PATTERN = "cross"


def lookup(pattern_id: str) -> Pattern:
    """
    Resolve a pattern id.

    Raises:
        UnknownPattern: if the id is not registered
    """
    try:
        return PATTERNS[pattern_id]
    except KeyError:
        raise UnknownPattern(pattern_id) from None


def available_patterns() -> list[str]:
    """List of registered pattern ids."""
    return list(PATTERNS.keys())
