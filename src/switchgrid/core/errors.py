"""
Engine error taxonomy.

Only two failures are representable by engine operations:
- UnknownPattern: a pattern id that is not in the catalog (configuration error)
- OutOfBounds: a click on a cell outside the current grid (caller bug)

InvalidPhaseTransition describes an event the state machine refused. It is
built for diagnostics and logged, never raised to the player.
"""

from __future__ import annotations


class SwitchGridError(Exception):
    """Base class for all engine errors."""


class UnknownPattern(SwitchGridError, KeyError):
    """Raised when a pattern id is not registered in the catalog."""

    def __init__(self, pattern_id: str):
        self.pattern_id = pattern_id
        super().__init__(pattern_id)

    def __str__(self) -> str:
        return f"Unknown pattern: {self.pattern_id!r}"


class OutOfBounds(SwitchGridError, IndexError):
    """Raised when a clicked cell lies outside the grid."""

    def __init__(self, row: int, col: int, size: int):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(f"Cell ({row}, {col}) is outside a {size}x{size} grid")


class InvalidPhaseTransition(SwitchGridError):
    """An event delivered while the state machine does not accept it."""

    def __init__(self, event: str, phase):
        self.event = event
        self.phase = phase
        super().__init__(f"Event {event!r} not accepted in phase {getattr(phase, 'value', phase)!r}")
