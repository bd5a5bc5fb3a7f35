"""
Puzzle engine.

Everything here is synchronous and deterministic given its random source:
- Patterns: named sets of toggle offsets
- Levels: round descriptors (size, pattern, scramble length)
- Grid: immutable board values and the XOR toggle
- Scramble: random but always-solvable starting grids
- PhaseStateMachine: the single owner of round state
"""

from switchgrid.core.errors import (
    SwitchGridError,
    UnknownPattern,
    OutOfBounds,
    InvalidPhaseTransition,
)
from switchgrid.core.patterns import Pattern, PATTERNS, DEFAULT_PATTERN, lookup, available_patterns
from switchgrid.core.level import Level, LevelConfig, generate_level
from switchgrid.core.grid import Cell, Grid, solved, toggle, toggle_mask, is_won
from switchgrid.core.scramble import Scramble, scramble, replay
from switchgrid.core.phases import GamePhase, GameSnapshot, PhaseStateMachine

__all__ = [
    "SwitchGridError",
    "UnknownPattern",
    "OutOfBounds",
    "InvalidPhaseTransition",
    "Pattern",
    "PATTERNS",
    "DEFAULT_PATTERN",
    "lookup",
    "available_patterns",
    "Level",
    "LevelConfig",
    "generate_level",
    "Cell",
    "Grid",
    "solved",
    "toggle",
    "toggle_mask",
    "is_won",
    "Scramble",
    "scramble",
    "replay",
    "GamePhase",
    "GameSnapshot",
    "PhaseStateMachine",
]
