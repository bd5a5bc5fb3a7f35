"""
switchgrid: a toggle-grid puzzle engine ("Lights-Out" variant)

Clicking a cell flips it and the neighbours named by a pattern. The goal
is to turn every cell off in as few moves as possible.

Layers:
- core: patterns, levels, grid toggles, scrambling, the phase state machine
- scoring: score records, leaderboard persistence, tick clocks
- viz: matplotlib rendering of boards and leaderboards
"""

__version__ = "0.1.0"
