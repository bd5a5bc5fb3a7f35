"""
Scoring collaborators of the engine.

- Score / ScoreBoard: finished rounds, de-duplicated and ordered by time
- ScoreStore backends: in-memory or a JSON file
- Clocks: host-driven tick sources (one tick = 0.1 s)
"""

from switchgrid.scoring.scores import Score, MAX_SCORES, format_time
from switchgrid.scoring.storage import ScoreStore, MemoryStore, JsonFileStore, DEFAULT_KEY
from switchgrid.scoring.recorder import ScoreRecorder, ScoreBoard
from switchgrid.scoring.clock import Clock, ManualClock, PollingClock, TICK_SECONDS

__all__ = [
    "Score",
    "MAX_SCORES",
    "format_time",
    "ScoreStore",
    "MemoryStore",
    "JsonFileStore",
    "DEFAULT_KEY",
    "ScoreRecorder",
    "ScoreBoard",
    "Clock",
    "ManualClock",
    "PollingClock",
    "TICK_SECONDS",
]
