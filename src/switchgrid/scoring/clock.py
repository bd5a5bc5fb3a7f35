"""
Clocks: the tick source that measures how long a round takes.

The engine never reads wall time itself. A host-driven clock calls back
once per elapsed unit and the state machine counts those ticks while a
round is being played.

Unit contract: one tick is one tenth of a second. Scores recorded in ticks
stay comparable across hosts only if every clock keeps that unit.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


TICK_SECONDS = 0.1  # One tick = one tenth of a second

TickCallback = Callable[[], None]


class Clock(Protocol):
    """Protocol for tick sources."""

    @property
    def running(self) -> bool:
        ...

    def on_tick(self, callback: TickCallback) -> None:
        """Register a callback invoked once per tick while running."""
        ...

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def reset(self) -> None:
        """Stop and forget any accumulated time."""
        ...


class ManualClock:
    """
    A clock the host advances explicitly.

    Useful for tests and for hosts that already run their own frame loop:
    call tick() once per 100 ms frame.
    """

    def __init__(self):
        self._running = False
        self._callbacks: list[TickCallback] = []
        self.ticks = 0  # Ticks emitted since the last reset

    @property
    def running(self) -> bool:
        return self._running

    def on_tick(self, callback: TickCallback) -> None:
        self._callbacks.append(callback)

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        self._running = False

    def reset(self) -> None:
        self._running = False
        self.ticks = 0

    def tick(self, n: int = 1) -> int:
        """
        Emit n ticks.

        Returns:
            Number of ticks actually emitted (0 while stopped)
        """
        if not self._running:
            logger.debug("Clock stopped, ignoring %d tick(s)", n)
            return 0
        for _ in range(n):
            self.ticks += 1
            for callback in self._callbacks:
                callback()
        return n


class PollingClock(ManualClock):
    """
    A clock that converts a monotonic time source into ticks.

    The host polls at whatever cadence it likes; each poll emits one tick
    per full interval elapsed since start() that has not been emitted yet.
    """

    def __init__(
        self,
        interval: float = TICK_SECONDS,
        time_source: Callable[[], float] = time.monotonic,
    ):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        super().__init__()
        self.interval = interval
        self._time_source = time_source
        self._started_at: float | None = None

    def start(self) -> None:
        if self._running:
            return
        # Resume from the ticks already emitted
        self._started_at = self._time_source() - self.ticks * self.interval
        super().start()

    def stop(self) -> None:
        super().stop()
        self._started_at = None

    def reset(self) -> None:
        super().reset()
        self._started_at = None

    def poll(self) -> int:
        """
        Emit any ticks that have come due.

        Returns:
            Number of ticks emitted by this poll
        """
        if not self._running or self._started_at is None:
            return 0
        elapsed = self._time_source() - self._started_at
        # Small epsilon so exact multiples of the interval are not lost to float error
        due = int((elapsed + 1e-9) / self.interval) - self.ticks
        if due <= 0:
            return 0
        return self.tick(due)
