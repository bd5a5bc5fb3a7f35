"""
PhaseStateMachine: sequences one round of the puzzle.

    ready ──play──▶ generating ──layout_complete──▶ scrambling
                                                        │
                                              scramble_complete
                                                        ▼
    ready ◀──reset_complete── resetting ◀──new_game── won ◀──(win)── playing
                                                        │               ▲
                                                        └───restart─────┘

The machine owns the round state (level, grid, move count, elapsed time)
and is the only writer of it. Grid operations and scrambling are pure
functions it calls into.

Events that the current phase does not accept are no-ops: they are logged
as InvalidPhaseTransition and the event method returns False. Animation
sub-steps (cells flying in, fading out) belong to the presentation layer;
the host reports their completion with layout_complete(),
scramble_complete() and reset_complete().
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from switchgrid.core.errors import InvalidPhaseTransition
from switchgrid.core.grid import Grid, is_won, solved, toggle
from switchgrid.core.level import Level, LevelConfig, generate_level
from switchgrid.core.patterns import Pattern, lookup
from switchgrid.core.scramble import RandomSource, scramble
from switchgrid.scoring.clock import ManualClock

if TYPE_CHECKING:
    from switchgrid.scoring.clock import Clock
    from switchgrid.scoring.recorder import ScoreRecorder
    from switchgrid.scoring.scores import Score

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Coarse stage of a round."""

    READY = "ready"
    GENERATING = "generating"
    SCRAMBLING = "scrambling"
    PLAYING = "playing"
    WON = "won"
    RESETTING = "resetting-to-center"


# Phases during which the host is animating and the board must not change
BUSY_PHASES = frozenset({GamePhase.GENERATING, GamePhase.SCRAMBLING, GamePhase.RESETTING})

PhaseListener = Callable[[GamePhase, GamePhase], None]


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the round state for hosts."""

    phase: GamePhase
    level: Level | None
    grid: Grid
    moves: int
    elapsed: int
    picks: tuple[tuple[int, int], ...]


class PhaseStateMachine:
    """
    Owns the game phase and the round state.

    Usage:
        machine = PhaseStateMachine(recorder=ScoreBoard())
        machine.start()                 # play + layout + scramble
        machine.cell_click(2, 2)
        machine.clock.tick()            # host-driven, 100 ms per tick
    """

    def __init__(
        self,
        config: LevelConfig | None = None,
        recorder: "ScoreRecorder | None" = None,
        clock: "Clock | None" = None,
        rng: RandomSource | None = None,
    ):
        """
        Create a state machine in the READY phase.

        Args:
            config: Level parameters (defaults if None)
            recorder: Receives (moves, elapsed) when a round is won
            clock: Tick source; a ManualClock if None
            rng: Random source for scrambling (unseeded numpy if None)
        """
        self.config = config if config is not None else LevelConfig()
        self.recorder = recorder
        self.clock = clock if clock is not None else ManualClock()
        self.rng = rng

        self.phase = GamePhase.READY
        self.level: Level | None = None
        self.grid = Grid.empty()
        self.moves = 0
        self.elapsed = 0  # Ticks (tenths of a second) spent playing
        self.last_score: "Score | None" = None

        self._pattern: Pattern | None = None
        self._initial_grid = Grid.empty()
        self._picks: tuple[tuple[int, int], ...] = ()
        self._listeners: list[PhaseListener] = []

        self.clock.on_tick(self.on_tick)

    # ═══════════════════════════════════════════════════════════════
    # STATE
    # ═══════════════════════════════════════════════════════════════

    @property
    def busy(self) -> bool:
        """True while a generation, scramble or reset is in flight."""
        return self.phase in BUSY_PHASES

    @property
    def initial_grid(self) -> Grid:
        """The scrambled grid the current round started from."""
        return self._initial_grid

    @property
    def picks(self) -> tuple[tuple[int, int], ...]:
        """The clicks that scrambled the current round."""
        return self._picks

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            phase=self.phase,
            level=self.level,
            grid=self.grid,
            moves=self.moves,
            elapsed=self.elapsed,
            picks=self._picks,
        )

    def subscribe(self, listener: PhaseListener) -> None:
        """Call listener(old_phase, new_phase) after every transition."""
        self._listeners.append(listener)

    def _enter(self, phase: GamePhase) -> None:
        old = self.phase
        self.phase = phase
        logger.debug("Phase %s -> %s", old.value, phase.value)
        for listener in self._listeners:
            listener(old, phase)

    def _reject(self, event: str) -> bool:
        logger.info("%s", InvalidPhaseTransition(event, self.phase))
        return False

    # ═══════════════════════════════════════════════════════════════
    # EVENTS
    # ═══════════════════════════════════════════════════════════════

    def play(self) -> bool:
        """READY -> GENERATING: generate the level and lay out a solved grid."""
        if self.phase is not GamePhase.READY:
            return self._reject("play")

        # Resolve everything before touching state so a bad pattern changes nothing
        level = generate_level(self.config)
        pattern = lookup(level.pattern)

        self.level = level
        self._pattern = pattern
        self.grid = solved(level.size)
        self.moves = 0
        self.elapsed = 0
        self.last_score = None
        self._enter(GamePhase.GENERATING)
        return True

    def layout_complete(self) -> bool:
        """GENERATING -> SCRAMBLING: scramble and keep the initial snapshot."""
        if self.phase is not GamePhase.GENERATING:
            return self._reject("layout_complete")

        result = scramble(self.grid, self.level, rng=self.rng)
        self.grid = result.grid
        self._initial_grid = result.grid
        self._picks = result.picks
        self._enter(GamePhase.SCRAMBLING)
        return True

    def scramble_complete(self) -> bool:
        """SCRAMBLING -> PLAYING: reset counters and start the clock."""
        if self.phase is not GamePhase.SCRAMBLING:
            return self._reject("scramble_complete")

        self.moves = 0
        self.elapsed = 0
        self.clock.reset()
        self._enter(GamePhase.PLAYING)

        if is_won(self.grid):
            # The scramble cancelled itself out. Zero moves is not a valid score.
            logger.info("Scramble left the grid solved; round won in 0 moves")
            self.clock.stop()
            self._enter(GamePhase.WON)
        else:
            self.clock.start()
        return True

    def start(self) -> bool:
        """Run play, layout_complete and scramble_complete back to back."""
        return self.play() and self.layout_complete() and self.scramble_complete()

    def cell_click(self, row: int, col: int) -> bool:
        """
        Apply a click while PLAYING.

        Returns:
            True if the click was applied, False if the phase ignores clicks

        Raises:
            OutOfBounds: if (row, col) is outside the grid (state unchanged)
        """
        if self.phase is not GamePhase.PLAYING:
            return self._reject("cell_click")

        self.grid = toggle(self.grid, row, col, self._pattern)
        self.moves += 1

        if is_won(self.grid):
            self._win()
        return True

    def _win(self) -> None:
        self.clock.stop()
        logger.info("Round won in %d moves, %d ticks", self.moves, self.elapsed)
        if self.recorder is not None:
            self.last_score = self.recorder.record(self.moves, self.elapsed)
        self._enter(GamePhase.WON)

    def restart(self) -> bool:
        """PLAYING/WON -> PLAYING: restore the initial scrambled grid."""
        if self.phase not in (GamePhase.PLAYING, GamePhase.WON):
            return self._reject("restart")

        self.grid = self._initial_grid
        self.moves = 0
        self.elapsed = 0
        self.last_score = None
        self.clock.reset()
        self._enter(GamePhase.PLAYING)

        if is_won(self.grid):
            self.clock.stop()
            self._enter(GamePhase.WON)
        else:
            self.clock.start()
        return True

    def new_game(self) -> bool:
        """WON -> RESETTING: hand over to the host's visual reset."""
        if self.phase is not GamePhase.WON:
            return self._reject("new_game")

        self.clock.stop()
        self._enter(GamePhase.RESETTING)
        return True

    def reset_complete(self) -> bool:
        """RESETTING -> READY: clear the round."""
        if self.phase is not GamePhase.RESETTING:
            return self._reject("reset_complete")

        self.level = None
        self._pattern = None
        self.grid = Grid.empty()
        self._initial_grid = Grid.empty()
        self._picks = ()
        self.moves = 0
        self.elapsed = 0
        self.clock.reset()
        self._enter(GamePhase.READY)
        return True

    def on_tick(self) -> None:
        """Clock callback: one tick is one tenth of a second of play."""
        if self.phase is not GamePhase.PLAYING:
            logger.debug("Tick discarded in phase %s", self.phase.value)
            return
        self.elapsed += 1
