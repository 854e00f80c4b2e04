"""Game loop: lifecycle, periodic falling and player commands.

The loop owns the :class:`GameState` and is its only mutator.  Everything runs
on a single thread: commands are plain method calls and timers are delivered
by a :class:`~colorfall.scheduler.Scheduler`, so no two mutations overlap.

After a piece locks the first clearing pass runs immediately.  Any further
chain passes are scheduled ``chain_delay_ms`` apart as separate timer
callbacks, so commands such as pause are seen between passes.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable, Optional

from .config import DEFAULT_CONFIG, GameConfig
from .game_state import GameState
from .resolver import PassResult, resolve_pass
from .scheduler import Scheduler, TimerHandle
from .scoring import award_soft_drop


LOGGER = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameLoop:
    """Drive a game session from timer ticks and player commands.

    Every command returns ``True`` when it changed the game and ``False`` when
    it was rejected (blocked move, wrong phase, ...).
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        config: GameConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
        on_update: Optional[Callable[[GameState], None]] = None,
    ) -> None:
        self._scheduler = scheduler
        self.state = GameState(config=config, rng=rng or random.Random())
        self.on_update = on_update
        self._tick_timer: Optional[TimerHandle] = None
        self._chain_timer: Optional[TimerHandle] = None
        # Chain pass that came due while paused; replayed on resume.
        self._chain_held = False

    @property
    def phase(self) -> Phase:
        if self.state.game_over:
            return Phase.GAME_OVER
        if not self.state.running:
            return Phase.IDLE
        if self.state.paused:
            return Phase.PAUSED
        return Phase.RUNNING

    @property
    def chain_pending(self) -> bool:
        return self._chain_timer is not None or self._chain_held

    def _notify(self) -> None:
        if self.on_update is not None:
            self.on_update(self.state)

    # Timers ------------------------------------------------------------
    def _start_ticks(self) -> None:
        self._stop_ticks()
        self._tick_timer = self._scheduler.call_every(self.state.fall_interval_ms, self.tick)

    def _stop_ticks(self) -> None:
        if self._tick_timer is not None:
            self._tick_timer.cancel()
            self._tick_timer = None

    def _cancel_chain(self) -> None:
        if self._chain_timer is not None:
            self._chain_timer.cancel()
            self._chain_timer = None
        self._chain_held = False

    def _schedule_chain(self) -> None:
        self._chain_timer = self._scheduler.call_later(
            self.state.config.chain_delay_ms, self._chain_step
        )

    # Lifecycle ---------------------------------------------------------
    def start(self) -> bool:
        """Begin a fresh game unless one is already in progress."""

        if self.state.running:
            LOGGER.debug("Start ignored: game already running")
            return False
        return self.restart()

    def restart(self) -> bool:
        """Throw away the current session and start a new one."""

        self._stop_ticks()
        self._cancel_chain()
        self.state.reset_game()
        self.state.running = True
        LOGGER.info("Game started")
        if self.state.spawn_piece() is None:
            self._end_game()
        else:
            self._start_ticks()
        self._notify()
        return True

    def toggle_pause(self) -> bool:
        if not self.state.running:
            LOGGER.debug("Pause ignored: game not running")
            return False
        self.state.paused = not self.state.paused
        if self.state.paused:
            LOGGER.info("Paused")
        else:
            LOGGER.info("Resumed")
            if self._chain_held:
                self._chain_held = False
                self._schedule_chain()
        self._notify()
        return True

    def _end_game(self) -> None:
        self._stop_ticks()
        self._cancel_chain()
        self.state.running = False
        self.state.game_over = True
        LOGGER.info("Game over (score=%d, level=%d)", self.state.score, self.state.level)

    # Commands ----------------------------------------------------------
    def _accepting_input(self, command: str) -> bool:
        if not self.state.running or self.state.paused:
            LOGGER.debug("%s ignored in phase %s", command, self.phase.value)
            return False
        return True

    def move_left(self) -> bool:
        return self._move("move_left", -1)

    def move_right(self) -> bool:
        return self._move("move_right", 1)

    def _move(self, command: str, dx: int) -> bool:
        if not self._accepting_input(command):
            return False
        moved = self.state.move_active(dx, 0)
        if moved:
            self._notify()
        return moved

    def soft_drop(self) -> bool:
        """Move the piece down one row and award a point if it moved.

        A blocked soft drop does not lock the piece; locking is left to the
        next tick.
        """

        if not self._accepting_input("soft_drop"):
            return False
        if not self.state.move_active(0, 1):
            return False
        award_soft_drop(self.state)
        self._notify()
        return True

    def rotate(self) -> bool:
        if not self._accepting_input("rotate"):
            return False
        rotated = self.state.rotate_active()
        if rotated:
            self._notify()
        return rotated

    # Timer callbacks ---------------------------------------------------
    def tick(self) -> None:
        """Advance the active piece one row, locking it when it cannot fall."""

        if not self.state.running or self.state.paused:
            return
        if not self.state.move_active(0, 1):
            self.state.lock_active()
            self._run_pass()
            if self.state.spawn_piece() is None:
                self._end_game()
        self._notify()

    def _chain_step(self) -> None:
        self._chain_timer = None
        if not self.state.running:
            return
        if self.state.paused:
            self._chain_held = True
            return
        self._run_pass()
        self._notify()

    def _run_pass(self) -> PassResult:
        result = resolve_pass(self.state)
        if not result.cleared:
            return result
        LOGGER.debug(
            "Cleared %d cell(s) for %d point(s); score %d",
            result.cleared,
            result.points,
            self.state.score,
        )
        if result.leveled_up:
            LOGGER.info(
                "Level up -> %d (fall interval %d ms)",
                self.state.level,
                self.state.fall_interval_ms,
            )
            self._start_ticks()
        self._cancel_chain()
        self._schedule_chain()
        return result
