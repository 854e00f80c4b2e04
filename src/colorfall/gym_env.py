"""Gymnasium-compatible wrapper around the game loop.

Observation is a flat vector suitable for SB3 MlpPolicy by default: the board
with the active piece overlaid (``rows * cols`` entries), each cell's colour
index divided by the number of colours so values lie in ``[0, 1]``.

Action space is Discrete(5):

  0. no-op
  1. move left
  2. move right
  3. soft drop
  4. rotate

Each step applies the action and then advances the virtual clock by one fall
interval, so exactly one automatic tick (plus any chain passes that come due)
happens per step.  Reward is the score gained during the step.
"""

from __future__ import annotations

import random
from typing import Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import DEFAULT_CONFIG, GameConfig
from .game_loop import GameLoop
from .scheduler import ManualScheduler
from .utils import render_grid


NOOP, LEFT, RIGHT, SOFT_DROP, ROTATE = range(5)


class ColorfallEnv(gym.Env):
    metadata = {
        "render_modes": ["ansi"],
        "render_fps": 60,
    }

    def __init__(
        self,
        *,
        config: GameConfig = DEFAULT_CONFIG,
        max_steps: Optional[int] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.render_mode = render_mode
        self._scheduler = ManualScheduler()
        self._loop = GameLoop(self._scheduler, config=config, rng=random.Random())
        self._commands = {
            LEFT: self._loop.move_left,
            RIGHT: self._loop.move_right,
            SOFT_DROP: self._loop.soft_drop,
            ROTATE: self._loop.rotate,
        }
        self.action_space = spaces.Discrete(5)
        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(config.rows * config.cols,), dtype=np.float32
        )
        self._steps = 0
        self._max_steps = max_steps

    @property
    def game(self) -> GameLoop:
        return self._loop

    # ----------------------- Env API -----------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self._loop.state.rng.seed(seed)
        self._loop.restart()
        self._steps = 0
        return self._observation(), self._info()

    def step(self, action: int):
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action!r}")
        state = self._loop.state
        before = state.score
        command = self._commands.get(int(action))
        if command is not None:
            command()
        if state.running:
            self._scheduler.advance(state.fall_interval_ms)
        self._steps += 1
        reward = float(state.score - before)
        terminated = state.game_over
        truncated = self._max_steps is not None and self._steps >= self._max_steps
        return self._observation(), reward, terminated, truncated, self._info()

    def render(self):
        state = self._loop.state
        lines = [
            "".join(str(v) if v else "." for v in row)
            for row in render_grid(state.board, state.active)
        ]
        lines.append(f"score={state.score} level={state.level}")
        return "\n".join(lines)

    def close(self):
        return None

    # -------------------- Helpers -------------------------
    def _observation(self) -> np.ndarray:
        state = self._loop.state
        grid = np.array(render_grid(state.board, state.active), dtype=np.float32)
        return (grid / float(self.config.colors)).reshape(-1)

    def _info(self) -> Dict:
        state = self._loop.state
        return {
            "score": state.score,
            "level": state.level,
            "fall_interval_ms": state.fall_interval_ms,
        }
