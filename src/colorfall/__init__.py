"""Falling-block colour-match puzzle engine."""

from .blocks import ActivePiece, BlockType, BLOCK_SHAPES, rotate_shape
from .board import Board
from .config import GameConfig, DEFAULT_CONFIG
from .game_state import GameState
from .game_loop import GameLoop, Phase
from .gym_env import ColorfallEnv
from .resolver import PassResult, apply_gravity, clear_runs, resolve_chain, resolve_pass
from .scheduler import AsyncioScheduler, ManualScheduler
from .scoring import ScoringRules
from .utils import collides, render_grid

__all__ = [
    "ActivePiece",
    "BlockType",
    "BLOCK_SHAPES",
    "Board",
    "GameConfig",
    "DEFAULT_CONFIG",
    "GameState",
    "GameLoop",
    "ColorfallEnv",
    "Phase",
    "PassResult",
    "ScoringRules",
    "AsyncioScheduler",
    "ManualScheduler",
    "apply_gravity",
    "clear_runs",
    "collides",
    "render_grid",
    "resolve_chain",
    "resolve_pass",
    "rotate_shape",
]
