"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import random

from .blocks import BLOCK_SHAPES, ActivePiece, BlockType, rotate_shape
from .board import Board
from .config import DEFAULT_CONFIG, GameConfig
from .utils import collides


@dataclass
class GameState:
    """Mutable state for a game session.

    ``running`` is ``False`` both before the first start and after a game
    over; ``game_over`` tells the two apart.
    """

    config: GameConfig = DEFAULT_CONFIG
    rng: random.Random = field(default_factory=random.Random)
    board: Board = field(init=False)
    active: Optional[ActivePiece] = None
    score: int = 0
    level: int = 1
    fall_interval_ms: int = field(init=False)
    running: bool = False
    paused: bool = False
    game_over: bool = False

    def __post_init__(self) -> None:
        self.board = Board(self.config.rows, self.config.cols, self.config.colors)
        self.fall_interval_ms = self.config.rules.fall_interval_ms(self.level)

    def reset_game(self) -> None:
        """Reset the entire game state for a new game.

        The board keeps its identity and is emptied in place.  No piece is
        spawned; callers do that once the session is running.
        """

        self.board.reset_all()
        self.active = None
        self.score = 0
        self.level = 1
        self.fall_interval_ms = self.config.rules.fall_interval_ms(self.level)
        self.running = False
        self.paused = False
        self.game_over = False

    def spawn_piece(self) -> Optional[ActivePiece]:
        """Spawn a random piece at the top centre of the board.

        When the spawn position is already blocked the game ends: ``running``
        drops to ``False`` and ``game_over`` is set.  The blocked piece stays
        in ``active`` so renderers can still show it.  Returns the new piece,
        or ``None`` on game over.
        """

        block = self.rng.choice(list(BlockType))
        color = self.rng.randint(1, self.config.colors)
        piece = ActivePiece(
            x=self.board.width // 2 - 1,
            y=0,
            shape=BLOCK_SHAPES[block],
            color=color,
        )
        self.active = piece
        if collides(self.board, piece.x, piece.y, piece.shape):
            self.running = False
            self.game_over = True
            return None
        return piece

    def move_active(self, dx: int, dy: int) -> bool:
        """Translate the active piece if the destination is free.

        Returns ``False`` without touching the piece when the move is blocked
        or there is no active piece.
        """

        piece = self.active
        if piece is None:
            return False
        x, y = piece.x + dx, piece.y + dy
        if collides(self.board, x, y, piece.shape):
            return False
        piece.x, piece.y = x, y
        return True

    def rotate_active(self) -> bool:
        """Rotate the active piece clockwise in place; no wall kicks."""

        piece = self.active
        if piece is None:
            return False
        rotated = rotate_shape(piece.shape)
        if collides(self.board, piece.x, piece.y, rotated):
            return False
        piece.shape = rotated
        return True

    def lock_active(self) -> None:
        """Commit the active piece into the board and retire it.

        Raises:
            RuntimeError: If there is no active piece.
        """

        if self.active is None:
            raise RuntimeError("No active piece to lock")
        self.board.lock_piece(self.active)
        self.active = None
