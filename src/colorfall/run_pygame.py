"""Simple pygame front-end for the game engine.

This module is only a presentation adapter: it draws the board and active
piece, forwards key presses to :class:`~colorfall.game_loop.GameLoop` and
shows score/level in the window caption.  All game rules live in the engine.

Keys: arrows move and soft-drop, space rotates, ``P`` pauses, ``Enter``
starts and ``R`` restarts.
"""

from __future__ import annotations

import os
import asyncio
import logging
from collections import deque
from typing import Deque, Optional

import pygame

from .blocks import ActivePiece
from .board import Board
from .game_loop import GameLoop, Phase
from .scheduler import AsyncioScheduler

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to redraw at
FPS = 60

BACKGROUND = (26, 26, 46)
GRID_LINE = (22, 33, 62)

# Colour index -> RGB; index 0 is an empty cell
PALETTE = [
    BACKGROUND,
    (255, 107, 107),
    (78, 205, 196),
    (69, 183, 209),
    (255, 160, 122),
    (152, 216, 200),
    (247, 220, 111),
]


LOGGER = logging.getLogger(__name__)

_LOG_BUFFER: Deque[str] = deque(maxlen=200)


def log(msg: str) -> None:
    """Record a diagnostics message and forward it to the module logger."""

    _LOG_BUFFER.append(msg)
    LOGGER.info(msg)


def draw_board(screen: pygame.Surface, board: Board) -> None:
    """Render the locked cells and grid lines."""

    for r in range(board.height):
        for c in range(board.width):
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, PALETTE[board.grid[r][c]], rect)
            pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_piece(screen: pygame.Surface, piece: Optional[ActivePiece]) -> None:
    """Render the falling piece."""

    if piece is None:
        return
    color = PALETTE[piece.color]
    for x, y in piece.cells():
        if y < 0:
            continue
        rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        pygame.draw.rect(screen, color, rect.inflate(-2, -2))


def handle_key(event: pygame.event.Event, game: GameLoop) -> bool:
    """Translate a key press into a game command.

    Returns the command's result, or ``False`` for unmapped keys.
    """

    key = event.key
    if key == pygame.K_LEFT:
        return game.move_left()
    if key == pygame.K_RIGHT:
        return game.move_right()
    if key == pygame.K_DOWN:
        return game.soft_drop()
    if key == pygame.K_SPACE:
        return game.rotate()
    if key == pygame.K_p:
        return game.toggle_pause()
    if key == pygame.K_RETURN:
        return game.start()
    if key == pygame.K_r:
        return game.restart()
    return False


def caption(game: GameLoop) -> str:
    state = game.state
    phase = game.phase
    prefix = ""
    if phase is Phase.PAUSED:
        prefix = "Paused - "
    elif phase is Phase.GAME_OVER:
        prefix = "Game Over - "
    return f"Colorfall - {prefix}Score: {state.score} Level: {state.level}"


class GameRunner:
    """Own the pygame window and feed events to a game loop."""

    def __init__(self) -> None:
        self._running = False
        self._screen: Optional[pygame.Surface] = None
        self.game: Optional[GameLoop] = None

    def _draw(self) -> None:
        if self._screen is None or self.game is None:
            return
        state = self.game.state
        self._screen.fill(BACKGROUND)
        draw_board(self._screen, state.board)
        if state.running or state.game_over:
            draw_piece(self._screen, state.active)
        pygame.display.set_caption(caption(self.game))
        pygame.display.flip()

    async def run(self) -> None:
        # Ensure SDL/pygame binds to the visible canvas in the page when running on Web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        self.game = GameLoop(AsyncioScheduler())
        board = self.game.state.board
        self._screen = pygame.display.set_mode(
            (board.width * CELL_SIZE, board.height * CELL_SIZE)
        )
        self._running = True
        self.game.start()
        log("Window opened")

        while self._running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(event, self.game)
            self._draw()
            # Yield to the event loop so scheduled ticks can fire
            await asyncio.sleep(1 / FPS)

        pygame.quit()
        log("Window closed")


def main() -> None:
    """Open a window and play until it is closed."""
    logging.basicConfig(level=logging.INFO)
    asyncio.run(GameRunner().run())


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
