"""Utility helpers for the engine."""

from __future__ import annotations

from typing import List, Optional

from .blocks import ActivePiece, Shape, occupied_offsets
from .board import Board


def collides(board: Board, x: int, y: int, shape: Shape) -> bool:
    """Return ``True`` if ``shape`` placed with its origin at ``(x, y)`` overlaps.

    A cell collides when its column falls outside the board, when it sits on
    or below the floor, or when it lands on an occupied grid cell.  Cells above
    the top edge (negative rows) are only checked horizontally so freshly
    spawned pieces may hang partly off the board.  Movement and rotation are
    both validated through this function before being applied.
    """

    for r, c in occupied_offsets(shape):
        col = x + c
        row = y + r
        if col < 0 or col >= board.width or row >= board.height:
            return True
        if row >= 0 and not board.is_empty(row, col):
            return True
    return False


def render_grid(board: Board, active: Optional[ActivePiece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece).
    """

    grid = board.snapshot()
    if active is not None:
        for x, y in active.cells():
            if 0 <= y < board.height and 0 <= x < board.width:
                grid[y][x] = active.color
    return grid
