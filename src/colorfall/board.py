"""Board representation for the playfield."""

from __future__ import annotations

from typing import List

import numpy as np
from numpy.typing import NDArray

from .blocks import ActivePiece
from .config import COLORS, HEIGHT, WIDTH

Grid = NDArray[np.uint8]


def create_empty_grid(rows: int = HEIGHT, cols: int = WIDTH) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((rows, cols), dtype=np.uint8)


class Board:
    """Fixed-size grid of colour indices; ``0`` marks an empty cell.

    Coordinates are always ``(row, col)`` with row ``0`` at the top.  The
    dimensions are fixed for the lifetime of the board.
    """

    def __init__(self, rows: int = HEIGHT, cols: int = WIDTH, colors: int = COLORS) -> None:
        self.height = rows
        self.width = cols
        self.colors = colors
        self.grid: Grid = create_empty_grid(rows, cols)

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError("Cell out of bounds")

    def get_cell(self, row: int, col: int) -> int:
        """Return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        self._check(row, col)
        return int(self.grid[row, col])

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
            ValueError: If ``value`` is not a valid colour index or ``0``.
        """
        self._check(row, col)
        if not 0 <= value <= self.colors:
            raise ValueError(f"Cell value {value} outside 0..{self.colors}")
        self.grid[row, col] = np.uint8(value)

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        self._check(row, col)
        return bool(self.grid[row, col] == 0)

    def reset_all(self) -> None:
        """Empty every cell in place."""

        self.grid.fill(0)

    def lock_piece(self, piece: ActivePiece) -> None:
        """Write the piece's on-board cells into the grid in its colour.

        Cells still above the board (negative row) are dropped.
        """

        for x, y in piece.cells():
            if y >= 0:
                self.set_cell(y, x, piece.color)

    def snapshot(self) -> List[List[int]]:
        """Return the grid as nested lists of ``int``."""

        return self.grid.tolist()
