"""Run detection, clearing and gravity compaction.

One *pass* scans every row left to right, then every column top to bottom,
clearing each maximal run of three or more equal colours.  Cells emptied by
the row scan read as empty during the column scan of the same pass.  When a
pass clears anything the score is updated, the level threshold checked and
every column compacted downward.  Passes repeat until one clears nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, TYPE_CHECKING

import numpy as np

from .board import Board
from .scoring import award_clear

if TYPE_CHECKING:  # pragma: no cover
    from .game_state import GameState


MIN_RUN = 3


@dataclass(frozen=True)
class PassResult:
    """Outcome of a single clear+gravity pass."""

    cleared: int
    points: int
    leveled_up: bool


def _clear_line(line: np.ndarray) -> int:
    """Clear runs in a 1D view of the grid in place and return the cell count."""

    cleared = 0
    n = len(line)
    i = 0
    while i < n - (MIN_RUN - 1):
        color = line[i]
        if color and line[i + 1] == color and line[i + 2] == color:
            end = i + MIN_RUN
            while end < n and line[end] == color:
                end += 1
            line[i:end] = 0
            cleared += end - i
            i = end
        else:
            i += 1
    return cleared


def clear_runs(board: Board) -> int:
    """Clear every horizontal then vertical run and return the cells removed."""

    grid = board.grid
    cleared = 0
    for row in range(board.height):
        cleared += _clear_line(grid[row, :])
    for col in range(board.width):
        cleared += _clear_line(grid[:, col])
    return cleared


def apply_gravity(board: Board) -> None:
    """Compact each column toward the bottom, keeping the order of its cells."""

    grid = board.grid
    for col in range(board.width):
        column = grid[:, col]
        filled = column[column != 0]
        column[:] = 0
        if filled.size:
            column[board.height - filled.size:] = filled


def resolve_pass(state: "GameState") -> PassResult:
    """Run one detection+clear+gravity pass against ``state``."""

    cleared = clear_runs(state.board)
    if not cleared:
        return PassResult(cleared=0, points=0, leveled_up=False)
    before = state.score
    leveled_up = award_clear(state, cleared)
    apply_gravity(state.board)
    return PassResult(cleared=cleared, points=state.score - before, leveled_up=leveled_up)


def resolve_chain(state: "GameState") -> List[PassResult]:
    """Repeat passes until the board is stable; return the clearing passes.

    Every pass that clears cells removes at least three of them, so the loop
    ends after at most ``rows * cols / 3`` clearing passes.
    """

    results: List[PassResult] = []
    while True:
        result = resolve_pass(state)
        if not result.cleared:
            return results
        results.append(result)
