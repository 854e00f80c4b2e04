"""Block shapes and the falling piece.

Shapes are small read-only boolean matrices.  Row ``0`` is the top of the
shape and column ``0`` its left edge, so an occupied ``(r, c)`` maps to the
grid cell ``(x + c, y + r)`` for a piece whose origin is ``(x, y)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Tuple

import numpy as np
from numpy.typing import NDArray

Shape = NDArray[np.bool_]


def _frozen(rows) -> Shape:
    shape = np.array(rows, dtype=bool)
    shape.flags.writeable = False
    return shape


class BlockType(str, Enum):
    """The five block templates a piece can spawn as."""

    SQUARE = "square"
    BAR_H = "bar_h"
    BAR_V = "bar_v"
    ELL = "ell"
    ELL_R = "ell_r"


BLOCK_SHAPES: Dict[BlockType, Shape] = {
    BlockType.SQUARE: _frozen([[1, 1], [1, 1]]),
    BlockType.BAR_H: _frozen([[1, 1], [0, 0]]),
    BlockType.BAR_V: _frozen([[1, 0], [1, 0]]),
    BlockType.ELL: _frozen([[1, 1], [1, 0]]),
    BlockType.ELL_R: _frozen([[1, 1], [0, 1]]),
}


def rotate_shape(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise as a new matrix.

    Equivalent to transposing and then reversing each row.  The input is
    never modified.
    """

    return _frozen(np.rot90(shape, k=-1))


def occupied_offsets(shape: Shape) -> Iterator[Tuple[int, int]]:
    """Yield ``(row, col)`` offsets of the occupied cells in ``shape``."""

    for r, c in zip(*np.nonzero(shape)):
        yield int(r), int(c)


@dataclass
class ActivePiece:
    """The piece currently under player control."""

    x: int
    y: int
    shape: Shape
    color: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the absolute ``(x, y)`` grid coordinates of the piece."""

        for r, c in occupied_offsets(self.shape):
            yield self.x + c, self.y + r
