import numpy as np
import pytest

from colorfall.blocks import BLOCK_SHAPES, BlockType, rotate_shape


@pytest.mark.parametrize("block", list(BlockType))
def test_four_rotations_return_original(block):
    shape = BLOCK_SHAPES[block]
    rotated = shape
    for _ in range(4):
        rotated = rotate_shape(rotated)
    assert np.array_equal(rotated, shape)


def test_rotation_is_clockwise():
    shape = BLOCK_SHAPES[BlockType.ELL]  # [[1, 1], [1, 0]]
    assert rotate_shape(shape).astype(int).tolist() == [[1, 1], [0, 1]]
    bar = BLOCK_SHAPES[BlockType.BAR_H]  # [[1, 1], [0, 0]]
    assert rotate_shape(bar).astype(int).tolist() == [[0, 1], [0, 1]]


def test_templates_are_read_only():
    shape = BLOCK_SHAPES[BlockType.SQUARE]
    with pytest.raises(ValueError):
        shape[0, 0] = False
    rotated = rotate_shape(BLOCK_SHAPES[BlockType.ELL])
    assert BLOCK_SHAPES[BlockType.ELL].astype(int).tolist() == [[1, 1], [1, 0]]
    assert not rotated.flags.writeable
