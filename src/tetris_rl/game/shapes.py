from __future__ import annotations

from enum import IntEnum
from typing import Tuple

import numpy as np


class TetrominoType(IntEnum):
    O = 0
    I = 1
    T = 2
    S = 3
    Z = 4
    L = 5
    J = 6


Color = Tuple[int, int, int]


# Offsets are relative to the shape-local origin, which is also the rotation
# pivot. Do not re-center them.
SHAPES = {
    TetrominoType.O: np.array([(0, 0), (1, 0), (0, 1), (1, 1)], dtype=np.int8),
    TetrominoType.I: np.array([(0, 0), (0, 1), (0, 2), (0, 3)], dtype=np.int8),
    TetrominoType.T: np.array([(0, 0), (1, 0), (2, 0), (1, 1)], dtype=np.int8),
    TetrominoType.S: np.array([(0, 0), (1, 0), (1, 1), (2, 1)], dtype=np.int8),
    TetrominoType.Z: np.array([(1, 0), (2, 0), (0, 1), (1, 1)], dtype=np.int8),
    TetrominoType.L: np.array([(0, 0), (0, 1), (0, 2), (1, 2)], dtype=np.int8),
    TetrominoType.J: np.array([(1, 0), (1, 1), (1, 2), (0, 2)], dtype=np.int8),
}

COLORS = {
    TetrominoType.O: (240, 240, 0),
    TetrominoType.I: (0, 240, 240),
    TetrominoType.T: (160, 0, 240),
    TetrominoType.S: (0, 240, 0),
    TetrominoType.Z: (240, 0, 0),
    TetrominoType.L: (240, 160, 0),
    TetrominoType.J: (0, 0, 240),
}

EMPTY_COLOR: Color = (20, 20, 26)

NUM_SHAPES = len(TetrominoType)

for _kind in TetrominoType:
    assert SHAPES[_kind].shape == (4, 2), f"{_kind.name} must have exactly 4 cells"
    assert _kind in COLORS, f"{_kind.name} has no color"
for _offsets in SHAPES.values():
    _offsets.setflags(write=False)


def shape_offsets(shape_index: int) -> np.ndarray:
    """Return the (4, 2) read-only offset array for a catalog index."""
    return SHAPES[TetrominoType(shape_index)]


def color_for_cell(value: int) -> Color:
    """Map a stored board value (0 empty, shape index + 1 locked) to RGB."""
    if value == 0:
        return EMPTY_COLOR
    return COLORS[TetrominoType(abs(int(value)) - 1)]
