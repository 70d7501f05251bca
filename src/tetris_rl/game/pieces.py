from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Tuple

import numpy as np

from .shapes import COLORS, NUM_SHAPES, Color, TetrominoType, shape_offsets


Coordinate = Tuple[int, int]


# Row-vector form: rotated = offset @ matrix.
#   r=0 -> (x, y), r=1 -> (y, -x), r=2 -> (-x, -y), r=3 -> (-y, x)
ROTATION_MATRICES = (
    np.array([[1, 0], [0, 1]], dtype=np.int8),
    np.array([[0, -1], [1, 0]], dtype=np.int8),
    np.array([[-1, 0], [0, -1]], dtype=np.int8),
    np.array([[0, 1], [-1, 0]], dtype=np.int8),
)


def rotate_offsets(offsets: np.ndarray, rotation: int) -> np.ndarray:
    return offsets @ ROTATION_MATRICES[rotation % 4]


@dataclass(frozen=True)
class Piece:
    """A falling tetromino.

    Pieces are values: moving or rotating returns a new Piece, so a trial
    candidate never aliases the committed one.
    """

    x: int
    y: int
    shape_index: int
    rotation: int = 0  # 0..3

    def __post_init__(self) -> None:
        assert 0 <= self.shape_index < NUM_SHAPES, f"bad shape index {self.shape_index}"
        assert 0 <= self.rotation < 4, f"bad rotation {self.rotation}"

    @classmethod
    def spawn(cls, shape_index: int, board_width: int) -> "Piece":
        return cls(x=board_width // 2, y=0, shape_index=shape_index, rotation=0)

    @property
    def kind(self) -> TetrominoType:
        return TetrominoType(self.shape_index)

    @property
    def color(self) -> Color:
        return COLORS[self.kind]

    def cells(self) -> Iterator[Coordinate]:
        """Yield the 4 absolute board coordinates this piece occupies."""
        for dx, dy in rotate_offsets(shape_offsets(self.shape_index), self.rotation):
            yield self.x + int(dx), self.y + int(dy)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, delta: int = 1) -> "Piece":
        return replace(self, rotation=(self.rotation + delta) % 4)
