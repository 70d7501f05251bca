from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]


@dataclass
class LockResult:
    lines_cleared: int
    game_over: bool


class GameGrid:
    """Fixed-size well of locked cells.

    The grid uses 0 for empty cells and ``shape_index + 1`` for locked cells,
    so stored values double as color ids. Row 0 is the top of the well.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def collides(self, cells: Iterable[Coordinate]) -> bool:
        """True if any cell is off the sides/bottom or overlaps a locked cell.

        Cells above the top row (y < 0) are legal and never hit contents.
        """
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height:
                return True
            if y >= 0 and self.grid[y, x] != 0:
                return True
        return False

    def lock(self, cells: Iterable[Coordinate], value: int) -> LockResult:
        """Burn cells into the grid with `value`, clear lines, and return result.

        A piece with any cell above the top row is not written at all and the
        result reports game over.
        """
        cells = list(cells)
        if any(y < 0 for _, y in cells):
            return LockResult(lines_cleared=0, game_over=True)
        for x, y in cells:
            self.grid[y, x] = value
        return LockResult(lines_cleared=self.clear_full_lines(), game_over=False)

    def clear_full_lines(self) -> int:
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if np.all(self.grid[y] != 0):
                cleared += 1
                # Shift everything above down one row, then re-check this row.
                self.grid[1 : y + 1] = self.grid[0:y].copy()
                self.grid[0] = 0
            else:
                y -= 1
        return cleared

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def render_ascii(self) -> str:
        return "\n".join("".join("█" if cell else "·" for cell in row) for row in self.grid)
