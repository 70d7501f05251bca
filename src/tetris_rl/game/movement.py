"""Collision checks, kicked rotation and resting-position projection.

Every movement decision follows the same pattern: build a candidate Piece
and accept it only if it does not collide with the grid.
"""

from __future__ import annotations

from typing import Optional

from .grid import GameGrid
from .pieces import Piece


# Tried in this order; the first legal offset wins.
KICK_OFFSETS = (0, 1, -1, 2, -2)


def collides(piece: Piece, grid: GameGrid) -> bool:
    return grid.collides(piece.cells())


def try_move(piece: Piece, grid: GameGrid, dx: int, dy: int) -> Optional[Piece]:
    candidate = piece.moved(dx, dy)
    if collides(candidate, grid):
        return None
    return candidate


def try_rotate(piece: Piece, grid: GameGrid) -> Optional[Piece]:
    """Rotate clockwise, kicking sideways if needed; None if nothing fits."""
    rotated = piece.rotated(1)
    for dx in KICK_OFFSETS:
        candidate = rotated.moved(dx, 0)
        if not collides(candidate, grid):
            return candidate
    return None


def project_ghost(piece: Piece, grid: GameGrid) -> Piece:
    """Lowest legal position straight below `piece`."""
    resting = piece
    while True:
        below = try_move(resting, grid, 0, 1)
        if below is None:
            return resting
        resting = below
