"""Game module for Tetris RL.

Exports the core game engine and supporting classes:
- GameGrid: Well of locked cells, collision queries and line clearing
- Piece: Tetromino value with rotation mechanics
- TetrominoType: Enum of the 7 catalog shapes
- DropScheduler: Elapsed-time gravity
- ScoringRules: Per-line scoring
- GameEngine: State machine driven by intents and ticks
"""

from .grid import GameGrid, LockResult
from .pieces import Piece
from .shapes import COLORS, SHAPES, TetrominoType, color_for_cell
from .movement import KICK_OFFSETS, collides, project_ghost, try_move, try_rotate
from .timing import DropScheduler
from .rules import ScoringRules
from .core import GameConfig, GameEngine, GameState, Intent, Snapshot

__all__ = [
    "GameGrid",
    "LockResult",
    "Piece",
    "TetrominoType",
    "SHAPES",
    "COLORS",
    "color_for_cell",
    "KICK_OFFSETS",
    "collides",
    "project_ghost",
    "try_move",
    "try_rotate",
    "DropScheduler",
    "ScoringRules",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Intent",
    "Snapshot",
]
