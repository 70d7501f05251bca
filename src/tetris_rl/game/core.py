from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np

from .grid import GameGrid
from .movement import collides, project_ghost, try_move, try_rotate
from .pieces import Coordinate, Piece
from .rules import ScoringRules
from .shapes import NUM_SHAPES, Color
from .timing import DropScheduler


logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Intent(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    ROTATE_CW = 2
    SOFT_DROP_HELD = 3
    SOFT_DROP_RELEASED = 4
    HARD_DROP = 5
    PAUSE = 6
    RESUME = 7
    RESTART = 8


PLAY_INTENTS = frozenset(
    {
        Intent.MOVE_LEFT,
        Intent.MOVE_RIGHT,
        Intent.ROTATE_CW,
        Intent.SOFT_DROP_HELD,
        Intent.HARD_DROP,
    }
)


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    gravity_interval: float = 0.5
    soft_drop_interval: float = 0.1

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError(f"board must be at least 4x4, got {self.width}x{self.height}")
        if self.gravity_interval <= 0 or self.soft_drop_interval <= 0:
            raise ValueError("drop intervals must be positive")


@dataclass(frozen=True)
class Snapshot:
    """Read-only draw data for one frame."""

    board: np.ndarray
    piece_cells: Tuple[Coordinate, ...]
    piece_shape: int
    piece_color: Color
    ghost_cells: Tuple[Coordinate, ...]
    score: int
    lines_cleared: int
    state: GameState


class GameEngine:
    """Owns the board, the falling piece, the score and the game state.

    Drivers call `apply_intent` for each buffered input, `tick` once per
    frame with the elapsed time, then `snapshot` to render.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.scheduler = DropScheduler(
            gravity_interval=self.config.gravity_interval,
            soft_drop_interval=self.config.soft_drop_interval,
        )
        self.score = 0
        self.lines_cleared_total = 0
        self.state = GameState.PLAYING
        self.piece = Piece.spawn(0, self.grid.width)
        self.reset()

    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.scheduler.soft_drop = False
        self.scheduler.restart()
        self.state = GameState.PLAYING
        logger.info("New game on a %dx%d board", self.grid.width, self.grid.height)
        self._spawn_piece()

    def _spawn_piece(self) -> None:
        self.piece = Piece.spawn(self.rng.randrange(NUM_SHAPES), self.grid.width)
        if collides(self.piece, self.grid):
            self._game_over("spawn blocked")

    def _game_over(self, reason: str) -> None:
        self.state = GameState.GAME_OVER
        logger.info("Game over (%s): score=%d lines=%d", reason, self.score, self.lines_cleared_total)

    def apply_intent(self, intent: Intent) -> None:
        """Process one intent; intents that make no sense in the current state are ignored."""
        if intent == Intent.SOFT_DROP_RELEASED:
            self.scheduler.soft_drop = False
        elif self.state == GameState.PLAYING:
            if intent == Intent.PAUSE:
                self.state = GameState.PAUSED
            elif intent in PLAY_INTENTS:
                self._apply_play_intent(intent)
        elif self.state == GameState.PAUSED:
            if intent == Intent.RESUME:
                self.state = GameState.PLAYING
            elif intent == Intent.RESTART:
                self.reset()
        elif self.state == GameState.GAME_OVER:
            if intent == Intent.RESTART:
                self.reset()

    def _apply_play_intent(self, intent: Intent) -> None:
        candidate: Optional[Piece] = None
        if intent == Intent.MOVE_LEFT:
            candidate = try_move(self.piece, self.grid, -1, 0)
        elif intent == Intent.MOVE_RIGHT:
            candidate = try_move(self.piece, self.grid, 1, 0)
        elif intent == Intent.ROTATE_CW:
            candidate = try_rotate(self.piece, self.grid)
        elif intent == Intent.SOFT_DROP_HELD:
            self.scheduler.soft_drop = True
        elif intent == Intent.HARD_DROP:
            candidate = project_ghost(self.piece, self.grid)
            self.scheduler.restart()
        if candidate is not None:
            self.piece = candidate

    def tick(self, dt: float) -> None:
        """Advance time by `dt` seconds; may apply one gravity step."""
        if self.state != GameState.PLAYING:
            return
        if self.scheduler.advance(dt):
            self.gravity_step()

    def gravity_step(self) -> None:
        below = try_move(self.piece, self.grid, 0, 1)
        if below is not None:
            self.piece = below
        else:
            self._lock_piece()

    def _lock_piece(self) -> None:
        result = self.grid.lock(self.piece.cells(), self.piece.shape_index + 1)
        if result.game_over:
            self._game_over("piece locked above the board")
            return
        gained = self.rules.score_for_lines(result.lines_cleared)
        self.score += gained
        self.lines_cleared_total += result.lines_cleared
        logger.debug(
            "Locked %s at (%d, %d): lines=%d gained=%d score=%d",
            self.piece.kind.name,
            self.piece.x,
            self.piece.y,
            result.lines_cleared,
            gained,
            self.score,
        )
        self._spawn_piece()

    def ghost(self) -> Optional[Piece]:
        if self.state == GameState.GAME_OVER:
            return None
        return project_ghost(self.piece, self.grid)

    def snapshot(self) -> Snapshot:
        board = self.grid.clone_state()
        board.setflags(write=False)
        ghost = self.ghost()
        return Snapshot(
            board=board,
            piece_cells=tuple(self.piece.cells()),
            piece_shape=self.piece.shape_index,
            piece_color=self.piece.color,
            ghost_cells=tuple(ghost.cells()) if ghost is not None else (),
            score=self.score,
            lines_cleared=self.lines_cleared_total,
            state=self.state,
        )
