from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetris_rl.game import GameConfig, GameEngine, GameState, Intent, color_for_cell
from tetris_rl.game.shapes import NUM_SHAPES


class TetrisEnv(gym.Env):
    """
    Real-time Tetris played through a small discrete action space.

    Actions (6 total):
      0: No-op
      1: Move Left
      2: Move Right
      3: Rotate CW
      4: Soft Drop (held for this step only)
      5: Hard Drop

    Each step applies the action as an engine intent and then advances the
    engine clock by `step_time` seconds. The default is just over one gravity
    interval, so every step applies exactly one gravity step (a hard drop
    followed by that step locks the piece).
    """

    metadata = {"render_modes": ["ansi", "rgb_array"], "render_fps": 4}

    ACT_NOOP = 0
    ACT_LEFT = 1
    ACT_RIGHT = 2
    ACT_ROTATE = 3
    ACT_SOFT_DROP = 4
    ACT_HARD_DROP = 5

    _ACTION_INTENTS = {
        ACT_LEFT: Intent.MOVE_LEFT,
        ACT_RIGHT: Intent.MOVE_RIGHT,
        ACT_ROTATE: Intent.ROTATE_CW,
        ACT_SOFT_DROP: Intent.SOFT_DROP_HELD,
        ACT_HARD_DROP: Intent.HARD_DROP,
    }

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        step_time: float = 0.55,
        max_episode_steps: int = 5000,
    ) -> None:
        super().__init__()
        self.engine = GameEngine(config)
        self.render_mode = render_mode
        self.step_time = float(step_time)
        self.max_episode_steps = int(max_episode_steps)

        h, w = self.engine.grid.height, self.engine.grid.width
        # Locked cells are positive shape ids, the falling piece is negative.
        self.observation_space = spaces.Box(low=-NUM_SHAPES, high=NUM_SHAPES, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(6)

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        state = self.engine.grid.clone_state()
        if self.engine.state != GameState.GAME_OVER:
            value = -(self.engine.piece.shape_index + 1)
            for x, y in self.engine.piece.cells():
                if self.engine.grid.is_inside(x, y):
                    state[y, x] = value
        return state

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.engine.score,
            "lines_cleared_total": self.engine.lines_cleared_total,
            "state": self.engine.state.value,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.engine.rng.seed(seed)
        self.engine.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = int(action)
        score_before = self.engine.score

        intent = self._ACTION_INTENTS.get(action)
        if intent is not None:
            self.engine.apply_intent(intent)
        self.engine.tick(self.step_time)
        if action == self.ACT_SOFT_DROP:
            self.engine.apply_intent(Intent.SOFT_DROP_RELEASED)

        self._steps += 1
        reward = float(self.engine.score - score_before)
        terminated = self.engine.state == GameState.GAME_OVER
        truncated = self._steps >= self.max_episode_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self):
        if self.render_mode == "ansi":
            rows = []
            for row in self._get_obs():
                rows.append("".join("#" if v < 0 else ("█" if v > 0 else "·") for v in row))
            rows.append(f"score {self.engine.score}")
            return "\n".join(rows)
        if self.render_mode == "rgb_array":
            grid = self._get_obs()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_cell(int(grid[y, x]))
            return img
        return None

    def close(self) -> None:
        pass
