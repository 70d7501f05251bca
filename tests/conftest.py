from __future__ import annotations

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from tetris_rl.game import GameConfig, GameEngine, GameGrid


@pytest.fixture
def grid() -> GameGrid:
    return GameGrid(10, 20)


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine(GameConfig(random_seed=1234))
