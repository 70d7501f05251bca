from __future__ import annotations

import gymnasium as gym
import numpy as np

import tetris_rl.env  # noqa: F401
from tetris_rl.env.tetris_env import TetrisEnv
from tetris_rl.rl.random_agent import run_random


def test_registered_env_resets_into_observation_space():
    env = gym.make("Tetris-10x20-v0")
    obs, info = env.reset(seed=0)
    assert obs.shape == (20, 10)
    assert env.observation_space.contains(obs)
    assert obs.min() < 0  # falling piece overlay
    assert info["score"] == 0
    env.close()


def test_hard_drops_end_the_episode():
    env = TetrisEnv(max_episode_steps=10_000)
    env.reset(seed=3)
    total = 0.0
    terminated = False
    for _ in range(2000):
        obs, reward, terminated, truncated, info = env.step(TetrisEnv.ACT_HARD_DROP)
        assert reward >= 0
        total += reward
        if terminated:
            break
    assert terminated
    assert info["state"] == "game_over"
    assert total == info["score"]


def test_soft_drop_action_is_released_after_the_step():
    env = TetrisEnv()
    env.reset(seed=1)
    env.step(TetrisEnv.ACT_SOFT_DROP)
    assert not env.engine.scheduler.soft_drop


def test_truncation_after_max_steps():
    env = TetrisEnv(max_episode_steps=2)
    env.reset(seed=1)
    _, _, _, truncated, _ = env.step(TetrisEnv.ACT_NOOP)
    assert not truncated
    _, _, _, truncated, _ = env.step(TetrisEnv.ACT_NOOP)
    assert truncated


def test_render_modes():
    env = TetrisEnv(render_mode="ansi")
    env.reset(seed=2)
    text = env.render()
    assert "#" in text
    assert text.splitlines()[-1] == "score 0"
    env = TetrisEnv(render_mode="rgb_array")
    env.reset(seed=2)
    img = env.render()
    assert img.shape == (240, 120, 3)
    assert img.dtype == np.uint8


def test_random_agent_runs(capsys):
    total = run_random(steps=50, seed=4)
    assert total >= 0
    assert "total reward" in capsys.readouterr().out
