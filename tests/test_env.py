from __future__ import annotations

import numpy as np
import pytest

gym = pytest.importorskip("gymnasium")

import falling_blocks.env  # noqa: F401  registers the environment
from falling_blocks.env.falling_blocks_env import Action, FallingBlocksEnv
from falling_blocks.game import GameConfig


def test_reset_observation():
    env = FallingBlocksEnv()
    obs, info = env.reset(seed=3)
    assert obs.shape == (27, 15)
    assert obs.dtype == np.int8
    assert env.observation_space.contains(obs)
    assert int(np.count_nonzero(obs < 0)) == 4
    assert info["score"] == 0 and info["level"] == 1


def test_seeded_reset_is_reproducible():
    env = FallingBlocksEnv()
    first, _ = env.reset(seed=42)
    second, _ = env.reset(seed=42)
    assert np.array_equal(first, second)
    assert env.game.factory.rng is env.game.rng


def test_step_applies_gravity():
    env = FallingBlocksEnv()
    env.reset(seed=1)
    y = env.game.active.y
    obs, reward, terminated, truncated, info = env.step(Action.NONE)
    assert env.game.active.y == y + 1
    assert reward == 0.0
    assert not terminated and not truncated
    assert info["steps"] == 1


def test_episode_terminates_when_stack_tops_out():
    env = FallingBlocksEnv(GameConfig(rows=12, cols=8))
    env.reset(seed=0)
    terminated = False
    for _ in range(2000):
        _, _, terminated, truncated, _ = env.step(Action.NONE)
        if terminated:
            break
    assert terminated
    assert env.game.game_over


def test_truncation_at_step_limit():
    env = FallingBlocksEnv(max_episode_steps=3)
    env.reset(seed=5)
    results = [env.step(Action.LEFT) for _ in range(3)]
    assert results[-1][3] is True
    assert not any(r[3] for r in results[:-1])


def test_rgb_render():
    env = FallingBlocksEnv(render_mode="rgb_array")
    env.reset(seed=2)
    img = env.render()
    assert img.shape == (27 * 12, 15 * 12, 3)
    assert img.dtype == np.uint8


def test_registered_id():
    env = gym.make("FallingBlocks-27x15-v0")
    obs, _ = env.reset(seed=9)
    assert obs.shape == (27, 15)
    env.close()
