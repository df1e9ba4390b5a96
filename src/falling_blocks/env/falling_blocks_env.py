from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import PALETTE, GameConfig, GameSession, ScoringRules


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    NONE = 4


class FallingBlocksEnv(gym.Env):
    """Step-driven wrapper around a GameSession.

    Each step applies the chosen action and then one gravity step, so the
    piece always descends by at most two rows per step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 render_mode: Optional[str] = None, max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)
        self.game = GameSession(self.config, rules=rules)
        self._steps = 0

        n = len(PALETTE)
        self.observation_space = spaces.Box(
            low=-n, high=n, shape=(self.config.rows, self.config.cols), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        progress = self.game.progress
        return {
            "score": progress.score,
            "level": progress.level,
            "lines_cleared": progress.lines_cleared,
            "drop_interval": progress.drop_interval,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = Action(int(action))
        score_before = self.game.score

        if action == Action.LEFT:
            self.game.move(-1, 0)
        elif action == Action.RIGHT:
            self.game.move(1, 0)
        elif action == Action.ROTATE:
            self.game.rotate()
        elif action == Action.SOFT_DROP:
            self.game.move(0, 1)
        # Gravity
        if self.game.running:
            self.game.move(0, 1)

        self._steps += 1
        terminated = self.game.game_over
        truncated = not terminated and self._steps >= self.max_episode_steps
        reward = float(self.game.score - score_before)
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            # human rendering delegated to the pygame front end; noop
            return None
        grid = self._get_obs()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                v = int(grid[y, x])
                if v == 0:
                    color = (20, 20, 26)
                else:
                    hex_color = PALETTE[abs(v) - 1].lstrip("#")
                    color = tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
