from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from pearls.game import DEFAULT_LEVEL, Direction, GameConfig, PearlsGame, State, get_level
from pearls.visualization.palette import PLAYER_COLOR, color_for_state

logger = logging.getLogger(__name__)


class PearlsEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 10}

    def __init__(self, level: Optional[Sequence[str]] = None, config: Optional[GameConfig] = None,
                 render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.game = PearlsGame(level if level is not None else get_level(DEFAULT_LEVEL), config=config)
        self.render_mode = render_mode

        rows, cols = self.game.dimensions()
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=int(max(State)), shape=(rows, cols), dtype=np.int8),
                "player": spaces.Box(low=0, high=1, shape=(rows, cols), dtype=np.int8),
            }
        )
        # One action per Direction
        self.action_space = spaces.Discrete(len(Direction))

        self._last_obs: Optional[Dict[str, Any]] = None

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "grid": self.game.get_state().astype(np.int8),
            "player": self.game.player_mask().astype(np.int8),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "moves": self.game.moves,
            "pearls_remaining": self.game.pearl_count(),
            "won": self.game.won(),
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset()
        obs = self._get_obs()
        self._last_obs = obs
        logger.debug(f"Reset: {self.game.pearl_count()} pearls")
        return obs, self._get_info()

    def step(self, action: int):
        direction = Direction(int(action))
        pearls_before = self.game.pearl_count()
        records = self.game.move(direction)
        config = self.game.config

        reward_components: Dict[str, float] = {
            "pearls": float(pearls_before - self.game.pearl_count()),
        }
        terminated = self.game.is_over()
        if terminated:
            if self.game.won():
                reward_components["win"] = config.win_bonus
            else:
                reward_components["loss"] = -config.loss_penalty
        truncated = not terminated and self.game.moves >= config.max_episode_steps

        reward = float(sum(reward_components.values()))
        obs = self._get_obs()
        info = self._get_info()
        info["reward_components"] = reward_components
        info["records"] = records
        self._last_obs = obs
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        obs = self._last_obs if self._last_obs is not None else self._get_obs()
        grid = obs["grid"]
        player = obs["player"]
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_state(int(grid[y, x]))
                if player[y, x]:
                    q = cell // 4
                    img[y * cell + q : (y + 1) * cell - q, x * cell + q : (x + 1) * cell - q, :] = PLAYER_COLOR
        return img

    def close(self) -> None:
        pass
