"""
AsteroidsEnv - the dodging game as a Gymnasium environment
----------------------------------------------------------
- Drives AsteroidsGame on a ManualScheduler: one env step = one game tick
- Game over halts the game, which terminates the episode
- Action space MultiBinary(4): [left, up, right, down]
- Vector observation: player position + K nearest asteroids
  (relative position, velocity, size)

Quick test:
    python -m game.asteroids.asteroids_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG, GameConfig, OnGameOver
from .engine import AsteroidsGame
from .entities import Controls
from .scheduler import ManualScheduler
from .scores import MemoryScoreStore
from .spawner import Spawner
from .utils import clamp


class AsteroidsEnv(gym.Env):
    """Survive as long as possible among drifting asteroids"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = ENV_CONFIG["width"],
        height: int = ENV_CONFIG["height"],
        max_obstacles: int = ENV_CONFIG["max_obstacles"],
        spawn_interval: float = ENV_CONFIG["spawn_interval"],
        dt: float = ENV_CONFIG["dt"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_obstacles: int = ENV_CONFIG["k_obstacles"],
        alive_reward: float = ENV_CONFIG["R_ALIVE"],
        crash_penalty: float = ENV_CONFIG["R_CRASH"],
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        self.dt = dt
        self.max_steps = max_steps
        self.k_obstacles = k_obstacles
        self.alive_reward = alive_reward
        self.crash_penalty = crash_penalty

        self.config = GameConfig(
            width=width,
            height=height,
            max_obstacles=max_obstacles,
            spawn_interval=spawn_interval,
            frame_interval=dt,
            on_game_over=OnGameOver.HALT,
            star_count=0,
        )

        # left, up, right, down
        self.action_space = spaces.MultiBinary(4)

        # Player: pos(2)
        # Each obstacle: rel pos(2) velocity(2) size(1)
        obs_dim = 2 + self.k_obstacles * 5
        self.observation_space = spaces.Box(low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32)

        self.scheduler: ManualScheduler = None  # type: ignore
        self.game: AsteroidsGame = None  # type: ignore
        self.score_store = MemoryScoreStore()
        self.spawner = Spawner()
        self._window = None
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self.spawner.reseed(seed)
            self.action_space.seed(seed)

        if self.game is not None:
            self.game.stop()
        self.scheduler = ManualScheduler()
        self.game = AsteroidsGame(
            self.scheduler,
            score_store=self.score_store,
            controls=Controls(),
            config=self.config,
            spawner=self.spawner,
        )
        self.game.start()
        self._step_count = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        left, up, right, down = (bool(a) for a in np.asarray(action).reshape(4))
        self.game.controls.set(left, up, right, down)

        # Advance exactly one tick
        self.scheduler.advance(self.dt)

        terminated = self.game.done
        self._step_count += 1
        truncated = self._step_count >= self.max_steps and not terminated

        reward = -self.crash_penalty if terminated else self.alive_reward

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        player = self.game.player
        w, h = self.config.width, self.config.height

        obs_parts = [player.x / w * 2 - 1, player.y / h * 2 - 1]

        nearest = sorted(
            self.game.obstacles,
            key=lambda o: (o.x - player.x) ** 2 + (o.y - player.y) ** 2,
        )
        for i in range(self.k_obstacles):
            if i < len(nearest):
                o = nearest[i]
                dx, dy = o.direction
                obs_parts += [
                    clamp((o.x - player.x) / w, -1, 1),
                    clamp((o.y - player.y) / h, -1, 1),
                    dx * o.speed / Spawner.max_speed,
                    dy * o.speed / Spawner.max_speed,
                    o.size / Spawner.max_size * 2 - 1,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0, 0.0]

        obs = np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)
        return obs

    def _get_info(self) -> Dict[str, Any]:
        return {
            "timer_ms": self.game.timer,
            "best_time_ms": self.score_store.get_best_time(),
            "num_obstacles": len(self.game.obstacles),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .arcade_host import AsteroidsWindow
            self._window = AsteroidsWindow(self.config, game=self.game)
        elif self._window.game is not self.game:
            self._window.game = self.game

        self.game.render(self._window.surface)
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(render: bool = True):
    """Run a random episode for testing"""
    env = AsteroidsEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=42)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f}, survived {info['timer_ms'] / 1000:.2f}s")
    env.close()


if __name__ == "__main__":
    run_random_episode(render=True)
