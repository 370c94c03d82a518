"""
Configuration for the asteroid dodging game and its gym environment
"""

import enum
import math
from dataclasses import dataclass, fields
from typing import Any, Dict


class InvalidConfiguration(ValueError):
    """Raised for non-positive or non-finite capacities, intervals or viewport sizes"""


class OnGameOver(enum.Enum):
    RESTART = "restart"  # reset the session and keep running
    HALT = "halt"        # stop; the next start() begins a new session


# Game parameters
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "max_obstacles": 10,
    "spawn_interval": 5.0,  # seconds
    "frame_interval": 1 / 60,  # seconds between ticks
    "player_size": 50.0,
    "player_speed": 5.0,
    "on_game_over": "restart",
    "best_time_path": "highscore.json",
    "star_count": 100,
    "star_speed": 1.01,
}

# Environment parameters
ENV_CONFIG = {
    "width": 800,
    "height": 600,
    "max_obstacles": 10,
    "spawn_interval": 5.0,
    "dt": 1 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_obstacles": 5,
    "R_ALIVE": 0.01,   # reward per survived step
    "R_CRASH": 5.0,    # collision penalty
}


def check_positive(name: str, value: Any):
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
        raise InvalidConfiguration(f"{name} must be a positive number, got {value!r}")


def check_capacity(value: Any):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfiguration(f"max_obstacles must be a positive integer, got {value!r}")


@dataclass
class GameConfig:
    width: float = GAME_CONFIG["width"]
    height: float = GAME_CONFIG["height"]
    max_obstacles: int = GAME_CONFIG["max_obstacles"]
    spawn_interval: float = GAME_CONFIG["spawn_interval"]
    frame_interval: float = GAME_CONFIG["frame_interval"]
    player_size: float = GAME_CONFIG["player_size"]
    player_speed: float = GAME_CONFIG["player_speed"]
    on_game_over: OnGameOver = OnGameOver(GAME_CONFIG["on_game_over"])
    best_time_path: str = GAME_CONFIG["best_time_path"]
    star_count: int = GAME_CONFIG["star_count"]
    star_speed: float = GAME_CONFIG["star_speed"]

    def __post_init__(self):
        if not isinstance(self.on_game_over, OnGameOver):
            try:
                self.on_game_over = OnGameOver(self.on_game_over)
            except ValueError:
                raise InvalidConfiguration(f"Unknown game over policy: {self.on_game_over!r}")
        check_capacity(self.max_obstacles)
        for name in ("width", "height", "spawn_interval", "frame_interval",
                     "player_size", "star_speed"):
            check_positive(name, getattr(self, name))
        if self.player_speed < 0 or self.star_count < 0:
            raise InvalidConfiguration("player_speed and star_count must not be negative")

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "GameConfig":
        """Build from a GAME_CONFIG-style dict, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in known})
