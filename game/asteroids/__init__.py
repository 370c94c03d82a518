"""2D Game module - Asteroid dodging game and environment"""

from .engine import AsteroidsGame, create_game
from .asteroids_env import AsteroidsEnv, run_random_episode

__all__ = ['AsteroidsGame', 'create_game', 'AsteroidsEnv', 'run_random_episode']
