"""
Obstacle factory.

Obstacles are dropped anywhere inside the viewport, not at the edges, so a
fresh asteroid can land on top of the player.
"""

import logging
import random
from typing import Optional

from .entities import Obstacle
from .utils import unit_vector

logger = logging.getLogger(__name__)


class Spawner:
    """Creates obstacles with random position, size, speed, heading and shade"""

    min_size = 20
    max_size = 100  # exclusive
    max_speed = 5.0  # exclusive

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def reseed(self, seed: Optional[int]):
        self.rng.seed(seed)

    def spawn(self, width: float, height: float) -> Obstacle:
        rng = self.rng
        x = int(rng.random() * width)
        y = int(rng.random() * height)

        size = int(rng.random() * (self.max_size - self.min_size) + self.min_size)
        direction = unit_vector(rng.random() * 360)
        speed = rng.random() * self.max_speed

        shade = int(50 + rng.random() * 150)

        obstacle = Obstacle(
            x=x, y=y, size=size, speed=speed,
            direction=direction, colour=(shade, shade, shade),
        )
        logger.debug("Spawned obstacle at (%d, %d) size=%d speed=%.2f", x, y, size, speed)
        return obstacle
