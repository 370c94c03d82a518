"""
Hyper-drive star field drawn behind the game.

Each star is pushed away from the screen center by a multiplicative factor
every frame and drawn as a streak from its previous position. Stars that
leave the screen start over at a new random position.
"""

import random
from dataclasses import dataclass
from typing import List, Optional

from .surface import Surface, STAR_COLOUR


@dataclass
class Star:
    x: float = 0.0
    y: float = 0.0
    z: float = 1.0  # depth, grows as the star flies outwards
    old_x: float = 0.0
    old_y: float = 0.0


class StarField:
    def __init__(self, width: float, height: float, star_count: int = 100,
                 speed: float = 1.01, rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.speed = speed
        self.rng = rng if rng is not None else random.Random()
        self.stars: List[Star] = []
        for _ in range(star_count):
            star = Star()
            self._reset_star(star)
            self.stars.append(star)

    def resize(self, width: float, height: float):
        self.width = width
        self.height = height

    def _reset_star(self, star: Star):
        # A star exactly at the center would never move
        while True:
            star.x = int(self.rng.random() * self.width)
            star.y = int(self.rng.random() * self.height)
            if star.x != self.width / 2 or star.y != self.height / 2:
                break
        star.z = 1.0
        star.old_x, star.old_y = star.x, star.y

    def update(self):
        cx, cy = self.width / 2, self.height / 2
        for star in self.stars:
            new_x = (star.x - cx) * self.speed + cx
            new_y = (star.y - cy) * self.speed + cy
            star.old_x, star.old_y = star.x, star.y
            star.x, star.y = new_x, new_y
            star.z += 0.01
            if new_x < 0 or new_x >= self.width or new_y < 0 or new_y >= self.height:
                self._reset_star(star)

    def render(self, surface: Surface):
        for star in self.stars:
            surface.draw_line(star.old_x, star.old_y, star.x, star.y, STAR_COLOUR, 1)
