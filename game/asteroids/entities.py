"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from typing import Tuple, Union

from .surface import Colour, Surface, PLAYER_COLOUR, SHADOW_COLOUR, BORDER_COLOUR
from .utils import distance


@dataclass
class Controls:
    """Live direction flags, flipped by the host's key handlers"""
    left: bool = False
    up: bool = False
    right: bool = False
    down: bool = False

    def set(self, left: bool, up: bool, right: bool, down: bool):
        self.left, self.up, self.right, self.down = left, up, right, down

    def release_all(self):
        self.set(False, False, False, False)


@dataclass
class Body:
    """Position is the center of an axis-aligned square"""
    x: float
    y: float
    size: float = 50.0
    speed: float = 5.0

    @property
    def left(self) -> float:
        return self.x - self.size / 2

    @property
    def right(self) -> float:
        return self.x + self.size / 2

    @property
    def top(self) -> float:
        return self.y - self.size / 2

    @property
    def bottom(self) -> float:
        return self.y + self.size / 2


@dataclass
class Player(Body):
    """Player-controlled square"""
    colour: Colour = PLAYER_COLOUR

    def update(self, controls: Controls):
        if controls.left:
            self.x -= self.speed
        if controls.up:
            self.y -= self.speed
        if controls.right:
            self.x += self.speed
        if controls.down:
            self.y += self.speed

    def ensure_in_bounds(self, width: float, height: float):
        """Wrap around the screen edges (toroidal, not clamped)"""
        if self.x < 0:
            self.x = width
        if self.y < 0:
            self.y = height
        if self.x > width:
            self.x = self.x % width
        if self.y > height:
            self.y = self.y % height

    def render(self, surface: Surface):
        surface.draw_rect_filled_with_shadow(
            self.left, self.top, self.size, self.size,
            self.colour, SHADOW_COLOUR, 20,
        )


@dataclass
class Obstacle(Body):
    """Asteroid drifting in a fixed direction at a fixed speed"""
    direction: Tuple[float, float] = (1.0, 0.0)  # unit vector
    colour: Colour = field(default=(128, 128, 128))

    def update(self):
        dx, dy = self.direction
        self.x += dx * self.speed
        self.y += dy * self.speed

    def is_out_of_bounds(self, max_distance: float, center_x: float, center_y: float) -> bool:
        return distance(self.x, self.y, center_x, center_y) > max_distance

    def render(self, surface: Surface):
        surface.draw_rect_filled_with_shadow_and_border(
            self.left, self.top, self.size, self.size,
            self.colour, SHADOW_COLOUR, 20, BORDER_COLOUR, 3,
        )


Entity = Union[Player, Obstacle]
