from game.asteroids.entities import Obstacle


class FixedSpawner:
    """Spawner double that drops motionless asteroids in the top-left corner"""

    def __init__(self, x: float = 10, y: float = 10, size: float = 20):
        self.x = x
        self.y = y
        self.size = size
        self.spawned = 0
        self.last_viewport = None

    def spawn(self, width, height):
        self.spawned += 1
        self.last_viewport = (width, height)
        return Obstacle(x=self.x, y=self.y, size=self.size, speed=0.0, direction=(1.0, 0.0))


def still_obstacle(x: float, y: float, size: float = 20) -> Obstacle:
    return Obstacle(x=x, y=y, size=size, speed=0.0, direction=(0.0, 1.0))
