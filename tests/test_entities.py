import math
import unittest

from game.asteroids.entities import Controls, Obstacle, Player
from game.asteroids.spawner import Spawner
from game.asteroids.surface import RecordingSurface


class PlayerTests(unittest.TestCase):
    def test_update_follows_flags(self):
        player = Player(x=100, y=100, speed=5)
        player.update(Controls(right=True, down=True))
        self.assertEqual((player.x, player.y), (105, 105))

        player.update(Controls(left=True, up=True))
        self.assertEqual((player.x, player.y), (100, 100))

    def test_opposite_flags_cancel_out(self):
        player = Player(x=100, y=100, speed=5)
        player.update(Controls(left=True, right=True))
        self.assertEqual(player.x, 100)

    def test_update_does_not_touch_flags(self):
        controls = Controls(left=True)
        Player(x=100, y=100).update(controls)
        self.assertEqual(controls, Controls(left=True))

    def test_wrap_from_negative_x(self):
        player = Player(x=-5, y=300)
        player.ensure_in_bounds(800, 600)
        self.assertEqual(player.x, 800)

    def test_wrap_past_width(self):
        player = Player(x=850, y=300)
        player.ensure_in_bounds(800, 600)
        self.assertEqual(player.x, 50)

    def test_wrap_y_independently(self):
        player = Player(x=400, y=-1)
        player.ensure_in_bounds(800, 600)
        self.assertEqual((player.x, player.y), (400, 600))

        player = Player(x=400, y=605)
        player.ensure_in_bounds(800, 600)
        self.assertEqual(player.y, 5)

    def test_bounds_from_center(self):
        player = Player(x=100, y=200, size=50)
        self.assertEqual((player.left, player.right, player.top, player.bottom), (75, 125, 175, 225))

    def test_render_draws_centered_square(self):
        surface = RecordingSurface()
        Player(x=100, y=200, size=50).render(surface)
        self.assertEqual(surface.calls[0][0], "rect_shadow")
        self.assertEqual(surface.calls[0][1][:4], (75, 175, 50, 50))


class ObstacleTests(unittest.TestCase):
    def test_update_moves_along_direction(self):
        obstacle = Obstacle(x=0, y=0, size=20, speed=2, direction=(0.6, 0.8))
        obstacle.update()
        obstacle.update()
        self.assertAlmostEqual(obstacle.x, 2.4)
        self.assertAlmostEqual(obstacle.y, 3.2)

    def test_update_is_not_clamped(self):
        obstacle = Obstacle(x=-1000, y=0, size=20, speed=4, direction=(-1.0, 0.0))
        obstacle.update()
        self.assertEqual(obstacle.x, -1004)

    def test_out_of_bounds_uses_distance_from_center(self):
        obstacle = Obstacle(x=400 + 701, y=300, size=20, speed=0)
        self.assertTrue(obstacle.is_out_of_bounds(700, 400, 300))
        obstacle.x = 400 + 700
        self.assertFalse(obstacle.is_out_of_bounds(700, 400, 300))

    def test_spawned_direction_is_unit_length(self):
        spawner = Spawner(seed=3)
        for _ in range(200):
            obstacle = spawner.spawn(800, 600)
            dx, dy = obstacle.direction
            self.assertAlmostEqual(math.hypot(dx, dy), 1.0, places=9)

    def test_render_draws_bordered_square(self):
        surface = RecordingSurface()
        Obstacle(x=50, y=50, size=20, speed=0, colour=(90, 90, 90)).render(surface)
        name, args = surface.calls[0]
        self.assertEqual(name, "rect_border")
        self.assertEqual(args, (40, 40, 20, 20, (90, 90, 90)))


if __name__ == "__main__":
    unittest.main()
