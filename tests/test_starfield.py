import random
import unittest

from game.asteroids.starfield import StarField
from game.asteroids.surface import RecordingSurface


class StarFieldTests(unittest.TestCase):
    def test_stars_move_away_from_center(self):
        field = StarField(800, 600, star_count=1, speed=1.5, rng=random.Random(0))
        star = field.stars[0]
        star.x, star.y = 500, 300
        field.update()
        self.assertEqual((star.old_x, star.old_y), (500, 300))
        self.assertEqual((star.x, star.y), (550, 300))

    def test_star_leaving_screen_is_reset(self):
        field = StarField(800, 600, star_count=1, speed=2.0, rng=random.Random(0))
        star = field.stars[0]
        star.x, star.y = 790, 300
        field.update()
        self.assertTrue(0 <= star.x < 800 and 0 <= star.y < 600)
        self.assertEqual(star.z, 1.0)
        self.assertEqual((star.old_x, star.old_y), (star.x, star.y))

    def test_resize_moves_the_center(self):
        field = StarField(800, 600, star_count=1, speed=1.5, rng=random.Random(0))
        field.resize(400, 200)
        star = field.stars[0]
        star.x, star.y = 300, 100
        field.update()
        self.assertEqual((star.x, star.y), (350, 100))

    def test_render_draws_one_streak_per_star(self):
        surface = RecordingSurface()
        field = StarField(800, 600, star_count=12, rng=random.Random(1))
        field.update()
        field.render(surface)
        self.assertEqual(surface.count("line"), 12)


if __name__ == "__main__":
    unittest.main()
