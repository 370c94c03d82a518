import unittest

from game.asteroids.spawner import Spawner


class SpawnerTests(unittest.TestCase):
    def test_values_stay_in_range(self):
        spawner = Spawner(seed=11)
        for _ in range(500):
            o = spawner.spawn(800, 600)
            self.assertTrue(0 <= o.x < 800)
            self.assertTrue(0 <= o.y < 600)
            self.assertTrue(20 <= o.size < 100)
            self.assertTrue(0 <= o.speed < 5)
            shade = o.colour[0]
            self.assertEqual(o.colour, (shade, shade, shade))
            self.assertTrue(50 <= shade < 200)

    def test_same_seed_same_obstacles(self):
        first, second = Spawner(seed=5), Spawner(seed=5)
        a = [first.spawn(800, 600) for _ in range(5)]
        b = [second.spawn(800, 600) for _ in range(5)]
        self.assertEqual(a, b)

    def test_reseed_replays_sequence(self):
        spawner = Spawner(seed=1)
        first = spawner.spawn(800, 600)
        spawner.reseed(1)
        self.assertEqual(spawner.spawn(800, 600), first)


if __name__ == "__main__":
    unittest.main()
