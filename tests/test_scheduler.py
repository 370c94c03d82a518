import unittest

from game.asteroids.scheduler import ManualScheduler, SimulationClock


class ManualSchedulerTests(unittest.TestCase):
    def test_fires_in_due_order(self):
        scheduler = ManualScheduler()
        fired = []
        scheduler.schedule_once(2.0, lambda: fired.append("late"))
        scheduler.schedule_once(1.0, lambda: fired.append("early"))
        scheduler.schedule_once(1.0, lambda: fired.append("early-2"))

        self.assertEqual(scheduler.advance(0.5), 0)
        self.assertEqual(scheduler.advance(2.0), 3)
        self.assertEqual(fired, ["early", "early-2", "late"])
        self.assertAlmostEqual(scheduler.now(), 2.5)

    def test_now_is_due_time_inside_callback(self):
        scheduler = ManualScheduler()
        seen = []
        scheduler.schedule_once(1.5, lambda: seen.append(scheduler.now()))
        scheduler.advance(10)
        self.assertEqual(seen, [1.5])

    def test_cancel(self):
        scheduler = ManualScheduler()
        fired = []
        handle = scheduler.schedule_once(1.0, lambda: fired.append(1))
        scheduler.cancel(handle)
        scheduler.cancel(None)
        scheduler.advance(5)
        self.assertEqual(fired, [])
        self.assertEqual(scheduler.pending(), 0)

    def test_rescheduling_from_callback(self):
        scheduler = ManualScheduler()
        fired = []

        def repeat():
            fired.append(scheduler.now())
            scheduler.schedule_once(1.0, repeat)

        scheduler.schedule_once(1.0, repeat)
        scheduler.advance(3.0)
        self.assertEqual(fired, [1.0, 2.0, 3.0])
        self.assertEqual(scheduler.pending(), 1)


class SimulationClockTests(unittest.TestCase):
    def test_accumulates_milliseconds(self):
        clock = SimulationClock()
        clock.restart(10.0)
        self.assertAlmostEqual(clock.tick(10.5), 500.0)
        self.assertAlmostEqual(clock.tick(10.75), 250.0)
        self.assertAlmostEqual(clock.timer, 750.0)

    def test_restart_skips_paused_time(self):
        clock = SimulationClock()
        clock.restart(0.0)
        clock.tick(1.0)
        clock.restart(100.0)
        clock.tick(100.5)
        self.assertAlmostEqual(clock.timer, 1500.0)

    def test_reset_timer(self):
        clock = SimulationClock()
        clock.restart(0.0)
        clock.tick(2.0)
        clock.reset_timer()
        self.assertEqual(clock.timer, 0.0)


if __name__ == "__main__":
    unittest.main()
