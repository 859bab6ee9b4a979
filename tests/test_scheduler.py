import unittest
from dataclasses import replace

from tetris_engine import GameState, Tick, AcknowledgeAchievements, RUNNING, PAUSED, OVER
from tetris_scheduler import Scheduler, gravity_interval_ms
from tetris_scoring import Metrics

RUNNING_STATE = GameState(status=RUNNING)


class GravityIntervalTests(unittest.TestCase):
    def test_curve(self):
        self.assertEqual(gravity_interval_ms(1), 900)
        self.assertEqual(gravity_interval_ms(2), 840)
        self.assertEqual(gravity_interval_ms(14), 120)
        self.assertEqual(gravity_interval_ms(15), 80)
        self.assertEqual(gravity_interval_ms(20), 80)


class GravityTimerTests(unittest.TestCase):
    def test_idle_never_ticks(self):
        scheduler = Scheduler()
        self.assertEqual(scheduler.update(GameState(), 10000), [])
        self.assertIsNone(scheduler.gravity)

    def test_ticks_once_per_interval(self):
        scheduler = Scheduler()
        self.assertEqual(scheduler.update(RUNNING_STATE, 899), [])
        self.assertEqual(scheduler.update(RUNNING_STATE, 1), [Tick()])
        self.assertEqual(scheduler.update(RUNNING_STATE, 450), [])
        self.assertEqual(scheduler.update(RUNNING_STATE, 450), [Tick()])

    def test_long_frame_fires_once(self):
        scheduler = Scheduler()
        self.assertEqual(scheduler.update(RUNNING_STATE, 5000), [Tick()])
        self.assertLess(scheduler.gravity.elapsed, 900)

    def test_level_change_rearms(self):
        scheduler = Scheduler()
        scheduler.update(RUNNING_STATE, 800)
        first = scheduler.gravity.generation
        faster = replace(RUNNING_STATE, metrics=Metrics(level=2))
        self.assertEqual(scheduler.update(faster, 100), [])
        self.assertNotEqual(scheduler.gravity.generation, first)
        self.assertEqual(scheduler.gravity.interval, 840)
        self.assertEqual(scheduler.update(faster, 740), [Tick()])

    def test_new_game_rearms(self):
        # Reset straight from a running game keeps status and level but restarts gravity
        scheduler = Scheduler()
        scheduler.update(replace(RUNNING_STATE, game=1), 800)
        first = scheduler.gravity.generation
        restarted = replace(RUNNING_STATE, game=2)
        self.assertEqual(scheduler.update(restarted, 100), [])
        self.assertNotEqual(scheduler.gravity.generation, first)
        self.assertEqual(scheduler.update(restarted, 799), [])
        self.assertEqual(scheduler.update(restarted, 1), [Tick()])

    def test_leaving_running_cancels(self):
        scheduler = Scheduler()
        scheduler.update(RUNNING_STATE, 850)
        for status in (PAUSED, OVER):
            self.assertEqual(scheduler.update(replace(RUNNING_STATE, status=status), 5000), [])
            self.assertIsNone(scheduler.gravity)
        # resuming starts a fresh interval rather than firing the old one
        self.assertEqual(scheduler.update(RUNNING_STATE, 100), [])


class AcknowledgeTimerTests(unittest.TestCase):
    def test_fires_once_after_delay(self):
        scheduler = Scheduler(ack_delay_ms=2500)
        state = GameState(pending_achievements=("First Lines Cleared",))
        self.assertEqual(scheduler.update(state, 2499), [])
        self.assertEqual(scheduler.update(state, 1), [AcknowledgeAchievements()])
        self.assertIsNone(scheduler.ack)

    def test_new_pending_label_restarts_delay(self):
        scheduler = Scheduler(ack_delay_ms=1000)
        one = GameState(pending_achievements=("a",))
        two = GameState(pending_achievements=("a", "b"))
        scheduler.update(one, 900)
        self.assertEqual(scheduler.update(two, 900), [])
        self.assertEqual(scheduler.update(two, 100), [AcknowledgeAchievements()])

    def test_emptied_list_cancels(self):
        scheduler = Scheduler(ack_delay_ms=1000)
        scheduler.update(GameState(pending_achievements=("a",)), 900)
        self.assertEqual(scheduler.update(GameState(), 500), [])
        self.assertIsNone(scheduler.ack)

    def test_runs_while_paused(self):
        scheduler = Scheduler(ack_delay_ms=1000)
        state = GameState(status=PAUSED, pending_achievements=("a",))
        self.assertEqual(scheduler.update(state, 1000), [AcknowledgeAchievements()])

    def test_cancel(self):
        scheduler = Scheduler(ack_delay_ms=1000)
        scheduler.update(replace(RUNNING_STATE, pending_achievements=("a",)), 10)
        scheduler.cancel()
        self.assertIsNone(scheduler.gravity)
        self.assertIsNone(scheduler.ack)


if __name__ == "__main__":
    unittest.main()
