"""Tests for Metronome Manager."""

import unittest
from unittest.mock import Mock, call

from pendulum_metronome.manager import MetronomeManager
from pendulum_metronome.metronome.beat import Cue, PendulumSide
from tests.fakes import FakeClock, FakeScheduler


class TestMetronomeManager(unittest.TestCase):
    """Test cases for MetronomeManager."""

    def setUp(self):
        """Set up test fixtures."""
        self.clock = FakeClock()
        self.scheduler = FakeScheduler(self.clock)
        self.player = Mock()
        self.player.sound_backend = "none"
        self.manager = MetronomeManager(
            self.scheduler,
            player=self.player,
            bpm=60,
            min_bpm=20,
            max_bpm=300,
            clock=self.clock
        )
        self.on_beat = Mock()
        self.manager.on_beat = self.on_beat

    def played(self):
        return [c.args[0] for c in self.player.play.call_args_list]

    def test_first_beat_on_start(self):
        """Test the first beat flips the pendulum and ticks at t=0."""
        self.manager.start()

        self.assertEqual(self.manager.beat.side, PendulumSide.LEFT)
        self.assertEqual(self.played(), [Cue.TICK])
        self.on_beat.assert_called_once_with(self.manager.beat, 1.0)

    def test_sixty_bpm_scenario(self):
        """Test a bar at 60 BPM: one beat per second, accent on the fourth."""
        self.manager.start()

        self.scheduler.advance(1.0)
        self.assertEqual(self.manager.beat.side, PendulumSide.RIGHT)
        self.assertEqual(self.manager.beat_count, 2)

        self.scheduler.advance(2.0)
        self.assertEqual(self.played(), [Cue.TICK, Cue.TICK, Cue.TICK, Cue.ACCENT])
        self.assertEqual(self.manager.beat.counter, 0)

        self.scheduler.advance(4.0)
        self.assertEqual(self.played()[4:], [Cue.TICK, Cue.TICK, Cue.TICK, Cue.ACCENT])

    def test_increment_updates_period_and_listeners(self):
        on_tempo_change = Mock()
        self.manager.on_tempo_change = on_tempo_change
        self.manager.start()

        self.assertEqual(self.manager.increment(), 61)

        self.assertEqual(self.manager.timer.period, 60.0 / 61)
        on_tempo_change.assert_called_once_with(61)

    def test_decrement(self):
        self.assertEqual(self.manager.decrement(), 59)
        self.assertEqual(self.manager.bpm, 59)

    def test_tempo_change_rearms_timer(self):
        self.manager.start()
        self.scheduler.advance(0.5)
        self.manager.set_bpm(120)

        self.assertEqual(self.manager.beat_count, 1)
        self.scheduler.advance(0.5)
        self.assertEqual(self.manager.beat_count, 2)
        self.on_beat.assert_called_with(self.manager.beat, 0.5)

    def test_no_change_at_bound(self):
        on_tempo_change = Mock()
        self.manager.set_bpm(300)
        self.manager.on_tempo_change = on_tempo_change

        self.assertEqual(self.manager.increment(), 300)
        on_tempo_change.assert_not_called()

    def test_set_bpm_rejects_non_positive(self):
        with self.assertRaises(ValueError):
            self.manager.set_bpm(0)

    def test_listener_errors_are_logged(self):
        """Test a failing listener does not stop the beat."""
        self.on_beat.side_effect = RuntimeError("boom")

        with self.assertLogs('pendulum_metronome.manager', level='ERROR'):
            self.manager.start()

        self.assertTrue(self.manager.is_running)
        self.scheduler.advance(1.0)
        self.assertEqual(self.manager.beat_count, 2)

    def test_get_status(self):
        self.manager.start()

        status = self.manager.get_status()

        self.assertEqual(status["bpm"], 60)
        self.assertEqual(status["period"], 1.0)
        self.assertTrue(status["running"])
        self.assertEqual(status["side"], "left")
        self.assertEqual(status["counter"], 1)
        self.assertEqual(status["sound_backend"], "none")

    def test_cleanup(self):
        """Test cleanup."""
        self.manager.start()

        self.manager.cleanup()

        self.assertFalse(self.manager.is_running)
        self.assertEqual(self.scheduler.jobs, {})
        self.player.close.assert_called_once()


if __name__ == '__main__':
    unittest.main()
