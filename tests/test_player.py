"""Tests for the cue player."""

import unittest
from unittest.mock import MagicMock, Mock, patch

import numpy as np
import pygame

from pendulum_metronome.metronome.beat import Cue
from pendulum_metronome.metronome.player import (
    ACCENT_BELL_GAP_MS, SAMPLE_RATE, CuePlayer, synthesize_bell, synthesize_tick
)
from tests.fakes import FakeClock, FakeScheduler


class TestSynthesis(unittest.TestCase):
    """Test cases for cue synthesis."""

    def test_tick(self):
        samples = synthesize_tick(0.8)

        self.assertEqual(samples.dtype, np.int16)
        self.assertEqual(len(samples), int(SAMPLE_RATE * 0.05))
        self.assertGreater(np.abs(samples).max(), 0)

    def test_bell_is_longer_than_tick(self):
        self.assertGreater(len(synthesize_bell(0.8)), len(synthesize_tick(0.8)))

    def test_silent_at_zero_volume(self):
        self.assertEqual(np.abs(synthesize_bell(0.0)).max(), 0)


class TestCuePlayer(unittest.TestCase):
    """Test cases for CuePlayer."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_pygame = patch('pendulum_metronome.metronome.player.pygame').start()
        self.mock_pygame.error = pygame.error

    def tearDown(self):
        """Clean up patches."""
        patch.stopall()

    def test_pygame_backend(self):
        player = CuePlayer("auto")

        self.assertEqual(player.sound_backend, "pygame")
        self.mock_pygame.mixer.init.assert_called_once()
        self.assertEqual(self.mock_pygame.sndarray.make_sound.call_count, 2)

    def test_play_is_fire_and_forget(self):
        accent, tick = MagicMock(), MagicMock()
        self.mock_pygame.sndarray.make_sound.side_effect = [accent, tick]
        player = CuePlayer("pygame")

        player.play(Cue.ACCENT)
        player.play(Cue.TICK)
        player.play(Cue.TICK)

        accent.play.assert_called_once_with()
        self.assertEqual(tick.play.call_count, 2)

    def test_play_error_is_logged(self):
        sound = MagicMock()
        sound.play.side_effect = pygame.error("device lost")
        self.mock_pygame.sndarray.make_sound.return_value = sound
        player = CuePlayer("pygame")

        with self.assertLogs('pendulum_metronome.metronome.player', level='ERROR'):
            player.play(Cue.TICK)

    def test_falls_back_to_bell(self):
        self.mock_pygame.mixer.init.side_effect = pygame.error("no audio device")
        bell = Mock()

        player = CuePlayer("auto", bell=bell)
        player.play(Cue.ACCENT)

        self.assertEqual(player.sound_backend, "bell")
        self.assertEqual(bell.call_count, 2)

    def test_bell_accent_rings_twice(self):
        self.mock_pygame.mixer.init.side_effect = pygame.error("no audio device")
        clock = FakeClock()
        scheduler = FakeScheduler(clock)
        bell = Mock()
        player = CuePlayer("auto", bell=bell, scheduler=scheduler)

        player.play(Cue.TICK)
        self.assertEqual(bell.call_count, 1)
        self.assertEqual(len(scheduler.jobs), 0)

        player.play(Cue.ACCENT)
        self.assertEqual(bell.call_count, 2)
        self.assertEqual(len(scheduler.jobs), 1)

        scheduler.advance(ACCENT_BELL_GAP_MS / 1000)
        self.assertEqual(bell.call_count, 3)

    def test_bell_accent_without_scheduler(self):
        self.mock_pygame.mixer.init.side_effect = pygame.error("no audio device")
        bell = Mock()
        player = CuePlayer("bell", bell=bell)

        player.play(Cue.ACCENT)

        self.assertEqual(bell.call_count, 2)

    def test_falls_back_to_silent(self):
        self.mock_pygame.mixer.init.side_effect = pygame.error("no audio device")

        with self.assertLogs('pendulum_metronome.metronome.player', level='WARNING'):
            player = CuePlayer("auto")

        self.assertEqual(player.sound_backend, "none")
        player.play(Cue.TICK)

    def test_none_backend_skips_mixer(self):
        player = CuePlayer("none", bell=Mock())

        self.assertEqual(player.sound_backend, "none")
        self.mock_pygame.mixer.init.assert_not_called()

    def test_close(self):
        player = CuePlayer("pygame")
        player.close()

        self.mock_pygame.mixer.quit.assert_called_once()
        self.assertEqual(player.sounds, {})


if __name__ == '__main__':
    unittest.main()
