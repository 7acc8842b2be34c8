"""Cue player for the accent bell and the beat tick."""

import logging
from typing import Any, Callable, Dict, Optional

import numpy as np
import pygame

from config.settings import SOUND_VOLUME
from .beat import Cue

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
ACCENT_BELL_GAP_MS = 120


def synthesize_tick(volume: float, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Short woodblock-like click, 16-bit mono samples."""
    duration = 0.05
    t = np.linspace(0, duration, int(sample_rate * duration), endpoint=False)
    envelope = np.exp(-60 * t)
    wave = volume * envelope * np.sin(2 * np.pi * 1000 * t)
    return (np.clip(wave, -1.0, 1.0) * 32767).astype(np.int16)


def synthesize_bell(volume: float, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Bell strike built from inharmonic partials, 16-bit mono samples."""
    duration = 0.35
    t = np.linspace(0, duration, int(sample_rate * duration), endpoint=False)
    base = 1320.0
    wave = np.zeros_like(t)
    for ratio, gain, decay in ((1.0, 0.6, 9.0), (2.76, 0.25, 14.0), (5.4, 0.15, 22.0)):
        wave += gain * np.exp(-decay * t) * np.sin(2 * np.pi * base * ratio * t)
    wave *= volume
    return (np.clip(wave, -1.0, 1.0) * 32767).astype(np.int16)


class CuePlayer:
    """Fire-and-forget playback of metronome cues."""

    def __init__(
        self,
        sound_backend: str = "auto",
        volume: float = SOUND_VOLUME,
        bell: Optional[Callable[[], None]] = None,
        scheduler: Optional[Any] = None
    ):
        """
        Initialize the cue player.

        Args:
            sound_backend: Sound backend to use ('auto', 'pygame', 'bell', 'none')
            volume: Cue volume between 0 and 1
            bell: System bell callable used by the 'bell' backend (e.g. Tk's root.bell)
            scheduler: Object with after(ms, func), used to ring the accent's second strike
        """
        self.sound_backend = sound_backend
        self.volume = min(1.0, max(0.0, volume))
        self.bell = bell
        self.scheduler = scheduler
        self.sounds: Dict[Cue, "pygame.mixer.Sound"] = {}
        self._init_sound_backend()

    def _init_sound_backend(self):
        """Initialize the sound backend."""
        if self.sound_backend in ("auto", "pygame"):
            try:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=256)
                self._generate_sounds()
                self.sound_backend = "pygame"
                logger.info("Using pygame sound backend")
                return
            except pygame.error as e:
                logger.warning(f"pygame mixer unavailable: {e}")

        if self.sound_backend in ("auto", "pygame", "bell") and self.bell is not None:
            self.sound_backend = "bell"
            logger.info("Using system bell sound backend")
            return

        if self.sound_backend != "none":
            logger.warning("No sound backend available, using silent mode")
        self.sound_backend = "none"

    def _generate_sounds(self):
        """Pre-generate both cues for tight timing."""
        for cue, samples in ((Cue.ACCENT, synthesize_bell(self.volume)),
                             (Cue.TICK, synthesize_tick(self.volume))):
            stereo = np.ascontiguousarray(np.column_stack((samples, samples)))
            self.sounds[cue] = pygame.sndarray.make_sound(stereo)

    def play(self, cue: Cue):
        """
        Play a cue without waiting for it to finish.

        Args:
            cue: Which cue to play
        """
        if self.sound_backend == "pygame":
            try:
                self.sounds[cue].play()
            except pygame.error as e:
                logger.error(f"Error playing {cue.value} with pygame: {e}")
        elif self.sound_backend == "bell":
            self._ring()
            if cue is Cue.ACCENT:
                # Accent rings twice
                if self.scheduler is not None:
                    self.scheduler.after(ACCENT_BELL_GAP_MS, self._ring)
                else:
                    self._ring()
        else:
            # Silent mode - just log
            logger.debug(f"Cue {cue.value}")

    def _ring(self):
        try:
            self.bell()
        except Exception as e:
            logger.error(f"Error ringing system bell: {e}")

    def close(self):
        """Release the mixer."""
        if self.sound_backend == "pygame":
            self.sounds.clear()
            pygame.mixer.quit()
            logger.info("Sound backend closed")
