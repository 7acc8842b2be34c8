"""Metronome manager that coordinates tempo, beat timer and sound."""

import time
import logging
from typing import Any, Callable, Dict, Optional

from config.settings import DEFAULT_BPM, MIN_BPM, MAX_BPM, SOUND_BACKEND
from .metronome.beat import BeatState, Cue
from .metronome.player import CuePlayer
from .metronome.tempo import Tempo
from .metronome.timer import BeatTimer

logger = logging.getLogger(__name__)


class MetronomeManager:
    """Owns the tempo and beat phase and drives them from the beat timer."""

    def __init__(
        self,
        scheduler: Any,
        player: Optional[CuePlayer] = None,
        bpm: float = DEFAULT_BPM,
        min_bpm: float = MIN_BPM,
        max_bpm: float = MAX_BPM,
        clock: Callable[[], float] = time.perf_counter
    ):
        """
        Initialize the metronome manager.

        Args:
            scheduler: Tk widget (or anything with after/after_cancel)
            player: Cue player; one with the configured backend is created if omitted
            bpm: Starting tempo
            min_bpm: Lowest tempo
            max_bpm: Highest tempo
            clock: Monotonic clock in seconds
        """
        self.tempo = Tempo(bpm, min_bpm, max_bpm)
        self.beat = BeatState()
        self.beat_count = 0
        self.player = player if player is not None else CuePlayer(SOUND_BACKEND)
        self.timer = BeatTimer(scheduler, self._on_tick, self.tempo.period, clock=clock)

        # Callbacks
        self.on_beat: Optional[Callable[[BeatState, float], None]] = None
        self.on_tempo_change: Optional[Callable[[float], None]] = None

        logger.info("Metronome manager initialized")

    @property
    def bpm(self) -> float:
        return self.tempo.bpm

    @property
    def is_running(self) -> bool:
        return self.timer.is_running

    def start(self):
        """Start the beat; the first beat sounds immediately."""
        self.timer.start()
        logger.info(f"Metronome started at {self.bpm} BPM")

    def stop(self):
        self.timer.stop()

    def increment(self) -> float:
        """Raise the tempo by one beat per minute."""
        return self._apply(self.tempo.increment)

    def decrement(self) -> float:
        """Lower the tempo by one beat per minute."""
        return self._apply(self.tempo.decrement)

    def set_bpm(self, bpm: float) -> float:
        """
        Set the tempo directly.

        Args:
            bpm: Beats per minute

        Returns:
            The tempo actually in effect
        """
        return self._apply(lambda: self.tempo.set(bpm))

    def _apply(self, change: Callable[[], float]) -> float:
        old_bpm = self.tempo.bpm
        new_bpm = change()
        if new_bpm == old_bpm:
            return new_bpm

        self.timer.set_period(self.tempo.period)
        logger.info(f"BPM changed from {old_bpm} to {new_bpm}")

        if self.on_tempo_change:
            try:
                self.on_tempo_change(new_bpm)
            except Exception as e:
                logger.error(f"Error in on_tempo_change callback: {e}")
        return new_bpm

    def _on_tick(self):
        self.beat, cue = self.beat.advance()
        self.beat_count += 1

        self.player.play(cue)
        logger.debug(f"Beat {self.beat_count} ({'ACCENT' if cue is Cue.ACCENT else 'tick'}) "
                     f"side={self.beat.side.value}")

        if self.on_beat:
            try:
                self.on_beat(self.beat, self.tempo.period)
            except Exception as e:
                logger.error(f"Error in on_beat callback: {e}")

    def get_status(self) -> Dict[str, Any]:
        """
        Get current metronome status.

        Returns:
            Dictionary with tempo, beat phase and sound backend
        """
        return {
            "bpm": self.bpm,
            "period": self.tempo.period,
            "running": self.is_running,
            "side": self.beat.side.value,
            "counter": self.beat.counter,
            "beat_count": self.beat_count,
            "sound_backend": self.player.sound_backend,
        }

    def cleanup(self):
        """Stop the beat and release audio."""
        if self.is_running:
            self.stop()
        self.player.close()
        logger.info("Metronome manager cleaned up")
