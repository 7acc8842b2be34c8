"""Tempo value driven by the stepper."""

import logging

from config.settings import DEFAULT_BPM, MIN_BPM, MAX_BPM

logger = logging.getLogger(__name__)


class Tempo:
    """Beats-per-minute value clamped to a musical range."""

    def __init__(self, bpm: float = DEFAULT_BPM, min_bpm: float = MIN_BPM, max_bpm: float = MAX_BPM):
        """
        Initialize the tempo.

        Args:
            bpm: Starting beats per minute
            min_bpm: Lowest value the stepper can reach
            max_bpm: Highest value the stepper can reach
        """
        if min_bpm <= 0 or min_bpm > max_bpm:
            raise ValueError(f"Invalid BPM range {min_bpm}-{max_bpm}")

        self.min_bpm = float(min_bpm)
        self.max_bpm = float(max_bpm)
        self.bpm = self.min_bpm
        self.set(bpm)

    @property
    def period(self) -> float:
        """Seconds between beats."""
        return 60.0 / self.bpm

    def set(self, bpm: float) -> float:
        """
        Set the tempo.

        Args:
            bpm: Beats per minute

        Returns:
            The stored value after clamping
        """
        if bpm <= 0:
            raise ValueError("BPM must be positive")

        clamped = min(self.max_bpm, max(self.min_bpm, float(bpm)))
        if clamped != bpm:
            logger.warning(f"BPM {bpm} outside {self.min_bpm}-{self.max_bpm}, using {clamped}")

        old_bpm = self.bpm
        self.bpm = clamped
        if old_bpm != clamped:
            logger.debug(f"BPM changed from {old_bpm} to {clamped}")
        return self.bpm

    def increment(self) -> float:
        if self.bpm + 1 <= self.max_bpm:
            self.bpm += 1
        return self.bpm

    def decrement(self) -> float:
        if self.bpm - 1 >= self.min_bpm:
            self.bpm -= 1
        return self.bpm

    @property
    def label(self) -> str:
        return f"{int(self.bpm)} bpm"
