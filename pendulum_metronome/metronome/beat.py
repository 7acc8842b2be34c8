"""Beat phase state machine: pendulum side plus accent counter."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from config.settings import BEATS_PER_BAR


class PendulumSide(Enum):
    LEFT = 'left'
    RIGHT = 'right'

    def flipped(self) -> 'PendulumSide':
        return PendulumSide.RIGHT if self is PendulumSide.LEFT else PendulumSide.LEFT


class Cue(Enum):
    """Sound cue played on a beat."""

    ACCENT = 'accent'
    TICK = 'tick'


@dataclass(frozen=True)
class BeatState:
    """Pendulum rest side and position within the accent cycle."""

    side: PendulumSide = PendulumSide.RIGHT
    counter: int = 0

    def advance(self) -> Tuple['BeatState', Cue]:
        """
        Move to the next beat.

        Returns:
            The new state and the cue to play; the accent plays whenever the
            counter wraps back to 0
        """
        counter = (self.counter + 1) % BEATS_PER_BAR
        cue = Cue.ACCENT if counter == 0 else Cue.TICK
        return BeatState(self.side.flipped(), counter), cue

    def angle(self, swing_angle: float) -> float:
        """Rest angle in degrees; negative leans left."""
        return -swing_angle if self.side is PendulumSide.LEFT else swing_angle
