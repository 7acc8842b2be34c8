"""Pendulum swing interpolation."""


def ease_in_out(t: float) -> float:
    """Smoothstep easing on [0, 1]."""
    t = min(1.0, max(0.0, t))
    return t * t * (3.0 - 2.0 * t)


class PendulumSwing:
    """Angle of the pendulum while it swings between rest positions."""

    def __init__(self, angle: float = 0.0):
        self.start_angle = angle
        self.target_angle = angle
        self.duration = 0.0
        self.started_at = 0.0

    def retarget(self, target: float, duration: float, now: float):
        """
        Begin a swing towards ``target`` lasting ``duration`` seconds.

        An unfinished swing continues from wherever the pendulum is now.
        """
        self.start_angle = self.angle_at(now)
        self.target_angle = target
        self.duration = max(0.0, duration)
        self.started_at = now

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, (now - self.started_at) / self.duration))

    def angle_at(self, now: float) -> float:
        eased = ease_in_out(self.progress(now))
        return self.start_angle + (self.target_angle - self.start_angle) * eased

    def is_settled(self, now: float) -> bool:
        return self.progress(now) >= 1.0
