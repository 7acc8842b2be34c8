"""Pendulum Metronome - a visual metronome with a swinging pendulum."""

__version__ = "1.0.0"
