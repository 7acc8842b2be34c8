"""GUI components for Pendulum Metronome."""

from .layers import MetronomeCanvas
from .main_app import PendulumMetronomeApp

__all__ = ['MetronomeCanvas', 'PendulumMetronomeApp']
