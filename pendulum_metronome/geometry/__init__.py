"""Shape geometry for the metronome drawing."""

from .path import Path, Point, rotate_points, flat_coords
from .trapezoid import CornerSize, Rect, RoundedTrapezoid, decode_corner_sizes, rounded_trapezoid

__all__ = [
    'Path', 'Point', 'rotate_points', 'flat_coords',
    'CornerSize', 'Rect', 'RoundedTrapezoid', 'decode_corner_sizes', 'rounded_trapezoid',
]
