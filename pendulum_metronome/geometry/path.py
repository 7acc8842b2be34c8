"""Minimal 2D path model used to describe canvas shapes."""

import math
from collections import namedtuple
from typing import List, Optional, Sequence, Tuple

import numpy as np


Point = namedtuple('Point', ['x', 'y'])

MOVE = 'move'
LINE = 'line'
QUAD = 'quad'
CLOSE = 'close'

Segment = namedtuple('Segment', ['kind', 'point', 'control'])


class Path:
    """A single subpath built from moves, lines and quadratic curves."""

    def __init__(self):
        self.segments: List[Segment] = []
        self._start: Optional[Point] = None
        self._current: Optional[Point] = None

    def move_to(self, point):
        point = Point(*point)
        self.segments.append(Segment(MOVE, point, None))
        self._start = point
        self._current = point

    def line_to(self, point):
        point = Point(*point)
        self.segments.append(Segment(LINE, point, None))
        self._current = point

    def quad_curve_to(self, point, control):
        point = Point(*point)
        self.segments.append(Segment(QUAD, point, Point(*control)))
        self._current = point

    def close_subpath(self):
        self.segments.append(Segment(CLOSE, self._start, None))
        self._current = self._start

    @property
    def start_point(self) -> Optional[Point]:
        return self._start

    @property
    def current_point(self) -> Optional[Point]:
        return self._current

    @property
    def is_closed(self) -> bool:
        return bool(self.segments) and self.segments[-1].kind == CLOSE

    @property
    def lines(self) -> List[Segment]:
        return [s for s in self.segments if s.kind == LINE]

    @property
    def curves(self) -> List[Segment]:
        return [s for s in self.segments if s.kind == QUAD]

    def flatten(self, steps: int = 8) -> List[Point]:
        """
        Approximate the path with a polyline.

        Args:
            steps: Number of line pieces used for each quadratic curve

        Returns:
            List of points; the closing point is not repeated
        """
        points: List[Point] = []
        previous = None
        for segment in self.segments:
            if segment.kind in (MOVE, LINE):
                points.append(segment.point)
            elif segment.kind == QUAD:
                points.extend(_sample_quad(previous, segment.control, segment.point, steps))
            previous = segment.point if segment.kind != CLOSE else previous
        return points


def _sample_quad(p0: Point, c: Point, p1: Point, steps: int) -> List[Point]:
    t = np.linspace(0.0, 1.0, max(1, steps) + 1)[1:]
    u = 1.0 - t
    xs = u * u * p0.x + 2 * u * t * c.x + t * t * p1.x
    ys = u * u * p0.y + 2 * u * t * c.y + t * t * p1.y
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def rotate_points(points: Sequence[Tuple[float, float]], degrees: float,
                  origin: Tuple[float, float]) -> List[Point]:
    """Rotate points about origin; positive degrees turn clockwise on a y-down canvas."""
    theta = math.radians(degrees)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    ox, oy = origin
    rotated = []
    for x, y in points:
        dx, dy = x - ox, y - oy
        rotated.append(Point(ox + dx * cos_t - dy * sin_t, oy + dx * sin_t + dy * cos_t))
    return rotated


def flat_coords(points: Sequence[Tuple[float, float]]) -> List[float]:
    """Flatten points into the x0, y0, x1, y1, ... list Tk canvas items expect."""
    coords: List[float] = []
    for x, y in points:
        coords.extend((x, y))
    return coords
