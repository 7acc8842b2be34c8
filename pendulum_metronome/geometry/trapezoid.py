"""Rounded trapezoid outline generator."""

import math
from collections import namedtuple
from dataclasses import dataclass
from typing import Sequence, Tuple

from .path import Path, Point


CornerSize = namedtuple('CornerSize', ['width', 'height'])

ZERO_CORNER = CornerSize(0.0, 0.0)


class Rect(namedtuple('Rect', ['x', 'y', 'width', 'height'])):
    """Axis-aligned bounding rectangle."""

    __slots__ = ()

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height


def decode_corner_sizes(corner_sizes: Sequence) -> Tuple[CornerSize, CornerSize, CornerSize, CornerSize]:
    """
    Expand a corner size list into top-left, top-right, bottom-right, bottom-left.

    Args:
        corner_sizes: One size for every corner, two sizes (top, bottom),
            or four sizes (clockwise from top-left)

    Returns:
        Four corner sizes; any other list length means no rounding at all
    """
    sizes = [CornerSize(*size) for size in corner_sizes]
    if len(sizes) == 1:
        return sizes[0], sizes[0], sizes[0], sizes[0]
    if len(sizes) == 2:
        return sizes[0], sizes[0], sizes[1], sizes[1]
    if len(sizes) == 4:
        return sizes[0], sizes[1], sizes[2], sizes[3]
    return ZERO_CORNER, ZERO_CORNER, ZERO_CORNER, ZERO_CORNER


def _slant_offset(rise: float, angle: float) -> float:
    # horizontal run along a side edge climbing `rise` at `angle`
    if rise == 0:
        return 0.0
    slope = math.tan(angle)
    if slope == 0:
        return 0.0
    return rise / slope


def rounded_trapezoid(rect: Rect, pct: float, corner_sizes: Sequence = ()) -> Path:
    """
    Build the outline of an isosceles trapezoid with rounded corners.

    The base spans the full rectangle width along its bottom edge, the top
    edge is ``pct`` of that width and centered. Corners are cut with a
    quadratic curve whose control point is the sharp corner.

    Args:
        rect: Bounding rectangle
        pct: Top edge width as a fraction of the base width
        corner_sizes: See ``decode_corner_sizes``

    Returns:
        Closed path: four lines and four quadratic curves
    """
    rect = Rect(*rect)
    cs1, cs2, cs3, cs4 = decode_corner_sizes(corner_sizes)

    wb = rect.width
    wt = wb * pct
    inset = (wb - wt) / 2.0
    angle = math.atan2(rect.height, inset)

    c1 = Point(rect.x + inset, rect.y)
    c2 = Point(c1.x + wt, rect.y)
    c3 = Point(rect.max_x, rect.max_y)
    c4 = Point(rect.x, rect.max_y)

    pa2 = Point(c2.x - cs2.width, c2.y)
    pb2 = Point(c2.x + _slant_offset(cs2.height, angle), c2.y + cs2.height)

    pa3 = Point(c3.x - _slant_offset(cs3.height, angle), c3.y - cs3.height)
    pb3 = Point(c3.x - cs3.width, c3.y)

    pa4 = Point(c4.x + cs4.width, c4.y)
    pb4 = Point(c4.x + _slant_offset(cs4.height, angle), c4.y - cs4.height)

    pa1 = Point(c1.x - _slant_offset(cs1.height, angle), c1.y + cs1.height)
    pb1 = Point(c1.x + cs1.width, c1.y)

    path = Path()
    path.move_to((rect.mid_x, rect.y))

    path.line_to(pa2)
    path.quad_curve_to(pb2, control=c2)

    path.line_to(pa3)
    path.quad_curve_to(pb3, control=c3)

    path.line_to(pa4)
    path.quad_curve_to(pb4, control=c4)

    path.line_to(pa1)
    path.quad_curve_to(pb1, control=c1)

    path.close_subpath()
    return path


@dataclass(frozen=True)
class RoundedTrapezoid:
    """Shape descriptor: top-width ratio plus corner rounding sizes."""

    pct: float
    corner_sizes: Tuple = ()

    def path(self, rect: Rect) -> Path:
        return rounded_trapezoid(rect, self.pct, self.corner_sizes)
