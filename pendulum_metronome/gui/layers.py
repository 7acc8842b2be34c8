"""Drawing layers of the metronome: body, pendulum and front plate."""

import tkinter as tk
from typing import List, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw, ImageTk

from config.settings import UI_SCALE
from ..geometry import Point, Rect, RoundedTrapezoid, flat_coords, rotate_points

# Frame sizes in unscaled canvas units
BODY_SIZE = (200, 350)
FRONT_SIZE = (180, 100)
FRONT_PADDING = 10
ROD_SIZE = (10, 320)
WEIGHT_SIZE = 35
# Weight center measured up from the pivot
WEIGHT_HEIGHT = 260
# Room on each side of the body for the leaning pendulum
SIDE_MARGIN = 80

BODY_SHAPE = RoundedTrapezoid(0.5, ((15, 15),))
FRONT_SHAPE = RoundedTrapezoid(0.85, ((0, 0), (10, 10)))
ROD_SHAPE = RoundedTrapezoid(1.0, ((ROD_SIZE[0] / 2, ROD_SIZE[0] / 2),))
WEIGHT_SHAPE = RoundedTrapezoid(1.0, ((10, 10),))

BODY_GRADIENT = ('#004d80', '#0075ba')
FRONT_COLOR = '#0075ba'
ROD_COLOR = 'red'
WEIGHT_COLOR = 'orange'

# Mask supersampling for smooth body edges
SUPERSAMPLE = 4


def _scaled(rect: Rect, scale: float) -> Rect:
    return Rect(rect.x * scale, rect.y * scale, rect.width * scale, rect.height * scale)


def canvas_size(scale: float = 1.0) -> Tuple[int, int]:
    width, height = BODY_SIZE
    return int(round((width + 2 * SIDE_MARGIN) * scale)), int(round(height * scale))


def pivot(scale: float = 1.0) -> Point:
    """Bottom center of the pendulum rod."""
    width, height = BODY_SIZE
    return Point((SIDE_MARGIN + width / 2) * scale, (height + ROD_SIZE[1]) / 2 * scale)


def front_outline(scale: float = 1.0) -> List[Point]:
    width, height = BODY_SIZE
    fw, fh = FRONT_SIZE
    rect = Rect(SIDE_MARGIN + (width - fw) / 2, height - FRONT_PADDING - fh, fw, fh)
    return FRONT_SHAPE.path(_scaled(rect, scale)).flatten()


def pendulum_outline(angle: float, scale: float = 1.0) -> Tuple[List[Point], List[Point]]:
    """
    Rod and weight polygons for the pendulum leaning at ``angle`` degrees.

    Args:
        angle: Rotation about the pivot, negative leans left
        scale: UI scale factor

    Returns:
        (rod points, weight points)
    """
    width, height = BODY_SIZE
    rod_w, rod_h = ROD_SIZE
    rod = Rect(SIDE_MARGIN + (width - rod_w) / 2, (height - rod_h) / 2, rod_w, rod_h)
    origin = pivot(1.0)
    weight = Rect(origin.x - WEIGHT_SIZE / 2, origin.y - WEIGHT_HEIGHT - WEIGHT_SIZE / 2,
                  WEIGHT_SIZE, WEIGHT_SIZE)

    rod_points = ROD_SHAPE.path(_scaled(rod, scale)).flatten()
    weight_points = WEIGHT_SHAPE.path(_scaled(weight, scale)).flatten()
    center = pivot(scale)
    return rotate_points(rod_points, angle, center), rotate_points(weight_points, angle, center)


def gradient_image(width: int, height: int, start: str, end: str) -> Image.Image:
    """Linear gradient from the top-left corner to the bottom-right corner."""
    ys, xs = np.mgrid[0:height, 0:width]
    t = (xs / max(1, width - 1) + ys / max(1, height - 1)) / 2.0
    c0 = np.array(ImageColor.getrgb(start), dtype=float)
    c1 = np.array(ImageColor.getrgb(end), dtype=float)
    rgb = c0 + (c1 - c0) * t[..., None]
    return Image.fromarray(np.round(rgb).astype(np.uint8), 'RGB')


def body_image(scale: float = 1.0) -> Image.Image:
    """Gradient-filled body shape as an RGBA image."""
    width, height = (int(round(v * scale)) for v in BODY_SIZE)
    big = (width * SUPERSAMPLE, height * SUPERSAMPLE)

    mask = Image.new('L', big, 0)
    outline = BODY_SHAPE.path(Rect(0, 0, big[0], big[1])).flatten(steps=16)
    ImageDraw.Draw(mask).polygon(flat_coords(outline), fill=255)
    mask = mask.resize((width, height), Image.Resampling.LANCZOS)

    image = gradient_image(width, height, *BODY_GRADIENT).convert('RGBA')
    image.putalpha(mask)
    return image


class MetronomeCanvas(tk.Canvas):
    """Canvas stacking the body, the pendulum and the front plate."""

    def __init__(self, parent, bg: str, scale: float = UI_SCALE):
        """Initialize the canvas.

        Args:
            parent: Parent widget
            bg: Background color
            scale: UI scale factor
        """
        width, height = canvas_size(scale)
        super().__init__(
            parent,
            width=width,
            height=height,
            bg=bg,
            highlightthickness=0
        )
        self.ui_scale = scale
        # Keep reference to prevent garbage collection
        self.body_photo = ImageTk.PhotoImage(body_image(scale))
        self.create_image(SIDE_MARGIN * scale, 0, image=self.body_photo, anchor='nw')

        rod, weight = pendulum_outline(0.0, scale)
        self.rod_item = self.create_polygon(flat_coords(rod), fill=ROD_COLOR, outline='')
        self.weight_item = self.create_polygon(flat_coords(weight), fill=WEIGHT_COLOR, outline='')

        self.create_polygon(flat_coords(front_outline(scale)), fill=FRONT_COLOR, outline='')

    def set_angle(self, angle: float):
        """Lean the pendulum to ``angle`` degrees."""
        rod, weight = pendulum_outline(angle, self.ui_scale)
        self.coords(self.rod_item, *flat_coords(rod))
        self.coords(self.weight_item, *flat_coords(weight))
