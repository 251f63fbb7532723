"""
Transitions: (surface, progress, frame=0, **options).
progress is the share of the screen left visible: 0 = fully masked, 1 = untouched.
Transition-in passes 0 → 1 and transition-out passes 1 → 0, so the same effect
works in both directions. Masks draw at depth -100, above everything else.
"""
import math
from typing import TYPE_CHECKING

from ..surface.base import CELL_ASPECT
from ..surface.font import DENSITY_CHARS
from .noise import cell_seed, seeded_random

if TYPE_CHECKING:
    from ..surface.base import Surface

MASK_DEPTH = -100
FADE_DEPTH = -90


def _mask_columns(surface: "Surface", x0: int, x1: int, char: str) -> None:
    for y in range(surface.height):
        for x in range(max(0, x0), min(surface.width, x1)):
            surface.set_pixel(x, y, char, MASK_DEPTH)


def wipe_right(surface: "Surface", progress: float, frame: int = 0, *, char: str = "█") -> None:
    """Reveal from the left edge toward the right."""
    edge = math.floor(progress * surface.width)
    _mask_columns(surface, edge, surface.width, char)


def wipe_left(surface: "Surface", progress: float, frame: int = 0, *, char: str = "█") -> None:
    """Reveal from the right edge toward the left."""
    edge = math.floor((1 - progress) * surface.width)
    _mask_columns(surface, 0, edge, char)


def dissolve(surface: "Surface", progress: float, frame: int = 0, *, seed: int = 0) -> None:
    """Random per-cell reveal; a cell shows once progress passes its threshold."""
    for y in range(surface.height):
        for x in range(surface.width):
            if seeded_random(seed + cell_seed(x, y)) > progress:
                surface.set_pixel(x, y, " ", MASK_DEPTH)


def fade(surface: "Surface", progress: float, frame: int = 0) -> None:
    """Replace drawn cells with a density character matching progress."""
    if progress >= 1:
        return
    idx = max(0, math.floor(progress * (len(DENSITY_CHARS) - 1)))
    fade_char = DENSITY_CHARS[idx]
    for y in range(surface.height):
        for x in range(surface.width):
            if surface.get_pixel(x, y) != " ":
                surface.set_pixel(x, y, fade_char, FADE_DEPTH)


def circle_reveal(
    surface: "Surface",
    progress: float,
    frame: int = 0,
    *,
    cx: float | None = None,
    cy: float | None = None,
) -> None:
    """Iris opening from (cx, cy); defaults to the screen center."""
    center_x = surface.width / 2 if cx is None else cx
    center_y = surface.height / 2 if cy is None else cy
    radius = progress * math.hypot(surface.width, surface.height)
    for y in range(surface.height):
        for x in range(surface.width):
            dx = (x - center_x) / CELL_ASPECT
            dy = y - center_y
            if math.hypot(dx, dy) >= radius:
                surface.set_pixel(x, y, " ", MASK_DEPTH)


def circle_close(
    surface: "Surface",
    progress: float,
    frame: int = 0,
    *,
    cx: float | None = None,
    cy: float | None = None,
) -> None:
    """Blank disc spreading out from (cx, cy); fully covered at progress 0."""
    center_x = surface.width / 2 if cx is None else cx
    center_y = surface.height / 2 if cy is None else cy
    radius = (1 - progress) * math.hypot(surface.width, surface.height)
    for y in range(surface.height):
        for x in range(surface.width):
            if math.hypot((x - center_x) / CELL_ASPECT, y - center_y) < radius:
                surface.set_pixel(x, y, " ", MASK_DEPTH)
