"""
Background effects: (surface, frame, **options). Drawn at depth 100 by default
so scene content and transitions always paint over them.
"""
import math
from typing import TYPE_CHECKING, Sequence

from .noise import cell_seed, seeded_random

if TYPE_CHECKING:
    from ..surface.base import Surface

BACKGROUND_DEPTH = 100


def stars(
    surface: "Surface",
    frame: int,
    *,
    density: float = 0.006,
    twinkle: bool = True,
    depth: float = BACKGROUND_DEPTH,
    color: str | None = None,
) -> None:
    """Fixed star field; a share of the stars twinkle every 8 frames."""
    for y in range(surface.height):
        for x in range(surface.width):
            seed = cell_seed(x, y)
            if seeded_random(seed) >= density:
                continue
            bright = twinkle and seeded_random(seed + frame // 8) > 0.7
            surface.set_pixel(x, y, "·" if bright else ".", depth, color)


def rain(
    surface: "Surface",
    frame: int,
    *,
    density: float = 0.02,
    speed: float = 1.0,
    char: str = "|",
    depth: float = BACKGROUND_DEPTH,
    color: str | None = None,
) -> None:
    """Falling three-cell drops in a subset of columns."""
    for x in range(surface.width):
        column = x * 31
        if seeded_random(column) >= density * 10:
            continue
        drop_speed = 0.5 + seeded_random(column + 1) * speed
        offset = math.floor(frame * drop_speed)
        start_y = seeded_random(column + 2) * surface.height
        for n, drop_char in enumerate((char, ":", ".")):
            y = math.floor((start_y + offset + n) % surface.height)
            surface.set_pixel(x, y, drop_char, depth, color)


def snow(
    surface: "Surface",
    frame: int,
    *,
    density: float = 0.01,
    chars: Sequence[str] = ("*", "·", "."),
    depth: float = BACKGROUND_DEPTH,
    color: str | None = None,
) -> None:
    """Flakes falling slowly with a sideways drift; wraps at the edges."""
    for y in range(surface.height):
        for x in range(surface.width):
            seed = cell_seed(x, y)
            if seeded_random(seed) >= density:
                continue
            fall = 0.3 + seeded_random(seed + 1) * 0.3
            drift = math.sin((frame + seed) * 0.1) * 2
            draw_y = (y + math.floor(frame * fall)) % surface.height
            draw_x = (x + math.floor(drift)) % surface.width
            ch = chars[math.floor(seeded_random(seed + 2) * len(chars))]
            surface.set_pixel(draw_x, draw_y, ch, depth, color)
