"""
Particle effects for celebration moments: (surface, frame, **options).
"""
import math
from typing import TYPE_CHECKING, Sequence

from .noise import cell_seed, seeded_random

if TYPE_CHECKING:
    from ..surface.base import Surface

PARTICLE_DEPTH = 50


def sparkles(
    surface: "Surface",
    frame: int,
    *,
    density: float = 0.005,
    chars: Sequence[str] = ("✦", "*", "·", "+"),
    depth: float = PARTICLE_DEPTH,
    color: str | None = None,
) -> None:
    """Short-lived twinkles: each sparkle is visible 5 frames out of every 20."""
    for y in range(surface.height):
        for x in range(surface.width):
            seed = cell_seed(x, y)
            phase = (frame + seed) % 20
            if phase < 5 and seeded_random(seed) < density:
                surface.set_pixel(x, y, chars[math.floor(phase / 5 * len(chars))], depth, color)


def confetti(
    surface: "Surface",
    frame: int,
    *,
    count: int = 20,
    chars: Sequence[str] = ("■", "◆", "●", "▲", "★"),
    speed: float = 1.0,
    depth: float = PARTICLE_DEPTH,
    color: str | None = None,
) -> None:
    """Pieces falling from above the screen with a sine drift."""
    for i in range(count):
        seed = i * 31
        start_x = seeded_random(seed) * surface.width
        start_y = -seeded_random(seed + 1) * surface.height
        fall = 0.3 + seeded_random(seed + 2) * 0.5 * speed
        drift = math.sin((frame + seed) * 0.1) * 2
        y = (start_y + frame * fall) % (surface.height + 10)
        x = math.floor((start_x + drift + surface.width) % surface.width)
        if 0 <= y < surface.height:
            ch = chars[math.floor(seeded_random(seed + 3) * len(chars))]
            surface.set_pixel(x, math.floor(y), ch, depth, color)
