"""
Text effects. Pure helpers return what to show; draw_* helpers paint it.
Drawers take (surface, y, text, progress, **options).
"""
import math
from typing import TYPE_CHECKING

from ..surface.font import DENSITY_CHARS

if TYPE_CHECKING:
    from ..surface.base import Surface

CURSOR = "▌"


def typewriter(text: str, progress: float) -> str:
    """Prefix of text revealed at progress."""
    return text[: max(0, math.floor(progress * len(text)))]


def fade_by_letter(text: str, progress: float) -> list[tuple[str, float]]:
    """(display char, opacity) per letter; letters fade in left to right."""
    out: list[tuple[str, float]] = []
    top = len(DENSITY_CHARS) - 1
    for i, ch in enumerate(text):
        opacity = max(0.0, min(1.0, progress * len(text) - i))
        if ch == " ":
            out.append((" ", 1.0))
        else:
            out.append((DENSITY_CHARS[math.floor(opacity * top)], opacity))
    return out


def draw_typewriter(
    surface: "Surface",
    x: int,
    y: int,
    text: str,
    progress: float,
    *,
    cursor: str = CURSOR,
    depth: float = 0,
    color: str | None = None,
) -> None:
    visible = typewriter(text, progress)
    surface.draw_text(x, y, visible, depth, color)
    if progress < 1 and cursor:
        surface.set_pixel(x + len(visible), y, cursor, depth, color)


def typewriter_centered(
    surface: "Surface",
    y: int,
    text: str,
    progress: float,
    *,
    cursor: str = CURSOR,
    depth: float = 0,
    color: str | None = None,
) -> None:
    x = (surface.width - len(text)) // 2
    draw_typewriter(surface, x, y, text, progress, cursor=cursor, depth=depth, color=color)


def fade_in_text(
    surface: "Surface",
    y: int,
    text: str,
    progress: float,
    *,
    depth: float = 0,
    color: str | None = None,
) -> None:
    """Centered text whose letters firm up through the density ramp."""
    x = (surface.width - len(text)) // 2
    for i, (ch, opacity) in enumerate(fade_by_letter(text, progress)):
        if opacity > 0.9:
            surface.set_pixel(x + i, y, text[i], depth, color)
        elif opacity > 0:
            surface.set_pixel(x + i, y, ch, depth, color)
