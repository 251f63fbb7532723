"""
Abstract drawing surface. Implementations store cells; every shape and text
primitive here is built on set_pixel, so a terminal buffer, an image buffer or
a test double all get the same drawing behavior.
"""
import math
from abc import ABC, abstractmethod
from typing import Iterable

from .font import DENSITY_CHARS, GLYPH_ADVANCE, glyph, large_text_width

# Terminal cells are roughly twice as tall as wide
CELL_ASPECT = 2.16


class Surface(ABC):
    """
    2D character grid with per-cell depth. A write lands only if its depth is
    <= the depth already stored (lower depth draws on top). Writes outside the
    grid are ignored.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @abstractmethod
    def set_pixel(
        self,
        x: float,
        y: float,
        char: str,
        depth: float = 0,
        color: str | None = None,
    ) -> None:
        """Depth-tested write of one cell; coordinates are floored."""
        ...

    @abstractmethod
    def get_pixel(self, x: float, y: float) -> str:
        """Character at (x, y), coordinates floored; a space outside the grid."""
        ...

    @abstractmethod
    def clear(self, char: str = " ") -> None:
        """Reset every cell to `char`, no color, infinite depth."""
        ...

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # Lines and shapes

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, char: str = "#", depth: float = 0) -> None:
        """Bresenham line between two integer points, inclusive."""
        x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        sx = 1 if x1 < x2 else -1
        sy = 1 if y1 < y2 else -1
        err = dx - dy
        x, y = x1, y1
        while True:
            self.set_pixel(x, y, char, depth)
            if x == x2 and y == y2:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy

    def draw_hline(self, x: int, y: int, length: int, char: str = "-", depth: float = 0) -> None:
        for i in range(length):
            self.set_pixel(x + i, y, char, depth)

    def draw_vline(self, x: int, y: int, length: int, char: str = "|", depth: float = 0) -> None:
        for i in range(length):
            self.set_pixel(x, y + i, char, depth)

    def draw_box(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        char: str = "#",
        filled: bool = False,
        depth: float = 0,
    ) -> None:
        if filled:
            for dy in range(height):
                self.draw_hline(x, y + dy, width, char, depth)
            return
        self.draw_hline(x, y, width, char, depth)
        self.draw_hline(x, y + height - 1, width, char, depth)
        self.draw_vline(x, y, height, char, depth)
        self.draw_vline(x + width - 1, y, height, char, depth)

    def draw_circle(
        self,
        cx: int,
        cy: int,
        radius: int,
        char: str = "o",
        filled: bool = False,
        depth: float = 0,
    ) -> None:
        """Midpoint circle outline, or a filled disc."""
        if filled:
            for y in range(-radius, radius + 1):
                for x in range(-radius, radius + 1):
                    if x * x + y * y <= radius * radius:
                        self.set_pixel(cx + x, cy + y, char, depth)
            return

        x, y, err = radius, 0, 0
        while x >= y:
            for px, py in (
                (x, y), (y, x), (-y, x), (-x, y),
                (-x, -y), (-y, -x), (y, -x), (x, -y),
            ):
                self.set_pixel(cx + px, cy + py, char, depth)
            if err <= 0:
                y += 1
                err += 2 * y + 1
            if err > 0:
                x -= 1
                err -= 2 * x + 1

    # Text

    def draw_text(self, x: int, y: int, text: str, depth: float = 0, color: str | None = None) -> None:
        for i, ch in enumerate(text):
            self.set_pixel(x + i, y, ch, depth, color)

    def draw_centered_text(self, y: int, text: str, depth: float = 0, color: str | None = None) -> None:
        x = (self.width - len(text)) // 2
        self.draw_text(x, y, text, depth, color)

    def draw_large_text(self, x: int, y: int, text: str, depth: float = 0, color: str | None = None) -> None:
        """Block-font text (5 rows high); only ink cells are written."""
        for n, ch in enumerate(text):
            for row, line in enumerate(glyph(ch)):
                for col, cell in enumerate(line):
                    if cell != " ":
                        self.set_pixel(x + n * GLYPH_ADVANCE + col, y + row, cell, depth, color)

    def draw_large_text_centered(self, y: int, text: str, depth: float = 0, color: str | None = None) -> None:
        x = (self.width - large_text_width(text)) // 2
        self.draw_large_text(x, y, text, depth, color)

    # Fills

    def draw_gradient_box(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        start_density: int = 0,
        end_density: int = len(DENSITY_CHARS) - 1,
        depth: float = 0,
    ) -> None:
        """Vertical density ramp from start_density to end_density (indices into DENSITY_CHARS)."""
        top = len(DENSITY_CHARS) - 1
        for dy in range(height):
            idx = math.floor(start_density + (end_density - start_density) * dy / height)
            char = DENSITY_CHARS[max(0, min(top, idx))]
            self.draw_hline(x, y + dy, width, char, depth)

    def fill_canvas(self, char: str = "#", depth: float = 0) -> None:
        for y in range(self.height):
            self.draw_hline(0, y, self.width, char, depth)

    def fill_except_box(
        self,
        ex: int,
        ey: int,
        ew: int,
        eh: int,
        char: str = "#",
        depth: float = 0,
    ) -> None:
        for y in range(self.height):
            for x in range(self.width):
                if ex <= x < ex + ew and ey <= y < ey + eh:
                    continue
                self.set_pixel(x, y, char, depth)

    def fill_except_circle(self, cx: float, cy: float, radius: float, char: str = "#", depth: float = 0) -> None:
        """Fill everything outside an aspect-corrected circle."""
        r2 = radius * radius
        for y in range(self.height):
            for x in range(self.width):
                dx = (x - cx) * CELL_ASPECT
                dy = y - cy
                if dx * dx + dy * dy <= r2:
                    continue
                self.set_pixel(x, y, char, depth)

    def draw_particles(self, particles: Iterable[tuple[float, float, str]], depth: float = 0) -> None:
        for px, py, char in particles:
            self.set_pixel(px, py, char, depth)
