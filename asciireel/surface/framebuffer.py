"""
Framebuffer: the in-memory Surface used for terminal playback and snapshots.
Cells live in three numpy arrays (chars, depth, color) of shape (height, width).
Cleared once per frame, drawn into by scene renderers, read once at output time.
"""
import math

import numpy as np

from .base import Surface


class Framebuffer(Surface):
    """Character grid with depth test. Cleared cells have depth +inf and no color."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Framebuffer: size must be positive (got {width}x{height})")
        self._width = int(width)
        self._height = int(height)
        self.chars = np.full((self._height, self._width), " ", dtype="<U1")
        self.depth = np.full((self._height, self._width), np.inf, dtype=np.float64)
        self.colors = np.full((self._height, self._width), None, dtype=object)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self, char: str = " ") -> None:
        self.chars.fill(char[:1] or " ")
        self.depth.fill(np.inf)
        self.colors.fill(None)

    def set_pixel(
        self,
        x: float,
        y: float,
        char: str,
        depth: float = 0,
        color: str | None = None,
    ) -> None:
        if not (math.isfinite(x) and math.isfinite(y)):
            return
        xi = math.floor(x)
        yi = math.floor(y)
        if not (0 <= xi < self._width and 0 <= yi < self._height):
            return
        if depth <= self.depth[yi, xi]:
            self.chars[yi, xi] = str(char)[:1] or " "
            self.colors[yi, xi] = color
            self.depth[yi, xi] = depth

    def get_pixel(self, x: float, y: float) -> str:
        if not (math.isfinite(x) and math.isfinite(y)):
            return " "
        xi = math.floor(x)
        yi = math.floor(y)
        if 0 <= xi < self._width and 0 <= yi < self._height:
            return str(self.chars[yi, xi])
        return " "

    def get_color(self, x: int, y: int) -> str | None:
        if 0 <= x < self._width and 0 <= y < self._height:
            return self.colors[y, x]
        return None

    def get_depth(self, x: int, y: int) -> float:
        if 0 <= x < self._width and 0 <= y < self._height:
            return float(self.depth[y, x])
        return math.inf

    def clear_box(self, x: int, y: int, width: int, height: int, char: str = " ") -> None:
        """Reset a rectangle to blank cells that any later write can overwrite."""
        x0, y0 = max(0, x), max(0, y)
        x1, y1 = min(self._width, x + width), min(self._height, y + height)
        if x0 >= x1 or y0 >= y1:
            return
        self.chars[y0:y1, x0:x1] = char[:1] or " "
        self.depth[y0:y1, x0:x1] = np.inf
        self.colors[y0:y1, x0:x1] = None

    def lines(self) -> list[str]:
        return ["".join(row.tolist()) for row in self.chars]

    def to_string(self) -> str:
        return "\n".join(self.lines())
