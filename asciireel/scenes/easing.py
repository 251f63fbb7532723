"""
Easing curves and progress helpers used by scene content renderers.
All take and return normalized progress (0-1) unless noted.
"""
import math
from typing import Callable


def ease_in_out(t: float) -> float:
    """Smooth 0→1 over 0→1 (smoothstep)."""
    if t <= 0:
        return 0.0
    if t >= 1:
        return 1.0
    return t * t * (3 - 2 * t)


def ease_out(t: float) -> float:
    """Fast start, slow end (cubic)."""
    if t <= 0:
        return 0.0
    if t >= 1:
        return 1.0
    return 1 - (1 - t) ** 3


def interpolate(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def animate_counter(target: int, progress: float) -> int:
    """Count up from 0 to target, decelerating toward the end."""
    return int(math.floor(target * ease_out(progress)))


def staggered_reveal(item_count: int, overlap: float = 0.5) -> Callable[[float, int], float]:
    """
    Per-item progress for revealing a list one item after another.
    overlap: 0 = strictly sequential, 1 = all items at once.
    Returns f(content_progress, item_index) -> item progress (0-1).
    """
    def reveal(content_progress: float, item_index: int) -> float:
        if item_count <= 1:
            return content_progress
        item_duration = 1 / (1 + (item_count - 1) * (1 - overlap))
        item_start = item_index * item_duration * (1 - overlap)
        item_end = item_start + item_duration
        if content_progress < item_start:
            return 0.0
        if content_progress >= item_end:
            return 1.0
        return (content_progress - item_start) / item_duration

    return reveal


def rotate_point(x: float, y: float, cx: float, cy: float, angle: float) -> tuple[float, float]:
    """Rotate (x, y) around (cx, cy) by angle radians."""
    c, s = math.cos(angle), math.sin(angle)
    dx, dy = x - cx, y - cy
    return cx + dx * c - dy * s, cy + dx * s + dy * c
