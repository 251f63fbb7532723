"""
Deterministic hash noise. Effects derive every random choice from (seed, frame)
so any frame renders identically no matter which frames came before it.
"""
import math


def seeded_random(seed: float) -> float:
    """Pseudo-random value in [0, 1) fully determined by seed."""
    x = math.sin(seed * 12.9898 + 78.233) * 43758.5453
    return x - math.floor(x)


def cell_seed(x: int, y: int) -> int:
    return x * 31 + y * 17
