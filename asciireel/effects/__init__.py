"""
Effects: backgrounds, particles, transitions and text, looked up by name through an EffectRegistry.
"""
from .registry import EFFECT_KINDS, EffectRegistry, default_registry
from .noise import seeded_random

__all__ = ["EFFECT_KINDS", "EffectRegistry", "default_registry", "seeded_random"]
