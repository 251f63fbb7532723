"""
Scenes: seconds-based timing, phase state machine, timeline queries, render dispatch.
"""
from .schema import (
    Animated,
    CompiledScene,
    Phase,
    PhaseFractions,
    PhaseState,
    RenderMode,
    SceneDeclaration,
    SceneQueryResult,
    Static,
)
from .phases import MIN_CONTENT_SECONDS, compute_phases, scene_phase
from .manager import SceneManager, SceneTable, TimingDefaults, build_scene_table
from .render import SceneConfig, create_scene, render_scene
from .easing import animate_counter, ease_in_out, ease_out, staggered_reveal

__all__ = [
    "Animated",
    "CompiledScene",
    "Phase",
    "PhaseFractions",
    "PhaseState",
    "RenderMode",
    "SceneDeclaration",
    "SceneQueryResult",
    "Static",
    "MIN_CONTENT_SECONDS",
    "compute_phases",
    "scene_phase",
    "SceneManager",
    "SceneTable",
    "TimingDefaults",
    "build_scene_table",
    "SceneConfig",
    "create_scene",
    "render_scene",
    "animate_counter",
    "ease_in_out",
    "ease_out",
    "staggered_reveal",
]
