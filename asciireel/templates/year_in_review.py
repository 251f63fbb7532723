"""
Year-in-review reel: intro → stats → projects → closing.
Scene timing and effect names come from the `scenes` config section; the
stats themselves come from a YAML/JSON file (or the built-in sample).
"""
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..config import resolve_display_config, timing_defaults
from ..effects.noise import cell_seed, seeded_random
from ..effects.registry import EffectRegistry, default_registry
from ..effects.text import draw_typewriter, fade_in_text, typewriter_centered
from ..reel import Reel
from ..scenes.easing import animate_counter, ease_out, staggered_reveal
from ..scenes.manager import SceneManager
from ..scenes.render import SceneConfig, create_scene
from ..scenes.schema import Animated, RenderMode, SceneDeclaration
from ..surface.base import Surface
from ..surface.font import GLYPH_ADVANCE, GLYPH_HEIGHT, glyph, large_text_width

logger = logging.getLogger(__name__)

SAMPLE_STATS: dict[str, Any] = {
    "user_name": "you",
    "year": 2025,
    "tagline": "A year of shipping",
    "stats": [
        {"label": "Sessions", "value": 412},
        {"label": "Commits", "value": 1873},
        {"label": "Lines written", "value": 48210},
        {"label": "Late nights", "value": 37},
    ],
    "projects": [
        {"name": "terminal-reel", "description": "ASCII animations for the terminal"},
        {"name": "dotfiles", "description": "Finally under version control"},
        {"name": "blog", "description": "Three posts, one about the blog itself"},
    ],
}

# Scene name → fallbacks used when the config does not mention the scene
SCENE_DEFAULTS: dict[str, dict[str, Any]] = {
    "intro": {"duration": 7.0, "hold": 2.0, "background": "stars",
              "transition_in_effect": None, "transition_out_effect": "fade"},
    "stats": {"duration": 6.0, "hold": 2.5, "background": "stars",
              "transition_in_effect": "dissolve", "transition_out_effect": "wipe_left"},
    "projects": {"duration": 6.0, "hold": 2.5, "background": "stars",
                 "transition_in_effect": "wipe_right", "transition_out_effect": "dissolve"},
    "closing": {"duration": 4.0, "hold": 1.5, "background": "stars",
                "transition_in_effect": "circle_reveal", "transition_out_effect": "circle_close"},
}
SCENE_ORDER = ("intro", "stats", "projects", "closing")


def load_stats(path: Path | None = None) -> dict[str, Any]:
    """Load stats from YAML or JSON (path None = sample). Missing keys fall back to SAMPLE_STATS."""
    merged = {**SAMPLE_STATS}
    if path is None:
        return merged
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Stats file not found: {p}")
    with open(p, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Stats file {p} must contain a mapping (got {type(data).__name__})")
    merged.update({k: v for k, v in data.items() if v is not None})
    return merged


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def _mode_progress(mode: RenderMode) -> tuple[int, float]:
    if isinstance(mode, Animated):
        return mode.frame, mode.progress
    return mode.frame, 1.0


def draw_dissolved_large_text(surface: Surface, y: int, text: str, reveal: float, depth: float = 0) -> None:
    """Centered block text; each ink cell appears once reveal passes its seeded threshold."""
    x0 = (surface.width - large_text_width(text)) // 2
    for n, ch in enumerate(text):
        for row, line in enumerate(glyph(ch)):
            for col, cell in enumerate(line):
                if cell == " ":
                    continue
                x = x0 + n * GLYPH_ADVANCE + col
                if seeded_random(cell_seed(x, y + row)) < reveal:
                    surface.set_pixel(x, y + row, cell, depth)


def draw_intro(surface: Surface, mode: RenderMode, *, year: Any, tagline: str, user_name: str) -> None:
    """
    Intro card. Animated mode staggers the parts over progress:
    year dissolves in first, then the headline types, then the tagline, then the name.
    Static mode draws the finished card.
    """
    _, p = _mode_progress(mode)
    year_phase = _clamp01(p * 5)
    headline_phase = _clamp01((p - 0.2) * 4)
    tagline_phase = _clamp01((p - 0.5) * 3)

    top = max(1, surface.height // 2 - GLYPH_HEIGHT - 2)
    draw_dissolved_large_text(surface, top, str(year), year_phase)
    if headline_phase > 0:
        typewriter_centered(surface, top + GLYPH_HEIGHT + 2, "Think back on your year", headline_phase)
    if tagline_phase > 0:
        fade_in_text(surface, top + GLYPH_HEIGHT + 4, tagline, ease_out(tagline_phase))
    if p > 0.72:
        surface.draw_centered_text(surface.height - 3, f"for {user_name}")


def draw_stats(surface: Surface, frame: int, progress: float, stats: list[Mapping[str, Any]]) -> None:
    """Heading plus one counting-up line per stat, revealed one after another."""
    surface.draw_centered_text(2, "YOUR YEAR IN NUMBERS")
    surface.draw_hline((surface.width - 20) // 2, 3, 20, "─")
    if not stats:
        return
    reveal = staggered_reveal(len(stats), overlap=0.4)
    label_w = max(len(str(s.get("label", ""))) for s in stats)
    x = max(0, (surface.width - label_w - 14) // 2)
    for i, stat in enumerate(stats):
        item_p = reveal(progress, i)
        if item_p <= 0:
            continue
        value = int(stat.get("value", 0) or 0)
        label = str(stat.get("label", "")).ljust(label_w)
        surface.draw_text(x, 6 + i * 2, f"{label}  {animate_counter(value, item_p):>10,}")


def draw_projects(surface: Surface, frame: int, progress: float, projects: list[Mapping[str, Any]]) -> None:
    """Project list typed out one entry at a time."""
    surface.draw_centered_text(2, "WHAT YOU BUILT")
    surface.draw_hline((surface.width - 14) // 2, 3, 14, "─")
    if not projects:
        return
    reveal = staggered_reveal(len(projects), overlap=0.3)
    x = max(2, surface.width // 6)
    for i, project in enumerate(projects):
        item_p = reveal(progress, i)
        if item_p <= 0:
            continue
        y = 6 + i * 3
        draw_typewriter(surface, x, y, f"▸ {project.get('name', '')}", _clamp01(item_p * 2))
        if item_p > 0.5:
            draw_typewriter(surface, x + 4, y + 1, str(project.get("description", "")), (item_p - 0.5) * 2, cursor="")


def draw_closing(surface: Surface, frame: int, progress: float, *, year: Any, registry: EffectRegistry) -> None:
    """Thank-you card; confetti once the text has landed."""
    top = max(1, surface.height // 2 - GLYPH_HEIGHT)
    draw_dissolved_large_text(surface, top, "THANKS", _clamp01(progress * 2))
    if progress > 0.5:
        farewell = f"See you in {int(year) + 1}" if str(year).isdigit() else "See you next year"
        surface.draw_centered_text(top + GLYPH_HEIGHT + 2, farewell)
    if progress >= 1:
        registry.get("confetti")(surface, frame)
        registry.get("sparkles")(surface, frame)


def _scene_settings(name: str, config: Mapping[str, Any]) -> dict[str, Any]:
    overrides = (config.get("scenes") or {}).get(name) or {}
    return {**SCENE_DEFAULTS[name], **overrides}


def _effect(registry: EffectRegistry, name: str | None, kind: str):
    if not name:
        return None
    fn = registry.get(name)
    if registry.kind_of(name) != kind:
        raise ValueError(f"Effect {name!r} is a {registry.kind_of(name)} effect, expected {kind}")
    return fn


def build_reel(
    stats: Mapping[str, Any] | None = None,
    *,
    config: Mapping[str, Any] | None = None,
    registry: EffectRegistry | None = None,
    fps: float | None = None,
) -> Reel:
    """
    Assemble the year-in-review reel.
    config: full app config (load_config()); reads `scenes`, `timing` and `display.fps`.
    Unknown effect names in the config raise KeyError; wrong kinds raise ValueError.
    """
    stats = {**SAMPLE_STATS, **(stats or {})}
    config = config or {}
    registry = registry or default_registry()
    if fps is None:
        fps = resolve_display_config(dict(config))["fps"]

    declarations: list[SceneDeclaration] = []
    configs: dict[str, SceneConfig] = {}
    contents = {
        "intro": lambda s, f, p: draw_intro(
            s, Animated(f, p), year=stats["year"], tagline=str(stats["tagline"]), user_name=str(stats["user_name"])
        ),
        "stats": lambda s, f, p: draw_stats(s, f, p, list(stats.get("stats") or [])),
        "projects": lambda s, f, p: draw_projects(s, f, p, list(stats.get("projects") or [])),
        "closing": lambda s, f, p: draw_closing(s, f, p, year=stats["year"], registry=registry),
    }
    for name in SCENE_ORDER:
        settings = _scene_settings(name, config)
        declarations.append(
            SceneDeclaration(
                name=name,
                duration=float(settings["duration"]),
                hold=settings.get("hold"),
                transition_in=settings.get("transition_in"),
                transition_out=settings.get("transition_out"),
            )
        )
        # Reel swaps in the compiled scene phases
        configs[name] = create_scene(
            background=_effect(registry, settings.get("background"), "background"),
            content=contents[name],
            transition_in=_effect(registry, settings.get("transition_in_effect"), "transition"),
            transition_out=_effect(registry, settings.get("transition_out_effect"), "transition"),
        )

    manager = SceneManager(declarations, fps=fps, defaults=timing_defaults(dict(config)))
    manager.log_timing()
    return Reel(manager, configs)
