"""
Reel: a SceneManager plus one renderer per scene. Exposes total_frames and
render_frame(surface, frame) for the player, and checks itself before playback
so problems surface before the first frame instead of mid-animation.
"""
import logging
from dataclasses import replace
from typing import Callable, Mapping, Union

from .scenes.manager import SceneManager
from .scenes.render import SceneConfig, render_scene
from .scenes.schema import SceneQueryResult
from .surface.base import Surface
from .surface.framebuffer import Framebuffer

logger = logging.getLogger(__name__)

# Free-form renderer: gets the full query result and handles phases itself
SceneRenderer = Callable[[Surface, int, SceneQueryResult], None]
SceneEntry = Union[SceneConfig, SceneRenderer]


class ReelError(Exception):
    """Reel cannot be played, or a scene renderer failed."""
    def __init__(self, message: str, scene: str | None = None, frame: int | None = None):
        super().__init__(message)
        self.scene = scene
        self.frame = frame


class Reel:
    """
    Scene timeline bound to renderers by scene name.
    SceneConfig entries are dispatched through render_scene with the compiled
    scene's phase fractions; plain callables receive the SceneQueryResult.
    """

    def __init__(self, manager: SceneManager, renderers: Mapping[str, SceneEntry]):
        unknown = [name for name in renderers if manager.scene_by_name(name) is None]
        if unknown:
            raise ValueError(f"Reel: renderers for undeclared scenes: {', '.join(unknown)}")
        self.manager = manager
        self.renderers: dict[str, SceneEntry] = {}
        for name, entry in renderers.items():
            if isinstance(entry, SceneConfig):
                entry = replace(entry, phases=manager.scene_by_name(name).phases)
            self.renderers[name] = entry

    @property
    def total_frames(self) -> int:
        return self.manager.total_frames

    @property
    def fps(self) -> float:
        return self.manager.fps

    def missing_renderers(self) -> list[str]:
        return [name for name in self.manager.scene_names() if name not in self.renderers]

    def render_frame(self, surface: Surface, frame: int) -> SceneQueryResult | None:
        """Draw one frame. Returns the query result, or None when there is nothing to render."""
        info = self.manager.query_at(frame)
        if info is None:
            return None
        entry = self.renderers.get(info.name)
        if entry is None:
            return info
        try:
            if isinstance(entry, SceneConfig):
                render_scene(surface, frame, info.raw_progress, entry)
            else:
                entry(surface, frame, info)
        except Exception as e:
            raise ReelError(
                f"Scene {info.name!r} failed at frame {frame}: {e}",
                scene=info.name,
                frame=frame,
            ) from e
        return info

    def require_playable(self, width: int = 80, height: int = 24) -> None:
        """Raise ReelError describing the first problem found by validate_reel."""
        issues = validate_reel(self, width=width, height=height)
        if issues:
            raise ReelError(issues[0])


def validate_reel(reel: Reel, *, width: int = 80, height: int = 24) -> list[str]:
    """
    Check a reel before playback. Returns a list of problems (empty = playable):
    no scenes, less than one second of frames, scenes without a renderer,
    renderer errors at the first/middle/last frame, frame coverage mismatch.
    """
    manager = reel.manager
    if not manager.scenes:
        return ["No scenes defined: nothing to play"]

    issues: list[str] = []
    total = manager.total_frames
    if total < manager.fps:
        issues.append(f"total_frames is {total} (expected at least {manager.fps:g}, one second)")

    for name in reel.missing_renderers():
        issues.append(f"Scene {name!r} has no renderer")

    covered = sum(s.duration_frames for s in manager.scenes)
    if covered != total:
        issues.append(f"Scene frames ({covered}) do not match total_frames ({total})")

    fb = Framebuffer(width, height)
    for frame in sorted({0, total // 2, max(0, total - 1)}):
        fb.clear()
        try:
            reel.render_frame(fb, frame)
        except ReelError as e:
            issues.append(str(e))

    for issue in issues:
        logger.debug("validate_reel: %s", issue)
    return issues
