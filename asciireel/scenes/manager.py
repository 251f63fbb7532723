"""
SceneManager: lays scene declarations out on the frame timeline and answers
"what is on screen at frame N". Built once, queried every frame; every query is
a pure function of the frame number, so frames can be rendered in any order.
"""
import bisect
import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .phases import (
    DEFAULT_FPS,
    DEFAULT_HOLD_SECONDS,
    DEFAULT_TRANSITION_IN_SECONDS,
    DEFAULT_TRANSITION_OUT_SECONDS,
    compute_phases,
    scene_phase,
)
from .schema import CompiledScene, Phase, SceneDeclaration, SceneQueryResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimingDefaults:
    """Fallback timing (seconds) for declarations that leave a field unset."""
    hold: float = DEFAULT_HOLD_SECONDS
    transition_in: float = DEFAULT_TRANSITION_IN_SECONDS
    transition_out: float = DEFAULT_TRANSITION_OUT_SECONDS


@dataclass(frozen=True)
class SceneTable:
    scenes: tuple[CompiledScene, ...]
    total_frames: int


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _as_declaration(item: SceneDeclaration | Mapping[str, Any]) -> SceneDeclaration:
    if isinstance(item, SceneDeclaration):
        return item
    return SceneDeclaration.from_dict(item)


def build_scene_table(
    declarations: Iterable[SceneDeclaration | Mapping[str, Any]],
    fps: float = DEFAULT_FPS,
    defaults: TimingDefaults | None = None,
) -> SceneTable:
    """
    Compile declarations into contiguous frame ranges.
    Scene i+1 starts where scene i ends; total_frames is the end of the last scene.
    Phase fractions use the declared (unrounded) duration.
    """
    if fps <= 0:
        raise ValueError(f"build_scene_table: fps must be > 0 (got {fps})")
    defaults = defaults or TimingDefaults()

    scenes: list[CompiledScene] = []
    seen: set[str] = set()
    current = 0
    for item in declarations:
        decl = _as_declaration(item)
        if decl.name in seen:
            raise ValueError(f"build_scene_table: duplicate scene name {decl.name!r}")
        seen.add(decl.name)

        duration_frames = _round_half_up(decl.duration * fps)
        hold = decl.hold if decl.hold is not None else defaults.hold
        t_in = decl.transition_in if decl.transition_in is not None else defaults.transition_in
        t_out = decl.transition_out if decl.transition_out is not None else defaults.transition_out

        scenes.append(
            CompiledScene(
                name=decl.name,
                duration=decl.duration,
                start_frame=current,
                end_frame=current + duration_frames,
                duration_frames=duration_frames,
                phases=compute_phases(decl.duration, hold, t_in, t_out),
                hold=hold,
                transition_in=t_in,
                transition_out=t_out,
                data=decl.data,
            )
        )
        current += duration_frames

    return SceneTable(scenes=tuple(scenes), total_frames=current)


class SceneManager:
    """
    Scene timeline with guaranteed phases per scene.

    Usage:
        manager = SceneManager([
            {"name": "intro", "duration": 5},
            {"name": "stats", "duration": 8, "hold": 3},
        ])
        info = manager.query_at(frame)
        # info.phase, info.content_progress, info.transition_progress, ...
    """

    def __init__(
        self,
        declarations: Iterable[SceneDeclaration | Mapping[str, Any]],
        *,
        fps: float = DEFAULT_FPS,
        defaults: TimingDefaults | None = None,
    ):
        self.fps = fps
        self.defaults = defaults or TimingDefaults()
        table = build_scene_table(declarations, fps=fps, defaults=self.defaults)
        self.scenes = table.scenes
        self.total_frames = table.total_frames
        self._starts = [s.start_frame for s in self.scenes]

    @property
    def total_duration(self) -> float:
        """Length of the timeline in seconds (after frame rounding)."""
        return self.total_frames / self.fps

    def scene_names(self) -> list[str]:
        return [s.name for s in self.scenes]

    def scene_by_name(self, name: str) -> CompiledScene | None:
        for scene in self.scenes:
            if scene.name == name:
                return scene
        return None

    def _index_at(self, frame: int) -> int | None:
        # Rightmost scene starting at or before frame; zero-length scenes share
        # a start with their successor, so bisect_right skips them.
        i = bisect.bisect_right(self._starts, frame) - 1
        if i >= 0 and self.scenes[i].contains(frame):
            return i
        return None

    def query_at(self, frame: int) -> SceneQueryResult | None:
        """
        Scene, phase and progress values at a global frame.
        Frames past the end hold the last scene at rest (TRANSITION_OUT, content 1,
        transition 0); negative frames resolve to frame 0. None when there are no scenes.
        """
        if not self.scenes:
            return None
        if frame < 0:
            frame = 0

        last = len(self.scenes) - 1
        i = self._index_at(frame)
        if i is None:
            # Past the end: hold the final scene at rest
            scene = self.scenes[last]
            return SceneQueryResult(
                name=scene.name,
                index=last,
                frame=scene.duration_frames,
                raw_progress=1.0,
                phase=Phase.TRANSITION_OUT,
                content_progress=1.0,
                transition_progress=0.0,
                data=scene.data,
                # a lone scene is both first and last, even at rest past the end
                is_first=last == 0,
                is_last=True,
            )

        scene = self.scenes[i]
        local = frame - scene.start_frame
        raw = max(0.0, min(1.0, local / scene.duration_frames))
        state = scene_phase(raw, scene.phases)
        return SceneQueryResult(
            name=scene.name,
            index=i,
            frame=local,
            raw_progress=raw,
            phase=state.phase,
            content_progress=state.content_progress,
            transition_progress=state.transition_progress,
            data=scene.data,
            is_first=i == 0,
            is_last=i == last,
        )

    def get_scene(self, frame: int) -> tuple[str | None, float]:
        """Simplified getter: (scene name, raw progress). (None, 1.0) when empty."""
        info = self.query_at(frame)
        if info is None:
            return None, 1.0
        return info.name, info.raw_progress

    def timing_report(self) -> str:
        """Human-readable phase breakdown per scene."""
        lines = ["Scene Timing:", "============="]
        for scene in self.scenes:
            ph = scene.phases
            lines.append(f"{scene.name} ({scene.duration}s, frames {scene.start_frame}-{scene.end_frame}):")
            lines.append(f"  Transition In:  {ph.transition_in * 100:5.1f}% ({scene.transition_in}s)")
            lines.append(f"  Content:        {ph.content * 100:5.1f}% ({ph.content * scene.duration:.1f}s)")
            lines.append(f"  Hold:           {ph.hold * 100:5.1f}% ({scene.hold}s)")
            lines.append(f"  Transition Out: {ph.transition_out * 100:5.1f}% ({scene.transition_out}s)")
        lines.append(f"Total: {self.total_duration:.2f}s ({self.total_frames} frames)")
        return "\n".join(lines)

    def log_timing(self) -> None:
        for line in self.timing_report().splitlines():
            logger.debug("%s", line)
