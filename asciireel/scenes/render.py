"""
Scene render dispatch: background → content → transition, chosen by phase.
Stateless; everything is recomputed from the frame and progress on each call.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .phases import compute_phases, scene_phase
from .schema import Phase, PhaseFractions

if TYPE_CHECKING:
    from ..surface.base import Surface

BackgroundFn = Callable[["Surface", int], None]
ContentFn = Callable[["Surface", int, float], None]
TransitionFn = Callable[["Surface", float, int], None]


@dataclass(frozen=True)
class SceneConfig:
    """Callbacks for one scene; any of them may be None."""
    phases: PhaseFractions
    background: BackgroundFn | None = None
    content: ContentFn | None = None
    transition_in: TransitionFn | None = None
    transition_out: TransitionFn | None = None


def create_scene(
    *,
    phases: PhaseFractions | None = None,
    background: BackgroundFn | None = None,
    content: ContentFn | None = None,
    transition_in: TransitionFn | None = None,
    transition_out: TransitionFn | None = None,
) -> SceneConfig:
    """Build a SceneConfig; phases default to a 5s scene with default timing."""
    return SceneConfig(
        phases=phases if phases is not None else compute_phases(5.0),
        background=background,
        content=content,
        transition_in=transition_in,
        transition_out=transition_out,
    )


def render_scene(
    surface: "Surface",
    frame: int,
    raw_progress: float,
    config: SceneConfig,
) -> Phase:
    """
    Draw one frame of a scene. Returns the phase that was rendered.
    - background: always (visible through transitions)
    - content: every phase except TRANSITION_IN
    - transition_in: TRANSITION_IN only, progress 0 → 1
    - transition_out: TRANSITION_OUT only, progress 1 → 0
    """
    state = scene_phase(raw_progress, config.phases)

    if config.background is not None:
        config.background(surface, frame)

    if state.phase != Phase.TRANSITION_IN and config.content is not None:
        config.content(surface, frame, state.content_progress)

    if state.phase == Phase.TRANSITION_IN and config.transition_in is not None:
        config.transition_in(surface, state.transition_progress, frame)

    if state.phase == Phase.TRANSITION_OUT and config.transition_out is not None:
        config.transition_out(surface, state.transition_progress, frame)

    return state.phase
