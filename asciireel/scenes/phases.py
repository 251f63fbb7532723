"""
Phase timing: seconds-based scene timing → phase fractions, and the
threshold state machine that maps scene progress to a phase.
Content is never visible during TRANSITION_IN.
"""
from .schema import Phase, PhaseFractions, PhaseState

DEFAULT_FPS = 24
DEFAULT_HOLD_SECONDS = 2.0
DEFAULT_TRANSITION_IN_SECONDS = 0.5
DEFAULT_TRANSITION_OUT_SECONDS = 0.5

# Content time reserved when the fixed phases do not fit in the scene
MIN_CONTENT_SECONDS = 0.5


def compute_phases(
    duration: float,
    hold: float = DEFAULT_HOLD_SECONDS,
    transition_in: float = DEFAULT_TRANSITION_IN_SECONDS,
    transition_out: float = DEFAULT_TRANSITION_OUT_SECONDS,
) -> PhaseFractions:
    """
    Convert scene timing (seconds) to phase fractions of the scene duration.

    When transition_in + hold + transition_out does not leave room for content,
    the three fixed phases are scaled down together so that MIN_CONTENT_SECONDS
    remain for content. For scenes no longer than MIN_CONTENT_SECONDS the fixed
    phases collapse to zero and content fills the scene.
    """
    if duration <= 0:
        raise ValueError(f"compute_phases: duration must be > 0 (got {duration})")

    fixed = transition_in + hold + transition_out
    if fixed >= duration:
        scale = max(0.0, (duration - MIN_CONTENT_SECONDS) / fixed)
        transition_in *= scale
        hold *= scale
        transition_out *= scale

    ti = transition_in / duration
    to = transition_out / duration
    h = hold / duration
    content = max(0.0, 1.0 - ti - h - to)
    return PhaseFractions(transition_in=ti, content=content, hold=h, transition_out=to)


def scene_phase(raw_progress: float, phases: PhaseFractions) -> PhaseState:
    """Phase and phase-local progress at raw scene progress (clamped to 0-1)."""
    p = max(0.0, min(1.0, raw_progress))

    if p < phases.transition_in:
        return PhaseState(
            phase=Phase.TRANSITION_IN,
            content_progress=0.0,
            transition_progress=p / phases.transition_in,
        )

    content_start = phases.transition_in
    content_end = 1.0 - phases.hold - phases.transition_out
    if p < content_end:
        return PhaseState(
            phase=Phase.CONTENT,
            content_progress=(p - content_start) / (content_end - content_start),
            transition_progress=1.0,
        )

    hold_end = 1.0 - phases.transition_out
    if p < hold_end:
        return PhaseState(phase=Phase.HOLD, content_progress=1.0, transition_progress=1.0)

    # transition_progress runs 1 → 0 while the scene fades out
    if phases.transition_out > 0:
        remaining = max(0.0, min(1.0, (1.0 - p) / phases.transition_out))
    else:
        remaining = 0.0
    return PhaseState(phase=Phase.TRANSITION_OUT, content_progress=1.0, transition_progress=remaining)
