"""
Scene schema: declarations, phase fractions, compiled scenes and query results.
Durations and timing values are in seconds; frame ranges are half-open [start, end).
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class Phase(str, Enum):
    """The four sub-stages of every scene, in playback order."""
    TRANSITION_IN = "TRANSITION_IN"
    CONTENT = "CONTENT"
    HOLD = "HOLD"
    TRANSITION_OUT = "TRANSITION_OUT"

    def __str__(self) -> str:
        return self.value


PHASE_ORDER: tuple[Phase, ...] = (
    Phase.TRANSITION_IN,
    Phase.CONTENT,
    Phase.HOLD,
    Phase.TRANSITION_OUT,
)


@dataclass(frozen=True)
class SceneDeclaration:
    """Author-supplied scene. None timing fields fall back to the manager defaults."""
    name: str
    duration: float
    hold: float | None = None
    transition_in: float | None = None
    transition_out: float | None = None
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name or not str(self.name).strip():
            raise ValueError("SceneDeclaration: name must be a non-empty string")
        if self.duration is None or self.duration <= 0:
            raise ValueError(f"SceneDeclaration {self.name!r}: duration must be > 0 (got {self.duration})")
        for label in ("hold", "transition_in", "transition_out"):
            value = getattr(self, label)
            if value is not None and value < 0:
                raise ValueError(f"SceneDeclaration {self.name!r}: {label} must be >= 0 (got {value})")

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SceneDeclaration":
        """Build from a mapping; accepts snake_case or camelCase timing keys."""
        def pick(*keys: str) -> Any:
            for k in keys:
                if raw.get(k) is not None:
                    return raw[k]
            return None

        return cls(
            name=raw.get("name", ""),
            duration=float(raw.get("duration", 0) or 0),
            hold=pick("hold"),
            transition_in=pick("transition_in", "transitionIn"),
            transition_out=pick("transition_out", "transitionOut"),
            data=dict(raw.get("data") or {}),
        )


@dataclass(frozen=True)
class PhaseFractions:
    """Share of the scene spent in each phase; the four values sum to 1."""
    transition_in: float
    content: float
    hold: float
    transition_out: float

    def total(self) -> float:
        return self.transition_in + self.content + self.hold + self.transition_out


@dataclass(frozen=True)
class CompiledScene:
    """A declaration laid out on the frame timeline."""
    name: str
    duration: float
    start_frame: int
    end_frame: int
    duration_frames: int
    phases: PhaseFractions
    hold: float
    transition_in: float
    transition_out: float
    data: Mapping[str, Any] = field(default_factory=dict)

    def contains(self, frame: int) -> bool:
        return self.start_frame <= frame < self.end_frame


@dataclass(frozen=True)
class PhaseState:
    """Phase plus phase-local progress values for one raw progress value."""
    phase: Phase
    content_progress: float
    transition_progress: float


@dataclass(frozen=True)
class SceneQueryResult:
    """What is on screen at one global frame. Computed fresh on every query."""
    name: str
    index: int
    frame: int                 # frame within the scene
    raw_progress: float
    phase: Phase
    content_progress: float
    transition_progress: float
    data: Mapping[str, Any]
    is_first: bool
    is_last: bool


@dataclass(frozen=True)
class Animated:
    """Render mode: animate toward `progress` (0-1) at `frame`."""
    frame: int
    progress: float


@dataclass(frozen=True)
class Static:
    """Render mode: draw everything fully visible (stills, thumbnails)."""
    frame: int = 0


RenderMode = Animated | Static
