"""
Effect registry: explicit name → function table, passed to whatever needs to
look effects up by name (templates, config-driven scenes). No global state;
each call to default_registry() returns an independent table.
"""
from typing import Callable

from . import backgrounds, particles, text, transitions

EFFECT_KINDS = ("background", "particles", "transition", "text")


class EffectRegistry:
    """Named effect functions grouped by kind."""

    def __init__(self) -> None:
        self._effects: dict[str, tuple[str, Callable[..., None]]] = {}

    def register(
        self,
        name: str,
        fn: Callable[..., None],
        kind: str,
        *,
        replace: bool = False,
    ) -> None:
        if kind not in EFFECT_KINDS:
            raise ValueError(f"Unknown effect kind {kind!r}; expected one of {', '.join(EFFECT_KINDS)}")
        if name in self._effects and not replace:
            raise ValueError(f"Effect {name!r} is already registered")
        self._effects[name] = (kind, fn)

    def get(self, name: str) -> Callable[..., None]:
        try:
            return self._effects[name][1]
        except KeyError:
            known = ", ".join(self._effects) or "(none)"
            raise KeyError(f"Unknown effect {name!r}. Registered: {known}") from None

    def kind_of(self, name: str) -> str:
        self.get(name)
        return self._effects[name][0]

    def names(self, kind: str | None = None) -> list[str]:
        return [n for n, (k, _) in self._effects.items() if kind is None or k == kind]

    def __contains__(self, name: object) -> bool:
        return name in self._effects

    def __len__(self) -> int:
        return len(self._effects)


def default_registry() -> EffectRegistry:
    """Registry pre-loaded with the built-in catalogue."""
    reg = EffectRegistry()
    for name, fn in (
        ("stars", backgrounds.stars),
        ("rain", backgrounds.rain),
        ("snow", backgrounds.snow),
    ):
        reg.register(name, fn, "background")
    for name, fn in (
        ("sparkles", particles.sparkles),
        ("confetti", particles.confetti),
    ):
        reg.register(name, fn, "particles")
    for name, fn in (
        ("wipe_left", transitions.wipe_left),
        ("wipe_right", transitions.wipe_right),
        ("dissolve", transitions.dissolve),
        ("fade", transitions.fade),
        ("circle_reveal", transitions.circle_reveal),
        ("circle_close", transitions.circle_close),
    ):
        reg.register(name, fn, "transition")
    for name, fn in (
        ("typewriter_centered", text.typewriter_centered),
        ("fade_in_text", text.fade_in_text),
    ):
        reg.register(name, fn, "text")
    return reg
