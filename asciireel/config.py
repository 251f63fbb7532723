"""
Load and expose app config (YAML). Used by the scripts and templates to get
display size, frame rate, scene timing defaults and snapshot settings.
"""
from pathlib import Path
from typing import Any

import yaml

from .scenes.manager import TimingDefaults


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml.
    Top-level sections from the file are merged over the built-in defaults."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


_SIZE_PRESETS: dict[str, tuple[int, int]] = {
    "compact": (80, 24),
    "standard": (100, 30),
    "wide": (132, 40),
}


def _defaults() -> dict[str, Any]:
    return {
        "display": {
            "width": 80,
            "height": 24,
            "fps": 24,
            "size": None,
        },
        "timing": {
            "hold": 2.0,
            "transition_in": 0.5,
            "transition_out": 0.5,
        },
        "scenes": {},
        "snapshot": {
            "dir": "output",
            "cell_width": 10,
            "cell_height": 20,
        },
    }


def resolve_display_config(config: dict[str, Any]) -> dict[str, Any]:
    """Resolve display config: size preset overrides width/height if set."""
    out = dict(config.get("display", {}))
    size = out.get("size")
    if size and size in _SIZE_PRESETS:
        w, h = _SIZE_PRESETS[size]
        out["width"] = w
        out["height"] = h
    out["width"] = int(out.get("width") or 80)
    out["height"] = int(out.get("height") or 24)
    try:
        fps = float(out.get("fps") or 24)
    except (TypeError, ValueError):
        fps = 24.0
    out["fps"] = fps if fps > 0 else 24.0
    return out


def timing_defaults(config: dict[str, Any]) -> TimingDefaults:
    """Scene timing fallbacks from the `timing` section."""
    t = config.get("timing", {}) or {}
    base = TimingDefaults()
    return TimingDefaults(
        hold=float(t.get("hold", base.hold)),
        transition_in=float(t.get("transition_in", base.transition_in)),
        transition_out=float(t.get("transition_out", base.transition_out)),
    )


def get_snapshot_dir(config: dict[str, Any]) -> Path:
    """Resolve snapshot directory (relative to project root if needed)."""
    snap = config.get("snapshot", {})
    p = Path(snap.get("dir", "output"))
    if not p.is_absolute():
        p = _project_root() / p
    return p
