#!/usr/bin/env python3
"""
CLI: Save one frame of a reel as a PNG.
Usage:
  python scripts/snapshot.py                    # finished intro card
  python scripts/snapshot.py --frame 200 -o output/frame_200.png
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from asciireel.config import get_snapshot_dir, load_config, resolve_display_config
from asciireel.output import save_snapshot
from asciireel.reel import ReelError
from asciireel.scenes import Static
from asciireel.surface import Framebuffer
from asciireel.templates import build_reel, draw_intro, load_stats

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Render one reel frame to PNG.")
    parser.add_argument("--stats", type=Path, default=None, help="Stats YAML/JSON (default: built-in sample).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    parser.add_argument("--frame", type=int, default=None, help="Reel frame to render (default: static intro card).")
    parser.add_argument("--output", "-o", type=Path, default=None, help="PNG path (default: <snapshot dir>/snapshot.png).")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config = load_config(args.config)
    display = resolve_display_config(config)
    snap = config.get("snapshot", {})
    try:
        stats = load_stats(args.stats)
    except (ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    fb = Framebuffer(display["width"], display["height"])
    if args.frame is None:
        draw_intro(
            fb,
            Static(),
            year=stats["year"],
            tagline=str(stats["tagline"]),
            user_name=str(stats["user_name"]),
        )
    else:
        try:
            build_reel(stats, config=config).render_frame(fb, args.frame)
        except (ReelError, ValueError, KeyError) as e:
            logger.error("%s", e)
            return 1

    out = args.output or get_snapshot_dir(config) / "snapshot.png"
    save_snapshot(
        fb,
        out,
        cell_width=int(snap.get("cell_width", 10)),
        cell_height=int(snap.get("cell_height", 20)),
    )
    print(f"Done. Snapshot: {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
