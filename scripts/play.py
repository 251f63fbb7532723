#!/usr/bin/env python3
"""
CLI: Play the year-in-review reel in the terminal.
Usage:
  python scripts/play.py
  python scripts/play.py --stats my_year.yaml --size wide
  python scripts/play.py --frame 120      # show one frame and exit
  python scripts/play.py --loop --slow
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from asciireel.config import load_config, resolve_display_config
from asciireel.output import TerminalWriter
from asciireel.player import Player, setup_graceful_shutdown
from asciireel.reel import ReelError
from asciireel.templates import get_template, load_stats

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Play an ASCII reel in the terminal.")
    parser.add_argument("--stats", type=Path, default=None, help="Stats YAML/JSON (default: built-in sample).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    parser.add_argument("--template", type=str, default="year_in_review", help="Reel template (default: year_in_review).")
    parser.add_argument("--size", type=str, default=None, help="Size preset: compact | standard | wide.")
    parser.add_argument("--frame", type=int, default=None, help="Render a single frame and exit.")
    parser.add_argument("--loop", action="store_true", help="Repeat until interrupted.")
    parser.add_argument("--slow", action="store_true", help="Play at quarter speed.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config = load_config(args.config)
    if args.size:
        config["display"]["size"] = args.size
    display = resolve_display_config(config)

    try:
        stats = load_stats(args.stats)
        reel = get_template(args.template)(stats, config=config)
        reel.require_playable(display["width"], display["height"])
    except (ReelError, ValueError, KeyError, FileNotFoundError) as e:
        logger.error("Cannot play reel: %s", e)
        return 1

    fps = reel.fps / 4 if args.slow else reel.fps
    player = Player(TerminalWriter(), display["width"], display["height"], fps)

    try:
        if args.frame is not None:
            player.writer.clear_screen()
            player.render_single(reel.render_frame, args.frame)
            print()
            return 0
        setup_graceful_shutdown()
        shown = player.play(reel.render_frame, reel.total_frames, loop=args.loop)
    except ReelError as e:
        print()
        logger.error("%s", e)
        return 1
    print()
    logger.info("Played %d of %d frames", shown, reel.total_frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
