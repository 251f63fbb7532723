#!/usr/bin/env python3
"""
CLI: Check a reel before playing it. Prints the scene table and any problems.
Usage:
  python scripts/validate.py
  python scripts/validate.py --stats my_year.yaml --config my_config.yaml
Exit code 1 when the reel is not playable.
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from asciireel.config import load_config, resolve_display_config
from asciireel.reel import validate_reel
from asciireel.templates import get_template, load_stats


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate a reel's timeline and renderers.")
    parser.add_argument("--stats", type=Path, default=None, help="Stats YAML/JSON (default: built-in sample).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    parser.add_argument("--template", type=str, default="year_in_review", help="Reel template (default: year_in_review).")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config = load_config(args.config)
    display = resolve_display_config(config)
    try:
        reel = get_template(args.template)(load_stats(args.stats), config=config)
    except (ValueError, KeyError, FileNotFoundError) as e:
        print(f"FAIL  build: {e}")
        return 1

    print(reel.manager.timing_report())
    print()
    issues = validate_reel(reel, width=display["width"], height=display["height"])
    if issues:
        for issue in issues:
            print(f"FAIL  {issue}")
        return 1
    print(f"OK    {len(reel.manager.scenes)} scenes, {reel.total_frames} frames at {reel.fps:g} fps")
    return 0


if __name__ == "__main__":
    sys.exit(main())
