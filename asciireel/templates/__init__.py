"""
Reel templates: stats mapping + config → playable Reel.
"""
import logging
from typing import Callable

from ..reel import Reel
from .year_in_review import SAMPLE_STATS, build_reel, draw_intro, load_stats

logger = logging.getLogger(__name__)

TEMPLATES: dict[str, Callable[..., Reel]] = {
    "year_in_review": build_reel,
}


def get_template(name: str) -> Callable[..., Reel]:
    """Return the reel builder for a template name (falls back to year_in_review)."""
    if name not in TEMPLATES:
        logger.warning("Unknown template %r; using year_in_review", name)
    return TEMPLATES.get(name, TEMPLATES["year_in_review"])


__all__ = ["TEMPLATES", "get_template", "SAMPLE_STATS", "build_reel", "draw_intro", "load_stats"]
