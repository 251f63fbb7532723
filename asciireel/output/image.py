"""
PNG snapshots: rasterize a Framebuffer cell by cell with Pillow.
"""
import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from ..surface.framebuffer import Framebuffer

logger = logging.getLogger(__name__)

DEFAULT_FOREGROUND = (230, 230, 230)
DEFAULT_BACKGROUND = (0, 0, 0)

_MONO_FONTS = (
    "DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "consola.ttf",
    "Menlo.ttc",
)


def _load_font(size: int):
    for name in _MONO_FONTS:
        try:
            return ImageFont.truetype(name, size)
        except (OSError, IOError):
            continue
    return ImageFont.load_default()


def _hex_to_rgb(color: str | None) -> tuple[int, int, int] | None:
    if not color:
        return None
    value = color.strip().lstrip("#")
    if len(value) != 6:
        return None
    try:
        return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None


def rasterize(
    fb: Framebuffer,
    *,
    cell_width: int = 10,
    cell_height: int = 20,
    foreground: tuple[int, int, int] = DEFAULT_FOREGROUND,
    background: tuple[int, int, int] = DEFAULT_BACKGROUND,
) -> Image.Image:
    """RGB image of size (width * cell_width, height * cell_height); blank cells are skipped."""
    if cell_width <= 0 or cell_height <= 0:
        raise ValueError(f"rasterize: cell size must be positive (got {cell_width}x{cell_height})")
    img = Image.new("RGB", (fb.width * cell_width, fb.height * cell_height), background)
    draw = ImageDraw.Draw(img)
    font = _load_font(max(6, int(cell_height * 0.8)))
    for y in range(fb.height):
        for x in range(fb.width):
            ch = str(fb.chars[y, x])
            if ch == " ":
                continue
            fill = _hex_to_rgb(fb.colors[y, x]) or foreground
            draw.text((x * cell_width, y * cell_height), ch, font=font, fill=fill)
    return img


def save_snapshot(
    fb: Framebuffer,
    path: Path,
    *,
    cell_width: int = 10,
    cell_height: int = 20,
) -> Path:
    """Rasterize and write a PNG; parent directories are created."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    rasterize(fb, cell_width=cell_width, cell_height=cell_height).save(out, format="PNG")
    logger.info("Snapshot written: %s", out)
    return out
