"""
ANSI terminal output: turn a Framebuffer into one escape-coded string per frame.
Colors are `#rrggbb` hex strings rendered as 24-bit foreground codes.
"""
import re
import sys
from typing import TextIO

from ..surface.framebuffer import Framebuffer

ESC = "\x1b"
CURSOR_HOME = f"{ESC}[H"
CLEAR_SCREEN = f"{ESC}[2J{ESC}[H"
HIDE_CURSOR = f"{ESC}[?25l"
SHOW_CURSOR = f"{ESC}[?25h"
RESET = f"{ESC}[0m"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def hex_to_ansi(color: str | None) -> str | None:
    """`#rrggbb` → 24-bit foreground escape; None for missing/invalid colors."""
    if not color:
        return None
    m = _HEX_RE.match(color.strip())
    if not m:
        return None
    value = m.group(1)
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return f"{ESC}[38;2;{r};{g};{b}m"


def frame_text(fb: Framebuffer) -> str:
    """
    Cursor-home followed by every row. Consecutive cells with the same color
    share one escape; a row that used color ends with a reset.
    """
    rows: list[str] = []
    for y in range(fb.height):
        parts: list[str] = []
        current: str | None = None
        for x in range(fb.width):
            code = hex_to_ansi(fb.colors[y, x])
            if code != current:
                parts.append(code if code is not None else RESET)
                current = code
            parts.append(str(fb.chars[y, x]))
        if current is not None:
            parts.append(RESET)
        rows.append("".join(parts))
    return CURSOR_HOME + "\n".join(rows)


class TerminalWriter:
    """Writes frames and cursor control codes to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def blit(self, fb: Framebuffer) -> None:
        self._write(frame_text(fb))

    def clear_screen(self) -> None:
        self._write(CLEAR_SCREEN)

    def hide_cursor(self) -> None:
        self._write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._write(SHOW_CURSOR)
