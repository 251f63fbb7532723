"""
Player: pull loop that renders frames into a Framebuffer and blits them to the
terminal at the reel's frame rate. Stops between frames when SIGINT/SIGTERM is
received and always restores the cursor.
"""
import logging
import signal
import time
from typing import Any, Callable

from .output.terminal import TerminalWriter
from .surface.base import Surface
from .surface.framebuffer import Framebuffer

logger = logging.getLogger(__name__)

RenderFrameFn = Callable[[Surface, int], Any]

_shutdown_requested = False


def request_shutdown() -> bool:
    """Check if shutdown was requested (e.g. SIGTERM, Ctrl+C)."""
    return _shutdown_requested


def _set_shutdown_requested(*_args: Any) -> None:
    global _shutdown_requested
    _shutdown_requested = True


def reset_shutdown() -> None:
    global _shutdown_requested
    _shutdown_requested = False


def setup_graceful_shutdown() -> None:
    """Register SIGTERM/SIGINT handlers that stop playback after the current frame."""
    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            signal.signal(sig, _set_shutdown_requested)
        except (AttributeError, ValueError):
            pass  # Windows or not on the main thread


class Player:
    """
    Terminal playback. `sleep` and `should_stop` are injectable so the loop can
    be driven without a real clock or signals.
    """

    def __init__(
        self,
        writer: TerminalWriter,
        width: int,
        height: int,
        fps: float,
        *,
        sleep: Callable[[float], None] = time.sleep,
        should_stop: Callable[[], bool] = request_shutdown,
    ):
        if fps <= 0:
            raise ValueError(f"Player: fps must be > 0 (got {fps})")
        self.writer = writer
        self.framebuffer = Framebuffer(width, height)
        self.fps = fps
        self._sleep = sleep
        self._should_stop = should_stop

    @property
    def frame_delay(self) -> float:
        return 1.0 / self.fps

    def render_single(self, render_frame: RenderFrameFn, frame: int) -> Framebuffer:
        """Render one frame into the (cleared) framebuffer and blit it."""
        self.framebuffer.clear()
        render_frame(self.framebuffer, frame)
        self.writer.blit(self.framebuffer)
        return self.framebuffer

    def play(self, render_frame: RenderFrameFn, total_frames: int, *, loop: bool = False) -> int:
        """
        Play frames 0..total_frames-1 (repeatedly when loop=True).
        Returns the number of frames shown.
        """
        shown = 0
        if total_frames <= 0:
            return shown
        self.writer.clear_screen()
        self.writer.hide_cursor()
        try:
            while True:
                for frame in range(total_frames):
                    if self._should_stop():
                        logger.info("Playback stopped at frame %d", frame)
                        return shown
                    self.render_single(render_frame, frame)
                    shown += 1
                    self._sleep(self.frame_delay)
                if not loop:
                    return shown
        finally:
            self.writer.show_cursor()
