"""
ANSI terminal output and PNG rasterizing.
"""
import io
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from asciireel.output import TerminalWriter, frame_text, hex_to_ansi, rasterize, save_snapshot
from asciireel.output.terminal import HIDE_CURSOR, RESET, SHOW_CURSOR
from asciireel.surface import Framebuffer


class TestAnsi(unittest.TestCase):

    def test_hex_to_ansi(self):
        self.assertEqual(hex_to_ansi("#ff8000"), "\x1b[38;2;255;128;0m")
        self.assertEqual(hex_to_ansi("00ff00"), "\x1b[38;2;0;255;0m")
        self.assertIsNone(hex_to_ansi(None))
        self.assertIsNone(hex_to_ansi("#fff"))
        self.assertIsNone(hex_to_ansi("#gggggg"))

    def test_plain_frame(self):
        fb = Framebuffer(3, 2)
        fb.draw_text(0, 0, "abc")
        self.assertEqual(frame_text(fb), "\x1b[Habc\n   ")

    def test_color_runs_share_one_escape(self):
        fb = Framebuffer(4, 1)
        fb.draw_text(0, 0, "ab", color="#ff0000")
        fb.draw_text(2, 0, "cd")
        red = hex_to_ansi("#ff0000")
        self.assertEqual(frame_text(fb), f"\x1b[H{red}ab{RESET}cd")

    def test_colored_row_ends_with_reset(self):
        fb = Framebuffer(2, 1)
        fb.draw_text(0, 0, "xy", color="#0000ff")
        self.assertTrue(frame_text(fb).endswith(RESET))

    def test_writer_flushes_to_stream(self):
        stream = io.StringIO()
        writer = TerminalWriter(stream)
        writer.hide_cursor()
        writer.blit(Framebuffer(1, 1))
        writer.show_cursor()
        self.assertEqual(stream.getvalue(), f"{HIDE_CURSOR}\x1b[H {SHOW_CURSOR}")


class TestRasterize(unittest.TestCase):

    def test_image_size_and_ink(self):
        fb = Framebuffer(6, 3)
        fb.draw_text(0, 1, "@@@@@@", color="#00ff00")
        img = rasterize(fb, cell_width=8, cell_height=16)
        self.assertEqual(img.size, (48, 48))
        self.assertEqual(img.mode, "RGB")
        # Blank top row stays background; the text row has green ink
        self.assertEqual(img.getextrema()[1][1], 255)
        top = img.crop((0, 0, 48, 16))
        self.assertEqual(top.getextrema(), ((0, 0), (0, 0), (0, 0)))

    def test_bad_cell_size(self):
        with self.assertRaises(ValueError):
            rasterize(Framebuffer(2, 2), cell_width=0)

    def test_save_snapshot_writes_png(self):
        fb = Framebuffer(4, 2)
        fb.draw_text(0, 0, "hi")
        with tempfile.TemporaryDirectory() as tmp:
            out = save_snapshot(fb, Path(tmp) / "nested" / "shot.png", cell_width=5, cell_height=10)
            self.assertTrue(out.exists())
            self.assertEqual(out.read_bytes()[:8], b"\x89PNG\r\n\x1a\n")


if __name__ == "__main__":
    unittest.main()
