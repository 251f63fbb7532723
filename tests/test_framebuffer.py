"""
Framebuffer depth test, bounds handling and Surface drawing primitives.
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np

from asciireel.surface import Framebuffer


class TestDepth(unittest.TestCase):
    """Lower depth draws on top; equal depth overwrites."""

    def test_depth_tested_writes(self):
        """A at 10, B at 5 replaces it, C at 20 is rejected."""
        fb = Framebuffer(4, 2)
        fb.set_pixel(1, 1, "A", 10)
        fb.set_pixel(1, 1, "B", 5)
        fb.set_pixel(1, 1, "C", 20)
        self.assertEqual(fb.get_pixel(1, 1), "B")
        self.assertEqual(fb.get_depth(1, 1), 5)

    def test_equal_depth_overwrites(self):
        fb = Framebuffer(2, 2)
        fb.set_pixel(0, 0, "x")
        fb.set_pixel(0, 0, "y")
        self.assertEqual(fb.get_pixel(0, 0), "y")

    def test_clear_resets_depth_and_color(self):
        fb = Framebuffer(3, 3)
        fb.set_pixel(1, 1, "#", -50, "#ff0000")
        fb.clear()
        self.assertEqual(fb.get_pixel(1, 1), " ")
        self.assertIsNone(fb.get_color(1, 1))
        self.assertTrue(np.isinf(fb.get_depth(1, 1)))
        fb.set_pixel(1, 1, "z", 1000)
        self.assertEqual(fb.get_pixel(1, 1), "z")

    def test_color_follows_winning_write(self):
        fb = Framebuffer(2, 1)
        fb.set_pixel(0, 0, "a", 5, "#112233")
        fb.set_pixel(0, 0, "b", 9, "#445566")
        self.assertEqual(fb.get_color(0, 0), "#112233")


class TestBounds(unittest.TestCase):

    def test_out_of_range_writes_ignored(self):
        fb = Framebuffer(3, 2)
        for x, y in ((-1, 0), (3, 0), (0, -1), (0, 2), (100, 100)):
            fb.set_pixel(x, y, "#")
        self.assertEqual(fb.to_string(), "   \n   ")

    def test_non_finite_coordinates_ignored(self):
        """Writes at inf or nan are dropped like any other off-grid write."""
        fb = Framebuffer(10, 10)
        inf, nan = float("inf"), float("nan")
        for x, y in ((inf, 2), (2, -inf), (nan, 2), (2, nan)):
            fb.set_pixel(x, y, "x")
        self.assertEqual(fb.to_string().strip(), "")
        self.assertEqual(fb.get_pixel(inf, 0), " ")
        self.assertEqual(fb.get_pixel(0, nan), " ")

    def test_reads_floor_coordinates_like_writes(self):
        fb = Framebuffer(3, 3)
        fb.set_pixel(1.7, 2.4, "*")
        self.assertEqual(fb.get_pixel(1.7, 2.4), "*")
        self.assertEqual(fb.get_pixel(1.0, 2.99), "*")
        self.assertEqual(fb.get_pixel(-0.5, 0), " ")

    def test_out_of_range_reads_are_blank(self):
        fb = Framebuffer(3, 2)
        self.assertEqual(fb.get_pixel(-1, 0), " ")
        self.assertEqual(fb.get_pixel(5, 5), " ")

    def test_fractional_coordinates_are_floored(self):
        fb = Framebuffer(3, 3)
        fb.set_pixel(1.9, 2.2, "*")
        self.assertEqual(fb.get_pixel(1, 2), "*")

    def test_multi_char_input_keeps_first(self):
        fb = Framebuffer(2, 1)
        fb.set_pixel(0, 0, "ab")
        self.assertEqual(fb.get_pixel(0, 0), "a")

    def test_nonpositive_size_rejected(self):
        with self.assertRaises(ValueError):
            Framebuffer(0, 10)

    def test_clear_box(self):
        fb = Framebuffer(4, 3)
        fb.fill_canvas("#", depth=-5)
        fb.clear_box(1, 1, 2, 5)
        self.assertEqual(fb.lines(), ["####", "#  #", "#  #"])
        fb.set_pixel(1, 1, "o", 99)
        self.assertEqual(fb.get_pixel(1, 1), "o")


class TestPrimitives(unittest.TestCase):
    """Shape and text helpers inherited from Surface."""

    def test_horizontal_line(self):
        fb = Framebuffer(5, 1)
        fb.draw_line(0, 0, 4, 0, "=")
        self.assertEqual(fb.lines(), ["====="])

    def test_diagonal_line_hits_both_ends(self):
        fb = Framebuffer(4, 4)
        fb.draw_line(3, 3, 0, 0, "\\")
        for i in range(4):
            self.assertEqual(fb.get_pixel(i, i), "\\")

    def test_box_outline(self):
        fb = Framebuffer(4, 3)
        fb.draw_box(0, 0, 4, 3, "+")
        self.assertEqual(fb.lines(), ["++++", "+  +", "++++"])

    def test_filled_box(self):
        fb = Framebuffer(3, 2)
        fb.draw_box(0, 0, 3, 2, "#", filled=True)
        self.assertEqual(fb.lines(), ["###", "###"])

    def test_circle_outline_is_symmetric(self):
        fb = Framebuffer(11, 11)
        fb.draw_circle(5, 5, 4, "o")
        self.assertEqual(fb.get_pixel(9, 5), "o")
        self.assertEqual(fb.get_pixel(1, 5), "o")
        self.assertEqual(fb.get_pixel(5, 1), "o")
        self.assertEqual(fb.get_pixel(5, 9), "o")
        self.assertEqual(fb.get_pixel(5, 5), " ")

    def test_centered_text(self):
        fb = Framebuffer(9, 1)
        fb.draw_centered_text(0, "abc")
        self.assertEqual(fb.lines(), ["   abc   "])

    def test_large_text_is_five_rows(self):
        fb = Framebuffer(12, 6)
        fb.draw_large_text(0, 0, "HI")
        self.assertEqual(fb.lines()[0], "#   # ##### ")
        self.assertEqual(fb.lines()[5].strip(), "")

    def test_large_text_centered(self):
        fb = Framebuffer(9, 5)
        fb.draw_large_text_centered(0, "I")
        self.assertEqual(fb.lines()[0], " #####   ")
        self.assertEqual(fb.lines()[2], "   #     ")

    def test_fill_except_circle_is_aspect_corrected(self):
        """Horizontal distance counts 2.16x, so a 1.5 radius keeps a single column open."""
        fb = Framebuffer(9, 5)
        fb.fill_except_circle(4, 2, 1.5, "#")
        self.assertEqual(
            fb.lines(),
            ["#########", "#### ####", "#### ####", "#### ####", "#########"],
        )

    def test_fill_except_box_leaves_window(self):
        fb = Framebuffer(5, 3)
        fb.fill_except_box(1, 1, 3, 1, "#")
        self.assertEqual(fb.lines(), ["#####", "#   #", "#####"])

    def test_gradient_box_darkens_downward(self):
        fb = Framebuffer(2, 4)
        fb.draw_gradient_box(0, 0, 2, 4, 0, 8)
        self.assertEqual(fb.get_pixel(0, 0), " ")
        self.assertNotEqual(fb.get_pixel(0, 3), " ")

    def test_particles(self):
        fb = Framebuffer(4, 4)
        fb.draw_particles([(0.5, 0.5, "*"), (3.2, 2.9, "+"), (9, 9, "x")])
        self.assertEqual(fb.get_pixel(0, 0), "*")
        self.assertEqual(fb.get_pixel(3, 2), "+")


if __name__ == "__main__":
    unittest.main()
