"""
Config loading: defaults, YAML merge, size presets, timing defaults.
"""
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from asciireel.config import get_snapshot_dir, load_config, resolve_display_config, timing_defaults
from asciireel.scenes import TimingDefaults


class TestConfig(unittest.TestCase):

    def test_missing_file_gives_defaults(self):
        config = load_config(Path("/nonexistent/config.yaml"))
        self.assertEqual(config["display"]["width"], 80)
        self.assertEqual(config["timing"]["hold"], 2.0)
        self.assertEqual(config["scenes"], {})

    def test_project_default_file_loads(self):
        config = load_config()
        self.assertIn("intro", config["scenes"])
        self.assertEqual(config["display"]["fps"], 24)

    def test_file_sections_merge_over_defaults(self):
        """A partial display section keeps the other default keys."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "c.yaml"
            path.write_text("display:\n  fps: 12\ntiming:\n  hold: 1.5\n", encoding="utf-8")
            config = load_config(path)
        self.assertEqual(config["display"]["fps"], 12)
        self.assertEqual(config["display"]["width"], 80)
        self.assertEqual(config["timing"]["hold"], 1.5)
        self.assertEqual(config["timing"]["transition_in"], 0.5)

    def test_size_preset_overrides_dimensions(self):
        display = resolve_display_config({"display": {"width": 10, "height": 10, "size": "wide"}})
        self.assertEqual((display["width"], display["height"]), (132, 40))

    def test_unknown_preset_and_bad_fps(self):
        display = resolve_display_config({"display": {"width": "90", "size": "huge", "fps": -3}})
        self.assertEqual(display["width"], 90)
        self.assertEqual(display["height"], 24)
        self.assertEqual(display["fps"], 24.0)

    def test_timing_defaults(self):
        self.assertEqual(timing_defaults({}), TimingDefaults())
        t = timing_defaults({"timing": {"hold": 3, "transition_out": 0}})
        self.assertEqual((t.hold, t.transition_in, t.transition_out), (3.0, 0.5, 0.0))

    def test_snapshot_dir_is_project_relative(self):
        self.assertEqual(get_snapshot_dir({"snapshot": {"dir": "shots"}}), ROOT / "shots")
        self.assertEqual(get_snapshot_dir({"snapshot": {"dir": "/tmp/shots"}}), Path("/tmp/shots"))


if __name__ == "__main__":
    unittest.main()
