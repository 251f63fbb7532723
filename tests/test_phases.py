"""
Phase timing and the phase state machine.
Run from project root: python -m pytest tests/ -v
Or: python -m unittest discover -s tests -p "test_*.py" -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from asciireel.scenes.phases import compute_phases, scene_phase
from asciireel.scenes.schema import PHASE_ORDER, Phase, PhaseFractions


class TestComputePhases(unittest.TestCase):
    """Seconds → fractions, including overcommitted scenes."""

    def test_fractions_sum_to_one(self):
        """Fractions of a roomy scene add up to 1."""
        for duration in (3.0, 5.0, 8.0, 12.5):
            ph = compute_phases(duration, 2.0, 0.5, 0.5)
            self.assertAlmostEqual(ph.total(), 1.0, places=9)

    def test_default_five_second_scene(self):
        """5s scene with defaults: 10% in, 40% content, 40% hold, 10% out."""
        ph = compute_phases(5.0)
        self.assertAlmostEqual(ph.transition_in, 0.1)
        self.assertAlmostEqual(ph.content, 0.4)
        self.assertAlmostEqual(ph.hold, 0.4)
        self.assertAlmostEqual(ph.transition_out, 0.1)

    def test_overcommitted_scene_keeps_half_second_of_content(self):
        """1s scene asking for 3s of fixed phases is scaled so 0.5s of content remains."""
        ph = compute_phases(1.0, 2.0, 0.5, 0.5)
        self.assertAlmostEqual(ph.content, 0.5)
        self.assertAlmostEqual(ph.total(), 1.0)
        # Fixed phases keep their relative sizes
        self.assertAlmostEqual(ph.hold / ph.transition_in, 4.0)

    def test_tiny_scene_is_all_content(self):
        """Scenes no longer than the content minimum drop the fixed phases entirely."""
        ph = compute_phases(0.4)
        self.assertEqual(ph.transition_in, 0.0)
        self.assertEqual(ph.hold, 0.0)
        self.assertEqual(ph.transition_out, 0.0)
        self.assertAlmostEqual(ph.content, 1.0)

    def test_rejects_nonpositive_duration(self):
        with self.assertRaises(ValueError):
            compute_phases(0)
        with self.assertRaises(ValueError):
            compute_phases(-2.0)


class TestScenePhase(unittest.TestCase):
    """Threshold state machine over raw progress."""

    def setUp(self):
        self.phases = PhaseFractions(transition_in=0.1, content=0.4, hold=0.4, transition_out=0.1)

    def test_phase_order(self):
        """Phases appear in order as progress rises, each at least once."""
        seen = []
        for i in range(101):
            phase = scene_phase(i / 100, self.phases).phase
            if not seen or seen[-1] != phase:
                seen.append(phase)
        self.assertEqual(tuple(seen), PHASE_ORDER)

    def test_transition_in_hides_content(self):
        """During TRANSITION_IN content progress is 0 and transition progress rises to 1."""
        state = scene_phase(0.05, self.phases)
        self.assertEqual(state.phase, Phase.TRANSITION_IN)
        self.assertEqual(state.content_progress, 0.0)
        self.assertAlmostEqual(state.transition_progress, 0.5)

    def test_content_progress_spans_content_phase(self):
        state = scene_phase(0.3, self.phases)
        self.assertEqual(state.phase, Phase.CONTENT)
        self.assertAlmostEqual(state.content_progress, 0.5)
        self.assertEqual(state.transition_progress, 1.0)

    def test_hold_is_fully_visible(self):
        state = scene_phase(0.7, self.phases)
        self.assertEqual(state.phase, Phase.HOLD)
        self.assertEqual(state.content_progress, 1.0)
        self.assertEqual(state.transition_progress, 1.0)

    def test_transition_out_counts_down(self):
        """transition_progress goes 1 → 0 through TRANSITION_OUT."""
        state = scene_phase(0.95, self.phases)
        self.assertEqual(state.phase, Phase.TRANSITION_OUT)
        self.assertEqual(state.content_progress, 1.0)
        self.assertAlmostEqual(state.transition_progress, 0.5)
        self.assertEqual(scene_phase(1.0, self.phases).transition_progress, 0.0)

    def test_zero_transition_out(self):
        """Without a transition-out the final state is TRANSITION_OUT with progress 0."""
        phases = PhaseFractions(transition_in=0.1, content=0.5, hold=0.4, transition_out=0.0)
        state = scene_phase(1.0, phases)
        self.assertEqual(state.phase, Phase.TRANSITION_OUT)
        self.assertEqual(state.transition_progress, 0.0)

    def test_progress_is_clamped(self):
        self.assertEqual(scene_phase(-0.5, self.phases).phase, Phase.TRANSITION_IN)
        self.assertEqual(scene_phase(1.5, self.phases).phase, Phase.TRANSITION_OUT)

    def test_content_progress_monotonic(self):
        """Content progress never decreases as raw progress rises."""
        last = -1.0
        for i in range(201):
            cp = scene_phase(i / 200, self.phases).content_progress
            self.assertGreaterEqual(cp, last)
            last = cp


if __name__ == "__main__":
    unittest.main()
