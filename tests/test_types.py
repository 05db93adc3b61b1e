import unittest
from handsculpt.core.types import (
    Hand, Handedness, LandmarkPoint, MoveIntent, ObjectView, Point3D, ResetIntent, ScaleIntent,
)

class TestHandedness(unittest.TestCase):
    def test_from_label(self):
        self.assertIs(Handedness.from_label("Left"), Handedness.LEFT)
        self.assertIs(Handedness.from_label(" right "), Handedness.RIGHT)

    def test_unknown_label(self):
        with self.assertRaises(ValueError):
            Handedness.from_label("Both")

class TestHand(unittest.TestCase):
    def test_requires_21_landmarks(self):
        with self.assertRaises(ValueError):
            Hand([LandmarkPoint(0.5, 0.5)] * 20, Handedness.LEFT)

    def test_landmarks_are_immutable_tuple(self):
        hand = Hand([LandmarkPoint(0.1 * (i % 10), 0.5) for i in range(21)], Handedness.RIGHT)
        self.assertIsInstance(hand.landmarks, tuple)
        self.assertEqual(hand.index_tip, hand[8])

class TestObjectView(unittest.TestCase):
    def test_fold_keeps_depth_on_move(self):
        view = ObjectView(Point3D(0.0, 0.0, -1.0), 1.0, 2.0)
        moved = view.fold(MoveIntent(2.0, 3.0))
        self.assertEqual(moved.position, Point3D(2.0, 3.0, -1.0))

    def test_fold_scale_and_reset(self):
        view = ObjectView(Point3D(1.0, 1.0, 0.0), 1.0, 2.0)
        scaled = view.fold(ScaleIntent(0.5))
        self.assertAlmostEqual(scaled.effective_radius, 1.0)

        reset = scaled.fold(ResetIntent())
        self.assertEqual(reset.position, Point3D(0.0, 0.0, 0.0))
        self.assertEqual(reset.scale, 1.0)

if __name__ == '__main__':
    unittest.main()
