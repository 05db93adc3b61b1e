import unittest
from handsculpt.core.geometry import distance, map_hand_to_world, clamped_ramp, smooth_towards
from handsculpt.core.types import LandmarkPoint, Point2D, Point3D

class TestGeometry(unittest.TestCase):
    def test_distance_3d(self):
        """Verify Euclidean distance uses all three axes."""
        a = Point3D(0.0, 0.0, 0.0)
        b = Point3D(1.0, 2.0, 2.0)
        self.assertAlmostEqual(distance(a, b), 3.0)
        self.assertAlmostEqual(distance(b, a), 3.0)

    def test_map_centre_to_origin(self):
        """The image centre lands on the world origin."""
        self.assertEqual(map_hand_to_world(LandmarkPoint(0.5, 0.5, 0.7)), Point2D(0.0, 0.0))

    def test_map_flips_y(self):
        """Image Y grows downwards, world Y grows upwards."""
        top_right = map_hand_to_world(LandmarkPoint(1.0, 0.0))
        self.assertAlmostEqual(top_right.x, 5.0)
        self.assertAlmostEqual(top_right.y, 5.0)

        bottom_left = map_hand_to_world(LandmarkPoint(0.0, 1.0))
        self.assertAlmostEqual(bottom_left.x, -5.0)
        self.assertAlmostEqual(bottom_left.y, -5.0)

    def test_clamped_ramp(self):
        """Lerp inside the range, clamp outside it."""
        self.assertEqual(clamped_ramp(-1.0, 0.0, 1.0, 10.0, 20.0), 10.0)
        self.assertEqual(clamped_ramp(2.0, 0.0, 1.0, 10.0, 20.0), 20.0)
        self.assertAlmostEqual(clamped_ramp(0.25, 0.0, 1.0, 10.0, 20.0), 12.5)

    def test_smoothing_fixed_point(self):
        """A filter already at its target stays there."""
        self.assertEqual(smooth_towards(1.2, 1.2, 0.15), 1.2)

    def test_smoothing_step(self):
        self.assertAlmostEqual(smooth_towards(1.0, 2.0, 0.15), 1.15)

if __name__ == '__main__':
    unittest.main()
