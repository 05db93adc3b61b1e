import unittest
from handsculpt.core.state_manager import ControlState
from handsculpt.core.types import ORIGIN, Point2D, Point3D, Status

class TestControlState(unittest.TestCase):
    def setUp(self):
        """Runs before every test."""
        self.state = ControlState()

    def test_initial_state(self):
        """Verify the session starts idle, at unit scale, spinning."""
        self.assertFalse(self.state.drag_mode)
        self.assertEqual(self.state.current_scale, 1.0)
        self.assertEqual(self.state.target_scale, 1.0)
        self.assertTrue(self.state.rotation_enabled)
        self.assertEqual(self.state.last_tap_time, 0)
        self.assertEqual(self.state.last_color_change_time, 0)

    def test_drag_anchors(self):
        """Anchors are captured on begin and the object anchor re-captured on end."""
        self.state.begin_drag(Point2D(1.0, 2.0), Point3D(0.5, 0.5, 0.0))
        self.assertTrue(self.state.drag_mode)
        self.assertEqual(self.state.drag_anchor_world, Point2D(1.0, 2.0))

        self.state.end_drag(Point3D(3.0, 4.0, 0.0))
        self.assertFalse(self.state.drag_mode)
        self.assertEqual(self.state.object_anchor_position, Point3D(3.0, 4.0, 0.0))

    def test_reset(self):
        """Verify reset clears drag, scale and rotation state."""
        self.state.begin_drag(Point2D(1.0, 2.0), Point3D(0.5, 0.5, 0.0))
        self.state.current_scale = 0.7
        self.state.target_scale = 0.5
        self.state.rotation_enabled = False

        self.state.reset()

        self.assertFalse(self.state.drag_mode)
        self.assertEqual(self.state.drag_anchor_world, Point2D(0.0, 0.0))
        self.assertEqual(self.state.object_anchor_position, ORIGIN)
        self.assertEqual(self.state.current_scale, 1.0)
        self.assertEqual(self.state.target_scale, 1.0)
        self.assertTrue(self.state.rotation_enabled)

    def test_status_logged_on_change_only(self):
        with self.assertLogs("handsculpt.core.state_manager", level="INFO") as logs:
            self.state.set_status(Status.NO_HANDS)
            self.state.set_status(Status.NO_HANDS)
            self.state.set_status(Status.RESET)
        self.assertEqual(len(logs.output), 2)
        self.assertEqual(self.state.status, Status.RESET)

if __name__ == '__main__':
    unittest.main()
