import sys
import unittest
from unittest import mock

from handsculpt.config import CONFIG
from handsculpt.core.state_manager import ControlState
from handsculpt.core.types import Status
from handsculpt.main import open_detector

class TestOpenDetector(unittest.TestCase):
    def setUp(self):
        self.state = ControlState()

    def test_missing_mediapipe_is_fatal(self):
        """No detector package: error status, error log, SystemExit."""
        # A None entry makes `import mediapipe` raise ImportError
        with mock.patch.dict(sys.modules, {"mediapipe": None}):
            with self.assertLogs("handsculpt.main", level="ERROR"):
                with self.assertRaises(SystemExit) as caught:
                    open_detector(self.state)

        self.assertEqual(caught.exception.code, 1)
        self.assertTrue(self.state.status.startswith("Error: "))

    def test_broken_tracker_is_fatal(self):
        fake_mp = mock.MagicMock()
        fake_mp.solutions.hands.Hands.side_effect = RuntimeError("model file not found")
        with mock.patch.dict(sys.modules, {"mediapipe": fake_mp}):
            with self.assertLogs("handsculpt.main", level="ERROR"):
                with self.assertRaises(SystemExit):
                    open_detector(self.state)

        self.assertIn("model file not found", self.state.status)

    def test_tracker_built_from_config(self):
        fake_mp = mock.MagicMock()
        with mock.patch.dict(sys.modules, {"mediapipe": fake_mp}):
            hands = open_detector(self.state)

        self.assertIs(hands, fake_mp.solutions.hands.Hands.return_value)
        kwargs = fake_mp.solutions.hands.Hands.call_args.kwargs
        self.assertEqual(kwargs["max_num_hands"], CONFIG["MAX_NUM_HANDS"])
        self.assertFalse(kwargs["static_image_mode"])
        self.assertEqual(self.state.status, Status.INITIALIZING)

if __name__ == '__main__':
    unittest.main()
