import unittest

import numpy as np

from handsculpt.config import CONFIG
from handsculpt.control.scene_sink import ParticleSystem
from handsculpt.ui.hud import HUD, rgb_to_bgr

class TestParticleOverlay(unittest.TestCase):
    def setUp(self):
        self.hud = HUD()
        self.frame = np.zeros((100, 100, 3), dtype=np.uint8)
        self.particles = ParticleSystem(CONFIG)

    def test_each_particle_fades_with_its_own_lifetime(self):
        """A dying particle stays faint even next to a fresh one."""
        self.particles.add([-2.5, 0.0, 0.0], [0.0, 0.0, 0.0], 1.5, 0xFFFFFF)   # alpha 1.0
        self.particles.add([2.5, 0.0, 0.0], [0.0, 0.0, 0.0], 0.2, 0xFFFFFF)    # alpha 0.2

        self.hud._draw_particles(self.frame, self.particles)

        np.testing.assert_array_equal(self.frame[50, 25], [255, 255, 255])
        faint = self.frame[50, 75]
        self.assertTrue(np.all(np.abs(faint.astype(int) - 51) <= 2), faint)

    def test_empty_system_leaves_frame_untouched(self):
        self.hud._draw_particles(self.frame, self.particles)
        self.assertFalse(self.frame.any())

    def test_rgb_to_bgr(self):
        self.assertEqual(rgb_to_bgr(0xA52A2A), (0x2A, 0x2A, 0xA5))

if __name__ == '__main__':
    unittest.main()
