import unittest

import numpy as np
from numpy.testing import assert_allclose

from nbody2d import Integrator, SimulationState


class TestIntegrator(unittest.TestCase):

    def setUp(self):
        self.st = SimulationState()
        self.st.build_state(None, [2.0, 4.0], [[0.0, 0.0], [1.0, 1.0]], [[1.0, 0.0], [0.0, -1.0]])
        self.st.force[...] = [[2.0, 0.0], [0.0, 4.0]]
        self.integ = Integrator(self.st)

    def test_position_uses_updated_velocity(self):
        self.integ.step(0.5)
        # v0 = 1 + 0.5 * 2 / 2 = 1.5, x0 = 0 + 0.5 * 1.5
        assert_allclose(self.st.vel[0], [1.5, 0.0])
        assert_allclose(self.st.pos[0], [0.75, 0.0])
        # v1 = -1 + 0.5 * 4 / 4 = -0.5, y1 = 1 + 0.5 * -0.5
        assert_allclose(self.st.vel[1], [0.0, -0.5])
        assert_allclose(self.st.pos[1], [1.0, 0.75])

    def test_step_body_matches_step(self):
        other = SimulationState()
        other.build_state(None, self.st.mass, self.st.pos, self.st.vel)
        other.force[...] = self.st.force
        integ = Integrator(other)
        for i in range(2):
            integ.step_body(i, 0.25)
        self.integ.step(0.25)
        assert_allclose(other.pos, self.st.pos)
        assert_allclose(other.vel, self.st.vel)

    def test_fractional_timestep_is_not_truncated(self):
        self.integ.step(0.1)
        assert_allclose(self.st.vel[0], [1.1, 0.0])

    def test_rejects_non_positive_dt(self):
        pos, vel = self.st.pos.copy(), self.st.vel.copy()
        for dt in (0.0, -1.0, float("nan"), float("inf")):
            self.assertFalse(self.integ.step(dt))
            self.assertFalse(self.integ.step_body(0, dt))
        assert_allclose(self.st.pos, pos)
        assert_allclose(self.st.vel, vel)
        self.assertEqual(self.integ.steps_taken, 0)

    def test_force_and_mass_untouched(self):
        force = self.st.force.copy()
        self.integ.step(1.0)
        assert_allclose(self.st.force, force)
        assert_allclose(self.st.mass, [2.0, 4.0])


if __name__ == "__main__":
    unittest.main()
