import unittest
from contextlib import redirect_stdout
from io import StringIO

import numpy as np

from nbody2d import Body, NBodySimulation, SimConfig, DEFAULT_DT, DEFAULT_G, DEFAULT_N_BODIES, DEFAULT_N_ITERATIONS
from nbody2d.geometry_cache import SKIP


class TestSimConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = SimConfig()
        self.assertEqual(cfg.n_bodies, 10)
        self.assertEqual(cfg.n_iterations, 100)
        self.assertEqual(cfg.dt, 1.0)
        self.assertEqual(cfg.G, 1.01)
        self.assertIsNone(cfg.seed)

    def test_valid_config_passes_unchanged(self):
        cfg = SimConfig(n_bodies=3, n_iterations=7, dt=0.05, G=2.0, seed=9, close_encounter=SKIP)
        out = StringIO()
        with redirect_stdout(out):
            v = cfg.validated()
        self.assertEqual(out.getvalue(), "")
        self.assertEqual(v, cfg)
        self.assertIsInstance(v.dt, float)

    def test_invalid_values_fall_back_to_defaults(self):
        cfg = SimConfig(n_bodies=0, n_iterations=-3, dt=0.0, G=float("nan"),
                        min_separation=-1.0, close_encounter="merge", seed=-4)
        out = StringIO()
        with redirect_stdout(out):
            v = cfg.validated()
        self.assertEqual(v.n_bodies, DEFAULT_N_BODIES)
        self.assertEqual(v.n_iterations, DEFAULT_N_ITERATIONS)
        self.assertEqual(v.dt, DEFAULT_DT)
        self.assertEqual(v.G, DEFAULT_G)
        self.assertEqual(v.close_encounter, "clamp")
        self.assertIsNone(v.seed)
        self.assertGreater(v.min_separation, 0.0)
        self.assertEqual(out.getvalue().count("[warning]"), 7)

    def test_wrong_types_fall_back(self):
        cfg = SimConfig(n_bodies="ten", n_iterations=2.5, dt="fast")
        with redirect_stdout(StringIO()):
            v = cfg.validated()
        self.assertEqual((v.n_bodies, v.n_iterations, v.dt), (10, 100, 1.0))

    def test_numpy_integers_accepted(self):
        cfg = SimConfig(n_bodies=np.int32(4), n_iterations=np.int64(5), seed=np.uint32(9), dt=np.float32(0.5))
        out = StringIO()
        with redirect_stdout(out):
            v = cfg.validated()
        self.assertEqual(out.getvalue(), "")
        self.assertEqual((v.n_bodies, v.n_iterations, v.seed, v.dt), (4, 5, 9, 0.5))
        self.assertIs(type(v.n_iterations), int)
        self.assertIs(type(v.seed), int)

    def test_numpy_bool_is_not_a_count(self):
        with redirect_stdout(StringIO()):
            v = SimConfig(n_iterations=np.bool_(True), dt=np.bool_(True)).validated()
        self.assertEqual((v.n_iterations, v.dt), (DEFAULT_N_ITERATIONS, DEFAULT_DT))

    def test_simulation_keeps_numpy_iteration_count(self):
        sim = NBodySimulation([Body(1.0, 0.0, 0.0)], config=SimConfig(n_iterations=np.int64(5)))
        self.assertEqual(sim.n_iterations, 5)
        self.assertEqual(len(list(sim.run())), 5)

    def test_integer_timestep_becomes_float(self):
        with redirect_stdout(StringIO()):
            v = SimConfig(dt=2).validated()
        self.assertEqual(v.dt, 2.0)
        self.assertIsInstance(v.dt, float)

    def test_copy_is_independent(self):
        cfg = SimConfig(n_bodies=4)
        other = cfg.copy()
        other.n_bodies = 8
        self.assertEqual(cfg.n_bodies, 4)

    def test_validated_does_not_mutate(self):
        cfg = SimConfig(dt=-1.0)
        with redirect_stdout(StringIO()):
            cfg.validated()
        self.assertEqual(cfg.dt, -1.0)


if __name__ == "__main__":
    unittest.main()
