import unittest
from contextlib import redirect_stdout
from io import StringIO

import pandas as pd

from nbody2d import Body, NBodySimulation, SimConfig, Trajectory, format_body, print_snapshot, print_run_header
from nbody2d.cli import main, parse_args


class TestTrajectory(unittest.TestCase):

    def test_frame_has_one_row_per_body_per_step(self):
        sim = NBodySimulation([Body(1.0, 0.0, 0.0), Body(1.0, 10.0, 0.0)], config=SimConfig(n_iterations=3))
        traj = Trajectory(sim.snapshot())
        sim.add_observer(traj)
        sim.run_to_completion()
        df = traj.to_frame()
        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(list(df.columns), Trajectory.COLUMNS)
        self.assertEqual(len(df), 4 * 2)
        self.assertEqual(sorted(df["step"].unique()), [0, 1, 2, 3])
        last = df[(df["step"] == 3) & (df["body"] == 0)].iloc[0]
        self.assertAlmostEqual(last["x"], sim.snapshot().positions[0, 0])
        self.assertEqual(traj.velocities().shape, (4, 2, 2))

    def test_empty_frame(self):
        df = Trajectory().to_frame()
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), Trajectory.COLUMNS)


class TestReporters(unittest.TestCase):

    def test_format_body(self):
        line = format_body(2.5, 1.23456, -7.0, 0.0101, 0.0)
        self.assertEqual(line, "  m =  2.5  x =   1.23  y =     -7  v = 0.0101  w =      0")

    def test_print_snapshot(self):
        sim = NBodySimulation([Body(1.0, 0.0, 0.0), Body(1.0, 10.0, 0.0)], config=SimConfig(n_iterations=1))
        out = StringIO()
        print_snapshot(sim.step(), out)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("  m = "))

    def test_print_run_header(self):
        out = StringIO()
        print_run_header(SimConfig(n_bodies=3, n_iterations=5, dt=0.5), out)
        text = out.getvalue()
        self.assertIn("Bodies: 3", text)
        self.assertIn("Iterations: 5", text)
        self.assertIn("Integration step: 0.5", text)


class TestCli(unittest.TestCase):

    def test_parse_valid_arguments(self):
        cfg, _ = parse_args(["4", "20", "0.25", "--G", "2", "--seed", "7"])
        self.assertEqual((cfg.n_bodies, cfg.n_iterations, cfg.dt, cfg.G, cfg.seed), (4, 20, 0.25, 2.0, 7))

    def test_invalid_arguments_use_defaults(self):
        out = StringIO()
        with redirect_stdout(out):
            cfg, _ = parse_args(["abc", "12x", "-1"])
        self.assertEqual((cfg.n_bodies, cfg.n_iterations, cfg.dt), (10, 100, 1.0))
        self.assertEqual(out.getvalue().count("[warning]"), 3)

    def test_missing_arguments_use_defaults(self):
        cfg, _ = parse_args([])
        self.assertEqual((cfg.n_bodies, cfg.n_iterations, cfg.dt, cfg.G), (10, 100, 1.0, 1.01))

    def test_huge_number_uses_default(self):
        with redirect_stdout(StringIO()):
            cfg, _ = parse_args(["3", "5", "1e400"])
        self.assertEqual(cfg.dt, 1.0)

    def test_main_runs_quietly(self):
        out = StringIO()
        with redirect_stdout(out):
            code = main(["3", "4", "0.5", "--seed", "1", "--quiet"])
        self.assertEqual(code, 0)
        text = out.getvalue()
        self.assertIn("Bodies: 3", text)
        self.assertEqual(sum(1 for l in text.splitlines() if l.startswith("  m = ")), 3)

    def test_bad_delay_uses_default(self):
        for raw in ("soon", "-1", "inf"):
            out = StringIO()
            with redirect_stdout(out):
                code = main(["2", "2", "--seed", "1", "--delay", raw, "--quiet"])
            self.assertEqual(code, 0)
            self.assertIn("[warning]", out.getvalue())
            self.assertIn("delay", out.getvalue())

    def test_main_prints_every_step(self):
        out = StringIO()
        with redirect_stdout(out):
            main(["2", "3", "--seed", "1"])
        lines = out.getvalue().splitlines()
        self.assertEqual(sum(1 for l in lines if l.startswith("step ")), 3)
        self.assertEqual(sum(1 for l in lines if l.startswith("  m = ")), 6)


if __name__ == "__main__":
    unittest.main()
