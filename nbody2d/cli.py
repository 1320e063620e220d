"""
Command-line entry point.

Positional arguments follow the historical form ``<bodies> [<iterations> [<time-step>]]``.
Each one is validated on its own: a value that is not a number, carries trailing
characters, or is out of range is reported with a warning and replaced by the default,
so the run always starts from a fully validated SimConfig. Pacing between printed
frames (--delay) happens here, never inside the simulation loop.
"""

from __future__ import annotations
import argparse
import math
import sys
import time
from typing import Callable, List, Sequence

from .initial_condition_generator import GeneratorConfig, InitialConditionGenerator
from .reporters import print_run_header, print_snapshot, print_usage
from .sim_config import SimConfig, DEFAULT_DT, DEFAULT_G, DEFAULT_N_BODIES, DEFAULT_N_ITERATIONS


def _parse_number(name: str, raw: str | None, default, convert: Callable, *, positive: bool = True):
	if raw is None:
		return default
	text = raw.strip()
	try:
		value = convert(text)
	except ValueError:
		print(f"[warning] invalid number for {name}: {raw!r}; using default {default}")
		return default
	except OverflowError:
		print(f"[warning] number out of range for {name}: {raw!r}; using default {default}")
		return default
	if isinstance(value, float) and not math.isfinite(value):
		print(f"[warning] number out of range for {name}: {raw!r}; using default {default}")
		return default
	if positive and value <= 0:
		print(f"[warning] {name} must be positive, got {raw!r}; using default {default}")
		return default
	return value


def _strict_int(text: str) -> int:
	# int() rejects "12abc" and "1.5" alike
	return int(text, 10)


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(
		prog="nbody2d",
		description="Brute-force 2D gravitational N-body simulation with explicit Euler steps.",
	)
	p.add_argument("bodies", nargs="?", help=f"number of bodies (default {DEFAULT_N_BODIES})")
	p.add_argument("iterations", nargs="?", help=f"number of iterations (default {DEFAULT_N_ITERATIONS})")
	p.add_argument("time_step", nargs="?", help=f"integration step (default {DEFAULT_DT})")
	p.add_argument("--G", dest="G", default=None, help=f"gravitational constant (default {DEFAULT_G})")
	p.add_argument("--seed", default=None, help="seed for reproducible initial conditions")
	p.add_argument("--delay", default=None, help="seconds to sleep between printed frames")
	p.add_argument("--quiet", action="store_true", help="only print the final state")
	return p


def parse_args(argv: Sequence[str] | None = None) -> tuple[SimConfig, argparse.Namespace]:
	ns = build_parser().parse_args(argv)
	seed = _parse_number("seed", ns.seed, None, _strict_int, positive=False)
	if seed is not None and seed < 0:
		print(f"[warning] seed must be non-negative, got {ns.seed!r}; using a random seed")
		seed = None
	cfg = SimConfig(
		n_bodies=_parse_number("number of bodies", ns.bodies, DEFAULT_N_BODIES, _strict_int),
		n_iterations=_parse_number("number of iterations", ns.iterations, DEFAULT_N_ITERATIONS, _strict_int),
		dt=_parse_number("time step", ns.time_step, DEFAULT_DT, float),
		G=_parse_number("gravitational constant", ns.G, DEFAULT_G, float, positive=False),
		seed=seed,
	)
	return cfg.validated(), ns


def main(argv: List[str] | None = None) -> int:
	if argv is None:
		argv = sys.argv[1:]
	if not argv:
		print_usage()

	cfg, ns = parse_args(argv)
	print_run_header(cfg)

	generator = InitialConditionGenerator(GeneratorConfig(seed=cfg.seed))
	sim = generator.create_simulation(sim_config=cfg)

	delay = _parse_number("delay", ns.delay, 0.0, float, positive=False)
	if delay < 0.0:
		print(f"[warning] delay must not be negative, got {ns.delay!r}; using default 0.0")
		delay = 0.0
	for snap in sim.run():
		if ns.quiet:
			continue
		print(f"step {snap.step}  t = {snap.time:g}")
		print_snapshot(snap)
		if delay:
			time.sleep(delay)

	if ns.quiet:
		print_snapshot(sim.snapshot())
	return 0
