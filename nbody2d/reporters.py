"""Console output for simulation runs: run header, usage banner and per-body lines."""

from __future__ import annotations
import sys
from typing import TextIO

from .sim_config import SimConfig
from .snapshot import Snapshot


_RULE = " " + "-" * 64


def _g3(value: float, width: int) -> str:
	return f"{value:{width}.3g}"


def format_body(mass: float, x: float, y: float, vx: float, vy: float) -> str:
	return (f"  m = {_g3(mass, 4)}"
			f"  x = {_g3(x, 6)}"
			f"  y = {_g3(y, 6)}"
			f"  v = {_g3(vx, 6)}"
			f"  w = {_g3(vy, 6)}")


def print_snapshot(snapshot: Snapshot, out: TextIO | None = None) -> None:
	out = out or sys.stdout
	for m, (x, y), (vx, vy) in snapshot.bodies():
		print(format_body(m, x, y, vx, vy), file=out)


def print_run_header(cfg: SimConfig, out: TextIO | None = None) -> None:
	out = out or sys.stdout
	print("", file=out)
	print(f"            Bodies: {cfg.n_bodies}", file=out)
	print(f"        Iterations: {cfg.n_iterations}", file=out)
	print(f"  Integration step: {cfg.dt:g}", file=out)
	print(f"     Gravity const: {cfg.G:g}", file=out)
	if cfg.seed is not None:
		print(f"              Seed: {cfg.seed}", file=out)
	print("", file=out)


def print_usage(prog: str = "nbody2d", out: TextIO | None = None) -> None:
	out = out or sys.stdout
	print("", file=out)
	print(_RULE, file=out)
	print("  Optionally specify arguments, ", file=out)
	print(f"    {prog} <number-of-bodies>", file=out)
	print("  or", file=out)
	print(f"    {prog} <number-of-bodies> <number-of-iterations>", file=out)
	print("  or", file=out)
	print(f"    {prog} <number-of-bodies> <number-of-iterations> <time-step>", file=out)
	print(_RULE, file=out)
	print("", file=out)
