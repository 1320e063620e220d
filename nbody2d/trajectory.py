import numpy as np
import pandas as pd
from typing import List

from .snapshot import Snapshot

"""
This module provides the Trajectory observer, which collects the per-step snapshots of a run in memory for later analysis. Register it with NBodySimulation.add_observer (or pass snapshots to record by hand); to_frame returns a long-format pandas DataFrame with one row per body per step, and positions/velocities stack the recorded arrays into (steps, N, 2) numpy arrays. Nothing is written to disk.


"""




class Trajectory:
	COLUMNS = ["step", "time", "body", "mass", "x", "y", "vx", "vy"]

	def __init__(self, include_initial: Snapshot | None = None) -> None:
		self.snapshots: List[Snapshot] = []
		if include_initial is not None:
			self.record(include_initial)

	def __call__(self, snapshot: Snapshot) -> None:
		self.record(snapshot)

	def __len__(self) -> int:
		return len(self.snapshots)

	def record(self, snapshot: Snapshot) -> None:
		if self.snapshots and snapshot.n_bodies != self.snapshots[0].n_bodies:
			print(f"[warning] snapshot at step {snapshot.step} has {snapshot.n_bodies} bodies, "
				  f"expected {self.snapshots[0].n_bodies}; skipping")
			return
		self.snapshots.append(snapshot)

	def positions(self) -> np.ndarray:
		if not self.snapshots:
			return np.empty((0, 0, 2))
		return np.stack([s.positions for s in self.snapshots])

	def velocities(self) -> np.ndarray:
		if not self.snapshots:
			return np.empty((0, 0, 2))
		return np.stack([s.velocities for s in self.snapshots])

	def to_frame(self) -> pd.DataFrame:
		if not self.snapshots:
			return pd.DataFrame(columns=self.COLUMNS)
		frames = []
		for s in self.snapshots:
			n = s.n_bodies
			frames.append(pd.DataFrame({
				"step": np.full(n, s.step, dtype=int),
				"time": np.full(n, s.time, dtype=float),
				"body": np.arange(n),
				"mass": s.masses,
				"x": s.positions[:, 0],
				"y": s.positions[:, 1],
				"vx": s.velocities[:, 0],
				"vy": s.velocities[:, 1],
			}))
		return pd.concat(frames, ignore_index=True)[self.COLUMNS]
