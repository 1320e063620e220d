"""
This module defines Snapshot, the read-only record of the whole population at the end
of a timestep.

A snapshot holds private copies of the mass, position and velocity arrays with their
writeable flag cleared, so consumers (console printers, trajectory recorders, external
renderers) can never alter simulation state through it, and reading it any number of
times yields identical values.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
import numpy as np


Vec2 = Tuple[float, float]


def _frozen(arr: np.ndarray) -> np.ndarray:
	out = np.array(arr, dtype=np.float64, copy=True)
	out.setflags(write=False)
	return out


@dataclass(frozen=True, eq=False)
class Snapshot:
	step: int
	time: float
	masses: np.ndarray
	positions: np.ndarray
	velocities: np.ndarray

	@classmethod
	def capture(cls, step: int, time: float, masses, positions, velocities) -> "Snapshot":
		return cls(
			step=int(step),
			time=float(time),
			masses=_frozen(masses),
			positions=_frozen(positions),
			velocities=_frozen(velocities),
		)

	@property
	def n_bodies(self) -> int:
		return int(self.masses.shape[0])

	def bodies(self) -> Iterator[Tuple[float, Vec2, Vec2]]:
		for i in range(self.n_bodies):
			yield (
				float(self.masses[i]),
				(float(self.positions[i, 0]), float(self.positions[i, 1])),
				(float(self.velocities[i, 0]), float(self.velocities[i, 1])),
			)

	def __len__(self) -> int:
		return self.n_bodies

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Snapshot):
			return NotImplemented
		return (
			self.step == other.step
			and self.time == other.time
			and np.array_equal(self.masses, other.masses)
			and np.array_equal(self.positions, other.positions)
			and np.array_equal(self.velocities, other.velocities)
		)
