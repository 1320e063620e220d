"""
This module manages the internal state representation for N-body simulations.

The SimulationState class owns the whole population as contiguous float64 numpy arrays
for masses, positions, velocities and accumulated forces, indexed by body number. It
provides read access to the arrays, validates and builds the state from either a
list of Body records or parallel mass/position/velocity sequences, and exposes
BodyView proxies for attribute-style access. Population size and ordering are fixed
once the state is built; the force array is the only buffer cleared every step.
"""

from __future__ import annotations
import numpy as np
from typing import List, TYPE_CHECKING

from .body_view import BodyView

if TYPE_CHECKING:
    from .body import Body




class SimulationState:

	def __init__(self):
		self.n_bodies: int = 0
		self._mass: np.ndarray = np.empty(0, dtype=np.float64)
		self._pos: np.ndarray = np.empty((0, 2), dtype=np.float64)
		self._vel: np.ndarray = np.empty((0, 2), dtype=np.float64)
		self._force: np.ndarray = np.empty((0, 2), dtype=np.float64)

	@property
	def pos(self) -> np.ndarray:
		return self._pos

	@property
	def vel(self) -> np.ndarray:
		return self._vel

	@property
	def mass(self) -> np.ndarray:
		return self._mass

	@property
	def force(self) -> np.ndarray:
		return self._force


	def build_state(self, bodies: List[Body] | None, masses, positions, velocities) -> bool:
		if bodies is None:
			if masses is None or positions is None:
				return False

			masses = list(np.asarray(masses, dtype=np.float64).ravel())
			positions = np.asarray(positions, dtype=np.float64)
			if velocities is None:
				velocities = []
			else:
				velocities = list(np.asarray(velocities, dtype=np.float64).reshape(-1, 2))

			if len(velocities) == 0:
				velocities = [(0.0, 0.0)] * len(masses)

			if positions.size != 2 * len(masses) or len(velocities) != len(masses):
				return False

			mass_arr = np.asarray(masses, dtype=np.float64)
			pos_arr = positions.reshape(-1, 2).copy()
			vel_arr = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)

		else:
			mass_list = []
			pos_list = []
			vel_list = []
			for b in bodies:
				mass_list.append(b.mass)
				pos_list.append((b.x, b.y))
				vel_list.append((b.vx, b.vy))
			mass_arr = np.array(mass_list, dtype=np.float64)
			pos_arr = np.array(pos_list, dtype=np.float64).reshape(-1, 2)
			vel_arr = np.array(vel_list, dtype=np.float64).reshape(-1, 2)

		if mass_arr.size == 0:
			return False
		if np.any(mass_arr <= 0) or not np.all(np.isfinite(mass_arr)):
			return False
		if not np.all(np.isfinite(pos_arr)) or not np.all(np.isfinite(vel_arr)):
			return False

		self.n_bodies = int(mass_arr.size)
		self._mass = mass_arr
		self._pos = pos_arr
		self._vel = vel_arr
		self._force = np.zeros_like(self._pos)
		return True

	def reset_forces(self) -> None:
		self._force.fill(0.0)

	def view(self, idx: int) -> BodyView:
		if not -self.n_bodies <= idx < self.n_bodies:
			raise IndexError(f"body index {idx} out of range for {self.n_bodies} bodies")
		return BodyView(self, idx % self.n_bodies)

	def views(self) -> List[BodyView]:
		return [BodyView(self, i) for i in range(self.n_bodies)]

	def is_finite(self) -> bool:
		return bool(
			np.all(np.isfinite(self._pos))
			and np.all(np.isfinite(self._vel))
			and np.all(np.isfinite(self._force))
		)
