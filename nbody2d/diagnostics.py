from __future__ import annotations
import itertools, math
import numpy as np
from typing import TYPE_CHECKING, Tuple

from .geometry_cache import SKIP
from .physics_utils import center_of_mass as _center_of_mass
if TYPE_CHECKING:
    from .simulation import NBodySimulation

"""
This module computes conserved quantities and health metrics for a running N-body simulation. The Diagnostics class provides kinetic and potential energy (the potential uses the same close-encounter policy as the force law, so a clamped pair contributes -G m_i m_j / min_separation), total energy and its relative drift from a reference value, linear and angular momentum, and center of mass position and velocity. Explicit Euler does not conserve any of these exactly, so the numbers are for monitoring rather than enforcement. check_finite scans the state for NaN or Inf and reports offending arrays through rate-limited diagnostic printing to avoid console spam.

"""




class Diagnostics:
	_GLOBAL_DIAG_COUNTS = {}
	_DIAG_LIMIT = 5

	def __init__(self, simulation: "NBodySimulation"):
		self.sim = simulation
		self._E0 = None


	def kinetic_energy(self) -> float:
		s = 0.0
		for b in self.sim.bodies:
			s += 0.5 * b.mass * (b.vx * b.vx + b.vy * b.vy)
		return s

	def potential_energy(self) -> float:
		sim = self.sim
		cfg = sim.cfg
		eps = float(cfg.min_separation)
		s = 0.0
		for a, b in itertools.combinations(sim.bodies, 2):
			dx = b.x - a.x
			dy = b.y - a.y
			r = math.sqrt(dx * dx + dy * dy)
			if r < eps:
				if cfg.close_encounter == SKIP:
					continue
				r = eps
			if r > 0.0:
				s -= cfg.G * a.mass * b.mass / r
		return s

	def energy(self) -> float:
		return float(self.kinetic_energy() + self.potential_energy())

	def energy_drift(self, e0: float | None = None) -> float:
		if e0 is None:
			if self._E0 is None:
				self._E0 = self.energy()
			e0 = self._E0
		e = self.energy()
		if e0 == 0.0:
			return float(e - e0)
		return float((e - e0) / abs(e0))

	def linear_momentum(self) -> np.ndarray:
		sim = self.sim
		return np.sum(sim._mass[:, None] * sim._vel, axis=0)

	def angular_momentum(self) -> float:
		sim = self.sim
		m, r, v = sim._mass, sim._pos, sim._vel
		return float(np.sum(m * (r[:, 0] * v[:, 1] - r[:, 1] * v[:, 0])))

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		sim = self.sim
		return _center_of_mass(sim._mass, sim._pos, sim._vel)

	def check_finite(self) -> bool:
		if self.sim.state.is_finite():
			return True
		ok = True
		for name, arr in (("positions", self.sim._pos),
						  ("velocities", self.sim._vel),
						  ("forces", self.sim._force)):
			bad = ~np.isfinite(arr)
			if np.any(bad):
				ok = False
				rows = np.unique(np.nonzero(bad)[0])
				self._rate_limited_diag_print(
					name, f"[diag] non-finite {name} at step {self.sim.step_count} for bodies {rows.tolist()}"
				)
		return ok

	def _rate_limited_diag_print(self, key: str, msg: str) -> None:
		counts = Diagnostics._GLOBAL_DIAG_COUNTS
		n = counts.get(key, 0) + 1
		counts[key] = n
		if n < self._DIAG_LIMIT:
			print(msg)
		elif n == self._DIAG_LIMIT:
			print(msg + " (further messages suppressed)")
