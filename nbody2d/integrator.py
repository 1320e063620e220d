from __future__ import annotations
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from .simulation_state import SimulationState

"""
This module implements the Integrator class that advances the population by one explicit Euler step. The update is split into a kick (velocity from the freshly accumulated force) followed by a drift (position from the velocity just updated), which makes the scheme the semi-implicit variant of forward Euler; the order of the two halves is fixed. The integrator works in place on the simulation state arrays, either for a single body through step_body or for the whole population at once through step. It reads only force and mass and writes only velocity and position. Energy and momentum are not conserved over long horizons; that is an accepted property of the scheme.

"""

class Integrator:

	def __init__(self, state: "SimulationState") -> None:
		self.state = state
		self._warned_dt = False
		self._steps_taken = 0

	@property
	def steps_taken(self) -> int:
		return self._steps_taken

	def _dt_ok(self, dt: float) -> bool:
		if math.isfinite(dt) and dt > 0.0:
			return True
		if not self._warned_dt:
			print(f"[warning] Integrator step rejected: dt must be a positive finite number, got {dt}")
			self._warned_dt = True
		return False

	def kick(self, dt: float) -> None:
		st = self.state
		st._vel += float(dt) * st._force / st._mass[:, None]

	def drift(self, dt: float) -> None:
		st = self.state
		st._pos += float(dt) * st._vel

	def step(self, dt: float) -> bool:
		dt = float(dt)
		if self.state.n_bodies == 0 or not self._dt_ok(dt):
			return False
		self.kick(dt)
		self.drift(dt)
		self._steps_taken += 1
		return True

	def step_body(self, i: int, dt: float) -> bool:
		dt = float(dt)
		if not self._dt_ok(dt):
			return False
		st = self.state
		st._vel[i] += dt * st._force[i] / st._mass[i]
		st._pos[i] += dt * st._vel[i]
		return True
