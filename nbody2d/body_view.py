"""
This module implements BodyView, a proxy class providing Body-like access to individual
particles stored in the simulation's numpy arrays.

The class uses properties with getters and setters to map attribute access (mass, x, y,
vx, vy) directly to the appropriate array indices in the owning simulation state, and
read-only properties for the accumulated force (fx, fy). This keeps the arena+index
layout intact: the population lives in contiguous arrays and a view is nothing more
than an index into them. The view assumes the body index remains within bounds.
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .simulation_state import SimulationState




class BodyView:
	__slots__ = ("_state", "_i")

	def __init__(self, state: "SimulationState", idx: int) -> None:
		self._state = state
		self._i = int(idx)

	@property
	def index(self) -> int:
		return self._i

	@property
	def mass(self) -> float:
		return float(self._state._mass[self._i])
	@mass.setter
	def mass(self, v: float) -> None:
		v = float(v)
		if not (v > 0.0 and math.isfinite(v)):
			print(f"[warning] rejected non-positive mass {v} for body {self._i}")
			return
		self._state._mass[self._i] = v

	@property
	def x(self) -> float:
		return float(self._state._pos[self._i, 0])
	@x.setter
	def x(self, v: float) -> None:
		self._state._pos[self._i, 0] = float(v)

	@property
	def y(self) -> float:
		return float(self._state._pos[self._i, 1])
	@y.setter
	def y(self, v: float) -> None:
		self._state._pos[self._i, 1] = float(v)

	@property
	def vx(self) -> float:
		return float(self._state._vel[self._i, 0])
	@vx.setter
	def vx(self, v: float) -> None:
		self._state._vel[self._i, 0] = float(v)

	@property
	def vy(self) -> float:
		return float(self._state._vel[self._i, 1])
	@vy.setter
	def vy(self, v: float) -> None:
		self._state._vel[self._i, 1] = float(v)

	@property
	def fx(self) -> float:
		return float(self._state._force[self._i, 0])

	@property
	def fy(self) -> float:
		return float(self._state._force[self._i, 1])

	def __repr__(self) -> str:
		return (f"Body(mass={self.mass}, x={self.x}, y={self.y}, "
				f"vx={self.vx}, vy={self.vy})")
