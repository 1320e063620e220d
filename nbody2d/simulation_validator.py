"""
This module provides validation utilities for N-body simulation states.

The SimulationValidator class offers static methods to check state validity (positive
masses, finite values, one 2D vector per body) and to report detailed diagnostics for
invalid states. The validation covers every component of an initial state and helps
identify configuration errors before a run starts.
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple
import numpy as np





Vec2 = Tuple[float, float]


class SimulationValidator:
	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions: Sequence[Vec2],
		velocities: Sequence[Vec2],
		min_separation: float = 0.0,
	) -> bool:

		if masses is None or positions is None or velocities is None:
			return False

		m = np.asarray(masses, dtype=float).ravel()
		r = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)

		if r.ndim != 2 or v.ndim != 2 or r.shape != v.shape:
			return False
		if r.shape[0] != m.size or r.shape[1] != 2:
			return False
		if m.size == 0:
			return False

		for m_i in m:
			if not (m_i > 0.0 and math.isfinite(m_i)):
				return False

		if not np.all(np.isfinite(r)) or not np.all(np.isfinite(v)):
			return False

		if not (math.isfinite(min_separation) and min_separation >= 0.0):
			return False

		return True

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		velocities=None,
		min_separation=None,
	) -> None:

		print(f"[invalid] {label}")
		if masses is not None:
			print("masses", masses)
			for i, m_i in enumerate(np.asarray(masses, dtype=float).ravel()):
				if not (m_i > 0.0 and math.isfinite(m_i)):
					print(f"  mass[{i}] = {m_i} (expected a positive finite number)")
		if positions is not None:
			print("positions", positions)
			shape = np.shape(positions)
			if len(shape) != 2 or shape[1] != 2:
				print(f"  positions have shape {shape} (expected (N, 2))")
		if velocities is not None:
			print("velocities", velocities)
			shape = np.shape(velocities)
			if len(shape) != 2 or shape[1] != 2:
				print(f"  velocities have shape {shape} (expected (N, 2))")
		if min_separation is not None:
			print("min_separation", min_separation)
