import numpy as np
from typing import Tuple

"""
This module implements small physics helpers shared by the generator and diagnostics. remove_center_of_mass_velocity subtracts the mass-weighted mean velocity so that the total linear momentum vanishes, and center_of_mass returns the mass-weighted mean position and velocity. Both handle single particles and empty populations gracefully and assume mass and vector arrays have compatible dimensions.


"""

def remove_center_of_mass_velocity(
	masses: np.ndarray, velocities: np.ndarray
) -> np.ndarray:
	if len(masses) == 1:
		return velocities.copy()
	total_mass = float(np.sum(masses))
	if total_mass == 0 or velocities.size == 0:
		return velocities.copy()
	v_cm = np.sum(masses[:, None] * velocities, axis=0) / total_mass
	return velocities - v_cm


def center_of_mass(
	masses: np.ndarray, positions: np.ndarray, velocities: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
	total_mass = float(np.sum(masses))
	if total_mass == 0 or positions.size == 0:
		return np.zeros(2), np.zeros(2)
	r_cm = np.sum(masses[:, None] * positions, axis=0) / total_mass
	v_cm = np.sum(masses[:, None] * velocities, axis=0) / total_mass
	return r_cm, v_cm
