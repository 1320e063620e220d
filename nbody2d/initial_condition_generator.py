"""
This module generates randomized initial conditions for N-body simulations.

The InitialConditionGenerator class draws masses from a right-skewed Weibull
distribution shifted away from zero (so every mass is strictly positive), positions from
a zero-mean Gaussian with a fixed spread, and velocities from a narrower zero-mean
Gaussian, optionally shifted into the center-of-mass frame. All draws come from a single
numpy Generator created once, either injected by the caller or seeded from the
configuration, so the same seed always reproduces the same population. The
GeneratorConfig dataclass encapsulates the distribution parameters. Methods include
generate_single for one population, generate_bodies for Body records, generate_batch for
several populations, create_simulation for direct simulation instantiation, and
validate_system for a physics summary of a generated state.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from typing import Tuple, List, Dict, Optional

from .body import Body
from .diagnostics import Diagnostics
from .physics_utils import remove_center_of_mass_velocity
from .sim_config import SimConfig
from .simulation import NBodySimulation
from .simulation_validator import SimulationValidator




@dataclass
class GeneratorConfig:
	mass_offset: float = 1.0
	mass_shape: float = 1.0
	mass_scale: float = 2.0
	position_mean: float = 0.0
	position_scale: float = 10.0
	velocity_mean: float = 0.0
	velocity_scale: float = 0.5
	center_of_mass_frame: bool = False
	seed: Optional[int] = None


class InitialConditionGenerator:

	def __init__(self, config: GeneratorConfig | None = None, rng: np.random.Generator | None = None):
		self.config: GeneratorConfig = config or GeneratorConfig()
		if rng is None:
			rng = np.random.default_rng(self.config.seed)
		self.rng = rng


	def _generate_masses(self, n: int) -> np.ndarray:
		cfg = self.config
		return cfg.mass_offset + cfg.mass_scale * self.rng.weibull(cfg.mass_shape, n)

	def _generate_positions(self, n: int) -> np.ndarray:
		cfg = self.config
		return self.rng.normal(cfg.position_mean, cfg.position_scale, (n, 2))

	def _generate_velocities(self, m: np.ndarray) -> np.ndarray:
		cfg = self.config
		vel = self.rng.normal(cfg.velocity_mean, cfg.velocity_scale, (len(m), 2))
		if cfg.center_of_mass_frame:
			vel = remove_center_of_mass_velocity(m, vel)
		return vel


	def generate_single(self, n_bodies: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		m = self._generate_masses(n_bodies)
		p = self._generate_positions(n_bodies)
		v = self._generate_velocities(m)
		return m, p, v

	def generate_bodies(self, n_bodies: int) -> List[Body]:
		m, p, v = self.generate_single(n_bodies)
		return [Body(m[i], p[i, 0], p[i, 1], v[i, 0], v[i, 1]) for i in range(n_bodies)]

	def generate_batch(
		self, n_systems: int, n_bodies_range: Tuple[int, int] = (3, 5)
	) -> List[Tuple[np.ndarray, np.ndarray, np.ndarray]]:
		out: list = []
		for _ in range(n_systems):
			n = int(self.rng.integers(n_bodies_range[0], n_bodies_range[1] + 1))
			out.append(self.generate_single(n))
		return out

	def create_simulation(
		self,
		n_bodies: int | None = None,
		sim_config: SimConfig | None = None,
	) -> NBodySimulation:
		cfg = (sim_config or SimConfig()).validated()
		if n_bodies is None:
			n_bodies = cfg.n_bodies
		m, p, v = self.generate_single(int(n_bodies))
		return NBodySimulation(masses=m, positions=p, velocities=v, config=cfg)

	def validate_system(
		self,
		masses: np.ndarray,
		positions: np.ndarray,
		velocities: np.ndarray,
		sim_config: SimConfig | None = None,
	) -> Dict[str, float]:
		cfg = (sim_config or SimConfig()).validated()
		if not SimulationValidator.state_is_valid(masses, positions, velocities, cfg.min_separation):
			SimulationValidator.report_invalid_state(
				"generated system",
				masses=masses,
				positions=positions,
				velocities=velocities,
				min_separation=cfg.min_separation,
			)
			return {}

		sim = NBodySimulation(
			masses=masses,
			positions=positions,
			velocities=velocities,
			config=cfg,
		)
		diag = Diagnostics(sim)
		KE = diag.kinetic_energy()
		PE = diag.potential_energy()
		E_tot = KE + PE
		if PE:
			virial = 2 * KE / abs(PE)
		else:
			virial = np.inf
		L = diag.angular_momentum()
		com_pos, com_vel = diag.center_of_mass()

		return {
			"kinetic_energy": KE,
			"potential_energy": PE,
			"total_energy": E_tot,
			"virial_ratio": virial,
			"angular_momentum": L,
			"com_position": float(np.linalg.norm(com_pos)),
			"com_velocity": float(np.linalg.norm(com_vel)),
			"is_bound": bool(E_tot < 0),
		}
