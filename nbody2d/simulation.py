"""
This module implements NBodySimulation, the loop that owns the population and drives it
through a configured number of timesteps.

Each step runs the same four phases in a fixed order: every body's force is reset to
zero, forces are accumulated for every body against all the others, every body is
integrated with the configured timestep, and a read-only Snapshot of the population is
emitted to any registered observers. The loop has exactly two states, running while the
step counter is below the configured iteration count and terminal afterwards. Nothing
in here sleeps or paces output; rendering concerns live with the consumers of the
snapshots. Given the initial state, G, dt and the iteration count, a run is fully
deterministic.
"""

from __future__ import annotations
from typing import Callable, Iterator, List, Sequence
import numpy as np

from .body import Body
from .body_view import BodyView
from .forces import accumulate_force, gravitational_force, pair_evaluations, skipped_pairs
from .integrator import Integrator
from .sim_config import SimConfig
from .simulation_state import SimulationState
from .simulation_validator import SimulationValidator
from .snapshot import Snapshot
from .trajectory import Trajectory


RUNNING = "running"
TERMINAL = "terminal"

Observer = Callable[[Snapshot], None]




class NBodySimulation:

	def __init__(
		self,
		bodies: Sequence[Body] | None = None,
		*,
		masses=None,
		positions=None,
		velocities=None,
		config: SimConfig | None = None,
		G: float | None = None,
		dt: float | None = None,
		n_iterations: int | None = None,
	) -> None:
		cfg = (config or SimConfig()).copy()
		if G is not None:
			cfg.G = G
		if dt is not None:
			cfg.dt = dt
		if n_iterations is not None:
			cfg.n_iterations = n_iterations
		self.cfg = cfg.validated()

		self._state = SimulationState()
		body_list = list(bodies) if bodies is not None else None
		if not self._state.build_state(body_list, masses, positions, velocities):
			SimulationValidator.report_invalid_state(
				"NBodySimulation initial state",
				masses=masses,
				positions=positions,
				velocities=velocities,
			)
			raise ValueError("invalid initial state: at least one body, masses positive and finite, "
							 "positions/velocities finite with one 2D vector per body")

		self.cfg.n_bodies = self._state.n_bodies
		self._integrator = Integrator(self._state)
		self._observers: List[Observer] = []
		self.step_count = 0
		self.time = 0.0
		self.pair_evaluations_last_step = 0
		self.total_pair_evaluations = 0
		self._warned_terminal = False
		self._snapshot = self._capture()

		self.trajectory: Trajectory | None = None
		if self.cfg.record_trajectory:
			self.trajectory = Trajectory(self._snapshot)
			self.add_observer(self.trajectory)

	@property
	def G(self) -> float:
		return float(self.cfg.G)

	@property
	def dt(self) -> float:
		return float(self.cfg.dt)

	@property
	def n_bodies(self) -> int:
		return self._state.n_bodies

	@property
	def n_iterations(self) -> int:
		return int(self.cfg.n_iterations)

	@property
	def state(self) -> SimulationState:
		return self._state

	@property
	def _mass(self) -> np.ndarray:
		return self._state._mass

	@property
	def _pos(self) -> np.ndarray:
		return self._state._pos

	@property
	def _vel(self) -> np.ndarray:
		return self._state._vel

	@property
	def _force(self) -> np.ndarray:
		return self._state._force

	@property
	def bodies(self) -> List[BodyView]:
		return self._state.views()

	def body(self, idx: int) -> BodyView:
		return self._state.view(idx)

	@property
	def phase(self) -> str:
		return RUNNING if self.step_count < self.cfg.n_iterations else TERMINAL

	@property
	def is_running(self) -> bool:
		return self.phase == RUNNING

	@property
	def is_terminal(self) -> bool:
		return self.phase == TERMINAL

	def add_observer(self, observer: Observer) -> None:
		self._observers.append(observer)

	def remove_observer(self, observer: Observer) -> None:
		if observer in self._observers:
			self._observers.remove(observer)

	def snapshot(self) -> Snapshot:
		return self._snapshot

	def _capture(self) -> Snapshot:
		st = self._state
		return Snapshot.capture(self.step_count, self.time, st._mass, st._pos, st._vel)

	def compute_forces(self) -> int:
		st = self._state
		cfg = self.cfg
		st.reset_forces()

		if cfg.vectorized:
			st._force[...] = gravitational_force(
				st._pos, st._mass, cfg.G, cfg.min_separation, cfg.close_encounter
			)
			return pair_evaluations(st.n_bodies) - skipped_pairs(
				st._pos, cfg.min_separation, cfg.close_encounter
			)

		evaluated = 0
		for i in range(st.n_bodies):
			evaluated += accumulate_force(st, i, cfg.G, cfg.min_separation, cfg.close_encounter)
		return evaluated

	def step(self) -> Snapshot | None:
		if self.is_terminal:
			if not self._warned_terminal:
				print(f"[warning] simulation already completed {self.step_count} iterations; step ignored")
				self._warned_terminal = True
			return None

		self.pair_evaluations_last_step = self.compute_forces()
		self.total_pair_evaluations += self.pair_evaluations_last_step
		self._integrator.step(self.cfg.dt)

		self.step_count += 1
		self.time += self.cfg.dt
		self._snapshot = self._capture()
		for observer in list(self._observers):
			observer(self._snapshot)
		return self._snapshot

	def run(self) -> Iterator[Snapshot]:
		while self.is_running:
			snap = self.step()
			if snap is None:
				return
			yield snap

	def run_to_completion(self) -> Snapshot:
		for _ in self.run():
			pass
		return self._snapshot

	def __repr__(self) -> str:
		return (f"NBodySimulation(n_bodies={self.n_bodies}, step={self.step_count}/"
				f"{self.cfg.n_iterations}, dt={self.cfg.dt}, G={self.cfg.G})")
