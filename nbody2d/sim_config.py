from __future__ import annotations
from dataclasses import dataclass, fields
import math
import numbers

import numpy as np

from .geometry_cache import CLAMP, CLOSE_ENCOUNTER_POLICIES

"""
This central configuration module defines all simulation parameters through the SimConfig dataclass. Key parameters are the population size, the number of iterations, the real-valued timestep, the tunable gravitational constant, an optional RNG seed for reproducible initial conditions, and the close-encounter policy with its minimum separation. The class provides a copy method for configuration inheritance and a validated method that replaces every out-of-range field by its documented default, printing a warning for each replacement so that no garbage value survives. It serves as the single source of truth for run parameters, with every component reading from it.

"""

DEFAULT_N_BODIES = 10
DEFAULT_N_ITERATIONS = 100
DEFAULT_DT = 1.0
DEFAULT_G = 1.01
DEFAULT_MIN_SEPARATION = 1.0e-3


def _is_integer(val) -> bool:
    return isinstance(val, numbers.Integral) and not isinstance(val, (bool, np.bool_))


@dataclass
class SimConfig:
    n_bodies: int = DEFAULT_N_BODIES
    n_iterations: int = DEFAULT_N_ITERATIONS
    dt: float = DEFAULT_DT
    G: float = DEFAULT_G
    seed: int | None = None
    min_separation: float = DEFAULT_MIN_SEPARATION
    close_encounter: str = CLAMP
    vectorized: bool = False
    record_trajectory: bool = False

    def copy(self) -> "SimConfig":
        new = object.__new__(SimConfig)
        new.__dict__ = dict(getattr(self, "__dict__", {}))
        return new

    def validated(self) -> "SimConfig":
        cfg = self.copy()
        defaults = {f.name: f.default for f in fields(SimConfig)}

        def _reset(name: str, reason: str) -> None:
            print(f"[warning] {name}={getattr(cfg, name)!r} {reason}; using default {defaults[name]!r}")
            setattr(cfg, name, defaults[name])

        for name in ("n_bodies", "n_iterations"):
            val = getattr(cfg, name)
            if not _is_integer(val):
                _reset(name, "is not an integer")
            elif val <= 0:
                _reset(name, "must be positive")
            else:
                setattr(cfg, name, int(val))

        for name in ("dt", "G", "min_separation"):
            val = getattr(cfg, name)
            if isinstance(val, (bool, np.bool_)) or not isinstance(val, numbers.Real):
                _reset(name, "is not a real number")
                continue
            val = float(val)
            if not math.isfinite(val):
                _reset(name, "is not finite")
            elif name != "G" and val <= 0.0:
                _reset(name, "must be positive")
            else:
                setattr(cfg, name, val)

        if cfg.close_encounter not in CLOSE_ENCOUNTER_POLICIES:
            _reset("close_encounter", f"is not one of {CLOSE_ENCOUNTER_POLICIES}")

        if cfg.seed is not None:
            if not _is_integer(cfg.seed) or cfg.seed < 0:
                _reset("seed", "is not a non-negative integer")
            else:
                cfg.seed = int(cfg.seed)

        return cfg
