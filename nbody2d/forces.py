"""
This module implements the brute-force pairwise gravitational force law.

For a target body i and every other body j the displacement d = pos_j - pos_i, the
separation r = |d| and the scalar coupling s = G * m_i * m_j / r**3 are computed, and
s * d is added into body i's force. accumulate_force does this for one target body,
reading the rest of the population and writing only that body's row of the force
array; calling it for every body evaluates each unordered pair twice, once from each
side. gravitational_force is the vectorised equivalent over the full N x N pair matrix
built by geometry_buffers. Both honour the same close-encounter policy so that
coincident bodies never produce NaN or Inf.
"""

from __future__ import annotations
import numpy as np
from numpy.typing import NDArray
from typing import TYPE_CHECKING

from .geometry_cache import geometry_buffers, inverse_cube, CLAMP, SKIP

if TYPE_CHECKING:
    from .simulation_state import SimulationState




def pair_evaluations(n_bodies: int) -> int:
    n = int(n_bodies)
    if n < 2:
        return 0
    return n * (n - 1)


def pair_force(
    pos_i: NDArray[np.floating],
    pos_j: NDArray[np.floating],
    m_i: float,
    m_j: float,
    G: float,
    min_separation: float = 0.0,
    policy: str = CLAMP,
) -> NDArray[np.floating]:
    d = np.asarray(pos_j, dtype=float) - np.asarray(pos_i, dtype=float)
    r = float(np.hypot(d[0], d[1]))
    inv_r3 = float(inverse_cube(np.array([r]), min_separation, policy)[0])
    return float(G) * float(m_i) * float(m_j) * inv_r3 * d


def accumulate_force(
    state: "SimulationState",
    i: int,
    G: float,
    min_separation: float = 0.0,
    policy: str = CLAMP,
) -> int:
    n = state.n_bodies
    if n < 2:
        return 0

    pos = state._pos
    m = state._mass

    d = pos - pos[i]
    r = np.hypot(d[:, 0], d[:, 1])
    others = np.ones(n, dtype=bool)
    others[i] = False

    evaluated = others.copy()
    if policy == SKIP:
        evaluated &= r >= float(min_separation)

    inv_r3 = inverse_cube(r, min_separation, policy)
    inv_r3[~others] = 0.0

    s = float(G) * m[i] * m * inv_r3
    state._force[i] += np.sum(s[:, None] * d, axis=0)
    return int(np.count_nonzero(evaluated))


def gravitational_force(
    q: np.ndarray,
    m: np.ndarray,
    G: float = 1.0,
    min_separation: float = 0.0,
    policy: str = CLAMP,
) -> np.ndarray:
    q = np.asarray(q, dtype=float)
    m = np.asarray(m, dtype=float)

    if q.shape[0] < 2 or G == 0.0:
        return np.zeros_like(q)

    dr, _, inv_r3 = geometry_buffers(q, min_separation, policy)
    F_pair = (G * m[:, None] * m[None, :])[..., None] * inv_r3[..., None] * dr
    return F_pair.sum(axis=1)


def skipped_pairs(
    q: np.ndarray,
    min_separation: float = 0.0,
    policy: str = CLAMP,
) -> int:
    if policy != SKIP:
        return 0
    q = np.asarray(q, dtype=float)
    _, r, _ = geometry_buffers(q, min_separation, policy)
    close = r < float(min_separation)
    np.fill_diagonal(close, False)
    return int(np.count_nonzero(close))
