from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the geometric kernel for the all-pairs force computation. The geometry_buffers function computes pairwise displacement vectors, separations and inverse cubed separations in a single pass, using Einstein summation for the squared distances. Close encounters are resolved by the configured policy: "clamp" replaces any separation below min_separation by min_separation before cubing, "skip" zeroes the coupling of such pairs altogether. Diagonal entries are always zero so that self-interaction never contributes. It assumes 2D position arrays and a non-negative min_separation.

"""



CLAMP = "clamp"
SKIP = "skip"
CLOSE_ENCOUNTER_POLICIES = (CLAMP, SKIP)

__all__ = ["geometry_buffers", "inverse_cube", "CLAMP", "SKIP", "CLOSE_ENCOUNTER_POLICIES"]


def inverse_cube(
    r: np.ndarray,
    min_separation: float = 0.0,
    policy: str = CLAMP,
) -> np.ndarray:
    r = np.asarray(r, dtype=float)
    eps = float(min_separation)

    if policy == SKIP:
        r_eff = np.where(r < eps, 0.0, r)
    else:
        r_eff = np.maximum(r, eps)

    inv_r3 = np.zeros_like(r_eff, dtype=float)
    mask = r_eff > 0.0
    if np.any(mask):
        inv_r3[mask] = np.power(r_eff[mask], -3.0)
    return inv_r3


def geometry_buffers(
    pos: np.ndarray,
    min_separation: float = 0.0,
    policy: str = CLAMP,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=float)

    # diff[i, j] points from body i towards body j
    diff = pos[None, :, :] - pos[:, None, :]
    r = np.sqrt(np.einsum("ijk,ijk->ij", diff, diff, optimize=True))

    inv_r3 = inverse_cube(r, min_separation, policy)
    np.fill_diagonal(inv_r3, 0.0)
    return diff, r, inv_r3
