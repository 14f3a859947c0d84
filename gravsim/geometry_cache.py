from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the geometric kernel for vectorized force computations. The geometry_buffers function computes pairwise separation vectors, squared distances, and inverse cubed distances in a single pass, using Einstein summation notation for the squared norms. Separations point from body i towards body j, so diff[i, j] = pos[j] - pos[i]. The diagonal of the inverse cubed distance matrix is set to zero to exclude self-interactions; off-diagonal zero distances are left unguarded and come out as inf, so coincident bodies propagate non-finite forces. It assumes 2D position arrays.

"""




__all__ = ["geometry_buffers"]

def geometry_buffers(
    pos: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=float)

    diff = pos[None, :, :] - pos[:, None, :]
    r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)

    with np.errstate(divide="ignore"):
        inv_r3 = np.power(r2, -1.5)

    np.fill_diagonal(inv_r3, 0.0)
    return diff, r2, inv_r3
