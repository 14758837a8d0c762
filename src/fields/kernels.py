# kernels.py
"""
Batch versions of the field quantities over ``(N, 3)`` float64 arrays.

Each row is one field sample and rows are independent, so the loops run
under ``prange``. Compiled without fastmath: NaN and inf rows must come out
the same as the scalar path in ``fields.ops``.
"""

from collections.abc import Iterable

from numba import njit, prange  # type: ignore
import numpy as np

from fields.models import Vector3
from fields.types import MASK, SCALARS, VEC3_BATCH

# ===============================
# KERNELS
# ===============================


@njit(cache=True, parallel=True)  # type: ignore
def _inner_products(vecs: VEC3_BATCH) -> SCALARS:
    out = np.empty(vecs.shape[0], dtype=np.float64)
    for i in prange(vecs.shape[0]):
        x = vecs[i, 0]
        y = vecs[i, 1]
        z = vecs[i, 2]
        out[i] = x * x + y * y + z * z
    return out


@njit(cache=True, parallel=True)  # type: ignore
def _magnitudes(vecs: VEC3_BATCH) -> SCALARS:
    out = np.empty(vecs.shape[0], dtype=np.float64)
    for i in prange(vecs.shape[0]):
        x = vecs[i, 0]
        y = vecs[i, 1]
        z = vecs[i, 2]
        out[i] = np.sqrt(x * x + y * y + z * z)
    return out


@njit(cache=True, parallel=True)  # type: ignore
def _unit_vectors(vecs: VEC3_BATCH) -> tuple[VEC3_BATCH, MASK]:
    """Zero rows stay (0, 0, 0) and are flagged False in the mask."""
    n = vecs.shape[0]
    units = np.zeros((n, 3), dtype=np.float64)
    ok = np.zeros(n, dtype=np.bool_)
    for i in prange(n):
        x = vecs[i, 0]
        y = vecs[i, 1]
        z = vecs[i, 2]
        mag = np.sqrt(x * x + y * y + z * z)
        if mag == 0.0:
            continue
        units[i, 0] = x / mag
        units[i, 1] = y / mag
        units[i, 2] = z / mag
        ok[i] = True
    return units, ok


# ===============================
# PUBLIC API
# ===============================


def _check_batch(vecs: VEC3_BATCH) -> VEC3_BATCH:
    arr = np.ascontiguousarray(vecs, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"expected an (N, 3) array of vectors, got shape {arr.shape}")
    return arr


def as_array(vectors: Iterable[Vector3]) -> VEC3_BATCH:
    """Stack vectors into an (N, 3) float64 array."""
    rows = [[v.x, v.y, v.z] for v in vectors]
    return np.array(rows, dtype=np.float64).reshape(len(rows), 3)


def inner_products(vecs: VEC3_BATCH) -> SCALARS:
    return _inner_products(_check_batch(vecs))


def magnitudes(vecs: VEC3_BATCH) -> SCALARS:
    return _magnitudes(_check_batch(vecs))


def unit_vectors(vecs: VEC3_BATCH) -> tuple[VEC3_BATCH, MASK]:
    """
    Normalize every row.

    Returns:
        (units, ok) tuple; ``ok[i]`` is False where row ``i`` had exactly
        zero magnitude, and that row of ``units`` is (0, 0, 0).
    """
    return _unit_vectors(_check_batch(vecs))
