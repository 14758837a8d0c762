from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from fields.models import Vector3

VEC3 = NDArray[np.float64]
VEC3_BATCH = NDArray[np.float64]
SCALARS = NDArray[np.float64]
MASK = NDArray[np.bool_]


class UnitVector(NamedTuple):
    ok: bool
    vector: Vector3
