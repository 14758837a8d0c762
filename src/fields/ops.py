# ops.py
"""
Derived quantities shared by every field vector.

These are free functions over anything with ``x``, ``y`` and ``z``
components; the field classes only delegate to them.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from fields.types import UnitVector

if TYPE_CHECKING:
    from fields.models import Vector3

PRECISION = 4


def inner_product(v: Vector3) -> float:
    """Dot product of ``v`` with itself (squared magnitude)."""
    # Multiply rather than ``**2``: float pow raises OverflowError, mul gives inf.
    return v.x * v.x + v.y * v.y + v.z * v.z


def magnitude(v: Vector3) -> float:
    return math.sqrt(inner_product(v))


def unit_vector(v: Vector3) -> UnitVector:
    """
    Normalize ``v`` to length 1.

    A zero vector has no direction: the result is flagged ``ok=False`` and
    carries a zero vector of the same type. Only an exact 0.0 magnitude
    counts as zero.
    """
    mag = magnitude(v)
    cls = type(v)
    if mag == 0.0:
        return UnitVector(False, cls(0.0, 0.0, 0.0))
    return UnitVector(True, cls(v.x / mag, v.y / mag, v.z / mag))


def format_scalar(value: float) -> str:
    return f"{value:.{PRECISION}f}"


def format_components(v: Vector3) -> str:
    return "(" + ", ".join(format_scalar(c) for c in (v.x, v.y, v.z)) + ")"
