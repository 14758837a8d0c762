# models.py
from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from fields import ops
from fields.types import VEC3, UnitVector


class Vector3:
    __slots__ = ["x", "y", "z"]

    symbol = "V"

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x, self.y, self.z = x, y, z

    def __iter__(self) -> Iterable[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"

    def __copy__(self) -> Vector3:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Vector3:
        return self.copy()

    def set(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = x, y, z

    def copy(self) -> Vector3:
        return type(self)(self.x, self.y, self.z)

    def assign(self, other: Vector3) -> Vector3:
        """Overwrite all three components from ``other`` and return self."""
        self.x, self.y, self.z = other.x, other.y, other.z
        return self

    def magnitude(self) -> float:
        return ops.magnitude(self)

    def format(self, label: str | None = None) -> str:
        """Render as ``label = (x, y, z)`` with fixed 4-decimal components."""
        if label is None:
            label = self.symbol
        return f"{label} = {ops.format_components(self)}"

    def to_array(self) -> VEC3:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: VEC3) -> Vector3:
        x, y, z = (float(c) for c in arr)
        return cls(x, y, z)


class ElectricField(Vector3):
    __slots__ = []

    symbol = "E"

    def inner_product(self) -> float:
        return ops.inner_product(self)


class MagneticField(Vector3):
    __slots__ = []

    symbol = "B"

    def unit_vector(self) -> UnitVector:
        return ops.unit_vector(self)

