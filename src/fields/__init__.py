"""
Field Vectors Package

Electric and magnetic field vectors in 3-space: magnitude, self inner
product and unit-vector normalization, with numba batch kernels for
arrays of field samples.
"""

from .models import ElectricField, MagneticField, Vector3
from .ops import inner_product, magnitude, unit_vector
from .types import UnitVector

__version__ = "0.1.0"

__all__ = [
    "Vector3",
    "ElectricField",
    "MagneticField",
    "UnitVector",
    "magnitude",
    "inner_product",
    "unit_vector",
]
