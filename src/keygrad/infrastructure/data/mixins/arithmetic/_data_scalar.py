"""
NumPy kernels for scalar arithmetic, negation and powers.

The scalar operand is converted to the receiver's element kind before the
operation so results never change kind (``f32 * 0.5`` stays ``f32``,
``i32 + 1.7`` adds ``1``).
"""

import numpy as np

from ..._data_builder import data_control_path_manager
from .....domain._errors import InvalidArgumentError
from .....domain.types._data_type import NUMERIC, SIGNED, FLOATS
from ._base import DataMixinArithmetic as DMA


def _as_kind_scalar(self, value: float) -> np.ndarray:
    """
    Convert a Python scalar to a 0-d array of the receiver's dtype.
    """
    dtype = self._array.dtype
    if self.data_type in FLOATS:
        return np.asarray(value, dtype=dtype)
    return np.asarray(int(value), dtype=dtype)


@data_control_path_manager(DMA, DMA.scalar_add, NUMERIC)
def scalar_add(self, value: float):
    return type(self)._from_array(
        self._array + _as_kind_scalar(self, value), self.data_type
    )


@data_control_path_manager(DMA, DMA.scalar_mul, NUMERIC)
def scalar_mul(self, value: float):
    return type(self)._from_array(
        self._array * _as_kind_scalar(self, value), self.data_type
    )


@data_control_path_manager(DMA, DMA.neg, SIGNED)
def neg(self):
    return type(self)._from_array(-self._array, self.data_type)


@data_control_path_manager(DMA, DMA.square, NUMERIC)
def square(self):
    x = self._array
    return type(self)._from_array(x * x, self.data_type)


@data_control_path_manager(DMA, DMA.pow, NUMERIC)
def pow(self, c: float):
    """
    Elementwise power.

    Floating-point kinds accept any real exponent. Integer kinds require a
    non-negative integral exponent.

    Raises
    ------
    InvalidArgumentError
        If the kind is an integer kind and `c` is negative or not integral.
    """
    x = self._array
    if self.data_type in FLOATS:
        return type(self)._from_array(np.power(x, x.dtype.type(c)), self.data_type)
    if c < 0 or not float(c).is_integer():
        raise InvalidArgumentError(
            f"integer pow requires a non-negative integral exponent, got {c!r}"
        )
    n = int(c)
    return type(self)._from_array(np.power(x, n), self.data_type)
