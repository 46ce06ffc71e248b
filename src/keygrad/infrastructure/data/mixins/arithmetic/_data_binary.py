"""
NumPy kernels for same-kind, same-shape binary arithmetic.

Each kernel validates that both operands share one element kind and one shape
before touching NumPy; broadcasting between operands of different shapes is
deliberately not performed here (see `broadcast_to` / `sum_to`).
"""

import numpy as np

from .....domain._errors import DataShapeError
from ..._data_builder import data_control_path_manager, check_same_data_type
from .....domain.types._data_type import NUMERIC, DataType
from ._base import DataMixinArithmetic as DMA


def _binary_operands(op: str, a, b) -> tuple[np.ndarray, np.ndarray]:
    """
    Validate kinds and shapes of a binary kernel and return the raw arrays.
    """
    check_same_data_type(op, a, b)
    if a.shape != b.shape:
        raise DataShapeError(b.shape, a.shape)
    return a._array, b._array


@data_control_path_manager(DMA, DMA.add, NUMERIC)
def add(self, other):
    x, y = _binary_operands("add", self, other)
    return type(self)._from_array(x + y, self.data_type)


@data_control_path_manager(DMA, DMA.sub, NUMERIC)
def sub(self, other):
    x, y = _binary_operands("sub", self, other)
    return type(self)._from_array(x - y, self.data_type)


@data_control_path_manager(DMA, DMA.mul, NUMERIC)
def mul(self, other):
    x, y = _binary_operands("mul", self, other)
    return type(self)._from_array(x * y, self.data_type)


@data_control_path_manager(DMA, DMA.div, NUMERIC)
def div(self, other):
    """
    Elementwise division.

    Floating-point kinds use true division. Integer kinds truncate toward
    zero; division by zero raises `ZeroDivisionError`.
    """
    x, y = _binary_operands("div", self, other)
    if self.data_type in (DataType.F32, DataType.F64):
        return type(self)._from_array(x / y, self.data_type)

    if np.any(y == 0):
        raise ZeroDivisionError("integer division by zero")
    if self.data_type == DataType.USIZE:
        return type(self)._from_array(x // y, self.data_type)

    q = np.abs(x) // np.abs(y)
    q = np.where((x < 0) ^ (y < 0), -q, q)
    return type(self)._from_array(q, self.data_type)


@data_control_path_manager(DMA, DMA.maximum, NUMERIC)
def maximum(self, other):
    x, y = _binary_operands("maximum", self, other)
    return type(self)._from_array(np.maximum(x, y), self.data_type)
