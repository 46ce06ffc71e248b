"""
NumPy kernels for axis maxima and the log-sum-exp reduction.
"""

import numpy as np

from ..._data_builder import data_control_path_manager
from ..._shape_utils import normalize_axis
from .....domain._errors import DataDimensionError, InvalidArgumentError
from .....domain.types._data_type import DataType, NUMERIC, FLOATS
from ._base import DataMixinReduction as DMR


def _check_reducible(self, op: str) -> None:
    if self.ndim == 0:
        raise DataDimensionError(0, ">=1")
    if self.size == 0:
        raise InvalidArgumentError(f"{op} of an empty array")


@data_control_path_manager(DMR, DMR.max_with_axis, NUMERIC)
def max_with_axis(self, axis: int, keepdims: bool = False):
    _check_reducible(self, "max_with_axis")
    axis_ = normalize_axis(axis, self.ndim)
    out = np.max(self._array, axis=axis_, keepdims=keepdims)
    return type(self)._from_array(out, self.data_type)


@data_control_path_manager(DMR, DMR.argmax_with_axis, NUMERIC)
def argmax_with_axis(self, axis: int, keepdims: bool = False):
    _check_reducible(self, "argmax_with_axis")
    axis_ = normalize_axis(axis, self.ndim)
    out = np.argmax(self._array, axis=axis_)
    if keepdims:
        out = np.expand_dims(out, axis=axis_)
    return type(self)._from_array(out, DataType.USIZE)


@data_control_path_manager(DMR, DMR.log_sum_exp, FLOATS)
def log_sum_exp(self, axis: int):
    """
    Stable log-sum-exp along `axis`, broadcast back to the input shape.

    The axis maximum is subtracted before exponentiation so large logits do
    not overflow.
    """
    _check_reducible(self, "log_sum_exp")
    axis_ = normalize_axis(axis, self.ndim)
    x = self._array
    x_max = np.max(x, axis=axis_, keepdims=True)
    y = np.log(np.sum(np.exp(x - x_max), axis=axis_, keepdims=True))
    out = np.broadcast_to(x_max + y, x.shape)
    return type(self)._from_array(out, self.data_type)
