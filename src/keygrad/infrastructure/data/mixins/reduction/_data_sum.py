"""
NumPy kernels for `sum` and `sum_to`.

`sum_to` is implemented the way gradients of broadcasted operations are
reduced: left-pad the target shape to the source rank, sum (with keepdims)
over every axis that was expanded, then drop the padding axes.
"""

from typing import Optional, Sequence

import numpy as np

from ..._data_builder import data_control_path_manager
from ..._shape_utils import normalize_axes, normalize_shape, sum_to_reduce_axes
from .....domain.types._data_type import NUMERIC
from ._base import DataMixinReduction as DMR


@data_control_path_manager(DMR, DMR.sum, NUMERIC)
def sum(self, axis: Optional[Sequence[int]] = None, keepdims: bool = False):
    """
    Kind-preserving NumPy sum.

    NumPy promotes small integer sums to the platform integer; the result is
    cast back so ``i32`` data stays ``i32``.
    """
    axes = normalize_axes(axis, self.ndim)
    out = np.sum(self._array, axis=axes, keepdims=keepdims)
    return type(self)._from_array(out, self.data_type)


@data_control_path_manager(DMR, DMR.sum_to, NUMERIC)
def sum_to(self, shape: Sequence[int]):
    target = normalize_shape(shape)
    reduce_axes, pad = sum_to_reduce_axes(self.shape, target)

    out = self._array
    if reduce_axes:
        out = np.sum(out, axis=reduce_axes, keepdims=True)
    if pad:
        out = out.reshape(target)
    return type(self)._from_array(out, self.data_type)
