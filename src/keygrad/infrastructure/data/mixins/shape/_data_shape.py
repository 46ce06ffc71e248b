"""
NumPy kernels for reshape, transpose and broadcast_to.

All three return fresh, contiguous arrays: a broadcast view would alias its
source and break the value semantics of `VariableData`.
"""

from typing import Optional, Sequence

import numpy as np

from ..._data_builder import data_control_path_manager
from ..._shape_utils import normalize_axis, normalize_shape
from .....domain._errors import DataShapeError, InvalidArgumentError
from .....domain.types._data_type import ALL
from ._base import DataMixinShape as DMS


@data_control_path_manager(DMS, DMS.reshape, ALL)
def reshape(self, shape: Sequence[int]):
    target = normalize_shape(shape)
    if int(np.prod(target, dtype=np.int64)) != self.size:
        raise DataShapeError(self.shape, target)
    return type(self)._from_array(self._array.reshape(target), self.data_type)


@data_control_path_manager(DMS, DMS.transpose, ALL)
def transpose(self, axes: Optional[Sequence[int]] = None):
    ndim = self.ndim
    if axes is None:
        perm = tuple(reversed(range(ndim)))
    else:
        perm = tuple(normalize_axis(int(a), ndim) for a in axes)
        if sorted(perm) != list(range(ndim)):
            raise InvalidArgumentError(
                f"axes {tuple(axes)} is not a permutation of {ndim} axes"
            )
    return type(self)._from_array(
        np.ascontiguousarray(np.transpose(self._array, perm)), self.data_type
    )


@data_control_path_manager(DMS, DMS.broadcast_to, ALL)
def broadcast_to(self, shape: Sequence[int]):
    target = normalize_shape(shape)
    try:
        out = np.broadcast_to(self._array, target)
    except ValueError as e:
        raise DataShapeError(self.shape, target) from e
    return type(self)._from_array(np.array(out), self.data_type)
