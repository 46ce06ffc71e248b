"""
NumPy kernels for kind-preserving ``*_like`` constructors.
"""

import numpy as np

from ..._data_builder import data_control_path_manager
from .....domain._errors import InvalidArgumentError
from .....domain.types._data_type import ALL, FLOATS, NUMERIC
from ._base import DataMixinCreation as DMCr


@data_control_path_manager(DMCr, DMCr.zeros_like, ALL)
def zeros_like(self):
    return type(self)._from_array(np.zeros_like(self._array), self.data_type)


@data_control_path_manager(DMCr, DMCr.ones_like, NUMERIC)
def ones_like(self):
    return type(self)._from_array(np.ones_like(self._array), self.data_type)


@data_control_path_manager(DMCr, DMCr.full_like, NUMERIC)
def full_like(self, value: float):
    fill = value if self.data_type in FLOATS else int(value)
    return type(self)._from_array(
        np.full(self.shape, fill, dtype=self._array.dtype), self.data_type
    )


@data_control_path_manager(DMCr, DMCr.eye_like_type, NUMERIC)
def eye_like_type(self, n: int):
    n = int(n)
    if n < 0:
        raise InvalidArgumentError(f"eye size must be non-negative, got {n}")
    return type(self)._from_array(np.eye(n, dtype=self._array.dtype), self.data_type)
