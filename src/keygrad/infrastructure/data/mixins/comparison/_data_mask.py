"""
NumPy kernels for scalar comparison masks.
"""

import numpy as np

from ..._data_builder import data_control_path_manager
from .....domain.types._data_type import NUMERIC
from ._base import DataMixinComparison as DMC


def _mask(self, hit: np.ndarray):
    return type(self)._from_array(hit.astype(self._array.dtype), self.data_type)


@data_control_path_manager(DMC, DMC.gt_mask, NUMERIC)
def gt_mask(self, value: float):
    return _mask(self, self._array > value)


@data_control_path_manager(DMC, DMC.ge_mask, NUMERIC)
def ge_mask(self, value: float):
    return _mask(self, self._array >= value)


@data_control_path_manager(DMC, DMC.lt_mask, NUMERIC)
def lt_mask(self, value: float):
    return _mask(self, self._array < value)


@data_control_path_manager(DMC, DMC.le_mask, NUMERIC)
def le_mask(self, value: float):
    return _mask(self, self._array <= value)
