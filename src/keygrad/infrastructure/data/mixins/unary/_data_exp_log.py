"""
NumPy kernels for `exp` and `log` on floating-point data.
"""

import warnings

import numpy as np

from ..._data_builder import data_control_path_manager
from .....domain.types._data_type import FLOATS
from ._base import DataMixinUnary as DMU


@data_control_path_manager(DMU, DMU.exp, FLOATS)
def exp(self):
    return type(self)._from_array(np.exp(self._array), self.data_type)


@data_control_path_manager(DMU, DMU.log, FLOATS)
def log(self):
    x = self._array
    if np.any(x <= 0):
        warnings.warn(
            "log received non-positive values; result contains -inf or nan.",
            RuntimeWarning,
            stacklevel=2,
        )
    with np.errstate(divide="ignore", invalid="ignore"):
        out = np.log(x)
    return type(self)._from_array(out, self.data_type)
