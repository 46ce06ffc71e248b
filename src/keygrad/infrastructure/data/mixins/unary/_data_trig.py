"""
NumPy kernels for trigonometric and hyperbolic functions.
"""

import numpy as np

from ..._data_builder import data_control_path_manager
from .....domain.types._data_type import FLOATS
from ._base import DataMixinUnary as DMU


@data_control_path_manager(DMU, DMU.sin, FLOATS)
def sin(self):
    return type(self)._from_array(np.sin(self._array), self.data_type)


@data_control_path_manager(DMU, DMU.cos, FLOATS)
def cos(self):
    return type(self)._from_array(np.cos(self._array), self.data_type)


@data_control_path_manager(DMU, DMU.tanh, FLOATS)
def tanh(self):
    return type(self)._from_array(np.tanh(self._array), self.data_type)
