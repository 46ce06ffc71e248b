"""
NumPy kernel for 2-D matrix multiplication.
"""

import numpy as np

from ..._data_builder import data_control_path_manager, check_same_data_type
from .....domain._errors import DataDimensionError, DataShapeError
from .....domain.types._data_type import NUMERIC
from ._base import DataMixinLinalg as DML


@data_control_path_manager(DML, DML.matmul, NUMERIC)
def matmul(self, other):
    check_same_data_type("matmul", self, other)
    for operand in (self, other):
        if operand.ndim != 2:
            raise DataDimensionError(operand.ndim, 2)
    if self.shape[1] != other.shape[0]:
        raise DataShapeError(other.shape, (self.shape[1], other.shape[1]))
    return type(self)._from_array(np.matmul(self._array, other._array), self.data_type)
