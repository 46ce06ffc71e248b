"""
Linear-algebra mixins and kernels for VariableData.
"""

from ._data_matmul import *
from ._base import DataMixinLinalg

__all__ = [
    DataMixinLinalg.__name__,
]
