"""
Comparison mixins and kernels for VariableData.

The kernel module is imported for its registration side effects; only the
mixin is exported.
"""

from ._data_mask import *
from ._base import DataMixinComparison

__all__ = [
    DataMixinComparison.__name__,
]
