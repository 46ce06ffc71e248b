"""
Creation mixins and kernels for VariableData.

The kernel module is imported for its registration side effects; only the
mixin is exported.
"""

from ._data_like import *
from ._base import DataMixinCreation

__all__ = [
    DataMixinCreation.__name__,
]
