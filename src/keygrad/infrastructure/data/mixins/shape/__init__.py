"""
Shape-manipulation mixins and kernels for VariableData.

Aggregates ``reshape``, ``transpose`` and ``broadcast_to``. The kernel module
is imported for its registration side effects; only the mixin is exported.
"""

from ._data_shape import *
from ._base import DataMixinShape

__all__ = [
    DataMixinShape.__name__,
]
