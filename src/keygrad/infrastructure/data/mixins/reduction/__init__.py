"""
Reduction mixins and kind-specific kernels for VariableData.

This package aggregates reduction-related mixins and their kernels:

- ``sum`` / ``sum_to``                       : summation and inverse broadcast
- ``max_with_axis`` / ``argmax_with_axis``   : axis maxima
- ``log_sum_exp``                            : stable log-sum-exp

Kernel modules are imported for their registration side effects; only the
mixin is exported.
"""

from ._data_max import *
from ._data_sum import *
from ._base import DataMixinReduction

__all__ = [
    DataMixinReduction.__name__,
]
