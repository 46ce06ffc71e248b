"""
Arithmetic mixins and kind-specific kernels for VariableData.

This package aggregates the arithmetic mixin and its kernel registrations:

- ``add`` / ``sub`` / ``mul`` / ``div`` / ``maximum`` : same-kind binary ops
- ``scalar_add`` / ``scalar_mul``                      : scalar ops
- ``neg`` / ``square`` / ``pow``                         : unary arithmetic

The kernel modules are imported for their side effects (registration with
the data control-path manager); only the mixin is exported.
"""

from ._data_binary import *
from ._data_scalar import *
from ._base import DataMixinArithmetic

__all__ = [
    DataMixinArithmetic.__name__,
]
