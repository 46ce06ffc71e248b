"""
Transcendental mixins and floating-point kernels for VariableData.

Aggregates ``exp``, ``log``, ``sin``, ``cos`` and ``tanh``. The kernel modules
are imported for their registration side effects; only the mixin is exported.
"""

from ._data_exp_log import *
from ._data_trig import *
from ._base import DataMixinUnary

__all__ = [
    DataMixinUnary.__name__,
]
