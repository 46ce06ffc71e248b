"""
NumPy-backed numeric data layer.

Importing this package registers every kind-specific kernel (through the
mixin subpackages) and exposes the concrete `VariableData` type together with
the `DataType` <-> NumPy dtype mapping.
"""

from ._variable_data import VariableData, numpy_dtype, data_type_from_numpy

__all__ = [
    VariableData.__name__,
    numpy_dtype.__name__,
    data_type_from_numpy.__name__,
]
