"""
Numeric kind abstraction.

This module defines `DataType`, the closed enumeration of element kinds a
`VariableData` may hold, together with the kind groups used to register
numeric kernels.

Every kernel in the data layer is registered for an explicit set of kinds.
Operands of an unsupported kind (or two operands of different kinds) are
rejected instead of being promoted, so a float32 graph never silently turns
into a float64 one.

The domain layer only names the kinds; the mapping onto concrete NumPy dtypes
lives with the NumPy-backed implementation in the infrastructure layer.
"""

from enum import Enum


class DataType(Enum):
    """
    Enumeration of supported element kinds.

    Attributes
    ----------
    F32 : DataType
        32-bit IEEE floating point.
    F64 : DataType
        64-bit IEEE floating point.
    I32 : DataType
        32-bit signed integer.
    I64 : DataType
        64-bit signed integer.
    USIZE : DataType
        Unsigned index type (64-bit).
    BOOL : DataType
        Boolean.
    """

    F32 = "f32"
    F64 = "f64"
    I32 = "i32"
    I64 = "i64"
    USIZE = "usize"
    BOOL = "bool"

    @property
    def is_float(self) -> bool:
        return self in FLOATS

    def __str__(self) -> str:
        return self.value


FLOATS = frozenset({DataType.F32, DataType.F64})
"""Floating-point kinds (transcendental kernels)."""

SIGNED = frozenset({DataType.F32, DataType.F64, DataType.I32, DataType.I64})
"""Kinds with a meaningful negation."""

NUMERIC = SIGNED | {DataType.USIZE}
"""Kinds supporting arithmetic and reductions."""

INDEX = frozenset({DataType.USIZE, DataType.I64, DataType.I32})
"""Kinds accepted as index / label vectors."""

ALL = NUMERIC | {DataType.BOOL}
"""Every kind; used by shape and indexing kernels."""
