"""
Arity and rank checks shared by operator implementations.
"""

from typing import Optional, Sequence

from ...domain._errors import (
    DataDimensionError,
    InvalidVariableCountError,
    OutOfRangeVariableCountError,
)


def check_variable_count(xs: Sequence, n: int, op: Optional[str] = None) -> None:
    """
    Require exactly `n` variables.

    Raises
    ------
    InvalidVariableCountError
        If ``len(xs) != n``.
    """
    if len(xs) != n:
        raise InvalidVariableCountError(n, len(xs), op)


def check_variable_count_between(
    xs: Sequence, low: int, high: int, op: Optional[str] = None
) -> int:
    """
    Require ``low <= len(xs) < high`` and return the count.

    Raises
    ------
    OutOfRangeVariableCountError
        If the count is outside the half-open range.
    """
    n = len(xs)
    if n < low or n >= high:
        raise OutOfRangeVariableCountError(n, low, high, op)
    return n


def check_dimensions(x, ndim: int) -> None:
    """
    Require `x` to have exactly `ndim` axes.

    Raises
    ------
    DataDimensionError
        If the rank differs.
    """
    if x.ndim != ndim:
        raise DataDimensionError(x.ndim, ndim)
