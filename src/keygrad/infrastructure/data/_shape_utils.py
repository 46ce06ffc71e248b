"""
Shape helpers shared by the NumPy kernels.

These helpers normalize user-facing shape and axis arguments and compute the
reduction axes that make `sum_to` the exact dual of `broadcast_to`.
"""

import operator
from typing import Iterable, Optional, Sequence

from ...domain._errors import DataShapeError, InvalidArgumentError


def normalize_shape(shape_like) -> tuple[int, ...]:
    """
    Convert an int or an iterable of ints into a shape tuple.

    Raises
    ------
    InvalidArgumentError
        If any dimension is negative or not an integer.
    """
    if isinstance(shape_like, int):
        dims = (shape_like,)
    else:
        dims = tuple(shape_like)
    out = []
    for d in dims:
        if isinstance(d, bool):
            raise InvalidArgumentError(f"shape entries must be integers, got {d!r}")
        try:
            d = operator.index(d)
        except TypeError:
            raise InvalidArgumentError(
                f"shape entries must be integers, got {d!r}"
            ) from None
        if d < 0:
            raise InvalidArgumentError(f"shape entries must be non-negative, got {d}")
        out.append(d)
    return tuple(out)


def normalize_axis(axis: int, ndim: int) -> int:
    """
    Map a possibly negative axis onto ``[0, ndim)``.

    Raises
    ------
    InvalidArgumentError
        If the axis is out of bounds.
    """
    axis_ = axis if axis >= 0 else ndim + axis
    if axis_ < 0 or axis_ >= ndim:
        raise InvalidArgumentError(f"axis {axis} out of bounds for ndim {ndim}")
    return axis_


def normalize_axes(axis: Optional[Iterable[int]], ndim: int) -> Optional[tuple[int, ...]]:
    """
    Normalize an optional axis list into a sorted tuple of unique axes.

    A single int is accepted as a one-element list. ``None`` means "all axes"
    and is returned unchanged.
    """
    if axis is None:
        return None
    if isinstance(axis, int):
        axis = (axis,)
    axes = tuple(sorted({normalize_axis(int(a), ndim) for a in axis}))
    return axes


def sum_to_reduce_axes(
    src_shape: Sequence[int], target_shape: Sequence[int]
) -> tuple[tuple[int, ...], int]:
    """
    Compute the reduction axes that collapse `src_shape` onto `target_shape`.

    `target_shape` is left-padded with ones to the rank of `src_shape`; an axis
    is reduced when the padded target dimension is 1 while the source
    dimension is not.

    Returns
    -------
    reduce_axes : tuple[int, ...]
        Axes to sum with ``keepdims=True``.
    pad : int
        Number of leading axes to drop after the reduction.

    Raises
    ------
    DataShapeError
        If `target_shape` could not have been broadcast to `src_shape`.
    """
    src = tuple(int(d) for d in src_shape)
    tgt = tuple(int(d) for d in target_shape)

    if len(tgt) > len(src):
        raise DataShapeError(tgt, src)

    pad = len(src) - len(tgt)
    padded_tgt = (1,) * pad + tgt

    for sd, td in zip(src, padded_tgt):
        if td not in (1, sd):
            raise DataShapeError(src, tgt)

    reduce_axes = tuple(
        i for i, (sd, td) in enumerate(zip(src, padded_tgt)) if td == 1 and sd != 1
    )
    return reduce_axes, pad
