"""
Shape operators: reshape, transpose, broadcast_to and sum_to.

Each backward is another shape operator: reshape undoes reshape, the inverse
permutation undoes a transpose, and `broadcast_to` / `sum_to` are each
other's gradient.

The public wrappers always record a new node, even when the target shape
equals the input shape. Backward formulas go through the ``_*_grad``
helpers instead, which skip the node when the gradient already has the
required shape.
"""

from typing import Optional, Sequence

from ...domain._operator import Operator
from .._function import Function
from .._variable import Variable
from ..data._shape_utils import normalize_axis, normalize_shape
from ._validation import check_variable_count


def _reshape_grad(gy: Variable, shape: Sequence[int]) -> Variable:
    if gy.shape == tuple(shape):
        return gy
    return reshape(gy, shape)


def _broadcast_grad(gy: Variable, shape: Sequence[int]) -> Variable:
    if gy.shape == tuple(shape):
        return gy
    return broadcast_to(gy, shape)


def _sum_to_grad(gy: Variable, shape: Sequence[int]) -> Variable:
    if gy.shape == tuple(shape):
        return gy
    return sum_to(gy, shape)


class Reshape(Operator):
    """
    Reshape to a fixed target shape.

    Parameters
    ----------
    shape : Sequence[int]
        Target shape; its size must equal the input size.

    Notes
    -----
    The gradient is the upstream gradient reshaped back to the input shape.
    """

    def __init__(self, shape: Sequence[int]) -> None:
        self.shape = normalize_shape(shape)

    @property
    def name(self) -> str:
        return "Reshape"

    def forward(self, xs):
        """
        Raises
        ------
        DataShapeError
            If the input size differs from the target size.
        """
        check_variable_count(xs, 1, self.name)
        return [Variable(xs[0].data.reshape(self.shape))]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)
        return [_reshape_grad(gys[0], xs[0].shape)]


class Transpose(Operator):
    """
    Axis permutation; ``axes=None`` reverses every axis.

    Parameters
    ----------
    axes : Optional[Sequence[int]], optional
        Permutation of the input axes. Negative axes are accepted.

    Notes
    -----
    The gradient is the upstream gradient transposed by the inverse
    permutation.
    """

    def __init__(self, axes: Optional[Sequence[int]] = None) -> None:
        self.axes = None if axes is None else tuple(int(a) for a in axes)

    @property
    def name(self) -> str:
        return "Transpose"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        return [Variable(xs[0].data.transpose(self.axes))]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)
        gy = gys[0]
        if self.axes is None:
            return [transpose(gy)]
        ndim = xs[0].ndim
        perm = [normalize_axis(a, ndim) for a in self.axes]
        inverse = sorted(range(ndim), key=lambda i: perm[i])
        return [transpose(gy, inverse)]


class BroadcastTo(Operator):
    """
    Materialized broadcast to a target shape (NumPy rules).

    Parameters
    ----------
    shape : Sequence[int]
        Target shape the input must be broadcast-compatible with.

    Notes
    -----
    The gradient is `sum_to` of the upstream gradient onto the input shape.
    """

    def __init__(self, shape: Sequence[int]) -> None:
        self.shape = normalize_shape(shape)

    @property
    def name(self) -> str:
        return "BroadcastTo"

    def forward(self, xs):
        """
        Raises
        ------
        DataShapeError
            If the input cannot be broadcast to the target shape.
        """
        check_variable_count(xs, 1, self.name)
        return [Variable(xs[0].data.broadcast_to(self.shape))]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)
        return [_sum_to_grad(gys[0], xs[0].shape)]


class SumTo(Operator):
    """
    Sum down to a target shape; the dual of `BroadcastTo`.

    Parameters
    ----------
    shape : Sequence[int]
        Target shape. It must be broadcastable to the input shape.

    Notes
    -----
    The gradient is the upstream gradient broadcast back to the input shape.
    """

    def __init__(self, shape: Sequence[int]) -> None:
        self.shape = normalize_shape(shape)

    @property
    def name(self) -> str:
        return "SumTo"

    def forward(self, xs):
        """
        Raises
        ------
        DataShapeError
            If the target shape could not have been broadcast to the input.
        """
        check_variable_count(xs, 1, self.name)
        return [Variable(xs[0].data.sum_to(self.shape))]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)
        return [_broadcast_grad(gys[0], xs[0].shape)]


def reshape(x: Variable, shape: Sequence[int]) -> Variable:
    """
    Reshape `x` to `shape`.
    """
    return Function(Reshape(shape)).forward([x])[0]


def transpose(x: Variable, axes: Optional[Sequence[int]] = None) -> Variable:
    return Function(Transpose(axes)).forward([x])[0]


def broadcast_to(x: Variable, shape: Sequence[int]) -> Variable:
    """
    Broadcast `x` to `shape`.
    """
    return Function(BroadcastTo(shape)).forward([x])[0]


def sum_to(x: Variable, shape: Sequence[int]) -> Variable:
    """
    Sum `x` down to `shape`.
    """
    return Function(SumTo(shape)).forward([x])[0]
