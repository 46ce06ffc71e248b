"""
Summation operators.

The gradient of a sum is the upstream gradient broadcast back to the input
shape. When the reduced axes were dropped (``keepdims=False``) the gradient
is first reshaped to the keepdims form so the broadcast lines up with the
right axes.
"""

from typing import Optional, Sequence, Union

from ...domain._operator import Operator
from .._function import Function
from .._variable import Variable
from ..data._shape_utils import normalize_axes
from ._arithmetic import div
from ._shape import _broadcast_grad, _reshape_grad
from ._validation import check_variable_count

Axis = Optional[Union[int, Sequence[int]]]


def _keepdims_shape(in_shape: tuple, axes: Optional[tuple]) -> tuple:
    if axes is None:
        return (1,) * len(in_shape)
    return tuple(1 if i in axes else d for i, d in enumerate(in_shape))


class Sum(Operator):
    """
    Sum over `axis` (all axes when None), optionally keeping reduced axes.
    """

    def __init__(self, axis: Axis = None, keepdims: bool = False) -> None:
        if isinstance(axis, int):
            axis = [axis]
        self.axis = None if axis is None else [int(a) for a in axis]
        self.keepdims = bool(keepdims)

    @property
    def name(self) -> str:
        return "Sum"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        return [Variable(xs[0].data.sum(self.axis, self.keepdims))]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)
        x = xs[0]
        gy = gys[0]
        if not self.keepdims and x.ndim != 0:
            axes = normalize_axes(self.axis, x.ndim)
            gy = _reshape_grad(gy, _keepdims_shape(x.shape, axes))
        return [_broadcast_grad(gy, x.shape)]


def sum(x: Variable, axis: Axis = None, keepdims: bool = False) -> Variable:
    """
    Differentiable sum.

    Parameters
    ----------
    x : Variable
        Input.
    axis : int or Sequence[int] or None, optional
        Axes to reduce; None reduces every axis.
    keepdims : bool, optional
        Keep reduced axes with size 1.
    """
    return Function(Sum(axis, keepdims)).forward([x])[0]


def sum_all(x: Variable) -> Variable:
    return sum(x)


def sum_axis(x: Variable, axis: Union[int, Sequence[int]]) -> Variable:
    return sum(x, axis, keepdims=False)


def sum_keepdims(x: Variable, axis: Axis = None) -> Variable:
    return sum(x, axis, keepdims=True)


def mean(x: Variable, axis: Axis = None, keepdims: bool = False) -> Variable:
    """
    Arithmetic mean over `axis`.

    Integer kinds follow integer division (truncation toward zero).
    """
    axes = normalize_axes(axis, x.ndim)
    reduced = range(x.ndim) if axes is None else axes
    count = 1
    for i in reduced:
        count *= x.shape[i]
    y = sum(x, axis, keepdims)
    return div(y, Variable(y.data.full_like(count)))
