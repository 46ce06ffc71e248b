"""
Activation operators: sigmoid, ReLU and softmax.
"""

from ...domain._operator import Operator
from .._function import Function
from .._variable import Variable
from ._arithmetic import mul, sub
from ._reduction import sum
from ._shape import broadcast_to
from ._validation import check_variable_count


class Sigmoid(Operator):
    """
    Logistic sigmoid, computed as ``0.5 * tanh(0.5 * x) + 0.5`` so large
    negative inputs do not overflow.

    Notes
    -----
    The gradient reuses the output: ``gy * y * (1 - y)``.
    """

    @property
    def name(self) -> str:
        return "Sigmoid"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        y = xs[0].data.scalar_mul(0.5).tanh().scalar_add(1.0).scalar_mul(0.5)
        return [Variable(y)]

    def backward(self, xs, ys, gys):
        check_variable_count(ys, 1, self.name)
        check_variable_count(gys, 1, self.name)
        y = ys[0]
        one = Variable(y.data.ones_like())
        return [mul(gys[0], mul(sub(one, y), y))]


class ReLU(Operator):
    """
    Rectified linear unit ``max(x, 0)``.

    Notes
    -----
    The gradient is ``gy`` masked by ``x > 0``; the subgradient at 0 is 0.
    """

    @property
    def name(self) -> str:
        return "ReLU"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        x = xs[0].data
        return [Variable(x.maximum(x.zeros_like()))]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)
        mask = Variable(xs[0].data.gt_mask(0))
        return [mul(gys[0], mask)]


class Softmax(Operator):
    """
    Softmax along one axis, stabilized by subtracting the axis maximum.

    Parameters
    ----------
    axis : int, optional
        Axis normalized over. Defaults to 1, the class axis of a batch.

    Notes
    -----
    With ``y = softmax(x)`` the gradient is
    ``y * gy - y * sum(y * gy, axis, keepdims=True)``.
    """

    def __init__(self, axis: int = 1) -> None:
        self.axis = int(axis)

    @property
    def name(self) -> str:
        return "Softmax"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        x = xs[0].data
        x_max = x.max_with_axis(self.axis, keepdims=True).broadcast_to(x.shape)
        e = x.sub(x_max).exp()
        total = e.sum([self.axis], keepdims=True).broadcast_to(x.shape)
        return [Variable(e.div(total))]

    def backward(self, xs, ys, gys):
        check_variable_count(ys, 1, self.name)
        check_variable_count(gys, 1, self.name)
        y = ys[0]
        gx = mul(y, gys[0])
        sum_gx = broadcast_to(sum(gx, [self.axis], keepdims=True), y.shape)
        return [sub(gx, mul(y, sum_gx))]


def sigmoid(x: Variable) -> Variable:
    return Function(Sigmoid()).forward([x])[0]


def relu(x: Variable) -> Variable:
    return Function(ReLU()).forward([x])[0]


def softmax(x: Variable, axis: int = 1) -> Variable:
    """
    Softmax of `x` along `axis` (the class axis of a batch by default).
    """
    return Function(Softmax(axis)).forward([x])[0]
