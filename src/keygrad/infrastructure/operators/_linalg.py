"""
Matrix multiplication and the affine `linear` operator.

Both backward passes are two matmuls against transposed operands:
``gx = gy @ W.T`` and ``gW = x.T @ gy``.
"""

from typing import Optional

from ...domain._operator import Operator
from .._function import Function
from .._variable import Variable
from ._shape import _sum_to_grad, transpose
from ._validation import check_variable_count, check_variable_count_between


class MatMul(Operator):
    @property
    def name(self) -> str:
        return "MatMul"

    def forward(self, xs):
        check_variable_count(xs, 2, self.name)
        return [Variable(xs[0].data.matmul(xs[1].data))]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 2, self.name)
        check_variable_count(gys, 1, self.name)
        x, w = xs
        gy = gys[0]
        return [matmul(gy, transpose(w)), matmul(transpose(x), gy)]


class Linear(Operator):
    """
    ``x @ W (+ b)``; the bias is broadcast over the rows of the product.
    """

    @property
    def name(self) -> str:
        return "Linear"

    def forward(self, xs):
        n = check_variable_count_between(xs, 2, 4, self.name)
        y = xs[0].data.matmul(xs[1].data)
        if n == 3:
            b = xs[2].data
            y = y.add(b.broadcast_to(y.shape))
        return [Variable(y)]

    def backward(self, xs, ys, gys):
        n = check_variable_count_between(xs, 2, 4, self.name)
        check_variable_count(gys, 1, self.name)
        x, w = xs[0], xs[1]
        gy = gys[0]
        gx = matmul(gy, transpose(w))
        gw = matmul(transpose(x), gy)
        if n == 3:
            return [gx, gw, _sum_to_grad(gy, xs[2].shape)]
        return [gx, gw]


def matmul(x: Variable, w: Variable) -> Variable:
    """
    2-D matrix product ``x @ w``.
    """
    return Function(MatMul()).forward([x, w])[0]


def linear(x: Variable, w: Variable, b: Optional[Variable] = None) -> Variable:
    """
    Affine map ``x @ w + b`` (``b`` optional).
    """
    xs = [x, w] if b is None else [x, w, b]
    return Function(Linear()).forward(xs)[0]
