"""
Arithmetic operators with broadcasting-aware gradients.

Binary operators broadcast both operands to a common shape in the forward
pass. Their backward reduces each gradient back to the operand's own shape
with `sum_to`, the dual of the broadcast.

Each operator is a `Operator` subclass plus a functional wrapper that builds
the `Function` node, runs forward and returns the single output.
"""

from typing import Sequence

import numpy as np

from ...domain._errors import DataShapeError
from ...domain._operator import Operator
from .._function import Function
from .._variable import Variable
from ._shape import sum_to
from ._validation import check_variable_count


def _broadcast_operands(a, b):
    """
    Broadcast two data values to their common shape.

    Raises
    ------
    DataShapeError
        If the shapes are not broadcast-compatible.
    """
    if a.shape == b.shape:
        return a, b
    try:
        shape = np.broadcast_shapes(a.shape, b.shape)
    except ValueError as e:
        raise DataShapeError(b.shape, a.shape) from e
    if a.shape != shape:
        a = a.broadcast_to(shape)
    if b.shape != shape:
        b = b.broadcast_to(shape)
    return a, b


def _reduce_grad(gx: Variable, x: Variable) -> Variable:
    if gx.shape != x.shape:
        return sum_to(gx, x.shape)
    return gx


class _BinaryOperator(Operator):
    """
    Shared arity checks for two-input, one-output operators.
    """

    def _operands(self, xs: Sequence[Variable]):
        check_variable_count(xs, 2, self.name)
        return _broadcast_operands(xs[0].data, xs[1].data)

    def _check_backward(self, xs, gys) -> None:
        check_variable_count(xs, 2, self.name)
        check_variable_count(gys, 1, self.name)


class Add(_BinaryOperator):
    """
    Elementwise ``x0 + x1`` with broadcasting.

    Notes
    -----
    Both gradients are the upstream gradient, reduced with `sum_to` to each
    operand's own shape when it was broadcast.
    """

    @property
    def name(self) -> str:
        return "Add"

    def forward(self, xs):
        """
        Raises
        ------
        InvalidVariableCountError
            If not exactly two inputs are given.
        DataShapeError
            If the operand shapes are not broadcast-compatible.
        NotImplementedTypeError
            If the operand kinds differ.
        """
        a, b = self._operands(xs)
        return [Variable(a.add(b))]

    def backward(self, xs, ys, gys):
        self._check_backward(xs, gys)
        gy = gys[0]
        return [_reduce_grad(gy, xs[0]), _reduce_grad(gy, xs[1])]


class Sub(_BinaryOperator):
    """
    Elementwise ``x0 - x1`` with broadcasting.

    Notes
    -----
    Gradients are ``gy`` and ``-gy``, each reduced to its operand's shape.
    """

    @property
    def name(self) -> str:
        return "Sub"

    def forward(self, xs):
        a, b = self._operands(xs)
        return [Variable(a.sub(b))]

    def backward(self, xs, ys, gys):
        self._check_backward(xs, gys)
        gy = gys[0]
        return [_reduce_grad(gy, xs[0]), _reduce_grad(neg(gy), xs[1])]


class Mul(_BinaryOperator):
    """
    Elementwise ``x0 * x1`` with broadcasting.

    Notes
    -----
    Gradients are ``gy * x1`` and ``gy * x0``, each reduced to its
    operand's shape.
    """

    @property
    def name(self) -> str:
        return "Mul"

    def forward(self, xs):
        a, b = self._operands(xs)
        return [Variable(a.mul(b))]

    def backward(self, xs, ys, gys):
        self._check_backward(xs, gys)
        x0, x1 = xs
        gy = gys[0]
        return [_reduce_grad(mul(gy, x1), x0), _reduce_grad(mul(gy, x0), x1)]


class Div(_BinaryOperator):
    """
    Elementwise division.

    Integer kinds truncate toward zero; division by an integer zero raises
    ``ZeroDivisionError``.

    Notes
    -----
    Gradients are ``gy / x1`` and ``-gy * x0 / x1 ** 2``, each reduced to its
    operand's shape.
    """

    @property
    def name(self) -> str:
        return "Div"

    def forward(self, xs):
        a, b = self._operands(xs)
        return [Variable(a.div(b))]

    def backward(self, xs, ys, gys):
        self._check_backward(xs, gys)
        x0, x1 = xs
        gy = gys[0]
        gx0 = div(gy, x1)
        gx1 = mul(gy, div(neg(x0), square(x1)))
        return [_reduce_grad(gx0, x0), _reduce_grad(gx1, x1)]


class Neg(Operator):
    """
    Elementwise negation (signed kinds only); the gradient is ``-gy``.
    """

    @property
    def name(self) -> str:
        return "Neg"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        return [Variable(xs[0].data.neg())]

    def backward(self, xs, ys, gys):
        check_variable_count(gys, 1, self.name)
        return [neg(gys[0])]


class Pow(Operator):
    """
    ``x ** c`` for a constant scalar exponent `c`.

    Parameters
    ----------
    c : float
        Exponent. Integer kinds require a non-negative integral value.

    Notes
    -----
    The gradient is ``c * x ** (c - 1) * gy``, or zeros when ``c == 0``.
    """

    def __init__(self, c: float) -> None:
        self.c = c

    @property
    def name(self) -> str:
        return "Pow"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        return [Variable(xs[0].data.pow(self.c))]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)
        x = xs[0]
        if self.c == 0:
            return [Variable(gys[0].data.zeros_like())]
        c = Variable(x.data.full_like(self.c))
        return [mul(mul(c, pow(x, self.c - 1)), gys[0])]


class Square(Operator):
    """
    Elementwise ``x * x``; the gradient is ``2 * x * gy``.
    """

    @property
    def name(self) -> str:
        return "Square"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        return [Variable(xs[0].data.square())]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)
        x = xs[0]
        two = Variable(x.data.full_like(2))
        return [mul(mul(two, x), gys[0])]


def add(x0: Variable, x1: Variable) -> Variable:
    """
    Elementwise ``x0 + x1`` with broadcasting.
    """
    return Function(Add()).forward([x0, x1])[0]


def sub(x0: Variable, x1: Variable) -> Variable:
    return Function(Sub()).forward([x0, x1])[0]


def mul(x0: Variable, x1: Variable) -> Variable:
    return Function(Mul()).forward([x0, x1])[0]


def div(x0: Variable, x1: Variable) -> Variable:
    return Function(Div()).forward([x0, x1])[0]


def neg(x: Variable) -> Variable:
    return Function(Neg()).forward([x])[0]


def pow(x: Variable, c: float) -> Variable:
    """
    Elementwise ``x ** c`` for a constant exponent.
    """
    return Function(Pow(c)).forward([x])[0]


def square(x: Variable) -> Variable:
    return Function(Square()).forward([x])[0]
