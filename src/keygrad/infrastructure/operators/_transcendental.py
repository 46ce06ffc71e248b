"""
Transcendental operators (floating-point kinds only).

Backward formulas reuse the forward output where it is cheaper:
``d exp(x) = exp(x)`` and ``d tanh(x) = 1 - tanh(x)**2``.
"""

from ...domain._operator import Operator
from .._function import Function
from .._variable import Variable
from ._arithmetic import div, mul, neg, square, sub
from ._validation import check_variable_count


class _UnaryOperator(Operator):
    def _input(self, xs):
        check_variable_count(xs, 1, self.name)
        return xs[0]

    def _check_backward(self, xs, gys) -> None:
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)


class Exp(_UnaryOperator):
    @property
    def name(self) -> str:
        return "Exp"

    def forward(self, xs):
        return [Variable(self._input(xs).data.exp())]

    def backward(self, xs, ys, gys):
        self._check_backward(xs, gys)
        return [mul(gys[0], ys[0])]


class Log(_UnaryOperator):
    @property
    def name(self) -> str:
        return "Log"

    def forward(self, xs):
        return [Variable(self._input(xs).data.log())]

    def backward(self, xs, ys, gys):
        self._check_backward(xs, gys)
        return [div(gys[0], xs[0])]


class Sin(_UnaryOperator):
    @property
    def name(self) -> str:
        return "Sin"

    def forward(self, xs):
        return [Variable(self._input(xs).data.sin())]

    def backward(self, xs, ys, gys):
        self._check_backward(xs, gys)
        return [mul(gys[0], cos(xs[0]))]


class Cos(_UnaryOperator):
    @property
    def name(self) -> str:
        return "Cos"

    def forward(self, xs):
        return [Variable(self._input(xs).data.cos())]

    def backward(self, xs, ys, gys):
        self._check_backward(xs, gys)
        return [mul(gys[0], neg(sin(xs[0])))]


class Tanh(_UnaryOperator):
    @property
    def name(self) -> str:
        return "Tanh"

    def forward(self, xs):
        return [Variable(self._input(xs).data.tanh())]

    def backward(self, xs, ys, gys):
        self._check_backward(xs, gys)
        y = ys[0]
        one = Variable(y.data.ones_like())
        return [mul(gys[0], sub(one, square(y)))]


def exp(x: Variable) -> Variable:
    return Function(Exp()).forward([x])[0]


def log(x: Variable) -> Variable:
    """
    Natural logarithm. Non-positive inputs emit a ``RuntimeWarning``.
    """
    return Function(Log()).forward([x])[0]


def sin(x: Variable) -> Variable:
    return Function(Sin()).forward([x])[0]


def cos(x: Variable) -> Variable:
    return Function(Cos()).forward([x])[0]


def tanh(x: Variable) -> Variable:
    return Function(Tanh()).forward([x])[0]
