"""
Loss operators.

Both losses reduce to a 0-d value averaged over the first (batch) axis.
"""

from ...domain._operator import Operator
from .._function import Function
from .._variable import Variable
from ._activations import softmax
from ._arithmetic import mul, neg, sub
from ._shape import broadcast_to
from ._validation import check_dimensions, check_variable_count


class MeanSquaredError(Operator):
    """
    ``sum((x0 - x1) ** 2) / len(x0 - x1)``.
    """

    @property
    def name(self) -> str:
        return "MeanSquaredError"

    def forward(self, xs):
        check_variable_count(xs, 2, self.name)
        diff = xs[0].data.sub(xs[1].data)
        n = len(diff) or 1
        y = diff.square().sum().scalar_mul(1.0 / n)
        return [Variable(y)]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 2, self.name)
        check_variable_count(gys, 1, self.name)
        diff = sub(xs[0], xs[1])
        gy = broadcast_to(gys[0], diff.shape)
        n = len(diff) or 1
        c = Variable(diff.data.full_like(2.0 / n))
        gx0 = mul(mul(gy, diff), c)
        return [gx0, neg(gx0)]


class SoftmaxCrossEntropy(Operator):
    """
    Mean cross-entropy of ``softmax(x, axis=1)`` against integer labels.

    `x` holds ``(N, C)`` logits; `t` holds ``N`` class indices of an index
    kind. The labels are not differentiable: their gradient is zero.
    """

    @property
    def name(self) -> str:
        return "SoftmaxCrossEntropy"

    def forward(self, xs):
        check_variable_count(xs, 2, self.name)
        x = xs[0].data
        check_dimensions(x, 2)
        labels = xs[1].data.to_index_list()
        n = x.shape[0]
        log_z = x.log_sum_exp(1)
        log_p = x.sub(log_z).slice_with_indexes([list(range(n)), labels])
        y = log_p.sum().neg().scalar_mul(1.0 / n)
        return [Variable(y)]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 2, self.name)
        check_variable_count(gys, 1, self.name)
        x, t = xs
        n, class_num = x.shape
        gy = mul(gys[0], Variable(gys[0].data.full_like(1.0 / n)))
        y = softmax(x, 1)
        onehot = y.data.eye_like_type(class_num).slice_with_one_indexes(
            t.data.to_index_list()
        )
        diff = sub(y, Variable(onehot))
        gx = mul(diff, broadcast_to(gy, diff.shape))
        gt = Variable(t.data.zeros_like())
        return [gx, gt]


def mean_squared_error(x0: Variable, x1: Variable) -> Variable:
    return Function(MeanSquaredError()).forward([x0, x1])[0]


def softmax_cross_entropy(x: Variable, t: Variable) -> Variable:
    """
    Mean softmax cross-entropy of logits `x` against labels `t`.
    """
    return Function(SoftmaxCrossEntropy()).forward([x, t])[0]
