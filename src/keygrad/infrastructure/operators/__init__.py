"""
Differentiable operators and their functional API.

Every operator is an `Operator` subclass paired with a functional wrapper
that creates the `Function` node, runs forward and returns the output
`Variable`. Backward formulas are written with the same functional API, so
the backward pass is itself recorded when ``backward_create_graph`` is used.
"""

from ._activations import ReLU, Sigmoid, Softmax, relu, sigmoid, softmax
from ._arithmetic import (
    Add,
    Div,
    Mul,
    Neg,
    Pow,
    Square,
    Sub,
    add,
    div,
    mul,
    neg,
    pow,
    square,
    sub,
)
from ._indexing import (
    GetItem,
    GetItemGrad,
    get_item,
    get_item_with_indexes,
    get_item_with_one_index,
    get_item_with_one_indexes,
)
from ._linalg import Linear, MatMul, linear, matmul
from ._losses import (
    MeanSquaredError,
    SoftmaxCrossEntropy,
    mean_squared_error,
    softmax_cross_entropy,
)
from ._reduction import Sum, mean, sum, sum_all, sum_axis, sum_keepdims
from ._shape import (
    BroadcastTo,
    Reshape,
    SumTo,
    Transpose,
    broadcast_to,
    reshape,
    sum_to,
    transpose,
)
from ._transcendental import Cos, Exp, Log, Sin, Tanh, cos, exp, log, sin, tanh
from ._validation import (
    check_dimensions,
    check_variable_count,
    check_variable_count_between,
)

__all__ = [
    # arithmetic
    "Add",
    "Sub",
    "Mul",
    "Div",
    "Neg",
    "Pow",
    "Square",
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "pow",
    "square",
    # transcendental
    "Exp",
    "Log",
    "Sin",
    "Cos",
    "Tanh",
    "exp",
    "log",
    "sin",
    "cos",
    "tanh",
    # shape
    "Reshape",
    "Transpose",
    "BroadcastTo",
    "SumTo",
    "reshape",
    "transpose",
    "broadcast_to",
    "sum_to",
    # reduction
    "Sum",
    "sum",
    "sum_all",
    "sum_axis",
    "sum_keepdims",
    "mean",
    # indexing
    "GetItem",
    "GetItemGrad",
    "get_item",
    "get_item_with_one_index",
    "get_item_with_one_indexes",
    "get_item_with_indexes",
    # linear algebra
    "MatMul",
    "Linear",
    "matmul",
    "linear",
    # activations
    "Sigmoid",
    "ReLU",
    "Softmax",
    "sigmoid",
    "relu",
    "softmax",
    # losses
    "MeanSquaredError",
    "SoftmaxCrossEntropy",
    "mean_squared_error",
    "softmax_cross_entropy",
    # validation
    "check_variable_count",
    "check_variable_count_between",
    "check_dimensions",
]
