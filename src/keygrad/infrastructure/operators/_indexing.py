"""
Differentiable indexing along leading axes.

`GetItem` gathers with one of three index forms and `GetItemGrad` is its
gradient: a scatter-add of the upstream gradient into zeros of the input
shape. Each is the other's backward, so indexing is differentiable to any
order.
"""

from typing import Any, Sequence, Union

import numpy as np

from ...domain._operator import Operator
from .._function import Function
from .._variable import Variable
from ..data import VariableData
from ._validation import check_variable_count

ONE_INDEX = "one_index"
ONE_INDEXES = "one_indexes"
INDEXES = "indexes"


class _IndexPattern:
    """
    One of the three supported index forms, normalized to plain ints.
    """

    def __init__(self, kind: str, value: Any) -> None:
        self.kind = kind
        self.value = value

    def gather(self, data: VariableData) -> VariableData:
        if self.kind == ONE_INDEX:
            return data.slice_with_one_index(self.value)
        if self.kind == ONE_INDEXES:
            return data.slice_with_one_indexes(self.value)
        return data.slice_with_indexes(self.value)

    def scatter_add(self, base: VariableData, rhs: VariableData) -> VariableData:
        if self.kind == ONE_INDEX:
            return base.add_at_one_index(rhs, self.value)
        if self.kind == ONE_INDEXES:
            return base.add_at_one_indexes(rhs, self.value)
        return base.add_at_with_indexes(rhs, self.value)

    def __repr__(self) -> str:
        return f"{self.kind}={self.value!r}"


def _index_list(value: Any) -> list[int]:
    if isinstance(value, Variable):
        value = value.data
    if isinstance(value, VariableData):
        return value.to_index_list()
    return [int(i) for i in np.asarray(value).reshape(-1)]


class GetItem(Operator):
    def __init__(self, pattern: _IndexPattern) -> None:
        self.pattern = pattern

    @property
    def name(self) -> str:
        return "GetItem"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        return [Variable(self.pattern.gather(xs[0].data))]

    def backward(self, xs, ys, gys):
        check_variable_count(xs, 1, self.name)
        check_variable_count(gys, 1, self.name)
        f = Function(GetItemGrad(self.pattern, xs[0].shape))
        return f.forward([gys[0]])


class GetItemGrad(Operator):
    """
    Scatter-add of a gathered gradient back into the gathered-from shape.
    """

    def __init__(self, pattern: _IndexPattern, in_shape: Sequence[int]) -> None:
        self.pattern = pattern
        self.in_shape = tuple(in_shape)

    @property
    def name(self) -> str:
        return "GetItemGrad"

    def forward(self, xs):
        check_variable_count(xs, 1, self.name)
        gy = xs[0].data
        base = VariableData.zeros(self.in_shape, gy.data_type)
        return [Variable(self.pattern.scatter_add(base, gy))]

    def backward(self, xs, ys, gys):
        check_variable_count(gys, 1, self.name)
        return [Function(GetItem(self.pattern)).forward([gys[0]])[0]]


def get_item_with_one_index(x: Variable, index: int) -> Variable:
    """
    ``x[index]`` along the first axis.
    """
    pattern = _IndexPattern(ONE_INDEX, int(index))
    return Function(GetItem(pattern)).forward([x])[0]


def get_item_with_one_indexes(x: Variable, indexes: Any) -> Variable:
    """
    ``x[[i0, i1, ...]]`` along the first axis.
    """
    pattern = _IndexPattern(ONE_INDEXES, _index_list(indexes))
    return Function(GetItem(pattern)).forward([x])[0]


def get_item_with_indexes(x: Variable, indexes: Sequence[Any]) -> Variable:
    """
    Paired indexing ``x[[i0, ...], [j0, ...], ...]`` over the leading axes.
    """
    pattern = _IndexPattern(INDEXES, [_index_list(idx) for idx in indexes])
    return Function(GetItem(pattern)).forward([x])[0]


def _is_int(key: Any) -> bool:
    return isinstance(key, (int, np.integer)) and not isinstance(key, (bool, np.bool_))


def get_item(x: Variable, key: Union[int, Sequence[Any]]) -> Variable:
    """
    Dispatch a Python-style index key to the matching gather.

    - ``int``                        -> `get_item_with_one_index`
    - list / 1-D array / index data  -> `get_item_with_one_indexes`
    - tuple of ints                  -> successive single-index gathers
    - tuple of index lists           -> `get_item_with_indexes`

    Raises
    ------
    TypeError
        For any other key type (slices, ``None``, ``Ellipsis``, mixed tuples).
    """
    if _is_int(key):
        return get_item_with_one_index(x, key)
    if isinstance(key, tuple):
        if key and all(_is_int(k) for k in key):
            y = x
            for k in key:
                y = get_item_with_one_index(y, k)
            return y
        if key and all(
            isinstance(k, (list, np.ndarray, VariableData, Variable)) for k in key
        ):
            return get_item_with_indexes(x, list(key))
        raise TypeError(f"unsupported index key: {key!r}")
    if isinstance(key, (list, np.ndarray, VariableData, Variable)):
        return get_item_with_one_indexes(x, key)
    raise TypeError(f"unsupported index key: {key!r}")
