"""
Concrete `Variable` graph node.

A `Variable` holds a `VariableData` value, an optional gradient (itself a
`Variable`, so gradients can be differentiated again) and an optional strong
reference to the `Function` that produced it.

Design notes
------------
- Identity semantics: a Variable is a node, not a value. Equality and hashing
  are inherited from `object`, and `id` is a stable per-process integer.
- Python references are shared handles; mutating a Variable (``set_data``,
  ``set_grad``, ``set_name``) is visible through every reference to it.
- Operator overloads and convenience methods delegate to the functional API
  in `operators`. Those imports are deferred to call time because the
  operators themselves construct Variables.
- Python scalars and NumPy arrays mixed with a Variable are converted to the
  Variable's own kind; they are never promoted.
"""

from __future__ import annotations

import itertools
import numbers
from typing import TYPE_CHECKING, Any, Optional, Sequence

import numpy as np

from ..domain._errors import NoCreatorError, NoGradientError
from ..domain.types._data_type import DataType
from .data import VariableData
from ._backward import run_backward

if TYPE_CHECKING:
    from ._function import Function

_variable_ids = itertools.count()


class Variable:
    """
    Graph node wrapping a typed array value.

    Parameters
    ----------
    data : VariableData or array-like
        Value held by the node. Anything `VariableData` accepts (Python
        scalars, nested lists, NumPy arrays) is converted.
    name : str, optional
        Diagnostic name. Defaults to ``""``.

    Notes
    -----
    A Variable constructed directly is a leaf: no creator, no gradient and
    generation 0. Variables produced by an operator while recording is
    enabled get their creator set by the producing `Function`.
    """

    # NumPy must defer to the reflected operators below instead of
    # broadcasting over Variable objects.
    __array_ufunc__ = None

    def __init__(self, data: Any, name: str = "") -> None:
        if isinstance(data, Variable):
            raise TypeError("Variable data must be a value, not another Variable")
        if not isinstance(data, VariableData):
            data = VariableData(data)
        self._data = data
        self._grad: Optional[Variable] = None
        self._creator: Optional[Function] = None
        self._generation = 0
        self._name = str(name)
        self._id = next(_variable_ids)
        self._is_param = False

    # ---------------------------------------------------------------------
    # Value
    # ---------------------------------------------------------------------
    @property
    def data(self) -> VariableData:
        return self._data

    def set_data(self, data: Any) -> None:
        """
        Replace the held value.

        Graph edges are left untouched; callers replacing the value of a
        non-leaf are responsible for keeping gradients meaningful.
        """
        if not isinstance(data, VariableData):
            data = VariableData(data)
        self._data = data

    @property
    def shape(self) -> tuple[int, ...]:
        return self._data.shape

    @property
    def ndim(self) -> int:
        return self._data.ndim

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def data_type(self) -> DataType:
        return self._data.data_type

    def __len__(self) -> int:
        return len(self._data)

    # ---------------------------------------------------------------------
    # Identity / diagnostics
    # ---------------------------------------------------------------------
    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = str(name)

    @property
    def is_param(self) -> bool:
        """
        Whether this variable is a trainable parameter.

        The engine itself never reads the flag; it is kept for optimizers and
        other code that collects parameters from a graph.
        """
        return self._is_param

    @is_param.setter
    def is_param(self, value: bool) -> None:
        self._is_param = bool(value)

    @property
    def generation(self) -> int:
        return self._generation

    def __repr__(self) -> str:
        body = np.array2string(self._data._array, separator=", ")
        name = f", name={self._name!r}" if self._name else ""
        return f"Variable({body}, data_type={self.data_type}{name})"

    # ---------------------------------------------------------------------
    # Creator
    # ---------------------------------------------------------------------
    @property
    def creator(self) -> Optional[Function]:
        return self._creator

    def get_creator_result(self) -> Function:
        """
        Return the creator.

        Raises
        ------
        NoCreatorError
            If the variable is a leaf or was produced under no-grad.
        """
        if self._creator is None:
            raise NoCreatorError(self._name)
        return self._creator

    def _set_creator(self, function: Function) -> None:
        self._creator = function
        self._generation = function.generation + 1

    # ---------------------------------------------------------------------
    # Gradients
    # ---------------------------------------------------------------------
    @property
    def grad(self) -> Optional[Variable]:
        return self._grad

    def grad_result(self) -> Variable:
        """
        Return the accumulated gradient.

        Raises
        ------
        NoGradientError
            If no gradient is stored.
        """
        if self._grad is None:
            raise NoGradientError(self._name)
        return self._grad

    def set_grad(self, grad: Optional[Variable]) -> None:
        if grad is not None and not isinstance(grad, Variable):
            raise TypeError(
                f"gradient must be a Variable or None, got {type(grad).__name__}"
            )
        self._grad = grad

    def clear_grad(self) -> None:
        self._grad = None

    def _seed_grad(self) -> None:
        if self._grad is None:
            self._grad = Variable(self._data.ones_like())

    def backward(self) -> None:
        """
        Backpropagate from this variable.

        If no gradient is stored yet it is seeded with ones of this
        variable's shape. Intermediate gradients are discarded once consumed;
        leaves and this variable keep theirs.

        Raises
        ------
        NoCreatorError
            If this variable has no creator.
        """
        self.get_creator_result()
        self._seed_grad()
        run_backward(self, retain_grad=False, create_graph=False)

    def backward_retain_grad(self) -> None:
        """
        Backpropagate from this variable, keeping every intermediate gradient.
        """
        self.get_creator_result()
        self._seed_grad()
        run_backward(self, retain_grad=True, create_graph=False)

    def backward_create_graph(self) -> None:
        """
        Backpropagate while recording the backward computation.

        The resulting gradients have creators of their own, so calling
        ``backward`` on one of them yields a higher-order derivative.
        """
        self.get_creator_result()
        self._seed_grad()
        run_backward(self, retain_grad=False, create_graph=True)

    # ---------------------------------------------------------------------
    # Operand conversion
    # ---------------------------------------------------------------------
    def _operand(self, other: Any) -> Variable:
        if isinstance(other, Variable):
            return other
        if isinstance(other, VariableData):
            return Variable(other)
        if isinstance(other, numbers.Number):
            return Variable(self._data.full_like(other))
        if isinstance(other, (np.ndarray, list, tuple)):
            return Variable(VariableData(other, data_type=self.data_type))
        raise TypeError(
            f"unsupported operand type for Variable: {type(other).__name__}"
        )

    # ---------------------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------------------
    def __add__(self, other: Any) -> Variable:
        from .operators import add

        return add(self, self._operand(other))

    def __radd__(self, other: Any) -> Variable:
        from .operators import add

        return add(self._operand(other), self)

    def __sub__(self, other: Any) -> Variable:
        from .operators import sub

        return sub(self, self._operand(other))

    def __rsub__(self, other: Any) -> Variable:
        from .operators import sub

        return sub(self._operand(other), self)

    def __mul__(self, other: Any) -> Variable:
        from .operators import mul

        return mul(self, self._operand(other))

    def __rmul__(self, other: Any) -> Variable:
        from .operators import mul

        return mul(self._operand(other), self)

    def __truediv__(self, other: Any) -> Variable:
        from .operators import div

        return div(self, self._operand(other))

    def __rtruediv__(self, other: Any) -> Variable:
        from .operators import div

        return div(self._operand(other), self)

    def __neg__(self) -> Variable:
        from .operators import neg

        return neg(self)

    def __pow__(self, c: float) -> Variable:
        from .operators import pow

        return pow(self, c)

    def __matmul__(self, other: Any) -> Variable:
        from .operators import matmul

        return matmul(self, self._operand(other))

    def __rmatmul__(self, other: Any) -> Variable:
        from .operators import matmul

        return matmul(self._operand(other), self)

    # ---------------------------------------------------------------------
    # Shape / reduction / indexing
    # ---------------------------------------------------------------------
    def reshape(self, *shape: Any) -> Variable:
        """
        Reshape; accepts ``reshape(2, 3)`` or ``reshape((2, 3))``.
        """
        from .operators import reshape

        if len(shape) == 1 and isinstance(shape[0], (tuple, list)):
            shape = tuple(shape[0])
        return reshape(self, shape)

    def transpose(self, axes: Optional[Sequence[int]] = None) -> Variable:
        from .operators import transpose

        return transpose(self, axes)

    @property
    def T(self) -> Variable:
        return self.transpose()

    def sum(self, axis: Optional[Sequence[int]] = None, keepdims: bool = False) -> Variable:
        from .operators import sum

        return sum(self, axis, keepdims)

    def broadcast_to(self, shape: Sequence[int]) -> Variable:
        from .operators import broadcast_to

        return broadcast_to(self, shape)

    def sum_to(self, shape: Sequence[int]) -> Variable:
        from .operators import sum_to

        return sum_to(self, shape)

    def __getitem__(self, key: Any) -> Variable:
        """
        Differentiable indexing along the leading axes.

        Supported keys: an int, a list (or 1-D array) of ints, a tuple of ints
        (one index per axis) and a tuple of equal-length index lists (paired
        indexing).
        """
        from .operators import get_item

        return get_item(self, key)
