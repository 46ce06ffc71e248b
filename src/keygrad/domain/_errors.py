"""
Exception taxonomy for keygrad.

This module defines every error raised by the graph engine and its numeric
data layer. The errors fall into four families:

- **Arity errors** (`ArityError`): an operator received the wrong number of
  inputs, outputs or gradients.
- **Type errors** (`DataTypeError`): a kernel was applied to an unsupported
  element kind, or to two operands of different kinds.
- **Graph-invariant errors** (`GraphError`): backward was requested on a node
  that has no creator, a Function was asked for its inputs before forward, or
  a gradient the scheduler needs is missing.
- **Data errors** (`DataError`): shape, dimension and index violations raised
  by the array layer.

Every class derives from `KeyGradError` and from the closest builtin
exception type, so callers can catch either the library-wide base or the
conventional builtin (`ValueError`, `TypeError`, ...).

Messages are formatted to locate the offending call without a debugger: they
carry the operator name, expected/actual counts, the element kinds involved,
or the variable name.
"""

from typing import Any, Optional, Sequence


class KeyGradError(Exception):
    """
    Base class of every error raised by keygrad.
    """


# ---------------------------------------------------------------------------
# Arity
# ---------------------------------------------------------------------------
class ArityError(KeyGradError, ValueError):
    """
    Raised when an operator is invoked with the wrong number of variables.
    """


class InvalidVariableCountError(ArityError):
    """
    Raised when an exact number of variables was required.

    Attributes
    ----------
    expected : int
        Required number of variables.
    actual : int
        Number of variables received.
    op : Optional[str]
        Name of the operator that performed the check, if known.
    """

    def __init__(self, expected: int, actual: int, op: Optional[str] = None) -> None:
        """
        Initialize the InvalidVariableCountError.

        Parameters
        ----------
        expected : int
            Required number of variables.
        actual : int
            Number of variables received.
        op : Optional[str], optional
            Operator name used as a message prefix.
        """
        msg = f"InvalidVariableCount: expected {expected}, actual {actual}"
        if op:
            msg = f"{op}: {msg}"
        super().__init__(msg)
        self.expected = expected
        self.actual = actual
        self.op = op


class OutOfRangeVariableCountError(ArityError):
    """
    Raised when the number of variables falls outside ``[low, high)``.
    """

    def __init__(
        self, actual: int, low: int, high: int, op: Optional[str] = None
    ) -> None:
        msg = f"OutOfRangeVariableCount: actual {actual}, expected {low} <= n < {high}"
        if op:
            msg = f"{op}: {msg}"
        super().__init__(msg)
        self.actual = actual
        self.low = low
        self.high = high
        self.op = op


# ---------------------------------------------------------------------------
# Element kinds
# ---------------------------------------------------------------------------
class DataTypeError(KeyGradError, TypeError):
    """
    Raised when element kinds are unsupported or incompatible.
    """


class NotImplementedTypeError(DataTypeError):
    """
    Raised when a kernel has no implementation for the given kind(s).

    Attributes
    ----------
    op : str
        Kernel or operator name (e.g. ``"exp"``).
    data_type : str
        Offending kind, or ``"left, right"`` for binary kernels.
    """

    def __init__(self, op: str, data_type: Any) -> None:
        super().__init__(f"NotImplementedType: {op} is not implemented for {data_type}")
        self.op = op
        self.data_type = str(data_type)


class NotCollectTypeError(DataTypeError):
    """
    Raised when a typed accessor is used on data of another kind.
    """

    def __init__(self, data_type: Any, expected: Any) -> None:
        super().__init__(
            f"NotCollectType: {data_type} is not collect type. Expected: {expected}"
        )
        self.data_type = str(data_type)
        self.expected = str(expected)


# ---------------------------------------------------------------------------
# Graph invariants
# ---------------------------------------------------------------------------
class GraphError(KeyGradError, RuntimeError):
    """
    Raised when a computational-graph invariant does not hold.
    """


class NoCreatorError(GraphError):
    """
    Raised when a variable without a creator is asked to backpropagate.

    This is the expected outcome for values computed while no-grad was active:
    they are detached leaves and cannot be differentiated through.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"NoCreator: variable {name!r} has no creator")
        self.name = name


class NoGradientError(GraphError):
    """
    Raised when a gradient is required but none is stored on the variable.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"NoGradient: variable {name!r} has no gradient")
        self.name = name


class NoInputVariableError(GraphError):
    """
    Raised when a Function has no recorded inputs (never ran forward, or ran
    it while graph recording was disabled).
    """

    def __init__(self, function_name: str) -> None:
        super().__init__(f"NoInputVariable: function {function_name!r} has no inputs")
        self.function_name = function_name


class NoOutputVariableError(GraphError):
    """
    Raised when a Function's outputs were never recorded or have been reclaimed.
    """

    def __init__(self, function_name: str) -> None:
        super().__init__(
            f"NoOutputVariable: function {function_name!r} has no live outputs"
        )
        self.function_name = function_name


# ---------------------------------------------------------------------------
# Array layer
# ---------------------------------------------------------------------------
class DataError(KeyGradError):
    """
    Base class for shape, dimension and index violations in the array layer.
    """


class DataShapeError(DataError, ValueError):
    """
    Raised when a shape is incompatible with the requested operation.
    """

    def __init__(self, shape: Sequence[int], expected: Sequence[int]) -> None:
        super().__init__(
            f"ShapeError: shape: {tuple(shape)}, expected: {tuple(expected)}"
        )
        self.shape = tuple(shape)
        self.expected = tuple(expected)


class DataDimensionError(DataError, ValueError):
    """
    Raised when the number of dimensions is not what the operation requires.
    """

    def __init__(self, ndim: int, expected: Any) -> None:
        super().__init__(f"DimensionError: dimension: {ndim}, expected: {expected}")
        self.ndim = ndim
        self.expected = expected


class DataIndexError(DataError, IndexError):
    """
    Raised when an index lies outside the indexed axis.
    """

    def __init__(self, shape: Sequence[int], index: Any) -> None:
        super().__init__(f"IndexError: shape: {tuple(shape)}, index: {index}")
        self.shape = tuple(shape)
        self.index = index


class InvalidArgumentError(DataError, ValueError):
    """
    Raised for malformed arguments (empty index lists, bad axes, ...).
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"InvalidArgumentError: {message}")
