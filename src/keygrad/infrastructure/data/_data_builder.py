"""
Variable-data control-path manager for kind-specific dispatch.

This module defines the shared control-path manager used to register and
resolve kind-specific implementations of `VariableData` methods.

The manager specializes the generic `create_path_builder` utility with the
state attribute name ``"data_type"``. As a result, method dispatch is
performed on the runtime value of ``self.data_type``, and a call on a kind
without a registered implementation raises `NotImplementedTypeError`.

Typical usage
-------------
Kernels register themselves for the kinds they support:

    @data_control_path_manager(Mixin, Mixin.exp, FLOATS)
    def exp(self): ...

    @data_control_path_manager(Mixin, Mixin.add, NUMERIC)
    def add(self, other): ...

Binary kernels call `check_same_data_type` first, so operands of different
kinds fail explicitly instead of being promoted.
"""

from typing import Any, Callable, Hashable, Iterable, Type, Union

from ...domain._errors import NotImplementedTypeError
from ...domain.utils._control_path import create_path_builder

_data_path_builder = create_path_builder("data_type")


def _not_implemented_type(op: str, data_type: Any) -> Exception:
    """
    Build the error raised when no kernel is registered for `data_type`.
    """
    return NotImplementedTypeError(op, data_type)


def data_control_path_manager(
    cls: Type,
    method: Callable,
    data_types: Union[Hashable, Iterable[Hashable]],
) -> Callable[[Callable], Callable]:
    """
    Register a kernel for one or more element kinds.

    Parameters
    ----------
    cls : Type
        Mixin declaring the public method.
    method : Callable
        The public method being implemented.
    data_types : DataType or iterable of DataType
        Kinds served by the decorated kernel.

    Returns
    -------
    Callable[[Callable], Callable]
        Registration decorator.
    """
    return _data_path_builder(cls, method, data_types, _not_implemented_type)


def check_same_data_type(op: str, lhs: Any, rhs: Any) -> None:
    """
    Validate that both operands of a binary kernel share one element kind.

    Parameters
    ----------
    op : str
        Kernel name used in the error message.
    lhs, rhs : VariableData
        Operands.

    Raises
    ------
    NotImplementedTypeError
        If `rhs` is not variable data, or if the kinds differ.
    """
    rhs_type = getattr(rhs, "data_type", None)
    if rhs_type is None:
        raise NotImplementedTypeError(op, f"{lhs.data_type}, {type(rhs).__name__}")
    if lhs.data_type != rhs_type:
        raise NotImplementedTypeError(op, f"{lhs.data_type}, {rhs_type}")
