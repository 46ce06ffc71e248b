"""
Variable interface definitions.

This module defines the domain-level interface for graph variables using
structural typing. The interface captures the surface that operators,
schedulers and external consumers (layers, optimizers, visualizers) rely on,
without binding them to the concrete NumPy-backed implementation.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from .types._data_type import DataType


@runtime_checkable
class IVariable(Protocol):
    """
    Variable interface.

    An `IVariable` is an identity-bearing graph node holding a typed array
    value, an optional gradient (itself a variable, so gradients can be
    differentiated again) and an optional reference to the function that
    produced it.

    Notes
    -----
    - Identity, not value, defines equality: two variables holding the same
      numbers are still distinct graph nodes.
    - `generation` is 0 for leaves and ``creator.generation + 1`` otherwise.
    """

    # ---------------------------------------------------------------------
    # Value
    # ---------------------------------------------------------------------
    @property
    def data(self) -> Any:
        """
        Return the array value held by this variable.
        """
        ...

    def set_data(self, data: Any) -> None:
        """
        Replace the array value held by this variable.
        """
        ...

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the held value.
        """
        ...

    @property
    def data_type(self) -> DataType:
        """
        Return the element kind of the held value.
        """
        ...

    # ---------------------------------------------------------------------
    # Identity / diagnostics
    # ---------------------------------------------------------------------
    @property
    def id(self) -> int:
        """
        Return a stable integer identifying this node.
        """
        ...

    @property
    def name(self) -> str:
        """
        Return the diagnostic name of this variable.
        """
        ...

    @property
    def generation(self) -> int:
        """
        Return the topological depth of this variable.
        """
        ...

    @property
    def is_param(self) -> bool:
        """
        Return True if this variable is marked as a trainable parameter.
        """
        ...
    # ---------------------------------------------------------------------
    # Gradients
    # ---------------------------------------------------------------------
    @property
    def grad(self) -> Optional["IVariable"]:
        """
        Return the accumulated gradient, or None.
        """
        ...

    def clear_grad(self) -> None:
        """
        Remove the stored gradient.
        """
        ...

    def backward(self) -> None:
        """
        Backpropagate from this variable, discarding intermediate gradients.
        """
        ...

    def backward_retain_grad(self) -> None:
        """
        Backpropagate from this variable, keeping every intermediate gradient.
        """
        ...

    def backward_create_graph(self) -> None:
        """
        Backpropagate while recording the backward computation itself.
        """
        ...
