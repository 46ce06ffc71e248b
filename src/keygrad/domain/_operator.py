"""
Differentiable operator interface definitions.

This module defines the abstract base class for primitive operations used by
the automatic differentiation engine. Concrete subclasses implement a forward
computation over input variables and the matching backward computation that
maps output gradients onto input gradients.

An `Operator` is the *behavior* of a graph node. The graph node itself (the
`Function`) wraps one operator instance together with the variables captured
when it executed, so the same operator class can appear many times in one
graph without sharing state between invocations.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from ._variable import IVariable


class Operator(ABC):
    """
    Abstract base class for differentiable operations.

    Subclasses must implement `forward`, `backward` and `name`. Any
    per-invocation parameters (target shapes, axes, indices, constants) are
    stored on the operator instance at construction time.

    Notes
    -----
    - `forward` works on values only; it must not wire graph edges. Graph
      bookkeeping is the responsibility of the wrapping `Function`.
    - `backward` must be expressed with the functional operator API rather
      than raw array kernels so that, when graph recording is enabled during
      backpropagation, the produced gradients are differentiable themselves.
    """

    @abstractmethod
    def forward(self, xs: Sequence[IVariable]) -> list[IVariable]:
        """
        Perform the forward computation.

        Parameters
        ----------
        xs : Sequence[Variable]
            Input variables, in the order the operator expects them.

        Returns
        -------
        list[Variable]
            Freshly created output variables.
        """
        ...

    @abstractmethod
    def backward(
        self,
        xs: Sequence[IVariable],
        ys: Sequence[IVariable],
        gys: Sequence[IVariable],
    ) -> list[IVariable]:
        """
        Compute gradients with respect to the inputs.

        Parameters
        ----------
        xs : Sequence[Variable]
            Inputs captured when the forward pass executed.
        ys : Sequence[Variable]
            Outputs produced by the forward pass.
        gys : Sequence[Variable]
            Gradients of the loss with respect to each output.

        Returns
        -------
        list[Variable]
            Exactly one gradient per input, in input order.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Display name used in diagnostics and graph exports.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
