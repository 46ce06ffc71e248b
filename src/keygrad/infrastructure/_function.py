"""
Graph node wrapping one operator invocation.

A `Function` is created per operator call. It runs the operator's forward
pass and, when graph recording is enabled, wires itself into the graph:

- every output Variable gets this Function as its creator (strong edge),
- the inputs are kept alive by this Function (strong edge),
- the outputs are referenced weakly, so the Variable -> Function -> Variable
  chain never forms a reference cycle.

A Function therefore lives exactly as long as some Variable still names it as
creator. Once the last such Variable is released, CPython reclaims the
Function (and with it the references to its inputs) immediately.
"""

from __future__ import annotations

import itertools
import weakref
from typing import TYPE_CHECKING, Optional, Sequence

from ..domain._errors import (
    InvalidVariableCountError,
    NoInputVariableError,
    NoOutputVariableError,
)
from ..domain._operator import Operator
from ._config import config

if TYPE_CHECKING:
    from ._variable import Variable

_function_ids = itertools.count()


class Function:
    """
    One executed operator together with the variables it consumed and produced.

    Parameters
    ----------
    operator : Operator
        The operator whose forward/backward this node runs.

    Attributes
    ----------
    generation : int
        Maximum generation over the recorded inputs (0 until recorded).

    Notes
    -----
    Equality and hashing are by identity, which the backward scheduler relies
    on to detect revisits.
    """

    def __init__(self, operator: Operator) -> None:
        if not isinstance(operator, Operator):
            raise TypeError(
                f"Function expects an Operator, got {type(operator).__name__}"
            )
        self._operator = operator
        self._inputs: Optional[list[Variable]] = None
        self._outputs: Optional[list[weakref.ref]] = None
        self._id = next(_function_ids)
        self.generation = 0

    @property
    def operator(self) -> Operator:
        return self._operator

    @property
    def name(self) -> str:
        return self._operator.name

    @property
    def id(self) -> int:
        return self._id

    @property
    def inputs(self) -> list[Variable]:
        """
        Inputs captured by the recorded forward pass.

        Raises
        ------
        NoInputVariableError
            If forward never ran with graph recording enabled.
        """
        if self._inputs is None:
            raise NoInputVariableError(self.name)
        return list(self._inputs)

    @property
    def outputs(self) -> list[Variable]:
        """
        Outputs produced by the recorded forward pass.

        Raises
        ------
        NoOutputVariableError
            If forward never ran with graph recording enabled, or if any output
            has already been reclaimed.
        """
        if self._outputs is None:
            raise NoOutputVariableError(self.name)
        ys = [ref() for ref in self._outputs]
        if any(y is None for y in ys):
            raise NoOutputVariableError(self.name)
        return ys

    def forward(self, xs: Sequence[Variable]) -> list[Variable]:
        """
        Run the operator and, if recording is enabled, wire the graph edges.

        Parameters
        ----------
        xs : Sequence[Variable]
            Input variables.

        Returns
        -------
        list[Variable]
            Output variables. Under no-grad they are detached leaves.
        """
        xs = list(xs)
        ys = self._operator.forward(xs)
        if config.enable_backprop:
            self.generation = max((x.generation for x in xs), default=0)
            for y in ys:
                y._set_creator(self)
            self._inputs = xs
            self._outputs = [weakref.ref(y) for y in ys]
        return ys

    def backward(self, gys: Sequence[Variable]) -> list[Variable]:
        """
        Map output gradients onto one gradient per input.

        Raises
        ------
        NoInputVariableError
            If forward never ran with graph recording enabled.
        NoOutputVariableError
            If the outputs were never recorded or have been reclaimed.
        InvalidVariableCountError
            If the operator returns a gradient count different from the
            number of inputs.
        """
        xs = self.inputs
        ys = self.outputs
        gxs = self._operator.backward(xs, ys, list(gys))
        if len(gxs) != len(xs):
            raise InvalidVariableCountError(len(xs), len(gxs), self.name)
        return list(gxs)

    def __repr__(self) -> str:
        return f"Function(name={self.name!r}, id={self._id}, generation={self.generation})"
