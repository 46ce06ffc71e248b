"""
Reduction mixin defining the public VariableData reduction API.

This module declares :class:`DataMixinReduction`, which specifies the
interface and semantics of the reductions the graph engine relies on. In
particular `sum_to` is the exact dual of `broadcast_to`: any gradient that
flows through a broadcast is reduced back to the source shape with it.
"""

from typing import Optional, Sequence
from abc import ABC


class DataMixinReduction(ABC):
    """
    Abstract mixin defining reductions.

    Notes
    -----
    - Methods defined here are pure interface declarations; kernels are
      registered per element kind elsewhere.
    - The shape contracts documented here are relied upon by operator
      backward formulas and must be respected by every kernel.
    """

    def sum(
        self, axis: Optional[Sequence[int]] = None, keepdims: bool = False
    ) -> "DataMixinReduction":
        """
        Sum elements over the given axes.

        Parameters
        ----------
        axis : Optional[Sequence[int]], optional
            Axes to reduce. An int is accepted as a single axis. If None,
            every axis is reduced.
        keepdims : bool, optional
            If True, reduced axes are kept with size 1. Defaults to False.

        Returns
        -------
        DataMixinReduction
            The reduced data, of the same kind.

        Raises
        ------
        InvalidArgumentError
            If an axis is out of bounds.
        """

    def sum_to(self, shape: Sequence[int]) -> "DataMixinReduction":
        """
        Sum-reduce to `shape` (the inverse of `broadcast_to`).

        Leading extra axes are summed away, and every axis where `shape` has
        size 1 while the source does not is summed with ``keepdims``.

        Raises
        ------
        DataShapeError
            If `shape` could not have been broadcast to the source shape.
        """

    def max_with_axis(self, axis: int, keepdims: bool = False) -> "DataMixinReduction":
        """
        Maximum along one axis.
        """

    def argmax_with_axis(
        self, axis: int, keepdims: bool = False
    ) -> "DataMixinReduction":
        """
        Index of the maximum along one axis, as ``usize`` data.
        """

    def log_sum_exp(self, axis: int) -> "DataMixinReduction":
        """
        Numerically stable ``log(sum(exp(x), axis))`` broadcast back to the
        input shape.
        """
