"""
Shape mixin defining the public VariableData shape-manipulation API.

Shape kernels are registered for every kind, including ``bool``, since they
only move elements around.
"""

from typing import Optional, Sequence
from abc import ABC


class DataMixinShape(ABC):
    """
    Abstract mixin defining reshape, transpose and broadcast.
    """

    def reshape(self, shape: Sequence[int]) -> "DataMixinShape":
        """
        Return the same elements with a new shape.

        Raises
        ------
        DataShapeError
            If the number of elements differs.
        """

    def transpose(self, axes: Optional[Sequence[int]] = None) -> "DataMixinShape":
        """
        Permute axes.

        Parameters
        ----------
        axes : Optional[Sequence[int]], optional
            Permutation of ``range(ndim)``. If None, all axes are reversed.

        Raises
        ------
        InvalidArgumentError
            If `axes` is not a permutation of the axes.
        """

    def broadcast_to(self, shape: Sequence[int]) -> "DataMixinShape":
        """
        Materialize a broadcast to `shape` under NumPy broadcasting rules.

        Raises
        ------
        DataShapeError
            If the shapes are incompatible.
        """
