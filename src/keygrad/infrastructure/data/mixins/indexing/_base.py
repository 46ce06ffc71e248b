"""
Indexing mixin defining the public VariableData gather / scatter-add API.

Three index forms are supported, all addressing the leading axes:

- one index           ``x[i]``
- one index list      ``x[[i0, i1, ...]]``
- paired index lists  ``x[[i0, ...], [j0, ...], ...]``

Every gather has a scatter-add dual (``add_at_*``) used by the gradient of
the gather. Repeated indices accumulate.
"""

from typing import Sequence
from abc import ABC


class DataMixinIndexing(ABC):
    """
    Abstract mixin defining gathers and their scatter-add duals.

    Notes
    -----
    Indices may be given as Python ints / lists of ints or as index-kind
    variable data (``usize``, ``i64``, ``i32``). Negative indices count from
    the end of the axis.
    """

    def slice_with_one_index(self, index: int) -> "DataMixinIndexing":
        """
        Select one entry along the first axis.

        Raises
        ------
        DataDimensionError
            If the data is 0-d.
        DataIndexError
            If `index` is out of range.
        """

    def slice_with_one_indexes(self, indexes: Sequence[int]) -> "DataMixinIndexing":
        """
        Select a list of entries along the first axis.

        Raises
        ------
        InvalidArgumentError
            If `indexes` is empty.
        DataIndexError
            If any index is out of range.
        """

    def slice_with_indexes(
        self, indexes: Sequence[Sequence[int]]
    ) -> "DataMixinIndexing":
        """
        Paired advanced indexing over the leading ``len(indexes)`` axes.

        Raises
        ------
        InvalidArgumentError
            If `indexes` is empty or the lists differ in length.
        DataDimensionError
            If more index lists than axes are given.
        DataIndexError
            If any index is out of range.
        """

    def add_at_one_index(self, rhs, index: int) -> "DataMixinIndexing":
        """
        Return a copy of self with `rhs` added at ``[index]``.
        """

    def add_at_one_indexes(self, rhs, indexes: Sequence[int]) -> "DataMixinIndexing":
        """
        Return a copy of self with `rhs` scatter-added at ``[indexes]``.
        """

    def add_at_with_indexes(
        self, rhs, indexes: Sequence[Sequence[int]]
    ) -> "DataMixinIndexing":
        """
        Return a copy of self with `rhs` scatter-added at the paired indexes.
        """
