"""
NumPy kernels for gathers along leading axes and their scatter-add duals.

Index arguments are validated eagerly so that out-of-range access surfaces as
`DataIndexError` rather than a raw NumPy ``IndexError``, and so that a
scatter-add never silently wraps around.
"""

from typing import Sequence

import numpy as np

from ..._data_builder import data_control_path_manager, check_same_data_type
from .....domain._errors import (
    DataDimensionError,
    DataIndexError,
    DataShapeError,
    InvalidArgumentError,
)
from .....domain.types._data_type import ALL, NUMERIC
from ._base import DataMixinIndexing as DMI


def _as_index_list(indexes) -> list[int]:
    """
    Convert an index vector (sequence, ndarray or index-kind data) to ints.
    """
    if hasattr(indexes, "to_index_list"):
        return indexes.to_index_list()
    return [int(i) for i in np.asarray(indexes).reshape(-1)]


def _check_index(shape: tuple, axis: int, index: int) -> int:
    n = shape[axis]
    if index < -n or index >= n:
        raise DataIndexError(shape, index)
    return index + n if index < 0 else index


def _one_index(self, index: int) -> int:
    if self.ndim == 0:
        raise DataDimensionError(0, ">=1")
    return _check_index(self.shape, 0, int(index))


def _one_indexes(self, indexes) -> np.ndarray:
    if self.ndim == 0:
        raise DataDimensionError(0, ">=1")
    idx = _as_index_list(indexes)
    if not idx:
        raise InvalidArgumentError("index list must not be empty")
    return np.asarray(
        [_check_index(self.shape, 0, i) for i in idx], dtype=np.intp
    )


def _paired_indexes(self, indexes) -> tuple[np.ndarray, ...]:
    lists = [_as_index_list(idx) for idx in indexes]
    if not lists:
        raise InvalidArgumentError("at least one index list is required")
    if len(lists) > self.ndim:
        raise DataDimensionError(self.ndim, f">={len(lists)}")
    length = len(lists[0])
    if length == 0:
        raise InvalidArgumentError("index lists must not be empty")
    if any(len(lst) != length for lst in lists):
        raise InvalidArgumentError(
            f"index lists must share one length, got {[len(l) for l in lists]}"
        )
    return tuple(
        np.asarray([_check_index(self.shape, axis, i) for i in lst], dtype=np.intp)
        for axis, lst in enumerate(lists)
    )


def _scatter_add(self, rhs, key, op: str):
    check_same_data_type(op, self, rhs)
    out = self.to_numpy()
    expected = out[key].shape
    if rhs.shape != expected:
        raise DataShapeError(rhs.shape, expected)
    np.add.at(out, key, rhs._array)
    return type(self)._from_array(out, self.data_type)


@data_control_path_manager(DMI, DMI.slice_with_one_index, ALL)
def slice_with_one_index(self, index: int):
    i = _one_index(self, index)
    return type(self)._from_array(np.array(self._array[i]), self.data_type)


@data_control_path_manager(DMI, DMI.slice_with_one_indexes, ALL)
def slice_with_one_indexes(self, indexes: Sequence[int]):
    idx = _one_indexes(self, indexes)
    return type(self)._from_array(self._array[idx], self.data_type)


@data_control_path_manager(DMI, DMI.slice_with_indexes, ALL)
def slice_with_indexes(self, indexes: Sequence[Sequence[int]]):
    key = _paired_indexes(self, indexes)
    return type(self)._from_array(self._array[key], self.data_type)


@data_control_path_manager(DMI, DMI.add_at_one_index, NUMERIC)
def add_at_one_index(self, rhs, index: int):
    return _scatter_add(self, rhs, _one_index(self, index), "add_at_one_index")


@data_control_path_manager(DMI, DMI.add_at_one_indexes, NUMERIC)
def add_at_one_indexes(self, rhs, indexes: Sequence[int]):
    return _scatter_add(self, rhs, _one_indexes(self, indexes), "add_at_one_indexes")


@data_control_path_manager(DMI, DMI.add_at_with_indexes, NUMERIC)
def add_at_with_indexes(self, rhs, indexes: Sequence[Sequence[int]]):
    return _scatter_add(
        self, rhs, _paired_indexes(self, indexes), "add_at_with_indexes"
    )
