"""
Concrete `VariableData` implementation (NumPy backend).

`VariableData` is the typed dense array held by every graph node. It wraps
exactly one NumPy ndarray together with the `DataType` describing its element
kind, and exposes the numeric kernels the operators are written against.

Design notes
------------
- Values are immutable from the engine's point of view. Every kernel returns a
  new `VariableData`; nothing mutates an operand in place.
- Kernels are registered per kind through the control-path manager (see the
  ``mixins`` subpackages). Calling a method on a kind that has no kernel raises
  `NotImplementedTypeError`; binary kernels also reject operands of different
  kinds. There is no implicit promotion.
- The mapping between `DataType` and NumPy dtypes lives here, next to the only
  code that touches NumPy arrays directly.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import numpy as np

from ...domain._errors import (
    InvalidArgumentError,
    NotCollectTypeError,
    NotImplementedTypeError,
)
from ...domain.types._data_type import DataType, FLOATS, INDEX
from ._shape_utils import normalize_shape
from .mixins.arithmetic import DataMixinArithmetic
from .mixins.comparison import DataMixinComparison
from .mixins.creation import DataMixinCreation
from .mixins.indexing import DataMixinIndexing
from .mixins.linalg import DataMixinLinalg
from .mixins.reduction import DataMixinReduction
from .mixins.shape import DataMixinShape
from .mixins.unary import DataMixinUnary

_NUMPY_DTYPES = {
    DataType.F32: np.dtype(np.float32),
    DataType.F64: np.dtype(np.float64),
    DataType.I32: np.dtype(np.int32),
    DataType.I64: np.dtype(np.int64),
    DataType.USIZE: np.dtype(np.uint64),
    DataType.BOOL: np.dtype(np.bool_),
}

_DATA_TYPES = {v: k for k, v in _NUMPY_DTYPES.items()}


def numpy_dtype(data_type: DataType) -> np.dtype:
    """
    Return the NumPy dtype backing `data_type`.
    """
    return _NUMPY_DTYPES[data_type]


def data_type_from_numpy(dtype: Any) -> DataType:
    """
    Map a NumPy dtype onto its `DataType`.

    Raises
    ------
    NotImplementedTypeError
        If the dtype is not one of the supported kinds (float16, complex,
        uint8, object, ...).
    """
    dt = np.dtype(dtype)
    try:
        return _DATA_TYPES[dt]
    except KeyError:
        raise NotImplementedTypeError("VariableData", dt) from None


def _infer_data_type(value: Any) -> DataType:
    # bool must be tested before int
    if isinstance(value, (bool, np.bool_)):
        return DataType.BOOL
    if isinstance(value, int):
        return DataType.I64
    if isinstance(value, float):
        return DataType.F64
    return data_type_from_numpy(np.asarray(value).dtype)


class VariableData(
    DataMixinArithmetic,
    DataMixinUnary,
    DataMixinReduction,
    DataMixinShape,
    DataMixinIndexing,
    DataMixinLinalg,
    DataMixinComparison,
    DataMixinCreation,
):
    """
    Typed dense array (NumPy CPU backend).

    Parameters
    ----------
    value : Any
        A Python scalar, nested sequence, NumPy array or another
        `VariableData`. Python scalars infer ``bool``, ``i64`` or ``f64``;
        arrays infer their kind from their dtype.
    data_type : Optional[DataType], optional
        Explicit kind. When given, the value is cast to it.

    Raises
    ------
    NotImplementedTypeError
        If the kind cannot be inferred from an unsupported dtype.
    """

    def __init__(self, value: Any, data_type: Optional[DataType] = None) -> None:
        if isinstance(value, VariableData):
            value = value._array
        if data_type is None:
            data_type = _infer_data_type(value)
        self._data_type = DataType(data_type)
        self._array = np.array(value, dtype=numpy_dtype(self._data_type))

    @classmethod
    def _from_array(cls, array: Any, data_type: DataType) -> "VariableData":
        """
        Wrap a kernel result, casting it to the dtype of `data_type`.

        No copy is made when the dtype already matches; results may share
        memory with an operand, which is safe since values are never mutated.
        """
        obj = cls.__new__(cls)
        obj._data_type = data_type
        obj._array = np.asarray(array, dtype=numpy_dtype(data_type))
        return obj

    # ---- constructors --------------------------------------------------

    @classmethod
    def zeros(cls, shape, data_type: DataType = DataType.F64) -> "VariableData":
        return cls._from_array(
            np.zeros(normalize_shape(shape), dtype=numpy_dtype(data_type)), data_type
        )

    @classmethod
    def ones(cls, shape, data_type: DataType = DataType.F64) -> "VariableData":
        return cls._from_array(
            np.ones(normalize_shape(shape), dtype=numpy_dtype(data_type)), data_type
        )

    @classmethod
    def full(
        cls, shape, value: Union[int, float, bool], data_type: DataType = DataType.F64
    ) -> "VariableData":
        return cls._from_array(
            np.full(normalize_shape(shape), value, dtype=numpy_dtype(data_type)),
            data_type,
        )

    @classmethod
    def eye(cls, n: int, data_type: DataType = DataType.F64) -> "VariableData":
        if int(n) < 0:
            raise InvalidArgumentError(f"eye size must be non-negative, got {n}")
        return cls._from_array(np.eye(int(n), dtype=numpy_dtype(data_type)), data_type)

    @classmethod
    def arange(cls, shape, data_type: DataType = DataType.F64) -> "VariableData":
        """
        Values ``0, 1, 2, ...`` in row-major order, laid out in `shape`.
        """
        target = normalize_shape(shape)
        n = int(np.prod(target, dtype=np.int64))
        return cls._from_array(
            np.arange(n, dtype=numpy_dtype(data_type)).reshape(target), data_type
        )

    @classmethod
    def random_normal(
        cls,
        shape,
        mean: float = 0.0,
        std: float = 1.0,
        data_type: DataType = DataType.F64,
        seed: Optional[int] = None,
    ) -> "VariableData":
        """
        Samples from ``N(mean, std**2)``.

        Parameters
        ----------
        shape : int or Sequence[int]
            Output shape.
        mean, std : float, optional
            Distribution parameters.
        data_type : DataType, optional
            Floating-point kind of the result. Defaults to ``f64``.
        seed : Optional[int], optional
            Seed for a dedicated generator, for reproducible draws.

        Raises
        ------
        NotImplementedTypeError
            If `data_type` is not a floating-point kind.
        """
        if data_type not in FLOATS:
            raise NotImplementedTypeError("random_normal", data_type)
        if std < 0:
            raise InvalidArgumentError(f"std must be non-negative, got {std}")
        rng = np.random.default_rng(seed)
        out = rng.normal(mean, std, size=normalize_shape(shape))
        return cls._from_array(out, data_type)

    # ---- info ----------------------------------------------------------

    @property
    def data_type(self) -> DataType:
        return self._data_type

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._array.shape)

    @property
    def ndim(self) -> int:
        return self._array.ndim

    @property
    def size(self) -> int:
        return int(self._array.size)

    def __len__(self) -> int:
        """
        Length of the first axis (0 for a 0-d value).
        """
        if self._array.ndim == 0:
            return 0
        return self._array.shape[0]

    def to_numpy(self) -> np.ndarray:
        """
        Return a copy of the underlying array.
        """
        return self._array.copy()

    def item(self) -> Union[int, float, bool]:
        """
        Return the single element as a Python scalar.

        Raises
        ------
        InvalidArgumentError
            If the value does not hold exactly one element.
        """
        if self._array.size != 1:
            raise InvalidArgumentError(
                f"item() requires exactly one element, got shape {self.shape}"
            )
        return self._array.item()

    # ---- typed accessors ----------------------------------------------

    def _collect(self, expected: DataType) -> np.ndarray:
        if self._data_type is not expected:
            raise NotCollectTypeError(self._data_type, expected)
        return self._array.copy()

    def to_f32_array(self) -> np.ndarray:
        return self._collect(DataType.F32)

    def to_f64_array(self) -> np.ndarray:
        return self._collect(DataType.F64)

    def to_i32_array(self) -> np.ndarray:
        return self._collect(DataType.I32)

    def to_i64_array(self) -> np.ndarray:
        return self._collect(DataType.I64)

    def to_usize_array(self) -> np.ndarray:
        return self._collect(DataType.USIZE)

    def to_bool_array(self) -> np.ndarray:
        return self._collect(DataType.BOOL)

    def to_index_list(self) -> list[int]:
        """
        Flatten an index-kind value (``usize``, ``i64``, ``i32``) to ints.

        Raises
        ------
        NotCollectTypeError
            If the kind is not an index kind.
        """
        if self._data_type not in INDEX:
            raise NotCollectTypeError(
                self._data_type, "|".join(sorted(str(t) for t in INDEX))
            )
        return [int(v) for v in self._array.reshape(-1)]

    # ---- comparison / display -----------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariableData):
            return NotImplemented
        return (
            self._data_type is other._data_type
            and self.shape == other.shape
            and bool(np.array_equal(self._array, other._array))
        )

    __hash__ = None

    def __repr__(self) -> str:
        body = np.array2string(self._array, separator=", ")
        return f"VariableData({body}, data_type={self._data_type})"
