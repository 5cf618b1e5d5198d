"""Concrete buffer holders, one per supported primitive kind."""

from __future__ import annotations

import math
import operator
from typing import Any, ClassVar, Iterator

import numpy as np

from ..errors import IndexOutOfRange, TypeMismatch
from ..interfaces.data_type import DataType
from ..interfaces.memory_view import MemoryView

_HASH_MASK = 0xFFFFFFFF


class _NumpyMemoryView(MemoryView):
    """Shared storage and bookkeeping for the numpy-backed variants.

    Subclasses pin ``data_type`` and override the one reinterpret accessor
    matching it.
    """

    data_type: ClassVar[DataType]

    def __init__(self, data: np.ndarray) -> None:
        if not isinstance(data, np.ndarray) or data.dtype != self.data_type.numpy_dtype:
            raise TypeMismatch(data, self.data_type)
        if data.ndim != 1:
            raise ValueError(f"Expected a one-dimensional buffer, got shape {data.shape}")
        if not data.flags.c_contiguous:
            raise ValueError("Expected a contiguous buffer")
        if not data.flags.writeable:
            raise ValueError("Expected a writeable buffer")
        self._data = data
        self._size = data.shape[0]
        self._indices = range(self._size)
        self._last_index = self._size - 1

    @classmethod
    def check_element(cls, value: Any) -> Any:
        """Return ``value`` unchanged if it belongs to this kind.

        Raises:
            TypeMismatch: For numpy scalars of another dtype, bools, non-numeric
                values, floats given to integer kinds, and numbers outside the
                range of the kind. A finite number that would overflow to
                infinity counts as out of range.
        """

        kind = cls.data_type
        if isinstance(value, np.generic):
            if value.dtype != kind.numpy_dtype:
                raise TypeMismatch(value, kind)
            return value
        if isinstance(value, bool):
            raise TypeMismatch(value, kind)
        if kind.is_integer:
            if not isinstance(value, int):
                raise TypeMismatch(value, kind)
            bounds = np.iinfo(kind.numpy_dtype)
            if not bounds.min <= value <= bounds.max:
                raise TypeMismatch(value, kind)
            return value
        if not isinstance(value, (int, float)):
            raise TypeMismatch(value, kind)
        try:
            with np.errstate(over="raise"):
                converted = kind.numpy_dtype.type(value)
        except (OverflowError, FloatingPointError) as error:
            raise TypeMismatch(value, kind) from error
        if np.isinf(converted) and not math.isinf(value):
            raise TypeMismatch(value, kind)
        return value

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def size(self) -> int:
        return self._size

    @property
    def indices(self) -> range:
        return self._indices

    @property
    def last_index(self) -> int:
        return self._last_index

    def _checked_index(self, index: int) -> int:
        position = operator.index(index)
        if position < 0 or position >= self._size:
            raise IndexOutOfRange(position, self._size)
        return position

    def get(self, index: int) -> Any:
        return self._data[self._checked_index(index)]

    def set(self, index: int, value: Any) -> None:
        position = self._checked_index(index)
        self._data[position] = self.check_element(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def copy_of(self) -> MemoryView:
        return type(self)(self._data.copy())

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, MemoryView):
            return NotImplemented
        if type(self) is not type(other):
            return False
        if self._size != other.size:
            return False
        return bool(np.array_equal(self._data, other.data))

    def __hash__(self) -> int:
        result = 1
        for value in self._data.tolist():
            # NaN hashes by identity on current interpreters.
            element = 0 if value != value else hash(value)
            result = (31 * result + element) & _HASH_MASK
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"


class Int8MemoryView(_NumpyMemoryView):
    """View for ``int8`` buffers."""

    data_type = DataType.INT8

    def as_int8(self) -> np.ndarray:
        return self._data


class Int16MemoryView(_NumpyMemoryView):
    """View for ``int16`` buffers."""

    data_type = DataType.INT16

    def as_int16(self) -> np.ndarray:
        return self._data


class Int32MemoryView(_NumpyMemoryView):
    """View for ``int32`` buffers."""

    data_type = DataType.INT32

    def as_int32(self) -> np.ndarray:
        return self._data


class Int64MemoryView(_NumpyMemoryView):
    """View for ``int64`` buffers."""

    data_type = DataType.INT64

    def as_int64(self) -> np.ndarray:
        return self._data


class Float32MemoryView(_NumpyMemoryView):
    """View for ``float32`` buffers."""

    data_type = DataType.FLOAT32

    def as_float32(self) -> np.ndarray:
        return self._data


class Float64MemoryView(_NumpyMemoryView):
    """View for ``float64`` buffers."""

    data_type = DataType.FLOAT64

    def as_float64(self) -> np.ndarray:
        return self._data
