"""Construction entry points that dispatch on a data type tag."""

from __future__ import annotations

from typing import Any, Callable, Iterable

import numpy as np

from ..errors import TypeMismatch, UnknownDataType
from ..interfaces.data_type import DataType, DataTypeTag
from ..interfaces.memory_view import MemoryView
from .primitive import (
    Float32MemoryView,
    Float64MemoryView,
    Int8MemoryView,
    Int16MemoryView,
    Int32MemoryView,
    Int64MemoryView,
    _NumpyMemoryView,
)

_VIEW_TYPES: dict[int, type[_NumpyMemoryView]] = {
    DataType.INT8.native_code: Int8MemoryView,
    DataType.INT16.native_code: Int16MemoryView,
    DataType.INT32.native_code: Int32MemoryView,
    DataType.INT64.native_code: Int64MemoryView,
    DataType.FLOAT32.native_code: Float32MemoryView,
    DataType.FLOAT64.native_code: Float64MemoryView,
}


def view_type_for(data_type: DataTypeTag) -> type[_NumpyMemoryView]:
    """Return the concrete holder class registered for ``data_type``.

    Raises:
        UnknownDataType: If the tag code is not one of the supported kinds.
    """

    view_type = _VIEW_TYPES.get(data_type.native_code)
    if view_type is None:
        raise UnknownDataType(data_type.name)
    return view_type


def allocate(
    size: int,
    data_type: DataTypeTag,
    init: Callable[[int], Any] | None = None,
) -> MemoryView:
    """Create a holder of ``size`` elements of the kind named by ``data_type``.

    Args:
        size: Number of elements.
        data_type: Tag selecting the primitive kind.
        init: Optional generator; element ``i`` becomes ``init(i)``. It is called
            once per index, in ascending order. Without it every element is zero.

    Returns:
        A new :class:`MemoryView` of the matching concrete kind.
    """

    view_type = view_type_for(data_type)
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    dtype = view_type.data_type.numpy_dtype
    if init is None:
        return view_type(np.zeros(size, dtype=dtype))
    buffer = np.empty(size, dtype=dtype)
    for index in range(size):
        buffer[index] = view_type.check_element(init(index))
    return view_type(buffer)


def from_sequence(sequence: Iterable[Any], data_type: DataTypeTag) -> MemoryView:
    """Copy ``sequence`` into a new holder of the kind named by ``data_type``.

    Elements must already belong to that kind; nothing is coerced. A numpy array
    source must be one-dimensional with exactly the matching dtype.
    """

    view_type = view_type_for(data_type)
    dtype = view_type.data_type.numpy_dtype
    if isinstance(sequence, np.ndarray):
        if sequence.dtype != dtype:
            raise TypeMismatch(sequence, view_type.data_type)
        if sequence.ndim != 1:
            raise ValueError(f"Expected a one-dimensional array, got shape {sequence.shape}")
        return view_type(sequence.copy())
    values = [view_type.check_element(value) for value in sequence]
    return view_type(np.array(values, dtype=dtype))
