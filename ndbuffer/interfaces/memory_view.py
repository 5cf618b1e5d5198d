"""Capability contracts shared by every primitive buffer holder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator

import numpy as np

from ..errors import UnsupportedReinterpretation
from .data_type import DataType


class ImmutableMemoryView(ABC):
    """Read-only view over one primitive buffer.

    Indexing always refers to the flat buffer as it was allocated; shape-aware
    layers translate their own coordinates before calling :meth:`get`.
    """

    data_type: DataType

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """The backing primitive buffer."""

    @abstractmethod
    def get(self, index: int) -> Any:
        """Return the element at ``index``.

        Raises:
            IndexOutOfRange: If ``index`` is outside ``[0, size)``.
        """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements in index order."""

    @abstractmethod
    def copy_of(self) -> ImmutableMemoryView:
        """Return a new holder of the same kind backed by a copied buffer."""

    @abstractmethod
    def as_int8(self) -> np.ndarray: ...

    @abstractmethod
    def as_int16(self) -> np.ndarray: ...

    @abstractmethod
    def as_int32(self) -> np.ndarray: ...

    @abstractmethod
    def as_int64(self) -> np.ndarray: ...

    @abstractmethod
    def as_float32(self) -> np.ndarray: ...

    @abstractmethod
    def as_float64(self) -> np.ndarray: ...

    def __getitem__(self, index: int) -> Any:
        return self.get(index)


class MemoryView(ImmutableMemoryView):
    """Mutable view with cached length metadata.

    ``size``, ``indices`` and ``last_index`` are fixed when the holder is built
    and always agree with the length of :attr:`data`.
    """

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of elements in the buffer."""

    @property
    @abstractmethod
    def indices(self) -> range:
        """Valid indices, ``range(0, size)``."""

    @property
    @abstractmethod
    def last_index(self) -> int:
        """``size - 1``; ``-1`` for an empty buffer."""

    @abstractmethod
    def set(self, index: int, value: Any) -> None:
        """Replace the element at ``index`` with ``value``.

        Raises:
            IndexOutOfRange: If ``index`` is outside ``[0, size)``.
            TypeMismatch: If ``value`` does not belong to this holder's kind.
        """

    @abstractmethod
    def copy_of(self) -> MemoryView: ...

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __len__(self) -> int:
        return self.size

    def as_int8(self) -> np.ndarray:
        raise UnsupportedReinterpretation(DataType.INT8, self.data_type)

    def as_int16(self) -> np.ndarray:
        raise UnsupportedReinterpretation(DataType.INT16, self.data_type)

    def as_int32(self) -> np.ndarray:
        raise UnsupportedReinterpretation(DataType.INT32, self.data_type)

    def as_int64(self) -> np.ndarray:
        raise UnsupportedReinterpretation(DataType.INT64, self.data_type)

    def as_float32(self) -> np.ndarray:
        raise UnsupportedReinterpretation(DataType.FLOAT32, self.data_type)

    def as_float64(self) -> np.ndarray:
        raise UnsupportedReinterpretation(DataType.FLOAT64, self.data_type)
