"""Error taxonomy shared by the buffer contracts, variants, and factories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .interfaces.data_type import DataType


class MemoryViewError(Exception):
    """Base class for every error raised by ndbuffer."""


class IndexOutOfRange(MemoryViewError, IndexError):
    """Raised when a positional read or write falls outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} out of bounds for size {size}")
        self.index = index
        self.size = size


class UnknownDataType(MemoryViewError, ValueError):
    """Raised when a data type tag does not name a supported primitive kind."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown datatype: {name}")
        self.name = name


class UnsupportedReinterpretation(MemoryViewError, TypeError):
    """Raised when the raw buffer of a kind other than the holder's is requested."""

    def __init__(self, requested: DataType, actual: DataType) -> None:
        super().__init__(
            f"Cannot reinterpret a {actual.name} buffer as {requested.name}"
        )
        self.requested = requested
        self.actual = actual


class TypeMismatch(MemoryViewError, TypeError):
    """Raised when a value or buffer does not match the holder's primitive kind."""

    def __init__(self, value: Any, expected: DataType) -> None:
        super().__init__(
            f"Expected a {expected.name} value, got {value!r} ({type(value).__name__})"
        )
        self.value = value
        self.expected = expected
