"""Logical numeric kinds and the tag protocol used for factory dispatch."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable

import numpy as np

from ..errors import UnknownDataType


@runtime_checkable
class DataTypeTag(Protocol):
    """Anything carrying a dispatch code and a display name.

    Factories only read these two attributes, so tags produced by other layers
    can be passed without converting them to :class:`DataType` first.
    """

    @property
    def native_code(self) -> int: ...

    @property
    def name(self) -> str: ...


class DataType(Enum):
    """Supported primitive kinds with their stable tag codes."""

    INT8 = (1, np.int8)
    INT16 = (2, np.int16)
    INT32 = (3, np.int32)
    INT64 = (4, np.int64)
    FLOAT32 = (5, np.float32)
    FLOAT64 = (6, np.float64)

    def __init__(self, native_code: int, scalar_type: type[np.generic]) -> None:
        self.native_code = native_code
        self.numpy_dtype = np.dtype(scalar_type)

    @property
    def item_size(self) -> int:
        """Size of one element in bytes."""
        return self.numpy_dtype.itemsize

    @property
    def is_integer(self) -> bool:
        return self.numpy_dtype.kind == "i"

    @property
    def zero(self) -> int | float:
        return 0 if self.is_integer else 0.0

    @classmethod
    def of_code(cls, code: int) -> DataType:
        for member in cls:
            if member.native_code == code:
                return member
        raise UnknownDataType(f"code {code}")

    @classmethod
    def of_numpy(cls, dtype: Any) -> DataType:
        """Return the kind backed by ``dtype`` (anything ``np.dtype`` accepts).

        Byte order is ignored, so ``>i4`` resolves to INT32.
        """

        try:
            resolved = np.dtype(dtype)
        except TypeError as error:
            raise UnknownDataType(str(dtype)) from error
        native = resolved.newbyteorder("=")
        for member in cls:
            if member.numpy_dtype == native:
                return member
        raise UnknownDataType(resolved.name)

    @classmethod
    def of_name(cls, name: str) -> DataType:
        """Resolve a member name (``INT32``) or a numpy dtype name (``int32``)."""

        key = name.strip().upper()
        if key in cls.__members__:
            return cls.__members__[key]
        for member in cls:
            if member.numpy_dtype.name == name.strip().lower():
                return member
        raise UnknownDataType(name)

    def __repr__(self) -> str:
        return f"DataType.{self.name}"
