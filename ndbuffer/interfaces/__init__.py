"""Shared interfaces for the buffer layer.

===================================================================================
OVERVIEW
===================================================================================
This package defines the contract between the buffer holders and the layers
built on top of them:
  - Abstract base classes for the read-only and mutable capability contracts
  - The DataType enumeration and the tag protocol used for dispatch
  - Dataclasses for configuration

===================================================================================
SUBMODULE STRUCTURE
===================================================================================

data_type.py:
    DataType - Enum of supported kinds (INT8 .. FLOAT64)
      - native_code: int (1..6), numpy_dtype, item_size, is_integer, zero
      - of_code(), of_numpy(), of_name() lookups
    DataTypeTag (Protocol) - native_code + name, all a factory reads

memory_view.py:
    ImmutableMemoryView - get, iteration, copy_of, as_<kind>() accessors
    MemoryView - adds set, size, indices, last_index; the as_<kind>()
      accessors fail by default with UnsupportedReinterpretation

config.py:
    BufferConfig - Immutable configuration dataclass loaded from config.yml

===================================================================================
"""

from .config import BufferConfig
from .data_type import DataType, DataTypeTag
from .memory_view import ImmutableMemoryView, MemoryView

__all__ = [
    "BufferConfig",
    "DataType",
    "DataTypeTag",
    "ImmutableMemoryView",
    "MemoryView",
]
