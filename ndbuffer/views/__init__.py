"""Concrete primitive buffer holders and the factories that build them."""

from .factory import allocate, from_sequence, view_type_for
from .primitive import (
    Float32MemoryView,
    Float64MemoryView,
    Int8MemoryView,
    Int16MemoryView,
    Int32MemoryView,
    Int64MemoryView,
)

__all__ = [
    "allocate",
    "from_sequence",
    "view_type_for",
    "Int8MemoryView",
    "Int16MemoryView",
    "Int32MemoryView",
    "Int64MemoryView",
    "Float32MemoryView",
    "Float64MemoryView",
]
