"""ndbuffer: primitive buffer storage for N-dimensional numeric arrays.

===================================================================================
OVERVIEW
===================================================================================
ndbuffer owns, indexes, copies, and exposes flat primitive buffers for the array
layers built on top of it. Every buffer is a one-dimensional numpy array of one
of six kinds (int8, int16, int32, int64, float32, float64). Callers hold it
through a single abstract contract, MemoryView, so generic array code is written
once while each kind keeps an unboxed buffer.

===================================================================================
ARCHITECTURE
===================================================================================

    ndbuffer/
    ├── errors.py         Error taxonomy (IndexOutOfRange, UnknownDataType, ...)
    ├── interfaces/       DataType tags and the capability contracts
    ├── views/            One concrete holder per kind + dispatching factories
    ├── utils/            Paths, YAML config, .npy persistence
    └── cli/              Rich command line for creating and inspecting buffers

===================================================================================
SYSTEM FLOW
===================================================================================

    DataType tag (native_code 1..6)
            │
            ▼
    allocate(size, tag[, init]) / from_sequence(seq, tag)
            │   dispatch on native_code, UnknownDataType otherwise
            ▼
    Int8MemoryView ... Float64MemoryView   (typed as MemoryView)
            │
            ├─ get / set / iter / copy_of  (bounds + kind checks)
            └─ as_<kind>() → raw numpy buffer for kernels that know the kind

===================================================================================
USAGE EXAMPLE
===================================================================================

from ndbuffer import DataType, allocate, from_sequence

squares = allocate(3, DataType.INT32, lambda i: i * i)
squares.get(2)             # 4
copy = squares.copy_of()
copy.set(0, 99)            # squares[0] is still 0
from_sequence([1, 2, 3], DataType.INT32).size   # 3
squares.as_int32()         # the raw int32 ndarray
squares.as_float64()       # UnsupportedReinterpretation

===================================================================================
MEMORY OWNERSHIP
===================================================================================

Each holder owns its buffer exclusively. copy_of() and from_sequence() always
copy. The as_<kind>() accessors and the data property return the live buffer,
so writes through them are visible to the holder.

===================================================================================
THREAD SAFETY
===================================================================================

Nothing is synchronized internally. Concurrent writes during iteration, copy or
hashing are undefined; callers that share a holder across threads must lock it
themselves.

===================================================================================
"""

from .errors import (
    IndexOutOfRange,
    MemoryViewError,
    TypeMismatch,
    UnknownDataType,
    UnsupportedReinterpretation,
)
from .interfaces.data_type import DataType, DataTypeTag
from .interfaces.memory_view import ImmutableMemoryView, MemoryView
from .views import (
    Float32MemoryView,
    Float64MemoryView,
    Int8MemoryView,
    Int16MemoryView,
    Int32MemoryView,
    Int64MemoryView,
    allocate,
    from_sequence,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "__version__",
    "DataType",
    "DataTypeTag",
    "ImmutableMemoryView",
    "MemoryView",
    "Int8MemoryView",
    "Int16MemoryView",
    "Int32MemoryView",
    "Int64MemoryView",
    "Float32MemoryView",
    "Float64MemoryView",
    "allocate",
    "from_sequence",
    "MemoryViewError",
    "IndexOutOfRange",
    "UnknownDataType",
    "UnsupportedReinterpretation",
    "TypeMismatch",
]
