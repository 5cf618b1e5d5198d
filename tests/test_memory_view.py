"""Tests for the concrete buffer holders and their shared contract."""

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from ndbuffer import (
    DataType,
    Float32MemoryView,
    Float64MemoryView,
    ImmutableMemoryView,
    IndexOutOfRange,
    Int8MemoryView,
    Int16MemoryView,
    Int32MemoryView,
    Int64MemoryView,
    MemoryView,
    TypeMismatch,
    UnsupportedReinterpretation,
    allocate,
    from_sequence,
)

ALL_KINDS = list(DataType)

ACCESSORS = {
    DataType.INT8: "as_int8",
    DataType.INT16: "as_int16",
    DataType.INT32: "as_int32",
    DataType.INT64: "as_int64",
    DataType.FLOAT32: "as_float32",
    DataType.FLOAT64: "as_float64",
}

# -----------------------------------------------------------------------------
# CONTRACT
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_holders_implement_both_contracts(kind):
    view = allocate(2, kind)
    assert isinstance(view, MemoryView)
    assert isinstance(view, ImmutableMemoryView)
    assert view.data_type is kind
    assert view.data.dtype == kind.numpy_dtype


def test_contracts_are_abstract():
    with pytest.raises(TypeError):
        ImmutableMemoryView()
    with pytest.raises(TypeError):
        MemoryView()


@pytest.mark.parametrize("size", [0, 1, 5])
def test_metadata_matches_buffer_length(size):
    view = allocate(size, DataType.INT16)
    assert view.size == size == len(view) == view.data.shape[0]
    assert view.indices == range(size)
    assert view.last_index == size - 1


def test_metadata_is_read_only():
    view = allocate(3, DataType.INT8)
    with pytest.raises(AttributeError):
        view.size = 10
    with pytest.raises(AttributeError):
        view.last_index = 10


# -----------------------------------------------------------------------------
# POSITIONAL ACCESS
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_set_then_get(kind, sample_values):
    view = allocate(3, kind)
    view.set(1, sample_values[kind])
    assert view.get(1) == sample_values[kind]
    assert view[1] == sample_values[kind]
    assert view.get(0) == 0
    assert view.get(1).dtype == kind.numpy_dtype


def test_item_assignment_goes_through_set():
    view = allocate(2, DataType.INT64)
    view[0] = 7
    assert view.get(0) == 7
    with pytest.raises(TypeMismatch):
        view[1] = 1.5


@pytest.mark.parametrize("kind", ALL_KINDS)
@pytest.mark.parametrize("position", ["before", "after"])
def test_access_outside_bounds_fails(kind, position, sample_values):
    view = allocate(4, kind)
    index = -1 if position == "before" else view.size
    with pytest.raises(IndexOutOfRange) as get_exc:
        view.get(index)
    with pytest.raises(IndexOutOfRange):
        view.set(index, sample_values[kind])
    assert get_exc.value.index == index
    assert get_exc.value.size == 4


def test_empty_holder_rejects_every_index():
    view = allocate(0, DataType.FLOAT64)
    with pytest.raises(IndexOutOfRange):
        view.get(0)
    assert list(view) == []


def test_negative_indices_are_not_wrapped():
    view = from_sequence([1, 2, 3], DataType.INT32)
    with pytest.raises(IndexOutOfRange):
        view[-1]
    with pytest.raises(IndexError):
        view[-3]


def test_non_integer_index_is_a_type_error():
    view = allocate(3, DataType.INT32)
    with pytest.raises(TypeError):
        view.get(1.0)
    with pytest.raises(TypeError):
        view["1"]


def test_numpy_integer_index_is_accepted():
    view = from_sequence([4, 5, 6], DataType.INT8)
    assert view.get(np.int64(2)) == 6


# -----------------------------------------------------------------------------
# KIND CHECKS
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "kind,value",
    [
        (DataType.INT8, 128),
        (DataType.INT8, -129),
        (DataType.INT16, 2**15),
        (DataType.INT32, 2**31),
        (DataType.INT64, 2**63),
        (DataType.INT32, 1.5),
        (DataType.INT32, 2.0),
        (DataType.INT32, True),
        (DataType.FLOAT64, False),
        (DataType.INT32, "1"),
        (DataType.FLOAT32, "1.0"),
        (DataType.FLOAT32, None),
        (DataType.FLOAT64, 1 + 2j),
        (DataType.INT8, np.int16(1)),
        (DataType.INT32, np.int64(1)),
        (DataType.FLOAT32, np.float64(1.0)),
        (DataType.FLOAT64, np.float32(1.0)),
        (DataType.FLOAT64, np.int64(1)),
        (DataType.FLOAT32, 1e300),
        (DataType.FLOAT32, -1e39),
        (DataType.FLOAT32, 10**39),
        (DataType.FLOAT64, 10**400),
        (DataType.FLOAT64, -(10**400)),
    ],
)
def test_set_rejects_values_of_another_kind(kind, value):
    view = allocate(1, kind)
    with pytest.raises(TypeMismatch) as exc:
        view.set(0, value)
    assert exc.value.expected is kind
    assert view.get(0) == 0


@pytest.mark.parametrize(
    "kind,value",
    [
        (DataType.INT8, 127),
        (DataType.INT8, -128),
        (DataType.INT8, np.int8(3)),
        (DataType.INT64, 2**63 - 1),
        (DataType.FLOAT32, 3),
        (DataType.FLOAT32, np.float32(0.5)),
        (DataType.FLOAT64, 0.1),
        (DataType.FLOAT64, np.float64(0.25)),
    ],
)
def test_set_accepts_values_of_the_holder_kind(kind, value):
    view = allocate(1, kind)
    view.set(0, value)
    assert view.get(0) == kind.numpy_dtype.type(value)


@pytest.mark.parametrize("kind", [DataType.FLOAT32, DataType.FLOAT64])
def test_float_kinds_keep_infinities_and_nan(kind):
    view = allocate(3, kind)
    view.set(0, float("inf"))
    view.set(1, float("-inf"))
    view.set(2, float("nan"))
    assert view.get(0) == np.inf
    assert view.get(1) == -np.inf
    assert np.isnan(view.get(2))


def test_float32_accepts_its_largest_finite_value():
    largest = float(np.finfo(np.float32).max)
    view = from_sequence([largest], DataType.FLOAT32)
    assert np.isfinite(view.get(0))


@pytest.mark.parametrize(
    "view_type,dtype",
    [
        (Int8MemoryView, np.int16),
        (Int16MemoryView, np.int8),
        (Int32MemoryView, np.int64),
        (Int64MemoryView, np.float64),
        (Float32MemoryView, np.float64),
        (Float64MemoryView, np.int64),
    ],
)
def test_constructor_rejects_buffers_of_another_kind(view_type, dtype):
    with pytest.raises(TypeMismatch):
        view_type(np.zeros(3, dtype=dtype))


def test_constructor_rejects_non_buffers_and_bad_layouts():
    with pytest.raises(TypeMismatch):
        Int32MemoryView([1, 2, 3])
    with pytest.raises(ValueError):
        Int32MemoryView(np.zeros((2, 2), dtype=np.int32))
    with pytest.raises(ValueError):
        Int32MemoryView(np.zeros(6, dtype=np.int32)[::2])


def test_constructor_rejects_read_only_buffers():
    buffer = np.frombuffer(bytes(8), dtype=np.int32)
    with pytest.raises(ValueError, match="writeable"):
        Int32MemoryView(buffer)


def test_constructor_wraps_the_given_buffer():
    buffer = np.arange(4, dtype=np.int16)
    view = Int16MemoryView(buffer)
    assert view.data is buffer
    buffer[0] = 9
    assert view.get(0) == 9


# -----------------------------------------------------------------------------
# ITERATION & COPY
# -----------------------------------------------------------------------------


def test_iteration_is_ordered_and_restartable():
    view = from_sequence([3, 1, 2], DataType.INT64)
    first = iter(view)
    assert next(first) == 3
    assert list(view) == [3, 1, 2]
    assert list(first) == [1, 2]
    view.set(0, 10)
    assert list(view) == [10, 1, 2]


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_copy_is_equal_but_independent(kind, sample_values):
    original = allocate(3, kind, lambda i: kind.numpy_dtype.type(i))
    copy = original.copy_of()
    assert copy == original
    assert copy is not original
    assert type(copy) is type(original)
    assert not np.shares_memory(copy.data, original.data)

    copy.set(0, sample_values[kind])
    assert original.get(0) == 0
    assert copy != original


def test_copy_of_empty_holder():
    view = allocate(0, DataType.INT8)
    copy = view.copy_of()
    assert copy == view
    assert copy.size == 0


# -----------------------------------------------------------------------------
# REINTERPRETATION
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_matching_accessor_returns_the_live_buffer(kind, sample_values):
    view = allocate(2, kind)
    raw = getattr(view, ACCESSORS[kind])()
    assert raw is view.data
    raw[1] = sample_values[kind]
    assert view.get(1) == sample_values[kind]


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_other_accessors_fail(kind):
    view = allocate(2, kind)
    for other, accessor in ACCESSORS.items():
        if other is kind:
            continue
        with pytest.raises(UnsupportedReinterpretation) as exc:
            getattr(view, accessor)()
        assert exc.value.requested is other
        assert exc.value.actual is kind


# -----------------------------------------------------------------------------
# EQUALITY & HASHING
# -----------------------------------------------------------------------------


def test_equal_content_means_equal_hash():
    a = from_sequence([1, 2, 3], DataType.INT16)
    b = from_sequence([1, 2, 3], DataType.INT16)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_different_kinds_are_never_equal():
    int32_zeros = allocate(3, DataType.INT32)
    int64_zeros = allocate(3, DataType.INT64)
    float32_zeros = allocate(3, DataType.FLOAT32)
    assert int32_zeros != int64_zeros
    assert int64_zeros != int32_zeros
    assert int32_zeros != float32_zeros


def test_size_and_order_matter():
    assert from_sequence([1, 2], DataType.INT8) != from_sequence([1, 2, 0], DataType.INT8)
    assert from_sequence([1, 2], DataType.INT8) != from_sequence([2, 1], DataType.INT8)


def test_comparison_with_other_objects():
    view = from_sequence([0, 0], DataType.INT32)
    assert view != [0, 0]
    assert view != np.zeros(2, dtype=np.int32).tolist()
    assert (view == "buffer") is False


def test_nan_follows_ieee_equality_but_hash_is_stable():
    view = from_sequence([float("nan"), 1.0], DataType.FLOAT64)
    other = from_sequence([float("nan"), 1.0], DataType.FLOAT64)
    assert view == view
    assert view != other
    assert hash(view) == hash(view) == hash(other)


def test_signed_zeros_compare_and_hash_equal():
    a = from_sequence([0.0], DataType.FLOAT32)
    b = from_sequence([-0.0], DataType.FLOAT32)
    assert a == b
    assert hash(a) == hash(b)


def test_hash_folds_elements_in_order():
    view = from_sequence([1, 2], DataType.INT32)
    assert hash(view) == 31 * (31 * 1 + 1) + 2
    assert hash(allocate(0, DataType.INT32)) == 1


def test_hash_tracks_mutation():
    view = from_sequence([1, 2], DataType.INT32)
    before = hash(view)
    view.set(1, 3)
    assert hash(view) != before


def test_repr_names_the_variant():
    assert repr(from_sequence([1, 2], DataType.INT8)) == "Int8MemoryView([1, 2])"
    assert repr(allocate(1, DataType.FLOAT64)) == "Float64MemoryView([0.0])"


# -----------------------------------------------------------------------------
# PROPERTIES
# -----------------------------------------------------------------------------


@pytest.mark.property
@given(st.lists(st.integers(min_value=-(2**15), max_value=2**15 - 1), max_size=64))
def test_copy_round_trip_property(values):
    view = from_sequence(values, DataType.INT16)
    copy = view.copy_of()
    assert list(view) == values
    assert copy == view
    assert hash(copy) == hash(view)
    if values:
        copy.set(0, 0 if values[0] != 0 else 1)
        assert view.get(0) == values[0]


@pytest.mark.property
@given(st.lists(st.floats(width=32, allow_nan=False), max_size=64))
def test_float32_values_survive_unchanged(values):
    view = from_sequence(values, DataType.FLOAT32)
    assert [float(value) for value in view] == values
