"""Tests for the storage facade.

Critical Invariants:
- Every index outside [0, size()) is rejected, nothing auto-resizes
- Accumulation touches exactly one cell
- Elementwise += never applies a partial update
"""

import numpy as np
import pytest

from histostore import (
    CapacityExceededError,
    IndexOutOfRangeError,
    SizeMismatchError,
    StorageAdaptor,
    StorageCategory,
    WeightedSum,
    array_storage,
    configure,
    dense_storage,
    sparse_storage,
    storage_adaptor,
)
from histostore.storage import get_registry


def filled(storage_cls, values):
    storage = storage_cls()
    storage.reset(len(values))
    for i, value in enumerate(values):
        storage.add(i, value)
    return storage


# Structure


def test_new_storage_is_empty(storage_cls):
    assert storage_cls().size() == 0


def test_reset_sets_size_and_defaults(storage_cls):
    storage = filled(storage_cls, [1.0, 2.0])
    storage.reset(4)
    assert storage.size() == 4
    assert len(storage) == 4
    assert list(storage) == [0.0, 0.0, 0.0, 0.0]


def test_negative_reset_is_rejected(storage_cls):
    with pytest.raises(ValueError, match="non-negative"):
        storage_cls().reset(-1)


def test_category_is_bound_to_class():
    assert storage_adaptor(list, float).category is StorageCategory.VECTOR
    assert storage_adaptor(dict, float).category is StorageCategory.MAP
    assert storage_adaptor(np.ndarray, float).category is StorageCategory.ARRAY


def test_same_types_return_same_class():
    """Category is decided once per type; later lookups reuse the class."""
    assert storage_adaptor(list, float) is storage_adaptor(list[float])
    assert storage_adaptor(dict, int) is storage_adaptor(dict[int, int])
    assert get_registry().get(list, float) is storage_adaptor(list, float)
    assert get_registry().category_of(list, float) is StorageCategory.VECTOR


def test_class_name_describes_specialisation():
    assert storage_adaptor(list, float).__name__ == "ListFloatStorage"
    assert storage_adaptor(dict, WeightedSum).__name__ == "DictWeightedSumStorage"


def test_unspecialised_adaptor_cannot_be_instantiated():
    with pytest.raises(TypeError, match="specialised"):
        StorageAdaptor()


def test_construct_from_unrelated_object_raises(dense_cls):
    with pytest.raises(TypeError, match="Cannot build"):
        dense_cls("not a list")


def test_wrap_existing_container_takes_ownership(dense_cls):
    data = [1.0, 2.0, 3.0]
    storage = dense_cls(data)
    storage.increment(0)
    assert storage.container is data
    assert data == [2.0, 2.0, 3.0]


def test_wrap_map_with_explicit_size(sparse_cls):
    storage = sparse_cls({2: 5.0}, size=10)
    assert storage.size() == 10
    assert storage[2] == 5.0
    assert storage[9] == 0.0


# Accumulation


def test_increment_touches_single_cell(storage_cls):
    storage = storage_cls()
    storage.reset(3)
    storage.increment(1)
    assert list(storage) == [0.0, 1.0, 0.0]


def test_add_touches_single_cell(storage_cls):
    storage = storage_cls()
    storage.reset(3)
    storage.add(2, 2.5)
    assert list(storage) == [0.0, 0.0, 2.5]


def test_call_forms_increment_and_add(storage_cls):
    storage = storage_cls()
    storage.reset(2)
    storage(0)
    storage(0, 4.0)
    assert storage[0] == 5.0
    assert storage[1] == 0.0


@pytest.mark.parametrize("index", [3, 10, -1])
def test_out_of_range_index_is_rejected(storage_cls, index):
    storage = storage_cls()
    storage.reset(3)
    with pytest.raises(IndexOutOfRangeError):
        storage.increment(index)
    with pytest.raises(IndexOutOfRangeError):
        storage.add(index, 1.0)
    with pytest.raises(IndexOutOfRangeError):
        storage[index]
    with pytest.raises(IndexOutOfRangeError):
        storage[index] = 1.0


def test_no_implicit_resize_on_fill(storage_cls):
    """Growth belongs to the caller, an empty storage accepts no fills."""
    storage = storage_cls()
    with pytest.raises(IndexOutOfRangeError):
        storage.increment(0)
    assert storage.size() == 0


def test_index_error_is_an_index_error(dense_cls):
    with pytest.raises(IndexError):
        dense_cls().increment(0)


def test_index_checks_can_be_disabled(sparse_cls):
    configure(check_indices=False)
    storage = sparse_cls()
    storage.reset(3)
    assert storage[7] == 0.0


def test_index_check_setting_is_read_when_storage_is_created(sparse_cls):
    storage = sparse_cls()
    storage.reset(3)
    configure(check_indices=False)
    with pytest.raises(IndexOutOfRangeError):
        storage.add(3, 1.0)
    assert list(storage.entries()) == []


def test_increment_then_add_on_accumulator_cells():
    for container_type in (list, dict, np.ndarray):
        storage = storage_adaptor(container_type, WeightedSum)(capacity=4)
        storage.reset(2)
        storage.increment(1)
        storage.add(1, 3.0)
        assert storage[1] == WeightedSum(value=4.0, variance=10.0)
        assert storage[0] == WeightedSum()


def test_sparse_fill_creates_single_entry():
    storage = sparse_storage(WeightedSum, size=1_000_000)
    storage.add(123_456, 2.0)
    assert list(storage.entries()) == [(123_456, WeightedSum(2.0, 4.0))]


def test_sparse_read_cannot_store_a_default_cell():
    """Why: mutating a read cell must never leave a default-valued entry behind."""
    storage = sparse_storage(WeightedSum, size=3)
    storage.add(1, 2.0)

    cell = storage[1]
    cell *= 0.0

    assert storage[1] == WeightedSum(2.0, 4.0)
    assert list(storage.entries()) == [(1, WeightedSum(2.0, 4.0))]


def test_dense_read_returns_stored_cell():
    storage = dense_storage(WeightedSum, size=2)
    storage.add(0, 1.0)
    storage[0](2.0)
    assert storage[0] == WeightedSum(3.0, 5.0)


def test_sparse_fill_back_to_default_erases_entry(sparse_cls):
    storage = sparse_cls()
    storage.reset(5)
    storage.add(3, 2.0)
    storage.add(3, -2.0)
    assert list(storage.entries()) == []
    assert storage.size() == 5
    assert storage[3] == 0.0


def test_dense_entries_cover_logical_range(dense_cls):
    storage = filled(dense_cls, [0.0, 1.0])
    assert list(storage.entries()) == [(0, 0.0), (1, 1.0)]


# Whole-storage operations


def test_iadd_adds_elementwise_across_categories(storage_cls, sparse_cls):
    a = filled(storage_cls, [1.0, 0.0, 2.0])
    b = filled(sparse_cls, [0.5, 0.0, 1.0])
    a += b
    assert list(a) == [1.5, 0.0, 3.0]


def test_iadd_with_mismatched_sizes_raises_without_partial_update(storage_cls):
    """CRITICAL: a size mismatch is a caller bug and must not corrupt the target."""
    a = filled(storage_cls, [1.0, 2.0, 3.0])
    b = filled(storage_cls, [1.0, 1.0, 1.0, 1.0])

    with pytest.raises(SizeMismatchError):
        a += b

    assert list(a) == [1.0, 2.0, 3.0]


def test_iadd_with_non_storage_is_unsupported(dense_cls):
    storage = filled(dense_cls, [1.0])
    with pytest.raises(TypeError):
        storage += [1.0]


def test_iadd_merges_accumulator_cells():
    a = dense_storage(WeightedSum, size=2)
    b = sparse_storage(WeightedSum, size=2)
    a.add(0, 1.0)
    b.add(0, 2.0)
    b.increment(1)
    a += b
    assert list(a) == [WeightedSum(3.0, 5.0), WeightedSum(1.0, 1.0)]


def test_scale_then_divide_restores_values(storage_cls):
    storage = filled(storage_cls, [0.25, 0.0, 3.5, 7.125])
    original = list(storage)

    storage *= 2.0
    assert list(storage) == pytest.approx([0.5, 0.0, 7.0, 14.25])

    storage /= 2.0
    assert list(storage) == pytest.approx(original)


def test_divide_by_zero_raises(dense_cls):
    storage = filled(dense_cls, [1.0])
    with pytest.raises(ZeroDivisionError):
        storage /= 0.0


def test_equal_storages_compare_equal(storage_cls):
    assert filled(storage_cls, [1.0, 2.0]) == filled(storage_cls, [1.0, 2.0])


def test_single_changed_cell_breaks_equality(storage_cls):
    a = filled(storage_cls, [1.0, 2.0, 3.0])
    b = filled(storage_cls, [1.0, 2.0, 3.0])
    b.increment(2)
    assert a != b


def test_different_sizes_never_compare_equal(storage_cls):
    a = storage_cls()
    b = storage_cls()
    a.reset(2)
    b.reset(3)
    assert a != b


def test_equality_across_categories(dense_cls, sparse_cls, array_cls):
    values = [0.0, 4.0, 0.0]
    assert filled(dense_cls, values) == filled(sparse_cls, values) == filled(array_cls, values)


def test_comparison_with_non_storage_is_false(dense_cls):
    assert filled(dense_cls, [1.0]) != [1.0]


def test_storages_are_unhashable(dense_cls):
    with pytest.raises(TypeError):
        hash(dense_cls())


# Array-backed storages


def test_array_capacity_defaults_to_settings():
    configure(array_capacity=8)
    storage = storage_adaptor(np.ndarray, int)()
    assert storage.max_size() == 8


def test_array_reset_over_capacity_leaves_storage_unchanged():
    storage = array_storage(capacity=4, size=3)
    storage.add(1, 2.0)

    with pytest.raises(CapacityExceededError):
        storage.reset(5)

    assert storage.size() == 3
    assert list(storage) == [0.0, 2.0, 0.0]


def test_array_storage_factory_rejects_initial_size_over_capacity():
    with pytest.raises(CapacityExceededError):
        array_storage(capacity=2, size=3)


def test_unbounded_storages_report_no_capacity(dense_cls, sparse_cls):
    assert dense_cls().max_size() is None
    assert sparse_cls().max_size() is None


def test_repr_lists_cells():
    storage = dense_storage(int, size=2)
    storage.increment(1)
    assert repr(storage) == "ListIntStorage([0, 1])"
