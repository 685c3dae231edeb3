"""Ready-made storages for the common container choices.

Usage:
    dense = dense_storage(float)
    sparse = sparse_storage(WeightedSum)
    fixed = array_storage(capacity=100)
"""

from __future__ import annotations

from typing import Any

import numpy as np

from histostore.storage.adaptor import StorageAdaptor
from histostore.storage.registry import storage_adaptor


def dense_storage(value_type: type = float, size: int = 0) -> StorageAdaptor[Any]:
    """List-backed storage with `size` default cells."""
    storage = storage_adaptor(list, value_type)()
    storage.reset(size)
    return storage


def sparse_storage(value_type: type = float, size: int = 0) -> StorageAdaptor[Any]:
    """Dict-backed storage with `size` cells and no stored entries."""
    storage = storage_adaptor(dict[int, value_type])()  # type: ignore[valid-type]
    storage.reset(size)
    return storage


def array_storage(
    capacity: int | None = None, value_type: type = float, size: int = 0
) -> StorageAdaptor[Any]:
    """numpy-backed storage with a fixed capacity.

    Args:
        capacity: Maximum number of cells; defaults to the configured `array_capacity`.
        value_type: Cell value type.
        size: Initial logical size.

    Raises:
        CapacityExceededError: If `size` exceeds the capacity.
    """
    storage = storage_adaptor(np.ndarray, value_type)(capacity=capacity)
    storage.reset(size)
    return storage
