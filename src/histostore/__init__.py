"""histostore: uniform storage adaptors for histogram cells.

Usage:
    from histostore import WeightedSum, storage_adaptor

    DenseStorage = storage_adaptor(list, float)
    SparseStorage = storage_adaptor(dict[int, WeightedSum])

    counts = DenseStorage()
    counts.reset(5)
    counts.increment(2)
    counts.add(4, 0.5)

    weights = SparseStorage()
    weights.reset(1_000_000)
    weights.add(123_456, 2.0)   # only one entry is stored
"""

__version__ = "0.1.0"

# Axis collaborators
from histostore.axis import Axis, IntervalView

# Configuration
from histostore.config import StorageSettings, configure, get_settings

# Core primitives
from histostore.core import (
    Accumulator,
    Cell,
    ClassificationError,
    StorageCategory,
    WeightedSum,
    classify,
    element_adaptor,
)

# Storage
from histostore.storage import (
    CapacityExceededError,
    IndexOutOfRangeError,
    SizeMismatchError,
    Storage,
    StorageAdaptor,
    array_storage,
    dense_storage,
    is_storage,
    sparse_storage,
    storage_adaptor,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Cell",
    "StorageCategory",
    "classify",
    "ClassificationError",
    "Accumulator",
    "element_adaptor",
    "WeightedSum",
    # Storage
    "Storage",
    "StorageAdaptor",
    "storage_adaptor",
    "is_storage",
    "dense_storage",
    "sparse_storage",
    "array_storage",
    "CapacityExceededError",
    "IndexOutOfRangeError",
    "SizeMismatchError",
    # Axis
    "Axis",
    "IntervalView",
    # Config
    "StorageSettings",
    "get_settings",
    "configure",
]
