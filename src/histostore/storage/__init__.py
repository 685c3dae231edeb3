"""Storage strategies, facade and registry."""

from histostore.storage.adaptor import IndexOutOfRangeError, SizeMismatchError, StorageAdaptor
from histostore.storage.augmentation import (
    ArrayAugmentation,
    Augmentation,
    CapacityExceededError,
    MapAugmentation,
    VectorAugmentation,
)
from histostore.storage.factories import array_storage, dense_storage, sparse_storage
from histostore.storage.protocol import Storage, is_storage
from histostore.storage.registry import StorageRegistry, get_registry, storage_adaptor

__all__ = [
    # Protocol
    "Storage",
    "is_storage",
    # Strategies
    "Augmentation",
    "ArrayAugmentation",
    "VectorAugmentation",
    "MapAugmentation",
    # Facade
    "StorageAdaptor",
    "storage_adaptor",
    "StorageRegistry",
    "get_registry",
    # Factories
    "dense_storage",
    "sparse_storage",
    "array_storage",
    # Errors
    "CapacityExceededError",
    "IndexOutOfRangeError",
    "SizeMismatchError",
]
