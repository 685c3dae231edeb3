"""Storage class registry and the `storage_adaptor` entry point.

Usage:
    DenseStorage = storage_adaptor(list, float)
    SparseStorage = storage_adaptor(dict[int, WeightedSum])
    ArrayStorage = storage_adaptor(numpy.ndarray, float)

    # Same arguments always return the same class
    assert storage_adaptor(list, float) is DenseStorage
"""

from __future__ import annotations

from typing import Any

from histostore.core.classify import (
    ClassificationError,
    StorageCategory,
    classify,
    container_origin,
    infer_value_type,
)
from histostore.core.element import element_adaptor
from histostore.storage.adaptor import StorageAdaptor, specialise
from histostore.storage.augmentation import AUGMENTATIONS


class StorageRegistry:
    """Process-local registry of specialised storage classes.

    Maps (container class, value type) to the StorageAdaptor subclass built for
    it, so each container type is classified once.
    """

    def __init__(self) -> None:
        """Initialize empty storage registry."""
        self._by_key: dict[tuple[type, type], type[StorageAdaptor[Any]]] = {}

    def register(
        self, container_type: Any, value_type: type | None = None
    ) -> type[StorageAdaptor[Any]]:
        """Return the storage class for a container type, building it on first use.

        Args:
            container_type: Container class or parametrised alias such as
                `dict[int, float]`.
            value_type: Cell value type. Inferred from the alias when omitted.

        Returns:
            StorageAdaptor subclass bound to the container's category and the
            value type's element adaptor.

        Raises:
            ClassificationError: If the container fits no category, its key type
                is not integral, or no value type is given or inferable.
        """
        category = classify(container_type)
        origin = container_origin(container_type)
        if value_type is None:
            value_type = infer_value_type(container_type)
        if value_type is None:
            raise ClassificationError(
                f"Cannot infer the cell value type of {container_type!r}; "
                f"pass value_type explicitly"
            )

        key = (origin, value_type)
        if key in self._by_key:
            return self._by_key[key]

        cls = specialise(
            origin,
            value_type,
            category,
            AUGMENTATIONS[category],
            element_adaptor(value_type),
        )
        self._by_key[key] = cls
        return cls

    def get(self, container_type: type, value_type: type) -> type[StorageAdaptor[Any]] | None:
        """Get a previously built storage class.

        Returns:
            The storage class if registered, None otherwise.
        """
        return self._by_key.get((container_origin(container_type), value_type))

    def category_of(self, container_type: type, value_type: type) -> StorageCategory | None:
        """Get the category of a registered storage class, None if not registered."""
        cls = self.get(container_type, value_type)
        return None if cls is None else cls.category

    def __len__(self) -> int:
        return len(self._by_key)


# Module-level registry instance
_registry = StorageRegistry()


def get_registry() -> StorageRegistry:
    """Access the global storage registry.

    Returns:
        The process-local StorageRegistry instance.
    """
    return _registry


def storage_adaptor(
    container_type: Any, value_type: type | None = None
) -> type[StorageAdaptor[Any]]:
    """Build (or fetch) the storage class for a container type.

    Args:
        container_type: `list`, `dict`, `numpy.ndarray`, a parametrised alias, or
            any user container matching one of the structural protocols.
        value_type: Cell value type, e.g. `int`, `float` or `WeightedSum`.

    Returns:
        A concrete StorageAdaptor subclass.

    Example:
        >>> Dense = storage_adaptor(list, int)
        >>> storage = Dense()
        >>> storage.reset(3)
        >>> storage.increment(1)
        >>> list(storage)
        [0, 1, 0]
    """
    return _registry.register(container_type, value_type)
