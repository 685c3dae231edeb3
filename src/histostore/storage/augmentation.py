"""Augmentation strategies: one per container category.

Each strategy owns exactly one container and adds `reset`, `set`, `get` and
`size` with category-specific semantics on top of it.

Structure:
    VectorAugmentation: size is len(container); reset resizes.
    ArrayAugmentation:  size is a counter <= len(container); reset never resizes.
    MapAugmentation:    size is a counter; only non-default cells are stored.
"""

from __future__ import annotations

import copy
import warnings
from collections.abc import Iterator
from typing import Any, ClassVar

import numpy as np

from histostore.core.classify import StorageCategory
from histostore.core.element import is_accumulator_type


class CapacityExceededError(ValueError):
    """Raised when a fixed-capacity storage is reset to more cells than it can hold."""

    pass


class Augmentation[V]:
    """Base class for strategies wrapping a single container.

    Args:
        container: Container instance to own.
        value_type: Cell value type; `value_type()` is the default cell.
    """

    category: ClassVar[StorageCategory]

    __slots__ = ("_container", "_value_type")

    def __init__(self, container: Any, value_type: type[V]) -> None:
        self._container = container
        self._value_type = value_type

    @classmethod
    def allocate(
        cls, container_type: type, value_type: type[V], capacity: int
    ) -> Augmentation[V]:
        """Create a strategy owning a new, logically empty container.

        Args:
            container_type: Container class to instantiate.
            value_type: Cell value type.
            capacity: Number of cells to preallocate (ignored by growable containers).

        Returns:
            Strategy with `size() == 0`.
        """
        return cls(container_type(), value_type)

    @property
    def container(self) -> Any:
        """The owned container."""
        return self._container

    @property
    def value_type(self) -> type[V]:
        return self._value_type

    def default(self) -> V:
        """Return a fresh default cell."""
        return self._value_type()

    def max_size(self) -> int | None:
        """Maximum logical size, or None if unbounded."""
        return None

    def size(self) -> int:
        raise NotImplementedError

    def reset(self, n: int) -> None:
        raise NotImplementedError

    def get(self, index: int) -> V:
        return self._container[index]

    def set(self, index: int, value: V) -> None:
        self._container[index] = value

    def entries(self) -> Iterator[tuple[int, V]]:
        """Iterate (index, value) pairs of the logical range."""
        for i in range(self.size()):
            yield i, self.get(i)


class VectorAugmentation[V](Augmentation[V]):
    """Resizable sequence (list, array.array, deque, ...)."""

    category = StorageCategory.VECTOR

    __slots__ = ()

    def __init__(self, container: Any, value_type: type[V], size: int | None = None) -> None:
        if size is not None and size != len(container):
            raise ValueError(
                f"Vector container holds {len(container)} cells, cannot wrap it with size {size}"
            )
        super().__init__(container, value_type)

    def size(self) -> int:
        return len(self._container)

    def reset(self, n: int) -> None:
        data = self._container
        while len(data) > n:
            data.pop()
        for i in range(len(data)):
            data[i] = self._value_type()
        data.extend(self._value_type() for _ in range(n - len(data)))


class ArrayAugmentation[V](Augmentation[V]):
    """Fixed-capacity sequence (1-D numpy array or any non-growable indexed container).

    Capacity is the container's length; the logical size is tracked separately.
    """

    category = StorageCategory.ARRAY

    __slots__ = ("_size",)

    def __init__(self, container: Any, value_type: type[V], size: int | None = None) -> None:
        if getattr(container, "ndim", 1) != 1:
            raise ValueError(f"Array container must be one-dimensional, got ndim={container.ndim}")
        super().__init__(container, value_type)
        capacity = len(container)
        if size is None:
            size = capacity
        elif size > capacity:
            raise CapacityExceededError(f"size {size} exceeds maximum capacity {capacity}")
        self._size = size

    @classmethod
    def allocate(
        cls, container_type: type, value_type: type[V], capacity: int
    ) -> ArrayAugmentation[V]:
        """Create an empty strategy over `capacity` preallocated cells.

        numpy arrays get a matching dtype (`object` for accumulator cells); other
        containers are constructed from an iterable of default cells.
        """
        if issubclass(container_type, np.ndarray):
            dtype = object if is_accumulator_type(value_type) else value_type
            container = np.zeros(capacity, dtype=dtype)
        else:
            container = container_type(value_type() for _ in range(capacity))
        return cls(container, value_type, size=0)

    def max_size(self) -> int:
        return len(self._container)

    def size(self) -> int:
        return self._size

    def reset(self, n: int) -> None:
        capacity = self.max_size()
        if n > capacity:
            raise CapacityExceededError(f"size {n} exceeds maximum capacity {capacity}")
        data = self._container
        for i in range(n):
            data[i] = self._value_type()
        self._size = n


class MapAugmentation[V](Augmentation[V]):
    """Sparse mapping from cell index to value.

    Only cells that differ from the default are stored; the logical size is an
    explicit counter independent of the number of entries.
    """

    category = StorageCategory.MAP

    __slots__ = ("_size",)

    def __init__(self, container: Any, value_type: type[V], size: int | None = None) -> None:
        bad = [key for key in container if not _is_index(key)]
        if bad:
            raise ValueError(f"Map container keys must be non-negative integers, got {bad[0]!r}")

        default = value_type()
        stale = {key for key, value in container.items() if value == default}
        upper = max((key for key in container if key not in stale), default=-1) + 1
        if size is None:
            size = upper
        elif size < upper:
            raise ValueError(f"Map container has an entry at index {upper - 1} beyond size {size}")

        if stale:
            warnings.warn(
                f"Dropping {len(stale)} default-valued entries from wrapped map; "
                f"sparse storage only keeps non-default cells.",
                stacklevel=3,
            )
            for key in stale:
                del container[key]
        super().__init__(container, value_type)
        self._size = size

    def size(self) -> int:
        return self._size

    def reset(self, n: int) -> None:
        self._container.clear()
        self._size = n

    def get(self, index: int) -> V:
        """Return a copy of the stored cell, or a fresh default if none is stored."""
        data = self._container
        if index in data:
            return copy.copy(data[index])
        return self._value_type()

    def set(self, index: int, value: V) -> None:
        if value == self._value_type():
            self._container.pop(index, None)
        else:
            self._container[index] = value

    def entries(self) -> Iterator[tuple[int, V]]:
        """Iterate stored (index, value) pairs in increasing index order."""
        data = self._container
        for index in sorted(data):
            yield index, copy.copy(data[index])


def _is_index(key: Any) -> bool:
    return isinstance(key, (int, np.integer)) and not isinstance(key, bool) and key >= 0


AUGMENTATIONS: dict[StorageCategory, type[Augmentation[Any]]] = {
    StorageCategory.ARRAY: ArrayAugmentation,
    StorageCategory.VECTOR: VectorAugmentation,
    StorageCategory.MAP: MapAugmentation,
}
"""Strategy class for each container category."""
