"""Storage facade: one indexed-accumulation interface over any container.

Concrete storage classes are specialised per (container type, value type) by
`storage_adaptor()`. The specialisation binds the augmentation strategy and the
element adaptor as class attributes, so no call branches on the category.

Usage:
    DenseStorage = storage_adaptor(list, float)
    SparseStorage = storage_adaptor(dict[int, float])

    dense = DenseStorage()
    dense.reset(5)
    dense.increment(1)
    dense.add(4, 2.5)

    sparse = SparseStorage(dense)   # conversion through size() + indexed read
    assert sparse == dense
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any, ClassVar

from histostore.config import get_settings
from histostore.core.classify import StorageCategory, container_origin
from histostore.core.element import ElementAdaptor
from histostore.core.types import Cell
from histostore.storage.augmentation import Augmentation
from histostore.storage.protocol import Storage, is_storage


class IndexOutOfRangeError(IndexError):
    """Raised when a cell index is outside `[0, size())`."""

    pass


class SizeMismatchError(ValueError):
    """Raised when an elementwise operation combines storages of different size."""

    pass


class StorageAdaptor[V]:
    """Indexed accumulation over a container owned by an augmentation strategy.

    Instances are created from a concrete subclass returned by `storage_adaptor()`.

    Args:
        source: None for an empty storage, an instance of the container type to
            wrap (the storage takes ownership), or any compatible storage to convert.
        capacity: Cells to preallocate for array-backed storages created empty.
            Defaults to the configured `array_capacity`.
        size: Logical size when wrapping a map container. Defaults to the
            largest stored index plus one.

    Raises:
        TypeError: If the class is not specialised or `source` is neither the
            container type nor a storage.
    """

    container_type: ClassVar[type]
    """Runtime class of the owned container."""

    value_type: ClassVar[type]
    """Cell value type; `value_type()` is the default cell."""

    category: ClassVar[StorageCategory | None] = None
    """Container category selected when the class was specialised."""

    _augmentation: ClassVar[type[Augmentation[Any]]]
    _element: ClassVar[ElementAdaptor[Any]]

    __slots__ = ("_base", "_check")

    def __init__(
        self,
        source: Any = None,
        *,
        capacity: int | None = None,
        size: int | None = None,
    ) -> None:
        cls = type(self)
        if cls.category is None:
            raise TypeError(
                "StorageAdaptor must be specialised first, e.g. storage_adaptor(list, float)()"
            )
        self._check = get_settings().check_indices

        if isinstance(source, cls.container_type):
            augmentation: Any = cls._augmentation
            self._base = augmentation(source, cls.value_type, size=size)
            return

        if capacity is None:
            capacity = get_settings().array_capacity
        self._base = cls._augmentation.allocate(cls.container_type, cls.value_type, capacity)

        if source is None:
            return
        if not is_storage(source):
            raise TypeError(
                f"Cannot build {cls.__name__} from {type(source).__name__}: "
                f"expected {cls.container_type.__name__} or a storage"
            )
        self.assign(source)

    @classmethod
    def from_storage(cls, source: Storage, *, capacity: int | None = None) -> StorageAdaptor[V]:
        """Create a storage holding the same cells as another storage.

        Args:
            source: Storage exposing `size()` and indexed read.
            capacity: Preallocation for array-backed storages.

        Returns:
            New storage of this class.
        """
        if not is_storage(source):
            raise TypeError(f"{type(source).__name__} is not a storage")
        return cls(source, capacity=capacity)

    # --- structure ---

    @property
    def container(self) -> Any:
        """The owned container. Mutating it directly bypasses the storage invariants."""
        return self._base.container

    def size(self) -> int:
        """Number of addressable cells."""
        return self._base.size()

    def max_size(self) -> int | None:
        """Capacity for array-backed storages, None if unbounded."""
        return self._base.max_size()

    def reset(self, n: int) -> None:
        """Resize to `n` cells, all set to the default value.

        Raises:
            ValueError: If `n` is negative.
            CapacityExceededError: If `n` exceeds a fixed capacity. The storage
                is left unchanged.
        """
        if n < 0:
            raise ValueError(f"Storage size must be non-negative, got {n}")
        self._base.reset(n)

    def entries(self) -> Iterator[tuple[int, V]]:
        """Iterate (index, value) pairs of cells that are physically stored.

        Sparse storages yield only non-default cells; dense storages yield every
        cell of the logical range.
        """
        return self._base.entries()

    def _check_index(self, index: int) -> None:
        n = self._base.size()
        if not 0 <= index < n:
            raise IndexOutOfRangeError(f"Index {index} out of range for storage of size {n}")

    # --- cell access ---

    def __len__(self) -> int:
        return self._base.size()

    def __getitem__(self, index: int) -> Cell[V]:
        if self._check:
            self._check_index(index)
        return self._base.get(index)

    def __setitem__(self, index: int, value: V) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[Cell[V]]:
        base = self._base
        for i in range(base.size()):
            yield base.get(i)

    def set(self, index: int, value: V) -> None:
        """Overwrite cell `index`. Sparse storages erase the entry for a default value."""
        if self._check:
            self._check_index(index)
        self._base.set(index, value)

    # --- accumulation ---

    def increment(self, index: int) -> None:
        """Add one unweighted entry to cell `index`.

        Raises:
            IndexOutOfRangeError: If `index` is not in `[0, size())`.
        """
        if self._check:
            self._check_index(index)
        base = self._base
        base.set(index, self._element.inc(base.get(index)))

    def add(self, index: int, weight: Any) -> None:
        """Add a weighted entry to cell `index`.

        Raises:
            IndexOutOfRangeError: If `index` is not in `[0, size())`.
        """
        if self._check:
            self._check_index(index)
        base = self._base
        base.set(index, self._element.add(base.get(index), weight))

    def __call__(self, index: int, *weight: Any) -> None:
        """`storage(i)` increments cell i, `storage(i, w)` adds weight w to it."""
        if weight:
            self.add(index, *weight)
        else:
            self.increment(index)

    # --- whole-storage operations ---

    def assign(self, source: Storage) -> StorageAdaptor[V]:
        """Replace all cells with copies of the cells of another storage.

        Args:
            source: Storage exposing `size()` and indexed read.

        Returns:
            self, for chaining.

        Raises:
            CapacityExceededError: If this storage cannot hold `source.size()` cells.
        """
        if source is self:
            return self
        n = source.size()
        base = self._base
        base.reset(n)
        for i in range(n):
            base.set(i, copy.copy(source[i]))
        return self

    def __iadd__(self, other: Any) -> StorageAdaptor[V]:
        if not is_storage(other):
            return NotImplemented
        n = self._base.size()
        if n != other.size():
            raise SizeMismatchError(f"Storage sizes must be equal, got {n} and {other.size()}")
        base = self._base
        element = self._element
        for i in range(n):
            base.set(i, element.add(base.get(i), other[i]))
        return self

    def __imul__(self, factor: float) -> StorageAdaptor[V]:
        base = self._base
        element = self._element
        for i in range(base.size()):
            base.set(i, element.scale(base.get(i), factor))
        return self

    def __itruediv__(self, divisor: float) -> StorageAdaptor[V]:
        return self.__imul__(1.0 / divisor)

    def __eq__(self, other: object) -> bool:
        if not is_storage(other):
            return NotImplemented
        n = self._base.size()
        if n != other.size():  # type: ignore[attr-defined]
            return False
        base = self._base
        for i in range(n):
            if base.get(i) != other[i]:  # type: ignore[index]
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def specialise(
    container_type: Any,
    value_type: type,
    category: StorageCategory,
    augmentation: type[Augmentation[Any]],
    element: ElementAdaptor[Any],
) -> type[StorageAdaptor[Any]]:
    """Build the concrete StorageAdaptor subclass for one container/value type pair.

    Callers should go through `storage_adaptor()`, which classifies the container
    and caches the result.
    """
    origin = container_origin(container_type)
    name = f"{_camel(origin.__name__)}{_camel(value_type.__name__)}Storage"
    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "container_type": origin,
        "value_type": value_type,
        "category": category,
        "_augmentation": augmentation,
        "_element": element,
    }
    return type(name, (StorageAdaptor,), namespace)


def _camel(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))
