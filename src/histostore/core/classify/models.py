"""Container category models: structural protocols and the category enum.

The protocols only list methods, so they can be checked against a container
*type* with `issubclass` before any instance exists.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class StorageCategory(Enum):
    """Behavioral category of a backing container, fixed per container type."""

    ARRAY = auto()
    """Fixed capacity; logical size is tracked separately and never exceeds it."""

    VECTOR = auto()
    """Resizable sequence; logical size is the container's own length."""

    MAP = auto()
    """Sparse index -> value mapping; absent keys read as the default value."""


@runtime_checkable
class ArrayLike(Protocol):
    """Indexed container with item assignment (fixed size unless it is also VectorLike)."""

    def __len__(self) -> int: ...
    def __getitem__(self, index: Any, /) -> Any: ...
    def __setitem__(self, index: Any, value: Any, /) -> None: ...


@runtime_checkable
class VectorLike(Protocol):
    """Indexed container that can grow and shrink at its end."""

    def __len__(self) -> int: ...
    def __getitem__(self, index: Any, /) -> Any: ...
    def __setitem__(self, index: Any, value: Any, /) -> None: ...
    def append(self, value: Any, /) -> None: ...
    def extend(self, values: Iterable[Any], /) -> None: ...
    def pop(self, *args: Any) -> Any: ...


@runtime_checkable
class MapLike(Protocol):
    """Key/value container with lookup, insertion and erasure."""

    def __len__(self) -> int: ...
    def __contains__(self, key: object, /) -> bool: ...
    def __getitem__(self, key: Any, /) -> Any: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __delitem__(self, key: Any, /) -> None: ...
    def __iter__(self) -> Iterator[Any]: ...
    def get(self, key: Any, default: Any = None, /) -> Any: ...
    def pop(self, key: Any, *default: Any) -> Any: ...
    def items(self) -> Iterable[tuple[Any, Any]]: ...
    def clear(self) -> None: ...
