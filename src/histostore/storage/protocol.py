"""Storage protocol shared by every storage a facade can read from.

Any object exposing a callable `size()` and integer indexing is a compatible
source for conversion, `+=` and `==`. This includes every storage adaptor, but
also foreign storages that were never built by this package.

Usage:
    if is_storage(other):
        for i in range(other.size()):
            value = other[i]
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """Minimal read interface of a storage."""

    def size(self) -> int:
        """Number of addressable cells."""
        ...

    def __getitem__(self, index: int, /) -> Any:
        """Cell value at `index`, for `0 <= index < size()`."""
        ...


def is_storage(obj: object) -> bool:
    """Check if an object satisfies the Storage protocol.

    Containers such as numpy arrays carry a non-callable `size` attribute, so the
    protocol check alone is not enough.

    Args:
        obj: Object to check.

    Returns:
        True if `obj.size` is callable and `obj` supports indexing.
    """
    return isinstance(obj, Storage) and callable(getattr(obj, "size", None))
