"""Container classification.

Usage:
    classify(list)               # StorageCategory.VECTOR
    classify(numpy.ndarray)      # StorageCategory.ARRAY
    classify(dict[int, float])   # StorageCategory.MAP
    classify(dict[str, float])   # raises ClassificationError
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, get_args, get_origin

from histostore.core.classify.models import ArrayLike, MapLike, StorageCategory, VectorLike


class ClassificationError(TypeError):
    """Raised when a container or cell type cannot back a storage."""

    pass


def container_origin(container_type: Any) -> type:
    """Strip type arguments from a parametrised container alias.

    Args:
        container_type: A class such as `list` or an alias such as `dict[int, float]`.

    Returns:
        The runtime class that instances of the container have.

    Raises:
        ClassificationError: If the argument does not describe a class.
    """
    origin = get_origin(container_type) or container_type
    if not isinstance(origin, type):
        raise ClassificationError(f"{container_type!r} is not a container type")
    return origin


def container_args(container_type: Any) -> tuple[Any, ...]:
    """Type arguments of a parametrised container alias (empty for a bare class)."""
    return get_args(container_type)


def infer_value_type(container_type: Any) -> type | None:
    """Guess the cell value type from the last type argument of an alias.

    Returns:
        The value type, or None if the alias does not name a plain class.
    """
    args = container_args(container_type)
    if not args:
        return None
    candidate = args[-1]
    if isinstance(candidate, type) and get_origin(candidate) is None:
        return candidate
    return None


def _check_map_key(container_type: Any) -> None:
    args = container_args(container_type)
    if not args:
        return
    key = args[0]
    if not (isinstance(key, type) and issubclass(key, Integral)) or key is bool:
        raise ClassificationError(
            f"Map container {container_type!r} must have an unsigned integral key type, got {key!r}"
        )


def classify(container_type: Any) -> StorageCategory:
    """Select the storage category for a container type.

    Checks, in order: map-like, fixed-capacity array-like, resizable vector-like.
    The decision depends only on the type, never on an instance.

    Args:
        container_type: Container class or parametrised alias.

    Returns:
        The single category the container belongs to.

    Raises:
        ClassificationError: If the type fits no category, or is a map whose
            declared key type is not integral.
    """
    origin = container_origin(container_type)

    if issubclass(origin, MapLike):
        _check_map_key(container_type)
        return StorageCategory.MAP
    if issubclass(origin, ArrayLike) and not issubclass(origin, VectorLike):
        return StorageCategory.ARRAY
    if issubclass(origin, VectorLike):
        return StorageCategory.VECTOR

    raise ClassificationError(
        f"{origin.__name__} is neither map-like, array-like nor vector-like "
        f"and cannot be used as storage"
    )
