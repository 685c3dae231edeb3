"""Container classification: structural protocols and category selection."""

from histostore.core.classify.core import (
    ClassificationError,
    classify,
    container_args,
    container_origin,
    infer_value_type,
)
from histostore.core.classify.models import ArrayLike, MapLike, StorageCategory, VectorLike

__all__ = [
    # Models
    "StorageCategory",
    "ArrayLike",
    "VectorLike",
    "MapLike",
    # Core
    "classify",
    "container_origin",
    "container_args",
    "infer_value_type",
    "ClassificationError",
]
