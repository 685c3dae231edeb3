"""Core functionalities: stateless classification and cell accumulation.

Architecture Note:
    core/ decides *how* a container and a cell type behave; it holds no storage
    state. The stateful storages that apply these decisions live in storage/.
"""

from histostore.core.accumulators import WeightedSum
from histostore.core.classify import (
    ArrayLike,
    ClassificationError,
    MapLike,
    StorageCategory,
    VectorLike,
    classify,
    container_args,
    container_origin,
    infer_value_type,
)
from histostore.core.element import (
    Accumulator,
    ArithmeticElementAdaptor,
    ElementAdaptor,
    InvocableElementAdaptor,
    element_adaptor,
    is_accumulator_type,
)
from histostore.core.types import Cell

__all__ = [
    # Types
    "Cell",
    # Classification
    "StorageCategory",
    "ArrayLike",
    "VectorLike",
    "MapLike",
    "classify",
    "container_origin",
    "container_args",
    "infer_value_type",
    "ClassificationError",
    # Elements
    "Accumulator",
    "ElementAdaptor",
    "ArithmeticElementAdaptor",
    "InvocableElementAdaptor",
    "element_adaptor",
    "is_accumulator_type",
    # Accumulators
    "WeightedSum",
]
