"""Element accumulation: cell protocols and adaptor selection."""

from histostore.core.element.core import (
    ArithmeticElementAdaptor,
    InvocableElementAdaptor,
    element_adaptor,
    is_accumulator_type,
)
from histostore.core.element.models import Accumulator, ElementAdaptor

__all__ = [
    # Models
    "Accumulator",
    "ElementAdaptor",
    # Core
    "ArithmeticElementAdaptor",
    "InvocableElementAdaptor",
    "element_adaptor",
    "is_accumulator_type",
]
