"""Element accumulation adaptors and their selection per value type.

Usage:
    adaptor = element_adaptor(float)        # ArithmeticElementAdaptor
    cell = adaptor.add(adaptor.inc(0.0), 2.5)   # 3.5

    adaptor = element_adaptor(WeightedSum)  # InvocableElementAdaptor
    cell = adaptor.add(WeightedSum(), 2.0)      # calls cell(2.0)
"""

from __future__ import annotations

from functools import cache
from typing import Any

from histostore.core.element.models import Accumulator, ElementAdaptor


class ArithmeticElementAdaptor:
    """Plain numbers: increment is `+= 1`, weighted addition is `+= weight`."""

    __slots__ = ()

    def inc(self, value: Any) -> Any:
        value += 1
        return value

    def add(self, value: Any, weight: Any) -> Any:
        value += weight
        return value

    def scale(self, value: Any, factor: float) -> Any:
        value *= factor
        return value

    def __repr__(self) -> str:
        return "ArithmeticElementAdaptor()"


class InvocableElementAdaptor:
    """Accumulator cells: increment is `value()`, weighted addition is `value(weight)`."""

    __slots__ = ()

    def inc(self, value: Accumulator) -> Accumulator:
        value()
        return value

    def add(self, value: Accumulator, weight: Any) -> Accumulator:
        value(weight)
        return value

    def scale(self, value: Any, factor: float) -> Any:
        value *= factor
        return value

    def __repr__(self) -> str:
        return "InvocableElementAdaptor()"


_ARITHMETIC = ArithmeticElementAdaptor()
_INVOCABLE = InvocableElementAdaptor()


def is_accumulator_type(value_type: type) -> bool:
    """Check if instances of a type are updated by calling them.

    Args:
        value_type: Cell value type.

    Returns:
        True if the type defines `__call__` for its instances, False otherwise.
    """
    return isinstance(value_type, type) and issubclass(value_type, Accumulator)


@cache
def element_adaptor(value_type: type) -> ElementAdaptor[Any]:
    """Select the accumulation adaptor for a cell value type.

    The result is cached, so the decision is made once per value type.

    Args:
        value_type: Cell value type.

    Returns:
        InvocableElementAdaptor for accumulator types, ArithmeticElementAdaptor otherwise.
    """
    if is_accumulator_type(value_type):
        return _INVOCABLE
    return _ARITHMETIC
