"""Accumulator cell types.

Usage:
    storage = storage_adaptor(list, WeightedSum)()
    storage.reset(3)
    storage.increment(0)     # WeightedSum(value=1.0, variance=1.0)
    storage.add(0, 2.0)      # WeightedSum(value=3.0, variance=5.0)
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Self


@dataclass(slots=True)
class WeightedSum:
    """Sum of weights together with the sum of squared weights.

    The sum of squared weights is the variance estimate of the sum, so it scales
    with the square of any factor applied to the cell.

    Attributes:
        value: Sum of weights.
        variance: Sum of squared weights.
    """

    value: float = 0.0
    variance: float = 0.0

    def __call__(self, weight: float | WeightedSum = 1.0) -> None:
        """Add one weighted entry, or merge another WeightedSum into this one."""
        if isinstance(weight, WeightedSum):
            self.value += weight.value
            self.variance += weight.variance
        else:
            self.value += weight
            self.variance += weight * weight

    def __iadd__(self, other: float | WeightedSum) -> Self:
        self(other)
        return self

    def __add__(self, other: float | WeightedSum) -> WeightedSum:
        result = copy.copy(self)
        result(other)
        return result

    def __imul__(self, factor: float) -> Self:
        self.value *= factor
        self.variance *= factor * factor
        return self

    def __itruediv__(self, factor: float) -> Self:
        return self.__imul__(1.0 / factor)
