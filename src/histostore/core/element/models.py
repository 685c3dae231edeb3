"""Cell value protocols.

A cell is either a plain number or an accumulator object that owns its own
update rule. Both are driven through one `ElementAdaptor` interface.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Accumulator(Protocol):
    """Stateful cell: `cell()` counts one entry, `cell(weight)` adds a weighted one."""

    def __call__(self, *weight: Any) -> Any: ...


class ElementAdaptor[V](Protocol):
    """Applies accumulation to a single cell value.

    Every method returns the updated cell. For immutable numbers this is a new
    object that the caller has to store; accumulators are updated in place and
    returned as-is.
    """

    def inc(self, value: V) -> V:
        """Unweighted increment."""
        ...

    def add(self, value: V, weight: Any) -> V:
        """Weighted addition."""
        ...

    def scale(self, value: V, factor: float) -> V:
        """In-place scalar multiplication."""
        ...
