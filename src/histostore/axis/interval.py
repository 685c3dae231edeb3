"""Read-only view of a single bin of an axis.

Usage:
    bin = IntervalView(axis, 3)
    bin.lower(), bin.upper(), bin.center(), bin.width()
"""

from __future__ import annotations

from typing import Any

from histostore.axis.protocol import Axis, Interval


class IntervalView[A: Axis]:
    """Edges, center and width of bin `index` of `axis`.

    The view keeps a reference to the axis and computes everything on access.

    Args:
        axis: Axis to view.
        index: Bin index.
    """

    __slots__ = ("_axis", "_index")

    def __init__(self, axis: A, index: int) -> None:
        self._axis = axis
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def lower(self) -> Any:
        """Return lower edge of bin."""
        return self._axis.value(self._index)

    def upper(self) -> Any:
        """Return upper edge of bin."""
        return self._axis.value(self._index + 1)

    def center(self) -> Any:
        """Return center of bin."""
        return self._axis.value(self._index + 0.5)

    def width(self) -> Any:
        """Return width of bin."""
        return self.upper() - self.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.lower() == other.lower() and self.upper() == other.upper()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"IntervalView(index={self._index}, lower={self.lower()!r}, upper={self.upper()!r})"
