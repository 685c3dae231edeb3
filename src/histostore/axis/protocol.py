"""Protocols for the axis collaborators of a storage.

Axes map values to bins and are implemented outside this package; the interval
view only needs the inverse mapping from a (fractional) bin position to a
coordinate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Axis(Protocol):
    """Axis exposing the coordinate at a bin position."""

    def value(self, position: float) -> float:
        """Coordinate at `position`; integer positions are bin edges."""
        ...


@runtime_checkable
class Interval(Protocol):
    """Anything with a lower and an upper edge."""

    def lower(self) -> float: ...
    def upper(self) -> float: ...
