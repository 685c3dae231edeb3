"""Axis collaborators: the axis protocol and the bin interval view."""

from histostore.axis.interval import IntervalView
from histostore.axis.protocol import Axis, Interval

__all__ = [
    "Axis",
    "Interval",
    "IntervalView",
]
