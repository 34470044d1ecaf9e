"""Tick label formatters.

A formatter is any ``Callable[[float], str]``. The factories here cover the
common cases: printf-style numbers, scaled values and angles with hemisphere
suffixes. Angle formatters take tick values in radians.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable

TickFormatter = Callable[[float], str]


def fixed_format(fmt: str) -> TickFormatter:
    """Format ticks with a printf-style format, e.g. ``fixed_format("%.2f")``."""
    return lambda t: fmt % t


def scaled(fmt: str, factor: float) -> TickFormatter:
    """Multiply by ``factor`` before formatting (e.g. metres shown as km)."""
    return lambda t: fmt % (t * factor)


def to_degrees(fmt: str) -> TickFormatter:
    return lambda t: fmt % math.degrees(t)


def to_radians(fmt: str) -> TickFormatter:
    return lambda t: fmt % math.radians(t)


def to_degrees_lat(fmt: str) -> TickFormatter:
    """Latitude in degrees with an N/S suffix; the equator is labelled S."""
    return lambda t: (fmt % abs(math.degrees(t))) + ("N" if t > 0 else "S")


def to_degrees_lon(fmt: str) -> TickFormatter:
    """Longitude in degrees with an E/W suffix; the prime meridian is labelled W."""
    return lambda t: (fmt % abs(math.degrees(t))) + ("E" if t > 0 else "W")


def to_degrees_east_lon(fmt: str) -> TickFormatter:
    """East longitude wrapped to [0, 360) degrees."""

    def _fmt(t: float) -> str:
        deg = math.degrees(t)
        if deg < 0:
            deg += 360
        if deg >= 360:
            deg -= 360
        return (fmt % deg) + "E"

    return _fmt


def to_degrees_west_lon(fmt: str) -> TickFormatter:
    """West longitude wrapped to [0, 360] degrees."""

    def _fmt(t: float) -> str:
        deg = -math.degrees(t)
        if deg < 0:
            deg += 360
        if deg > 360:
            deg -= 360
        return (fmt % deg) + "W"

    return _fmt


def label_ticks(ticks: Iterable[float], formatter: TickFormatter) -> dict[float, str]:
    """Map each tick to its label, preserving tick order."""
    return {t: formatter(t) for t in ticks}
