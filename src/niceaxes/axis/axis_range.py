"""Clean axis bounds for linear and logarithmic scales.

Examples for a raw range of 0.01234567 .. 12.34567 on a linear axis:

    digits  begin      end
    1       0.01       20
    2       0.012      13
    3       0.0123     12.4
    4       0.01234    12.35

A log axis always snaps outward to whole powers of ten:
1.33 .. 4.55 -> 1 .. 10, 0.0133 .. 455 -> 0.01 .. 1000.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from niceaxes.axis.config import Scale, TickConfig
from niceaxes.axis.rounding import (
    ceil_log10,
    floor_log10,
    round_ceiling,
    round_floor,
    scale_by_power_of_ten,
)
from niceaxes.errors import InvalidDigits, InvalidRange
from niceaxes.utils.logging import get_logger

if TYPE_CHECKING:
    from niceaxes.axis.ticks import TickSet

logger = get_logger(__name__)


@dataclass(frozen=True)
class AxisRange:
    """Inclusive, increasing range for one axis.

    Attributes:
        begin: Lower bound.
        end: Upper bound, strictly greater than ``begin``.
        scale: ``Scale.LINEAR`` or ``Scale.LOG``. A log range requires ``begin > 0``.
    """

    begin: float
    end: float
    scale: Scale = Scale.LINEAR

    def __post_init__(self) -> None:
        if not (math.isfinite(self.begin) and math.isfinite(self.end)):
            raise InvalidRange(f"axis bounds must be finite, got [{self.begin}, {self.end}]")
        if self.begin >= self.end:
            raise InvalidRange(f"axis begin {self.begin} must be less than end {self.end}")
        if self.scale is Scale.LOG and self.begin <= 0:
            raise InvalidRange(f"log axis requires begin > 0, got {self.begin}")

    @property
    def length(self) -> float:
        return self.end - self.begin

    @property
    def middle(self) -> float:
        return (self.begin + self.end) / 2.0

    def contains(self, value: float) -> bool:
        """True if ``value`` lies in ``[begin, end]``."""
        return self.begin <= value <= self.end

    def clamp(self, value: float) -> float:
        """Clamp ``value`` into ``[begin, end]``."""
        return min(max(self.begin, value), self.end)

    def fraction(self, value: float) -> float:
        """Relative position of ``value`` along the axis (0 at begin, 1 at end).

        On a log axis the position is measured in log10 space. Values outside the
        range give fractions outside ``[0, 1]``.
        """
        if self.scale is Scale.LOG:
            if value <= 0:
                raise InvalidRange(f"log axis cannot place non-positive value {value}")
            lo, hi = math.log10(self.begin), math.log10(self.end)
            return (math.log10(value) - lo) / (hi - lo)
        return (value - self.begin) / self.length

    def value_at(self, fraction: float) -> float:
        """Inverse of :meth:`fraction`."""
        if self.scale is Scale.LOG:
            lo, hi = math.log10(self.begin), math.log10(self.end)
            return 10.0 ** (lo + fraction * (hi - lo))
        return self.begin + fraction * self.length

    def ticks(self, config: Optional[TickConfig] = None) -> "TickSet":
        """Major and minor ticks for this range. See :func:`niceaxes.axis.ticks.compute_ticks`."""
        from niceaxes.axis.ticks import compute_ticks

        return compute_ticks(self.begin, self.end, self.scale, config=config)


def get_linear_axis(raw_begin: float, raw_end: float, digits: int) -> AxisRange:
    """Return a linear range whose bounds have ``digits`` significant figures.

    The begin is rounded down and the end up, so the result always contains
    ``[raw_begin, raw_end]``.

    Raises:
        InvalidRange: If ``raw_begin >= raw_end`` or a bound is not finite.
        InvalidDigits: If ``digits < 1``.
    """
    if digits < 1:
        raise InvalidDigits(f"linear axis needs at least 1 significant digit, got {digits}")
    if not (math.isfinite(raw_begin) and math.isfinite(raw_end)):
        raise InvalidRange(f"axis bounds must be finite, got [{raw_begin}, {raw_end}]")
    if raw_begin >= raw_end:
        raise InvalidRange(f"raw begin {raw_begin} must be less than raw end {raw_end}")

    begin = round_floor(raw_begin, digits)
    end = round_ceiling(raw_end, digits)
    logger.debug("linear axis [%g, %g] -> [%g, %g] (%d digits)", raw_begin, raw_end, begin, end, digits)
    return AxisRange(begin, end, Scale.LINEAR)


def get_log_axis(raw_begin: float, raw_end: float) -> AxisRange:
    """Return a log range snapped outward to whole powers of ten.

    Raises:
        InvalidRange: If ``raw_begin <= 0`` or ``raw_end <= raw_begin``.
    """
    if not (math.isfinite(raw_begin) and math.isfinite(raw_end)):
        raise InvalidRange(f"axis bounds must be finite, got [{raw_begin}, {raw_end}]")
    if raw_begin <= 0:
        raise InvalidRange(f"log axis requires a positive begin, got {raw_begin}")
    if raw_end <= raw_begin:
        raise InvalidRange(f"raw begin {raw_begin} must be less than raw end {raw_end}")

    begin = scale_by_power_of_ten(1.0, floor_log10(raw_begin))
    end = scale_by_power_of_ten(1.0, ceil_log10(raw_end))
    logger.debug("log axis [%g, %g] -> [%g, %g]", raw_begin, raw_end, begin, end)
    return AxisRange(begin, end, Scale.LOG)
