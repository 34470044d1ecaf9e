"""Major and minor tick positions for numeric axes.

Linear axes step through the 1-2-5 "nice number" sequence. Log axes put a major
tick on every power of ten and minors on 2..9 times each power.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

from niceaxes.axis.config import Scale, TickConfig
from niceaxes.axis.rounding import (
    ceil_log10,
    floor_log10,
    scale_by_power_of_ten,
    snap_quotient,
)
from niceaxes.errors import InvalidRange
from niceaxes.utils.logging import get_logger

logger = get_logger(__name__)

# Index quotients go through three roundings.
_INDEX_SNAP_ULPS = 16

NICE_MULTIPLIERS: tuple[int, ...] = (1, 2, 5)
LOG_MINOR_MULTIPLIERS: tuple[int, ...] = (2, 3, 4, 5, 6, 7, 8, 9)


@dataclass(frozen=True)
class NiceStep:
    """A step of ``multiplier * 10**exponent`` with ``multiplier`` in 1, 2, 5."""

    multiplier: int
    exponent: int

    @property
    def value(self) -> float:
        return scale_by_power_of_ten(float(self.multiplier), self.exponent)

    @property
    def minor_parts(self) -> int:
        """Number of minor intervals per major interval."""
        return 4 if self.multiplier == 5 else 5

    def index_range(self, begin: float, end: float, parts: int = 1) -> range:
        """Indices ``i`` with ``begin <= i * value / parts <= end``."""
        lo = scale_by_power_of_ten(begin, -self.exponent) * parts / self.multiplier
        hi = scale_by_power_of_ten(end, -self.exponent) * parts / self.multiplier
        lo = snap_quotient(lo, _INDEX_SNAP_ULPS)
        hi = snap_quotient(hi, _INDEX_SNAP_ULPS)
        return range(math.ceil(lo), math.floor(hi) + 1)

    def position(self, index: int, parts: int = 1) -> float:
        if parts == 1:
            return scale_by_power_of_ten(float(index * self.multiplier), self.exponent)
        return scale_by_power_of_ten(index * self.multiplier / parts, self.exponent)


@dataclass(frozen=True)
class TickSet:
    """Tick positions for one axis.

    Attributes:
        major: Strictly increasing major tick positions.
        minor: Strictly increasing minor tick positions. Never contains a major
            position on linear or log axes built here.
        step: The major step on a linear axis, ``None`` otherwise.
    """

    major: tuple[float, ...]
    minor: tuple[float, ...] = ()
    step: Optional[float] = None


def iter_nice_steps(start_exponent: int) -> Iterator[NiceStep]:
    """Yield 1-2-5 steps in increasing order starting at ``10**start_exponent``."""
    exponent = start_exponent
    while True:
        for multiplier in NICE_MULTIPLIERS:
            yield NiceStep(multiplier, exponent)
        exponent += 1


def choose_major_step(begin: float, end: float, config: Optional[TickConfig] = None) -> NiceStep:
    """Smallest 1-2-5 step giving at most ``config.max_major`` ticks in ``[begin, end]``.

    Because consecutive nice steps differ by at most 2.5x, the chosen step also
    gives at least ``max_major / 2.5`` ticks, which is the lower end of the
    default 4 to 10 band.
    """
    cfg = config or TickConfig()
    span = end - begin
    # Start an order of magnitude finer than span/max_major so the first
    # candidate always has too many ticks.
    start = floor_log10(span / cfg.max_major) - 1
    for step in iter_nice_steps(start):
        count = len(step.index_range(begin, end))
        if count <= cfg.max_major:
            if count < cfg.min_major:
                logger.debug(
                    "step %s gives %d major ticks, below min_major=%d",
                    step.value, count, cfg.min_major,
                )
            return step
    raise AssertionError("unreachable")  # pragma: no cover


def _linear_ticks(begin: float, end: float, config: Optional[TickConfig]) -> TickSet:
    step = choose_major_step(begin, end, config)
    major = [step.position(i) for i in step.index_range(begin, end)]

    parts = step.minor_parts
    minor = [
        step.position(j, parts)
        for j in step.index_range(begin, end, parts)
        if j % parts != 0
    ]

    # Near float resolution neighbouring indices can map to the same position.
    major = sorted({t for t in major if begin <= t <= end})
    minor = sorted({t for t in minor if begin <= t <= end}.difference(major))
    logger.debug(
        "linear ticks [%g, %g]: step=%g, %d major, %d minor",
        begin, end, step.value, len(major), len(minor),
    )
    return TickSet(major=tuple(major), minor=tuple(minor), step=step.value)


def _log_ticks(begin: float, end: float) -> TickSet:
    first_decade = floor_log10(begin)
    major = [
        scale_by_power_of_ten(1.0, k)
        for k in range(ceil_log10(begin), floor_log10(end) + 1)
    ]
    minor = [
        scale_by_power_of_ten(float(m), k)
        for k in range(first_decade, floor_log10(end) + 1)
        for m in LOG_MINOR_MULTIPLIERS
    ]

    major = [t for t in major if begin <= t <= end]
    minor = [t for t in minor if begin <= t <= end]
    logger.debug("log ticks [%g, %g]: %d major, %d minor", begin, end, len(major), len(minor))
    return TickSet(major=tuple(major), minor=tuple(minor))


def compute_ticks(
    begin: float,
    end: float,
    scale: Scale = Scale.LINEAR,
    *,
    config: Optional[TickConfig] = None,
) -> TickSet:
    """Compute major and minor ticks for ``[begin, end]``.

    Args:
        begin: Lower bound of the axis.
        end: Upper bound of the axis. ``begin == end`` yields a single major tick.
        scale: Linear or logarithmic.
        config: Target band for the number of major ticks (linear only).

    Returns:
        TickSet whose ticks all satisfy ``begin <= tick <= end``.

    Raises:
        InvalidRange: If a bound is not finite, ``begin > end``, or a log axis
            has ``begin <= 0``, or the span ``end - begin`` overflows.
    """
    if not (math.isfinite(begin) and math.isfinite(end)):
        raise InvalidRange(f"tick range must be finite, got [{begin}, {end}]")
    if begin > end:
        raise InvalidRange(f"tick range begin {begin} is greater than end {end}")
    if scale is Scale.LOG and begin <= 0:
        raise InvalidRange(f"log ticks require begin > 0, got {begin}")

    if begin == end:
        logger.debug("degenerate tick range at %g", begin)
        return TickSet(major=(float(begin),))

    if not math.isfinite(end - begin):
        raise InvalidRange(f"tick range [{begin}, {end}] is too wide to represent its span")

    if scale is Scale.LOG:
        return _log_ticks(begin, end)
    return _linear_ticks(begin, end, config)
