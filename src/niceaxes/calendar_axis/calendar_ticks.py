"""Calendar-aware ticks for continuous time axes.

A generation call picks one calendar step (a unit such as "month" plus a small
multiplier such as 3) so that the number of major ticks lands close to the
requested target, places major ticks on the step's calendar boundaries and
minor ticks on a finer sub-step, and builds labels that drop calendar fields
which do not change across the visible ticks.

Example: 2035-11-05T16:02 .. 2036-01-24T12:30 with a target of 9 picks "every week":

    major labels  2035-11-12, 2035-11-19, ..., 2036-01-21
    context       ""  (the year changes, so it stays in every label)
"""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from niceaxes.axis.config import CalendarConfig
from niceaxes.calendar_axis.time_conversion import CalendarFields, J2000Converter, TimeConverter
from niceaxes.errors import InvalidRange
from niceaxes.utils.logging import get_logger

logger = get_logger(__name__)

_US_PER_SECOND = 1_000_000
_US_PER_DAY = 86_400 * _US_PER_SECOND


class CalendarUnit(Enum):
    """Calendar units, finest first."""
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    DECADE = "decade"


class Granularity(Enum):
    """Finest calendar field shown in a tick label."""
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    DECADE = "decade"


# Nominal lengths, only used to estimate how many boundaries a span crosses.
NOMINAL_SECONDS: dict[CalendarUnit, float] = {
    CalendarUnit.SECOND: 1.0,
    CalendarUnit.MINUTE: 60.0,
    CalendarUnit.HOUR: 3600.0,
    CalendarUnit.DAY: 86400.0,
    CalendarUnit.WEEK: 7 * 86400.0,
    CalendarUnit.MONTH: 30.436875 * 86400.0,
    CalendarUnit.YEAR: 365.2425 * 86400.0,
    CalendarUnit.DECADE: 3652.425 * 86400.0,
}

_FIXED_LENGTH_UNITS = (CalendarUnit.SECOND, CalendarUnit.MINUTE, CalendarUnit.HOUR)


@dataclass(frozen=True)
class CalendarStep:
    """Major step ``multiplier`` x ``unit`` and the finer step used for minor ticks.

    Fixed-length multipliers always divide the next coarser unit (e.g. 15
    minutes divides an hour) so boundaries stay aligned across rollovers.
    """

    unit: CalendarUnit
    multiplier: float
    minor_unit: CalendarUnit
    minor_multiplier: float

    @property
    def nominal_seconds(self) -> float:
        return self.multiplier * NOMINAL_SECONDS[self.unit]

    @property
    def granularity(self) -> Granularity:
        if self.unit is CalendarUnit.WEEK:
            return Granularity.DAY
        return Granularity(self.unit.value)

    def describe(self) -> str:
        return f"{self.multiplier:g} {self.unit.value}"


def _steps(unit: CalendarUnit, table: list[tuple[float, CalendarUnit, float]]) -> list[CalendarStep]:
    return [CalendarStep(unit, m, mu, mm) for m, mu, mm in table]


S, MI, H, D, W, MO, Y, DE = (
    CalendarUnit.SECOND,
    CalendarUnit.MINUTE,
    CalendarUnit.HOUR,
    CalendarUnit.DAY,
    CalendarUnit.WEEK,
    CalendarUnit.MONTH,
    CalendarUnit.YEAR,
    CalendarUnit.DECADE,
)

# Finest first.
CANDIDATE_STEPS: tuple[CalendarStep, ...] = tuple(
    _steps(S, [
        (0.001, S, 0.0002), (0.002, S, 0.0005), (0.005, S, 0.001),
        (0.01, S, 0.002), (0.02, S, 0.005), (0.05, S, 0.01),
        (0.1, S, 0.02), (0.2, S, 0.05), (0.5, S, 0.1),
        (1, S, 0.2), (2, S, 0.5), (5, S, 1), (10, S, 2), (15, S, 5), (30, S, 5),
    ])
    + _steps(MI, [(1, S, 10), (2, S, 30), (5, MI, 1), (10, MI, 2), (15, MI, 5), (30, MI, 5)])
    + _steps(H, [(1, MI, 15), (2, MI, 30), (3, H, 1), (6, H, 1), (12, H, 3)])
    + _steps(D, [(1, H, 6), (2, H, 12)])
    + _steps(W, [(1, D, 1), (2, D, 1)])
    + _steps(MO, [(1, D, 7), (2, MO, 1), (3, MO, 1), (6, MO, 1)])
    + _steps(Y, [(1, MO, 3), (2, MO, 6), (5, Y, 1)])
    + _steps(DE, [(1, Y, 2), (2, Y, 5), (5, DE, 1), (10, DE, 2), (20, DE, 5), (50, DE, 10), (100, DE, 20)])
)

del S, MI, H, D, W, MO, Y, DE


@dataclass(frozen=True)
class CalendarTick:
    """A major tick: continuous time, shared label granularity and label text."""

    value: float
    granularity: Granularity
    label: str


@dataclass(frozen=True)
class CalendarTickSet:
    """Result of one calendar tick generation call.

    Attributes:
        step: The chosen calendar step, shared by every major tick.
        major: Major ticks in increasing time order.
        minor: Minor tick times, excluding major tick times.
        context: Calendar fields that are constant across the major ticks and
            therefore left out of each label (e.g. ``"2035"``), or ``""``.
        title: The axis label with the context appended in brackets.
    """

    step: CalendarStep
    major: tuple[CalendarTick, ...]
    minor: tuple[float, ...]
    context: str
    title: str

    @property
    def granularity(self) -> Granularity:
        return self.step.granularity

    @property
    def values(self) -> tuple[float, ...]:
        return tuple(t.value for t in self.major)

    @property
    def labels(self) -> dict[float, str]:
        return {t.value: t.label for t in self.major}


# -----------------------------------------------------------------------------
# Calendar boundary arithmetic
# -----------------------------------------------------------------------------


def _split_day(fields: CalendarFields) -> tuple[int, int]:
    """(proleptic ordinal, microseconds into the day)."""
    ordinal = date(fields.year, fields.month, fields.day).toordinal()
    us = ((fields.hour * 60 + fields.minute) * 60) * _US_PER_SECOND + round(fields.second * _US_PER_SECOND)
    return ordinal, us


def _join_day(ordinal: int, us: int) -> CalendarFields:
    extra_days, us = divmod(us, _US_PER_DAY)
    d = date.fromordinal(ordinal + extra_days)
    seconds_us = us % (60 * _US_PER_SECOND)
    minutes = us // (60 * _US_PER_SECOND)
    return CalendarFields(
        d.year, d.month, d.day, minutes // 60, minutes % 60, seconds_us / _US_PER_SECOND
    )


def _fixed_step_us(unit: CalendarUnit, multiplier: float) -> int:
    return round(multiplier * NOMINAL_SECONDS[unit] * _US_PER_SECOND)


def floor_to_step(fields: CalendarFields, unit: CalendarUnit, multiplier: float) -> CalendarFields:
    """Latest boundary of ``multiplier`` x ``unit`` at or before ``fields``."""
    m = int(multiplier) if unit not in _FIXED_LENGTH_UNITS else multiplier
    if unit in _FIXED_LENGTH_UNITS:
        ordinal, us = _split_day(fields)
        step_us = _fixed_step_us(unit, m)
        return _join_day(ordinal, us - us % step_us)
    if unit is CalendarUnit.DAY:
        return CalendarFields(fields.year, fields.month, fields.day - (fields.day - 1) % m)
    if unit is CalendarUnit.WEEK:
        # date(1, 1, 1) (ordinal 1) is a Monday
        ordinal = date(fields.year, fields.month, fields.day).toordinal()
        d = date.fromordinal(ordinal - (ordinal - 1) % (7 * m))
        return CalendarFields(d.year, d.month, d.day)
    if unit is CalendarUnit.MONTH:
        return CalendarFields(fields.year, fields.month - (fields.month - 1) % m)
    years = m * (10 if unit is CalendarUnit.DECADE else 1)
    return CalendarFields(fields.year - fields.year % years)


def next_boundary(fields: CalendarFields, unit: CalendarUnit, multiplier: float) -> CalendarFields:
    """Boundary one step after ``fields``, which must already be on a boundary."""
    m = int(multiplier) if unit not in _FIXED_LENGTH_UNITS else multiplier
    if unit in _FIXED_LENGTH_UNITS:
        ordinal, us = _split_day(fields)
        return _join_day(ordinal, us + _fixed_step_us(unit, m))
    if unit is CalendarUnit.DAY:
        day = fields.day + m
        if day > calendar.monthrange(fields.year, fields.month)[1]:
            year, month = divmod(fields.year * 12 + fields.month, 12)
            return CalendarFields(year, month + 1, 1)
        return CalendarFields(fields.year, fields.month, day)
    if unit is CalendarUnit.WEEK:
        d = date.fromordinal(date(fields.year, fields.month, fields.day).toordinal() + 7 * m)
        return CalendarFields(d.year, d.month, d.day)
    if unit is CalendarUnit.MONTH:
        year, month = divmod(fields.year * 12 + fields.month - 1 + m, 12)
        return CalendarFields(year, month + 1)
    years = m * (10 if unit is CalendarUnit.DECADE else 1)
    return CalendarFields(fields.year + years)


def _field_key(f: CalendarFields) -> tuple[int, int, int, int, int, int]:
    return (f.year, f.month, f.day, f.hour, f.minute, round(f.second * _US_PER_SECOND))


def _boundaries(
    min_t: float,
    max_t: float,
    unit: CalendarUnit,
    multiplier: float,
    converter: TimeConverter,
) -> list[tuple[float, CalendarFields]]:
    """All ``(time, fields)`` boundaries of a step inside ``[min_t, max_t]``.

    Boundaries are compared as calendar fields first, so the floored start
    (which may precede the converter's supported range) is never converted.
    """
    start = converter.to_calendar(min_t)
    stop = _field_key(converter.to_calendar(max_t))
    first = _field_key(start)
    fields = floor_to_step(start, unit, multiplier)
    out: list[tuple[float, CalendarFields]] = []
    while _field_key(fields) <= stop:
        if _field_key(fields) >= first:
            t = converter.to_continuous(fields)
            if min_t <= t <= max_t:
                out.append((t, fields))
        fields = next_boundary(fields, unit, multiplier)
    return out


# -----------------------------------------------------------------------------
# Step selection
# -----------------------------------------------------------------------------


def choose_step(span: float, target: int, config: Optional[CalendarConfig] = None) -> int:
    """Index into CANDIDATE_STEPS whose estimated tick count is closest to ``target``.

    Candidates estimated to exceed ``config.max_ratio * target`` ticks are
    skipped; ties go to the coarser step. Spans too long for every candidate
    fall back to the coarsest.
    """
    cfg = config or CalendarConfig()
    best: Optional[int] = None
    best_score = math.inf
    for i, step in enumerate(CANDIDATE_STEPS):
        estimate = span / step.nominal_seconds
        if estimate > cfg.max_ratio * target:
            continue
        score = abs(estimate - target)
        if score <= best_score:
            best, best_score = i, score
    if best is None:
        logger.warning(
            "span of %g s is too long for target %d; using the coarsest step (%s)",
            span, target, CANDIDATE_STEPS[-1].describe(),
        )
        return len(CANDIDATE_STEPS) - 1
    return best


# -----------------------------------------------------------------------------
# Labels
# -----------------------------------------------------------------------------

# Index of the finest field (year=0 .. second=5) that a granularity shows.
_FINEST_FIELD: dict[Granularity, int] = {
    Granularity.DECADE: 0,
    Granularity.YEAR: 0,
    Granularity.MONTH: 1,
    Granularity.DAY: 2,
    Granularity.HOUR: 4,
    Granularity.MINUTE: 4,
    Granularity.SECOND: 5,
}


def _date_values(f: CalendarFields) -> tuple[int, int, int]:
    return (f.year, f.month, f.day)


def _format_date(f: CalendarFields, first: int, last: int) -> str:
    if last == 1 and first == 1:
        return calendar.month_abbr[f.month]
    parts = ("%04d" % f.year, "%02d" % f.month, "%02d" % f.day)
    return "-".join(parts[first:last + 1])


def _second_decimals(step: CalendarStep) -> int:
    if step.unit is CalendarUnit.SECOND and step.multiplier < 1:
        return math.ceil(-math.log10(step.multiplier))
    return 0


def _format_time(f: CalendarFields, granularity: Granularity, decimals: int) -> str:
    text = "%02d:%02d" % (f.hour, f.minute)
    if granularity is Granularity.SECOND:
        if decimals:
            text += ":%0*.*f" % (3 + decimals, decimals, f.second)
        else:
            text += ":%02d" % round(f.second)
    return text


def format_calendar_labels(
    boundaries: list[CalendarFields], step: CalendarStep
) -> tuple[list[str], str]:
    """Labels for major tick fields plus the shared context string.

    Date fields coarser than the first one that varies across ``boundaries``
    are moved into the context. Fields down to the step's granularity are
    always shown; time of day is always shown as ``HH:MM``.
    """
    granularity = step.granularity
    finest = _FINEST_FIELD[granularity]
    last_date = min(finest, 2)
    has_time = finest > 2

    first: Optional[int] = None
    for idx in range(last_date + 1):
        if len({_date_values(f)[idx] for f in boundaries}) > 1:
            first = idx
            break
    if first is None and not has_time:
        first = last_date

    if boundaries:
        context_last = (first - 1) if first is not None else last_date
        context = _format_date(boundaries[0], 0, context_last) if context_last >= 0 else ""
    else:
        context = ""

    decimals = _second_decimals(step)
    labels = []
    for f in boundaries:
        pieces = []
        if first is not None:
            pieces.append(_format_date(f, first, last_date))
        if has_time:
            pieces.append(_format_time(f, granularity, decimals))
        labels.append(" ".join(pieces))
    return labels, context


# -----------------------------------------------------------------------------
# Public entry point
# -----------------------------------------------------------------------------


def generate_calendar_ticks(
    min_t: float,
    max_t: float,
    label: str = "",
    target: int = 5,
    *,
    converter: Optional[TimeConverter] = None,
    config: Optional[CalendarConfig] = None,
) -> CalendarTickSet:
    """Major/minor ticks and labels for a continuous time range.

    Args:
        min_t: Start of the range in the converter's continuous seconds.
        max_t: End of the range, greater than ``min_t``.
        label: Axis label; the returned ``title`` appends the label context.
        target: Desired number of major ticks (a hint).
        converter: Time converter. Defaults to :class:`J2000Converter`.
        config: Step selection tuning.

    Returns:
        CalendarTickSet whose major ticks all use one calendar step.

    Raises:
        InvalidRange: If the range is not finite or ``max_t <= min_t``.
        ValueError: If ``target < 1``.
        TimeConversionError: Propagated from the converter.
    """
    if not (math.isfinite(min_t) and math.isfinite(max_t)):
        raise InvalidRange(f"time range must be finite, got [{min_t}, {max_t}]")
    if max_t <= min_t:
        raise InvalidRange(f"time range end {max_t} must be greater than start {min_t}")
    if target < 1:
        raise ValueError(f"target must be >= 1, got {target}")

    converter = converter or J2000Converter()
    index = choose_step(max_t - min_t, target, config)
    needed = min(2, target)

    step = CANDIDATE_STEPS[index]
    major = _boundaries(min_t, max_t, step.unit, step.multiplier, converter)
    while len(major) < needed and index > 0:
        logger.debug("step %s gives %d major ticks, trying a finer step", step.describe(), len(major))
        index -= 1
        step = CANDIDATE_STEPS[index]
        major = _boundaries(min_t, max_t, step.unit, step.multiplier, converter)

    major_times = {t for t, _ in major}
    minor = tuple(
        t
        for t, _ in _boundaries(min_t, max_t, step.minor_unit, step.minor_multiplier, converter)
        if t not in major_times
    )

    texts, context = format_calendar_labels([f for _, f in major], step)
    ticks = tuple(
        CalendarTick(value=t, granularity=step.granularity, label=text)
        for (t, _), text in zip(major, texts)
    )
    title = f"{label} [{context}]" if context and label else (label or context)
    logger.debug(
        "calendar ticks over %g s: every %s, %d major, %d minor",
        max_t - min_t, step.describe(), len(ticks), len(minor),
    )
    return CalendarTickSet(step=step, major=ticks, minor=minor, context=context, title=title)
