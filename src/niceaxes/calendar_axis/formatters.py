"""ISO 8601 tick label formatters for continuous time axes."""

from __future__ import annotations

from typing import Optional

from niceaxes.axis.labels import TickFormatter
from niceaxes.calendar_axis.time_conversion import CalendarFields, J2000Converter, TimeConverter


def _to_millis(t: float, converter: TimeConverter) -> tuple[CalendarFields, int, int]:
    # Round in continuous time first so the seconds field never shows 60.
    fields = converter.to_calendar(round(t * 1000) / 1000)
    sec, millis = divmod(round(fields.second * 1000), 1000)
    return fields, int(sec), int(millis)


def iso_calendar(converter: Optional[TimeConverter] = None) -> TickFormatter:
    """Format ticks as ``YYYY-MM-DDTHH:MM:SS.sss``."""
    conv = converter or J2000Converter()

    def _fmt(t: float) -> str:
        f, sec, millis = _to_millis(t, conv)
        return "%04d-%02d-%02dT%02d:%02d:%02d.%03d" % (f.year, f.month, f.day, f.hour, f.minute, sec, millis)

    return _fmt


def iso_day_of_year(converter: Optional[TimeConverter] = None) -> TickFormatter:
    """Format ticks as ``YYYY-DDDTHH:MM:SS.sss``."""
    conv = converter or J2000Converter()

    def _fmt(t: float) -> str:
        f, sec, millis = _to_millis(t, conv)
        return "%04d-%03dT%02d:%02d:%02d.%03d" % (f.year, f.day_of_year, f.hour, f.minute, sec, millis)

    return _fmt
