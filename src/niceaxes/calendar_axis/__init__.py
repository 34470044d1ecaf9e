"""Calendar-aware tick generation for continuous time axes."""

from niceaxes.calendar_axis.calendar_ticks import (
    CANDIDATE_STEPS,
    CalendarStep,
    CalendarTick,
    CalendarTickSet,
    CalendarUnit,
    Granularity,
    generate_calendar_ticks,
)
from niceaxes.calendar_axis.formatters import iso_calendar, iso_day_of_year
from niceaxes.calendar_axis.time_conversion import CalendarFields, J2000Converter, TimeConverter

__all__ = [
    "CANDIDATE_STEPS",
    "CalendarFields",
    "CalendarStep",
    "CalendarTick",
    "CalendarTickSet",
    "CalendarUnit",
    "Granularity",
    "J2000Converter",
    "TimeConverter",
    "generate_calendar_ticks",
    "iso_calendar",
    "iso_day_of_year",
]
