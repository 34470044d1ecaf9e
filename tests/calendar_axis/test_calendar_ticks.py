"""Unit tests for calendar-aware tick generation."""

from __future__ import annotations

import pytest

from niceaxes.axis.config import CalendarConfig
from niceaxes.calendar_axis import (
    CANDIDATE_STEPS,
    CalendarFields,
    CalendarUnit,
    Granularity,
    J2000Converter,
    generate_calendar_ticks,
)
from niceaxes.calendar_axis.calendar_ticks import choose_step, floor_to_step, next_boundary
from niceaxes.errors import InvalidRange, TimeConversionError

CONV = J2000Converter()


def _t(*args) -> float:
    return CONV.to_continuous(CalendarFields(*args))


def _assert_consistent(ticks, min_t: float, max_t: float) -> None:
    values = ticks.values
    assert all(min_t <= v <= max_t for v in values)
    assert all(a < b for a, b in zip(values, values[1:]))
    assert {t.granularity for t in ticks.major} <= {ticks.granularity}
    assert not set(values) & set(ticks.minor)
    assert all(min_t <= v <= max_t for v in ticks.minor)


def test_fifty_years_target_five() -> None:
    """A 50-year span with target 5 gives decade ticks."""
    max_t = 50 * 365.25 * 86400.0
    ticks = generate_calendar_ticks(0.0, max_t, "Time", 5)
    assert ticks.step.unit is CalendarUnit.DECADE
    assert ticks.granularity is Granularity.DECADE
    assert [t.label for t in ticks.major] == ["2010", "2020", "2030", "2040", "2050"]
    assert 5 / 2 <= len(ticks.major) <= 5 * 2
    assert ticks.context == ""
    assert ticks.title == "Time"
    _assert_consistent(ticks, 0.0, max_t)


def test_weekly_ticks_across_year_boundary() -> None:
    """About eleven weeks with target 9 picks weekly ticks on Mondays."""
    min_t = _t(2035, 11, 5, 16, 2)
    max_t = _t(2036, 1, 24, 12, 30)
    ticks = generate_calendar_ticks(min_t, max_t, "UTC", 9)
    assert ticks.step.unit is CalendarUnit.WEEK
    assert ticks.granularity is Granularity.DAY
    labels = [t.label for t in ticks.major]
    assert len(labels) == 11
    assert labels[0] == "2035-11-12"
    assert labels[-1] == "2036-01-21"
    assert ticks.context == ""
    # daily minor ticks between the Mondays
    assert len(ticks.minor) > len(labels)
    _assert_consistent(ticks, min_t, max_t)


def test_constant_fields_move_to_context() -> None:
    """Year and month shared by all ticks go into the context and title."""
    min_t = _t(2035, 3, 1)
    max_t = _t(2035, 3, 20)
    ticks = generate_calendar_ticks(min_t, max_t, "Time", 5)
    assert [t.label for t in ticks.major] == ["05", "12", "19"]
    assert ticks.context == "2035-03"
    assert ticks.title == "Time [2035-03]"


def test_month_labels_use_abbreviations() -> None:
    """Month steps inside one year are labelled by month name."""
    ticks = generate_calendar_ticks(_t(2035, 1, 15), _t(2035, 12, 20), "", 5)
    assert ticks.step.unit is CalendarUnit.MONTH
    assert [t.label for t in ticks.major] == ["Mar", "May", "Jul", "Sep", "Nov"]
    assert ticks.context == "2035"
    assert ticks.title == "2035"


def test_hour_labels_show_time_of_day() -> None:
    """Hourly ticks within one day show HH:MM with the date as context."""
    ticks = generate_calendar_ticks(_t(2035, 3, 5, 0, 30), _t(2035, 3, 5, 23), "", 5)
    assert ticks.step.unit is CalendarUnit.HOUR
    assert [t.label for t in ticks.major] == ["06:00", "12:00", "18:00"]
    assert ticks.context == "2035-03-05"


def test_sub_second_ticks() -> None:
    """Sub-second spans use fractional-second steps and labels."""
    base = _t(2035, 3, 5, 10)
    ticks = generate_calendar_ticks(base + 0.1, base + 0.9, "", 5)
    assert ticks.step.unit is CalendarUnit.SECOND
    assert ticks.step.multiplier == pytest.approx(0.2)
    assert [t.label for t in ticks.major] == ["10:00:00.2", "10:00:00.4", "10:00:00.6", "10:00:00.8"]
    assert ticks.context == "2035-03-05"
    _assert_consistent(ticks, base + 0.1, base + 0.9)


@pytest.mark.parametrize(
    "span",
    [0.05, 7.0, 600.0, 5 * 3600.0, 3 * 86400.0, 45 * 86400.0, 400 * 86400.0, 9000 * 86400.0],
)
def test_single_granularity_over_many_spans(span: float) -> None:
    """Every call uses one step, and ticks stay inside the range."""
    min_t = _t(2021, 6, 17, 3, 14, 15.9)
    ticks = generate_calendar_ticks(min_t, min_t + span, "", 5)
    assert len(ticks.major) >= 2
    _assert_consistent(ticks, min_t, min_t + span)


def test_choose_step_prefers_closest_without_overshoot() -> None:
    """Step choice rejects candidates above max_ratio * target."""
    index = choose_step(50 * 365.25 * 86400.0, 5)
    assert CANDIDATE_STEPS[index].unit is CalendarUnit.DECADE
    assert CANDIDATE_STEPS[index].multiplier == 1
    strict = choose_step(86400.0, 5, CalendarConfig(max_ratio=1.0))
    assert 86400.0 / CANDIDATE_STEPS[strict].nominal_seconds <= 5


def test_boundary_arithmetic() -> None:
    """floor_to_step and next_boundary handle month and week rollovers."""
    f = CalendarFields(2035, 11, 19, 8, 45)
    assert floor_to_step(f, CalendarUnit.MONTH, 3) == CalendarFields(2035, 10)
    assert next_boundary(CalendarFields(2035, 10), CalendarUnit.MONTH, 3) == CalendarFields(2036, 1)
    assert floor_to_step(f, CalendarUnit.WEEK, 1) == CalendarFields(2035, 11, 19)
    assert floor_to_step(f, CalendarUnit.MINUTE, 15) == CalendarFields(2035, 11, 19, 8, 45)
    assert next_boundary(CalendarFields(2035, 12, 31, 23, 45), CalendarUnit.MINUTE, 15) == CalendarFields(2036)


def test_invalid_arguments() -> None:
    """Empty ranges raise InvalidRange and target < 1 raises ValueError."""
    with pytest.raises(InvalidRange):
        generate_calendar_ticks(10.0, 10.0)
    with pytest.raises(InvalidRange):
        generate_calendar_ticks(10.0, 5.0)
    with pytest.raises(ValueError):
        generate_calendar_ticks(0.0, 100.0, target=0)


class _BrokenConverter:
    def to_calendar(self, t: float) -> CalendarFields:
        raise TimeConversionError(f"no calendar for {t}")

    def to_continuous(self, fields: CalendarFields) -> float:
        raise TimeConversionError(f"no time for {fields}")


def test_converter_errors_propagate() -> None:
    """Converter failures surface as TimeConversionError."""
    with pytest.raises(TimeConversionError):
        generate_calendar_ticks(0.0, 100.0, converter=_BrokenConverter())


def test_ticks_across_several_centuries() -> None:
    """A 1680..2260 range gets century ticks without touching 1600."""
    min_t = _t(1680)
    max_t = _t(2260)
    ticks = generate_calendar_ticks(min_t, max_t, "Year", 5)
    assert ticks.step.unit is CalendarUnit.DECADE
    assert [t.label for t in ticks.major] == ["1700", "1800", "1900", "2000", "2100", "2200"]
    _assert_consistent(ticks, min_t, max_t)
