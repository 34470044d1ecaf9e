"""Conversion between continuous time and calendar fields.

The calendar tick generator only talks to a :class:`TimeConverter`. Callers
with their own time standard (TDB, GPS, leap-second aware UTC) pass their own
converter; :class:`J2000Converter` is the default.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Protocol

import numpy as np
import pandas as pd

from niceaxes.errors import TimeConversionError


@dataclass(frozen=True)
class CalendarFields:
    """Broken-down calendar time. ``second`` may carry a fractional part."""

    year: int
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    @property
    def day_of_year(self) -> int:
        return date(self.year, self.month, self.day).toordinal() - date(self.year, 1, 1).toordinal() + 1


class TimeConverter(Protocol):
    """Two-way mapping between continuous seconds and calendar fields.

    Both methods raise :class:`~niceaxes.errors.TimeConversionError` for values
    they cannot represent.
    """

    def to_calendar(self, t: float) -> CalendarFields:
        ...

    def to_continuous(self, fields: CalendarFields) -> float:
        ...


class J2000Converter:
    """Seconds past 2000-01-01T12:00:00 on a uniform (no leap second) UTC scale.

    Backed by pandas ``Timestamp``/``Timedelta`` at microsecond resolution.
    Both directions accept calendar dates from ``pd.Timestamp.min`` to
    ``pd.Timestamp.max`` (1677-09-21 to 2262-04-11); anything outside raises
    :class:`~niceaxes.errors.TimeConversionError`.
    """

    EPOCH = pd.Timestamp("2000-01-01T12:00:00").as_unit("us")
    MIN = pd.Timestamp.min
    MAX = pd.Timestamp.max

    def _check_bounds(self, ts: pd.Timestamp, source: object) -> None:
        if ts < self.MIN or ts > self.MAX:
            raise TimeConversionError(f"{source} is outside {self.MIN} .. {self.MAX}")

    def to_calendar(self, t: float) -> CalendarFields:
        if not math.isfinite(t):
            raise TimeConversionError(f"cannot convert non-finite time {t}")
        try:
            # microsecond units reach far beyond J2000 +/- 292 years
            ts = self.EPOCH + pd.Timedelta(np.timedelta64(round(t * 1_000_000), "us"))
        except (OverflowError, ValueError) as exc:
            raise TimeConversionError(f"time {t} s past J2000 is out of range") from exc
        self._check_bounds(ts, f"time {t} s past J2000")
        second = ts.second + ts.microsecond / 1e6
        return CalendarFields(ts.year, ts.month, ts.day, ts.hour, ts.minute, second)

    def to_continuous(self, fields: CalendarFields) -> float:
        whole = math.floor(fields.second)
        micro = round((fields.second - whole) * 1_000_000)
        try:
            ts = pd.Timestamp(
                year=fields.year,
                month=fields.month,
                day=fields.day,
                hour=fields.hour,
                minute=fields.minute,
                second=int(whole),
            ).as_unit("us") + pd.Timedelta(np.timedelta64(micro, "us"))
        except (OverflowError, ValueError) as exc:
            raise TimeConversionError(f"cannot convert calendar fields {fields}") from exc
        self._check_bounds(ts, f"calendar fields {fields}")
        return (ts - self.EPOCH).total_seconds()
