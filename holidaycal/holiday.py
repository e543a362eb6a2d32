"""Holiday definitions and the rules that place them in a given year."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, Optional, Tuple


class ObservanceType(IntEnum):
    """The kind of holiday or special day being observed."""

    UNKNOWN = 0  # not set or not applicable
    PUBLIC = 1  # public / national / regional holiday
    BANK = 2  # bank holiday
    RELIGIOUS = 3  # religious holiday
    OTHER = 4  # all other holidays (school, work, etc.)


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, day: _dt.date) -> "Weekday":
        """Return the weekday of a date."""
        return cls(day.isoweekday() % 7)


@dataclass(frozen=True)
class AltDay:
    """An alternative day to observe a holiday falling on ``day``."""

    day: Weekday
    offset: int  # days to move the observance forward (+) or backward (-)


HolidayFn = Callable[["Holiday", int], Optional[_dt.date]]


def _make_date(year: int, month: int, day: int) -> _dt.date:
    """Build a date, carrying out-of-range months and days into neighbours."""
    carry, month_index = divmod(month - 1, 12)
    first = _dt.date(year + carry, month_index + 1, 1)
    return first + _dt.timedelta(days=day - 1)


@dataclass(frozen=True)
class Holiday:
    """Information about the type and occurrence of a holiday."""

    name: str = ""
    description: str = ""
    type: ObservanceType = ObservanceType.UNKNOWN
    start_year: int = 0
    end_year: int = 0
    exceptions: Optional[Tuple[int, ...]] = None

    month: int = 0
    day: int = 0
    weekday: Weekday = Weekday.SUNDAY
    offset: int = 0
    calc_offset: int = 0
    julian: bool = False
    observed: Optional[Tuple[AltDay, ...]] = None
    func: Optional[HolidayFn] = None

    def clone(self, overrides: Optional["Holiday"] = None) -> "Holiday":
        """Return a copy, taking name, description, type, start_year,
        end_year, exceptions and observed from ``overrides`` where set."""
        if overrides is None:
            return replace(self)
        changes = {}
        if overrides.name:
            changes["name"] = overrides.name
        if overrides.description:
            changes["description"] = overrides.description
        if overrides.type != ObservanceType.UNKNOWN:
            changes["type"] = overrides.type
        if overrides.start_year > 0:
            changes["start_year"] = overrides.start_year
        if overrides.end_year > 0:
            changes["end_year"] = overrides.end_year
        if overrides.exceptions is not None:
            changes["exceptions"] = overrides.exceptions
        if overrides.observed is not None:
            changes["observed"] = overrides.observed
        return replace(self, **changes)

    def calc(self, year: int) -> Tuple[Optional[_dt.date], Optional[_dt.date]]:
        """Return the actual and observed dates for ``year``.

        Both are None when the holiday is not observed that year.
        """
        if (
            (self.start_year > 0 and year < self.start_year)
            or (self.end_year > 0 and year > self.end_year)
            or self.func is None
        ):
            return None, None
        if self.exceptions and year in self.exceptions:
            return None, None

        actual = self.func(self, year)
        if actual is None:
            return None, None
        if self.calc_offset:
            actual += _dt.timedelta(days=self.calc_offset)

        if not self.observed:
            return actual, actual
        weekday = Weekday.of(actual)
        alt = next((a for a in self.observed if a.day == weekday), None)
        if alt is None:
            return actual, actual
        return actual, actual + _dt.timedelta(days=alt.offset)


def weekday_n_from(start: _dt.date, weekday: Weekday, n: int) -> Optional[_dt.date]:
    """Return the nth ``weekday`` on or after ``start`` (n > 0) or on or
    before it (n < 0); None when n is 0."""
    if n == 0:
        return None
    current = Weekday.of(start)
    if n > 0:
        shift = (int(weekday) - int(current)) % 7
        return start + _dt.timedelta(days=shift + 7 * (n - 1))
    shift = (int(current) - int(weekday)) % 7
    return start - _dt.timedelta(days=shift + 7 * (-n - 1))


def weekday_n(year: int, month: int, weekday: Weekday, n: int) -> Optional[_dt.date]:
    """Return the nth ``weekday`` of a month, counting from the end when n
    is negative; None when n is 0."""
    if n == 0:
        return None
    if n > 0:
        start = _make_date(year, month, 1)
    else:
        start = _make_date(year, month + 1, 1) - _dt.timedelta(days=1)
    return weekday_n_from(start, weekday, n)


def calc_day_of_month(h: Holiday, year: int) -> _dt.date:
    """A holiday always on the same day of the month."""
    return _make_date(year, h.month, h.day)


def calc_weekday_offset(h: Holiday, year: int) -> Optional[_dt.date]:
    """A holiday on the nth occurrence of a weekday in a month."""
    return weekday_n(year, h.month, h.weekday, h.offset)


def calc_weekday_from(h: Holiday, year: int) -> Optional[_dt.date]:
    """A holiday on the nth occurrence of a weekday from a starting date."""
    return weekday_n_from(_make_date(year, h.month, h.day), h.weekday, h.offset)


def calc_easter_offset(h: Holiday, year: int) -> _dt.date:
    """A holiday a number of days from Easter (Julian or Gregorian)."""
    if h.julian:
        # Meeus algorithm
        a = year % 4
        b = year % 7
        c = year % 19
        d = (19 * c + 15) % 30
        e = (2 * a + 4 * b - d + 34) % 7
        month = (d + e + 114) // 31
        day = ((d + e + 114) % 31) + 1 + 13
    else:
        # Meeus/Jones/Butcher algorithm
        a = year % 19
        b = year // 100
        c = year % 100
        d = b // 4
        e = b % 4
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        hh = (19 * a + b - d - g + 15) % 30
        i = c // 4
        k = c % 4
        el = (32 + 2 * e + 2 * i - hh - k) % 7
        m = (a + 11 * hh + 22 * el) // 451
        month = (hh + el - 7 * m + 114) // 31
        day = ((hh + el - 7 * m + 114) % 31) + 1
    return _make_date(year, month, day + h.offset)