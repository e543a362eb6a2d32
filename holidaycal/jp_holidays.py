"""Japanese public holidays."""

import datetime as _dt
import math
from dataclasses import replace
from typing import Optional

from holidaycal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_weekday_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# Sundays move to Monday.
_WEEKEND_ALT = (AltDay(Weekday.SUNDAY, 1),)


def _equinox_base(year: int) -> float:
    return 0.242194 * (year - 1980) - math.floor((year - 1980) / 4.0)


def _vernal_equinox_day(year: int) -> int:
    val = _equinox_base(year)
    if 1851 <= year <= 1899:
        val += 19.8277
    elif 1900 <= year <= 1979:
        val += 20.8357
    elif 1980 <= year <= 2099:
        val += 20.8431
    elif 2100 <= year <= 2150:
        val += 21.8510
    return math.floor(val)


def _autumnal_equinox_day(year: int) -> int:
    val = _equinox_base(year)
    if 1851 <= year <= 1899:
        val += 22.2588
    elif 1900 <= year <= 1979:
        val += 23.2588
    elif 1980 <= year <= 2099:
        val += 23.2488
    elif 2100 <= year <= 2150:
        val += 24.2488
    return math.floor(val)


def _fixed(name: str, month: int, day: int, observed=_WEEKEND_ALT, **extra) -> Holiday:
    return Holiday(
        name=name,
        type=_PUBLIC,
        month=month,
        day=day,
        observed=observed,
        func=calc_day_of_month,
        **extra,
    )


def _weekday(name: str, month: int, offset: int, func=calc_weekday_offset) -> Holiday:
    return Holiday(
        name=name,
        type=_PUBLIC,
        month=month,
        weekday=Weekday.MONDAY,
        offset=offset,
        func=func,
    )


def _emperors_birthday(h: Holiday, year: int) -> Optional[_dt.date]:
    if year <= 2018:
        # Emperor Akihito abdicated in 2019.
        return calc_day_of_month(replace(h, month=12, day=23), year)
    if year == 2019:
        # No Emperor's Birthday holiday during the transition year.
        return None
    return calc_day_of_month(h, year)


def _vernal_equinox(h: Holiday, year: int) -> _dt.date:
    return calc_day_of_month(replace(h, day=_vernal_equinox_day(year)), year)


def _autumnal_equinox(h: Holiday, year: int) -> _dt.date:
    return calc_day_of_month(replace(h, day=_autumnal_equinox_day(year)), year)


def _marine_day(h: Holiday, year: int) -> Optional[_dt.date]:
    if year in (2020, 2021):
        # Moved for the 2020 Summer Olympics.
        return calc_weekday_offset(replace(h, weekday=Weekday.THURSDAY, offset=4), year)
    return calc_weekday_offset(h, year)


def _mountain_day(h: Holiday, year: int) -> _dt.date:
    if year == 2020:
        return _dt.date(year, 8, 10)
    if year == 2021:
        return _dt.date(year, 8, 8)
    return _dt.date(year, 8, 11)


def _sports_day(h: Holiday, year: int) -> Optional[_dt.date]:
    if year in (2020, 2021):
        # Moved for the 2020 Summer Olympics.
        return calc_weekday_offset(
            replace(h, month=7, weekday=Weekday.FRIDAY, offset=4), year
        )
    return calc_weekday_offset(h, year)


_SANDWICHED_SEPTEMBER_DAYS = {2009: 22, 2015: 22, 2026: 22, 2032: 21}


def _sandwiched_september(h: Holiday, year: int) -> Optional[_dt.date]:
    # Only years 2009 - 2032 are known.
    day = _SANDWICHED_SEPTEMBER_DAYS.get(year)
    if day is None:
        return None
    return _dt.date(year, h.month, day)


NEW_YEAR = _fixed("New Year's Day", 1, 1)
COMING_OF_AGE_DAY = _weekday("Coming of Age Day", 1, 2)
NATIONAL_FOUNDATION_DAY = _fixed("National Foundation Day", 2, 11)
THE_EMPERORS_BIRTHDAY = replace(
    _fixed("The Emperor's Birthday", 2, 23), func=_emperors_birthday
)
VERNAL_EQUINOX_DAY = Holiday(
    name="Vernal Equinox Day",
    type=_PUBLIC,
    month=3,
    observed=_WEEKEND_ALT,
    func=_vernal_equinox,
)
SHOWA_DAY = _fixed("Showa Day", 4, 29)
CONSTITUTION_MEMORIAL_DAY = _fixed(
    "Constitution Memorial Day", 5, 3, observed=(AltDay(Weekday.SUNDAY, 3),)
)
GREENERY_DAY = _fixed("Greenery Day", 5, 4, observed=(AltDay(Weekday.SUNDAY, 2),))
CHILDRENS_DAY = _fixed("Children's Day", 5, 5)
MARINE_DAY = _weekday("Marine Day", 7, 3, func=_marine_day)
MOUNTAIN_DAY = replace(_fixed("Mountain Day", 8, 11, start_year=2016), func=_mountain_day)
RESPECT_FOR_THE_AGED_DAY = _weekday("Respect for the Aged Day", 9, 3)
AUTUMNAL_EQUINOX_DAY = Holiday(
    name="Autumnal Equinox Day",
    type=_PUBLIC,
    month=9,
    observed=_WEEKEND_ALT,
    func=_autumnal_equinox,
)
SPORTS_DAY = _weekday("Sports Day", 10, 2, func=_sports_day)
CULTURE_DAY = _fixed("Culture Day", 11, 3)
LABOR_THANKSGIVING_DAY = _fixed("Labor Thanksgiving Day", 11, 23)

NATIONAL_HOLIDAY_BETWEEN_RESPECT_FOR_THE_AGED_DAY_AND_AUTUMNAL_EQUINOX_DAY = Holiday(
    name="National holiday between Respect for the Aged Day and Autumnal Equinox Day",
    type=_PUBLIC,
    month=9,
    func=_sandwiched_september,
)
NATIONAL_HOLIDAY_BETWEEN_SHOWA_DAY_AND_NEW_EMPEROR_ENTHRONEMENT_DAY = _fixed(
    "National Holiday Between Showa Day And New Emperor Enthronement Day",
    4,
    30,
    observed=None,
    start_year=2019,
    end_year=2019,
)
THE_NEW_EMPEROR_ENTHRONEMENT_DAY = _fixed(
    "New Emperor Enthronement Day",
    5,
    1,
    observed=None,
    start_year=2019,
    end_year=2019,
)
NATIONAL_HOLIDAY_BETWEEN_THE_NEW_EMPEROR_ENTHRONEMENT_DAY_AND_CONSTITUTION_MEMORIAL_DAY = _fixed(
    "National holiday between New Emperor Enthronement Day and Constitution Memorial Day",
    5,
    2,
    observed=None,
    start_year=2019,
    end_year=2019,
)
THE_NEW_EMPEROR_ENTHRONEMENT_CEREMONY = _fixed(
    "The New Emperor Enthronement Ceremony",
    10,
    22,
    observed=None,
    start_year=2019,
    end_year=2019,
)

EXCEPTIONAL_NATIONAL_HOLIDAYS = (
    NATIONAL_HOLIDAY_BETWEEN_RESPECT_FOR_THE_AGED_DAY_AND_AUTUMNAL_EQUINOX_DAY,
    NATIONAL_HOLIDAY_BETWEEN_SHOWA_DAY_AND_NEW_EMPEROR_ENTHRONEMENT_DAY,
    THE_NEW_EMPEROR_ENTHRONEMENT_DAY,
    NATIONAL_HOLIDAY_BETWEEN_THE_NEW_EMPEROR_ENTHRONEMENT_DAY_AND_CONSTITUTION_MEMORIAL_DAY,
    THE_NEW_EMPEROR_ENTHRONEMENT_CEREMONY,
)

HOLIDAYS = (
    NEW_YEAR,
    COMING_OF_AGE_DAY,
    NATIONAL_FOUNDATION_DAY,
    THE_EMPERORS_BIRTHDAY,
    VERNAL_EQUINOX_DAY,
    SHOWA_DAY,
    CONSTITUTION_MEMORIAL_DAY,
    GREENERY_DAY,
    CHILDRENS_DAY,
    MARINE_DAY,
    MOUNTAIN_DAY,
    RESPECT_FOR_THE_AGED_DAY,
    AUTUMNAL_EQUINOX_DAY,
    SPORTS_DAY,
    CULTURE_DAY,
    LABOR_THANKSGIVING_DAY,
) + EXCEPTIONAL_NATIONAL_HOLIDAYS