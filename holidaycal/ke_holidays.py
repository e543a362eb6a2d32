"""Kenyan public holidays."""

from holidaycal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# Sundays move to Monday.
_WEEKEND_ALT = (AltDay(Weekday.SUNDAY, 1),)


def _fixed(name: str, month: int, day: int, **extra) -> Holiday:
    return Holiday(
        name=name,
        type=_PUBLIC,
        month=month,
        day=day,
        observed=_WEEKEND_ALT,
        func=calc_day_of_month,
        **extra,
    )


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


NEW_YEAR = _fixed("New Year's Day", 1, 1)
GOOD_FRIDAY = _easter("Good Friday", -2)
EASTER_MONDAY = _easter("Easter Monday", 1)
LABOUR_DAY = _fixed("Labour Day", 5, 1)
MADARAKA_DAY = _fixed("Madaraka Day", 6, 1)
UTAMADUNI_DAY = _fixed("Utamaduni Day", 10, 10, start_year=2022, end_year=2023)
MAZINGIRA_DAY = _fixed("Mazingira Day", 10, 10, start_year=2024)
MASHUJAA_DAY = _fixed("Mashujaa Day", 10, 20, start_year=2010)
JAMHURI_DAY = _fixed("Jamhuri Day", 12, 12)
CHRISTMAS_DAY = _fixed("Christmas Day", 12, 25)
BOXING_DAY = _fixed("Boxing Day", 12, 26)

HOLIDAYS = (
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    MADARAKA_DAY,
    MAZINGIRA_DAY,
    MASHUJAA_DAY,
    JAMHURI_DAY,
    CHRISTMAS_DAY,
    BOXING_DAY,
)