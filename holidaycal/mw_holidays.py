"""Public holidays of the Republic of Malawi."""

from holidaycal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# Saturdays and Sundays move to the following Monday.
_WEEKEND_ALT = (AltDay(Weekday.SATURDAY, 2), AltDay(Weekday.SUNDAY, 1))


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(
        name=name,
        type=_PUBLIC,
        month=month,
        day=day,
        observed=_WEEKEND_ALT,
        func=calc_day_of_month,
    )


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


NEW_YEAR = _fixed("New Year's Day", 1, 1)
CHILEMBWE_DAY = _fixed("John Chilembwe Day", 1, 15)
MARTYRS_DAY = _fixed("Martyrs' Day", 3, 3)
GOOD_FRIDAY = _easter("Good Friday", -2)
EASTER = _easter("Easter Monday", 1)
LABOUR_DAY = _fixed("Labour Day", 5, 1)
KAMUZU_DAY = _fixed("President Kamuzu Banda's Birthday", 5, 14)
MOTHERS_DAY = _fixed("Mother's Day", 10, 15)
INDEPENDENCE_DAY = _fixed("Independence Day", 7, 6)
BOXING_DAY = _fixed("Christmas Boxing Day", 12, 26)
CHRISTMAS_DAY = _fixed("Christmas Day", 12, 25)

HOLIDAYS = (
    NEW_YEAR,
    MARTYRS_DAY,
    MOTHERS_DAY,
    CHILEMBWE_DAY,
    KAMUZU_DAY,
    INDEPENDENCE_DAY,
    LABOUR_DAY,
    EASTER,
    GOOD_FRIDAY,
    BOXING_DAY,
    CHRISTMAS_DAY,
)