"""Latvian public holidays."""

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


def _fixed(name: str, month: int, day: int, observed=None) -> Holiday:
    return Holiday(
        name=name,
        type=_PUBLIC,
        month=month,
        day=day,
        observed=observed,
        func=calc_day_of_month,
    )


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


NEW_YEAR = _fixed("Jaunais Gads", 1, 1)
GOOD_FRIDAY = _easter("Lielā Piektdiena", -2)
EASTER = _easter("Pirmās Lieldienas", 0)
EASTER_MONDAY = _easter("Otrās Lieldienas", 1)
LABOUR_DAY = _fixed(
    "Darba svētki, Latvijas Republikas Satversmes sapulces sasaukšanas diena", 5, 1
)
STATE_RESTORATION_DAY = _fixed(
    "Latvijas Republikas Neatkarības deklarācijas pasludināšanas diena",
    5,
    4,
    _WEEKEND_ALT,
)
MIDSUMMER_EVE = _fixed("Līgo diena", 6, 23)
MIDSUMMER_DAY = _fixed("Jāņu diena (vasaras saulgrieži)", 6, 24)
STATE_PROCLAMATION_DAY = _fixed(
    "Latvijas Republikas proklamēšanas diena", 11, 18, _WEEKEND_ALT
)
CHRISTMAS_EVE = _fixed("Ziemassvētku vakars (ziemas saulgrieži)", 12, 24)
CHRISTMAS_DAY = _fixed("Pirmie Ziemassvētki (ziemas saulgrieži)", 12, 25)
CHRISTMAS_DAY2 = _fixed("Otrie Ziemassvētki (ziemas saulgrieži)", 12, 26)
NEW_YEAR_EVE = _fixed("Vecgada vakars", 12, 31)

HOLIDAYS = (
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER,
    EASTER_MONDAY,
    LABOUR_DAY,
    STATE_RESTORATION_DAY,
    MIDSUMMER_EVE,
    MIDSUMMER_DAY,
    STATE_PROCLAMATION_DAY,
    CHRISTMAS_EVE,
    CHRISTMAS_DAY,
    CHRISTMAS_DAY2,
    NEW_YEAR_EVE,
)