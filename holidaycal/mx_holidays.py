"""Mexican public holidays."""

from holidaycal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_weekday_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# Sundays move to Monday, Saturdays move to Friday.
_WEEKEND_ALT = (AltDay(Weekday.SUNDAY, 1), AltDay(Weekday.SATURDAY, -1))


def _fixed(
    name: str, month: int, day: int, kind: ObservanceType = _PUBLIC
) -> Holiday:
    return Holiday(
        name=name,
        type=kind,
        month=month,
        day=day,
        observed=_WEEKEND_ALT,
        func=calc_day_of_month,
    )


NEW_YEAR = _fixed("New Year's Day", 1, 1)
CONSTITUTION_DAY = _fixed("Constitution Day", 2, 5)
BENITO_JUAREZ_DAY = _fixed("Benito Juárez's Birthday", 3, 21)
LABOUR_DAY = _fixed("Labour Day", 5, 1)
INDEPENDENCE_DAY = _fixed("Independence Day", 9, 16)
REVOLUTION_DAY = Holiday(
    name="Revolution Day",
    type=_PUBLIC,
    month=11,
    offset=3,
    weekday=Weekday.MONDAY,
    func=calc_weekday_offset,
)
CHRISTMAS_DAY = _fixed("Christmas Day", 12, 25, ObservanceType.BANK)

HOLIDAYS = (
    NEW_YEAR,
    CONSTITUTION_DAY,
    BENITO_JUAREZ_DAY,
    LABOUR_DAY,
    INDEPENDENCE_DAY,
    REVOLUTION_DAY,
    CHRISTMAS_DAY,
)