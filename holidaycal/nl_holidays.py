"""Public holidays of the Netherlands."""

from holidaycal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


NIEUWJAAR = _fixed("Nieuwjaarsdag", 1, 1)
GOEDE_VRIJDAG = _easter("Goede Vrijdag", -2)
EERSTE_PAASDAG = _easter("Eerste Paasdag", 0)
TWEEDE_PAASDAG = _easter("Tweede Paasdag", 1)
# Moves to Saturday when it falls on a Sunday.
KONINGSDAG = Holiday(
    name="Koningsdag",
    month=4,
    day=27,
    func=calc_day_of_month,
    observed=(AltDay(Weekday.SUNDAY, -1),),
)
BEVRIJDINGS_DAG = Holiday(
    name="Bevrijdingsdag", month=5, day=5, func=calc_day_of_month
)
HEMELVAART = _easter("Hemelvaartsdag", 39)
EERSTE_PINKSTER_DAG = _easter("Eerste Pinksterdag", 49)
TWEEDE_PINKSTER_DAG = _easter("Tweede Pinksterdag", 50)
EERSTE_KERSTDAG = _fixed("Eerste Kerstdag", 12, 25)
TWEEDE_KERSTDAG = _fixed("Tweede Kerstdag", 12, 26)

HOLIDAYS = (
    NIEUWJAAR,
    GOEDE_VRIJDAG,
    TWEEDE_PAASDAG,
    KONINGSDAG,
    BEVRIJDINGS_DAG,
    HEMELVAART,
    TWEEDE_PINKSTER_DAG,
    EERSTE_KERSTDAG,
    TWEEDE_KERSTDAG,
)