"""Hungarian public holidays."""

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


UJEV = _fixed("Újév", 1, 1)
NEMZETI_UNNEP_MARCIUS = _fixed("Nemzeti ünnep", 3, 15)
NAGYPENTEK = _easter("Nagypéntek", -2)
HUSVET_HETFO = _easter("Húsvéthétfő", 1)
A_MUNKA_UNNEPE = _fixed("A munka ünnepe", 5, 1)
PUNKOSD_HETFO = _easter("Pünkösdhétfő", 50)
SZENT_ISTVAN_UNNEPE = _fixed("Az államalapítás ünnepe", 8, 20)
NEMZETI_UNNEP_OKT = _fixed("Nemzeti ünnep", 10, 23)
MINDENSZENTEK = _fixed("Mindenszentek", 11, 1)
KARACSONY = _fixed("Karácsony", 12, 25)
KARACSONY_MASNAPJA = _fixed("Karácsony másnapja", 12, 26)

HOLIDAYS = (
    UJEV,
    NEMZETI_UNNEP_MARCIUS,
    NAGYPENTEK,
    HUSVET_HETFO,
    A_MUNKA_UNNEPE,
    PUNKOSD_HETFO,
    SZENT_ISTVAN_UNNEPE,
    NEMZETI_UNNEP_OKT,
    MINDENSZENTEK,
    KARACSONY,
    KARACSONY_MASNAPJA,
)