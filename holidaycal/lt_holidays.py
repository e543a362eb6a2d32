"""Lithuanian public holidays; weekend occurrences are not moved."""

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(
    name: str, month: int, day: int, kind: ObservanceType = _PUBLIC
) -> Holiday:
    return Holiday(name=name, type=kind, month=month, day=day, func=calc_day_of_month)


NEW_YEAR = _fixed("Naujieji metai", 1, 1)
STATE_RESTORATION_DAY = _fixed("Lietuvos valstybės atkūrimo diena", 2, 16)
INDEPENDENCE_DAY = _fixed("Lietuvos nepriklausomybės atkūrimo diena", 3, 11)
EASTER_MONDAY = Holiday(
    name="Antroji šv. Velykų diena", type=_PUBLIC, offset=1, func=calc_easter_offset
)
LABOUR_DAY = _fixed("Tarptautinė darbo diena", 5, 1)
SAINT_JOHNS_EVE = _fixed("Rasos ir Joninių diena", 6, 24)
STATEHOOD_DAY = _fixed(
    "Valstybės (Lietuvos Karaliaus Mindaugo karūnavimo ir Tautiškos giesmės) diena",
    7,
    6,
)
ASSUMPTION_DAY = _fixed("Žolinė (Švč. Mergelės Marijos ėmimo į dangų diena)", 8, 15)
ALL_SAINTS_DAY = _fixed("Visų šventųjų diena", 11, 1)
ALL_SOULS_DAY = _fixed(
    "Mirusiųjų atminimo (Vėlinių) diena", 11, 2, ObservanceType.UNKNOWN
)
CHRISTMAS_EVE = _fixed("Šv. Kūčios", 12, 24, ObservanceType.UNKNOWN)
CHRISTMAS_DAY_ONE = _fixed("Šv. Kalėdos", 12, 25)
CHRISTMAS_DAY_TWO = _fixed("Šv. Kalėdos (antra diena)", 12, 26)

HOLIDAYS = (
    NEW_YEAR,
    STATE_RESTORATION_DAY,
    INDEPENDENCE_DAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    SAINT_JOHNS_EVE,
    STATEHOOD_DAY,
    ASSUMPTION_DAY,
    ALL_SAINTS_DAY,
    ALL_SOULS_DAY,
    CHRISTMAS_EVE,
    CHRISTMAS_DAY_ONE,
    CHRISTMAS_DAY_TWO,
)