"""Maltese public holidays."""

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


L_EWWEL_TAS_SENA = _fixed("L-ewwel tas-Sena", 1, 1)
NAWFRAGJU_SAN_PAWL = _fixed("Nawfraġju ta' San Pawl", 2, 10)
SAN_GUZEPP = _fixed("San Ġużepp", 3, 19)
IL_GIMGHA_L_KBIRA = Holiday(
    name="Il-Ġimgħa l-Kbira", type=_PUBLIC, offset=-2, func=calc_easter_offset
)
JUM_IL_HELSIEN = _fixed("Jum il-Ħelsien", 3, 31)
JUM_IL_HADDIEM = _fixed("Jum il-Ħaddiem", 5, 1)
SETTE_GIUGNO = _fixed("Sette Giugno", 6, 7)
L_IMNARJA = _fixed("L-Imnarja", 6, 29)
SANTA_MARIJA = _fixed("Santa Marija", 8, 15)
JUM_IL_VITORJA = _fixed("Jum il-Vitorja", 9, 8)
JUM_L_INDIPENDENZA = _fixed("Jum l-Indipendenza", 9, 21)
IL_KUNCIZZJONI = _fixed("Il-Kunċizzjoni", 12, 8)
JUM_IR_REPUBBLIKA = _fixed("Jum ir-Repubblika", 12, 13)
IL_MILIED = _fixed("Il-Milied", 12, 25)

HOLIDAYS = (
    L_EWWEL_TAS_SENA,
    NAWFRAGJU_SAN_PAWL,
    SAN_GUZEPP,
    IL_GIMGHA_L_KBIRA,
    JUM_IL_HELSIEN,
    JUM_IL_HADDIEM,
    SETTE_GIUGNO,
    L_IMNARJA,
    SANTA_MARIJA,
    JUM_IL_VITORJA,
    JUM_L_INDIPENDENZA,
    IL_KUNCIZZJONI,
    JUM_IR_REPUBBLIKA,
    IL_MILIED,
)