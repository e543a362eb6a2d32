"""Luxembourg public holidays."""

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


NEIT_JOER = _fixed("Neit Joer", 1, 1)
OUSCHTERMEINDEG = _easter("Ouschterméindeg", 1)
DAG_VUN_AARBECHT = _fixed("Dag vun der Aarbecht", 5, 1)
CHRISTI_HIMMELFAART = _easter("Christi Himmelfaart", 39)
PENGSCHTMEINDEG = _easter("Péngschtméindeg", 50)
NATIONALFEIERDAG = _fixed("Nationalfeierdag", 7, 23)
MARIES_HIMMELFAART = _fixed("Maries Himmelfaart", 8, 15)
ALLERHELLGEN = _fixed("Allerhellgen", 11, 1)
CHRESCHTDAG = _fixed("Chrëschtdag", 12, 25)
ZWEETEN_DAG_CHRESCHTDAG = _fixed("Zweeten Dag vum Chrëschtdag", 12, 26)

HOLIDAYS = (
    NEIT_JOER,
    OUSCHTERMEINDEG,
    DAG_VUN_AARBECHT,
    CHRISTI_HIMMELFAART,
    PENGSCHTMEINDEG,
    NATIONALFEIERDAG,
    MARIES_HIMMELFAART,
    ALLERHELLGEN,
    CHRESCHTDAG,
    ZWEETEN_DAG_CHRESCHTDAG,
)