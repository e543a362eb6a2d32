"""Italian public holidays."""

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


CAPODANNO = _fixed("Capodanno", 1, 1)
EPIFANIA = _fixed("Epifania", 1, 6)
PASQUETTA = Holiday(name="Pasquetta", type=_PUBLIC, offset=1, func=calc_easter_offset)
FESTA_DELLA_LIBERAZIONE = _fixed("Festa della Liberazione", 4, 25)
FESTA_DEL_LAVORO = _fixed("Festa del Lavoro", 5, 1)
FESTA_DELLA_REPUBBLICA = _fixed("Festa della Repubblica", 6, 2)
ASSUNZIONE = _fixed("Assunzione", 8, 15)
TUTTI_I_SANTI = _fixed("Tutti i santi", 11, 1)
IMMACOLATA = _fixed("Immacolata Concezione", 12, 8)
NATALE = _fixed("Natale", 12, 25)
SANTO_STEFANO = _fixed("Santo Stefano", 12, 26)

HOLIDAYS = (
    CAPODANNO,
    EPIFANIA,
    PASQUETTA,
    FESTA_DELLA_LIBERAZIONE,
    FESTA_DEL_LAVORO,
    FESTA_DELLA_REPUBBLICA,
    ASSUNZIONE,
    TUTTI_I_SANTI,
    IMMACOLATA,
    NATALE,
    SANTO_STEFANO,
)