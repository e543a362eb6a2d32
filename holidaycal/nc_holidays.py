"""Public holidays of New Caledonia."""

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


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


NOUVEL_AN = _fixed("Nouvel An", 1, 1)
LUNDI_DE_PAQUES = _easter("Lundi de Pâques", 1)
FETE_DU_TRAVAIL = _fixed("Fête du Travail", 5, 1)
FETE_DE_LA_VICTOIRE = _fixed("Fête de la Victoire", 5, 8)
ASCENSION = _easter("Ascension", 39)
LUNDI_DE_PENTECOTE = _easter("Lundi de Pentecôte", 50)
FETE_NATIONALE = _fixed("Fête nationale", 7, 14)
ASSOMPTION = _fixed("Assomption", 8, 15)
TOUSSAINT = _fixed("Toussaint", 11, 1)
ARMISTICE_1918 = _fixed("Armistice 1918", 11, 11)
NOEL = _fixed("Noël", 12, 25)
# The day New Caledonia became French.
FETE_DE_LA_CITOYENNETE = _fixed(
    "Fête de la citoyenneté", 9, 24, ObservanceType.UNKNOWN
)

HOLIDAYS = (
    NOUVEL_AN,
    LUNDI_DE_PAQUES,
    FETE_DU_TRAVAIL,
    FETE_DE_LA_VICTOIRE,
    ASCENSION,
    LUNDI_DE_PENTECOTE,
    FETE_NATIONALE,
    ASSOMPTION,
    TOUSSAINT,
    ARMISTICE_1918,
    NOEL,
    FETE_DE_LA_CITOYENNETE,
)