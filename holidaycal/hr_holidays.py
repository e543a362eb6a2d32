"""Croatian public holidays."""

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


NOVA_GODINA = _fixed("Nova godina", 1, 1)
SVETA_TRI_KRALJA = _fixed("Sveta tri kralja", 1, 6)
USKRS = _easter("Uskrs", 0)
USKRSNJI_PONEDJELJAK = _easter("Uskrsni ponedjeljak", 1)
PRAZNIK_RADA = _fixed("Praznik rada", 5, 1)
DAN_DRZAVNOSTI = _fixed("Dan državnosti", 5, 30)
TIJELOVO = _easter("Tijelovo", 60)
DAN_ANTIFASISTICKE_BORBE = _fixed("Dan antifašističke borbe", 6, 22)
DAN_POBJEDE_I_DOMOVINSKE_ZAHVALNOSTI = _fixed("Dan pobjede i domovinske zahvalnosti", 8, 5)
VELIKA_GOSPA = _fixed("Velika Gospa", 8, 15)
DAN_SVIH_SVETIH = _fixed("Dan svih svetih", 11, 1)
DAN_SJECANJA_NA_ZRTVE_DOMOVINSKOG_RATA = _fixed(
    "Dan sjećanja na žrtve Domovinskog rata", 11, 18
)
BOZIC = _fixed("Božić", 12, 25)
SVETI_STJEPAN = _fixed("Sveti Stjepan", 12, 26)

HOLIDAYS = (
    NOVA_GODINA,
    SVETA_TRI_KRALJA,
    USKRS,
    USKRSNJI_PONEDJELJAK,
    PRAZNIK_RADA,
    DAN_DRZAVNOSTI,
    TIJELOVO,
    DAN_ANTIFASISTICKE_BORBE,
    DAN_POBJEDE_I_DOMOVINSKE_ZAHVALNOSTI,
    VELIKA_GOSPA,
    DAN_SVIH_SVETIH,
    DAN_SJECANJA_NA_ZRTVE_DOMOVINSKOG_RATA,
    BOZIC,
    SVETI_STJEPAN,
)