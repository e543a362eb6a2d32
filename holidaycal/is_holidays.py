"""Icelandic public holidays."""

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_from,
    calc_weekday_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int, kind: ObservanceType = _PUBLIC) -> Holiday:
    return Holiday(name=name, type=kind, month=month, day=day, func=calc_day_of_month)


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


NYARSDAGUR = _fixed("Nýársdagur", 1, 1)
SKIRDAGUR = _easter("Skírdagur", -3)
LANGIFOSTUDAGUR = _easter("Föstudagurinn langi", -2)
ANNARIPASKUM = _easter("Annar í páskum", 1)

# The first Thursday after 18 April.
SUMARDAGURINN = Holiday(
    name="Sumardagurinn fyrsti",
    type=_PUBLIC,
    month=4,
    day=19,
    offset=1,
    weekday=Weekday.THURSDAY,
    func=calc_weekday_from,
)

VERKALYDSDAGURINN = _fixed("Verkalýðsdagurinn", 5, 1)
UPPSTIGNINGARDAGUR = _easter("Uppstigningardagur", 39)
ANNARIHVIT = _easter("Annar í hvítasunnu", 50)
THJODHATID = _fixed("Þjóðhátíðardagurinn", 6, 17)

VERSLUNARMANNAHELGI = Holiday(
    name="Frídagur verslunarmanna",
    type=_PUBLIC,
    month=8,
    offset=1,
    weekday=Weekday.MONDAY,
    func=calc_weekday_offset,
)

ADFANGADAGUR = _fixed("Aðfangadagur", 12, 24, ObservanceType.OTHER)
JOLADAGUR = _fixed("Jóladagur", 12, 25)
ANNARIJOLUM = _fixed("Annar í jólum", 12, 26)
GAMARSDAGUR = _fixed("Gamlársdagur", 12, 31, ObservanceType.OTHER)

HOLIDAYS = (
    NYARSDAGUR,
    SKIRDAGUR,
    LANGIFOSTUDAGUR,
    ANNARIPASKUM,
    SUMARDAGURINN,
    VERKALYDSDAGURINN,
    UPPSTIGNINGARDAGUR,
    ANNARIHVIT,
    THJODHATID,
    VERSLUNARMANNAHELGI,
    ADFANGADAGUR,
    JOLADAGUR,
    ANNARIJOLUM,
    GAMARSDAGUR,
)