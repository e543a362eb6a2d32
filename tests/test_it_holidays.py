from datetime import date

import pytest

from holidaycal.holiday import Holiday
from holidaycal.it_holidays import (
    ASSUNZIONE,
    CAPODANNO,
    EPIFANIA,
    FESTA_DEL_LAVORO,
    FESTA_DELLA_LIBERAZIONE,
    FESTA_DELLA_REPUBBLICA,
    HOLIDAYS,
    IMMACOLATA,
    NATALE,
    PASQUETTA,
    SANTO_STEFANO,
    TUTTI_I_SANTI,
)

YEARS = range(2015, 2023)

_FIXED = [
    (CAPODANNO, 1, 1),
    (EPIFANIA, 1, 6),
    (FESTA_DELLA_LIBERAZIONE, 4, 25),
    (FESTA_DEL_LAVORO, 5, 1),
    (FESTA_DELLA_REPUBBLICA, 6, 2),
    (ASSUNZIONE, 8, 15),
    (TUTTI_I_SANTI, 11, 1),
    (IMMACOLATA, 12, 8),
    (NATALE, 12, 25),
    (SANTO_STEFANO, 12, 26),
]

_PASQUETTA = [(4, 6), (3, 28), (4, 17), (4, 2), (4, 22), (4, 13), (4, 5), (4, 18)]

CASES = [
    pytest.param(h, y, date(y, m, d), id=f"{h.name}-{y}")
    for h, m, d in _FIXED
    for y in YEARS
] + [
    pytest.param(PASQUETTA, y, date(y, m, d), id=f"Pasquetta-{y}")
    for y, (m, d) in zip(YEARS, _PASQUETTA)
]


@pytest.mark.parametrize("holiday, year, expected", CASES)
def test_holidays(holiday, year, expected):
    assert Holiday.calc(holiday, year) == (expected, expected)


def test_holiday_list_names():
    dates = [Holiday.calc(h, 2020)[0] for h in HOLIDAYS]
    assert dates[:3] == [date(2020, 1, 1), date(2020, 1, 6), date(2020, 4, 13)]
    assert [h.name for h in HOLIDAYS][:3] == ["Capodanno", "Epifania", "Pasquetta"]
    assert len(HOLIDAYS) == 11