import datetime as dt

import pytest

from holidaycal import mw_holidays as mw
from holidaycal.holiday import Holiday


def d(y, m, dd):
    return dt.date(y, m, dd)


CASES = [
    (mw.NEW_YEAR, 2015, d(2015, 1, 1), d(2015, 1, 1)),
    (mw.NEW_YEAR, 2016, d(2016, 1, 1), d(2016, 1, 1)),
    (mw.NEW_YEAR, 2017, d(2017, 1, 1), d(2017, 1, 2)),
    (mw.NEW_YEAR, 2018, d(2018, 1, 1), d(2018, 1, 1)),
    (mw.NEW_YEAR, 2019, d(2019, 1, 1), d(2019, 1, 1)),
    (mw.NEW_YEAR, 2020, d(2020, 1, 1), d(2020, 1, 1)),
    (mw.NEW_YEAR, 2021, d(2021, 1, 1), d(2021, 1, 1)),
    (mw.NEW_YEAR, 2022, d(2022, 1, 1), d(2022, 1, 3)),
    (mw.CHILEMBWE_DAY, 2015, d(2015, 1, 15), d(2015, 1, 15)),
    (mw.CHILEMBWE_DAY, 2016, d(2016, 1, 15), d(2016, 1, 15)),
    (mw.CHILEMBWE_DAY, 2017, d(2017, 1, 15), d(2017, 1, 16)),
    (mw.CHILEMBWE_DAY, 2018, d(2018, 1, 15), d(2018, 1, 15)),
    (mw.CHILEMBWE_DAY, 2019, d(2019, 1, 15), d(2019, 1, 15)),
    (mw.CHILEMBWE_DAY, 2020, d(2020, 1, 15), d(2020, 1, 15)),
    (mw.CHILEMBWE_DAY, 2021, d(2021, 1, 15), d(2021, 1, 15)),
    (mw.CHILEMBWE_DAY, 2022, d(2022, 1, 15), d(2022, 1, 17)),
    (mw.MARTYRS_DAY, 2015, d(2015, 3, 3), d(2015, 3, 3)),
    (mw.MARTYRS_DAY, 2016, d(2016, 3, 3), d(2016, 3, 3)),
    (mw.MARTYRS_DAY, 2017, d(2017, 3, 3), d(2017, 3, 3)),
    (mw.MARTYRS_DAY, 2018, d(2018, 3, 3), d(2018, 3, 5)),
    (mw.MARTYRS_DAY, 2019, d(2019, 3, 3), d(2019, 3, 4)),
    (mw.MARTYRS_DAY, 2020, d(2020, 3, 3), d(2020, 3, 3)),
    (mw.MARTYRS_DAY, 2021, d(2021, 3, 3), d(2021, 3, 3)),
    (mw.MARTYRS_DAY, 2022, d(2022, 3, 3), d(2022, 3, 3)),
    (mw.GOOD_FRIDAY, 2015, d(2015, 4, 3), d(2015, 4, 3)),
    (mw.GOOD_FRIDAY, 2016, d(2016, 3, 25), d(2016, 3, 25)),
    (mw.GOOD_FRIDAY, 2017, d(2017, 4, 14), d(2017, 4, 14)),
    (mw.GOOD_FRIDAY, 2018, d(2018, 3, 30), d(2018, 3, 30)),
    (mw.GOOD_FRIDAY, 2019, d(2019, 4, 19), d(2019, 4, 19)),
    (mw.GOOD_FRIDAY, 2020, d(2020, 4, 10), d(2020, 4, 10)),
    (mw.GOOD_FRIDAY, 2021, d(2021, 4, 2), d(2021, 4, 2)),
    (mw.GOOD_FRIDAY, 2022, d(2022, 4, 15), d(2022, 4, 15)),
    (mw.EASTER, 2015, d(2015, 4, 6), d(2015, 4, 6)),
    (mw.EASTER, 2016, d(2016, 3, 28), d(2016, 3, 28)),
    (mw.EASTER, 2017, d(2017, 4, 17), d(2017, 4, 17)),
    (mw.EASTER, 2018, d(2018, 4, 2), d(2018, 4, 2)),
    (mw.EASTER, 2019, d(2019, 4, 22), d(2019, 4, 22)),
    (mw.EASTER, 2020, d(2020, 4, 13), d(2020, 4, 13)),
    (mw.EASTER, 2021, d(2021, 4, 5), d(2021, 4, 5)),
    (mw.EASTER, 2022, d(2022, 4, 18), d(2022, 4, 18)),
    (mw.LABOUR_DAY, 2015, d(2015, 5, 1), d(2015, 5, 1)),
    (mw.LABOUR_DAY, 2016, d(2016, 5, 1), d(2016, 5, 2)),
    (mw.LABOUR_DAY, 2017, d(2017, 5, 1), d(2017, 5, 1)),
    (mw.LABOUR_DAY, 2018, d(2018, 5, 1), d(2018, 5, 1)),
    (mw.LABOUR_DAY, 2019, d(2019, 5, 1), d(2019, 5, 1)),
    (mw.LABOUR_DAY, 2020, d(2020, 5, 1), d(2020, 5, 1)),
    (mw.LABOUR_DAY, 2021, d(2021, 5, 1), d(2021, 5, 3)),
    (mw.LABOUR_DAY, 2022, d(2022, 5, 1), d(2022, 5, 2)),
    (mw.KAMUZU_DAY, 2015, d(2015, 5, 14), d(2015, 5, 14)),
    (mw.KAMUZU_DAY, 2016, d(2016, 5, 14), d(2016, 5, 16)),
    (mw.KAMUZU_DAY, 2017, d(2017, 5, 14), d(2017, 5, 15)),
    (mw.KAMUZU_DAY, 2018, d(2018, 5, 14), d(2018, 5, 14)),
    (mw.KAMUZU_DAY, 2019, d(2019, 5, 14), d(2019, 5, 14)),
    (mw.KAMUZU_DAY, 2020, d(2020, 5, 14), d(2020, 5, 14)),
    (mw.KAMUZU_DAY, 2021, d(2021, 5, 14), d(2021, 5, 14)),
    (mw.KAMUZU_DAY, 2022, d(2022, 5, 14), d(2022, 5, 16)),
    (mw.MOTHERS_DAY, 2015, d(2015, 10, 15), d(2015, 10, 15)),
    (mw.MOTHERS_DAY, 2016, d(2016, 10, 15), d(2016, 10, 17)),
    (mw.MOTHERS_DAY, 2017, d(2017, 10, 15), d(2017, 10, 16)),
    (mw.MOTHERS_DAY, 2018, d(2018, 10, 15), d(2018, 10, 15)),
    (mw.MOTHERS_DAY, 2019, d(2019, 10, 15), d(2019, 10, 15)),
    (mw.MOTHERS_DAY, 2020, d(2020, 10, 15), d(2020, 10, 15)),
    (mw.MOTHERS_DAY, 2021, d(2021, 10, 15), d(2021, 10, 15)),
    (mw.MOTHERS_DAY, 2022, d(2022, 10, 15), d(2022, 10, 17)),
    (mw.INDEPENDENCE_DAY, 2015, d(2015, 7, 6), d(2015, 7, 6)),
    (mw.INDEPENDENCE_DAY, 2016, d(2016, 7, 6), d(2016, 7, 6)),
    (mw.INDEPENDENCE_DAY, 2017, d(2017, 7, 6), d(2017, 7, 6)),
    (mw.INDEPENDENCE_DAY, 2018, d(2018, 7, 6), d(2018, 7, 6)),
    (mw.INDEPENDENCE_DAY, 2019, d(2019, 7, 6), d(2019, 7, 8)),
    (mw.INDEPENDENCE_DAY, 2020, d(2020, 7, 6), d(2020, 7, 6)),
    (mw.INDEPENDENCE_DAY, 2021, d(2021, 7, 6), d(2021, 7, 6)),
    (mw.INDEPENDENCE_DAY, 2022, d(2022, 7, 6), d(2022, 7, 6)),
    (mw.BOXING_DAY, 2021, d(2021, 12, 26), d(2021, 12, 27)),
    (mw.BOXING_DAY, 2022, d(2022, 12, 26), d(2022, 12, 26)),
    (mw.BOXING_DAY, 2023, d(2023, 12, 26), d(2023, 12, 26)),
    (mw.BOXING_DAY, 2024, d(2024, 12, 26), d(2024, 12, 26)),
    (mw.CHRISTMAS_DAY, 2015, d(2015, 12, 25), d(2015, 12, 25)),
    (mw.CHRISTMAS_DAY, 2016, d(2016, 12, 25), d(2016, 12, 26)),
    (mw.CHRISTMAS_DAY, 2017, d(2017, 12, 25), d(2017, 12, 25)),
    (mw.CHRISTMAS_DAY, 2018, d(2018, 12, 25), d(2018, 12, 25)),
    (mw.CHRISTMAS_DAY, 2019, d(2019, 12, 25), d(2019, 12, 25)),
    (mw.CHRISTMAS_DAY, 2020, d(2020, 12, 25), d(2020, 12, 25)),
    (mw.CHRISTMAS_DAY, 2021, d(2021, 12, 25), d(2021, 12, 27)),
    (mw.CHRISTMAS_DAY, 2022, d(2022, 12, 25), d(2022, 12, 26)),
]


@pytest.mark.parametrize("holiday,year,want_act,want_obs", CASES)
def test_holidays(holiday, year, want_act, want_obs):
    assert Holiday.calc(holiday, year) == (want_act, want_obs)


def test_holiday_list():
    assert len(mw.HOLIDAYS) == 11
    assert mw.HOLIDAYS[0] is mw.NEW_YEAR
    assert mw.HOLIDAYS[-1] is mw.CHRISTMAS_DAY
    assert mw.NEW_YEAR.calc(2017) == (d(2017, 1, 1), d(2017, 1, 2))