# holidaycal

Holiday rules and date calculations for a range of national calendars:
Croatia, Hungary, Ireland, Iceland, Italy, Japan, Kenya, Lithuania,
Luxembourg, Latvia, Malta, Malawi, Mexico, New Caledonia and the Netherlands.

Each holiday is a `Holiday` object. It can work out the date the holiday falls
on in a given year. It also gives the date the holiday is observed on when a
substitution rule moves it, for example off a Sunday. Dates are plain
`datetime.date` values. The package has no dependencies outside the standard
library.

## Installation

```
pip install holidaycal
```

To run the test suite:

```
pip install "holidaycal[test]"
pytest
```

## Core concepts

`holidaycal.holiday` holds the building blocks.

- `Holiday` is a frozen dataclass with these fields:
  - `name`, `description` and `type`.
  - `start_year` and `end_year`. A value of 0 means there is no limit.
  - `exceptions`, the years in which the holiday does not apply.
  - The calculation fields `month`, `day`, `weekday`, `offset`,
    `calc_offset` and `julian`.
  - `observed`, the substitution rules.
  - `func`, the function that computes the date.
- `ObservanceType` is one of `UNKNOWN`, `PUBLIC`, `BANK`, `RELIGIOUS` or
  `OTHER`.
- `Weekday` runs from `SUNDAY` (0) to `SATURDAY` (6). `Weekday.of(date)` gives
  the weekday of a date.
- `AltDay(day, offset)` is a substitution rule. For example,
  `AltDay(Weekday.SUNDAY, 1)` means a holiday that falls on a Sunday is
  observed one day later.
- The calculation functions each take `(holiday, year)`:
  - `calc_day_of_month` gives a fixed date.
  - `calc_weekday_offset` gives the nth weekday of the month. A negative n
    counts back from the end of the month.
  - `calc_weekday_from` gives the nth weekday on or after `month`/`day`, or on
    or before it when n is negative.
  - `calc_easter_offset` gives the date `offset` days from Easter. It uses the
    Julian reckoning when `julian` is set and the Gregorian one otherwise.
- The helpers `weekday_n(year, month, weekday, n)` and
  `weekday_n_from(start, weekday, n)` return `None` when n is 0.

`Holiday.calc(year)` returns a pair `(actual, observed)`. The pair is
`(None, None)` in any of these cases:

- the year is outside `start_year`/`end_year`;
- the year is listed in `exceptions`;
- there is no `func`;
- the function returns `None` for that year.

`calc_offset` is added to the computed date before the substitution rules are
applied.

`Holiday.clone(overrides=None)` returns a copy. When you pass an `overrides`
holiday, the copy takes from it whichever of these are set: `name`,
`description`, `type`, `start_year`, `end_year`, `exceptions` and `observed`.

## Example

```python
from holidaycal.holiday import AltDay, Holiday, ObservanceType, Weekday, calc_day_of_month

founding_day = Holiday(
    name="Founding Day",
    type=ObservanceType.PUBLIC,
    month=3,
    day=11,
    observed=(AltDay(Weekday.SUNDAY, 1),),
    func=calc_day_of_month,
)

actual, observed = founding_day.calc(2018)
# actual == date(2018, 3, 11), a Sunday; observed == date(2018, 3, 12)
```

The country definitions are used the same way:

```python
from holidaycal import hr_holidays

actual, observed = hr_holidays.USKRS.calc(2016)  # Easter: date(2016, 3, 27) twice
```

## Country modules

There is one module per country:

| Module | Country |
|---|---|
| `holidaycal.hr_holidays` | Croatia |
| `holidaycal.hu_holidays` | Hungary |
| `holidaycal.ie_holidays` | Ireland |
| `holidaycal.is_holidays` | Iceland |
| `holidaycal.it_holidays` | Italy |
| `holidaycal.jp_holidays` | Japan |
| `holidaycal.ke_holidays` | Kenya |
| `holidaycal.lt_holidays` | Lithuania |
| `holidaycal.lu_holidays` | Luxembourg |
| `holidaycal.lv_holidays` | Latvia |
| `holidaycal.mt_holidays` | Malta |
| `holidaycal.mw_holidays` | Malawi |
| `holidaycal.mx_holidays` | Mexico |
| `holidaycal.nc_holidays` | New Caledonia |
| `holidaycal.nl_holidays` | Netherlands |

Each module defines its holidays as upper-case, module-level `Holiday`
constants, such as `it_holidays.NATALE` or `jp_holidays.MOUNTAIN_DAY`. Each
module also has a `HOLIDAYS` tuple listing the standard national holidays.

Some defined holidays are not in `HOLIDAYS`:

- Kenya: `UTAMADUNI_DAY` (2022–2023).
- Netherlands: `EERSTE_PAASDAG` and `EERSTE_PINKSTER_DAG`.

Other module notes:

- The Japanese module also has `EXCEPTIONAL_NATIONAL_HOLIDAYS`, the one-off
  and sandwiched days, which are included in its `HOLIDAYS`.
- The Irish module provides `calc_if_first_falls_on_friday`, the rule used for
  Saint Brigid's Day. It gives the 1st of the month when that day is a Friday,
  and the nth weekday rule otherwise.

## What it does not do

The package only describes holidays and computes their dates for a year. It
does not do any of the following:

- keep a calendar of business days;
- count working days between dates;
- handle times of day or time zones;
- provide a command-line tool.