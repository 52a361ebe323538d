from __future__ import annotations

from typing import Any

from calendrical.calendar.base import Calendar
from calendrical.date import values

HEBREW_EPOCH = 347997

# Time is measured in "parts" (halakim): 1080 to the hour.
HOUR_PARTS = 1080
DAY_PARTS = 24 * HOUR_PARTS
MONTH_DAYS = 29
MONTH_FRACTIONAL_PARTS = 12 * HOUR_PARTS + 793
MONTH_PARTS = MONTH_DAYS * DAY_PARTS + MONTH_FRACTIONAL_PARTS


def is_leap_year(year: int) -> bool:
    return (7 * year + 1) % 19 < 7


def _delay_1(year: int) -> int:
    """Molad of Tishri in days, postponed when it falls on Sun, Wed or Fri."""
    months = (235 * year - 234) // 19
    parts = 12084 + 13753 * months
    day = months * 29 + parts // 25920
    if (3 * (day + 1)) % 7 < 3:
        day += 1
    return day


def _delay_2(year: int) -> int:
    """Postpone the new year further so that no year has an impossible length."""
    last = _delay_1(year - 1)
    present = _delay_1(year)
    following = _delay_1(year + 1)
    if following - present == 356:
        return 2
    if present - last == 382:
        return 1
    return 0


def start_of_year(year: int) -> int:
    return _delay_1(year) + _delay_2(year)


def days_in_year(year: int) -> int:
    return start_of_year(year + 1) - start_of_year(year)


def year_type(year: int) -> int:
    """0 = deficient, 1 = regular, 2 = complete."""
    length = days_in_year(year)
    if length > 380:
        length -= 30
    return {353: 0, 354: 1, 355: 2}[length]


def days_in_month(year: int, month: int) -> int:
    # Months are numbered 1 (Tishri) .. 13 (Elul); Adar I (6) exists only in
    # leap years, so later month numbers shift down by one otherwise.
    if month >= 6 and not is_leap_year(year):
        month += 1

    if month in (4, 7, 9, 11, 13):
        return 29

    ytype = year_type(year)
    if month == 2:
        return 30 if ytype == 2 else 29
    if month == 3:
        return 29 if ytype == 0 else 30
    if month == 6:
        return 30 if is_leap_year(year) else 0
    return 30


class HebrewCalendar(Calendar):
    """
    The arithmetic Hebrew calendar.

    Years have 12 months, or 13 in the 7 leap years of each 19-year cycle.
    Month numbers are positional: in a common year month 6 is Adar, in a leap
    year month 6 is Adar I and month 7 Adar II.
    """

    identifier = "hebrew"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        d = jd - HEBREW_EPOCH
        year = (19 * d * DAY_PARTS + 234 * MONTH_PARTS) // (235 * MONTH_PARTS) + 1
        start = start_of_year(year)
        day_of_year = d - start
        while day_of_year < 1:
            year -= 1
            start = start_of_year(year)
            day_of_year = d - start
        while day_of_year > days_in_year(year):
            day_of_year -= days_in_year(year)
            year += 1

        month = 1
        month_start = 0
        while month_start < day_of_year:
            month_start += days_in_month(year, month)
            month += 1
        month -= 1
        month_start -= days_in_month(year, month)

        return values.CalendarDate(self, "AM", year, month, day_of_year - month_start)

    def to_julian_day(self, date: Any) -> int:
        jd = start_of_year(date.year)
        for month in range(1, date.month):
            jd += days_in_month(date.year, month)
        return jd + date.day + HEBREW_EPOCH

    def get_days_in_month(self, date: Any) -> int:
        return days_in_month(date.year, date.month)

    def get_months_in_year(self, date: Any) -> int:
        return 13 if is_leap_year(date.year) else 12

    def get_days_in_year(self, date: Any) -> int:
        return days_in_year(date.year)

    def get_years_in_era(self, date: Any) -> int:
        return 9999

    def get_eras(self) -> list[str]:
        return ["AM"]

    def balance_year_month(self, date: Any, previous: Any) -> None:
        # Keep the month's identity when moving between leap and common years.
        if previous.year == date.year:
            return
        if is_leap_year(previous.year) and not is_leap_year(date.year) and previous.month > 6:
            date.month -= 1
        elif not is_leap_year(previous.year) and is_leap_year(date.year) and previous.month > 6:
            date.month += 1
