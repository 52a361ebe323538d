from __future__ import annotations

from typing import Any

from calendrical.calendar.base import Calendar
from calendrical.calendar.julian import date_to_julian_day, is_leap_year, julian_day_to_date
from calendrical.date import values

# Saka year 1 starts in Gregorian year 79.
INDIAN_ERA_START = 78
# Chaitra 1 falls on day 80 (0-based) of the Gregorian year.
INDIAN_YEAR_START = 80


class IndianCalendar(Calendar):
    """
    The Indian national (Saka) calendar.

    Chaitra starts on March 22 (March 21 in Gregorian leap years, when it has
    31 days); the next five months have 31 days and the last six 30.
    """

    identifier = "indian"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        gregorian_year = julian_day_to_date(jd)[0]
        indian_year = gregorian_year - INDIAN_ERA_START
        year_day = jd - date_to_julian_day(gregorian_year, 1, 1)

        if year_day < INDIAN_YEAR_START:
            indian_year -= 1
            leap_month = 31 if is_leap_year(gregorian_year - 1) else 30
            year_day += leap_month + 31 * 5 + 30 * 3 + 10
        else:
            leap_month = 31 if is_leap_year(gregorian_year) else 30
            year_day -= INDIAN_YEAR_START

        if year_day < leap_month:
            month, day = 1, year_day + 1
        else:
            month_day = year_day - leap_month
            if month_day < 31 * 5:
                month, day = month_day // 31 + 2, month_day % 31 + 1
            else:
                month_day -= 31 * 5
                month, day = month_day // 30 + 7, month_day % 30 + 1

        return values.CalendarDate(self, "saka", indian_year, month, day)

    def to_julian_day(self, date: Any) -> int:
        gregorian_year = date.year + INDIAN_ERA_START
        if is_leap_year(gregorian_year):
            leap_month = 31
            jd = date_to_julian_day(gregorian_year, 3, 21)
        else:
            leap_month = 30
            jd = date_to_julian_day(gregorian_year, 3, 22)

        if date.month == 1:
            return jd + date.day - 1

        jd += leap_month + min(date.month - 2, 5) * 31
        if date.month >= 8:
            jd += (date.month - 7) * 30
        return jd + date.day - 1

    def get_days_in_month(self, date: Any) -> int:
        if date.month == 1:
            return 31 if is_leap_year(date.year + INDIAN_ERA_START) else 30
        if 2 <= date.month <= 6:
            return 31
        return 30

    def get_months_in_year(self, date: Any) -> int:
        return 12

    def get_years_in_era(self, date: Any) -> int:
        return 9919

    def get_eras(self) -> list[str]:
        return ["saka"]
