from __future__ import annotations

from typing import Any

from calendrical.calendar.base import Calendar
from calendrical.calendar.julian import (
    date_to_julian_day,
    days_in_month,
    from_extended_year,
    is_leap_year,
    julian_day_to_date,
    to_extended_year,
)
from calendrical.date import arithmetic, values


class GregorianCalendar(Calendar):
    """
    The proleptic Gregorian calendar with ``BC``/``AD`` eras.

    ``BC`` is an inverse era: its year numbers decrease as time advances.
    """

    identifier = "gregory"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        extended, month, day = julian_day_to_date(jd)
        era, year = from_extended_year(extended)
        return values.CalendarDate(self, era, year, month, day)

    def to_julian_day(self, date: Any) -> int:
        return date_to_julian_day(to_extended_year(date.era, date.year), date.month, date.day)

    def get_days_in_month(self, date: Any) -> int:
        return days_in_month(to_extended_year(date.era, date.year), date.month)

    def get_months_in_year(self, date: Any) -> int:
        return 12

    def get_days_in_year(self, date: Any) -> int:
        return 366 if is_leap_year(to_extended_year(date.era, date.year)) else 365

    def get_years_in_era(self, date: Any) -> int:
        return 9999

    def get_eras(self) -> list[str]:
        return ["BC", "AD"]

    def is_inverse_era(self, date: Any) -> bool:
        return date.era == "BC"

    def balance_date(self, date: Any) -> None:
        arithmetic.balance_day(date)
        if date.year <= 0:
            date.era = "AD" if date.era == "BC" else "BC"
            date.year = 1 - date.year
