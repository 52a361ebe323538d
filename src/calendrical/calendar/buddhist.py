from __future__ import annotations

from typing import Any

from calendrical.calendar.gregorian import GregorianCalendar
from calendrical.calendar.julian import date_to_julian_day, days_in_month, is_leap_year, julian_day_to_date
from calendrical.date import arithmetic, values

BUDDHIST_ERA_START = -543


class BuddhistCalendar(GregorianCalendar):
    """Gregorian months and days; years counted from 543 BC in a single ``BE`` era."""

    identifier = "buddhist"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        year, month, day = julian_day_to_date(jd)
        return values.CalendarDate(self, "BE", year - BUDDHIST_ERA_START, month, day)

    def to_julian_day(self, date: Any) -> int:
        return date_to_julian_day(date.year + BUDDHIST_ERA_START, date.month, date.day)

    def get_days_in_month(self, date: Any) -> int:
        return days_in_month(date.year + BUDDHIST_ERA_START, date.month)

    def get_days_in_year(self, date: Any) -> int:
        return 366 if is_leap_year(date.year + BUDDHIST_ERA_START) else 365

    def get_eras(self) -> list[str]:
        return ["BE"]

    def is_inverse_era(self, date: Any) -> bool:
        return False

    def balance_date(self, date: Any) -> None:
        arithmetic.balance_day(date)
