from __future__ import annotations

from typing import Any

from calendrical.calendar.gregorian import GregorianCalendar
from calendrical.calendar.julian import date_to_julian_day, days_in_month, is_leap_year, julian_day_to_date
from calendrical.date import arithmetic, values

TAIWAN_ERA_START = 1911


def gregorian_year(date: Any) -> int:
    """Extended Gregorian year of a Minguo date."""
    if date.era == "minguo":
        return date.year + TAIWAN_ERA_START
    return 1 - date.year + TAIWAN_ERA_START


def gregorian_to_taiwan(year: int) -> tuple[str, int]:
    taiwan_year = year - TAIWAN_ERA_START
    if taiwan_year > 0:
        return "minguo", taiwan_year
    return "before_minguo", 1 - taiwan_year


class TaiwanCalendar(GregorianCalendar):
    """Republic of China (Minguo) calendar: Gregorian months, years from 1912."""

    identifier = "roc"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        year, month, day = julian_day_to_date(jd)
        era, taiwan_year = gregorian_to_taiwan(year)
        return values.CalendarDate(self, era, taiwan_year, month, day)

    def to_julian_day(self, date: Any) -> int:
        return date_to_julian_day(gregorian_year(date), date.month, date.day)

    def get_days_in_month(self, date: Any) -> int:
        return days_in_month(gregorian_year(date), date.month)

    def get_days_in_year(self, date: Any) -> int:
        return 366 if is_leap_year(gregorian_year(date)) else 365

    def get_eras(self) -> list[str]:
        return ["before_minguo", "minguo"]

    def is_inverse_era(self, date: Any) -> bool:
        return date.era == "before_minguo"

    def get_years_in_era(self, date: Any) -> int:
        return 9999 if date.era == "before_minguo" else 9999 - TAIWAN_ERA_START

    def balance_date(self, date: Any) -> None:
        arithmetic.balance_day(date)
        date.era, date.year = gregorian_to_taiwan(gregorian_year(date))
