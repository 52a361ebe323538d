from __future__ import annotations

from typing import Any

from calendrical.calendar.base import Calendar
from calendrical.date import values

PERSIAN_EPOCH = 1948320

# Day of the year on which each month starts (0-based).
MONTH_START = [0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336]


def is_leap_year(year: int) -> bool:
    return (25 * year + 11) % 33 < 8


class PersianCalendar(Calendar):
    """
    The Persian (Solar Hijri) calendar in its 33-year arithmetic form.

    Six 31-day months, five 30-day months, and Esfand with 29 or 30 days.
    """

    identifier = "persian"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        days_since_epoch = jd - PERSIAN_EPOCH
        year = 1 + (33 * days_since_epoch + 3) // 12053
        farvardin_1 = 365 * (year - 1) + (8 * year + 21) // 33
        day_of_year = days_since_epoch - farvardin_1
        month = day_of_year // 31 if day_of_year < 216 else (day_of_year - 6) // 30
        day = day_of_year - MONTH_START[month] + 1
        return values.CalendarDate(self, "AP", year, month + 1, day)

    def to_julian_day(self, date: Any) -> int:
        jd = PERSIAN_EPOCH - 1 + 365 * (date.year - 1) + (8 * date.year + 21) // 33
        jd += MONTH_START[date.month - 1]
        return jd + date.day

    def get_days_in_month(self, date: Any) -> int:
        if date.month <= 6:
            return 31
        if date.month <= 11:
            return 30
        return 30 if is_leap_year(date.year) else 29

    def get_days_in_year(self, date: Any) -> int:
        return 366 if is_leap_year(date.year) else 365

    def get_months_in_year(self, date: Any) -> int:
        return 12

    def get_years_in_era(self, date: Any) -> int:
        return 9377

    def get_eras(self) -> list[str]:
        return ["AP"]
