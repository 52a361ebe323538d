from __future__ import annotations

from typing import Any

from calendrical.calendar.base import Calendar
from calendrical.date import values

CIVIL_EPOCH = 1948440  # 622-07-16
ASTRONOMICAL_EPOCH = 1948439  # 622-07-15


def is_leap_year(year: int) -> bool:
    return (14 + 11 * year) % 30 < 11


def islamic_to_julian_day(epoch: int, year: int, month: int, day: int) -> int:
    # ceil(29.5 * (month - 1)) in integers
    return day + (59 * (month - 1) + 1) // 2 + (year - 1) * 354 + (3 + 11 * year) // 30 + epoch - 1


def julian_day_to_islamic(epoch: int, jd: int) -> tuple[int, int, int]:
    year = (30 * (jd - epoch) + 10646) // 10631
    elapsed = jd - (29 + islamic_to_julian_day(epoch, year, 1, 1))
    # ceil(elapsed / 29.5) + 1
    month = min(12, -((-2 * elapsed) // 59) + 1)
    day = jd - islamic_to_julian_day(epoch, year, month, 1) + 1
    return year, month, day


class IslamicCivilCalendar(Calendar):
    """
    Tabular Islamic calendar, civil (Friday) epoch.

    Months alternate between 30 and 29 days; Dhu al-Hijjah gains a day in the
    11 leap years of each 30-year cycle.
    """

    identifier = "islamic-civil"
    epoch = CIVIL_EPOCH

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        year, month, day = julian_day_to_islamic(self.epoch, jd)
        return values.CalendarDate(self, "AH", year, month, day)

    def to_julian_day(self, date: Any) -> int:
        return islamic_to_julian_day(self.epoch, date.year, date.month, date.day)

    def get_days_in_month(self, date: Any) -> int:
        length = 29 + date.month % 2
        if date.month == 12 and is_leap_year(date.year):
            length += 1
        return length

    def get_months_in_year(self, date: Any) -> int:
        return 12

    def get_days_in_year(self, date: Any) -> int:
        return 355 if is_leap_year(date.year) else 354

    def get_years_in_era(self, date: Any) -> int:
        return 9665

    def get_eras(self) -> list[str]:
        return ["AH"]


class IslamicTabularCalendar(IslamicCivilCalendar):
    """Tabular Islamic calendar, astronomical (Thursday) epoch."""

    identifier = "islamic-tbla"
    epoch = ASTRONOMICAL_EPOCH
