from __future__ import annotations

from typing import Any, Optional

from calendrical.calendar._exceptions import InvalidFieldError
from calendrical.calendar.gregorian import GregorianCalendar
from calendrical.calendar.julian import date_to_julian_day, days_in_month, julian_day_to_date
from calendrical.date import arithmetic, values

ERA_START_DATES: list[tuple[int, int, int]] = [
    (1868, 9, 8),
    (1912, 7, 30),
    (1926, 12, 25),
    (1989, 1, 8),
    (2019, 5, 1),
]
ERA_END_DATES: list[tuple[int, int, int]] = [
    (1912, 7, 29),
    (1926, 12, 24),
    (1989, 1, 7),
    (2019, 4, 30),
]
ERA_ADDENDS: list[int] = [1867, 1911, 1925, 1988, 2018]
ERA_NAMES: list[str] = ["meiji", "taisho", "showa", "heisei", "reiwa"]


def find_era(year: int, month: int, day: int) -> int:
    """Index of the era containing the Gregorian date (the first era for earlier dates)."""
    target = (year, month, day)
    for idx, start in enumerate(ERA_START_DATES):
        if target < start:
            return max(idx - 1, 0)
    return len(ERA_START_DATES) - 1


def era_index(era: str) -> int:
    try:
        return ERA_NAMES.index(era)
    except ValueError:
        raise InvalidFieldError(f"Unknown era: {era!r}.") from None


def to_gregorian_year(date: Any) -> int:
    return date.year + ERA_ADDENDS[era_index(date.era)]


class JapaneseCalendar(GregorianCalendar):
    """
    Gregorian months and days counted in imperial eras (Meiji onwards).

    Years are 1-based within an era and an era may start mid-year, so the
    first year of an era has a minimum month and day.  Dates before Meiji 1
    clamp to its first day.
    """

    identifier = "japanese"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        year, month, day = julian_day_to_date(jd)
        if (year, month, day) < ERA_START_DATES[0]:
            year, month, day = ERA_START_DATES[0]
        idx = find_era(year, month, day)
        return values.CalendarDate(self, ERA_NAMES[idx], year - ERA_ADDENDS[idx], month, day)

    def to_julian_day(self, date: Any) -> int:
        return date_to_julian_day(to_gregorian_year(date), date.month, date.day)

    def get_days_in_month(self, date: Any) -> int:
        return days_in_month(to_gregorian_year(date), date.month)

    def get_days_in_year(self, date: Any) -> int:
        year = to_gregorian_year(date)
        return date_to_julian_day(year + 1, 1, 1) - date_to_julian_day(year, 1, 1)

    def get_eras(self) -> list[str]:
        return list(ERA_NAMES)

    def is_inverse_era(self, date: Any) -> bool:
        return False

    def get_years_in_era(self, date: Any) -> int:
        idx = era_index(date.era)
        start = ERA_START_DATES[idx]
        following: Optional[tuple[int, int, int]] = (
            ERA_START_DATES[idx + 1] if idx + 1 < len(ERA_START_DATES) else None
        )
        if following is None:
            return 9999 - start[0] + 1

        years = following[0] - start[0]
        if (date.month, date.day) < following[1:]:
            years += 1
        return years

    def get_minimum_month_in_year(self, date: Any) -> int:
        start = ERA_START_DATES[era_index(date.era)]
        return start[1] if date.year == 1 else 1

    def get_minimum_day_in_month(self, date: Any) -> int:
        start = ERA_START_DATES[era_index(date.era)]
        if date.year == 1 and date.month == start[1]:
            return start[2]
        return 1

    def balance_date(self, date: Any) -> None:
        arithmetic.balance_day(date)
        gregorian_year = to_gregorian_year(date)
        idx = find_era(gregorian_year, date.month, date.day)
        if ERA_NAMES[idx] != date.era:
            date.era = ERA_NAMES[idx]
            date.year = gregorian_year - ERA_ADDENDS[idx]
        self.constrain_date(date)

    def constrain_date(self, date: Any) -> None:
        idx = era_index(date.era)
        if idx < len(ERA_END_DATES):
            end_year, end_month, end_day = ERA_END_DATES[idx]
            max_year = end_year - ERA_ADDENDS[idx]
            date.year = max(1, min(max_year, date.year))
            if date.year == max_year:
                date.month = min(end_month, date.month)
                if date.month == end_month:
                    date.day = min(end_day, date.day)

        if date.year == 1:
            _, start_month, start_day = ERA_START_DATES[idx]
            date.month = max(start_month, date.month)
            if date.month == start_month:
                date.day = max(start_day, date.day)

        arithmetic.constrain_fields(date)
