from __future__ import annotations

from typing import Any

from calendrical.calendar.base import Calendar
from calendrical.date import arithmetic, values

ETHIOPIC_EPOCH = 1723856
COPTIC_EPOCH = 1824665

# Years between the Amete Alem (creation) and Amete Mihret (incarnation) eras.
AMETE_MIHRET_DELTA = 5500


def ce_to_julian_day(epoch: int, year: int, month: int, day: int) -> int:
    """Julian day of a date in a 13-month (12 x 30 + epagomenal) calendar."""
    return epoch + 365 * year + year // 4 + 30 * (month - 1) + day - 1


def julian_day_to_ce(epoch: int, jd: int) -> tuple[int, int, int]:
    cycles, remainder = divmod(jd - epoch, 1461)
    year = 4 * cycles + remainder // 365 - remainder // 1460
    day_of_year = 365 if remainder == 1460 else remainder % 365
    return year, day_of_year // 30 + 1, day_of_year % 30 + 1


def get_leap_day(year: int) -> int:
    """1 when the final short month of ``year`` has its sixth day."""
    return (year % 4) // 3


def _days_in_month(year: int, month: int) -> int:
    if month == 13:
        return 5 + get_leap_day(year)
    return 30


class EthiopicCalendar(Calendar):
    """
    The Ethiopic calendar: twelve 30-day months and a 5 or 6 day Pagume.

    Years from the incarnation are counted in the ``AM`` (Amete Mihret) era;
    earlier years in the ``AA`` (Amete Alem) era.
    """

    identifier = "ethiopic"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        year, month, day = julian_day_to_ce(ETHIOPIC_EPOCH, jd)
        era = "AM"
        if year <= 0:
            era = "AA"
            year += AMETE_MIHRET_DELTA
        return values.CalendarDate(self, era, year, month, day)

    def to_julian_day(self, date: Any) -> int:
        year = date.year
        if date.era == "AA":
            year -= AMETE_MIHRET_DELTA
        return ce_to_julian_day(ETHIOPIC_EPOCH, year, date.month, date.day)

    def get_days_in_month(self, date: Any) -> int:
        return _days_in_month(date.year, date.month)

    def get_months_in_year(self, date: Any) -> int:
        return 13

    def get_days_in_year(self, date: Any) -> int:
        return 365 + get_leap_day(date.year)

    def get_years_in_era(self, date: Any) -> int:
        return 9999 if date.era == "AA" else 9991

    def get_eras(self) -> list[str]:
        return ["AA", "AM"]


class EthiopicAmeteAlemCalendar(EthiopicCalendar):
    """Ethiopic calendar counting every year in the single ``AA`` era."""

    identifier = "ethioaa"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        year, month, day = julian_day_to_ce(ETHIOPIC_EPOCH, jd)
        return values.CalendarDate(self, "AA", year + AMETE_MIHRET_DELTA, month, day)

    def get_years_in_era(self, date: Any) -> int:
        return 9999

    def get_eras(self) -> list[str]:
        return ["AA"]


class CopticCalendar(EthiopicCalendar):
    """The Coptic calendar: Ethiopic structure, Era of Martyrs epoch (284 CE)."""

    identifier = "coptic"

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        year, month, day = julian_day_to_ce(COPTIC_EPOCH, jd)
        era = "CE"
        if year <= 0:
            era = "BCE"
            year = 1 - year
        return values.CalendarDate(self, era, year, month, day)

    def to_julian_day(self, date: Any) -> int:
        year = date.year
        if date.era == "BCE":
            year = 1 - year
        return ce_to_julian_day(COPTIC_EPOCH, year, date.month, date.day)

    def get_days_in_month(self, date: Any) -> int:
        year = date.year
        if date.era == "BCE":
            year = 1 - year
        return _days_in_month(year, date.month)

    def get_days_in_year(self, date: Any) -> int:
        year = 1 - date.year if date.era == "BCE" else date.year
        return 365 + get_leap_day(year)

    def get_years_in_era(self, date: Any) -> int:
        return 9999 if date.era == "BCE" else 9715

    def get_eras(self) -> list[str]:
        return ["BCE", "CE"]

    def is_inverse_era(self, date: Any) -> bool:
        return date.era == "BCE"

    def balance_date(self, date: Any) -> None:
        arithmetic.balance_day(date)
        if date.year <= 0:
            date.era = "CE" if date.era == "BCE" else "BCE"
            date.year = 1 - date.year
