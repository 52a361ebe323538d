"""
Retail (4-5-4) fiscal calendar.

Dates keep their Gregorian fields; what changes is the notion of a "month".
Each fiscal period is an explicit julian-day range tagged with its number of
weeks, so start/end-of-month and days-in-month follow the period table
instead of the Gregorian months.

    >>> cal = Retail454Calendar()
    >>> cal.get_days_in_month(CalendarDate(cal, 2015, 3, 15))
    35
"""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Union

from calendrical.calendar._exceptions import CalendarError
from calendrical.calendar.base import Calendar
from calendrical.calendar.gregorian import GregorianCalendar
from calendrical.calendar.julian import days_in_month, from_extended_year, julian_day_to_date, to_extended_year
from calendrical.date import parsing, values

logger = logging.getLogger(__name__)

# Periods of fiscal year 2015 (February 2015 to January 2016).
RETAIL_2015: tuple[tuple[str, str, int], ...] = (
    ("2015-02-01", "2015-02-28", 4),
    ("2015-03-01", "2015-04-04", 5),
    ("2015-04-05", "2015-05-02", 4),
    ("2015-05-03", "2015-05-30", 4),
    ("2015-05-31", "2015-07-04", 5),
    ("2015-07-05", "2015-08-01", 4),
    ("2015-08-02", "2015-08-29", 4),
    ("2015-08-30", "2015-10-03", 5),
    ("2015-10-04", "2015-10-31", 4),
    ("2015-11-01", "2015-11-28", 4),
    ("2015-11-29", "2016-01-02", 5),
    ("2016-01-03", "2016-01-30", 4),
)


@dataclass(frozen=True)
class FiscalPeriod:
    """An inclusive julian-day range of whole weeks."""

    start: int
    end: int
    weeks: int

    def __post_init__(self) -> None:
        if self.weeks < 1:
            raise CalendarError(f"A fiscal period needs at least one week; got {self.weeks}.")
        if self.end - self.start + 1 != 7 * self.weeks:
            raise CalendarError(
                f"Fiscal period {self.start}..{self.end} spans {self.end - self.start + 1} days, "
                f"not {self.weeks} weeks."
            )

    @classmethod
    def from_dates(cls, start: Union[str, Any], end: Union[str, Any], weeks: int) -> FiscalPeriod:
        """Build a period from ISO strings or date values (converted via their calendar)."""
        first = parsing.parse_date(start) if isinstance(start, str) else start
        last = parsing.parse_date(end) if isinstance(end, str) else end
        return cls(
            first.calendar.to_julian_day(first),
            last.calendar.to_julian_day(last),
            weeks,
        )

    @property
    def days(self) -> int:
        return self.end - self.start + 1

    def __contains__(self, jd: object) -> bool:
        return isinstance(jd, int) and self.start <= jd <= self.end


PeriodSpec = Union[FiscalPeriod, tuple[Any, Any, int]]


class Retail454Calendar(Calendar):
    """
    Gregorian dates grouped into fiscal periods of 4 or 5 weeks.

    Parameters
    ----------
    periods : iterable of FiscalPeriod or (start, end, weeks)
        Contiguous, non-overlapping periods.  Defaults to fiscal 2015.
    identifier : str
        Registry name; two fiscal calendars are equal only with equal periods.
    epoch_offset : int
        Days added to the julian day before reading Gregorian fields.
    periods_per_year : int
        Number of consecutive periods that make one fiscal year.

    Outside the period table the calendar behaves as the Gregorian calendar.
    """

    def __init__(
        self,
        periods: Optional[Iterable[PeriodSpec]] = None,
        *,
        identifier: str = "custom-454",
        epoch_offset: int = 0,
        periods_per_year: int = 12,
    ) -> None:
        self.identifier = identifier
        self.epoch_offset = int(epoch_offset)
        self.periods_per_year = int(periods_per_year)
        self._gregorian = GregorianCalendar()

        raw = RETAIL_2015 if periods is None else periods
        table = sorted(
            (p if isinstance(p, FiscalPeriod) else FiscalPeriod.from_dates(*p) for p in raw),
            key=lambda p: p.start,
        )
        for before, after in zip(table, table[1:]):
            if after.start <= before.end:
                raise CalendarError(f"Fiscal periods {before} and {after} overlap.")
        self._periods: tuple[FiscalPeriod, ...] = tuple(table)
        self._starts = [p.start for p in self._periods]
        logger.debug("Built %s with %d periods", identifier, len(self._periods))

    @property
    def periods(self) -> Sequence[FiscalPeriod]:
        return self._periods

    def find_period(self, date: Any) -> Optional[int]:
        """Index of the period containing ``date``, or ``None`` outside the table."""
        jd = self._gregorian.to_julian_day(date)
        idx = bisect.bisect_right(self._starts, jd) - 1
        if idx >= 0 and jd in self._periods[idx]:
            return idx
        return None

    # ── julian day ───────────────────────────────────────────────────────────

    def _fields(self, jd: int) -> tuple[str, int, int, int]:
        extended, month, day = julian_day_to_date(jd + self.epoch_offset)
        era, year = from_extended_year(extended)
        return era, year, month, day

    def from_julian_day(self, jd: int) -> values.CalendarDate:
        return values.CalendarDate(self, *self._fields(jd))

    def to_julian_day(self, date: Any) -> int:
        return self._gregorian.to_julian_day(date) - self.epoch_offset

    # ── periods ──────────────────────────────────────────────────────────────

    def get_days_in_month(self, date: Any) -> int:
        idx = self.find_period(date)
        if idx is None:
            return self._gregorian.get_days_in_month(date)
        return self._periods[idx].days

    def get_maximum_day_in_month(self, date: Any) -> int:
        # Day numbers stay Gregorian even inside a 4- or 5-week period.
        return days_in_month(to_extended_year(date.era, date.year), date.month)

    def get_months_in_year(self, date: Any) -> int:
        return 12

    def get_days_in_year(self, date: Any) -> int:
        return self._gregorian.get_days_in_year(date)

    def get_years_in_era(self, date: Any) -> int:
        return self._gregorian.get_years_in_era(date)

    def get_eras(self) -> list[str]:
        return self._gregorian.get_eras()

    def is_inverse_era(self, date: Any) -> bool:
        return self._gregorian.is_inverse_era(date)

    def get_first_day_of_week(self) -> Optional[int]:
        return 0

    def get_start_of_month(self, date: Any) -> Any:
        idx = self.find_period(date)
        if idx is None:
            return super().get_start_of_month(date)
        return date.subtract(days=self._gregorian.to_julian_day(date) - self._periods[idx].start)

    def get_end_of_month(self, date: Any) -> Any:
        idx = self.find_period(date)
        if idx is None:
            return super().get_end_of_month(date)
        return date.add(days=self._periods[idx].end - self._gregorian.to_julian_day(date))

    def get_start_of_year(self, date: Any) -> Any:
        idx = self.find_period(date)
        if idx is None:
            return super().get_start_of_year(date)
        first = self._periods[idx - idx % self.periods_per_year]
        return date.subtract(days=self._gregorian.to_julian_day(date) - first.start)

    def get_end_of_year(self, date: Any) -> Any:
        idx = self.find_period(date)
        if idx is None:
            return super().get_end_of_year(date)
        last_idx = min(idx - idx % self.periods_per_year + self.periods_per_year, len(self._periods)) - 1
        return date.add(days=self._periods[last_idx].end - self._gregorian.to_julian_day(date))

    # ── engine hooks ─────────────────────────────────────────────────────────

    def balance_date(self, date: Any) -> None:
        # Fields are Gregorian: renormalise any day overflow through the julian day.
        date.era, date.year, date.month, date.day = self._fields(self.to_julian_day(date))

    def constrain_date(self, date: Any) -> None:
        date.year = max(1, min(self.get_years_in_era(date), date.year))
        self.constrain_month_day(date)

    def constrain_month_day(self, date: Any) -> None:
        date.month = max(1, min(12, date.month))
        date.day = max(1, min(self.get_maximum_day_in_month(date), date.day))

    def is_equal(self, other: Any) -> bool:
        return (
            isinstance(other, Retail454Calendar)
            and other.identifier == self.identifier
            and other.epoch_offset == self.epoch_offset
            and other.periods_per_year == self.periods_per_year
            and other.periods == self.periods
        )

    def __hash__(self) -> int:
        return hash((self.identifier, self._periods))
