from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union

from calendrical.calendar._exceptions import InvalidFieldError, UnsupportedFieldError
from calendrical.date import conversion, values, weekdata
from calendrical.date.clock import Clock, get_clock
from calendrical.date.zone import HOUR_MS, get_local_time_zone

DAY_NAMES: tuple[str, ...] = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

DayOfWeek = Union[int, str]


# ── comparison ────────────────────────────────────────────────────────────────

def compare_date(a: Any, b: Any) -> int:
    """Negative, zero or positive as ``a``'s day is before, on or after ``b``'s."""
    return a.calendar.to_julian_day(a) - b.calendar.to_julian_day(b)


def _time_ms(value: Any) -> int:
    return value.hour * HOUR_MS + value.minute * 60_000 + value.second * 1000 + value.millisecond


def compare_time(a: Any, b: Any) -> int:
    return _time_ms(a) - _time_ms(b)


def compare_date_time(a: Any, b: Any) -> int:
    result = compare_date(a, b)
    if result == 0:
        return compare_time(conversion.to_calendar_date_time(a), conversion.to_calendar_date_time(b))
    return result


def compare_zoned(a: Any, b: Any) -> int:
    other = conversion.to_zoned(b, a.time_zone)
    return conversion.zoned_to_absolute(a) - conversion.zoned_to_absolute(other)


def is_equal_calendar(a: Any, b: Any) -> bool:
    return a.is_equal(b)


def is_same_day(a: Any, b: Any) -> bool:
    b = conversion.to_calendar(b, a.calendar)
    return (a.era, a.year, a.month, a.day) == (b.era, b.year, b.month, b.day)


def is_same_month(a: Any, b: Any) -> bool:
    b = conversion.to_calendar(b, a.calendar)
    a = start_of_month(a)
    b = start_of_month(b)
    return (a.era, a.year, a.month) == (b.era, b.year, b.month)


def is_same_year(a: Any, b: Any) -> bool:
    b = conversion.to_calendar(b, a.calendar)
    a = start_of_year(a)
    b = start_of_year(b)
    return (a.era, a.year) == (b.era, b.year)


def is_equal_day(a: Any, b: Any) -> bool:
    """Same day and same calendar."""
    return is_equal_calendar(a.calendar, b.calendar) and is_same_day(a, b)


def is_equal_month(a: Any, b: Any) -> bool:
    return is_equal_calendar(a.calendar, b.calendar) and is_same_month(a, b)


def is_equal_year(a: Any, b: Any) -> bool:
    return is_equal_calendar(a.calendar, b.calendar) and is_same_year(a, b)


def min_date(*dates: Any) -> Any:
    """Earliest of ``dates`` (``None`` entries ignored; ``None`` if none remain)."""
    present = [d for d in dates if d is not None]
    if not present:
        return None
    best = present[0]
    for date in present[1:]:
        if date.compare(best) < 0:
            best = date
    return best


def max_date(*dates: Any) -> Any:
    present = [d for d in dates if d is not None]
    if not present:
        return None
    best = present[0]
    for date in present[1:]:
        if date.compare(best) > 0:
            best = date
    return best


# ── now / today ───────────────────────────────────────────────────────────────

def now(time_zone: Optional[str] = None, clock: Optional[Clock] = None) -> values.ZonedDateTime:
    """The current instant in ``time_zone`` (the local zone by default)."""
    return conversion.from_absolute(get_clock(clock).now_ms(), time_zone or get_local_time_zone())


def today(time_zone: Optional[str] = None, clock: Optional[Clock] = None) -> values.CalendarDate:
    return conversion.to_calendar_date(now(time_zone, clock))


def is_today(date: Any, time_zone: Optional[str] = None, clock: Optional[Clock] = None) -> bool:
    return is_same_day(date, today(time_zone, clock))


# ── weeks ─────────────────────────────────────────────────────────────────────

def _day_index(day: DayOfWeek) -> int:
    if isinstance(day, str):
        try:
            return DAY_NAMES.index(day.lower()[:3])
        except ValueError:
            raise InvalidFieldError(f"Unknown day of week {day!r}.") from None
    if not 0 <= day <= 6:
        raise InvalidFieldError(f"Day of week must be 0 (Sunday) to 6; got {day!r}.")
    return day


def get_week_start(date: Any, locale: Optional[str] = None, first_day_of_week: Optional[DayOfWeek] = None) -> int:
    """
    First day of the week (0 = Sunday) for ``date``.

    An explicit ``first_day_of_week`` wins, then the calendar's own week
    start, then the locale's region.
    """
    if first_day_of_week is not None:
        return _day_index(first_day_of_week)
    calendar_start = date.calendar.get_first_day_of_week()
    if calendar_start is not None:
        return calendar_start
    if locale:
        return weekdata.get_week_start(locale)
    raise UnsupportedFieldError(
        f"Calendar {date.calendar.identifier!r} has no week start; pass a locale or first_day_of_week."
    )


def get_day_of_week(date: Any, locale: Optional[str] = None, first_day_of_week: Optional[DayOfWeek] = None) -> int:
    """Position of ``date`` in its week: 0 is the first day of the week."""
    julian = date.calendar.to_julian_day(date)
    return (julian + 1 - get_week_start(date, locale, first_day_of_week)) % 7


def start_of_week(date: Any, locale: Optional[str] = None, first_day_of_week: Optional[DayOfWeek] = None) -> Any:
    return date.subtract(days=get_day_of_week(date, locale, first_day_of_week))


def end_of_week(date: Any, locale: Optional[str] = None, first_day_of_week: Optional[DayOfWeek] = None) -> Any:
    return start_of_week(date, locale, first_day_of_week).add(days=6)


def get_weeks_in_month(date: Any, locale: Optional[str] = None, first_day_of_week: Optional[DayOfWeek] = None) -> int:
    days = date.calendar.get_days_in_month(date)
    leading = get_day_of_week(start_of_month(date), locale, first_day_of_week)
    return -(-(leading + days) // 7)


def is_weekend(date: Any, locale: Optional[str] = None) -> bool:
    day = (date.calendar.to_julian_day(date) + 1) % 7
    return day in weekdata.get_weekend(locale)


def is_weekday(date: Any, locale: Optional[str] = None) -> bool:
    return not is_weekend(date, locale)


# ── periods ───────────────────────────────────────────────────────────────────

def start_of_month(date: Any) -> Any:
    return date.calendar.get_start_of_month(date)


def end_of_month(date: Any) -> Any:
    return date.calendar.get_end_of_month(date)


def start_of_year(date: Any) -> Any:
    return date.calendar.get_start_of_year(date)


def end_of_year(date: Any) -> Any:
    return date.calendar.get_end_of_year(date)


def get_minimum_month_in_year(date: Any) -> int:
    return date.calendar.get_minimum_month_in_year(date)


def get_minimum_day_in_month(date: Any) -> int:
    return date.calendar.get_minimum_day_in_month(date)


def get_hours_in_day(date: Any, time_zone: str) -> float:
    """Length of ``date`` in ``time_zone``: 23 or 25 on DST transition days."""
    day = conversion.to_calendar_date(date)
    start = conversion.to_absolute(day, time_zone)
    end = conversion.to_absolute(day.add(days=1), time_zone)
    return (end - start) / HOUR_MS


# ── ranges ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DateRange:
    """An inclusive range of days; ``start`` and ``end`` may be in any calendars."""

    start: Any
    end: Any

    def __post_init__(self) -> None:
        if compare_date(self.start, self.end) > 0:
            raise InvalidFieldError(f"Range start {self.start} is after its end {self.end}.")

    def __contains__(self, date: Any) -> bool:
        return compare_date(self.start, date) <= 0 <= compare_date(self.end, date)

    def __len__(self) -> int:
        return compare_date(self.end, self.start) + 1

    def __iter__(self) -> Iterator[values.CalendarDate]:
        first = conversion.to_calendar_date(self.start)
        for offset in range(len(self)):
            yield first.add(days=offset)


def is_in_range(date: Any, minimum: Optional[Any] = None, maximum: Optional[Any] = None) -> bool:
    """Whether ``date`` lies within optional inclusive bounds."""
    if minimum is not None and compare_date(date, minimum) < 0:
        return False
    if maximum is not None and compare_date(date, maximum) > 0:
        return False
    return True
