"""
calendrical.date
~~~~~~~~~~~~~~~~

Immutable dates, times and zoned date-times with calendar-aware arithmetic.

Basic usage::

    from calendrical.date import CalendarDate, parse_zoned_date_time

    CalendarDate(2019, 1, 31).add(months=1)          # 2019-02-28
    zdt = parse_zoned_date_time("2021-03-14T01:30[America/New_York]")
    zdt.add(hours=1).to_string()                      # 2021-03-14T03:30:00-04:00[...]

Public API
----------
CalendarDate, Time, CalendarDateTime, ZonedDateTime   The value types.
DateDuration, TimeDuration, DateTimeDuration          Durations.
parse_*, to_zoned, to_calendar, now, today, ...       Functions over values.
"""

from __future__ import annotations

from calendrical.date.values import CalendarDate, CalendarDateTime, Time, ZonedDateTime, default_calendar
from calendrical.date.duration import DateDuration, DateFields, DateTimeDuration, TimeDuration, TimeFields
from calendrical.date.arithmetic import cycle, cycle_value
from calendrical.date.clock import Clock, FixedClock, SystemClock, reset_clock, set_clock
from calendrical.date.config import Settings, configure, get_settings, reset_settings
from calendrical.date.conversion import (
    from_absolute,
    from_datetime,
    possible_absolutes,
    to_absolute,
    to_calendar,
    to_calendar_date,
    to_calendar_date_time,
    to_date,
    to_local_time_zone,
    to_time,
    to_time_zone,
    to_zoned,
)
from calendrical.date.parsing import (
    parse_absolute,
    parse_absolute_to_local,
    parse_date,
    parse_date_time,
    parse_duration,
    parse_time,
    parse_zoned_date_time,
)
from calendrical.date.queries import (
    DateRange,
    compare_date,
    compare_time,
    end_of_month,
    end_of_week,
    end_of_year,
    get_day_of_week,
    get_hours_in_day,
    get_minimum_day_in_month,
    get_minimum_month_in_year,
    get_weeks_in_month,
    is_equal_day,
    is_equal_month,
    is_equal_year,
    is_in_range,
    is_same_day,
    is_same_month,
    is_same_year,
    is_today,
    is_weekday,
    is_weekend,
    max_date,
    min_date,
    now,
    start_of_month,
    start_of_week,
    start_of_year,
    today,
)
from calendrical.date.zone import get_local_time_zone, reset_local_time_zone, set_local_time_zone

__all__ = [
    "CalendarDate",
    "CalendarDateTime",
    "Clock",
    "DateDuration",
    "DateFields",
    "DateRange",
    "DateTimeDuration",
    "FixedClock",
    "Settings",
    "SystemClock",
    "Time",
    "TimeDuration",
    "TimeFields",
    "ZonedDateTime",
    "compare_date",
    "compare_time",
    "configure",
    "cycle",
    "cycle_value",
    "default_calendar",
    "end_of_month",
    "end_of_week",
    "end_of_year",
    "from_absolute",
    "from_datetime",
    "get_day_of_week",
    "get_hours_in_day",
    "get_local_time_zone",
    "get_minimum_day_in_month",
    "get_minimum_month_in_year",
    "get_settings",
    "get_weeks_in_month",
    "is_equal_day",
    "is_equal_month",
    "is_equal_year",
    "is_in_range",
    "is_same_day",
    "is_same_month",
    "is_same_year",
    "is_today",
    "is_weekday",
    "is_weekend",
    "max_date",
    "min_date",
    "now",
    "parse_absolute",
    "parse_absolute_to_local",
    "parse_date",
    "parse_date_time",
    "parse_duration",
    "parse_time",
    "parse_zoned_date_time",
    "possible_absolutes",
    "reset_clock",
    "reset_local_time_zone",
    "reset_settings",
    "set_clock",
    "set_local_time_zone",
    "start_of_month",
    "start_of_week",
    "start_of_year",
    "to_absolute",
    "to_calendar",
    "to_calendar_date",
    "to_calendar_date_time",
    "to_date",
    "to_local_time_zone",
    "to_time",
    "to_time_zone",
    "to_zoned",
    "today",
]
