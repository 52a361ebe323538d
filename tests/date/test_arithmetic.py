"""
tests/date/test_arithmetic.py

Covers:
  - add / subtract with keyword, mapping and dataclass durations
  - Month-end clamping and day balancing
  - Time arithmetic with day carry
  - set with constraining
  - cycle for date and time fields, rounding and 12-hour cycles
"""

import pytest

from calendrical.calendar import InvalidFieldError, UnsupportedFieldError, create_calendar
from calendrical.date import (
    CalendarDate,
    CalendarDateTime,
    DateDuration,
    DateFields,
    DateTimeDuration,
    Time,
    TimeDuration,
    cycle,
    cycle_value,
)


# ── add / subtract ────────────────────────────────────────────────────────────

class TestAdd:

    def test_add_days(self):
        assert CalendarDate(2019, 6, 5).add(days=30) == CalendarDate(2019, 7, 5)

    def test_add_month_clamps_to_month_end(self):
        gregory = create_calendar("gregory")
        assert CalendarDate(gregory, 2020, 1, 31).add(months=1) == CalendarDate(2020, 2, 29)

    def test_add_year_from_leap_day(self):
        assert CalendarDate(2020, 2, 29).add(years=1) == CalendarDate(2021, 2, 28)

    def test_add_months_over_year(self):
        assert CalendarDate(2020, 1, 15).add({"months": 13}) == CalendarDate(2021, 2, 15)

    def test_add_weeks(self):
        assert CalendarDate(2019, 12, 25).add(weeks=2) == CalendarDate(2020, 1, 8)

    def test_add_duration_dataclass(self):
        assert CalendarDate(2019, 1, 1).add(DateDuration(years=1, months=1, days=1)) == CalendarDate(2020, 2, 2)

    def test_keywords_add_to_duration(self):
        assert CalendarDate(2019, 1, 1).add(DateDuration(days=1), days=1) == CalendarDate(2019, 1, 3)

    def test_subtract_is_inverse(self):
        date = CalendarDate(2019, 6, 5)
        assert date.add(days=1000).subtract(days=1000) == date

    def test_subtract_months(self):
        assert CalendarDate(2019, 3, 31).subtract(months=1) == CalendarDate(2019, 2, 28)

    def test_time_fields_on_date(self):
        with pytest.raises(UnsupportedFieldError):
            CalendarDate(2019, 6, 5).add(hours=1)

    def test_unknown_duration_field(self):
        with pytest.raises(UnsupportedFieldError):
            CalendarDate(2019, 6, 5).add(fortnights=1)

    def test_original_unchanged(self):
        date = CalendarDate(2019, 6, 5)
        date.add(days=1)
        assert date == CalendarDate(2019, 6, 5)

    def test_add_in_other_calendar(self):
        persian = create_calendar("persian")
        date = CalendarDate(persian, 1398, 6, 31)
        assert date.add(months=1) == CalendarDate(persian, 1398, 7, 30)


class TestAddTime:

    def test_date_time_carries_into_day(self):
        value = CalendarDateTime(2019, 6, 5, 23, 30)
        assert value.add(hours=1) == CalendarDateTime(2019, 6, 6, 0, 30)

    def test_date_time_borrows_from_day(self):
        value = CalendarDateTime(2019, 6, 1, 0, 0)
        assert value.subtract(minutes=1) == CalendarDateTime(2019, 5, 31, 23, 59)

    def test_mixed_duration(self):
        value = CalendarDateTime(2019, 1, 31, 12)
        duration = DateTimeDuration(months=1, hours=12)
        assert value.add(duration) == CalendarDateTime(2019, 3, 1, 0)

    def test_time_wraps_at_midnight(self):
        assert Time(23, 30).add(hours=1) == Time(0, 30)
        assert Time(0, 0).subtract(milliseconds=1) == Time(23, 59, 59, 999)

    def test_time_duration_dataclass(self):
        assert Time(10).add(TimeDuration(minutes=90)) == Time(11, 30)

    def test_negated_duration(self):
        assert -DateTimeDuration(days=1, hours=2) == DateTimeDuration(days=-1, hours=-2)


# ── set ───────────────────────────────────────────────────────────────────────

class TestSet:

    def test_set_constrains_day(self):
        assert CalendarDate(2019, 6, 5).set(day=31) == CalendarDate(2019, 6, 30)

    def test_set_with_fields(self):
        assert CalendarDate(2019, 6, 5).set(DateFields(month=2, day=30)) == CalendarDate(2019, 2, 28)

    def test_set_none_leaves_field(self):
        assert CalendarDate(2019, 6, 5).set(month=None, day=1) == CalendarDate(2019, 6, 1)

    def test_set_unknown_era(self):
        with pytest.raises(InvalidFieldError):
            CalendarDate(2019, 6, 5).set(era="XX")

    def test_set_time_on_date(self):
        with pytest.raises(UnsupportedFieldError):
            CalendarDate(2019, 6, 5).set(hour=1)

    def test_set_date_time(self):
        value = CalendarDateTime(2019, 6, 5, 12).set(hour=25, day=6)
        assert value == CalendarDateTime(2019, 6, 6, 23)

    def test_set_time(self):
        assert Time(10, 30).set(hour=5) == Time(5, 30)

    def test_set_date_field_on_time(self):
        with pytest.raises(UnsupportedFieldError):
            Time(10).set(day=1)


# ── cycle ─────────────────────────────────────────────────────────────────────

class TestCycleDate:

    def test_month_wraps_without_carry(self):
        assert CalendarDate(2019, 12, 15).cycle("month", 1) == CalendarDate(2019, 1, 15)

    def test_month_clamps_day(self):
        assert CalendarDate(2019, 1, 31).cycle("month", 1) == CalendarDate(2019, 2, 28)

    def test_twelve_month_cycles_restore(self):
        date = CalendarDate(2019, 5, 15)
        moved = date
        for _ in range(12):
            moved = moved.cycle("month", 1)
        assert moved == date

    def test_day_wraps_backwards(self):
        assert CalendarDate(2019, 6, 5).cycle("day", -15) == CalendarDate(2019, 6, 20)

    def test_year(self):
        assert CalendarDate(2019, 6, 5).cycle("year", 1) == CalendarDate(2020, 6, 5)

    def test_year_crosses_into_bc(self):
        assert CalendarDate(1, 6, 5).cycle("year", -1) == CalendarDate("BC", 1, 6, 5)

    def test_era(self):
        assert CalendarDate(2019, 6, 5).cycle("era", 1) == CalendarDate("BC", 2019, 6, 5)

    def test_month_round(self):
        assert CalendarDate(2019, 7, 1).cycle("month", 3, round=True) == CalendarDate(2019, 9, 1)

    def test_japanese_month_respects_era_start(self):
        japanese = create_calendar("japanese")
        date = CalendarDate(japanese, "reiwa", 1, 5, 10)
        assert date.cycle("month", -1) == CalendarDate(japanese, "reiwa", 1, 12, 10)

    def test_unknown_field(self):
        with pytest.raises(UnsupportedFieldError):
            CalendarDate(2019, 6, 5).cycle("hour", 1)


class TestCycleTime:

    def test_hour_wraps(self):
        assert Time(23).cycle("hour", 1) == Time(0)

    def test_twelve_hour_cycle_stays_in_half_day(self):
        assert Time(11).cycle("hour", 1, hour_cycle=12) == Time(0)
        assert Time(23).cycle("hour", 1, hour_cycle=12) == Time(12)

    def test_minute_round(self):
        assert Time(10, 7).cycle("minute", 15, round=True) == Time(10, 15)
        assert Time(10, 7).cycle("minute", -15, round=True) == Time(10, 0)
        assert Time(10, 50).cycle("minute", 15, round=True) == Time(10, 0)

    def test_date_time_dispatch(self):
        value = CalendarDateTime(2019, 6, 5, 23, 59)
        assert cycle(value, "minute", 1) == CalendarDateTime(2019, 6, 5, 23, 0)
        assert cycle(value, "day", 1) == CalendarDateTime(2019, 6, 6, 23, 59)

    def test_date_field_on_time(self):
        with pytest.raises(UnsupportedFieldError):
            cycle(Time(1), "day", 1)

    def test_time_field_on_date(self):
        with pytest.raises(UnsupportedFieldError):
            cycle(CalendarDate(2019, 6, 5), "minute", 1)


class TestCycleValue:

    @pytest.mark.parametrize("value, amount, low, high, expected", [
        (5, 0, 1, 10, 5),
        (10, 1, 1, 10, 1),
        (1, -1, 1, 10, 10),
        (3, 25, 0, 9, 8),
        (1, -3, None, 10, -2),
    ])
    def test_wrap(self, value, amount, low, high, expected):
        assert cycle_value(value, amount, low, high) == expected
