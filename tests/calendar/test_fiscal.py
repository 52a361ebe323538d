"""
tests/calendar/test_fiscal.py

Covers:
  - Period validation (whole weeks, no overlap)
  - Days in month from the period table, Gregorian outside it
  - Start/end of period and of fiscal year
  - Arithmetic keeps valid Gregorian fields
  - Day and month cycling within Gregorian month bounds
  - Epoch offset round-trip
  - Equality by parameters
"""

import pytest

from calendrical.calendar import CalendarError, FiscalPeriod, InvalidFieldError, Retail454Calendar
from calendrical.date import CalendarDate, parse_date
from calendrical.date.queries import get_day_of_week


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def retail():
    return Retail454Calendar()


def fiscal(calendar, year, month, day):
    return CalendarDate(calendar, year, month, day)


# ── Period table ──────────────────────────────────────────────────────────────

class TestPeriods:

    def test_default_table_is_one_year(self, retail):
        assert len(retail.periods) == 12
        assert sum(p.weeks for p in retail.periods) == 52

    def test_period_from_dates(self):
        period = FiscalPeriod.from_dates("2015-03-01", "2015-04-04", 5)
        assert period.days == 35
        assert period.start == parse_date("2015-03-01").calendar.to_julian_day(parse_date("2015-03-01"))

    def test_period_from_date_values(self):
        period = FiscalPeriod.from_dates(CalendarDate(2015, 2, 1), CalendarDate(2015, 2, 28), 4)
        assert period.days == 28

    def test_period_must_be_whole_weeks(self):
        with pytest.raises(CalendarError):
            FiscalPeriod.from_dates("2015-02-01", "2015-02-27", 4)

    def test_periods_must_not_overlap(self):
        with pytest.raises(CalendarError):
            Retail454Calendar([
                ("2015-02-01", "2015-02-28", 4),
                ("2015-02-22", "2015-03-21", 4),
            ])

    def test_period_contains_julian_day(self, retail):
        first = retail.periods[0]
        assert first.start in first
        assert first.end in first
        assert first.end + 1 not in first


# ── Month and year boundaries ─────────────────────────────────────────────────

class TestBoundaries:

    def test_days_in_five_week_period(self, retail):
        assert retail.get_days_in_month(fiscal(retail, 2015, 3, 15)) == 35

    def test_days_in_four_week_period(self, retail):
        assert retail.get_days_in_month(fiscal(retail, 2015, 2, 15)) == 28

    def test_outside_table_is_gregorian(self, retail):
        assert retail.get_days_in_month(fiscal(retail, 2014, 3, 15)) == 31

    def test_start_and_end_of_month(self, retail):
        date = fiscal(retail, 2015, 3, 15)
        assert retail.get_start_of_month(date) == fiscal(retail, 2015, 3, 1)
        assert retail.get_end_of_month(date) == fiscal(retail, 2015, 4, 4)

    def test_end_of_month_is_inclusive(self, retail):
        date = fiscal(retail, 2015, 4, 4)
        assert retail.get_end_of_month(date) == date
        assert retail.get_start_of_month(date.add(days=1)) == fiscal(retail, 2015, 4, 5)

    def test_start_and_end_of_year(self, retail):
        date = fiscal(retail, 2015, 7, 15)
        assert retail.get_start_of_year(date) == fiscal(retail, 2015, 2, 1)
        assert retail.get_end_of_year(date) == fiscal(retail, 2016, 1, 30)

    def test_outside_table_falls_back(self, retail):
        date = fiscal(retail, 2014, 3, 15)
        assert retail.get_start_of_month(date) == fiscal(retail, 2014, 3, 1)
        assert retail.get_end_of_month(date) == fiscal(retail, 2014, 3, 31)

    def test_week_starts_on_sunday(self, retail):
        # 2015-02-01 is a Sunday.
        assert get_day_of_week(fiscal(retail, 2015, 2, 1)) == 0
        assert get_day_of_week(fiscal(retail, 2015, 2, 7)) == 6


# ── Arithmetic ────────────────────────────────────────────────────────────────

class TestArithmetic:

    def test_add_month_clamps_to_gregorian_month(self, retail):
        assert fiscal(retail, 2015, 1, 31).add(months=1) == fiscal(retail, 2015, 2, 28)

    def test_add_days_across_gregorian_month(self, retail):
        assert fiscal(retail, 2015, 3, 15).add(days=20) == fiscal(retail, 2015, 4, 4)

    def test_add_days_across_year(self, retail):
        assert fiscal(retail, 2015, 12, 31).add(days=1) == fiscal(retail, 2016, 1, 1)

    def test_constructor_clamps_day(self, retail):
        assert fiscal(retail, 2015, 2, 30) == fiscal(retail, 2015, 2, 28)

    def test_constructor_rejects_day(self, retail):
        with pytest.raises(InvalidFieldError):
            CalendarDate(retail, 2015, 2, 30, overflow="reject")

    def test_same_day_as_gregorian(self, retail):
        gregorian = CalendarDate(2015, 3, 15)
        converted = gregorian.to_calendar(retail)
        assert (converted.year, converted.month, converted.day) == (2015, 3, 15)
        assert converted.compare(gregorian) == 0


class TestCycle:

    def test_day_wraps_at_end_of_gregorian_month(self, retail):
        # 2015-03-31 lies inside the 35-day period 03-01..04-04.
        assert fiscal(retail, 2015, 3, 31).cycle("day", 1) == fiscal(retail, 2015, 3, 1)

    def test_day_wraps_backwards(self, retail):
        assert fiscal(retail, 2015, 3, 1).cycle("day", -1) == fiscal(retail, 2015, 3, 31)

    def test_day_reaches_past_four_week_period_length(self, retail):
        # April 2015 has 30 days although its period (04-05..05-02) has 28.
        date = fiscal(retail, 2015, 4, 28)
        assert date.cycle("day", 1) == fiscal(retail, 2015, 4, 29)
        assert date.cycle("day", 2) == fiscal(retail, 2015, 4, 30)
        assert date.cycle("day", 3) == fiscal(retail, 2015, 4, 1)

    def test_month_keeps_day_in_range(self, retail):
        assert fiscal(retail, 2015, 3, 31).cycle("month", 1) == fiscal(retail, 2015, 4, 30)


# ── Epoch offset ──────────────────────────────────────────────────────────────

class TestEpochOffset:

    @pytest.mark.parametrize("offset", [0, 7, -3])
    def test_round_trip(self, offset):
        calendar = Retail454Calendar(epoch_offset=offset)
        start = parse_date("2015-01-01").calendar.to_julian_day(parse_date("2015-01-01"))
        for jd in range(start, start + 400, 3):
            assert calendar.to_julian_day(calendar.from_julian_day(jd)) == jd

    def test_offset_shifts_fields(self):
        calendar = Retail454Calendar(epoch_offset=7)
        converted = CalendarDate(2015, 3, 1).to_calendar(calendar)
        assert (converted.year, converted.month, converted.day) == (2015, 3, 8)


# ── Identity ──────────────────────────────────────────────────────────────────

class TestIdentity:

    def test_equal_with_same_parameters(self):
        assert Retail454Calendar() == Retail454Calendar()
        assert hash(Retail454Calendar()) == hash(Retail454Calendar())

    def test_offset_makes_calendars_differ(self):
        assert Retail454Calendar() != Retail454Calendar(epoch_offset=1)

    def test_identifier(self, retail):
        assert retail.identifier == "custom-454"
        assert Retail454Calendar(identifier="retail").identifier == "retail"
