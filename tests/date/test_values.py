"""
tests/date/test_values.py

Covers:
  - Construction with optional calendar and era
  - Overflow policies (constrain / reject)
  - Immutability, equality, hashing and ordering
  - Copy and pickle
  - String and repr forms
"""

import copy
import pickle

import pytest

from calendrical.calendar import InvalidFieldError, InvalidTimeZoneError, create_calendar
from calendrical.date import CalendarDate, CalendarDateTime, Time, ZonedDateTime
from calendrical.date.values import _Value

HOUR = 3_600_000


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_defaults_to_gregorian_ad(self):
        date = CalendarDate(2019, 6, 5)
        assert date.calendar.identifier == "gregory"
        assert (date.era, date.year, date.month, date.day) == ("AD", 2019, 6, 5)

    def test_explicit_calendar_and_era(self):
        japanese = create_calendar("japanese")
        date = CalendarDate(japanese, "heisei", 31, 4, 30)
        assert date.calendar is japanese
        assert date.era == "heisei"

    def test_default_era_is_the_latest(self):
        assert CalendarDate(create_calendar("japanese"), 1, 6, 1).era == "reiwa"

    def test_missing_fields(self):
        with pytest.raises(TypeError):
            CalendarDate(2019, 6)

    def test_integral_floats_accepted(self):
        assert CalendarDate(2019, 6.0, 5) == CalendarDate(2019, 6, 5)

    def test_fractional_field_rejected(self):
        with pytest.raises(InvalidFieldError):
            CalendarDate(2019, 6.5, 5)

    def test_bool_field_rejected(self):
        with pytest.raises(InvalidFieldError):
            Time(True)

    def test_date_time_keywords(self):
        value = CalendarDateTime(2019, 6, 5, hour=13, minute=45)
        assert (value.hour, value.minute, value.second, value.millisecond) == (13, 45, 0, 0)

    def test_date_time_positional(self):
        value = CalendarDateTime(2019, 6, 5, 13, 45, 30, 250)
        assert (value.hour, value.minute, value.second, value.millisecond) == (13, 45, 30, 250)

    def test_zoned_resolves_offset(self):
        value = ZonedDateTime(2021, 3, 10, "America/New_York", hour=0, minute=45)
        assert value.offset == -5 * HOUR
        assert value.time_zone == "America/New_York"

    def test_zoned_explicit_offset(self):
        value = ZonedDateTime(2021, 3, 10, "America/New_York", -5 * HOUR, 0, 45)
        assert (value.offset, value.hour, value.minute) == (-5 * HOUR, 0, 45)

    def test_zoned_unknown_zone(self):
        with pytest.raises(InvalidTimeZoneError):
            ZonedDateTime(2021, 3, 10, "Mars/Olympus_Mons")


# ── Overflow ──────────────────────────────────────────────────────────────────

class TestOverflow:

    def test_day_constrained(self):
        assert CalendarDate(2019, 2, 29) == CalendarDate(2019, 2, 28)

    def test_month_constrained(self):
        assert CalendarDate(2019, 13, 1) == CalendarDate(2019, 12, 1)

    def test_day_rejected(self):
        with pytest.raises(InvalidFieldError):
            CalendarDate(2019, 2, 29, overflow="reject")

    def test_valid_date_not_rejected(self):
        assert CalendarDate(2020, 2, 29, overflow="reject").day == 29

    def test_time_constrained(self):
        assert Time(25, 61) == Time(23, 59)

    def test_time_rejected(self):
        with pytest.raises(InvalidFieldError):
            Time(24, overflow="reject")

    def test_date_time_rejected(self):
        with pytest.raises(InvalidFieldError):
            CalendarDateTime(2019, 6, 5, 12, 60, overflow="reject")


# ── Immutability and equality ─────────────────────────────────────────────────

class TestValueSemantics:

    def test_cannot_assign(self):
        date = CalendarDate(2019, 6, 5)
        with pytest.raises(AttributeError):
            date.year = 2020

    def test_cannot_delete(self):
        with pytest.raises(AttributeError):
            del Time(1).hour

    def test_value_base_is_abstract(self):
        with pytest.raises(TypeError):
            _Value()

    def test_equal_and_hash(self):
        assert CalendarDate(2019, 6, 5) == CalendarDate(2019, 6, 5)
        assert hash(CalendarDate(2019, 6, 5)) == hash(CalendarDate(2019, 6, 5))
        assert len({CalendarDate(2019, 6, 5), CalendarDate(2019, 6, 5), CalendarDate(2019, 6, 6)}) == 2

    def test_different_types_not_equal(self):
        assert CalendarDate(2019, 6, 5) != CalendarDateTime(2019, 6, 5)

    def test_different_calendars_not_equal(self):
        date = CalendarDate(2019, 6, 5)
        assert date.to_calendar(create_calendar("buddhist")) != date

    def test_ordering(self):
        dates = [CalendarDate(2019, 6, 6), CalendarDate(2018, 1, 1), CalendarDate(2019, 6, 5)]
        assert sorted(dates) == [CalendarDate(2018, 1, 1), CalendarDate(2019, 6, 5), CalendarDate(2019, 6, 6)]
        assert CalendarDate(2019, 6, 5) <= CalendarDate(2019, 6, 5)

    def test_ordering_across_calendars(self):
        buddhist = CalendarDate(2019, 6, 5).to_calendar(create_calendar("buddhist"))
        assert buddhist < CalendarDate(2019, 6, 6)
        assert buddhist.compare(CalendarDate(2019, 6, 5)) == 0

    def test_time_ordering(self):
        assert Time(9, 30) < Time(10)
        assert Time(10) > Time(9, 59, 59, 999)

    def test_time_and_date_not_ordered(self):
        with pytest.raises(TypeError):
            Time(1) < CalendarDate(2019, 6, 5)

    def test_copy_returns_equal_value(self):
        date = CalendarDate(2019, 6, 5)
        assert copy.copy(date) is date
        assert copy.deepcopy(date) is date
        assert date.copy() == date

    def test_pickle(self):
        value = ZonedDateTime(2021, 3, 10, "America/New_York", hour=0, minute=45)
        restored = pickle.loads(pickle.dumps(value))
        assert restored == value
        assert restored.to_absolute() == value.to_absolute()


# ── String forms ──────────────────────────────────────────────────────────────

class TestStrings:

    def test_date(self):
        assert str(CalendarDate(2019, 6, 5)) == "2019-06-05"

    def test_date_in_other_calendar_is_gregorian(self):
        assert str(CalendarDate(create_calendar("japanese"), "reiwa", 1, 5, 1)) == "2019-05-01"

    def test_year_one_bc(self):
        assert CalendarDate("BC", 1, 1, 1).to_string() == "0000-01-01"
        assert CalendarDate("BC", 2, 1, 1).to_string() == "-000001-01-01"

    def test_time(self):
        assert str(Time(13, 45)) == "13:45:00"
        assert str(Time(1, 2, 3, 450)) == "01:02:03.45"

    def test_date_time(self):
        assert str(CalendarDateTime(2019, 6, 5, 13, 45)) == "2019-06-05T13:45:00"

    def test_zoned(self):
        value = ZonedDateTime(2021, 3, 10, "America/New_York", hour=0, minute=45)
        assert str(value) == "2021-03-10T00:45:00-05:00[America/New_York]"
        assert value.to_absolute_string() == "2021-03-10T05:45:00.000Z"

    def test_repr(self):
        assert repr(CalendarDate(2019, 6, 5)) == "CalendarDate('gregory', 'AD', 2019, 6, 5)"
        assert repr(Time(1, 2)) == "Time(1, 2, 0, 0)"
