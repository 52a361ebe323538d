"""
calendrical.calendar
~~~~~~~~~~~~~~~~~~~~

Calendar systems.  A Calendar converts between its own era/year/month/day
fields and julian day numbers, and reports month, year and era lengths; the
arithmetic in :mod:`calendrical.date` works on any of them.

Basic usage::

    from calendrical.calendar import create_calendar
    from calendrical.date import CalendarDate

    japanese = create_calendar("japanese")
    date = CalendarDate(2019, 4, 30).to_calendar(japanese)   # heisei 31-04-30
    date.add(days=1)                                          # reiwa 1-05-01

Public API
----------
Calendar            Abstract base for calendar systems.
create_calendar     Shared instance for an identifier ("gregory", "hebrew", ...).
register_calendar   Make a custom calendar available by identifier.
Retail454Calendar   Gregorian dates grouped into 4-5-4 fiscal periods.
CalendarError       Base exception for all calendar and date errors.
"""

from __future__ import annotations

from calendrical.calendar._exceptions import (
    AmbiguousTimeError,
    CalendarError,
    DateParseError,
    InvalidFieldError,
    InvalidTimeZoneError,
    NonexistentTimeError,
    TimeResolutionError,
    UnknownCalendarError,
    UnsupportedFieldError,
)
from calendrical.calendar.julian import date_to_julian_day, julian_day_to_date
from calendrical.calendar.base import Calendar
from calendrical.calendar.buddhist import BuddhistCalendar
from calendrical.calendar.ethiopic import CopticCalendar, EthiopicAmeteAlemCalendar, EthiopicCalendar
from calendrical.calendar.gregorian import GregorianCalendar
from calendrical.calendar.hebrew import HebrewCalendar
from calendrical.calendar.indian import IndianCalendar
from calendrical.calendar.islamic import IslamicCivilCalendar, IslamicTabularCalendar
from calendrical.calendar.japanese import JapaneseCalendar
from calendrical.calendar.persian import PersianCalendar
from calendrical.calendar.taiwan import TaiwanCalendar
from calendrical.calendar.fiscal import FiscalPeriod, Retail454Calendar
from calendrical.calendar.factory import available_calendars, create_calendar, register_calendar

__all__ = [
    "AmbiguousTimeError",
    "BuddhistCalendar",
    "Calendar",
    "CalendarError",
    "CopticCalendar",
    "DateParseError",
    "EthiopicAmeteAlemCalendar",
    "EthiopicCalendar",
    "FiscalPeriod",
    "GregorianCalendar",
    "HebrewCalendar",
    "IndianCalendar",
    "InvalidFieldError",
    "InvalidTimeZoneError",
    "IslamicCivilCalendar",
    "IslamicTabularCalendar",
    "JapaneseCalendar",
    "NonexistentTimeError",
    "PersianCalendar",
    "Retail454Calendar",
    "TaiwanCalendar",
    "TimeResolutionError",
    "UnknownCalendarError",
    "UnsupportedFieldError",
    "available_calendars",
    "create_calendar",
    "date_to_julian_day",
    "julian_day_to_date",
    "register_calendar",
]
