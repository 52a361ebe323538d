from __future__ import annotations


class CalendarError(ValueError):
    """Base exception for all calendar and date errors."""


class InvalidFieldError(CalendarError):
    """A date or time field is outside the range its calendar allows."""


class DateParseError(CalendarError):
    """A string is not a valid ISO 8601 date, time or duration."""


class UnsupportedFieldError(CalendarError):
    """The requested field or operation is not defined for the value."""


class UnknownCalendarError(CalendarError):
    """No calendar is registered under the requested identifier."""


class InvalidTimeZoneError(CalendarError):
    """The time zone identifier is not known to the IANA database."""


class TimeResolutionError(CalendarError):
    """A wall-clock time could not be resolved to a single instant."""


class NonexistentTimeError(TimeResolutionError):
    """The wall-clock time falls in a gap (e.g. a spring-forward transition)."""


class AmbiguousTimeError(TimeResolutionError):
    """The wall-clock time occurs twice (e.g. a fall-back transition)."""
