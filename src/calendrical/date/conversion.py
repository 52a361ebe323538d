"""
Conversions between calendars, wall-clock values and absolute instants.

Absolute instants are integer milliseconds since 1970-01-01T00:00Z.  Going
from a wall-clock time to an instant may be ambiguous (the hour repeated at a
fall-back transition) or impossible (the hour skipped at spring-forward); the
``disambiguation`` policy decides:

``compatible``  earlier instant for repeated times, later for skipped ones
``earlier``     the earlier candidate
``later``       the later candidate
``reject``      raise :class:`AmbiguousTimeError` / :class:`NonexistentTimeError`
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Optional

from calendrical.calendar._exceptions import (
    AmbiguousTimeError,
    InvalidTimeZoneError,
    NonexistentTimeError,
    UnsupportedFieldError,
)
from calendrical.calendar.julian import UNIX_EPOCH, date_to_julian_day, from_extended_year, julian_day_to_date
from calendrical.date import arithmetic, values
from calendrical.date._draft import DateDraft
from calendrical.date.config import check_disambiguation, get_settings
from calendrical.date.zone import (
    DAY_MS,
    HOUR_MS,
    UTC_IDENTIFIERS,
    get_local_time_zone,
    get_time_zone_offset,
    get_time_zone_parts,
    get_zone,
    validate_time_zone,
)

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ── calendars ─────────────────────────────────────────────────────────────────

def to_calendar(value: Any, calendar: Any) -> Any:
    """Re-express ``value`` in ``calendar``; the julian day and time are preserved."""
    if value.calendar.is_equal(calendar):
        return value

    converted = calendar.from_julian_day(value.calendar.to_julian_day(value))
    draft = value._draft()
    draft.calendar = calendar
    draft.era, draft.year, draft.month, draft.day = (
        converted.era, converted.year, converted.month, converted.day
    )
    arithmetic.constrain(draft)
    return draft.freeze()


# ── between value types ───────────────────────────────────────────────────────

def to_calendar_date(value: Any) -> values.CalendarDate:
    return DateDraft(values.CalendarDate, value.calendar, value.era, value.year, value.month, value.day).freeze()


def to_calendar_date_time(value: Any, time: Optional[Any] = None) -> values.CalendarDateTime:
    """Drop the zone of a zoned value, or attach ``time`` (midnight by default) to a date."""
    if isinstance(value, values.CalendarDateTime) and time is None:
        return value

    clock = time if time is not None else (value if getattr(value, "hour", None) is not None else None)
    hour, minute, second, millisecond = (
        (clock.hour, clock.minute, clock.second, clock.millisecond) if clock is not None else (0, 0, 0, 0)
    )
    return DateDraft(
        values.CalendarDateTime, value.calendar, value.era, value.year, value.month, value.day,
        hour, minute, second, millisecond,
    ).freeze()


def to_time(value: Any) -> values.Time:
    if getattr(value, "hour", None) is None:
        raise UnsupportedFieldError("A date has no time of day.")
    return DateDraft(
        values.Time, None, None, None, None, None,
        value.hour, value.minute, value.second, value.millisecond,
    ).freeze()


# ── instants ──────────────────────────────────────────────────────────────────

def epoch_from_date(value: Any) -> int:
    """Milliseconds since the Unix epoch of ``value``'s wall-clock fields read as UTC."""
    jd = value.calendar.to_julian_day(value)
    ms = (jd - UNIX_EPOCH) * DAY_MS
    if getattr(value, "hour", None) is not None:
        ms += value.hour * HOUR_MS + value.minute * 60_000 + value.second * 1000 + value.millisecond
    return ms


def _is_valid_wall_time(jd: int, value: Any, time_zone: str, absolute: int) -> bool:
    year, month, day, hour, minute, second, _ = get_time_zone_parts(absolute, time_zone)
    return (
        date_to_julian_day(year, month, day) == jd
        and hour == value.hour
        and minute == value.minute
        and second == value.second
    )


def possible_absolutes(value: Any, time_zone: str) -> list[int]:
    """All instants at which the zone's clocks show ``value``: zero, one or two."""
    plain = to_calendar_date_time(value)
    ms = epoch_from_date(plain)
    if time_zone in UTC_IDENTIFIERS:
        return [ms]

    offset_before = get_time_zone_offset(ms - DAY_MS, time_zone)
    offset_after = get_time_zone_offset(ms + DAY_MS, time_zone)
    candidates = sorted({ms - offset_before, ms - offset_after})
    jd = plain.calendar.to_julian_day(plain)
    return [c for c in candidates if _is_valid_wall_time(jd, plain, time_zone, c)]


def to_absolute(value: Any, time_zone: str, disambiguation: Optional[str] = None) -> int:
    """Resolve a wall-clock value in ``time_zone`` to an instant."""
    policy = check_disambiguation(disambiguation or get_settings().disambiguation)
    plain = to_calendar_date_time(value)
    ms = epoch_from_date(plain)
    if time_zone in UTC_IDENTIFIERS:
        return ms
    validate_time_zone(time_zone)

    valid = possible_absolutes(plain, time_zone)
    if len(valid) == 1:
        return valid[0]

    if len(valid) > 1:
        logger.debug("%s is ambiguous in %s; resolving %s", plain, time_zone, policy)
        if policy in ("compatible", "earlier"):
            return valid[0]
        if policy == "later":
            return valid[-1]
        raise AmbiguousTimeError(f"{plain} occurs twice in {time_zone}.")

    if policy == "reject":
        raise NonexistentTimeError(f"{plain} does not exist in {time_zone}.")

    logger.debug("%s is skipped in %s; resolving %s", plain, time_zone, policy)
    # Skipped time: shift by the transition, forwards or backwards.
    offset_before = get_time_zone_offset(ms - DAY_MS, time_zone)
    offset_after = get_time_zone_offset(ms + DAY_MS, time_zone)
    if policy == "earlier":
        return ms - max(offset_before, offset_after)
    return ms - min(offset_before, offset_after)


def from_absolute(ms: int, time_zone: str) -> values.ZonedDateTime:
    """The Gregorian zoned date-time at instant ``ms`` in ``time_zone``."""
    validate_time_zone(time_zone)
    offset = get_time_zone_offset(ms, time_zone)
    days, remainder = divmod(ms + offset, DAY_MS)
    extended, month, day = julian_day_to_date(days + UNIX_EPOCH)
    era, year = from_extended_year(extended)
    hour, remainder = divmod(remainder, HOUR_MS)
    minute, remainder = divmod(remainder, 60_000)
    second, millisecond = divmod(remainder, 1000)

    draft = DateDraft(
        values.ZonedDateTime, values.default_calendar(), era, year, month, day,
        hour, minute, second, millisecond, time_zone, offset,
    )
    arithmetic.constrain(draft)
    return draft.freeze()


def from_datetime(value: datetime, time_zone: Optional[str] = None) -> values.ZonedDateTime:
    """
    Convert an aware :class:`datetime.datetime` to a zoned date-time.

    ``time_zone`` defaults to the datetime's own ``ZoneInfo`` key (or UTC).
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidTimeZoneError("A naive datetime has no time zone; pass an aware datetime.")
    if time_zone is None:
        time_zone = _zone_name(value.tzinfo)
    ms = (value - _EPOCH) // timedelta(milliseconds=1)
    return from_absolute(ms, time_zone)


def _zone_name(tz: tzinfo) -> str:
    key = getattr(tz, "key", None)
    if key:
        return key
    if tz is timezone.utc or tz.utcoffset(None) == timedelta(0):
        return "UTC"
    raise InvalidTimeZoneError(f"Cannot name the time zone of {tz!r}; pass time_zone explicitly.")


def to_date(value: Any, time_zone: Optional[str] = None, disambiguation: Optional[str] = None) -> datetime:
    """An aware :class:`datetime.datetime` for ``value`` (its own zone for zoned values)."""
    if isinstance(value, values.ZonedDateTime):
        time_zone = value.time_zone
        ms = epoch_from_date(value) - value.offset
    else:
        if time_zone is None:
            time_zone = get_local_time_zone()
        ms = to_absolute(value, time_zone, disambiguation)
    zone = timezone.utc if time_zone in UTC_IDENTIFIERS else get_zone(time_zone)
    return (_EPOCH + timedelta(milliseconds=ms)).astimezone(zone)


# ── zoned ─────────────────────────────────────────────────────────────────────

def to_zoned(value: Any, time_zone: str, disambiguation: Optional[str] = None) -> values.ZonedDateTime:
    """Interpret a date or date-time as wall-clock time in ``time_zone``."""
    if isinstance(value, values.ZonedDateTime):
        if value.time_zone == time_zone:
            return value
        return to_time_zone(value, time_zone)

    ms = to_absolute(value, time_zone, disambiguation)
    return to_calendar(from_absolute(ms, time_zone), value.calendar)


def to_time_zone(value: Any, time_zone: str) -> values.ZonedDateTime:
    """The same instant seen from another zone."""
    ms = epoch_from_date(value) - value.offset
    return to_calendar(from_absolute(ms, time_zone), value.calendar)


def to_local_time_zone(value: Any) -> values.ZonedDateTime:
    return to_time_zone(value, get_local_time_zone())


def zoned_to_absolute(value: Any) -> int:
    return epoch_from_date(value) - value.offset
