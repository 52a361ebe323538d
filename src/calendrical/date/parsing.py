"""
ISO 8601 / RFC 9557 parsing and formatting.

Parsed values are always Gregorian.  Years outside 0000-9999 use the
expanded ``+YYYYYY``/``-YYYYYY`` form, where ``0000`` is 1 BC and ``-000001``
2 BC.  Zoned strings carry the zone in brackets and, optionally, an offset
that must be valid for the zone at that wall time::

    2021-03-10T00:45-05:00[America/New_York]
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Optional

from calendrical.calendar._exceptions import DateParseError
from calendrical.calendar.julian import from_extended_year
from calendrical.date import arithmetic, conversion, values
from calendrical.date._draft import DateDraft
from calendrical.date.duration import DateTimeDuration
from calendrical.date.zone import HOUR_MS, get_local_time_zone, validate_time_zone

_YEAR = r"([+-]\d{6}|\d{4})"
_TIME = r"(\d{2})(?::(\d{2}))?(?::(\d{2}))?(\.\d+)?"

TIME_RE = re.compile(r"^" + _TIME + r"$")
DATE_RE = re.compile(r"^" + _YEAR + r"-(\d{2})-(\d{2})$")
DATE_TIME_RE = re.compile(
    r"^" + _YEAR + r"-(\d{2})-(\d{2})(?:T(\d{2}))?(?::(\d{2}))?(?::(\d{2}))?(\.\d+)?$"
)
ZONED_DATE_TIME_RE = re.compile(
    r"^" + _YEAR + r"-(\d{2})-(\d{2})(?:T(\d{2}))?(?::(\d{2}))?(?::(\d{2}))?(\.\d+)?"
    r"(?:([+-]\d{2})(?::?(\d{2}))?)?\[(.*?)\]$"
)
ABSOLUTE_RE = re.compile(
    r"^" + _YEAR + r"-(\d{2})-(\d{2})(?:T(\d{2}))?(?::(\d{2}))?(?::(\d{2}))?(\.\d+)?"
    r"(?:(?:([+-]\d{2})(?::?(\d{2}))?)|Z)$"
)
DURATION_RE = re.compile(
    r"^(?P<sign>[+-])?P"
    r"(?:(?P<years>\d+)Y)?"
    r"(?:(?P<months>\d+)M)?"
    r"(?:(?P<weeks>\d+)W)?"
    r"(?:(?P<days>\d+)D)?"
    r"(?:(?P<time>T)"
    r"(?:(?P<hours>\d+(?:[.,]\d+)?)H)?"
    r"(?:(?P<minutes>\d+(?:[.,]\d+)?)M)?"
    r"(?:(?P<seconds>\d+(?:[.,]\d+)?)S)?)?$"
)


def parse_number(value: str, minimum: int, maximum: int) -> int:
    number = int(value)
    if not minimum <= number <= maximum:
        raise DateParseError(f"Value out of range: {minimum} <= {number} <= {maximum}")
    return number


def _parse_millisecond(fraction: Optional[str]) -> int:
    if not fraction:
        return 0
    return int(fraction[1:4].ljust(3, "0"))


def _parse_year(text: str) -> tuple[str, int]:
    year = parse_number(text, -9999, 9999)
    if text.startswith("-") and year == 0:
        raise DateParseError("Year -000000 is not valid; use 0000 for 1 BC.")
    return from_extended_year(year)


def _date_draft(kind: Any, groups: tuple[Optional[str], ...]) -> DateDraft:
    era, year = _parse_year(groups[0])
    draft = DateDraft(kind, values.default_calendar(), era, year, parse_number(groups[1], 1, 12), 1)
    draft.day = parse_number(groups[2], 1, draft.calendar.get_days_in_month(draft))
    return draft


def _set_time(draft: DateDraft, groups: tuple[Optional[str], ...]) -> None:
    hour, minute, second, fraction = groups
    draft.hour = parse_number(hour, 0, 23) if hour else 0
    draft.minute = parse_number(minute, 0, 59) if minute else 0
    draft.second = parse_number(second, 0, 59) if second else 0
    draft.millisecond = _parse_millisecond(fraction)


def _finish(draft: DateDraft) -> Any:
    arithmetic.constrain(draft)
    return draft.freeze()


# ── parse ─────────────────────────────────────────────────────────────────────

def parse_time(value: str) -> values.Time:
    """Parse ``HH[:MM[:SS[.sss]]]``."""
    m = TIME_RE.match(value)
    if not m:
        raise DateParseError(f"Invalid ISO 8601 time string: {value}")
    draft = DateDraft(values.Time, None, None, None, None, None)
    _set_time(draft, m.groups())
    return draft.freeze()


def parse_date(value: str) -> values.CalendarDate:
    """Parse ``YYYY-MM-DD`` into a Gregorian date."""
    m = DATE_RE.match(value)
    if not m:
        raise DateParseError(f"Invalid ISO 8601 date string: {value}")
    return _finish(_date_draft(values.CalendarDate, m.groups()))


def parse_date_time(value: str) -> values.CalendarDateTime:
    m = DATE_TIME_RE.match(value)
    if not m:
        raise DateParseError(f"Invalid ISO 8601 date time string: {value}")
    groups = m.groups()
    draft = _date_draft(values.CalendarDateTime, groups[:3])
    _set_time(draft, groups[3:7])
    return _finish(draft)


def _parse_offset(sign_hours: str, minutes: Optional[str]) -> int:
    hours = parse_number(sign_hours, -23, 23)
    mins = parse_number(minutes, 0, 59) if minutes else 0
    sign = -1 if sign_hours.startswith("-") else 1
    return sign * (abs(hours) * HOUR_MS + mins * 60_000)


def parse_zoned_date_time(value: str, disambiguation: Optional[str] = None) -> values.ZonedDateTime:
    """
    Parse ``YYYY-MM-DDTHH:MM[:SS[.sss]][±HH:MM][Zone]``.

    Without an offset the wall time is resolved with ``disambiguation``; with
    one, the offset must be valid for the zone at that wall time.
    """
    m = ZONED_DATE_TIME_RE.match(value)
    if not m:
        raise DateParseError(f"Invalid ISO 8601 date time string: {value}")
    groups = m.groups()
    time_zone = validate_time_zone(groups[9])

    draft = _date_draft(values.CalendarDateTime, groups[:3])
    _set_time(draft, groups[3:7])
    plain = _finish(draft)

    if groups[7]:
        offset = _parse_offset(groups[7], groups[8])
        ms = conversion.epoch_from_date(plain) - offset
        if ms not in conversion.possible_absolutes(plain, time_zone):
            raise DateParseError(f"Offset {offset_to_string(offset)} is invalid for {plain} in {time_zone}")
    else:
        ms = conversion.to_absolute(plain, time_zone, disambiguation)

    return conversion.from_absolute(ms, time_zone)


def parse_absolute(value: str, time_zone: str) -> values.ZonedDateTime:
    """Parse an instant (``...Z`` or with an offset) and view it in ``time_zone``."""
    m = ABSOLUTE_RE.match(value)
    if not m:
        raise DateParseError(f"Invalid ISO 8601 date time string: {value}")
    groups = m.groups()
    draft = _date_draft(values.CalendarDateTime, groups[:3])
    _set_time(draft, groups[3:7])
    plain = _finish(draft)

    offset = _parse_offset(groups[7], groups[8]) if groups[7] else 0
    return conversion.from_absolute(conversion.epoch_from_date(plain) - offset, time_zone)


def parse_absolute_to_local(value: str) -> values.ZonedDateTime:
    return parse_absolute(value, get_local_time_zone())


def parse_duration(value: str) -> DateTimeDuration:
    """
    Parse ``[±]PnYnMnWnDTnHnMnS``.

    Hours, minutes and seconds may carry a decimal fraction, which is carried
    into milliseconds; a fraction finer than a millisecond is rejected.
    """
    m = DURATION_RE.match(value)
    if not m or value.endswith("T"):
        raise DateParseError(f"Invalid ISO 8601 duration string: {value}")
    parts = m.groupdict()
    names = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")
    if not any(parts[name] for name in names):
        raise DateParseError(f"Invalid ISO 8601 duration string: {value}")

    sign = -1 if parts["sign"] == "-" else 1
    counts = {name: sign * int(parts[name]) for name in names[:4] if parts[name]}

    extra = Decimal(0)
    for name, unit in (("hours", HOUR_MS), ("minutes", 60_000), ("seconds", 1000)):
        text = parts[name]
        if not text:
            continue
        amount = Decimal(text.replace(",", "."))
        whole = int(amount)
        counts[name] = sign * whole
        extra += (amount - whole) * unit
    if extra != extra.to_integral_value():
        raise DateParseError(f"Duration {value} is finer than a millisecond.")
    if extra:
        counts["milliseconds"] = sign * int(extra)
    return DateTimeDuration(**counts)


# ── format ────────────────────────────────────────────────────────────────────

def time_to_string(value: Any) -> str:
    text = f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if value.millisecond:
        text += "." + f"{value.millisecond:03d}".rstrip("0")
    return text


def date_to_string(value: Any) -> str:
    gregorian = conversion.to_calendar(value, values.default_calendar())
    if gregorian.era == "BC":
        year = "0000" if gregorian.year == 1 else "-" + f"{gregorian.year - 1:06d}"
    elif gregorian.year > 9999:
        year = "+" + f"{gregorian.year:06d}"
    else:
        year = f"{gregorian.year:04d}"
    return f"{year}-{gregorian.month:02d}-{gregorian.day:02d}"


def date_time_to_string(value: Any) -> str:
    return f"{date_to_string(value)}T{time_to_string(value)}"


def offset_to_string(offset: int) -> str:
    sign = "-" if offset < 0 else "+"
    offset = abs(offset)
    hours, remainder = divmod(offset, HOUR_MS)
    minutes = remainder // 60_000
    return f"{sign}{hours:02d}:{minutes:02d}"


def zoned_date_time_to_string(value: Any) -> str:
    return f"{date_time_to_string(value)}{offset_to_string(value.offset)}[{value.time_zone}]"


def absolute_to_string(value: Any) -> str:
    """The instant of a zoned value as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""
    utc = conversion.from_absolute(conversion.zoned_to_absolute(value), "UTC")
    return f"{date_to_string(utc)}T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}.{utc.millisecond:03d}Z"
