from __future__ import annotations

from dataclasses import dataclass, fields as dc_fields
from numbers import Integral
from typing import Any, Mapping, Optional, Union

from calendrical.calendar._exceptions import InvalidFieldError, UnsupportedFieldError

DATE_DURATION_FIELDS = ("years", "months", "weeks", "days")
TIME_DURATION_FIELDS = ("hours", "minutes", "seconds", "milliseconds")
DATE_FIELDS = ("era", "year", "month", "day")
TIME_FIELDS = ("hour", "minute", "second", "millisecond")


def as_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidFieldError(f"{name} must be an integer; got {value!r}.")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidFieldError(f"{name} must be an integer; got {value!r}.")


# ── durations ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class DateDuration:
    """An amount of calendar time: years, months, weeks and days."""

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0

    def __neg__(self) -> DateDuration:
        return DateDuration(-self.years, -self.months, -self.weeks, -self.days)


@dataclass(frozen=True, slots=True)
class TimeDuration:
    """An amount of clock time: hours down to milliseconds."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __neg__(self) -> TimeDuration:
        return TimeDuration(-self.hours, -self.minutes, -self.seconds, -self.milliseconds)


@dataclass(frozen=True, slots=True)
class DateTimeDuration:
    """Date and time components together; the form the arithmetic engine uses."""

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __neg__(self) -> DateTimeDuration:
        return DateTimeDuration(*(-getattr(self, f.name) for f in dc_fields(self)))

    @property
    def date_part(self) -> DateDuration:
        return DateDuration(self.years, self.months, self.weeks, self.days)

    @property
    def time_part(self) -> TimeDuration:
        return TimeDuration(self.hours, self.minutes, self.seconds, self.milliseconds)

    @property
    def has_date_fields(self) -> bool:
        return any(getattr(self, name) for name in DATE_DURATION_FIELDS)

    @property
    def has_time_fields(self) -> bool:
        return any(getattr(self, name) for name in TIME_DURATION_FIELDS)


AnyDuration = Union[DateDuration, TimeDuration, DateTimeDuration, Mapping[str, Any]]


def as_duration(value: Optional[AnyDuration] = None, **kwargs: Any) -> DateTimeDuration:
    """
    Normalise a duration given as a dataclass, a mapping or keyword arguments.

    Keyword arguments are added on top of ``value``; ``None`` entries are
    treated as zero.
    """
    raw: dict[str, Any] = {}
    if isinstance(value, (DateDuration, TimeDuration, DateTimeDuration)):
        raw.update({f.name: getattr(value, f.name) for f in dc_fields(value)})
    elif value is not None:
        raw.update(value)
    for key, amount in kwargs.items():
        raw[key] = raw.get(key, 0) + (amount or 0)

    counts: dict[str, int] = {}
    for key, amount in raw.items():
        if key not in DATE_DURATION_FIELDS and key not in TIME_DURATION_FIELDS:
            raise UnsupportedFieldError(f"Unsupported duration field {key!r}.")
        if amount is None:
            continue
        counts[key] = as_int(key, amount)
    return DateTimeDuration(**counts)


# ── field records ─────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class DateFields:
    era: Optional[str] = None
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None


@dataclass(frozen=True, slots=True)
class TimeFields:
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    millisecond: Optional[int] = None


AnyFields = Union[DateFields, TimeFields, Mapping[str, Any]]


def as_fields(value: Optional[AnyFields] = None, **kwargs: Any) -> dict[str, Any]:
    """Return only the fields that are present (not ``None``), validated."""
    raw: dict[str, Any] = {}
    if isinstance(value, (DateFields, TimeFields)):
        raw.update({f.name: getattr(value, f.name) for f in dc_fields(value)})
    elif value is not None:
        raw.update(value)
    raw.update(kwargs)

    present: dict[str, Any] = {}
    for key, field_value in raw.items():
        if key not in DATE_FIELDS and key not in TIME_FIELDS:
            raise UnsupportedFieldError(f"Unsupported field {key!r}.")
        if field_value is None:
            continue
        if key == "era":
            if not isinstance(field_value, str):
                raise InvalidFieldError(f"era must be a string; got {field_value!r}.")
            present[key] = field_value
        else:
            present[key] = as_int(key, field_value)
    return present
