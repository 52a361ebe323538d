"""
Immutable date and time values.

``CalendarDate``      a day in some calendar
``Time``              a wall-clock time of day
``CalendarDateTime``  a day and a time of day, without a zone
``ZonedDateTime``     a day and time in an IANA zone, with its UTC offset

Values never change after construction; every operation returns a new value.
Constructors accept an optional calendar and an optional era before the
numeric fields::

    CalendarDate(2019, 6, 5)                               # Gregorian, AD
    CalendarDate(create_calendar("japanese"), "heisei", 31, 4, 30)

Out-of-range fields are clamped (``overflow="constrain"``, the default) or
rejected with :class:`InvalidFieldError` (``overflow="reject"``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Any, Optional

from calendrical.calendar._exceptions import InvalidFieldError
from calendrical.date import arithmetic, conversion, parsing, queries
from calendrical.date._draft import DateDraft
from calendrical.date.config import check_overflow, get_settings
from calendrical.date.duration import DATE_FIELDS, TIME_FIELDS, AnyDuration, AnyFields, as_int
from calendrical.date.zone import validate_time_zone


def default_calendar() -> Any:
    """The shared Gregorian calendar."""
    from calendrical.calendar.factory import create_calendar

    return create_calendar("gregory")


def _shift_args(args: tuple[Any, ...], required: int, what: str) -> tuple[Any, str, list[Any]]:
    rest = list(args)
    if rest and not isinstance(rest[0], (Integral, str)):
        calendar = rest.pop(0)
    else:
        calendar = default_calendar()

    if rest and isinstance(rest[0], str):
        era = rest.pop(0)
    else:
        eras = calendar.get_eras()
        era = eras[-1]

    if len(rest) < required:
        raise TypeError(f"{what} requires year, month and day; got {len(rest)} numeric fields.")
    return calendar, era, rest


def _settle(draft: DateDraft, overflow: Optional[str]) -> None:
    """Constrain a freshly built draft, or reject it if any field was out of range."""
    policy = check_overflow(overflow or get_settings().overflow)
    if policy == "reject":
        probe = draft.copy()
        arithmetic.constrain(probe)
        if probe.has_time:
            arithmetic.constrain_time(probe)
        for name in DATE_FIELDS + TIME_FIELDS:
            if getattr(probe, name) != getattr(draft, name):
                raise InvalidFieldError(
                    f"Invalid {name} {getattr(draft, name)!r} for {draft.calendar.identifier} "
                    f"date {draft.era} {draft.year}-{draft.month}-{draft.day}."
                )
        return

    arithmetic.constrain(draft)
    if draft.has_time:
        arithmetic.constrain_time(draft)


def _time_args(rest: list[Any], kwargs: dict[str, Any]) -> tuple[int, int, int, int]:
    if len(rest) > 4:
        raise TypeError(f"Too many positional fields: {rest!r}.")
    given = dict(zip(TIME_FIELDS, rest))
    for name, value in kwargs.items():
        if name not in TIME_FIELDS:
            raise TypeError(f"Unexpected keyword argument {name!r}.")
        if name in given:
            raise TypeError(f"{name} given both positionally and by keyword.")
        given[name] = value
    hour, minute, second, millisecond = (as_int(name, given.get(name, 0)) for name in TIME_FIELDS)
    return hour, minute, second, millisecond


class _Value(ABC):
    """Immutability, equality and ordering shared by the value types."""

    __slots__ = ()
    _fields: tuple[str, ...] = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; use set() to change {name!r}.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def _assign(self, draft: DateDraft) -> None:
        for name in self._fields:
            object.__setattr__(self, name, getattr(draft, name))

    @classmethod
    def _from_draft(cls, draft: DateDraft) -> Any:
        obj = object.__new__(cls)
        obj._assign(draft)
        return obj

    def _key(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._key())

    @abstractmethod
    def compare(self, other: Any) -> int:
        ...

    def _comparable(self, other: object) -> bool:
        return isinstance(other, _Value) and isinstance(other, Time) == isinstance(self, Time)

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare(other) >= 0

    def __copy__(self) -> Any:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return _restore, (type(self), self._key())

    def copy(self) -> Any:
        return self._draft().freeze()

    @abstractmethod
    def _draft(self) -> DateDraft:
        ...


def _restore(kind: type, key: tuple[Any, ...]) -> Any:
    obj = object.__new__(kind)
    for name, value in zip(kind._fields, key):
        object.__setattr__(obj, name, value)
    return obj


# ── CalendarDate ──────────────────────────────────────────────────────────────

class CalendarDate(_Value):
    """A date without a time of day, in any calendar."""

    __slots__ = ("calendar", "era", "year", "month", "day")
    _fields = ("calendar", "era", "year", "month", "day")

    calendar: Any
    era: str
    year: int
    month: int
    day: int

    def __init__(self, *args: Any, overflow: Optional[str] = None) -> None:
        calendar, era, rest = _shift_args(args, 3, "CalendarDate")
        if len(rest) > 3:
            raise TypeError(f"CalendarDate takes year, month and day; got {rest!r}.")
        year, month, day = (as_int(name, value) for name, value in zip(("year", "month", "day"), rest))
        draft = DateDraft(type(self), calendar, era, year, month, day)
        _settle(draft, overflow)
        self._assign(draft)

    def _draft(self) -> DateDraft:
        return DateDraft(type(self), self.calendar, self.era, self.year, self.month, self.day)

    def add(self, duration: Optional[AnyDuration] = None, **kwargs: Any) -> CalendarDate:
        return arithmetic.add(self, duration, **kwargs)

    def subtract(self, duration: Optional[AnyDuration] = None, **kwargs: Any) -> CalendarDate:
        return arithmetic.subtract(self, duration, **kwargs)

    def set(self, fields: Optional[AnyFields] = None, **kwargs: Any) -> CalendarDate:
        return arithmetic.set_fields(self, fields, **kwargs)

    def cycle(self, field: str, amount: int, *, round: bool = False) -> CalendarDate:
        return arithmetic.cycle_date(self, field, amount, round=round)

    def to_calendar(self, calendar: Any) -> CalendarDate:
        return conversion.to_calendar(self, calendar)

    def to_date(self, time_zone: Optional[str] = None) -> Any:
        return conversion.to_date(self, time_zone)

    def compare(self, other: Any) -> int:
        return queries.compare_date(self, other)

    def to_string(self) -> str:
        return parsing.date_to_string(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"CalendarDate({self.calendar.identifier!r}, {self.era!r}, {self.year}, {self.month}, {self.day})"


# ── Time ──────────────────────────────────────────────────────────────────────

class Time(_Value):
    """A wall-clock time of day, independent of date and zone."""

    __slots__ = ("hour", "minute", "second", "millisecond")
    _fields = ("hour", "minute", "second", "millisecond")

    hour: int
    minute: int
    second: int
    millisecond: int

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        overflow: Optional[str] = None,
    ) -> None:
        draft = DateDraft(
            type(self), None, None, None, None, None,
            as_int("hour", hour), as_int("minute", minute),
            as_int("second", second), as_int("millisecond", millisecond),
        )
        policy = check_overflow(overflow or get_settings().overflow)
        probe = draft.copy()
        arithmetic.constrain_time(probe)
        if policy == "reject":
            for name in TIME_FIELDS:
                if getattr(probe, name) != getattr(draft, name):
                    raise InvalidFieldError(f"Invalid {name} {getattr(draft, name)!r} for a time of day.")
        self._assign(probe)

    def _draft(self) -> DateDraft:
        return DateDraft(
            type(self), None, None, None, None, None,
            self.hour, self.minute, self.second, self.millisecond,
        )

    def add(self, duration: Optional[AnyDuration] = None, **kwargs: Any) -> Time:
        return arithmetic.add_time(self, duration, **kwargs)

    def subtract(self, duration: Optional[AnyDuration] = None, **kwargs: Any) -> Time:
        return arithmetic.subtract_time(self, duration, **kwargs)

    def set(self, fields: Optional[AnyFields] = None, **kwargs: Any) -> Time:
        return arithmetic.set_time(self, fields, **kwargs)

    def cycle(self, field: str, amount: int, *, round: bool = False, hour_cycle: int = 24) -> Time:
        return arithmetic.cycle_time(self, field, amount, round=round, hour_cycle=hour_cycle)

    def compare(self, other: Any) -> int:
        return queries.compare_time(self, other)

    def to_string(self) -> str:
        return parsing.time_to_string(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Time({self.hour}, {self.minute}, {self.second}, {self.millisecond})"


# ── CalendarDateTime ──────────────────────────────────────────────────────────

class CalendarDateTime(_Value):
    """A date and time of day without a time zone."""

    __slots__ = ("calendar", "era", "year", "month", "day", "hour", "minute", "second", "millisecond")
    _fields = ("calendar", "era", "year", "month", "day", "hour", "minute", "second", "millisecond")

    calendar: Any
    era: str
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int

    def __init__(self, *args: Any, overflow: Optional[str] = None, **time: Any) -> None:
        calendar, era, rest = _shift_args(args, 3, "CalendarDateTime")
        year, month, day = (as_int(name, value) for name, value in zip(("year", "month", "day"), rest))
        hour, minute, second, millisecond = _time_args(rest[3:], time)
        draft = DateDraft(type(self), calendar, era, year, month, day, hour, minute, second, millisecond)
        _settle(draft, overflow)
        self._assign(draft)

    def _draft(self) -> DateDraft:
        return DateDraft(
            type(self), self.calendar, self.era, self.year, self.month, self.day,
            self.hour, self.minute, self.second, self.millisecond,
        )

    def add(self, duration: Optional[AnyDuration] = None, **kwargs: Any) -> CalendarDateTime:
        return arithmetic.add(self, duration, **kwargs)

    def subtract(self, duration: Optional[AnyDuration] = None, **kwargs: Any) -> CalendarDateTime:
        return arithmetic.subtract(self, duration, **kwargs)

    def set(self, fields: Optional[AnyFields] = None, **kwargs: Any) -> CalendarDateTime:
        return arithmetic.set_fields(self, fields, **kwargs)

    def cycle(self, field: str, amount: int, *, round: bool = False, hour_cycle: int = 24) -> CalendarDateTime:
        return arithmetic.cycle(self, field, amount, round=round, hour_cycle=hour_cycle)

    def to_calendar(self, calendar: Any) -> CalendarDateTime:
        return conversion.to_calendar(self, calendar)

    def to_date(self, time_zone: Optional[str] = None, disambiguation: Optional[str] = None) -> Any:
        return conversion.to_date(self, time_zone, disambiguation)

    def compare(self, other: Any) -> int:
        return queries.compare_date_time(self, other)

    def to_string(self) -> str:
        return parsing.date_time_to_string(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"CalendarDateTime({self.calendar.identifier!r}, {self.era!r}, {self.year}, {self.month}, "
            f"{self.day}, {self.hour}, {self.minute}, {self.second}, {self.millisecond})"
        )


# ── ZonedDateTime ─────────────────────────────────────────────────────────────

class ZonedDateTime(_Value):
    """
    A date and time in an IANA time zone.

    ``offset`` is the UTC offset in milliseconds in force at this wall time.
    When it is not given it is resolved from the zone with ``disambiguation``
    (``compatible`` by default), and the fields are adjusted if the wall time
    was skipped by a DST transition.
    """

    __slots__ = (
        "calendar", "era", "year", "month", "day",
        "time_zone", "offset", "hour", "minute", "second", "millisecond",
    )
    _fields = (
        "calendar", "era", "year", "month", "day",
        "time_zone", "offset", "hour", "minute", "second", "millisecond",
    )

    calendar: Any
    era: str
    year: int
    month: int
    day: int
    time_zone: str
    offset: int
    hour: int
    minute: int
    second: int
    millisecond: int

    def __init__(
        self,
        *args: Any,
        disambiguation: Optional[str] = None,
        overflow: Optional[str] = None,
        **time: Any,
    ) -> None:
        calendar, era, rest = _shift_args(args, 4, "ZonedDateTime")
        year, month, day = (as_int(name, value) for name, value in zip(("year", "month", "day"), rest))
        time_zone = rest[3]
        if not isinstance(time_zone, str):
            raise TypeError(f"ZonedDateTime needs a time zone identifier; got {time_zone!r}.")
        validate_time_zone(time_zone)

        rest = rest[4:]
        offset: Optional[int] = None
        if rest and rest[0] is None:
            rest = rest[1:]
        elif rest and "offset" not in time:
            offset = as_int("offset", rest[0])
            rest = rest[1:]
        if "offset" in time:
            raw_offset = time.pop("offset")
            offset = None if raw_offset is None else as_int("offset", raw_offset)

        hour, minute, second, millisecond = _time_args(rest, time)
        draft = DateDraft(
            CalendarDateTime, calendar, era, year, month, day, hour, minute, second, millisecond,
        )
        _settle(draft, overflow)

        if offset is None:
            resolved = conversion.to_calendar(
                conversion.from_absolute(
                    conversion.to_absolute(draft.freeze(), time_zone, disambiguation), time_zone
                ),
                calendar,
            )
            draft = resolved._draft()
        else:
            draft.time_zone = time_zone
            draft.offset = offset
        draft.kind = type(self)
        self._assign(draft)

    def _draft(self) -> DateDraft:
        return DateDraft(
            type(self), self.calendar, self.era, self.year, self.month, self.day,
            self.hour, self.minute, self.second, self.millisecond, self.time_zone, self.offset,
        )

    def add(self, duration: Optional[AnyDuration] = None, **kwargs: Any) -> ZonedDateTime:
        return arithmetic.add_zoned(self, duration, **kwargs)

    def subtract(self, duration: Optional[AnyDuration] = None, **kwargs: Any) -> ZonedDateTime:
        return arithmetic.subtract_zoned(self, duration, **kwargs)

    def set(
        self,
        fields: Optional[AnyFields] = None,
        *,
        disambiguation: Optional[str] = None,
        **kwargs: Any,
    ) -> ZonedDateTime:
        return arithmetic.set_zoned(self, fields, disambiguation=disambiguation, **kwargs)

    def cycle(self, field: str, amount: int, *, round: bool = False, hour_cycle: int = 24) -> ZonedDateTime:
        return arithmetic.cycle_zoned(self, field, amount, round=round, hour_cycle=hour_cycle)

    def to_calendar(self, calendar: Any) -> ZonedDateTime:
        return conversion.to_calendar(self, calendar)

    def to_time_zone(self, time_zone: str) -> ZonedDateTime:
        return conversion.to_time_zone(self, time_zone)

    def to_date(self) -> Any:
        return conversion.to_date(self)

    def to_absolute(self) -> int:
        """Milliseconds since the Unix epoch."""
        return conversion.zoned_to_absolute(self)

    def compare(self, other: Any) -> int:
        return queries.compare_zoned(self, other)

    def to_string(self) -> str:
        return parsing.zoned_date_time_to_string(self)

    def to_absolute_string(self) -> str:
        return parsing.absolute_to_string(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"ZonedDateTime({self.calendar.identifier!r}, {self.era!r}, {self.year}, {self.month}, "
            f"{self.day}, {self.time_zone!r}, {self.offset}, {self.hour}, {self.minute}, "
            f"{self.second}, {self.millisecond})"
        )
