from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from calendrical.calendar.base import Calendar


class DateDraft:
    """
    Mutable working copy of a date value.

    Arithmetic and construction balance and constrain a draft, then freeze it
    into the immutable value type recorded in ``kind``.  Calendar hooks
    (``balance_date``, ``constrain_date``, ``balance_year_month``) receive
    drafts and may assign to any field.

    Time fields are ``None`` for plain dates; ``time_zone``/``offset`` are
    ``None`` unless the draft came from a zoned value.
    """

    __slots__ = (
        "kind",
        "calendar",
        "era",
        "year",
        "month",
        "day",
        "hour",
        "minute",
        "second",
        "millisecond",
        "time_zone",
        "offset",
    )

    def __init__(
        self,
        kind: Any,
        calendar: Calendar,
        era: str,
        year: int,
        month: int,
        day: int,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
        millisecond: Optional[int] = None,
        time_zone: Optional[str] = None,
        offset: Optional[int] = None,
    ) -> None:
        self.kind = kind
        self.calendar = calendar
        self.era = era
        self.year = year
        self.month = month
        self.day = day
        self.hour = hour
        self.minute = minute
        self.second = second
        self.millisecond = millisecond
        self.time_zone = time_zone
        self.offset = offset

    @property
    def has_time(self) -> bool:
        return self.hour is not None

    def copy(self) -> DateDraft:
        return DateDraft(
            self.kind, self.calendar, self.era, self.year, self.month, self.day,
            self.hour, self.minute, self.second, self.millisecond,
            self.time_zone, self.offset,
        )

    def freeze(self) -> Any:
        return self.kind._from_draft(self)

    def __repr__(self) -> str:
        return (
            f"DateDraft({getattr(self.kind, '__name__', None)}, {getattr(self.calendar, 'identifier', None)!r}, "
            f"{self.era!r}, {self.year}, {self.month}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second}, {self.millisecond}, "
            f"{self.time_zone!r}, {self.offset})"
        )
