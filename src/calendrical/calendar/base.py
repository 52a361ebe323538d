from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from calendrical.date import arithmetic
from calendrical.date._draft import DateDraft

if TYPE_CHECKING:
    from calendrical.date.values import CalendarDate


class Calendar(ABC):
    """
    A calendar system: how days, months, years and eras are organised.

    Subclasses convert between their fields and julian day numbers and report
    month/year/era lengths.  The optional capabilities below have generic
    defaults; override them (calling ``super()`` where the generic algorithm
    still applies) for calendars with irregular periods or eras.

    Methods taking ``date`` accept any object with ``era``, ``year``,
    ``month`` and ``day`` attributes: a frozen value or a draft.  The
    ``balance_*``/``constrain_*`` hooks receive drafts and are called only by
    the arithmetic engine.

    Instances hold no per-call state and are shared by every date that
    references them.
    """

    identifier: str = ""

    # ── required ─────────────────────────────────────────────────────────────

    @abstractmethod
    def from_julian_day(self, jd: int) -> CalendarDate:
        ...

    @abstractmethod
    def to_julian_day(self, date: Any) -> int:
        ...

    @abstractmethod
    def get_days_in_month(self, date: Any) -> int:
        ...

    @abstractmethod
    def get_months_in_year(self, date: Any) -> int:
        ...

    @abstractmethod
    def get_years_in_era(self, date: Any) -> int:
        ...

    @abstractmethod
    def get_eras(self) -> list[str]:
        ...

    # ── optional capabilities ────────────────────────────────────────────────

    def get_days_in_year(self, date: Any) -> int:
        probe = DateDraft(None, self, date.era, date.year, 1, 1)
        total = 0
        for month in range(1, self.get_months_in_year(probe) + 1):
            probe.month = month
            total += self.get_days_in_month(probe)
        return total

    def get_first_day_of_week(self) -> Optional[int]:
        """0 = Sunday.  ``None`` leaves the choice to the caller's locale."""
        return None

    def get_start_of_month(self, date: Any) -> Any:
        return date.subtract(days=date.day - 1)

    def get_end_of_month(self, date: Any) -> Any:
        return date.add(days=self.get_days_in_month(date) - date.day)

    def get_start_of_year(self, date: Any) -> Any:
        return self.get_start_of_month(date.subtract(months=date.month - 1))

    def get_end_of_year(self, date: Any) -> Any:
        return self.get_end_of_month(date.add(months=self.get_months_in_year(date) - date.month))

    def get_minimum_month_in_year(self, date: Any) -> int:
        return 1

    def get_minimum_day_in_month(self, date: Any) -> int:
        return 1

    def get_maximum_day_in_month(self, date: Any) -> int:
        """Largest day number the month accepts; the upper bound when cycling days."""
        return self.get_days_in_month(date)

    # ── engine hooks (private) ───────────────────────────────────────────────

    def balance_date(self, date: DateDraft) -> None:
        arithmetic.balance_day(date)

    def balance_year_month(self, date: DateDraft, previous: Any) -> None:
        pass

    def constrain_date(self, date: DateDraft) -> None:
        arithmetic.constrain_fields(date)

    def constrain_month_day(self, date: DateDraft) -> None:
        arithmetic.constrain_month_day(date)

    def is_inverse_era(self, date: Any) -> bool:
        return False

    # ── identity ─────────────────────────────────────────────────────────────

    def is_equal(self, other: Any) -> bool:
        return isinstance(other, Calendar) and other.identifier == self.identifier

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.is_equal(other) and other.is_equal(self)

    def __hash__(self) -> int:
        return hash(self.identifier)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identifier={self.identifier!r})"
