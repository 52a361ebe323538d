"""
The one place real-world time enters the library.

``now()``/``today()`` read the process clock unless a clock is passed
explicitly; tests install a :class:`FixedClock` with :func:`set_clock`.
"""

from __future__ import annotations

import time
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def now_ms(self) -> int:
        """Milliseconds since the Unix epoch, UTC."""
        ...


class SystemClock:

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """A clock frozen at ``ms`` until advanced."""

    def __init__(self, ms: int) -> None:
        self._ms = int(ms)

    def now_ms(self) -> int:
        return self._ms

    def advance(self, ms: int) -> None:
        self._ms += int(ms)

    def __repr__(self) -> str:
        return f"FixedClock(ms={self._ms})"


_clock: Clock = SystemClock()


def get_clock(clock: Optional[Clock] = None) -> Clock:
    return clock if clock is not None else _clock


def set_clock(clock: Clock) -> None:
    global _clock
    _clock = clock


def reset_clock() -> None:
    global _clock
    _clock = SystemClock()
