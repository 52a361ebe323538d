"""
Process-wide defaults, read once from the environment.

``CALENDRICAL_OVERFLOW``        ``constrain`` (default) or ``reject``
``CALENDRICAL_DISAMBIGUATION``  ``compatible`` (default), ``earlier``, ``later``, ``reject``
``CALENDRICAL_TIMEZONE``        IANA identifier used as the local time zone
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Literal, Mapping, Optional

from calendrical.calendar._exceptions import CalendarError

logger = logging.getLogger(__name__)

Overflow = Literal["constrain", "reject"]
Disambiguation = Literal["compatible", "earlier", "later", "reject"]

OVERFLOW_POLICIES: tuple[str, ...] = ("constrain", "reject")
DISAMBIGUATIONS: tuple[str, ...] = ("compatible", "earlier", "later", "reject")


def check_overflow(value: str) -> Overflow:
    if value not in OVERFLOW_POLICIES:
        raise CalendarError(f"Overflow policy must be one of {OVERFLOW_POLICIES}; got {value!r}.")
    return value  # type: ignore[return-value]


def check_disambiguation(value: str) -> Disambiguation:
    if value not in DISAMBIGUATIONS:
        raise CalendarError(f"Disambiguation must be one of {DISAMBIGUATIONS}; got {value!r}.")
    return value  # type: ignore[return-value]


@dataclass(frozen=True)
class Settings:
    overflow: Overflow = "constrain"
    disambiguation: Disambiguation = "compatible"
    time_zone: Optional[str] = None

    def __post_init__(self) -> None:
        check_overflow(self.overflow)
        check_disambiguation(self.disambiguation)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        settings = cls(
            overflow=env.get("CALENDRICAL_OVERFLOW", "constrain"),  # type: ignore[arg-type]
            disambiguation=env.get("CALENDRICAL_DISAMBIGUATION", "compatible"),  # type: ignore[arg-type]
            time_zone=env.get("CALENDRICAL_TIMEZONE") or None,
        )
        logger.debug("Loaded settings %r", settings)
        return settings


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure(**changes: object) -> Settings:
    """Replace individual settings for the rest of the process."""
    global _settings
    _settings = replace(get_settings(), **changes)
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
