"""Error taxonomy for the market-hours decision engine.

Every error carries a :class:`MarketErrorCode` with a stable numeric value so callers can
forward it across process or wire boundaries without depending on the Python class name.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class MarketErrorCode(IntEnum):
    """Stable numeric discriminants for every error kind raised by the engine."""

    OUTSIDE_BUSINESS_HOURS = 818340127
    CONVERT_UTC_ERROR = 818340128
    CALENDAR_INVARIANT = 818340129


class MarketHoursError(Exception):
    """Base class for all market-hours errors."""

    code: MarketErrorCode = MarketErrorCode.CALENDAR_INVARIANT
    default_message: str = "Market hours error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class OutsideBusinessHoursError(MarketHoursError):
    """The market is closed at the requested instant."""

    code = MarketErrorCode.OUTSIDE_BUSINESS_HOURS
    default_message = "Operation not allowed outside business hours"


class TimestampConversionError(MarketHoursError, ValueError):
    """The timestamp cannot be mapped to a single valid calendar moment."""

    code = MarketErrorCode.CONVERT_UTC_ERROR
    default_message = "Failed to convert timestamp"


class CalendarInvariantError(MarketHoursError, RuntimeError):
    """A fixed calendar rule has no matching day (a defect in the rule table)."""

    code = MarketErrorCode.CALENDAR_INVARIANT
    default_message = "Calendar rule has no matching day"
