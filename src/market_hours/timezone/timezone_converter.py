"""Conversion of UTC epoch instants to US Eastern wall-clock time.

The offset is chosen by :class:`DSTRule` (EDT, UTC-4, inside the daylight window and EST,
UTC-5, outside it) and applied as a fixed :func:`pytz.FixedOffset`. Every field of the
resulting :class:`LocalDateTime` is read from the local value, never from the UTC one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

import pytz  # type: ignore
from pandas.errors import OutOfBoundsDatetime  # type: ignore

from src.market_hours.errors import TimestampConversionError
from src.market_hours.timezone.dst_rule import DSTRule
from src.market_hours.timezone.instant import to_utc
from src.utils.config.parameters import ParameterLoader
from src.utils.io.logger import Logger


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class LocalDateTime:
    """Local market date/time broken into the fields the engine evaluates."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    weekday: int
    utc_offset_hours: int

    @property
    def local_date(self) -> date:
        """Return the local calendar date."""
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        sign = "-" if self.utc_offset_hours < 0 else "+"
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d} "
            f"(UTC{sign}{abs(self.utc_offset_hours):02d}:00)"
        )


# pylint: disable=too-few-public-methods
class TimezoneConverter:
    """Static helpers mapping UTC instants to Eastern Time."""

    _PARAMS = ParameterLoader()
    _DAYLIGHT_OFFSET: int = _PARAMS["daylight_offset_hours"]
    _STANDARD_OFFSET: int = _PARAMS["standard_offset_hours"]

    @staticmethod
    def utc_offset_hours(instant: Any) -> int:
        """Return the UTC offset in hours (-4 or -5) in force at *instant*."""
        if DSTRule.is_daylight_saving(instant):
            return TimezoneConverter._DAYLIGHT_OFFSET
        return TimezoneConverter._STANDARD_OFFSET

    @staticmethod
    def to_local(instant: Any) -> LocalDateTime:
        """Convert *instant* (epoch seconds) to local Eastern wall-clock time."""
        utc = to_utc(instant)
        try:
            offset_hours = TimezoneConverter.utc_offset_hours(instant)
            local = utc.tz_convert(pytz.FixedOffset(offset_hours * 60))
            return LocalDateTime(
                year=local.year,
                month=local.month,
                day=local.day,
                hour=local.hour,
                minute=local.minute,
                weekday=local.weekday(),
                utc_offset_hours=offset_hours,
            )
        except TimestampConversionError:
            raise
        except (OutOfBoundsDatetime, OverflowError, ValueError) as exc:
            message = f"Failed to convert timestamp {instant} to local time: {exc}"
            Logger.warning(message)
            raise TimestampConversionError(message) from exc
