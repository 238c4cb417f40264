"""Typed, validated representation of a trading session's opening and closing times.

Times are local wall-clock "HH:MM" strings. A session covers the half-open interval
``[open, close)``; a ``close`` of "00:00" stands for the end of the day.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_MINUTES_PER_DAY = 24 * 60


# pylint: disable=too-few-public-methods
@dataclass
class Hours:
    """Container for a single session's open and close time.

    * open: Opening time in "HH:MM" format (defaults to "00:00").
    * close: Closing time in "HH:MM" format (defaults to "00:00", end of day).
    """

    __slots__ = ("_open", "_close")

    def __init__(self, open_time: Optional[str], close_time: Optional[str]) -> None:
        """Initialize a trading session with optional open/close times."""
        validated_open = self._validate_time(open_time, "open")
        validated_close = self._validate_time(close_time, "close")
        if validated_close != "00:00" and validated_open > validated_close:
            raise ValueError("`open` must be <= `close`, unless `close` == '00:00'")
        self._open = validated_open
        self._close = validated_close

    @property
    def open(self) -> str:
        """Return the session opening time."""
        return self._open

    @property
    def close(self) -> str:
        """Return the session closing time."""
        return self._close

    @property
    def open_minutes(self) -> int:
        """Minutes after midnight at which the session opens."""
        return self._to_minutes(self._open)

    @property
    def close_minutes(self) -> int:
        """Minutes after midnight at which the session closes (1440 for "00:00")."""
        if self._close == "00:00":
            return _MINUTES_PER_DAY
        return self._to_minutes(self._close)

    def contains(self, hour: int, minute: int) -> bool:
        """Return ``True`` if *hour*:*minute* lies inside ``[open, close)``."""
        current = hour * 60 + minute
        return self.open_minutes <= current < self.close_minutes

    @staticmethod
    def _to_minutes(value: str) -> int:
        hours, minutes = map(int, value.split(":"))
        return hours * 60 + minutes

    def _validate_time(self, value: Optional[str], field: str) -> str:
        """Validate the time string or fall back to midnight."""
        if value is None:
            return "00:00"
        if not isinstance(value, str):
            raise TypeError(f"`{field}` must be a string or None")
        if len(value.strip()) == 0:
            return "00:00"
        if not re.fullmatch(r"\d{2}:\d{2}", value):
            raise ValueError(f"`{field}` must be in 'HH:MM' format")
        hours, minutes = map(int, value.split(":"))
        if not (0 <= hours <= 23 and 0 <= minutes <= 59):
            raise ValueError(f"`{field}` must be a valid time between 00:00 and 23:59")
        return value
