"""Locate the nth or the last occurrence of a weekday inside a calendar month.

Used by the daylight-saving rule and by the floating holiday rules. Both searches are pure;
a search that finds nothing means a rule asked for a day that does not exist, which is
reported as :class:`CalendarInvariantError` instead of terminating the caller.
"""

from __future__ import annotations

import calendar
from datetime import date
from enum import IntEnum

from src.market_hours.errors import CalendarInvariantError
from src.utils.io.logger import Logger


class Weekday(IntEnum):
    """Day of the week, indexed like :meth:`datetime.date.weekday`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_name(cls, name: str) -> Weekday:
        """Return the member for a case-insensitive day name such as ``"sunday"``."""
        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown weekday: '{name}'") from exc


class WeekdayFinder:
    """Static helpers to search the days of a month for a given weekday."""

    _MAX_DAY = 31
    _MAX_OCCURRENCE = 5

    @staticmethod
    def _validate(month: int, weekday: int) -> None:
        if not 1 <= month <= 12:
            raise ValueError(f"`month` must be between 1 and 12, got {month}")
        if not 0 <= weekday <= 6:
            raise ValueError(f"`weekday` must be between 0 and 6, got {weekday}")

    @staticmethod
    def find_nth_weekday_in_month(year: int, month: int, weekday: int, n: int) -> int:
        """Return the day-of-month of the *n*-th *weekday* of *month*."""
        WeekdayFinder._validate(month, weekday)
        if not 1 <= n <= WeekdayFinder._MAX_OCCURRENCE:
            raise ValueError(f"`n` must be between 1 and 5, got {n}")
        last_day = calendar.monthrange(year, month)[1]
        count = 0
        for day in range(1, WeekdayFinder._MAX_DAY + 1):
            if day > last_day:
                break
            if date(year, month, day).weekday() == weekday:
                count += 1
                if count == n:
                    return day
        message = (
            f"No occurrence {n} of {Weekday(weekday).name.lower()} "
            f"in {year}-{month:02d}"
        )
        Logger.error(message)
        raise CalendarInvariantError(message)

    @staticmethod
    def find_last_weekday_in_month(year: int, month: int, weekday: int) -> int:
        """Return the day-of-month of the last *weekday* of *month*."""
        WeekdayFinder._validate(month, weekday)
        last_day = calendar.monthrange(year, month)[1]
        for day in range(WeekdayFinder._MAX_DAY, 0, -1):
            if day > last_day:
                continue
            if date(year, month, day).weekday() == weekday:
                return day
        message = f"No {Weekday(weekday).name.lower()} found in {year}-{month:02d}"
        Logger.error(message)
        raise CalendarInvariantError(message)
