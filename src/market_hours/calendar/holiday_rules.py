"""Declarative holiday rules and the US equity market rule table.

A rule resolves to one calendar date per year. Four kinds exist: fixed month/day, nth
weekday of a month, last weekday of a month, and a signed offset from Easter Sunday.
The table is identical for every year and is not loaded from configuration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Tuple

from src.market_hours.calendar.easter import Easter
from src.market_hours.calendar.weekday_finder import Weekday, WeekdayFinder


@dataclass(frozen=True)
class HolidayRule(ABC):
    """A named rule producing a single holiday date per year."""

    name: str

    @abstractmethod
    def resolve(self, year: int) -> date:
        """Return the holiday date this rule produces for *year*."""

    def matches(self, year: int, month: int, day: int) -> bool:
        """Return ``True`` if *month*/*day* is this rule's holiday in *year*."""
        holiday = self.resolve(year)
        return holiday.month == month and holiday.day == day


@dataclass(frozen=True)
class FixedDate(HolidayRule):
    """Holiday on the same month/day every year."""

    month: int
    day: int

    def resolve(self, year: int) -> date:
        return date(year, self.month, self.day)

    def matches(self, year: int, month: int, day: int) -> bool:
        return self.month == month and self.day == day


@dataclass(frozen=True)
class NthWeekday(HolidayRule):
    """Holiday on the *n*-th given weekday of a month (``n`` in 1..5)."""

    month: int
    weekday: Weekday
    n: int

    def __post_init__(self) -> None:
        if not 1 <= self.n <= 5:
            raise ValueError(f"`n` must be between 1 and 5, got {self.n}")

    def resolve(self, year: int) -> date:
        day = WeekdayFinder.find_nth_weekday_in_month(
            year, self.month, self.weekday, self.n
        )
        return date(year, self.month, day)

    def matches(self, year: int, month: int, day: int) -> bool:
        if month != self.month:
            return False
        return super().matches(year, month, day)


@dataclass(frozen=True)
class LastWeekday(HolidayRule):
    """Holiday on the last given weekday of a month."""

    month: int
    weekday: Weekday

    def resolve(self, year: int) -> date:
        day = WeekdayFinder.find_last_weekday_in_month(year, self.month, self.weekday)
        return date(year, self.month, day)

    def matches(self, year: int, month: int, day: int) -> bool:
        if month != self.month:
            return False
        return super().matches(year, month, day)


@dataclass(frozen=True)
class EasterOffset(HolidayRule):
    """Holiday a signed number of days away from Gregorian Easter Sunday."""

    days: int

    def resolve(self, year: int) -> date:
        return Easter.sunday(year) + timedelta(days=self.days)


US_EQUITY_HOLIDAYS: Tuple[HolidayRule, ...] = (
    FixedDate("New Year's Day", 1, 1),
    FixedDate("Juneteenth National Independence Day", 6, 19),
    FixedDate("Independence Day", 7, 4),
    FixedDate("Christmas Day", 12, 25),
    NthWeekday("Martin Luther King Jr. Day", 1, Weekday.MONDAY, 3),
    NthWeekday("Washington's Birthday", 2, Weekday.MONDAY, 3),
    NthWeekday("Labor Day", 9, Weekday.MONDAY, 1),
    NthWeekday("Thanksgiving Day", 11, Weekday.THURSDAY, 4),
    LastWeekday("Memorial Day", 5, Weekday.MONDAY),
    EasterOffset("Good Friday", -2),
)
