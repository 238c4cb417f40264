"""Market holiday classification for local (Eastern Time) calendar dates."""

from __future__ import annotations

from datetime import date
from typing import Dict, Optional, Sequence

from src.market_hours.calendar.holiday_rules import US_EQUITY_HOLIDAYS, HolidayRule
from src.market_hours.timezone.timezone_converter import LocalDateTime


class HolidayCalendar:
    """Evaluates a local date against the fixed US equity holiday rule table.

    Any matching rule makes the date a holiday. Rules are evaluated against the local
    year, so each call is independent of every other.
    """

    _RULES: Sequence[HolidayRule] = US_EQUITY_HOLIDAYS

    @staticmethod
    def holiday_name(
        local: LocalDateTime, rules: Optional[Sequence[HolidayRule]] = None
    ) -> Optional[str]:
        """Return the name of the holiday falling on *local*'s date, or ``None``."""
        for rule in rules if rules is not None else HolidayCalendar._RULES:
            if rule.matches(local.year, local.month, local.day):
                return rule.name
        return None

    @staticmethod
    def is_holiday(
        local: LocalDateTime, rules: Optional[Sequence[HolidayRule]] = None
    ) -> bool:
        """Return ``True`` if *local*'s date is a market holiday."""
        return HolidayCalendar.holiday_name(local, rules) is not None

    @staticmethod
    def holidays_for_year(
        year: int, rules: Optional[Sequence[HolidayRule]] = None
    ) -> Dict[str, date]:
        """Return every holiday of *year* keyed by name, in date order."""
        resolved = [
            (rule.name, rule.resolve(year))
            for rule in (rules if rules is not None else HolidayCalendar._RULES)
        ]
        return dict(sorted(resolved, key=lambda item: item[1]))
