"""Typed, validated representation of an exchange's weekly trading schedule.

Flags are kept in calendar order (Monday = 0 … Sunday = 6), the same indexing used by
:meth:`datetime.date.weekday`, so callers can look days up by index or by name.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, List, Tuple, Union


@dataclass
class SessionsDays:
    """Container holding the weekly trading availability for an exchange."""

    __slots__ = ("_weekdays", "_flags")

    def __init__(self, days: Dict[str, bool], weekdays: List[str]) -> None:
        """Create a :class:`SessionsDays` from a *day → bool* mapping.

        *weekdays* lists the seven day names in calendar order, starting on Monday.
        """
        if not isinstance(days, dict):
            raise TypeError("`days` must be `Dict[str, bool]`")
        if not isinstance(weekdays, list) or len(weekdays) != 7:
            raise ValueError("`weekdays` must list the seven day names")
        normalized = {key.lower(): val for key, val in days.items()}
        missing = [d for d in weekdays if d not in normalized]
        if missing:
            raise ValueError(f"Missing keys in `days`: {', '.join(missing)}")
        for key, val in normalized.items():
            if key not in weekdays:
                raise ValueError(f"Unexpected key in `days`: '{key}'")
            if not isinstance(val, bool):
                raise TypeError(
                    f"Value for '{key}' must be bool, got {type(val).__name__}"
                )
        self._weekdays: List[str] = list(weekdays)
        self._flags: Tuple[bool, ...] = tuple(normalized[d] for d in weekdays)

    def is_trading_day(self, value: Union[int, date, datetime]) -> bool:
        """Return ``True`` if *value* (a weekday index or a date) is a trading day."""
        if isinstance(value, (date, datetime)):
            value = value.weekday()
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
            raise ValueError(f"Invalid weekday index: {value}")
        return self._flags[value]

    def is_open(self, day_name: str) -> bool:
        """Return the flag for a weekday given by name (e.g. ``"monday"``)."""
        key = day_name.strip().lower()
        if key not in self._weekdays:
            raise ValueError(f"Unknown weekday: '{day_name}'")
        return self._flags[self._weekdays.index(key)]

    def open_days(self) -> List[str]:
        """Return the names of all weekdays where the exchange is open."""
        return [day for day, flag in zip(self._weekdays, self._flags) if flag]
