"""US daylight-saving rule expressed as two UTC boundaries per year.

Daylight time starts on the second Sunday of March at 07:00 UTC and ends on the first Sunday
of November at 06:00 UTC. Both boundaries are 02:00 local time under the offset in force just
before the transition (EST at the spring change, EDT at the fall change).
"""

from typing import Any, Dict, Tuple

import pandas as pd  # type: ignore
from pandas.errors import OutOfBoundsDatetime  # type: ignore

from src.market_hours.calendar.weekday_finder import Weekday, WeekdayFinder
from src.market_hours.errors import TimestampConversionError
from src.market_hours.timezone.instant import to_utc
from src.utils.config.parameters import ParameterLoader


class DSTRule:
    """Static helpers deciding whether a UTC instant falls within daylight time."""

    _PARAMS = ParameterLoader()
    _START: Dict[str, Any] = _PARAMS["dst_start"]
    _END: Dict[str, Any] = _PARAMS["dst_end"]

    @staticmethod
    def _boundary(year: int, rule: Dict[str, Any]) -> pd.Timestamp:
        day = WeekdayFinder.find_nth_weekday_in_month(
            year, rule["month"], Weekday.from_name(rule["weekday"]), rule["nth"]
        )
        try:
            return pd.Timestamp(
                year=year, month=rule["month"], day=day, hour=rule["utc_hour"], tz="UTC"
            )
        except (OutOfBoundsDatetime, OverflowError, ValueError) as exc:
            raise TimestampConversionError(
                f"Cannot build daylight-saving boundary for {year}: {exc}"
            ) from exc

    @staticmethod
    def boundaries(year: int) -> Tuple[pd.Timestamp, pd.Timestamp]:
        """Return the UTC start (inclusive) and end (exclusive) of daylight time in *year*."""
        return DSTRule._boundary(year, DSTRule._START), DSTRule._boundary(
            year, DSTRule._END
        )

    @staticmethod
    def is_daylight_saving(instant: Any) -> bool:
        """Return ``True`` if *instant* (epoch seconds) falls within daylight time."""
        utc = to_utc(instant)
        start, end = DSTRule.boundaries(utc.year)
        return start <= utc < end
