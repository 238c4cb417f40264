"""Regular trading session check on local Eastern Time values."""

from src.market_hours.timezone.timezone_converter import LocalDateTime
from src.utils.config.parameters import ParameterLoader
from src.utils.exchange.hours import Hours
from src.utils.exchange.sessions_days import SessionsDays


# pylint: disable=too-few-public-methods
class TradingWindow:
    """Decides whether a local date/time falls in the weekday session [09:30, 16:00)."""

    _PARAMS = ParameterLoader()
    _HOURS: Hours = _PARAMS.regular_hours()
    _DAYS: SessionsDays = _PARAMS.sessions_days()

    @staticmethod
    def in_trading_window(local: LocalDateTime) -> bool:
        """Return ``True`` if *local* is on a trading weekday inside regular hours."""
        return TradingWindow._DAYS.is_trading_day(local.weekday) and (
            TradingWindow._HOURS.contains(local.hour, local.minute)
        )
