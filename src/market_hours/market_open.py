"""Market-open decision for a UTC epoch instant.

Composes the timezone conversion, the regular session check and the holiday calendar into a
single boolean. The module can be imported as a library (exposing :class:`MarketOpen` and
:func:`is_market_open`) or executed directly (``python -m src.market_hours.market_open``)
to report the decision for the current clock or for a timestamp given as first argument.
"""

import sys
from typing import Any

from src.market_hours.calendar.holiday_calendar import HolidayCalendar
from src.market_hours.errors import MarketHoursError
from src.market_hours.session.trading_window import TradingWindow
from src.market_hours.timezone.timezone_converter import TimezoneConverter
from src.utils.io.logger import Logger


# pylint: disable=too-few-public-methods
class MarketOpen:
    """Stateless facade answering whether the US equity market is open.

    No instances are needed and no state is shared, so the class is safe to call from any
    number of threads at once.
    """

    @staticmethod
    def is_market_open(instant: Any) -> bool:
        """Return ``True`` if the market is open at *instant* (epoch seconds).

        Raises :class:`TimestampConversionError` when *instant* cannot be converted and
        :class:`CalendarInvariantError` when the holiday rule table is inconsistent.
        """
        local = TimezoneConverter.to_local(instant)
        if not TradingWindow.in_trading_window(local):
            Logger.debug(f"Market closed at {local}: outside trading window")
            return False
        holiday = HolidayCalendar.holiday_name(local)
        if holiday is not None:
            Logger.debug(f"Market closed at {local}: {holiday}")
            return False
        return True


def is_market_open(instant: Any) -> bool:
    """Module-level shortcut for :meth:`MarketOpen.is_market_open`."""
    return MarketOpen.is_market_open(instant)


if __name__ == "__main__":
    # pylint: disable=import-outside-toplevel
    from src.market_hours.transfer_gate import TransferGate

    try:
        TIMESTAMP = (
            int(sys.argv[1]) if len(sys.argv) > 1 else TransferGate.current_timestamp()
        )
    except ValueError:
        Logger.error(f"Invalid timestamp argument: {sys.argv[1]}")
        sys.exit(2)
    try:
        LOCAL = TimezoneConverter.to_local(TIMESTAMP)
        if MarketOpen.is_market_open(TIMESTAMP):
            Logger.success(f"Market is OPEN at {LOCAL}")
        else:
            Logger.info(f"Market is CLOSED at {LOCAL}")
    except MarketHoursError as error:
        Logger.error(f"[{error.code.value}] {error}")
        sys.exit(1)
