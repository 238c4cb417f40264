"""Transfer authorization gate driven by the market-open decision.

A closed market is a normal denial ("business hours"); an unusable timestamp is an input
error ("malformed timestamp"). Both carry their stable :class:`MarketErrorCode`, so callers
can tell "wait for the market" apart from "fix the input".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd  # type: ignore

from src.market_hours.errors import (MarketErrorCode, OutsideBusinessHoursError,
                                     TimestampConversionError)
from src.market_hours.market_open import MarketOpen
from src.utils.io.logger import Logger


@dataclass(frozen=True)
class TransferDecision:
    """Outcome of a transfer authorization check."""

    allowed: bool
    error_code: Optional[MarketErrorCode] = None
    reason: Optional[str] = None


class TransferGate:
    """Static entry points used by the transfer authorization flow."""

    @staticmethod
    def current_timestamp() -> int:
        """Return the current UTC time in whole epoch seconds."""
        return int(pd.Timestamp.now(tz="UTC").timestamp())

    @staticmethod
    def authorize(timestamp: Optional[int] = None) -> None:
        """Raise unless a transfer may proceed at *timestamp* (defaults to now).

        Raises :class:`OutsideBusinessHoursError` when the market is closed and
        :class:`TimestampConversionError` when *timestamp* cannot be converted.
        """
        if timestamp is None:
            timestamp = TransferGate.current_timestamp()
        if not MarketOpen.is_market_open(timestamp):
            Logger.info(f"Transfer denied at {timestamp}: market closed")
            raise OutsideBusinessHoursError()

    @staticmethod
    def check(timestamp: Optional[int] = None) -> TransferDecision:
        """Return the authorization outcome for *timestamp* without raising.

        Only the two boundary error kinds are folded into the result; calendar defects
        still propagate.
        """
        try:
            TransferGate.authorize(timestamp)
        except OutsideBusinessHoursError as error:
            return TransferDecision(False, error.code, str(error))
        except TimestampConversionError as error:
            Logger.warning(f"Transfer denied: malformed timestamp {timestamp!r}")
            return TransferDecision(False, error.code, str(error))
        return TransferDecision(True)
