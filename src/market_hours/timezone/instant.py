"""Validation and conversion of raw epoch-second instants into UTC timestamps."""

import numbers
from datetime import datetime, timezone
from typing import Any

import pandas as pd  # type: ignore
from pandas.errors import OutOfBoundsDatetime  # type: ignore

from src.market_hours.errors import TimestampConversionError
from src.utils.io.logger import Logger

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Local (UTC-5) midnight of 1583-01-01, the first full Gregorian year, up to the last
# second of year 9999; every local date in between is a valid datetime.date.
MIN_SUPPORTED_INSTANT = int(datetime(1583, 1, 1, 5, tzinfo=timezone.utc).timestamp())
MAX_SUPPORTED_INSTANT = int(
    datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc).timestamp()
)


def to_utc(instant: Any) -> pd.Timestamp:
    """Return *instant* (signed seconds since the epoch) as a UTC :class:`pd.Timestamp`.

    Raises :class:`TimestampConversionError` when *instant* is not an integer, lies outside
    the signed 64-bit range or the supported calendar range (1583-01-01 00:00 Eastern to
    9999-12-31 23:59:59 UTC), or cannot be represented as a calendar moment.
    """
    if isinstance(instant, bool) or not isinstance(instant, numbers.Integral):
        message = f"Timestamp must be an integer, got {type(instant).__name__}"
        Logger.warning(message)
        raise TimestampConversionError(message)
    seconds = int(instant)
    if not _INT64_MIN <= seconds <= _INT64_MAX:
        message = f"Timestamp outside the signed 64-bit range: {seconds}"
        Logger.warning(message)
        raise TimestampConversionError(message)
    if not MIN_SUPPORTED_INSTANT <= seconds <= MAX_SUPPORTED_INSTANT:
        message = f"Timestamp outside the supported calendar range: {seconds}"
        Logger.warning(message)
        raise TimestampConversionError(message)
    try:
        return pd.Timestamp(seconds, unit="s", tz="UTC")
    except (OutOfBoundsDatetime, OverflowError, ValueError) as exc:
        message = f"Failed to convert timestamp {seconds}: {exc}"
        Logger.warning(message)
        raise TimestampConversionError(message) from exc
