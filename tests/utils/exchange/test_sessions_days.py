"""Unit tests for the SessionsDays class which validates and handles trading day flags.

This module verifies instantiation, input validation and lookups by weekday index, date and
day name.
"""

from datetime import date, datetime

import pytest  # type: ignore

from src.utils.exchange.sessions_days import SessionsDays

VALID_DAYS = {
    "monday": True,
    "tuesday": True,
    "wednesday": True,
    "thursday": True,
    "friday": True,
    "saturday": False,
    "sunday": False,
}

weekdays = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]


def test_valid_sessions_days_instantiation():
    """Open days are listed in calendar order."""
    days = SessionsDays(VALID_DAYS, weekdays)
    if days.open_days() != weekdays[:5]:
        raise AssertionError(f"Unexpected open days: {days.open_days()}")


def test_invalid_type_for_days():
    """Raise TypeError when initialized with a non-dictionary input."""
    with pytest.raises(TypeError, match=r"`days` must be `Dict\[str, bool\]"):
        SessionsDays("invalid", weekdays)  # type: ignore


def test_invalid_weekdays():
    """Raise ValueError when the weekday list is not seven names."""
    with pytest.raises(ValueError, match="`weekdays` must list the seven day names"):
        SessionsDays(VALID_DAYS, weekdays[:5])


def test_missing_keys():
    """Raise ValueError when required weekday keys are missing."""
    bad_days = VALID_DAYS.copy()
    del bad_days["friday"]
    with pytest.raises(ValueError, match=r"Missing keys in `days`"):
        SessionsDays(bad_days, weekdays)


def test_unexpected_keys():
    """Raise ValueError when unexpected keys are present in the input."""
    bad_days = VALID_DAYS.copy()
    bad_days["Holiday"] = True
    with pytest.raises(ValueError, match=r"Unexpected key in `days`"):
        SessionsDays(bad_days, weekdays)


def test_invalid_value_type():
    """Raise TypeError when any weekday value is not of boolean type."""
    bad_days = VALID_DAYS.copy()
    bad_days["monday"] = "yes"  # type: ignore
    with pytest.raises(TypeError, match=r"Value for 'monday' must be bool"):
        SessionsDays(bad_days, weekdays)


def test_is_trading_day():
    """Lookups by weekday index, date and datetime agree."""
    days = SessionsDays(VALID_DAYS, weekdays)
    if not days.is_trading_day(0) or days.is_trading_day(6):
        raise AssertionError("Expected Monday open and Sunday closed")
    if not days.is_trading_day(date(2024, 1, 1)):
        raise AssertionError("2024-01-01 is a Monday")
    if days.is_trading_day(datetime(2024, 1, 6, 12, 0)):
        raise AssertionError("2024-01-06 is a Saturday")


@pytest.mark.parametrize("value", [-1, 7, True, "monday"])
def test_is_trading_day_invalid_index(value):
    """Indexes outside 0..6 and non-integers are rejected."""
    days = SessionsDays(VALID_DAYS, weekdays)
    with pytest.raises(ValueError, match="Invalid weekday index"):
        days.is_trading_day(value)  # type: ignore[arg-type]


def test_is_open_by_name():
    """Day names are matched case-insensitively."""
    days = SessionsDays(VALID_DAYS, weekdays)
    if not days.is_open("Friday") or days.is_open(" SATURDAY "):
        raise AssertionError("Expected Friday open and Saturday closed")
    with pytest.raises(ValueError, match="Unknown weekday"):
        days.is_open("holiday")
