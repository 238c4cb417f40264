"""Unit tests for the ParameterLoader configuration manager."""

import pytest  # type: ignore

from src.utils.config.parameters import ParameterLoader
from src.utils.exchange.hours import Hours
from src.utils.exchange.sessions_days import SessionsDays


def test_parameter_loader_get_method():
    """Missing keys return None or the supplied default."""
    loader = ParameterLoader()
    if loader.get("non_existent_key") is not None:
        raise AssertionError("Expected None for missing key")
    if loader.get("non_existent_key", default="default_value") != "default_value":
        raise AssertionError("Expected default_value for missing key with default")


def test_parameter_loader_getitem_method():
    """Dictionary-style access returns the session constants."""
    loader = ParameterLoader()
    if loader["standard_offset_hours"] != -5:
        raise AssertionError("standard_offset_hours should be -5")
    if loader["daylight_offset_hours"] != -4:
        raise AssertionError("daylight_offset_hours should be -4")
    if loader["dst_start"]["utc_hour"] != 7 or loader["dst_end"]["utc_hour"] != 6:
        raise AssertionError("DST boundaries should be at 07:00 and 06:00 UTC")
    with pytest.raises(KeyError):
        _ = loader["non_existent_key"]


def test_parameter_loader_get_all_method():
    """get_all returns the merged parameter dictionary."""
    all_params = ParameterLoader().get_all()
    if not isinstance(all_params, dict):
        raise AssertionError("Expected all_params to be a dict")
    for key in ("log_level", "regular_hours", "sessions_days"):
        if key not in all_params:
            raise AssertionError(f"Expected {key} key in parameters")


def test_parameter_loader_log_level_from_env(monkeypatch):
    """LOG_LEVEL is read from the environment."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    if ParameterLoader().get("log_level") != "DEBUG":
        raise AssertionError("Expected log_level to come from LOG_LEVEL")


def test_parameter_loader_session_objects():
    """Regular hours and trading days are built from the constants."""
    loader = ParameterLoader()
    hours = loader.regular_hours()
    if not isinstance(hours, Hours) or (hours.open, hours.close) != ("09:30", "16:00"):
        raise AssertionError("Expected regular hours 09:30-16:00")
    days = loader.sessions_days()
    if not isinstance(days, SessionsDays) or days.open_days() != [
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
    ]:
        raise AssertionError("Expected Monday to Friday trading days")
