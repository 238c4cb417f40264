"""Central configuration manager.

This module gathers the constants that describe the US equity trading session
(timezone offsets, daylight-saving rule, regular hours and trading days) together with the
few values read from the environment, and exposes them through dictionary-style and
method-based access.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

from src.utils.exchange.hours import Hours
from src.utils.exchange.sessions_days import SessionsDays


class ParameterLoader:
    """Centralized configuration manager for all engine parameters."""

    _ENV_FILEPATH = ".env"

    def __init__(self) -> None:
        self.env_filepath = Path(ParameterLoader._ENV_FILEPATH)
        load_dotenv(dotenv_path=self.env_filepath)
        self._parameters: Dict[str, Any] = self._initialize_parameters()
        regular: Any = self.get("regular_hours")
        if not isinstance(regular, dict):
            raise ValueError(f"Parameter 'regular_hours' is invalid: {regular}")
        self._regular_hours = Hours(regular.get("open"), regular.get("close"))
        self._sessions_days = SessionsDays(
            self.get("sessions_days"), self.get("weekdays")
        )

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Initializes the parameters dictionary by merging constant and environment values."""
        constant_params = {
            "daylight_offset_hours": -4,
            "dst_end": {"month": 11, "weekday": "sunday", "nth": 1, "utc_hour": 6},
            "dst_start": {"month": 3, "weekday": "sunday", "nth": 2, "utc_hour": 7},
            "regular_hours": {"open": "09:30", "close": "16:00"},
            "sessions_days": {
                "monday": True,
                "tuesday": True,
                "wednesday": True,
                "thursday": True,
                "friday": True,
                "saturday": False,
                "sunday": False,
            },
            "standard_offset_hours": -5,
            "weekdays": [
                "monday",
                "tuesday",
                "wednesday",
                "thursday",
                "friday",
                "saturday",
                "sunday",
            ],
        }
        env_params = {
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
        }
        return {**env_params, **constant_params}

    def get_all(self) -> Any:
        """Return all parameter."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else None."""
        try:
            return self._parameters[key]
        except KeyError:
            return default

    def __getitem__(self, key: str) -> Any:
        """Allow dict-style access to parameters."""
        return self._parameters[key]

    def regular_hours(self) -> Hours:
        """Return the regular trading session hours (local market time)."""
        return self._regular_hours

    def sessions_days(self) -> SessionsDays:
        """Return the weekly trading days."""
        return self._sessions_days
