"""Centralized logger used across the project.

Exposes a static :class:`Logger` facade so modules never configure handlers themselves.
Messages are routed to the standard :mod:`logging` machinery under the ``market_hours``
logger name, with an extra ``SUCCESS`` level between ``INFO`` and ``WARNING``.
"""

import logging
import sys
from typing import Any

from src.utils.config.parameters import ParameterLoader

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")


class Logger:
    """Static logging helpers with a shared, lazily configured handler."""

    _NAME = "market_hours"
    _FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
    _logger: Any = None

    @staticmethod
    def _get() -> logging.Logger:
        if Logger._logger is None:
            logger = logging.getLogger(Logger._NAME)
            if not logger.handlers:
                handler = logging.StreamHandler(sys.stdout)
                handler.setFormatter(logging.Formatter(Logger._FORMAT))
                logger.addHandler(handler)
            level_name = str(ParameterLoader().get("log_level", "INFO")).upper()
            logger.setLevel(getattr(logging, level_name, logging.INFO))
            logger.propagate = False
            Logger._logger = logger
        return Logger._logger

    @staticmethod
    def debug(message: str) -> None:
        """Log a debug message."""
        Logger._get().debug(message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._get().info(message)

    @staticmethod
    def success(message: str) -> None:
        """Log a message at the custom SUCCESS level."""
        Logger._get().log(SUCCESS, message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a warning message."""
        Logger._get().warning(message)

    @staticmethod
    def error(message: str) -> None:
        """Log an error message."""
        Logger._get().error(message)
