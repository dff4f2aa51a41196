"""
Логгер на базе стандартного модуля logging.
"""

import json
import logging
import sys
from typing import Any, Optional

from ..application import interfaces as ports

LOGGER_NAME = "hotel_reservation"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Настраивает вывод логов в stderr. Повторный вызов меняет только уровень."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


class StdLogger(ports.ILogger):
    """Реализация ILogger, передающая сообщения в logging.

    Дополнительный контекст выводится как JSON после сообщения.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def _log(self, level: int, message: str, context: dict) -> None:
        if context:
            message = f"{message} {json.dumps(context, default=str, ensure_ascii=False)}"
        self._logger.log(level, message)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)
