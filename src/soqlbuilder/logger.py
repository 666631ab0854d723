"""Logging helpers for soqlbuilder.

Loggers returned by :func:`get_logger` configure the root logger on first use
from ``settings.LOG_LEVEL``.
"""

import logging
from typing import Optional

from soqlbuilder.settings import settings as builder_settings

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def resolve_level(level: Optional[str]) -> int:
    """Map a level name to a ``logging`` constant; unknown or unset names give INFO."""
    return _LEVELS.get((level or "").upper(), logging.INFO)


def setup_global_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls are ignored."""
    global _configured
    if not _configured:
        logging.basicConfig(level=resolve_level(level), format=_FORMAT)
        _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    """Return a module logger, usually called with ``__name__``."""
    return Logger(name or __name__)


class Logger:
    """Wrapper over ``logging.Logger`` bound to the builder settings."""

    def __init__(self, name: Optional[str] = None) -> None:
        if not _configured:
            setup_global_logging(builder_settings.LOG_LEVEL)
        self._logger = logging.getLogger(name or __name__)

    @property
    def name(self) -> str:
        return self._logger.name

    def log(self, level: int, msg: str, *args, **kwargs) -> None:
        self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs) -> None:
        self._logger.critical(msg, *args, **kwargs)

    def message(self, msg: str, *args, **kwargs) -> None:
        """Log at the level named by LOG_LEVEL.

        DEBUG logs at debug, INFO or unset at info, and any other known
        level at that level, so the message is never filtered out by the
        configured threshold. Unknown names fall back to INFO.
        """
        self.log(resolve_level(builder_settings.LOG_LEVEL), msg, *args, **kwargs)
