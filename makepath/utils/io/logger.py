"""Project-wide logging facade.

Wraps the standard ``logging`` module behind static helpers so call sites stay
short (``Logger.info(...)``). Records are written to whatever ``sys.stdout``
is at emit time, which keeps output redirectable from tests and callers.
"""

import logging
import sys

from makepath.utils.config.parameters import ParameterLoader


class _StdoutHandler(logging.StreamHandler):
    """Stream handler bound to the current ``sys.stdout``."""

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout
        super().emit(record)


class Logger:
    """Static logging helpers used across the project."""

    _NAME = "makepath"
    _FORMAT = "%(levelname)-8s %(message)s"

    _logger = logging.getLogger(_NAME)
    if not _logger.handlers:
        _handler = _StdoutHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(_FORMAT))
        _logger.addHandler(_handler)
        _logger.propagate = False
    _logger.setLevel(ParameterLoader().get("log_level", "INFO"))

    @staticmethod
    def debug(message: str) -> None:
        """Log a debug message."""
        Logger._logger.debug(message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._logger.info(message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a warning message."""
        Logger._logger.warning(message)

    @staticmethod
    def error(message: str) -> None:
        """Log an error message."""
        Logger._logger.error(message)
