import logging as python_logging
import uuid
from typing import Any
from .interface import Logger


class ConsoleLogger(Logger):
    """
    Logger implementation using Python's built-in logging module.
    Logs to console with session tracking.
    """

    def __init__(
        self,
        name: str = "plotworker",
        level: int = python_logging.INFO,
        format_string: str = "%(asctime)s [%(levelname)s] [%(name)s] [session:%(session_id)s] %(message)s",
    ):
        """
        Initialize the console logger

        Args:
            name: Logger name
            level: Logging level (logging.DEBUG, logging.INFO, etc.)
            format_string: Log format string (must include %(session_id)s)
        """
        self._session_id = str(uuid.uuid4())[:8]
        self._logger = python_logging.getLogger(name)
        self._logger.setLevel(level)

        # Only add handler if none exist (avoid duplicate handlers)
        if not self._logger.handlers:
            handler = python_logging.StreamHandler()
            handler.setFormatter(python_logging.Formatter(format_string))
            self._logger.addHandler(handler)

    def get_session_id(self) -> str:
        """Get the current session ID"""
        return self._session_id

    def _format_extra(self, **kwargs: Any) -> str:
        if not kwargs:
            return ""
        return " " + " ".join(f"{k}={v}" for k, v in kwargs.items())

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(
            level, message + self._format_extra(**kwargs), extra={"session_id": self._session_id}
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message"""
        self._log(python_logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message"""
        self._log(python_logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message"""
        self._log(python_logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message"""
        self._log(python_logging.ERROR, message, **kwargs)
