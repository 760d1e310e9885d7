from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Structured logging interface used across plotworker.

    Keyword arguments carry request context (chart type, sizes, errors) and
    are rendered by the implementation.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def get_session_id(self) -> str:
        """Identifier tying together the lines written by one logger instance"""
        pass
