"""
Logger module for plotworker

Components accept any Logger implementation so tests and embedders can
supply their own.

Usage:
    from plotworker.logger import ConsoleLogger

    logger = ConsoleLogger(name="plot")
    logger.info("Chart resolved", chart_type="bar", points=3)
"""

from .interface import Logger
from .console_logger import ConsoleLogger

__all__ = [
    "Logger",
    "ConsoleLogger",
]
