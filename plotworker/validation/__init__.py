"""
Validation module for plotworker

Resolves untrusted query parameters into a bounded chart configuration.
"""

from .resolver import (
    ConfigResolver,
    RawParams,
    DEFAULT_COLORS,
    DEFAULT_VALUES,
    parse_leading_int,
    parse_number,
)

__all__ = [
    "ConfigResolver",
    "RawParams",
    "DEFAULT_COLORS",
    "DEFAULT_VALUES",
    "parse_leading_int",
    "parse_number",
]
