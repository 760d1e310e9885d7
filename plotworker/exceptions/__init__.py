"""Custom exceptions for plotworker.

ValidationError is the only error whose message is shown to callers.
DecodeError details are logged but never echoed back.
"""


class PlotWorkerError(Exception):
    """Base class for all plotworker errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PlotWorkerError):
    """Raised when the numeric data series cannot be parsed"""

    pass


class DecodeError(PlotWorkerError):
    """Raised when a callback payload cannot be turned into image bytes"""

    pass


class ConfigurationError(PlotWorkerError):
    """Raised for invalid service settings"""

    pass


__all__ = [
    "PlotWorkerError",
    "ValidationError",
    "DecodeError",
    "ConfigurationError",
]
