import math
import re
from typing import List, Mapping, Optional, Union

from plotworker.chart_params import CHART_TYPES, ChartConfig, ChartParams, SeriesData
from plotworker.exceptions import ValidationError
from plotworker.logger import Logger

RawParams = Mapping[str, Optional[str]]

DEFAULT_VALUES: List[Union[int, float]] = [1, 2, 3]
DEFAULT_COLORS = ["#36a2eb", "#ff6384", "#4bc0c0"]

MAX_TITLE_LENGTH = 50
MAX_AXIS_LABEL_LENGTH = 30
MAX_DIMENSION = 2000

_HEX_COLOR = re.compile(r"#[0-9A-F]{6}", re.IGNORECASE)
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


class ConfigResolver:
    """Turns raw query parameters into a ChartParams.

    Only the numeric data series can fail the request. Every other field is
    checked on its own and silently replaced by its default when malformed.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.valid_types = list(CHART_TYPES)
        self.defaults = ChartConfig()
        self.logger = logger

    def resolve(self, params: RawParams) -> ChartParams:
        """
        Resolve raw parameters into a validated chart configuration

        Args:
            params: Mapping of query parameter name to raw string value

        Returns:
            ChartParams with config and series data

        Raises:
            ValidationError: If the data parameter contains a non-numeric token
        """
        values = self._resolve_values(params.get("data"))
        series = SeriesData(
            values=values,
            labels=self._resolve_labels(params.get("names"), len(values)),
            colors=self._resolve_colors(params.get("colors")),
        )
        config = ChartConfig(
            type=self._resolve_type(params.get("type")),
            title=self._truncate(params.get("title"), MAX_TITLE_LENGTH, self.defaults.title),
            width=self._resolve_dimension("width", params.get("width"), self.defaults.width),
            height=self._resolve_dimension("height", params.get("height"), self.defaults.height),
            bg_color=self._resolve_color(params.get("bgcolor")),
            show_grid=params.get("grid") != "false",
            xlabel=self._truncate(params.get("xlabel"), MAX_AXIS_LABEL_LENGTH, self.defaults.xlabel),
            ylabel=self._truncate(params.get("ylabel"), MAX_AXIS_LABEL_LENGTH, self.defaults.ylabel),
        )
        return ChartParams(config=config, series=series)

    def _resolve_values(self, raw: Optional[str]) -> List[Union[int, float]]:
        if raw is None:
            return list(DEFAULT_VALUES)

        values = []
        for token in raw.split(","):
            number = parse_number(token)
            if number is None:
                self._debug("Rejected data token", token=repr(token))
                raise ValidationError("Invalid data - must be numbers")
            values.append(number)
        return values

    def _resolve_labels(self, raw: Optional[str], count: int) -> List[str]:
        if raw is None:
            return [f"Item {i + 1}" for i in range(count)]
        return raw.split(",")

    def _resolve_colors(self, raw: Optional[str]) -> List[str]:
        if raw is None:
            return list(DEFAULT_COLORS)
        return [color.strip() for color in raw.split(",")]

    def _resolve_type(self, raw: Optional[str]) -> str:
        if raw in self.valid_types:
            return raw
        if raw is not None:
            self._debug("Unknown chart type, using default", received=raw)
        return self.defaults.type

    def _resolve_dimension(self, name: str, raw: Optional[str], default: int) -> int:
        parsed = parse_leading_int(raw)
        if not parsed:
            if raw is not None:
                self._debug(f"Invalid {name}, using default", received=raw, default=default)
            return default
        return max(1, min(MAX_DIMENSION, parsed))

    def _resolve_color(self, raw: Optional[str]) -> str:
        if raw is not None and _HEX_COLOR.fullmatch(raw):
            return raw
        if raw is not None:
            self._debug("Invalid bgcolor, using default", received=raw)
        return self.defaults.bg_color

    def _truncate(self, raw: Optional[str], limit: int, default: str) -> str:
        if not raw:
            return default
        return raw[:limit]

    def _debug(self, message: str, **kwargs) -> None:
        if self.logger is not None:
            self.logger.debug(message, **kwargs)


def parse_number(token: str) -> Optional[Union[int, float]]:
    """
    Parse one data token as a finite number

    Surrounding whitespace is ignored. Integral values come back as int.

    Returns:
        The number, or None for empty, non-numeric or non-finite tokens
    """
    token = token.strip()
    # ASCII only: float() would also take other scripts' digits
    if not token or not token.isascii() or "_" in token:
        return None
    try:
        number = float(token)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def parse_leading_int(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a string ("640px" -> 640, "3.7" -> 3)"""
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))
