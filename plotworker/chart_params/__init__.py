"""Chart parameters module

Defines the validated configuration and series data for one chart render.
"""

from plotworker.chart_params.params import (
    CHART_TYPES,
    ChartConfig,
    ChartParams,
    SeriesData,
)

__all__ = ["CHART_TYPES", "ChartConfig", "ChartParams", "SeriesData"]
