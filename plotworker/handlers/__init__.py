from plotworker.handlers.base import ChartHandler
from plotworker.handlers.line import LineChartHandler
from plotworker.handlers.scatter import ScatterChartHandler
from plotworker.handlers.bar import BarChartHandler
from plotworker.handlers.pie import PieChartHandler

__all__ = [
    "ChartHandler",
    "LineChartHandler",
    "ScatterChartHandler",
    "BarChartHandler",
    "PieChartHandler",
]
