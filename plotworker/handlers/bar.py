from typing import Any, Dict

from plotworker.handlers.base import ChartHandler


class BarChartHandler(ChartHandler):
    """Handler for bar charts"""

    chart_type = "bar"

    def dataset_options(self) -> Dict[str, Any]:
        return {}
