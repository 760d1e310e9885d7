from typing import Any, Dict

from plotworker.handlers.base import ChartHandler


class PieChartHandler(ChartHandler):
    """Handler for pie charts; one slice per value, colored by position"""

    chart_type = "pie"

    def dataset_options(self) -> Dict[str, Any]:
        return {}
