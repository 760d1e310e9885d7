from typing import Any, Dict

from plotworker.handlers.base import ChartHandler


class ScatterChartHandler(ChartHandler):
    """Handler for scatter plots"""

    chart_type = "scatter"
    point_radius = 5

    def dataset_options(self) -> Dict[str, Any]:
        return {"pointRadius": self.point_radius, "showLine": False}
