from typing import Any, Dict

from plotworker.handlers.base import ChartHandler


class LineChartHandler(ChartHandler):
    """Handler for line charts"""

    chart_type = "line"
    line_width = 2

    def dataset_options(self) -> Dict[str, Any]:
        return {"fill": False, "borderWidth": self.line_width}
