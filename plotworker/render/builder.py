"""Render request builder

Builds the HTML document that an external browser-like environment executes
to draw the chart and post the captured PNG back to the callback path.
"""

import html
import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from plotworker.chart_params import ChartParams
from plotworker.handlers import (
    BarChartHandler,
    ChartHandler,
    LineChartHandler,
    PieChartHandler,
    ScatterChartHandler,
)
from plotworker.logger import Logger
from plotworker.settings import RenderSettings

CALLBACK_PATH = "/__worker__/return"
LEGEND_POSITION = "right"

# Characters that could end a <script> element or start markup inside it
_SCRIPT_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


class RenderableDocument(BaseModel):
    """A self-contained HTML document plus the chart description it embeds"""

    model_config = ConfigDict(frozen=True)

    html: str
    chart: Dict[str, Any]
    callback_path: str = CALLBACK_PATH
    settle_delay_ms: int


def script_json(value: Any) -> str:
    """Serialize a value as JSON that is safe to place inside a <script> element"""
    return json.dumps(value, ensure_ascii=False).translate(_SCRIPT_ESCAPES)


class RenderRequestBuilder:
    """Builds renderable documents, delegating dataset styling to chart handlers"""

    def __init__(self, settings: Optional[RenderSettings] = None, logger: Optional[Logger] = None):
        self.settings = settings or RenderSettings()
        self.logger = logger
        self.handlers: Dict[str, ChartHandler] = {
            "line": LineChartHandler(),
            "scatter": ScatterChartHandler(),
            "bar": BarChartHandler(),
            "pie": PieChartHandler(),
        }

    def build(self, params: ChartParams) -> RenderableDocument:
        """
        Build the renderable document for a resolved chart

        Args:
            params: Resolved chart configuration and series data

        Returns:
            RenderableDocument holding the HTML and the embedded chart description
        """
        chart = self.describe(params)
        document = RenderableDocument(
            html=self._render_html(params, chart),
            chart=chart,
            settle_delay_ms=self.settings.settle_delay_ms,
        )
        if self.logger is not None:
            self.logger.debug(
                "Renderable document built",
                chart_type=params.config.type,
                html_length=len(document.html),
            )
        return document

    def describe(self, params: ChartParams) -> Dict[str, Any]:
        """Build the declarative chart description handed to Chart.js"""
        config = params.config
        handler = self.handlers[config.type]
        return {
            "type": config.type,
            "data": {
                "labels": params.series.visible_labels(),
                "datasets": [handler.build_dataset(params)],
            },
            "options": {
                "responsive": False,
                "plugins": {
                    "title": {"display": True, "text": config.title},
                    "legend": {"position": LEGEND_POSITION},
                },
                "scales": {
                    "x": {
                        "title": {"display": True, "text": config.xlabel},
                        "grid": {"display": config.show_grid},
                    },
                    "y": {
                        "title": {"display": True, "text": config.ylabel},
                        "grid": {"display": config.show_grid},
                    },
                },
            },
        }

    def _render_html(self, params: ChartParams, chart: Dict[str, Any]) -> str:
        config = params.config
        return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{html.escape(config.title)}</title>
  <script src="{html.escape(self.settings.chart_js_url)}"></script>
  <script src="{html.escape(self.settings.html_to_image_url)}"></script>
  <style>
    body {{ margin:0; padding:0; background:{config.bg_color} }}
    canvas {{ display:block; width:{config.width}px; height:{config.height}px }}
  </style>
</head>
<body>
  <canvas id="chartCanvas" width="{config.width}" height="{config.height}"></canvas>
  <script>
    const chartConfig = {script_json(chart)};
    new Chart(document.getElementById('chartCanvas'), chartConfig);

    setTimeout(() => {{
      htmlToImage.toPng(document.body)
        .then(img => {{
          fetch({script_json(CALLBACK_PATH)}, {{
            method: 'POST',
            headers: {{ 'Content-Type': 'application/json' }},
            body: JSON.stringify({{ img }})
          }});
        }});
    }}, {self.settings.settle_delay_ms});
  </script>
</body>
</html>
"""
