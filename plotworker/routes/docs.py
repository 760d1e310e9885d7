import json
from typing import Any, Dict

from fastapi.responses import Response

from plotworker.logger import Logger

API_DOCS: Dict[str, Any] = {
    "endpoints": {
        "/": "Documentation",
        "/plot": "Generates PNG chart",
    },
    "required": {
        "data": "Comma-separated numbers (e.g., 10,5)",
    },
    "optional": {
        "type": "line|bar|scatter|pie (default: bar)",
        "title": "Chart title",
        "names": "Comma-separated item names (e.g., Withdraw,Deposit)",
        "colors": "Comma-separated hex colors (e.g., %23ff0000,%2300ff00)",
        "width": "Image width (max: 2000, default: 800)",
        "height": "Image height (max: 2000, default: 600)",
        "bgcolor": "Background hex color (default: %23ffffff)",
        "xlabel": "X-axis label",
        "ylabel": "Y-axis label",
        "grid": "Show grid? (true|false, default: true)",
    },
    "Alert": {
        "Note": "When passing hex colors in URLs, replace # with %23",
    },
    "examples": [
        "/plot?data=10,5&type=bar&title=Transactions&names=Withdraw,Deposit&colors=%23ff0000,%2300ff00",
        "/plot?data=30,40,30&type=pie&names=Food,Rent,Savings&colors=%23ff6384,%2336a2eb,%23cc65fe",
        "/plot?data=1,2,3,4&type=line&title=Growth&grid=false",
    ],
}


class DocsRoute:
    """Static description of the query parameters /plot understands"""

    def __init__(self, logger: Logger):
        self.logger = logger
        self._body = json.dumps(API_DOCS, indent=2)

    def handle(self) -> Response:
        self.logger.debug("Serving API documentation")
        return Response(content=self._body, media_type="application/json")
