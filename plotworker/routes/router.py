"""Request routing

Maps an inbound path to the endpoint that handles it. Routing is a pure
function of the path; the method is never used to reject a request.
"""

from enum import Enum

from plotworker.render import CALLBACK_PATH

PLOT_PATH = "/plot"


class RouteTarget(str, Enum):
    PLOT = "plot"
    IMAGE_RETURN = "image_return"
    DOCS = "docs"


def route(path: str, method: str = "GET") -> RouteTarget:
    """
    Pick the endpoint for a request

    Args:
        path: URL path without query string
        method: HTTP method (accepted for every target)

    Returns:
        RouteTarget naming the endpoint; unknown paths get the documentation
    """
    if path == CALLBACK_PATH:
        return RouteTarget.IMAGE_RETURN
    if path == PLOT_PATH:
        return RouteTarget.PLOT
    return RouteTarget.DOCS
