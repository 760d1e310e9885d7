"""Endpoint routing and handlers

route() picks a RouteTarget for an inbound path; each target has a route
object that turns the request into a response.
"""

from plotworker.routes.router import PLOT_PATH, RouteTarget, route
from plotworker.routes.plot import PlotRoute
from plotworker.routes.image_return import ImageReturnRoute, decode_image_payload
from plotworker.routes.docs import API_DOCS, DocsRoute

__all__ = [
    "PLOT_PATH",
    "RouteTarget",
    "route",
    "PlotRoute",
    "ImageReturnRoute",
    "decode_image_payload",
    "API_DOCS",
    "DocsRoute",
]
