from fastapi import FastAPI, Request
from fastapi.responses import Response
from plotworker import __version__
from plotworker.logger import ConsoleLogger
from plotworker.render import ErrorImageSynthesizer, RenderRequestBuilder
from plotworker.routes import DocsRoute, ImageReturnRoute, PlotRoute, RouteTarget, route
from plotworker.settings import Settings
from plotworker.validation import ConfigResolver, RawParams
import logging
from typing import Dict, Optional

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def first_query_values(request: Request) -> RawParams:
    """Collapse repeated query parameters, keeping the first occurrence"""
    params: Dict[str, str] = {}
    for key, value in request.query_params.multi_items():
        params.setdefault(key, value)
    return params


class PlotWorkerServer:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        log_level: int = logging.INFO,
    ):
        """
        Initialize PlotWorkerServer

        Args:
            settings: Application settings (defaults used when omitted)
            log_level: Logging level (logging.DEBUG, logging.INFO, etc.)
        """
        self.settings = settings or Settings()

        # FastAPI's own docs routes would shadow the catch-all documentation
        self.app = FastAPI(
            title="plotworker",
            description="Chart rendering worker",
            version=__version__,
            docs_url=None,
            redoc_url=None,
            openapi_url=None,
        )

        self.logger = ConsoleLogger(name="web_server", level=log_level)
        synthesizer = ErrorImageSynthesizer()
        self.plot_route = PlotRoute(
            resolver=ConfigResolver(logger=self.logger),
            builder=RenderRequestBuilder(settings=self.settings.render, logger=self.logger),
            synthesizer=synthesizer,
            logger=self.logger,
        )
        self.image_return_route = ImageReturnRoute(
            synthesizer=synthesizer,
            logger=self.logger,
            cache_max_age=self.settings.render.cache_max_age,
        )
        self.docs_route = DocsRoute(logger=self.logger)

        self.logger.info(
            "Web server initialized",
            version=__version__,
            settle_delay_ms=self.settings.render.settle_delay_ms,
            cache_max_age=self.settings.render.cache_max_age,
        )
        self._setup_routes()

    async def dispatch(self, request: Request) -> Response:
        """Route one request to its endpoint"""
        target = route(request.url.path, request.method)
        self.logger.info(
            "Request received",
            method=request.method,
            path=request.url.path,
            target=target.value,
        )

        if target is RouteTarget.PLOT:
            return self.plot_route.handle(first_query_values(request))
        if target is RouteTarget.IMAGE_RETURN:
            return self.image_return_route.handle(await request.body())
        return self.docs_route.handle()

    def _setup_routes(self):
        @self.app.api_route("/{path:path}", methods=ALL_METHODS)
        async def handle_request(request: Request) -> Response:
            """
            Single entry point for every path.

            Dispatch is done by plotworker.routes.route so routing stays a
            plain function of the request path.
            """
            return await self.dispatch(request)
