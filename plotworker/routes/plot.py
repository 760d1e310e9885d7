from fastapi.responses import HTMLResponse, Response

from plotworker.exceptions import ValidationError
from plotworker.logger import Logger
from plotworker.render import ErrorImageSynthesizer, RenderRequestBuilder
from plotworker.validation import ConfigResolver, RawParams

SVG_MEDIA_TYPE = "image/svg+xml"


class PlotRoute:
    """First leg of the round trip: query parameters in, renderable HTML out"""

    def __init__(
        self,
        resolver: ConfigResolver,
        builder: RenderRequestBuilder,
        synthesizer: ErrorImageSynthesizer,
        logger: Logger,
    ):
        self.resolver = resolver
        self.builder = builder
        self.synthesizer = synthesizer
        self.logger = logger

    def handle(self, params: RawParams) -> Response:
        """
        Resolve parameters and return the renderable document.

        Never raises: validation failures and unexpected errors are answered
        with an SVG error image and status 200.
        """
        try:
            chart = self.resolver.resolve(params)
            document = self.builder.build(chart)
        except ValidationError as e:
            self.logger.warning("Plot validation failed", error=e.message)
            return Response(
                content=self.synthesizer.synthesize(e.message), media_type=SVG_MEDIA_TYPE
            )
        except Exception as e:
            self.logger.error(
                "Unexpected error building plot", error=str(e), error_type=type(e).__name__
            )
            return Response(content=self.synthesizer.synthesize(), media_type=SVG_MEDIA_TYPE)

        self.logger.info(
            "Plot document built",
            chart_type=chart.config.type,
            data_points=len(chart.series.values),
            width=chart.config.width,
            height=chart.config.height,
        )
        return HTMLResponse(content=document.html)
