import uvicorn
import argparse
import sys
from plotworker import __version__
from plotworker.exceptions import ConfigurationError
from plotworker.settings import VALID_LOG_LEVELS, Settings
from plotworker.web_server import PlotWorkerServer
from plotworker.logger import ConsoleLogger
import logging

logger = ConsoleLogger(name="main_web", level=logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="plotworker Web Server - chart rendering worker")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host address to bind to (default: from env or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port number to listen on (default: from env or 8060)",
    )
    parser.add_argument(
        "--settle-delay-ms",
        type=int,
        default=None,
        help="Delay before the rendered chart is captured (default: from env or 500)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging level for all components (default: from env or INFO)",
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """
    Build settings from environment and apply CLI overrides

    Raises:
        ConfigurationError: If the resulting settings are invalid
    """
    settings = Settings.from_env()
    if args.host:
        settings.server.host = args.host
    if args.port is not None:
        settings.server.web_port = args.port
    if args.settle_delay_ms is not None:
        settings.render.settle_delay_ms = args.settle_delay_ms
    if args.log_level:
        settings.log.level = args.log_level
    settings.validate()
    return settings


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
    except ConfigurationError as e:
        logger.error("FATAL: Configuration error", error=e.message)
        sys.exit(1)

    log_level = getattr(logging, settings.log.level, logging.INFO)
    server = PlotWorkerServer(settings=settings, log_level=log_level)

    host = settings.server.host
    port = settings.server.web_port
    banner = f"""
{'='*80}
  plotworker Web Server - Starting
{'='*80}
  Version:          {__version__}
  Host:             {host}
  Port:             {port}
  Settle delay:     {settings.render.settle_delay_ms} ms

  Endpoints:
    - Docs:          http://localhost:{port}/
    - Plot:          http://localhost:{port}/plot?data=10,5&type=bar
    - Callback:      http://localhost:{port}/__worker__/return
{'='*80}
    """
    print(banner)

    try:
        logger.info("Starting web server", host=host, port=port)
        uvicorn.run(server.app, host=host, port=port)
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
