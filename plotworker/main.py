import logging

import uvicorn
from plotworker.settings import get_settings
from plotworker.web_server import PlotWorkerServer

settings = get_settings()
server = PlotWorkerServer(
    settings=settings,
    log_level=getattr(logging, settings.log.level, logging.INFO),
)
app = server.app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.server.host, port=settings.server.web_port)
