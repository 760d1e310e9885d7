from plotworker.web_server.web_server import PlotWorkerServer

__all__ = ["PlotWorkerServer"]
