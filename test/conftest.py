"""Pytest configuration and fixtures

Provides shared fixtures for all tests: loggers, settings isolation and a
ready-to-use web server.
"""

import sys
from pathlib import Path

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging
import os
import pytest
from fastapi.testclient import TestClient
from plotworker.logger import ConsoleLogger
from plotworker.settings import Settings, reset_settings
from plotworker.web_server import PlotWorkerServer


@pytest.fixture(scope="function", autouse=True)
def clean_settings(monkeypatch):
    """
    Isolate every test from PLOTWORKER_* variables in the calling shell
    and from the global settings singleton.
    """
    for name in list(os.environ):
        if name.startswith("PLOTWORKER_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="function")
def logger():
    """
    Provide a ConsoleLogger instance for test logging.

    Returns:
        ConsoleLogger: Logger configured for testing
    """
    return ConsoleLogger(name="test", level=logging.DEBUG)


@pytest.fixture(scope="function")
def server():
    """Create a PlotWorkerServer with default settings"""
    return PlotWorkerServer(settings=Settings())


@pytest.fixture(scope="function")
def app(server):
    """Get the FastAPI app from the server"""
    return server.app


@pytest.fixture(scope="function")
def client(app):
    """Synchronous test client for the web server"""
    return TestClient(app)
