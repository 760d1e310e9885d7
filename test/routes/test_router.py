#!/usr/bin/env python3
"""Test path routing."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
from plotworker.routes import RouteTarget, route


@pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE"])
def test_plot_path(method):
    assert route("/plot", method) is RouteTarget.PLOT


@pytest.mark.parametrize("method", ["POST", "GET"])
def test_callback_path(method):
    assert route("/__worker__/return", method) is RouteTarget.IMAGE_RETURN


@pytest.mark.parametrize("path", ["/", "", "/docs", "/plot/", "/PLOT", "/__worker__", "/favicon.ico"])
def test_everything_else_is_docs(path):
    assert route(path) is RouteTarget.DOCS
