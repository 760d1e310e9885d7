"""Render module

Builds renderable chart documents and fallback error images.
"""

from plotworker.render.builder import (
    CALLBACK_PATH,
    RenderableDocument,
    RenderRequestBuilder,
    script_json,
)
from plotworker.render.error_image import GENERIC_FAILURE, ErrorImageSynthesizer

__all__ = [
    "CALLBACK_PATH",
    "RenderableDocument",
    "RenderRequestBuilder",
    "script_json",
    "GENERIC_FAILURE",
    "ErrorImageSynthesizer",
]
