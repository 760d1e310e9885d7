"""Error image synthesizer

Produces a minimal SVG so that failing requests still answer with something
image-shaped.
"""

import html
from typing import Optional

ERROR_IMAGE_WIDTH = 800
ERROR_IMAGE_HEIGHT = 600
GENERIC_FAILURE = "Image Processing Failed"


class ErrorImageSynthesizer:
    """Renders error messages as centered red text on a white SVG canvas"""

    def __init__(self, width: int = ERROR_IMAGE_WIDTH, height: int = ERROR_IMAGE_HEIGHT):
        self.width = width
        self.height = height

    def synthesize(self, message: Optional[str] = None) -> str:
        """
        Build the SVG document

        Args:
            message: Error detail to display; None shows the generic failure text

        Returns:
            SVG markup as a string
        """
        if message is None:
            text = GENERIC_FAILURE
        else:
            text = f"Error: {html.escape(message)}"

        return (
            f'<svg width="{self.width}" height="{self.height}" xmlns="http://www.w3.org/2000/svg">'
            '<rect width="100%" height="100%" fill="#fff"/>'
            '<text x="50%" y="50%" font-family="Arial" font-size="20" fill="red" '
            f'text-anchor="middle">{text}</text>'
            "</svg>"
        )
