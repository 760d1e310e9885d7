import base64
import binascii
import json
from typing import Optional

from fastapi.responses import Response

from plotworker.exceptions import DecodeError
from plotworker.logger import Logger
from plotworker.render import ErrorImageSynthesizer

PNG_MEDIA_TYPE = "image/png"
SVG_MEDIA_TYPE = "image/svg+xml"


def decode_image_payload(body: bytes) -> bytes:
    """
    Decode a callback body of the form {"img": "data:<mime>;base64,<payload>"}

    Args:
        body: Raw request body

    Returns:
        The decoded image bytes

    Raises:
        DecodeError: If any step of parsing or decoding fails
    """
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise DecodeError(f"Body is not valid JSON: {e}")

    if not isinstance(payload, dict) or "img" not in payload:
        raise DecodeError("Body has no 'img' field")

    data_uri = payload["img"]
    if not isinstance(data_uri, str):
        raise DecodeError(f"'img' must be a string, got {type(data_uri).__name__}")

    header, separator, encoded = data_uri.partition(",")
    if not separator or not header.startswith("data:") or not header.endswith(";base64"):
        raise DecodeError("'img' is not a base64 data URI")
    # Unpadded payloads are accepted; a lone trailing sextet can never be valid
    if len(encoded) % 4 == 1:
        raise DecodeError("Invalid base64 payload: truncated data")
    padded = encoded + "=" * (-len(encoded) % 4)

    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 payload: {e}")


class ImageReturnRoute:
    """Second leg of the round trip: captured image in, PNG bytes out"""

    def __init__(
        self,
        synthesizer: ErrorImageSynthesizer,
        logger: Logger,
        cache_max_age: int = 3600,
    ):
        self.synthesizer = synthesizer
        self.logger = logger
        self.cache_max_age = cache_max_age

    def handle(self, body: Optional[bytes]) -> Response:
        """
        Return the decoded image, or a generic SVG error image.

        The decode failure reason is logged but not sent to the caller.
        """
        try:
            image = decode_image_payload(body or b"")
        except DecodeError as e:
            self.logger.warning("Image return failed", error=e.message, body_size=len(body or b""))
            return Response(content=self.synthesizer.synthesize(), media_type=SVG_MEDIA_TYPE)

        self.logger.info("Image returned", size_bytes=len(image))
        return Response(
            content=image,
            media_type=PNG_MEDIA_TYPE,
            headers={"Cache-Control": f"public, max-age={self.cache_max_age}"},
        )
