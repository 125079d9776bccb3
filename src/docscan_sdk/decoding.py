"""
Response decoding for the Doc Scan API

Turns the raw body of a successful response into a typed model. JSON
bodies are parsed and handed to the expected model (or variant family);
media bodies are passed through as MediaContent.
"""

import json
import logging
from typing import Any, Optional

from .exceptions import DecodeError, DecodeErrorReason
from .models.base import ResourceModel, VariantFamily
from .models.media import DEFAULT_MEDIA_TYPE, MediaContent

logger = logging.getLogger(__name__)


def decode_json(body: bytes, resource: str = "response") -> Any:
    """
    Parse a UTF-8 JSON body.

    Raises:
        DecodeError: With reason INVALID_JSON if the body is not valid JSON
    """
    try:
        text = body.decode('utf-8') if isinstance(body, (bytes, bytearray)) else body
        return json.loads(text)
    except (UnicodeDecodeError, ValueError, TypeError) as e:
        raise DecodeError(
            f"{resource} body is not valid JSON: {e}",
            DecodeErrorReason.INVALID_JSON,
            resource,
        )


def decode_media(content_type: Optional[str], body: bytes) -> MediaContent:
    """Wrap a media body, defaulting the content type when the server omits it."""
    return MediaContent(content=bytes(body or b""), mime_type=content_type or DEFAULT_MEDIA_TYPE)


class ResponseDecoder:
    """
    Stateless decoder from raw response bodies to models.

    ``expected`` may be a ResourceModel subclass, a VariantFamily, or the
    MediaContent class for binary endpoints.
    """

    def decode(self, content_type: Optional[str], body: bytes, expected: Any) -> Any:
        if expected is MediaContent:
            return decode_media(content_type, body)

        if isinstance(expected, VariantFamily):
            resource = expected.name
        elif isinstance(expected, type) and issubclass(expected, ResourceModel):
            resource = expected.__name__
        else:
            raise TypeError(f"Cannot decode into {expected!r}")

        data = decode_json(body, resource)
        result = expected.from_dict(data)
        logger.debug(f"Decoded {resource}")
        return result
