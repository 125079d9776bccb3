"""
Request payloads sent to the Doc Scan API

Session specifications and IBV instructions are accepted as any mapping or
any object exposing ``to_dict()``; the face-capture payloads the SDK owns
are small immutable dataclasses.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from urllib3 import encode_multipart_formdata

from .exceptions import ValidationError

JSON_CONTENT_TYPE = "application/json"

# Multipart field and filename expected by the face-capture image endpoint
FACE_CAPTURE_FIELD = "binary-content"
FACE_CAPTURE_FILENAME = "face-capture-image"


def serialize_payload(payload: Any, name: str = "payload") -> bytes:
    """
    Serialize a JSON payload to UTF-8 bytes.

    Args:
        payload: Mapping, or object with a ``to_dict()`` method
        name: Payload name used in error messages

    Returns:
        bytes: Compact JSON body

    Raises:
        ValidationError: If the payload is missing or not serializable
    """
    if payload is None:
        raise ValidationError(f"{name} cannot be None", "MISSING_PAYLOAD")

    if isinstance(payload, Mapping):
        data = dict(payload)
    elif callable(getattr(payload, 'to_dict', None)):
        data = payload.to_dict()
    else:
        raise ValidationError(
            f"{name} must be a mapping or expose to_dict(), got {type(payload).__name__}",
            "INVALID_PAYLOAD"
        )

    try:
        return json.dumps(data, separators=(',', ':')).encode('utf-8')
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} is not JSON serializable: {e}", "INVALID_PAYLOAD")


@dataclass(frozen=True)
class CreateFaceCaptureResourcePayload:
    """
    Payload for creating a face-capture resource.

    Attributes:
        requirement_id: ID of the FACE_CAPTURE requirement the resource satisfies
    """
    requirement_id: str

    def __post_init__(self):
        if not isinstance(self.requirement_id, str) or not self.requirement_id:
            raise ValidationError("requirement_id cannot be empty", "EMPTY_REQUIREMENT_ID")

    def to_dict(self) -> Dict[str, Any]:
        return {'requirement_id': self.requirement_id}


@dataclass(frozen=True)
class UploadFaceCaptureImagePayload:
    """
    Image uploaded to a face-capture resource.

    Attributes:
        image_content_type: MIME type of the image (e.g. image/jpeg)
        image_contents: Raw image bytes
    """
    image_content_type: str
    image_contents: bytes

    def __post_init__(self):
        if not self.image_content_type:
            raise ValidationError("image_content_type cannot be empty", "EMPTY_CONTENT_TYPE")
        if not isinstance(self.image_contents, (bytes, bytearray)) or not self.image_contents:
            raise ValidationError("image_contents must be non-empty bytes", "EMPTY_IMAGE")

    def to_multipart(self, boundary: Optional[str] = None) -> Tuple[bytes, str]:
        """
        Render the image as a multipart/form-data body.

        Returns:
            tuple: (body bytes, Content-Type header including the boundary)
        """
        fields = {
            FACE_CAPTURE_FIELD: (FACE_CAPTURE_FILENAME, bytes(self.image_contents), self.image_content_type),
        }
        return encode_multipart_formdata(fields, boundary=boundary)
