"""
Media references and media content
"""

import base64
from dataclasses import dataclass, field
from typing import List, Optional

from .base import ResourceModel, expect_object, required, nested, nested_list

DEFAULT_MEDIA_TYPE = "application/octet-stream"


@dataclass
class MediaResponse(ResourceModel):
    """Reference to a media item stored by the service."""
    id: str
    type: Optional[str] = None
    created: Optional[str] = None
    last_updated: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            id=required(data, 'id', cls.__name__),
            type=data.get('type'),
            created=data.get('created'),
            last_updated=data.get('last_updated'),
        )


@dataclass
class MediaHolderResponse(ResourceModel):
    """
    Wrapper around a single media reference.

    Used for document fields, document ID photos, supplementary document
    files, face maps, captured images and raw watchlist results.
    """
    media: Optional[MediaResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(media=nested(data, 'media', MediaResponse))


@dataclass
class FrameResponse(ResourceModel):
    media: Optional[MediaResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(media=nested(data, 'media', MediaResponse))


@dataclass
class PageResponse(ResourceModel):
    """A captured page of a document."""
    capture_method: Optional[str] = None
    media: Optional[MediaResponse] = None
    frames: List[FrameResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            capture_method=data.get('capture_method'),
            media=nested(data, 'media', MediaResponse),
            frames=nested_list(data, 'frames', FrameResponse, cls.__name__),
        )


@dataclass
class GeneratedMedia(ResourceModel):
    id: str
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(id=required(data, 'id', cls.__name__), type=data.get('type'))


@dataclass(frozen=True)
class MediaContent:
    """
    Binary media returned by media retrieval endpoints.

    The payload is opaque: no text encoding is assumed.

    Attributes:
        content: Raw bytes
        mime_type: Content-Type declared by the service
    """
    content: bytes
    mime_type: str = DEFAULT_MEDIA_TYPE

    def base64_content(self) -> str:
        return base64.b64encode(self.content).decode('ascii')

    def data_url(self) -> str:
        """Render the media as a ``data:`` URL."""
        return f"data:{self.mime_type};base64,{self.base64_content()}"
