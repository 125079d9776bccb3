"""
Resources captured during a Doc Scan session
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type

from .base import (
    ResourceModel,
    VariantFamily,
    expect_object,
    required,
    nested,
    nested_list,
)
from .media import FrameResponse, MediaHolderResponse, PageResponse
from .tasks import TASKS


@dataclass
class ResourceResponse(ResourceModel):
    id: str
    tasks: List[Any] = field(default_factory=list)

    @classmethod
    def _common_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return dict(
            id=required(data, 'id', cls.__name__),
            tasks=nested_list(data, 'tasks', TASKS, cls.__name__),
        )

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(**cls._common_fields(data))

    def tasks_of(self, model: Type[ResourceModel]) -> List[Any]:
        """Return the tasks decoded as ``model`` (subclasses included)."""
        return [task for task in self.tasks if isinstance(task, model)]


@dataclass
class IdDocumentResourceResponse(ResourceResponse):
    document_type: Optional[str] = None
    issuing_country: Optional[str] = None
    pages: List[PageResponse] = field(default_factory=list)
    document_fields: Optional[MediaHolderResponse] = None
    document_id_photo: Optional[MediaHolderResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            document_type=data.get('document_type'),
            issuing_country=data.get('issuing_country'),
            pages=nested_list(data, 'pages', PageResponse, cls.__name__),
            document_fields=nested(data, 'document_fields', MediaHolderResponse),
            document_id_photo=nested(data, 'document_id_photo', MediaHolderResponse),
        )


@dataclass
class SupplementaryDocumentResourceResponse(ResourceResponse):
    document_type: Optional[str] = None
    issuing_country: Optional[str] = None
    pages: List[PageResponse] = field(default_factory=list)
    document_fields: Optional[MediaHolderResponse] = None
    file: Optional[MediaHolderResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            document_type=data.get('document_type'),
            issuing_country=data.get('issuing_country'),
            pages=nested_list(data, 'pages', PageResponse, cls.__name__),
            document_fields=nested(data, 'document_fields', MediaHolderResponse),
            file=nested(data, 'file', MediaHolderResponse),
        )


@dataclass
class LivenessResourceResponse(ResourceResponse):
    liveness_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(**cls._common_fields(data), liveness_type=data.get('liveness_type'))


@dataclass
class ZoomLivenessResourceResponse(LivenessResourceResponse):
    facemap: Optional[MediaHolderResponse] = None
    frames: List[FrameResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            liveness_type=data.get('liveness_type'),
            facemap=nested(data, 'facemap', MediaHolderResponse),
            frames=nested_list(data, 'frames', FrameResponse, cls.__name__),
        )


@dataclass
class StaticLivenessResourceResponse(LivenessResourceResponse):
    image: Optional[MediaHolderResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            liveness_type=data.get('liveness_type'),
            image=nested(data, 'image', MediaHolderResponse),
        )


LIVENESS_RESOURCES = VariantFamily('liveness resource', {
    'ZOOM': ZoomLivenessResourceResponse,
    'STATIC': StaticLivenessResourceResponse,
}, discriminator='liveness_type')


@dataclass
class FaceCaptureResourceResponse(ResourceResponse):
    image: Optional[MediaHolderResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            image=nested(data, 'image', MediaHolderResponse),
        )


@dataclass
class ResourceContainer(ResourceModel):
    """All resources captured for a session, grouped by kind."""
    id_documents: List[IdDocumentResourceResponse] = field(default_factory=list)
    supplementary_documents: List[SupplementaryDocumentResourceResponse] = field(default_factory=list)
    liveness_capture: List[Any] = field(default_factory=list)
    face_capture: List[FaceCaptureResourceResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            id_documents=nested_list(data, 'id_documents', IdDocumentResourceResponse, cls.__name__),
            supplementary_documents=nested_list(
                data, 'supplementary_documents', SupplementaryDocumentResourceResponse, cls.__name__
            ),
            liveness_capture=nested_list(data, 'liveness_capture', LIVENESS_RESOURCES, cls.__name__),
            face_capture=nested_list(data, 'face_capture', FaceCaptureResourceResponse, cls.__name__),
        )

    @property
    def zoom_liveness_resources(self) -> List[ZoomLivenessResourceResponse]:
        return [r for r in self.liveness_capture if isinstance(r, ZoomLivenessResourceResponse)]

    @property
    def static_liveness_resources(self) -> List[StaticLivenessResourceResponse]:
        return [r for r in self.liveness_capture if isinstance(r, StaticLivenessResourceResponse)]


@dataclass
class CreateFaceCaptureResourceResponse(ResourceModel):
    id: str
    frames: Optional[int] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(id=required(data, 'id', cls.__name__), frames=data.get('frames'))
