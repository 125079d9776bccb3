"""
Tasks run against session resources
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import (
    ResourceModel,
    VariantFamily,
    expect_object,
    required,
    nested,
    nested_list,
)
from .media import GeneratedMedia


@dataclass
class GeneratedCheckResponse(ResourceModel):
    id: str
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(id=required(data, 'id', cls.__name__), type=data.get('type'))


@dataclass
class TaskRecommendationReasonResponse(ResourceModel):
    value: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(value=data.get('value'), detail=data.get('detail'))


@dataclass
class TaskRecommendationResponse(ResourceModel):
    value: Optional[str] = None
    reason: Optional[TaskRecommendationReasonResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            value=data.get('value'),
            reason=nested(data, 'reason', TaskRecommendationReasonResponse),
        )


@dataclass
class TaskResponse(ResourceModel):
    """
    A task the service ran (or is running) against a resource.

    Attributes:
        id: Task identifier
        type: Discriminator tag
        state: Task state
        generated_checks: Checks created as a result of the task
        generated_media: Media created as a result of the task
    """
    id: str
    type: str
    state: Optional[str] = None
    created: Optional[str] = None
    last_updated: Optional[str] = None
    generated_checks: List[GeneratedCheckResponse] = field(default_factory=list)
    generated_media: List[GeneratedMedia] = field(default_factory=list)

    @classmethod
    def _common_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return dict(
            id=required(data, 'id', cls.__name__),
            type=required(data, 'type', cls.__name__),
            state=data.get('state'),
            created=data.get('created'),
            last_updated=data.get('last_updated'),
            generated_checks=nested_list(data, 'generated_checks', GeneratedCheckResponse, cls.__name__),
            generated_media=nested_list(data, 'generated_media', GeneratedMedia, cls.__name__),
        )

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(**cls._common_fields(data))


@dataclass
class TextExtractionTaskResponse(TaskResponse):
    recommendation: Optional[TaskRecommendationResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            recommendation=nested(data, 'recommendation', TaskRecommendationResponse),
        )


class SupplementaryDocumentTextExtractionTaskResponse(TextExtractionTaskResponse):
    pass


TASKS = VariantFamily('task', {
    'ID_DOCUMENT_TEXT_DATA_EXTRACTION': TextExtractionTaskResponse,
    'SUPPLEMENTARY_DOCUMENT_TEXT_DATA_EXTRACTION': SupplementaryDocumentTextExtractionTaskResponse,
})
