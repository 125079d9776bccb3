"""
Session configuration as seen by the service
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
    value_list,
    value_map,
)
from .support import SupportedCountryResponse


@dataclass
class RequestedTaskResponse(ResourceModel):
    type: Optional[str] = None
    state: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(type=data.get('type'), state=data.get('state'))


@dataclass
class RequiredResourceResponse(ResourceModel):
    """A resource the session still requires, or has already satisfied."""
    type: str
    id: Optional[str] = None
    state: Optional[str] = None

    @classmethod
    def _common_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return dict(
            type=required(data, 'type', cls.__name__),
            id=data.get('id'),
            state=data.get('state'),
        )

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(**cls._common_fields(data))

    @property
    def is_complete(self) -> bool:
        return self.state == 'COMPLETE'


@dataclass
class RequiredIdDocumentResourceResponse(RequiredResourceResponse):
    supported_countries: List[SupportedCountryResponse] = field(default_factory=list)
    allowed_capture_methods: Optional[str] = None
    requested_tasks: List[RequestedTaskResponse] = field(default_factory=list)
    attributes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            supported_countries=nested_list(data, 'supported_countries', SupportedCountryResponse, cls.__name__),
            allowed_capture_methods=data.get('allowed_capture_methods'),
            requested_tasks=nested_list(data, 'requested_tasks', RequestedTaskResponse, cls.__name__),
            attributes=value_map(data, 'attributes', cls.__name__),
        )


@dataclass
class RequiredSupplementaryDocumentResourceResponse(RequiredResourceResponse):
    requested_tasks: List[RequestedTaskResponse] = field(default_factory=list)
    document_types: List[str] = field(default_factory=list)
    country_codes: List[str] = field(default_factory=list)
    objective: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            requested_tasks=nested_list(data, 'requested_tasks', RequestedTaskResponse, cls.__name__),
            document_types=value_list(data, 'document_types', cls.__name__),
            country_codes=value_list(data, 'country_codes', cls.__name__),
            objective=value_map(data, 'objective', cls.__name__),
        )


@dataclass
class RequiredLivenessResourceResponse(RequiredResourceResponse):
    liveness_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(**cls._common_fields(data), liveness_type=data.get('liveness_type'))


class RequiredFaceCaptureResourceResponse(RequiredResourceResponse):
    pass


REQUIRED_RESOURCES = VariantFamily('required resource', {
    'ID_DOCUMENT': RequiredIdDocumentResourceResponse,
    'SUPPLEMENTARY_DOCUMENT': RequiredSupplementaryDocumentResourceResponse,
    'LIVENESS': RequiredLivenessResourceResponse,
    'FACE_CAPTURE': RequiredFaceCaptureResourceResponse,
})


@dataclass
class CaptureResponse(ResourceModel):
    biometric_consent: Optional[str] = None
    required_resources: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            biometric_consent=data.get('biometric_consent'),
            required_resources=nested_list(data, 'required_resources', REQUIRED_RESOURCES, cls.__name__),
        )

    def resources_of(self, model: Type[ResourceModel]) -> List[Any]:
        return [resource for resource in self.required_resources if isinstance(resource, model)]

    @property
    def document_resource_requirements(self) -> List[RequiredResourceResponse]:
        return self.resources_of(RequiredIdDocumentResourceResponse) + \
            self.resources_of(RequiredSupplementaryDocumentResourceResponse)


@dataclass
class SessionConfigurationResponse(ResourceModel):
    session_id: str
    client_session_token_ttl: Optional[int] = None
    requested_checks: List[str] = field(default_factory=list)
    capture: Optional[CaptureResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            session_id=required(data, 'session_id', cls.__name__),
            client_session_token_ttl=data.get('client_session_token_ttl'),
            requested_checks=value_list(data, 'requested_checks', cls.__name__),
            capture=nested(data, 'capture', CaptureResponse),
        )
