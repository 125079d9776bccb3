"""
In-branch verification (IBV) instructions
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
    value_map,
)


@dataclass
class ContactProfileResponse(ResourceModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            first_name=data.get('first_name'),
            last_name=data.get('last_name'),
            email=data.get('email'),
        )


@dataclass
class LocationResponse(ResourceModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(latitude=data.get('latitude'), longitude=data.get('longitude'))


@dataclass
class UkPostOfficeBranchResponse(ResourceModel):
    type: str
    name: Optional[str] = None
    address: Optional[str] = None
    post_code: Optional[str] = None
    fad_code: Optional[str] = None
    location: Optional[LocationResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            type=required(data, 'type', cls.__name__),
            name=data.get('name'),
            address=data.get('address'),
            post_code=data.get('post_code'),
            fad_code=data.get('fad_code'),
            location=nested(data, 'location', LocationResponse),
        )


BRANCHES = VariantFamily('branch', {
    'UK_POST_OFFICE': UkPostOfficeBranchResponse,
})


@dataclass
class IdDocumentProposalResponse(ResourceModel):
    type: str
    country_code: Optional[str] = None
    document_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            type=required(data, 'type', cls.__name__),
            country_code=data.get('country_code'),
            document_type=data.get('document_type'),
        )


@dataclass
class SupplementaryDocumentProposalResponse(ResourceModel):
    type: str
    country_code: Optional[str] = None
    document_type: Optional[str] = None
    objective: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            type=required(data, 'type', cls.__name__),
            country_code=data.get('country_code'),
            document_type=data.get('document_type'),
            objective=value_map(data, 'objective', cls.__name__),
        )


INSTRUCTION_DOCUMENTS = VariantFamily('instruction document', {
    'ID_DOCUMENT': IdDocumentProposalResponse,
    'SUPPLEMENTARY_DOCUMENT': SupplementaryDocumentProposalResponse,
})


@dataclass
class InstructionsResponse(ResourceModel):
    """Instructions currently set on an IBV session."""
    contact_profile: Optional[ContactProfileResponse] = None
    documents: List[Any] = field(default_factory=list)
    branch: Optional[Any] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            contact_profile=nested(data, 'contact_profile', ContactProfileResponse),
            documents=nested_list(data, 'documents', INSTRUCTION_DOCUMENTS, cls.__name__),
            branch=nested(data, 'branch', BRANCHES),
        )
