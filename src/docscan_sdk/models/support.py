"""
Supported documents listing
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .base import ResourceModel, expect_object, nested_list


@dataclass
class SupportedDocumentResponse(ResourceModel):
    type: Optional[str] = None
    is_strictly_latin: Optional[bool] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(type=data.get('type'), is_strictly_latin=data.get('is_strictly_latin'))


@dataclass
class SupportedCountryResponse(ResourceModel):
    code: Optional[str] = None
    supported_documents: List[SupportedDocumentResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            code=data.get('code'),
            supported_documents=nested_list(data, 'supported_documents', SupportedDocumentResponse, cls.__name__),
        )


@dataclass
class SupportedDocumentsResponse(ResourceModel):
    supported_countries: List[SupportedCountryResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            supported_countries=nested_list(data, 'supported_countries', SupportedCountryResponse, cls.__name__),
        )

    def country(self, code: str) -> Optional[SupportedCountryResponse]:
        for country in self.supported_countries:
            if country.code == code:
                return country
        return None
