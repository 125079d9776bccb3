"""
Check results attached to a Doc Scan session
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Type

from .base import (
    ResourceModel,
    VariantFamily,
    expect_object,
    required,
    nested,
    nested_list,
    value_list,
)
from .media import GeneratedMedia
from .watchlist import WatchlistScreeningSummaryResponse, WatchlistAdvancedCaSummaryResponse


@dataclass
class RecommendationResponse(ResourceModel):
    value: Optional[str] = None
    reason: Optional[str] = None
    recovery_suggestion: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            value=data.get('value'),
            reason=data.get('reason'),
            recovery_suggestion=data.get('recovery_suggestion'),
        )


@dataclass
class DetailsResponse(ResourceModel):
    name: Optional[str] = None
    value: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(name=data.get('name'), value=data.get('value'))


@dataclass
class BreakdownResponse(ResourceModel):
    sub_check: Optional[str] = None
    result: Optional[str] = None
    details: List[DetailsResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            sub_check=data.get('sub_check'),
            result=data.get('result'),
            details=nested_list(data, 'details', DetailsResponse, cls.__name__),
        )


@dataclass
class ReportResponse(ResourceModel):
    recommendation: Optional[RecommendationResponse] = None
    breakdown: List[BreakdownResponse] = field(default_factory=list)

    @classmethod
    def _common_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return dict(
            recommendation=nested(data, 'recommendation', RecommendationResponse),
            breakdown=nested_list(data, 'breakdown', BreakdownResponse, cls.__name__),
        )

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(**cls._common_fields(data))


@dataclass
class WatchlistScreeningReportResponse(ReportResponse):
    watchlist_summary: Optional[WatchlistScreeningSummaryResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            watchlist_summary=nested(data, 'watchlist_summary', WatchlistScreeningSummaryResponse),
        )


@dataclass
class WatchlistAdvancedCaReportResponse(ReportResponse):
    watchlist_summary: Optional[WatchlistAdvancedCaSummaryResponse] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            watchlist_summary=nested(data, 'watchlist_summary', WatchlistAdvancedCaSummaryResponse),
        )


@dataclass
class CheckResponse(ResourceModel):
    """
    Result of a check performed on session resources.

    Attributes:
        id: Check identifier
        type: Discriminator tag (e.g. ID_DOCUMENT_AUTHENTICITY)
        state: Check state (CREATED, PENDING, DONE...)
        resources_used: IDs of the resources the check ran against
        generated_media: Media produced by the check
        report: Recommendation and breakdown, once available
        created: Creation time (ISO 8601)
        last_updated: Last update time (ISO 8601)
    """
    id: str
    type: str
    state: Optional[str] = None
    resources_used: List[str] = field(default_factory=list)
    generated_media: List[GeneratedMedia] = field(default_factory=list)
    report: Optional[ReportResponse] = None
    created: Optional[str] = None
    last_updated: Optional[str] = None

    report_model: ClassVar[Type[ReportResponse]] = ReportResponse

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            id=required(data, 'id', cls.__name__),
            type=required(data, 'type', cls.__name__),
            state=data.get('state'),
            resources_used=value_list(data, 'resources_used', cls.__name__),
            generated_media=nested_list(data, 'generated_media', GeneratedMedia, cls.__name__),
            report=nested(data, 'report', cls.report_model),
            created=data.get('created'),
            last_updated=data.get('last_updated'),
        )


class AuthenticityCheckResponse(CheckResponse):
    pass


class IdDocumentComparisonCheckResponse(CheckResponse):
    pass


class FaceMatchCheckResponse(CheckResponse):
    pass


class TextDataCheckResponse(CheckResponse):
    pass


class SupplementaryDocumentTextDataCheckResponse(CheckResponse):
    pass


class LivenessCheckResponse(CheckResponse):
    pass


class FaceComparisonCheckResponse(CheckResponse):
    pass


class ThirdPartyIdentityCheckResponse(CheckResponse):
    pass


class WatchlistScreeningCheckResponse(CheckResponse):
    report_model = WatchlistScreeningReportResponse


class WatchlistAdvancedCaCheckResponse(CheckResponse):
    report_model = WatchlistAdvancedCaReportResponse


CHECKS = VariantFamily('check', {
    'ID_DOCUMENT_AUTHENTICITY': AuthenticityCheckResponse,
    'ID_DOCUMENT_COMPARISON': IdDocumentComparisonCheckResponse,
    'ID_DOCUMENT_FACE_MATCH': FaceMatchCheckResponse,
    'ID_DOCUMENT_TEXT_DATA_CHECK': TextDataCheckResponse,
    'SUPPLEMENTARY_DOCUMENT_TEXT_DATA_CHECK': SupplementaryDocumentTextDataCheckResponse,
    'LIVENESS': LivenessCheckResponse,
    'FACE_COMPARISON': FaceComparisonCheckResponse,
    'THIRD_PARTY_IDENTITY': ThirdPartyIdentityCheckResponse,
    'WATCHLIST_SCREENING': WatchlistScreeningCheckResponse,
    'WATCHLIST_ADVANCED_CA': WatchlistAdvancedCaCheckResponse,
})
