"""
Doc Scan Python SDK - Response Models

Dataclass models for every resource returned by the Doc Scan API, plus the
variant families used to decode polymorphic resources.
"""

from .base import (
    ResourceModel,
    UnknownResource,
    VariantFamily,
)

from .media import (
    DEFAULT_MEDIA_TYPE,
    MediaResponse,
    MediaHolderResponse,
    FrameResponse,
    PageResponse,
    GeneratedMedia,
    MediaContent,
)

from .watchlist import (
    CaProfilesSourcesResponse,
    CaTypeListSourcesResponse,
    CaExactMatchingStrategyResponse,
    CaFuzzyMatchingStrategyResponse,
    WatchlistAdvancedCaSearchConfigResponse,
    WatchlistAdvancedCaYotiAccountSearchConfigResponse,
    WatchlistAdvancedCaCustomAccountSearchConfigResponse,
    WatchlistScreeningSearchConfigResponse,
    WatchlistSummaryResponse,
    WatchlistScreeningSummaryResponse,
    WatchlistAdvancedCaSummaryResponse,
    CA_SOURCES,
    CA_MATCHING_STRATEGIES,
    ADVANCED_CA_SEARCH_CONFIGS,
)

from .checks import (
    RecommendationResponse,
    DetailsResponse,
    BreakdownResponse,
    ReportResponse,
    WatchlistScreeningReportResponse,
    WatchlistAdvancedCaReportResponse,
    CheckResponse,
    AuthenticityCheckResponse,
    IdDocumentComparisonCheckResponse,
    FaceMatchCheckResponse,
    TextDataCheckResponse,
    SupplementaryDocumentTextDataCheckResponse,
    LivenessCheckResponse,
    FaceComparisonCheckResponse,
    ThirdPartyIdentityCheckResponse,
    WatchlistScreeningCheckResponse,
    WatchlistAdvancedCaCheckResponse,
    CHECKS,
)

from .tasks import (
    GeneratedCheckResponse,
    TaskRecommendationReasonResponse,
    TaskRecommendationResponse,
    TaskResponse,
    TextExtractionTaskResponse,
    SupplementaryDocumentTextExtractionTaskResponse,
    TASKS,
)

from .resources import (
    ResourceResponse,
    IdDocumentResourceResponse,
    SupplementaryDocumentResourceResponse,
    LivenessResourceResponse,
    ZoomLivenessResourceResponse,
    StaticLivenessResourceResponse,
    FaceCaptureResourceResponse,
    ResourceContainer,
    CreateFaceCaptureResourceResponse,
    LIVENESS_RESOURCES,
)

from .session import (
    CreateSessionResult,
    GetSessionResult,
)

from .support import (
    SupportedDocumentResponse,
    SupportedCountryResponse,
    SupportedDocumentsResponse,
)

from .configuration import (
    RequestedTaskResponse,
    RequiredResourceResponse,
    RequiredIdDocumentResourceResponse,
    RequiredSupplementaryDocumentResourceResponse,
    RequiredLivenessResourceResponse,
    RequiredFaceCaptureResourceResponse,
    CaptureResponse,
    SessionConfigurationResponse,
    REQUIRED_RESOURCES,
)

from .instructions import (
    ContactProfileResponse,
    LocationResponse,
    UkPostOfficeBranchResponse,
    IdDocumentProposalResponse,
    SupplementaryDocumentProposalResponse,
    InstructionsResponse,
    BRANCHES,
    INSTRUCTION_DOCUMENTS,
)

__all__ = [
    # Base
    'ResourceModel',
    'UnknownResource',
    'VariantFamily',
    # Media
    'DEFAULT_MEDIA_TYPE',
    'MediaResponse',
    'MediaHolderResponse',
    'FrameResponse',
    'PageResponse',
    'GeneratedMedia',
    'MediaContent',
    # Watchlist
    'CaProfilesSourcesResponse',
    'CaTypeListSourcesResponse',
    'CaExactMatchingStrategyResponse',
    'CaFuzzyMatchingStrategyResponse',
    'WatchlistAdvancedCaSearchConfigResponse',
    'WatchlistAdvancedCaYotiAccountSearchConfigResponse',
    'WatchlistAdvancedCaCustomAccountSearchConfigResponse',
    'WatchlistScreeningSearchConfigResponse',
    'WatchlistSummaryResponse',
    'WatchlistScreeningSummaryResponse',
    'WatchlistAdvancedCaSummaryResponse',
    'CA_SOURCES',
    'CA_MATCHING_STRATEGIES',
    'ADVANCED_CA_SEARCH_CONFIGS',
    # Checks
    'RecommendationResponse',
    'DetailsResponse',
    'BreakdownResponse',
    'ReportResponse',
    'WatchlistScreeningReportResponse',
    'WatchlistAdvancedCaReportResponse',
    'CheckResponse',
    'AuthenticityCheckResponse',
    'IdDocumentComparisonCheckResponse',
    'FaceMatchCheckResponse',
    'TextDataCheckResponse',
    'SupplementaryDocumentTextDataCheckResponse',
    'LivenessCheckResponse',
    'FaceComparisonCheckResponse',
    'ThirdPartyIdentityCheckResponse',
    'WatchlistScreeningCheckResponse',
    'WatchlistAdvancedCaCheckResponse',
    'CHECKS',
    # Tasks
    'GeneratedCheckResponse',
    'TaskRecommendationReasonResponse',
    'TaskRecommendationResponse',
    'TaskResponse',
    'TextExtractionTaskResponse',
    'SupplementaryDocumentTextExtractionTaskResponse',
    'TASKS',
    # Resources
    'ResourceResponse',
    'IdDocumentResourceResponse',
    'SupplementaryDocumentResourceResponse',
    'LivenessResourceResponse',
    'ZoomLivenessResourceResponse',
    'StaticLivenessResourceResponse',
    'FaceCaptureResourceResponse',
    'ResourceContainer',
    'CreateFaceCaptureResourceResponse',
    'LIVENESS_RESOURCES',
    # Sessions
    'CreateSessionResult',
    'GetSessionResult',
    # Supported documents
    'SupportedDocumentResponse',
    'SupportedCountryResponse',
    'SupportedDocumentsResponse',
    # Session configuration
    'RequestedTaskResponse',
    'RequiredResourceResponse',
    'RequiredIdDocumentResourceResponse',
    'RequiredSupplementaryDocumentResourceResponse',
    'RequiredLivenessResourceResponse',
    'RequiredFaceCaptureResourceResponse',
    'CaptureResponse',
    'SessionConfigurationResponse',
    'REQUIRED_RESOURCES',
    # Instructions
    'ContactProfileResponse',
    'LocationResponse',
    'UkPostOfficeBranchResponse',
    'IdDocumentProposalResponse',
    'SupplementaryDocumentProposalResponse',
    'InstructionsResponse',
    'BRANCHES',
    'INSTRUCTION_DOCUMENTS',
]
