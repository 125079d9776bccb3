"""
Doc Scan Python SDK
Signed requests and typed responses for the Doc Scan identity verification API
"""

from .version import __version__
from .config import (
    ClientConfig,
    DEFAULT_API_URL,
    ENV_API_URL,
)
from .crypto import (
    KeyMaterial,
    Credential,
    resolve_pem,
)
from .exceptions import (
    ErrorKind,
    DocScanSDKError,
    ValidationError,
    InvalidCredentialError,
    SigningError,
    TransportError,
    ServiceError,
    ClientError,
    ServerError,
    DecodeError,
    DecodeErrorReason,
)
from .signing import (
    HttpMethod,
    SignedRequest,
    RequestSigner,
    build_canonical_request,
    sign,
)
from .transport import (
    Transport,
    TransportResponse,
    RequestsTransport,
)
from .decoding import ResponseDecoder
from .error_mapper import ErrorMapper
from .payloads import (
    CreateFaceCaptureResourcePayload,
    UploadFaceCaptureImagePayload,
)
from .models import (
    UnknownResource,
    VariantFamily,
    MediaContent,
    CreateSessionResult,
    GetSessionResult,
    CreateFaceCaptureResourceResponse,
    SupportedDocumentsResponse,
    SessionConfigurationResponse,
    InstructionsResponse,
    ContactProfileResponse,
)
from .service import DocScanService
from .client import DocScanClient

__all__ = [
    '__version__',
    # Configuration
    'ClientConfig',
    'DEFAULT_API_URL',
    'ENV_API_URL',
    # Credentials
    'KeyMaterial',
    'Credential',
    'resolve_pem',
    # Errors
    'ErrorKind',
    'DocScanSDKError',
    'ValidationError',
    'InvalidCredentialError',
    'SigningError',
    'TransportError',
    'ServiceError',
    'ClientError',
    'ServerError',
    'DecodeError',
    'DecodeErrorReason',
    # Signing
    'HttpMethod',
    'SignedRequest',
    'RequestSigner',
    'build_canonical_request',
    'sign',
    # Transport
    'Transport',
    'TransportResponse',
    'RequestsTransport',
    # Decoding and errors
    'ResponseDecoder',
    'ErrorMapper',
    # Payloads
    'CreateFaceCaptureResourcePayload',
    'UploadFaceCaptureImagePayload',
    # Models
    'UnknownResource',
    'VariantFamily',
    'MediaContent',
    'CreateSessionResult',
    'GetSessionResult',
    'CreateFaceCaptureResourceResponse',
    'SupportedDocumentsResponse',
    'SessionConfigurationResponse',
    'InstructionsResponse',
    'ContactProfileResponse',
    # Facade
    'DocScanService',
    'DocScanClient',
]
