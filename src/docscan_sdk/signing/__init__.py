"""
Doc Scan Python SDK - Request Signing Module

Canonical request construction and RSA-SHA256 request signing for
authenticating with the Doc Scan API.
"""

from .types import (
    HttpMethod,
    SignedRequest,
    SigningErrorCodes,
    SDK_ID_PARAM,
    NONCE_PARAM,
    TIMESTAMP_PARAM,
    SIGNATURE_PARAM,
    SDK_HEADER,
    SDK_VERSION_HEADER,
)

from .canonical_message import (
    CanonicalRequestBuilder,
    build_canonical_request,
    CANONICAL_DELIMITER,
)

from .request_signer import (
    RequestSigner,
    sign,
)

from .utils import (
    generate_nonce,
    generate_timestamp,
    validate_nonce,
    validate_timestamp,
    encode_signature,
    decode_signature,
    normalize_query,
)

# Public API exports
__all__ = [
    # Types
    'HttpMethod',
    'SignedRequest',
    'SigningErrorCodes',
    'SDK_ID_PARAM',
    'NONCE_PARAM',
    'TIMESTAMP_PARAM',
    'SIGNATURE_PARAM',
    'SDK_HEADER',
    'SDK_VERSION_HEADER',
    # Canonical request
    'CanonicalRequestBuilder',
    'build_canonical_request',
    'CANONICAL_DELIMITER',
    # Signing
    'RequestSigner',
    'sign',
    # Utilities
    'generate_nonce',
    'generate_timestamp',
    'validate_nonce',
    'validate_timestamp',
    'encode_signature',
    'decode_signature',
    'normalize_query',
]
