"""
Type definitions for request signing functionality

This module provides type definitions and data classes for the signed
request pipeline: HTTP methods, signing error codes and the fully signed
request handed to the transport.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Tuple
from urllib.parse import urlencode


class HttpMethod(str, Enum):
    """HTTP methods used by the Doc Scan API"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


# Query parameter names agreed with the Doc Scan service
SDK_ID_PARAM = "sdkId"
NONCE_PARAM = "nonce"
TIMESTAMP_PARAM = "timestamp"
SIGNATURE_PARAM = "sig"

# Outbound header names
SDK_HEADER = "X-Yoti-SDK"
SDK_VERSION_HEADER = "X-Yoti-SDK-Version"


@dataclass(frozen=True)
class SignedRequest:
    """
    Request ready to be handed to a transport

    Attributes:
        method: Upper-cased HTTP method
        url: Final URL, including the signed query and the ``sig`` parameter
        path: Absolute path that was signed, without query string
        query_params: Signed query parameters, in signing order
        body: Serialized request body (empty when the request has none)
        content_type: Content-Type of the body, if any
        signature: URL-safe base64 signature token
        sdk_id: SDK identifier of the signing credential
        headers: Outbound headers
    """
    method: str
    url: str
    path: str
    query_params: Tuple[Tuple[str, str], ...]
    body: bytes
    content_type: Optional[str]
    signature: str
    sdk_id: str
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def target(self) -> str:
        """Absolute path plus query string, exactly as signed."""
        if not self.query_params:
            return self.path
        return f"{self.path}?{urlencode(self.query_params)}"


class SigningErrorCodes:
    """Standard error codes for signing operations"""

    # Request errors
    INVALID_METHOD = "INVALID_METHOD"
    INVALID_TARGET = "INVALID_TARGET"
    INVALID_BODY = "INVALID_BODY"

    # Signing errors
    SIGNING_FAILED = "SIGNING_FAILED"
    CANONICAL_MESSAGE_FAILED = "CANONICAL_MESSAGE_FAILED"

    # Validation errors
    INVALID_NONCE = "INVALID_NONCE"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"

    # Crypto errors
    INVALID_PRIVATE_KEY = "INVALID_PRIVATE_KEY"
    CRYPTO_ERROR = "CRYPTO_ERROR"


# Type aliases for convenience
NonceGenerator = Callable[[], str]
TimestampGenerator = Callable[[], int]
QueryParams = Tuple[Tuple[str, str], ...]
