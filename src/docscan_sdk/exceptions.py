"""
Exception classes for Doc Scan Python SDK

Every error raised by the SDK derives from DocScanSDKError and carries an
explicit ErrorKind, so callers can branch on ``error.kind`` instead of
matching on class names.
"""

from enum import Enum
from typing import Optional, Dict, Any, List


class ErrorKind(str, Enum):
    """Taxonomy of SDK failures"""
    VALIDATION = "VALIDATION"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    SIGNING = "SIGNING"
    TRANSPORT = "TRANSPORT"
    CLIENT = "CLIENT"
    SERVER = "SERVER"
    DECODE = "DECODE"


class DocScanSDKError(Exception):
    """Base exception for all Doc Scan SDK errors"""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(DocScanSDKError):
    """Exception raised when caller-supplied input is empty or malformed"""
    kind = ErrorKind.VALIDATION


class InvalidCredentialError(DocScanSDKError):
    """Exception raised when key material cannot be used as a signing key"""
    kind = ErrorKind.INVALID_CREDENTIAL


class SigningError(DocScanSDKError):
    """
    Exception raised when a request cannot be signed

    Attributes:
        code: Error code for programmatic handling (see SigningErrorCodes)
    """
    kind = ErrorKind.SIGNING

    def __init__(self, message: str, code: str = "SIGNING_FAILED", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code, details)

    @property
    def code(self) -> str:
        return self.error_code

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


class TransportError(DocScanSDKError):
    """Exception raised when no HTTP status could be obtained from the service"""
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, error_code: str = "TRANSPORT_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ServiceError(DocScanSDKError):
    """
    Exception raised for non-2xx responses from the Doc Scan service.

    Instances are produced by ErrorMapper only.

    Attributes:
        status_code: HTTP status of the response
        code: Machine-readable error code from the response body, if any
        body_text: Raw response body decoded as text
        errors: Field-level errors reported by the service
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        body_text: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(
            message,
            code or "HTTP_ERROR",
            {'status_code': status_code, 'code': code},
        )
        self.status_code = status_code
        self.code = code
        self.body_text = body_text
        self.errors = errors or []

    def __str__(self) -> str:
        if self.code:
            return f"Error - {self.status_code} {self.code}: {self.message}"
        return f"Error - {self.status_code}: {self.message}"


class ClientError(ServiceError):
    """The service rejected the request (bad input, not found, unauthorized)"""
    kind = ErrorKind.CLIENT


class ServerError(ServiceError):
    """The service failed internally"""
    kind = ErrorKind.SERVER


class DecodeErrorReason(str, Enum):
    """Why a successful response body could not be decoded"""
    MISSING_FIELD = "MISSING_FIELD"
    WRONG_TYPE = "WRONG_TYPE"
    INVALID_JSON = "INVALID_JSON"


class DecodeError(DocScanSDKError):
    """
    Exception raised when a 2xx response body does not match the expected shape

    Attributes:
        reason: DecodeErrorReason
        resource: Name of the resource being decoded
        field: Offending field name, if any
    """
    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str,
        reason: DecodeErrorReason,
        resource: Optional[str] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message, reason.value, {'resource': resource, 'field': field})
        self.reason = reason
        self.resource = resource
        self.field = field

    @classmethod
    def missing_field(cls, resource: str, field: str) -> 'DecodeError':
        return cls(
            f"{resource} is missing required field '{field}'",
            DecodeErrorReason.MISSING_FIELD,
            resource,
            field,
        )

    @classmethod
    def wrong_type(cls, resource: str, field: Optional[str], expected: str, value: Any) -> 'DecodeError':
        where = f"{resource}.{field}" if field else resource
        return cls(
            f"{where} must be {expected}, got {type(value).__name__}",
            DecodeErrorReason.WRONG_TYPE,
            resource,
            field,
        )
