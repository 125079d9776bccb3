"""
Transport capability for sending signed requests

A transport sends a fully-formed request and returns the raw status,
headers and body. The SDK core never performs I/O itself; timeouts,
cancellation and any retry policy belong to the transport.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from .exceptions import TransportError
from .version import __version__

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """
    Raw response returned by a transport.

    Attributes:
        status_code: HTTP status code
        headers: Response headers (case-insensitive lookup)
        body: Raw response body
    """
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, 'headers', CaseInsensitiveDict(self.headers or {}))
        if self.body is None:
            object.__setattr__(self, 'body', b"")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get('Content-Type')


class Transport(ABC):
    """Abstract capability: send one request, return the raw response."""

    @abstractmethod
    def send(self, method: str, url: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        """
        Send a request.

        Args:
            method: HTTP method
            url: Absolute URL including query string
            headers: Request headers
            body: Request body (may be empty)

        Returns:
            TransportResponse: Raw response

        Raises:
            TransportError: If no HTTP status could be obtained
        """

    def close(self) -> None:
        """Release any resources held by the transport."""


class RequestsTransport(Transport):
    """
    Transport backed by a requests.Session.

    No retry adapter is mounted; callers wanting retries can pass a session
    configured with their own adapters.
    """

    def __init__(self, timeout: float = 30.0, session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            session: Optional existing requests session to use
        """
        if timeout <= 0:
            raise TransportError("Timeout must be positive", "INVALID_TIMEOUT")

        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.setdefault('User-Agent', f'DocScan-Python-SDK/{__version__}')

    def send(self, method: str, url: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        try:
            response = self.session.request(
                method,
                url,
                headers=dict(headers),
                data=body or None,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise TransportError(
                f"Request timeout after {self.timeout} seconds",
                "TIMEOUT"
            )
        except requests.exceptions.ConnectionError as e:
            raise TransportError(
                f"Connection error: {e}",
                "CONNECTION_ERROR",
                {"original_error": str(e)}
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Request failed: {e}",
                "REQUEST_FAILED",
                {"original_error": str(e)}
            )

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def close(self) -> None:
        """Close the HTTP session if this transport created it."""
        if self._owns_session:
            self.session.close()
            logger.debug("HTTP session closed")
