"""
Utility functions for request signing

This module provides nonce and timestamp generation, signature encoding and
query-string helpers used when building signed requests.
"""

import base64
import re
import time
import uuid
from collections.abc import Mapping
from typing import Iterable, Optional, Tuple, Union

from ..exceptions import SigningError
from .types import SigningErrorCodes, QueryParams

QueryInput = Union[Mapping[str, object], Iterable[Tuple[str, object]], None]

_UUID4_PATTERN = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$',
    re.IGNORECASE
)


def generate_nonce() -> str:
    """
    Generate a UUID v4 nonce for replay protection.

    Returns:
        str: UUID v4 string for use as nonce
    """
    return str(uuid.uuid4())


def generate_timestamp() -> int:
    """
    Generate current Unix timestamp in milliseconds.

    Returns:
        int: Milliseconds since epoch
    """
    return int(time.time() * 1000)


def validate_nonce(nonce: str) -> bool:
    """
    Validate nonce format (should be UUID v4).

    Args:
        nonce: Nonce string to validate

    Returns:
        bool: True if nonce is valid UUID v4 format
    """
    if not isinstance(nonce, str):
        return False
    return bool(_UUID4_PATTERN.match(nonce))


def validate_timestamp(timestamp: int) -> bool:
    """
    Validate millisecond timestamp (between 2000 and 2100).

    Args:
        timestamp: Millisecond timestamp to validate

    Returns:
        bool: True if timestamp is valid
    """
    if not isinstance(timestamp, int) or isinstance(timestamp, bool):
        return False

    year_2000_ms = 946684800 * 1000
    year_2100_ms = 4102444800 * 1000
    return year_2000_ms <= timestamp <= year_2100_ms


def encode_signature(signature: bytes) -> str:
    """
    Encode a raw signature as URL-safe base64 without padding.

    Args:
        signature: Raw signature bytes

    Returns:
        str: Token safe to place in a query string as-is
    """
    return base64.urlsafe_b64encode(signature).rstrip(b'=').decode('ascii')


def decode_signature(token: str) -> bytes:
    """
    Decode a signature token produced by encode_signature.

    Raises:
        SigningError: If the token is not valid URL-safe base64
    """
    padded = token + '=' * (-len(token) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode('ascii'))
    except (ValueError, UnicodeEncodeError) as e:
        raise SigningError(
            f"Invalid signature token: {e}",
            SigningErrorCodes.CRYPTO_ERROR,
            {"token": token}
        )


def normalize_query(query: QueryInput) -> QueryParams:
    """
    Convert query parameters to an ordered tuple of string pairs.

    Mappings keep their insertion order; ``None`` values are dropped and
    booleans are rendered as ``true``/``false``.

    Args:
        query: Mapping or iterable of (name, value) pairs

    Returns:
        tuple: Ordered (name, value) pairs
    """
    if query is None:
        return ()

    items = query.items() if isinstance(query, Mapping) else query
    normalized = []
    for name, value in items:
        if value is None:
            continue
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        normalized.append((str(name), str(value)))
    return tuple(normalized)


def join_url(base_url: str, endpoint: str) -> str:
    """Join the API base URL and an endpoint path starting with ``/``."""
    return base_url.rstrip('/') + '/' + endpoint.lstrip('/')


def to_bytes(body: Optional[Union[str, bytes]]) -> bytes:
    """
    Convert a request body to bytes.

    Raises:
        SigningError: If the body is neither str, bytes nor None
    """
    if body is None:
        return b""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode('utf-8')
    raise SigningError(
        f"Body must be string, bytes, or None, got {type(body).__name__}",
        SigningErrorCodes.INVALID_BODY,
        {"body_type": type(body).__name__}
    )


class PerformanceTimer:
    """Simple performance timer for monitoring signing operations."""

    def __init__(self):
        self.start_time = time.perf_counter()

    def elapsed_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        return (time.perf_counter() - self.start_time) * 1000
