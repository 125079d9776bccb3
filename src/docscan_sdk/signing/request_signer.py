"""
Request signer for the Doc Scan API

Signs canonical requests with the credential's RSA key (PKCS#1 v1.5 over
SHA-256) and attaches the resulting token, together with the SDK id, to the
outbound request as query parameters.
"""

import logging
from typing import Dict, Optional, Union
from urllib.parse import urlencode

from ..config import ClientConfig
from ..crypto.keys import Credential
from ..exceptions import SigningError
from .canonical_message import build_canonical_request
from .types import (
    HttpMethod,
    SignedRequest,
    SigningErrorCodes,
    NonceGenerator,
    TimestampGenerator,
    SDK_ID_PARAM,
    NONCE_PARAM,
    TIMESTAMP_PARAM,
    SIGNATURE_PARAM,
    SDK_HEADER,
    SDK_VERSION_HEADER,
)
from .utils import (
    QueryInput,
    encode_signature,
    generate_nonce,
    generate_timestamp,
    join_url,
    normalize_query,
    to_bytes,
    validate_nonce,
    validate_timestamp,
    PerformanceTimer,
)

logger = logging.getLogger(__name__)

# Signing slower than this is logged as a warning
SLOW_SIGNING_THRESHOLD_MS = 50


def sign(canonical: bytes, credential: Credential) -> str:
    """
    Sign canonical request bytes with a credential.

    Args:
        canonical: Canonical request bytes
        credential: Credential holding the RSA private key

    Returns:
        str: URL-safe base64 signature token without padding

    Raises:
        SigningError: If the key is unusable or signing fails
    """
    if not isinstance(credential, Credential):
        raise SigningError(
            "Credential must be a Credential instance",
            SigningErrorCodes.INVALID_PRIVATE_KEY
        )
    if not isinstance(canonical, bytes):
        raise SigningError(
            f"Canonical request must be bytes, got {type(canonical).__name__}",
            SigningErrorCodes.CANONICAL_MESSAGE_FAILED
        )
    return encode_signature(credential.key.sign(canonical))


class RequestSigner:
    """
    Builds signed requests for one credential.

    The signer holds no mutable state: concurrent calls from several
    threads are safe as long as the injected generators are.
    """

    def __init__(
        self,
        credential: Credential,
        config: Optional[ClientConfig] = None,
        nonce_generator: Optional[NonceGenerator] = None,
        timestamp_generator: Optional[TimestampGenerator] = None,
    ):
        """
        Initialize the signer.

        Args:
            credential: Credential used for every request
            config: Client configuration (API URL, SDK headers)
            nonce_generator: Optional custom nonce generator
            timestamp_generator: Optional custom millisecond timestamp generator
        """
        if not isinstance(credential, Credential):
            raise SigningError(
                "Credential must be a Credential instance",
                SigningErrorCodes.INVALID_PRIVATE_KEY
            )
        self.credential = credential
        self.config = config or ClientConfig()
        self.nonce_generator = nonce_generator or generate_nonce
        self.timestamp_generator = timestamp_generator or generate_timestamp

    def sign_request(
        self,
        method: Union[HttpMethod, str],
        endpoint: str,
        query: QueryInput = None,
        body: Optional[Union[str, bytes]] = None,
        content_type: Optional[str] = None,
        accept: str = "application/json",
    ) -> SignedRequest:
        """
        Build and sign a request for an API endpoint.

        The endpoint's own query parameters come first, followed by
        ``sdkId``, ``nonce`` and ``timestamp``. The signed target is the API
        path plus endpoint plus that query string; ``sig`` is appended last
        and is not itself signed.

        Args:
            method: HTTP method
            endpoint: Endpoint path relative to the API URL, starting with ``/``
            query: Endpoint query parameters
            body: Request body
            content_type: Content-Type of the body
            accept: Accept header value

        Returns:
            SignedRequest: Request ready for the transport

        Raises:
            SigningError: If any part of the request cannot be signed
        """
        timer = PerformanceTimer()

        if not isinstance(endpoint, str) or not endpoint.startswith('/'):
            raise SigningError(
                f"Endpoint must start with '/': {endpoint!r}",
                SigningErrorCodes.INVALID_TARGET,
                {"endpoint": repr(endpoint)}
            )

        nonce = self.nonce_generator()
        if not validate_nonce(nonce):
            raise SigningError(
                f"Invalid nonce format: {nonce}",
                SigningErrorCodes.INVALID_NONCE,
                {"nonce": nonce}
            )

        timestamp = self.timestamp_generator()
        if not validate_timestamp(timestamp):
            raise SigningError(
                f"Invalid timestamp: {timestamp}",
                SigningErrorCodes.INVALID_TIMESTAMP,
                {"timestamp": timestamp}
            )

        method_name = method.value if isinstance(method, HttpMethod) else str(method).upper()
        body_bytes = to_bytes(body)

        query_params = normalize_query(query) + (
            (SDK_ID_PARAM, self.credential.sdk_id),
            (NONCE_PARAM, nonce),
            (TIMESTAMP_PARAM, str(timestamp)),
        )
        query_string = urlencode(query_params)
        path = self.config.api_path + endpoint
        canonical = build_canonical_request(method_name, f"{path}?{query_string}", body_bytes)

        signature = sign(canonical, self.credential)

        headers = self._build_headers(accept, content_type if body_bytes else None)
        url = f"{join_url(self.config.api_url, endpoint)}?{query_string}&{SIGNATURE_PARAM}={signature}"

        elapsed_ms = timer.elapsed_ms()
        if elapsed_ms > SLOW_SIGNING_THRESHOLD_MS:
            logger.warning(f"Signing {method_name} {endpoint} took {elapsed_ms:.2f}ms")

        return SignedRequest(
            method=method_name,
            url=url,
            path=path,
            query_params=query_params,
            body=body_bytes,
            content_type=content_type if body_bytes else None,
            signature=signature,
            sdk_id=self.credential.sdk_id,
            headers=headers,
        )

    def _build_headers(self, accept: str, content_type: Optional[str]) -> Dict[str, str]:
        headers = {
            SDK_HEADER: self.config.sdk_identifier,
            SDK_VERSION_HEADER: self.config.sdk_version,
            'Accept': accept,
        }
        if content_type:
            headers['Content-Type'] = content_type
        return headers
