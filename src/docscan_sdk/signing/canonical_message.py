"""
Canonical request construction for Doc Scan request signatures

The canonical request is the exact byte sequence fed to the signature
algorithm. Only the method, the absolute path (with its query string) and
the body participate; headers are never part of it.
"""

from typing import Optional, Union

from ..exceptions import SigningError
from .types import SigningErrorCodes
from .utils import to_bytes

CANONICAL_DELIMITER = b"\n"


class CanonicalRequestBuilder:
    """
    Canonical request builder

    Layout::

        METHOD "\\n" TARGET [ "\\n" BODY ]

    The query string inside TARGET is used verbatim, in the order supplied by
    the caller. The body segment is omitted when the body is ``None`` or
    empty, so both produce the same canonical form.
    """

    def __init__(self, method: str, target: str, body: Optional[Union[str, bytes]] = None):
        """
        Initialize canonical request builder.

        Args:
            method: HTTP method (any case)
            target: Absolute path including query string
            body: Optional request body
        """
        self.method = method
        self.target = target
        self.body = body

    def build(self) -> bytes:
        """
        Build the canonical request for signing.

        Returns:
            bytes: Canonical request bytes

        Raises:
            SigningError: If method, target or body are invalid
        """
        method = self._build_method_component()
        target = self._build_target_component()
        body = to_bytes(self.body)

        parts = [method, target]
        if body:
            parts.append(body)
        return CANONICAL_DELIMITER.join(parts)

    def _build_method_component(self) -> bytes:
        method = self.method.value if hasattr(self.method, 'value') else self.method
        if not isinstance(method, str) or not method.strip():
            raise SigningError(
                "HTTP method cannot be empty",
                SigningErrorCodes.INVALID_METHOD,
                {"method": repr(self.method)}
            )
        try:
            return method.strip().upper().encode('ascii')
        except UnicodeEncodeError:
            raise SigningError(
                f"HTTP method must be ASCII: {method!r}",
                SigningErrorCodes.INVALID_METHOD,
                {"method": repr(self.method)}
            )

    def _build_target_component(self) -> bytes:
        if not isinstance(self.target, str) or not self.target.startswith('/'):
            raise SigningError(
                f"Request target must be an absolute path: {self.target!r}",
                SigningErrorCodes.INVALID_TARGET,
                {"target": repr(self.target)}
            )
        if '\n' in self.target or '\r' in self.target:
            raise SigningError(
                "Request target cannot contain line breaks",
                SigningErrorCodes.INVALID_TARGET,
                {"target": repr(self.target)}
            )
        return self.target.encode('utf-8')


def build_canonical_request(method: str, target: str, body: Optional[Union[str, bytes]] = None) -> bytes:
    """
    Build canonical request bytes for signing.

    Args:
        method: HTTP method
        target: Absolute path including query string
        body: Optional request body

    Returns:
        bytes: Canonical request

    Raises:
        SigningError: If construction fails
    """
    return CanonicalRequestBuilder(method, target, body).build()
