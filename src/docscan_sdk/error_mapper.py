"""
Mapping of non-2xx responses to SDK errors
"""

import json
from typing import Any, Dict, List, Optional

from .exceptions import ClientError, ServerError, ServiceError

GENERIC_MESSAGE = "Unexpected response from the Doc Scan service"


class ErrorMapper:
    """
    Converts an unsuccessful status and body into a ServiceError.

    ``map`` always returns an error value and never raises, whatever the
    body contains: structured JSON errors are preferred, anything else
    degrades to a generic message carrying the raw body text.
    """

    def map(self, status_code: int, body: Optional[bytes]) -> ServiceError:
        error_class = ServerError if 500 <= status_code < 600 else ClientError
        body_text = self._body_text(body)
        payload = self._parse(body)

        if payload is None:
            return error_class(GENERIC_MESSAGE, status_code, body_text=body_text)

        code = payload.get('code')
        message = payload.get('message')
        return error_class(
            message if isinstance(message, str) and message else GENERIC_MESSAGE,
            status_code,
            code=code if isinstance(code, str) and code else None,
            body_text=body_text,
            errors=self._field_errors(payload.get('errors')),
        )

    @staticmethod
    def _body_text(body: Optional[bytes]) -> str:
        if not body:
            return ""
        return body.decode('utf-8', errors='replace')

    @staticmethod
    def _parse(body: Optional[bytes]) -> Optional[Dict[str, Any]]:
        if not body:
            return None
        try:
            payload = json.loads(body.decode('utf-8'))
        except (UnicodeDecodeError, ValueError):
            return None
        return payload if isinstance(payload, dict) else None

    @staticmethod
    def _field_errors(errors: Any) -> List[Dict[str, Any]]:
        if not isinstance(errors, list):
            return []
        return [
            {'property': error.get('property'), 'message': error.get('message')}
            for error in errors
            if isinstance(error, dict)
        ]
