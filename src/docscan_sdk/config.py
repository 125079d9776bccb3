"""
Client configuration for the Doc Scan Python SDK
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Any
from urllib.parse import urlparse

from .exceptions import ValidationError
from .version import __version__

DEFAULT_API_URL = "https://api.yoti.com/idverify/v1"
ENV_API_URL = "YOTI_DOC_SCAN_API_URL"
DEFAULT_SDK_IDENTIFIER = "Python"


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for Doc Scan service connection.

    Attributes:
        api_url: Base URL of the Doc Scan API, including its path prefix
        sdk_identifier: Value sent in the X-Yoti-SDK header
        sdk_version: Value sent in the X-Yoti-SDK-Version header
    """
    api_url: str = DEFAULT_API_URL
    sdk_identifier: str = DEFAULT_SDK_IDENTIFIER
    sdk_version: str = __version__

    def __post_init__(self):
        """Validate client configuration."""
        if not self.api_url:
            raise ValidationError("API URL cannot be empty")

        parsed = urlparse(self.api_url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValidationError(f"Invalid API URL format: {self.api_url}")

        if parsed.query or parsed.fragment:
            raise ValidationError(f"API URL must not carry a query or fragment: {self.api_url}")

        if not self.sdk_identifier:
            raise ValidationError("SDK identifier cannot be empty")

        if not self.sdk_version:
            raise ValidationError("SDK version cannot be empty")

        # Store without trailing slash so endpoints can be appended directly
        object.__setattr__(self, 'api_url', self.api_url.rstrip('/'))

    @property
    def api_path(self) -> str:
        """Path component of the API URL (empty string for a bare host)."""
        return urlparse(self.api_url).path.rstrip('/')

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> 'ClientConfig':
        """
        Build configuration, taking the API URL from the environment.

        An explicit ``api_url`` override wins over the environment variable,
        and an empty variable falls back to the default URL.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            **overrides: Explicit field values

        Returns:
            ClientConfig: Validated configuration
        """
        environ = os.environ if environ is None else environ
        if not overrides.get('api_url'):
            overrides['api_url'] = environ.get(ENV_API_URL) or DEFAULT_API_URL
        return cls(**overrides)
