"""
Session creation and retrieval results
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Type

from .base import (
    ResourceModel,
    expect_object,
    required,
    nested,
    nested_list,
)
from .checks import (
    CHECKS,
    AuthenticityCheckResponse,
    FaceMatchCheckResponse,
    LivenessCheckResponse,
    TextDataCheckResponse,
    WatchlistScreeningCheckResponse,
    WatchlistAdvancedCaCheckResponse,
)
from .resources import ResourceContainer


@dataclass
class CreateSessionResult(ResourceModel):
    """
    Result of creating a session.

    Attributes:
        session_id: Identifier of the new session
        client_session_token: Token handed to the end-user's client
        client_session_token_ttl: Token lifetime in seconds
    """
    session_id: str
    client_session_token: str
    client_session_token_ttl: Optional[int] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            session_id=required(data, 'session_id', cls.__name__),
            client_session_token=required(data, 'client_session_token', cls.__name__),
            client_session_token_ttl=data.get('client_session_token_ttl'),
        )


@dataclass
class GetSessionResult(ResourceModel):
    """
    Current state of a session, with its checks and captured resources.

    Checks with a type tag the SDK does not know are kept as
    UnknownResource entries in ``checks``.
    """
    session_id: str
    client_session_token_ttl: Optional[int] = None
    client_session_token: Optional[str] = None
    state: Optional[str] = None
    user_tracking_id: Optional[str] = None
    biometric_consent: Optional[str] = None
    checks: List[Any] = field(default_factory=list)
    resources: Optional[ResourceContainer] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            session_id=required(data, 'session_id', cls.__name__),
            client_session_token_ttl=data.get('client_session_token_ttl'),
            client_session_token=data.get('client_session_token'),
            state=data.get('state'),
            user_tracking_id=data.get('user_tracking_id'),
            biometric_consent=data.get('biometric_consent'),
            checks=nested_list(data, 'checks', CHECKS, cls.__name__),
            resources=nested(data, 'resources', ResourceContainer),
        )

    def checks_of(self, model: Type[ResourceModel]) -> List[Any]:
        """Return the checks decoded as ``model``."""
        return [check for check in self.checks if isinstance(check, model)]

    @property
    def authenticity_checks(self) -> List[AuthenticityCheckResponse]:
        return self.checks_of(AuthenticityCheckResponse)

    @property
    def face_match_checks(self) -> List[FaceMatchCheckResponse]:
        return self.checks_of(FaceMatchCheckResponse)

    @property
    def text_data_checks(self) -> List[TextDataCheckResponse]:
        return self.checks_of(TextDataCheckResponse)

    @property
    def liveness_checks(self) -> List[LivenessCheckResponse]:
        return self.checks_of(LivenessCheckResponse)

    @property
    def watchlist_screening_checks(self) -> List[WatchlistScreeningCheckResponse]:
        return self.checks_of(WatchlistScreeningCheckResponse)

    @property
    def watchlist_advanced_ca_checks(self) -> List[WatchlistAdvancedCaCheckResponse]:
        return self.checks_of(WatchlistAdvancedCaCheckResponse)
