"""
Doc Scan service facade

One method per remote operation. Each method validates its inputs before
any I/O, signs the request, sends it through the transport, and then either
decodes the body of a 2xx response or raises the ServiceError built by the
ErrorMapper.
"""

import logging
from typing import Any, Optional, Union
from urllib.parse import quote

from .config import ClientConfig
from .crypto.keys import Credential
from .decoding import ResponseDecoder
from .error_mapper import ErrorMapper
from .exceptions import TransportError, ValidationError
from .models.instructions import ContactProfileResponse, InstructionsResponse
from .models.configuration import SessionConfigurationResponse
from .models.media import MediaContent
from .models.resources import CreateFaceCaptureResourceResponse
from .models.session import CreateSessionResult, GetSessionResult
from .models.support import SupportedDocumentsResponse
from .payloads import (
    JSON_CONTENT_TYPE,
    CreateFaceCaptureResourcePayload,
    UploadFaceCaptureImagePayload,
    serialize_payload,
)
from .signing.request_signer import RequestSigner
from .signing.types import HttpMethod, NonceGenerator, TimestampGenerator
from .signing.utils import QueryInput
from .transport import RequestsTransport, Transport, TransportResponse

logger = logging.getLogger(__name__)

NO_CONTENT = 204
MEDIA_ACCEPT = "*/*"


def _path_segment(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} cannot be empty", "EMPTY_IDENTIFIER", {'parameter': name})
    if value in (".", ".."):
        raise ValidationError(f"{name} is not a valid identifier", "INVALID_IDENTIFIER", {'parameter': name})
    return quote(value, safe='')


class DocScanService:
    """
    Signed access to the Doc Scan API for one credential.

    The service holds no per-request state; it can be shared between threads
    as long as the transport can.
    """

    def __init__(
        self,
        credential: Credential,
        config: ClientConfig,
        transport: Optional[Transport] = None,
        nonce_generator: Optional[NonceGenerator] = None,
        timestamp_generator: Optional[TimestampGenerator] = None,
    ):
        """
        Initialize the service.

        Args:
            credential: SDK id and RSA key used to sign every request
            config: Client configuration for the target API
            transport: Transport used to send requests (defaults to RequestsTransport)
            nonce_generator: Optional custom nonce generator
            timestamp_generator: Optional custom millisecond timestamp generator
        """
        if not isinstance(config, ClientConfig):
            raise ValidationError("A ClientConfig is required", "MISSING_CONFIG")
        self.config = config
        self.signer = RequestSigner(
            credential,
            self.config,
            nonce_generator=nonce_generator,
            timestamp_generator=timestamp_generator,
        )
        self.transport = transport or RequestsTransport()
        self.decoder = ResponseDecoder()
        self.error_mapper = ErrorMapper()

    def create_session(self, session_spec: Any) -> CreateSessionResult:
        """
        Create a session from a session specification.

        Args:
            session_spec: Mapping, or object exposing ``to_dict()``

        Returns:
            CreateSessionResult: Session id and client session token
        """
        body = serialize_payload(session_spec, "session_spec")
        response = self._execute(HttpMethod.POST, "/sessions", body=body, content_type=JSON_CONTENT_TYPE)
        result = self._decode(response, CreateSessionResult)
        logger.info(f"Created session {result.session_id}")
        return result

    def retrieve_session(self, session_id: str) -> GetSessionResult:
        """Retrieve the state of a session, with its checks and resources."""
        endpoint = f"/sessions/{_path_segment(session_id, 'session_id')}"
        return self._decode(self._execute(HttpMethod.GET, endpoint), GetSessionResult)

    def delete_session(self, session_id: str) -> None:
        """Delete a session and all of its resources."""
        endpoint = f"/sessions/{_path_segment(session_id, 'session_id')}"
        self._execute(HttpMethod.DELETE, endpoint)
        logger.info(f"Deleted session {session_id}")

    def get_media_content(self, session_id: str, media_id: str) -> Optional[MediaContent]:
        """
        Retrieve media belonging to a session.

        Returns:
            MediaContent, or None when the service answers 204 No Content
        """
        endpoint = self._media_endpoint(session_id, media_id)
        return self._media(self._execute(HttpMethod.GET, endpoint, accept=MEDIA_ACCEPT))

    def delete_media_content(self, session_id: str, media_id: str) -> None:
        endpoint = self._media_endpoint(session_id, media_id)
        self._execute(HttpMethod.DELETE, endpoint)
        logger.info(f"Deleted media {media_id} of session {session_id}")

    def get_supported_documents(self, is_strictly_latin: bool = False) -> SupportedDocumentsResponse:
        """List the countries and document types the service supports."""
        response = self._execute(
            HttpMethod.GET,
            "/supported-documents",
            query={'isStrictlyLatin': bool(is_strictly_latin)},
        )
        return self._decode(response, SupportedDocumentsResponse)

    def create_face_capture_resource(
        self,
        session_id: str,
        payload: CreateFaceCaptureResourcePayload,
    ) -> CreateFaceCaptureResourceResponse:
        """Create a face-capture resource linked to a requirement of the session."""
        endpoint = f"/sessions/{_path_segment(session_id, 'session_id')}/resources/face-capture"
        body = serialize_payload(payload, "payload")
        response = self._execute(HttpMethod.POST, endpoint, body=body, content_type=JSON_CONTENT_TYPE)
        result = self._decode(response, CreateFaceCaptureResourceResponse)
        logger.info(f"Created face capture resource {result.id} for session {session_id}")
        return result

    def upload_face_capture_image(
        self,
        session_id: str,
        resource_id: str,
        payload: UploadFaceCaptureImagePayload,
    ) -> None:
        """Upload the image of a face-capture resource as multipart/form-data."""
        endpoint = (
            f"/sessions/{_path_segment(session_id, 'session_id')}"
            f"/resources/face-capture/{_path_segment(resource_id, 'resource_id')}/image"
        )
        if not isinstance(payload, UploadFaceCaptureImagePayload):
            raise ValidationError(
                "payload must be an UploadFaceCaptureImagePayload",
                "INVALID_PAYLOAD"
            )
        body, content_type = payload.to_multipart()
        self._execute(HttpMethod.PUT, endpoint, body=body, content_type=content_type)

    def fetch_session_configuration(self, session_id: str) -> SessionConfigurationResponse:
        endpoint = f"/sessions/{_path_segment(session_id, 'session_id')}/configuration"
        return self._decode(self._execute(HttpMethod.GET, endpoint), SessionConfigurationResponse)

    def put_ibv_instructions(self, session_id: str, instructions: Any) -> None:
        """
        Set the in-branch verification instructions of a session.

        Args:
            session_id: Session identifier
            instructions: Mapping, or object exposing ``to_dict()``
        """
        endpoint = self._instructions_endpoint(session_id)
        body = serialize_payload(instructions, "instructions")
        self._execute(HttpMethod.PUT, endpoint, body=body, content_type=JSON_CONTENT_TYPE)

    def get_ibv_instructions(self, session_id: str) -> InstructionsResponse:
        endpoint = self._instructions_endpoint(session_id)
        return self._decode(self._execute(HttpMethod.GET, endpoint), InstructionsResponse)

    def get_ibv_instructions_pdf(self, session_id: str) -> Optional[MediaContent]:
        """
        Retrieve the instructions PDF of an IBV session.

        Returns:
            MediaContent, or None when the service answers 204 No Content
        """
        endpoint = self._instructions_endpoint(session_id, "/pdf")
        return self._media(self._execute(HttpMethod.GET, endpoint, accept=MEDIA_ACCEPT))

    def fetch_instructions_contact_profile(self, session_id: str) -> ContactProfileResponse:
        endpoint = self._instructions_endpoint(session_id, "/contact-profile")
        return self._decode(self._execute(HttpMethod.GET, endpoint), ContactProfileResponse)

    def trigger_ibv_email_notification(self, session_id: str) -> None:
        """Ask the service to send the IBV instructions email for a session."""
        endpoint = self._instructions_endpoint(session_id, "/email")
        self._execute(HttpMethod.POST, endpoint)
        logger.info(f"Triggered IBV email notification for session {session_id}")

    def close(self) -> None:
        self.transport.close()

    @staticmethod
    def _media_endpoint(session_id: str, media_id: str) -> str:
        return (
            f"/sessions/{_path_segment(session_id, 'session_id')}"
            f"/media/{_path_segment(media_id, 'media_id')}/content"
        )

    @staticmethod
    def _instructions_endpoint(session_id: str, suffix: str = "") -> str:
        return f"/sessions/{_path_segment(session_id, 'session_id')}/instructions{suffix}"

    def _execute(
        self,
        method: HttpMethod,
        endpoint: str,
        query: QueryInput = None,
        body: Optional[Union[str, bytes]] = None,
        content_type: Optional[str] = None,
        accept: str = JSON_CONTENT_TYPE,
    ) -> TransportResponse:
        """
        Sign and send a request, raising the mapped error for non-2xx responses.

        Raises:
            SigningError: If the request cannot be signed
            TransportError: If the transport fails to produce a response
            ClientError: On 4xx (and other non-2xx, non-5xx) responses
            ServerError: On 5xx responses
        """
        signed = self.signer.sign_request(
            method,
            endpoint,
            query=query,
            body=body,
            content_type=content_type,
            accept=accept,
        )

        logger.debug(f"Sending {signed.method} {endpoint}")
        try:
            response = self.transport.send(signed.method, signed.url, signed.headers, signed.body)
        except TransportError:
            raise
        except Exception as e:
            raise TransportError(
                f"Transport failed: {e}",
                "TRANSPORT_FAILURE",
                {"original_error": str(e), "error_type": type(e).__name__}
            ) from e

        if not isinstance(response, TransportResponse):
            raise TransportError(
                f"Transport returned {type(response).__name__}, expected TransportResponse",
                "INVALID_RESPONSE"
            )

        if not response.ok:
            error = self.error_mapper.map(response.status_code, response.body)
            logger.warning(f"{signed.method} {endpoint} failed with status {response.status_code}")
            raise error

        logger.debug(f"{signed.method} {endpoint} returned {response.status_code}")
        return response

    def _decode(self, response: TransportResponse, expected: Any) -> Any:
        return self.decoder.decode(response.content_type, response.body, expected)

    def _media(self, response: TransportResponse) -> Optional[MediaContent]:
        if response.status_code == NO_CONTENT:
            return None
        return self._decode(response, MediaContent)
