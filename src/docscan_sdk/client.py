"""
High-level client for the Doc Scan service

DocScanClient turns an SDK id and a PEM key into a ready-to-use service
facade. Use DocScanService directly when you already hold a Credential or
need to inject nonce/timestamp generators.
"""

import logging
from typing import Any, Optional

from .config import ClientConfig
from .crypto.keys import Credential, PemSource
from .models.configuration import SessionConfigurationResponse
from .models.instructions import ContactProfileResponse, InstructionsResponse
from .models.media import MediaContent
from .models.resources import CreateFaceCaptureResourceResponse
from .models.session import CreateSessionResult, GetSessionResult
from .models.support import SupportedDocumentsResponse
from .payloads import CreateFaceCaptureResourcePayload, UploadFaceCaptureImagePayload
from .service import DocScanService
from .transport import Transport

logger = logging.getLogger(__name__)


class DocScanClient:
    """
    Client for signed requests to the Doc Scan service.

    Example:
        >>> client = DocScanClient('my-sdk-id', '/path/to/key.pem')
        >>> session = client.get_session('some-session-id')
    """

    def __init__(
        self,
        sdk_id: str,
        pem: PemSource,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize the client.

        Args:
            sdk_id: SDK identifier issued for your application
            pem: PEM file path or PEM contents of the application's private key
            config: Client configuration (defaults to ClientConfig.from_env())
            transport: Transport used to send requests (defaults to RequestsTransport)

        Raises:
            ValidationError: If the SDK id is empty
            InvalidCredentialError: If the key cannot be loaded
        """
        credential = Credential.from_pem(sdk_id, pem)
        self.config = config or ClientConfig.from_env()
        self.service = DocScanService(credential, self.config, transport)
        logger.info(f"Initialized Doc Scan client for SDK {sdk_id} at {self.config.api_url}")

    def create_session(self, session_spec: Any) -> CreateSessionResult:
        return self.service.create_session(session_spec)

    def get_session(self, session_id: str) -> GetSessionResult:
        return self.service.retrieve_session(session_id)

    def delete_session(self, session_id: str) -> None:
        self.service.delete_session(session_id)

    def get_media_content(self, session_id: str, media_id: str) -> Optional[MediaContent]:
        return self.service.get_media_content(session_id, media_id)

    def delete_media_content(self, session_id: str, media_id: str) -> None:
        self.service.delete_media_content(session_id, media_id)

    def get_supported_documents(self, is_strictly_latin: bool = False) -> SupportedDocumentsResponse:
        return self.service.get_supported_documents(is_strictly_latin)

    def create_face_capture_resource(
        self,
        session_id: str,
        payload: CreateFaceCaptureResourcePayload,
    ) -> CreateFaceCaptureResourceResponse:
        return self.service.create_face_capture_resource(session_id, payload)

    def upload_face_capture_image(
        self,
        session_id: str,
        resource_id: str,
        payload: UploadFaceCaptureImagePayload,
    ) -> None:
        self.service.upload_face_capture_image(session_id, resource_id, payload)

    def get_session_configuration(self, session_id: str) -> SessionConfigurationResponse:
        return self.service.fetch_session_configuration(session_id)

    def put_ibv_instructions(self, session_id: str, instructions: Any) -> None:
        self.service.put_ibv_instructions(session_id, instructions)

    def get_ibv_instructions(self, session_id: str) -> InstructionsResponse:
        return self.service.get_ibv_instructions(session_id)

    def get_ibv_instructions_pdf(self, session_id: str) -> Optional[MediaContent]:
        return self.service.get_ibv_instructions_pdf(session_id)

    def fetch_instructions_contact_profile(self, session_id: str) -> ContactProfileResponse:
        return self.service.fetch_instructions_contact_profile(session_id)

    def trigger_ibv_email_notification(self, session_id: str) -> None:
        self.service.trigger_ibv_email_notification(session_id)

    def close(self) -> None:
        self.service.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
