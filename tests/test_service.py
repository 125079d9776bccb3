"""
Test suite for the Doc Scan service facade

Every remote operation is exercised against a recording fake transport:
endpoint, method, signed query, headers, body, and result decoding.
"""

import json
from urllib.parse import parse_qsl, urlsplit

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from docscan_sdk.exceptions import (
    ClientError,
    DecodeError,
    ServerError,
    TransportError,
    ValidationError,
)
from docscan_sdk.models import (
    ContactProfileResponse,
    CreateFaceCaptureResourceResponse,
    CreateSessionResult,
    GetSessionResult,
    InstructionsResponse,
    MediaContent,
    SessionConfigurationResponse,
    SupportedDocumentsResponse,
)
from docscan_sdk.payloads import CreateFaceCaptureResourcePayload, UploadFaceCaptureImagePayload
from docscan_sdk.service import DocScanService
from docscan_sdk.signing import build_canonical_request, decode_signature

from conftest import FIXED_NONCE, FIXED_TIMESTAMP, SDK_ID

API_PREFIX = "https://api.yoti.com/idverify/v1"


def split_url(url):
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}", parse_qsl(parts.query)


class TestRequestSigning:
    """Test what the facade puts on the wire"""

    def test_signed_query_and_headers(self, service, fake_transport):
        fake_transport.queue(200, {'session_id': 'abc'})
        service.retrieve_session('abc')

        call = fake_transport.last_call
        base, query = split_url(call['url'])
        assert call['method'] == 'GET'
        assert base == f"{API_PREFIX}/sessions/abc"
        assert query[:3] == [('sdkId', SDK_ID), ('nonce', FIXED_NONCE), ('timestamp', str(FIXED_TIMESTAMP))]
        assert query[3][0] == 'sig'
        assert call['headers']['X-Yoti-SDK'] == 'Python'
        assert call['headers']['Accept'] == 'application/json'
        assert call['body'] == b''

    def test_signature_verifies(self, service, fake_transport, key_material):
        fake_transport.queue(201, {'session_id': 's', 'client_session_token': 't'})
        service.create_session({'user_tracking_id': 'u'})

        call = fake_transport.last_call
        parts = urlsplit(call['url'])
        signed_query, signature = parts.query.rsplit('&sig=', 1)
        canonical = build_canonical_request('POST', f"{parts.path}?{signed_query}", call['body'])
        key_material.public_key().verify(
            decode_signature(signature), canonical, padding.PKCS1v15(), hashes.SHA256()
        )

    def test_identifiers_are_path_encoded(self, service, fake_transport):
        fake_transport.queue(204)
        service.delete_session('a/b c')
        base, _ = split_url(fake_transport.last_call['url'])
        assert base == f"{API_PREFIX}/sessions/a%2Fb%20c"

    @pytest.mark.parametrize("session_id", ['.', '..'])
    def test_dot_segments_rejected(self, service, fake_transport, session_id):
        with pytest.raises(ValidationError) as exc_info:
            service.delete_session(session_id)
        assert exc_info.value.error_code == 'INVALID_IDENTIFIER'
        assert fake_transport.calls == []

    def test_dotted_identifier_is_kept(self, service, fake_transport):
        fake_transport.queue(204)
        service.delete_session('...')
        base, _ = split_url(fake_transport.last_call['url'])
        assert base == f"{API_PREFIX}/sessions/..."


class TestOperations:
    """Test each remote operation"""

    def test_create_session(self, service, fake_transport):
        fake_transport.queue(201, {
            'session_id': 'session-1',
            'client_session_token': 'token-1',
            'client_session_token_ttl': 600,
        })
        result = service.create_session({'client_session_token_ttl': 600})

        assert result == CreateSessionResult('session-1', 'token-1', 600)
        call = fake_transport.last_call
        assert call['method'] == 'POST'
        assert split_url(call['url'])[0] == f"{API_PREFIX}/sessions"
        assert json.loads(call['body']) == {'client_session_token_ttl': 600}
        assert call['headers']['Content-Type'] == 'application/json'

    def test_create_session_accepts_to_dict_objects(self, service, fake_transport):
        class SessionSpec:
            def to_dict(self):
                return {'resources_ttl': 100}

        fake_transport.queue(201, {'session_id': 's', 'client_session_token': 't'})
        service.create_session(SessionSpec())
        assert json.loads(fake_transport.last_call['body']) == {'resources_ttl': 100}

    def test_retrieve_session(self, service, fake_transport):
        fake_transport.queue(200, {'session_id': 'abc', 'checks': [{'id': 'c', 'type': 'LIVENESS'}]})
        result = service.retrieve_session('abc')
        assert isinstance(result, GetSessionResult)
        assert len(result.liveness_checks) == 1

    def test_delete_session(self, service, fake_transport):
        fake_transport.queue(204)
        assert service.delete_session('abc') is None
        assert fake_transport.last_call['method'] == 'DELETE'

    def test_get_media_content(self, service, fake_transport):
        fake_transport.queue(200, b'\x89PNG', {'Content-Type': 'image/png'})
        media = service.get_media_content('abc', 'media-1')

        assert media == MediaContent(b'\x89PNG', 'image/png')
        call = fake_transport.last_call
        assert split_url(call['url'])[0] == f"{API_PREFIX}/sessions/abc/media/media-1/content"
        assert call['headers']['Accept'] == '*/*'

    def test_get_media_content_no_content(self, service, fake_transport):
        fake_transport.queue(204)
        assert service.get_media_content('abc', 'media-1') is None

    def test_get_media_content_without_content_type(self, service, fake_transport):
        fake_transport.queue(200, b'raw')
        assert service.get_media_content('abc', 'm').mime_type == 'application/octet-stream'

    def test_delete_media_content(self, service, fake_transport):
        fake_transport.queue(204)
        service.delete_media_content('abc', 'media-1')
        call = fake_transport.last_call
        assert call['method'] == 'DELETE'
        assert split_url(call['url'])[0] == f"{API_PREFIX}/sessions/abc/media/media-1/content"

    @pytest.mark.parametrize("strictly_latin, expected", [(False, 'false'), (True, 'true')])
    def test_get_supported_documents(self, service, fake_transport, strictly_latin, expected):
        fake_transport.queue(200, {'supported_countries': [{'code': 'GBR'}]})
        result = service.get_supported_documents(strictly_latin)

        assert isinstance(result, SupportedDocumentsResponse)
        base, query = split_url(fake_transport.last_call['url'])
        assert base == f"{API_PREFIX}/supported-documents"
        assert query[0] == ('isStrictlyLatin', expected)
        assert query[1] == ('sdkId', SDK_ID)

    def test_create_face_capture_resource(self, service, fake_transport):
        fake_transport.queue(201, {'id': 'resource-1', 'frames': 1})
        result = service.create_face_capture_resource('abc', CreateFaceCaptureResourcePayload('requirement-1'))

        assert result == CreateFaceCaptureResourceResponse('resource-1', 1)
        call = fake_transport.last_call
        assert split_url(call['url'])[0] == f"{API_PREFIX}/sessions/abc/resources/face-capture"
        assert json.loads(call['body']) == {'requirement_id': 'requirement-1'}

    def test_upload_face_capture_image(self, service, fake_transport):
        fake_transport.queue(204)
        payload = UploadFaceCaptureImagePayload('image/jpeg', b'\xff\xd8jpeg-bytes')
        service.upload_face_capture_image('abc', 'resource-1', payload)

        call = fake_transport.last_call
        assert call['method'] == 'PUT'
        assert split_url(call['url'])[0] == f"{API_PREFIX}/sessions/abc/resources/face-capture/resource-1/image"
        content_type = call['headers']['Content-Type']
        assert content_type.startswith('multipart/form-data; boundary=')
        boundary = content_type.split('boundary=', 1)[1].encode()
        assert boundary in call['body']
        assert b'name="binary-content"' in call['body']
        assert b'filename="face-capture-image"' in call['body']
        assert b'Content-Type: image/jpeg' in call['body']
        assert b'\xff\xd8jpeg-bytes' in call['body']

    def test_fetch_session_configuration(self, service, fake_transport):
        fake_transport.queue(200, {'session_id': 'abc', 'requested_checks': ['LIVENESS']})
        result = service.fetch_session_configuration('abc')
        assert isinstance(result, SessionConfigurationResponse)
        assert result.requested_checks == ['LIVENESS']
        assert split_url(fake_transport.last_call['url'])[0] == f"{API_PREFIX}/sessions/abc/configuration"

    def test_put_ibv_instructions(self, service, fake_transport):
        fake_transport.queue(200)
        instructions = {'contact_profile': {'email': 'a@example.com'}, 'documents': []}
        assert service.put_ibv_instructions('abc', instructions) is None

        call = fake_transport.last_call
        assert call['method'] == 'PUT'
        assert split_url(call['url'])[0] == f"{API_PREFIX}/sessions/abc/instructions"
        assert json.loads(call['body']) == instructions

    def test_get_ibv_instructions(self, service, fake_transport):
        fake_transport.queue(200, {'documents': [{'type': 'ID_DOCUMENT', 'country_code': 'GBR'}]})
        result = service.get_ibv_instructions('abc')
        assert isinstance(result, InstructionsResponse)
        assert result.documents[0].country_code == 'GBR'

    def test_get_ibv_instructions_pdf(self, service, fake_transport):
        fake_transport.queue(200, b'%PDF-1.7', {'Content-Type': 'application/pdf'})
        media = service.get_ibv_instructions_pdf('abc')
        assert media.mime_type == 'application/pdf'
        assert split_url(fake_transport.last_call['url'])[0] == f"{API_PREFIX}/sessions/abc/instructions/pdf"

    def test_get_ibv_instructions_pdf_no_content(self, service, fake_transport):
        fake_transport.queue(204)
        assert service.get_ibv_instructions_pdf('abc') is None

    def test_fetch_instructions_contact_profile(self, service, fake_transport):
        fake_transport.queue(200, {'first_name': 'Ada', 'email': 'ada@example.com'})
        result = service.fetch_instructions_contact_profile('abc')
        assert result == ContactProfileResponse('Ada', None, 'ada@example.com')
        assert split_url(fake_transport.last_call['url'])[0] == (
            f"{API_PREFIX}/sessions/abc/instructions/contact-profile"
        )

    def test_trigger_ibv_email_notification(self, service, fake_transport):
        fake_transport.queue(200)
        assert service.trigger_ibv_email_notification('abc') is None
        call = fake_transport.last_call
        assert call['method'] == 'POST'
        assert call['body'] == b''
        assert split_url(call['url'])[0] == f"{API_PREFIX}/sessions/abc/instructions/email"


class TestInputValidation:
    """Test that invalid input fails before any I/O"""

    @pytest.mark.parametrize("operation", [
        lambda s: s.retrieve_session(''),
        lambda s: s.delete_session('   '),
        lambda s: s.get_media_content('', 'm'),
        lambda s: s.get_media_content('s', ''),
        lambda s: s.delete_media_content('s', None),
        lambda s: s.create_face_capture_resource('', CreateFaceCaptureResourcePayload('r')),
        lambda s: s.create_face_capture_resource('s', None),
        lambda s: s.upload_face_capture_image('s', '', UploadFaceCaptureImagePayload('image/png', b'x')),
        lambda s: s.upload_face_capture_image('s', 'r', {'not': 'a payload'}),
        lambda s: s.fetch_session_configuration(''),
        lambda s: s.put_ibv_instructions('', {}),
        lambda s: s.put_ibv_instructions('s', None),
        lambda s: s.get_ibv_instructions(''),
        lambda s: s.get_ibv_instructions_pdf(''),
        lambda s: s.fetch_instructions_contact_profile(''),
        lambda s: s.trigger_ibv_email_notification(''),
        lambda s: s.create_session(None),
        lambda s: s.create_session(object()),
        lambda s: s.retrieve_session('.'),
        lambda s: s.delete_session('..'),
        lambda s: s.get_media_content('s', '..'),
        lambda s: s.upload_face_capture_image('s', '.', UploadFaceCaptureImagePayload('image/png', b'x')),
    ])
    def test_validation_error_without_transport_call(self, service, fake_transport, operation):
        with pytest.raises(ValidationError):
            operation(service)
        assert fake_transport.calls == []

    def test_config_is_required(self, credential, fake_transport):
        with pytest.raises(ValidationError) as exc_info:
            DocScanService(credential, None, fake_transport)
        assert exc_info.value.error_code == 'MISSING_CONFIG'

    def test_payload_validation(self):
        with pytest.raises(ValidationError):
            CreateFaceCaptureResourcePayload('')
        with pytest.raises(ValidationError):
            UploadFaceCaptureImagePayload('image/png', b'')
        with pytest.raises(ValidationError):
            UploadFaceCaptureImagePayload('', b'x')


class TestErrorHandling:
    """Test status dispatch and transport failures"""

    def test_not_found(self, service, fake_transport):
        fake_transport.queue(404, {'code': 'SESSION_NOT_FOUND', 'message': 'Session not found'})
        with pytest.raises(ClientError) as exc_info:
            service.retrieve_session('missing')
        assert exc_info.value.status_code == 404
        assert exc_info.value.code == 'SESSION_NOT_FOUND'

    def test_server_error_with_html_body(self, service, fake_transport):
        fake_transport.queue(502, b'<html>Bad Gateway</html>', {'Content-Type': 'text/html'})
        with pytest.raises(ServerError) as exc_info:
            service.get_media_content('abc', 'm')
        assert exc_info.value.body_text == '<html>Bad Gateway</html>'

    def test_transport_error_propagates(self, service, fake_transport):
        fake_transport.responses.append(TransportError("boom", "CONNECTION_ERROR"))
        with pytest.raises(TransportError) as exc_info:
            service.delete_session('abc')
        assert exc_info.value.error_code == "CONNECTION_ERROR"

    def test_unexpected_transport_exception_wrapped(self, service, fake_transport):
        fake_transport.responses.append(RuntimeError("socket exploded"))
        with pytest.raises(TransportError) as exc_info:
            service.delete_session('abc')
        assert exc_info.value.details['error_type'] == 'RuntimeError'
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_malformed_success_body(self, service, fake_transport):
        fake_transport.queue(200, b'not json', {'Content-Type': 'application/json'})
        with pytest.raises(DecodeError):
            service.retrieve_session('abc')

    def test_transport_returning_wrong_type(self, service, fake_transport):
        fake_transport.send = lambda *args: {'status': 200}
        with pytest.raises(TransportError):
            service.retrieve_session('abc')

    def test_close_closes_transport(self, service, fake_transport):
        service.close()
        assert fake_transport.closed
