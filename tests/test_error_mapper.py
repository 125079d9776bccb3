"""
Tests for mapping unsuccessful responses to SDK errors
"""

import json

import pytest

from docscan_sdk.error_mapper import ErrorMapper, GENERIC_MESSAGE
from docscan_sdk.exceptions import ClientError, ErrorKind, ServerError, ServiceError


@pytest.fixture
def mapper():
    return ErrorMapper()


class TestErrorMapper:
    """Test status and body mapping"""

    def test_structured_client_error(self, mapper):
        body = json.dumps({'code': 'SESSION_NOT_FOUND', 'message': 'Session not found'}).encode()
        error = mapper.map(404, body)
        assert isinstance(error, ClientError)
        assert error.kind == ErrorKind.CLIENT
        assert error.status_code == 404
        assert error.code == 'SESSION_NOT_FOUND'
        assert error.message == 'Session not found'
        assert str(error) == 'Error - 404 SESSION_NOT_FOUND: Session not found'

    def test_non_json_server_error(self, mapper):
        error = mapper.map(500, b'<html>Internal Server Error</html>')
        assert isinstance(error, ServerError)
        assert error.kind == ErrorKind.SERVER
        assert error.code is None
        assert error.message == GENERIC_MESSAGE
        assert error.body_text == '<html>Internal Server Error</html>'
        assert str(error) == f'Error - 500: {GENERIC_MESSAGE}'

    def test_field_errors_are_kept(self, mapper):
        body = json.dumps({
            'code': 'PAYLOAD_VALIDATION',
            'message': 'There were errors validating the payload',
            'errors': [
                {'property': 'requested_checks[0].type', 'message': 'must not be null'},
                'ignored',
            ],
        }).encode()
        error = mapper.map(400, body)
        assert error.errors == [{'property': 'requested_checks[0].type', 'message': 'must not be null'}]

    @pytest.mark.parametrize("status_code, expected", [
        (400, ClientError),
        (401, ClientError),
        (499, ClientError),
        (302, ClientError),
        (100, ClientError),
        (500, ServerError),
        (503, ServerError),
        (599, ServerError),
    ])
    def test_status_classification(self, mapper, status_code, expected):
        assert type(mapper.map(status_code, b'')) is expected

    @pytest.mark.parametrize("body", [
        None,
        b'',
        b'\xff\xfe\xfd',
        b'[1, 2, 3]',
        b'"just a string"',
        b'{"code": 42, "message": null}',
        b'{truncated',
    ])
    def test_never_raises(self, mapper, body):
        error = mapper.map(418, body)
        assert isinstance(error, ServiceError)
        assert error.message == GENERIC_MESSAGE
        assert error.code is None

    def test_invalid_utf8_body_text_is_replaced(self, mapper):
        error = mapper.map(500, b'bad \xff byte')
        assert error.body_text.startswith('bad ')

    def test_error_is_returned_not_raised(self, mapper):
        error = mapper.map(404, b'{}')
        with pytest.raises(ClientError):
            raise error
