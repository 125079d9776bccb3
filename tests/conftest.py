"""
Shared fixtures for the Doc Scan SDK test suite
"""

import json

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from docscan_sdk.config import ClientConfig
from docscan_sdk.crypto.keys import Credential, KeyMaterial
from docscan_sdk.service import DocScanService
from docscan_sdk.transport import Transport, TransportResponse

SDK_ID = "test-sdk-id"
FIXED_NONCE = "3f2a6c8e-1b4d-4e5f-9a7b-0c1d2e3f4a5b"
FIXED_TIMESTAMP = 1700000000000


class FakeTransport(Transport):
    """Transport double that records requests and replays queued responses."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def queue(self, status_code=200, body=b"", headers=None):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode('utf-8')
            headers = headers or {'Content-Type': 'application/json'}
        self.responses.append(TransportResponse(status_code, headers or {}, body))
        return self

    def send(self, method, url, headers, body):
        self.calls.append({'method': method, 'url': url, 'headers': dict(headers), 'body': body})
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True

    @property
    def last_call(self):
        return self.calls[-1]


@pytest.fixture(scope='session')
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope='session')
def pem_bytes(rsa_private_key):
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    )


@pytest.fixture
def pem_file(tmp_path, pem_bytes):
    path = tmp_path / "application-key.pem"
    path.write_bytes(pem_bytes)
    return path


@pytest.fixture(scope='session')
def key_material(rsa_private_key):
    return KeyMaterial(rsa_private_key)


@pytest.fixture(scope='session')
def credential(key_material):
    return Credential(SDK_ID, key_material)


@pytest.fixture
def config():
    return ClientConfig()


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def service(credential, config, fake_transport):
    return DocScanService(
        credential,
        config,
        fake_transport,
        nonce_generator=lambda: FIXED_NONCE,
        timestamp_generator=lambda: FIXED_TIMESTAMP,
    )
