"""
RSA key material and credentials for Doc Scan request signing

This module wraps the cryptography package's RSA private keys. Keys are
parsed and validated once, when the credential is built, so that signing
later never hits a malformed key.
"""

import os
from dataclasses import dataclass
from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..exceptions import InvalidCredentialError, SigningError, ValidationError

# Smallest modulus accepted for signing keys
MIN_RSA_KEY_SIZE = 1024

PemSource = Union[str, bytes]


@dataclass(frozen=True)
class KeyMaterial:
    """
    RSA private key used to sign requests.

    Signing is deterministic (PKCS#1 v1.5 over SHA-256) and read-only, so a
    single instance can be shared between threads.

    Attributes:
        private_key: Parsed RSA private key
    """
    private_key: rsa.RSAPrivateKey

    def __post_init__(self):
        """Validate key after initialization"""
        if not isinstance(self.private_key, rsa.RSAPrivateKey):
            raise InvalidCredentialError(
                f"Signing key must be an RSA private key, got {type(self.private_key).__name__}",
                "INVALID_KEY_TYPE"
            )

        if self.private_key.key_size < MIN_RSA_KEY_SIZE:
            raise InvalidCredentialError(
                f"RSA key must be at least {MIN_RSA_KEY_SIZE} bits, got {self.private_key.key_size}",
                "KEY_TOO_SMALL"
            )

    @classmethod
    def from_pem(cls, pem: bytes, password: Optional[bytes] = None) -> 'KeyMaterial':
        """
        Parse PEM encoded key material.

        Args:
            pem: PEM contents (PKCS#1 or PKCS#8)
            password: Optional password for encrypted keys

        Returns:
            KeyMaterial: Validated key material

        Raises:
            InvalidCredentialError: If the PEM cannot be parsed as an RSA private key
        """
        if not pem or not pem.strip():
            raise InvalidCredentialError("PEM key material cannot be empty", "EMPTY_KEY")

        try:
            private_key = serialization.load_pem_private_key(pem, password=password)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise InvalidCredentialError(
                f"Failed to parse PEM private key: {e}",
                "INVALID_PEM",
                {"original_error": str(e)}
            )

        return cls(private_key)

    def sign(self, data: bytes) -> bytes:
        """
        Sign data with RSA PKCS#1 v1.5 and SHA-256.

        Args:
            data: Bytes to sign

        Returns:
            bytes: Raw signature

        Raises:
            SigningError: If the key or the primitive rejects the input
        """
        if not isinstance(self.private_key, rsa.RSAPrivateKey):
            raise SigningError("Signing key is not an RSA private key", "INVALID_PRIVATE_KEY")

        try:
            return self.private_key.sign(data, padding.PKCS1v15(), hashes.SHA256())
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise SigningError(
                f"Message signing failed: {e}",
                "CRYPTO_ERROR",
                {"original_error": str(e)}
            )

    def public_key(self) -> rsa.RSAPublicKey:
        return self.private_key.public_key()


@dataclass(frozen=True)
class Credential:
    """
    SDK identifier plus the key material that authenticates its requests.

    Attributes:
        sdk_id: SDK identifier issued by the service provider
        key: Key material used to sign every request
    """
    sdk_id: str
    key: KeyMaterial

    def __post_init__(self):
        if not isinstance(self.sdk_id, str) or not self.sdk_id.strip():
            raise ValidationError("SDK ID cannot be empty", "EMPTY_SDK_ID")

        if not isinstance(self.key, KeyMaterial):
            raise InvalidCredentialError("Credential key must be KeyMaterial", "INVALID_KEY_TYPE")

    @classmethod
    def from_pem(cls, sdk_id: str, pem: PemSource) -> 'Credential':
        """
        Build a credential from an SDK id and a PEM file path or PEM contents.

        Args:
            sdk_id: SDK identifier
            pem: Path to a PEM file, or the PEM contents themselves

        Returns:
            Credential: Validated credential
        """
        if not isinstance(sdk_id, str) or not sdk_id.strip():
            raise ValidationError("SDK ID cannot be empty", "EMPTY_SDK_ID")
        return cls(sdk_id, KeyMaterial.from_pem(resolve_pem(pem)))


def resolve_pem(pem: PemSource) -> bytes:
    """
    Resolve PEM contents from a file path or a PEM string.

    Args:
        pem: File path or PEM contents

    Returns:
        bytes: PEM contents

    Raises:
        InvalidCredentialError: If the value is empty or the file cannot be read
    """
    if isinstance(pem, bytes):
        return pem

    if not isinstance(pem, str) or not pem.strip():
        raise InvalidCredentialError("PEM file path or contents cannot be empty", "EMPTY_KEY")

    if '-----BEGIN' in pem:
        return pem.encode('utf-8')

    path = os.path.expanduser(pem)
    if not os.path.isfile(path):
        raise InvalidCredentialError(f"PEM file not found: {pem}", "PEM_FILE_NOT_FOUND")

    try:
        with open(path, 'rb') as fh:
            return fh.read()
    except OSError as e:
        raise InvalidCredentialError(
            f"Failed to read PEM file {pem}: {e}",
            "PEM_FILE_UNREADABLE",
            {"original_error": str(e)}
        )
