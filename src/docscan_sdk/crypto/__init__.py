"""
Key material and credentials for Doc Scan request signing
"""

from .keys import (
    KeyMaterial,
    Credential,
    resolve_pem,
    MIN_RSA_KEY_SIZE,
)

__all__ = [
    'KeyMaterial',
    'Credential',
    'resolve_pem',
    'MIN_RSA_KEY_SIZE',
]
