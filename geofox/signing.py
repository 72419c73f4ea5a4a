"""
HMAC-SHA1 request signing for the Geofox API.

The signature is computed over the exact JSON body bytes that are sent,
keyed by the application's secret, and transmitted base64 encoded.
"""

import base64
import hashlib
import hmac
import logging
from typing import Dict, Optional, Union

from .config import Credentials
from .constants import (
    AUTH_TYPE_HMAC_SHA1,
    HEADER_AUTH_SIGNATURE,
    HEADER_AUTH_TYPE,
    HEADER_AUTH_USER,
)

logger = logging.getLogger(__name__)


def _to_bytes(data: Union[str, bytes]) -> bytes:
    if isinstance(data, str):
        return data.encode('utf-8')
    return data


def sign(body: Union[str, bytes], secret: str) -> str:
    """
    Generate a HMAC-SHA1 signature.

    Args:
        body: Serialized request body, str bodies are UTF-8 encoded
        secret: Shared signing secret

    Returns:
        Base64 encoded signature with padding
    """
    mac = hmac.new(
        secret.encode('utf-8'),
        _to_bytes(body),
        hashlib.sha1
    )
    return base64.b64encode(mac.digest()).decode('ascii')


def verify(body: Union[str, bytes], secret: str, signature: str) -> bool:
    """Check a base64 signature against the body using a constant-time comparison."""
    expected = sign(body, secret)
    # compare_digest only accepts ASCII str, arbitrary header values go in as bytes
    return hmac.compare_digest(expected.encode('ascii'), signature.encode('utf-8'))


def build_auth_headers(body: Union[str, bytes], credentials: Optional[Credentials]) -> Dict[str, str]:
    """
    Build the geofox-auth-* headers for a body.

    Without credentials no headers are produced and the request is sent
    unauthenticated; the API rejects it if the endpoint needs auth.
    """
    if credentials is None:
        logger.debug("No credentials configured, sending unauthenticated request")
        return {}

    return {
        HEADER_AUTH_USER: credentials.user,
        HEADER_AUTH_TYPE: AUTH_TYPE_HMAC_SHA1,
        HEADER_AUTH_SIGNATURE: sign(body, credentials.password),
    }
