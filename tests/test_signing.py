"""
Unit tests for HMAC-SHA1 signing.
"""

import base64
import hashlib
import hmac

from geofox.config import Credentials
from geofox.constants import HEADER_AUTH_SIGNATURE, HEADER_AUTH_TYPE, HEADER_AUTH_USER
from geofox.signing import build_auth_headers, sign, verify


class TestSigning:
    """Test signature generation and auth headers."""

    BODY = b'{"language":"de","version":1,"filterType":"NO_FILTER"}'

    def test_sign(self):
        """Test signature against a direct HMAC-SHA1 computation."""
        signature = sign(self.BODY, "secret")

        expected = base64.b64encode(hmac.new(b"secret", self.BODY, hashlib.sha1).digest()).decode()
        assert signature == expected
        # SHA-1 digest is 20 bytes, 28 base64 characters with padding
        assert len(signature) == 28
        assert signature.endswith('=')

    def test_sign_known_vector(self):
        # RFC 2202 test case 2
        signature = sign("what do ya want for nothing?", "Jefe")

        assert base64.b64decode(signature).hex() == 'effcdf6ae5eb2fa2d27416d5f184df9c259a7c79'

    def test_sign_str_equals_bytes(self):
        assert sign(self.BODY.decode('utf-8'), "secret") == sign(self.BODY, "secret")

    def test_deterministic(self):
        assert sign(self.BODY, "secret") == sign(self.BODY, "secret")

    def test_body_sensitive(self):
        assert sign(self.BODY, "secret") != sign(self.BODY + b' ', "secret")

    def test_key_sensitive(self):
        assert sign(self.BODY, "secret") != sign(self.BODY, "other")

    def test_verify(self):
        signature = sign(self.BODY, "secret")

        assert verify(self.BODY, "secret", signature) is True
        assert verify(b'{}', "secret", signature) is False
        assert verify(self.BODY, "secret", "invalid") is False

    def test_auth_headers(self):
        headers = build_auth_headers(self.BODY, Credentials("app-id", "secret"))

        assert headers == {
            HEADER_AUTH_USER: "app-id",
            HEADER_AUTH_TYPE: "HmacSHA1",
            HEADER_AUTH_SIGNATURE: sign(self.BODY, "secret"),
        }

    def test_no_credentials_no_headers(self):
        """Test that signing is skipped without credentials."""
        assert build_auth_headers(self.BODY, None) == {}

    def test_verify_non_ascii_signature(self):
        """Test that a non-ASCII header value is rejected, not raised on."""
        assert verify(self.BODY, "secret", "ü") is False
        assert verify(self.BODY, "secret", sign(self.BODY, "secret") + "é") is False
