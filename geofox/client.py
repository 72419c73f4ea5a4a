"""
HTTP client for the HVV Geofox API.

This module builds the canonical JSON body of a request, signs it with
HMAC-SHA1, sends it and normalises the response into an ApiResult.

The API allows roughly one request per second on average; this client
does not throttle.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import ClientConfig
from .constants import HEADER_TRACE_ID
from .exceptions import ConfigurationError
from .headers import build_default_headers, header_value, merge_headers
from .response import ApiResult, normalize_response, transport_failure
from .signing import build_auth_headers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignedRequest:
    """A request ready to send: path, canonical body bytes and headers."""

    path: str
    body: bytes
    headers: Dict[str, str]

    @property
    def trace_id(self) -> Optional[str]:
        return header_value(self.headers, HEADER_TRACE_ID)


def encode_body(body: Dict[str, Any]) -> bytes:
    """Serialize a request body once; these bytes are both signed and sent."""
    return json.dumps(body, separators=(',', ':'), ensure_ascii=False).encode('utf-8')


def drop_none(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Remove fields whose value is None, keeping order."""
    return {key: value for key, value in fields.items() if value is not None}


class GeofoxClient:
    """
    Client for making authenticated requests to the Geofox GTI API.

    Requests are signed when the configuration carries credentials and
    sent unauthenticated otherwise.
    """

    def __init__(self, config: Optional[ClientConfig] = None, **options):
        """
        Initialize the client.

        Args:
            config: Complete configuration; when omitted one is built
                from options and GEOFOX_* environment variables
            **options: base_url, timeout, headers, user, password,
                platform, retry, max_retries

        Raises:
            ConfigurationError: If both config and options are given
        """
        if config is not None and options:
            raise ConfigurationError(
                f"pass either a ClientConfig or options, not both: {sorted(options)}"
            )
        self.config = config if config is not None else ClientConfig.from_env(**options)

        # Create HTTP session
        self.session = requests.Session()
        if self.config.retry:
            retries = Retry(
                total=self.config.max_retries,
                allowed_methods=None,
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retries)
            self.session.mount('http://', adapter)
            self.session.mount('https://', adapter)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _url(self, path: str) -> str:
        return urljoin(self.config.base_url + '/', path.lstrip('/'))

    def _headers(self) -> Dict[str, str]:
        return build_default_headers(
            self.config.headers,
            platform=self.config.platform,
            version=self.config.version,
        )

    def prepare(self, path: str, body: Dict[str, Any]) -> SignedRequest:
        """
        Serialize, sign and attach headers to a POST body.

        Args:
            path: Endpoint path, e.g. /gti/public/init
            body: JSON-able request fields

        Returns:
            SignedRequest whose body bytes are the signed bytes
        """
        payload = encode_body(body)
        headers = merge_headers(
            self._headers(),
            build_auth_headers(payload, self.config.credentials),
        )
        return SignedRequest(path=path, body=payload, headers=headers)

    def send(self, request: SignedRequest) -> ApiResult:
        """Send a prepared POST request."""
        logger.debug("POST %s trace=%s", request.path, request.trace_id)
        try:
            response = self.session.request(
                'POST',
                self._url(request.path),
                data=request.body,
                headers=request.headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            return transport_failure(e)

        return normalize_response(response.status_code, response.content)

    def post(self, path: str, body: Dict[str, Any]) -> ApiResult:
        """
        Make a signed POST request.

        Args:
            path: Endpoint path relative to the base URL
            body: Request fields, sent as given

        Returns:
            ApiResult with the response envelope or the failure
        """
        return self.send(self.prepare(path, body))

    def call(self, path: str, **fields) -> ApiResult:
        """POST the keyword fields, leaving out those that are None."""
        return self.post(path, drop_none(fields))

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> ApiResult:
        """Make an unsigned GET request. Most Geofox endpoints are POST only."""
        headers = self._headers()
        logger.debug("GET %s trace=%s", path, header_value(headers, HEADER_TRACE_ID))
        try:
            response = self.session.request(
                'GET',
                self._url(path),
                params=params,
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            return transport_failure(e)

        return normalize_response(response.status_code, response.content)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
