"""
Normalisation of Geofox responses into ApiResult values.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .constants import ERROR_TEXT, RETURN_CODE, RETURN_CODE_OK, UNKNOWN_ERROR_TEXT
from .exceptions import (
    ApiError,
    HttpError,
    TransportError,
    UnrecognizedResponse,
)

logger = logging.getLogger(__name__)

Failure = Union[ApiError, HttpError, TransportError, UnrecognizedResponse]


@dataclass(frozen=True)
class ApiResult:
    """
    Outcome of a Geofox call.

    Exactly one of data and error is set. data is the full response
    envelope on success; error is one of ApiError, HttpError,
    TransportError or UnrecognizedResponse.
    """

    data: Optional[Dict[str, Any]] = None
    error: Optional[Failure] = None

    @classmethod
    def success(cls, envelope: Dict[str, Any]) -> "ApiResult":
        return cls(data=envelope)

    @classmethod
    def failure(cls, error: Failure) -> "ApiResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Dict[str, Any]:
        """Return the envelope, raising the failure if there is one."""
        if self.error is not None:
            raise self.error
        return self.data

    def __bool__(self) -> bool:
        return self.ok


def check_response(envelope: Any) -> ApiResult:
    """
    Classify a decoded response envelope.

    Args:
        envelope: Decoded JSON body

    Returns:
        Success with the whole envelope when returnCode is OK, an ApiError
        for any other returnCode and UnrecognizedResponse otherwise
    """
    if not isinstance(envelope, dict) or RETURN_CODE not in envelope:
        return ApiResult.failure(UnrecognizedResponse(envelope))

    code = envelope[RETURN_CODE]
    if code == RETURN_CODE_OK:
        return ApiResult.success(envelope)

    message = envelope.get(ERROR_TEXT)
    if message is None:
        message = UNKNOWN_ERROR_TEXT
    logger.info("Geofox returned %s: %s", code, message)
    return ApiResult.failure(ApiError(code, message))


def extract_data(envelope: Any) -> Dict[str, Any]:
    """Return a successful envelope or raise the classified error."""
    return check_response(envelope).unwrap()


def _text(body: Union[str, bytes]) -> str:
    """Body as text for diagnostics, undecodable bytes replaced."""
    if isinstance(body, bytes):
        return body.decode('utf-8', errors='replace')
    return body


def normalize_response(status: int, body: Union[str, bytes]) -> ApiResult:
    """
    Classify a raw HTTP response.

    Non-2xx statuses fail with the raw body and the body is not parsed.
    A 2xx body that is not valid JSON is an UnrecognizedResponse.
    """
    if not 200 <= status <= 299:
        logger.warning("Geofox responded with HTTP %s", status)
        return ApiResult.failure(HttpError(status, _text(body)))

    # Parse the raw bytes so invalid UTF-8 is rejected, not replaced
    try:
        envelope = json.loads(body)
    except ValueError:
        return ApiResult.failure(UnrecognizedResponse(_text(body)))

    return check_response(envelope)


def transport_failure(exc: Exception) -> ApiResult:
    """Wrap a transport exception without looking at any body."""
    logger.warning("Geofox request failed: %s", exc)
    return ApiResult.failure(TransportError(exc))
