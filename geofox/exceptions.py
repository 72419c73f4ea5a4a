"""
Error types for the Geofox client library.

Request failures are returned inside an ApiResult rather than raised;
ApiResult.unwrap() raises them for callers who prefer exceptions.
"""


class GeofoxError(Exception):
    """Base exception for Geofox client errors."""
    pass


class ConfigurationError(GeofoxError):
    """Raised when client configuration is invalid."""
    pass


class TransportError(GeofoxError):
    """Network level failure (DNS, connection refused, timeout, TLS)."""

    def __init__(self, cause: Exception):
        super().__init__(f"HTTP request failed: {cause}")
        self.cause = cause


class HttpError(GeofoxError):
    """Non-2xx HTTP response. The raw body is kept for diagnostics."""

    def __init__(self, status: int, body):
        super().__init__(f"HTTP {status}: {body!r}")
        self.status = status
        self.body = body

    def __eq__(self, other):
        if not isinstance(other, HttpError):
            return NotImplemented
        return (self.status, self.body) == (other.status, other.body)

    __hash__ = GeofoxError.__hash__


class ApiError(GeofoxError):
    """Envelope with a non-OK returnCode."""

    def __init__(self, code: str, message: str):
        super().__init__(f"Geofox API Error: {code} - {message}")
        self.code = code
        self.message = message

    def __eq__(self, other):
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    __hash__ = GeofoxError.__hash__


class UnrecognizedResponse(GeofoxError):
    """Response is not a JSON object or has no returnCode."""

    def __init__(self, raw):
        super().__init__(f"Geofox API Error: unrecognized response {raw!r}")
        self.raw = raw
