"""
Constants for the Geofox client library.
Values follow the HVV Geofox GTI API documentation.
"""

VERSION = "0.1.0"

# Authentication headers (geofox-auth-*)
HEADER_AUTH_USER = "geofox-auth-user"
HEADER_AUTH_TYPE = "geofox-auth-type"
HEADER_AUTH_SIGNATURE = "geofox-auth-signature"
AUTH_TYPE_HMAC_SHA1 = "HmacSHA1"

# Other request headers
HEADER_PLATFORM = "X-Platform"
HEADER_TRACE_ID = "X-TraceId"
USER_AGENT_PREFIX = "geofox-py"

# Envelope fields
RETURN_CODE = "returnCode"
ERROR_TEXT = "errorText"
RETURN_CODE_OK = "OK"
UNKNOWN_ERROR_TEXT = "Unknown error"

# Default configuration values
DEFAULT_BASE_URL = "https://gti.geofox.de"
DEFAULT_CONFIG = {
    'base_url': DEFAULT_BASE_URL,
    'timeout': 30,       # HTTP timeout in seconds
    'retry': False,
    'max_retries': 3,
}

# Environment variables consulted by ClientConfig.from_env
ENV_PREFIX = "GEOFOX_"

# Common request fields
DEFAULT_LANGUAGE = "de"
DEFAULT_API_VERSION = 1
DEFAULT_FILTER_TYPE = "NO_FILTER"
DEFAULT_COORDINATE_TYPE = "EPSG_4326"
