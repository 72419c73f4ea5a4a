"""
HTTP header assembly for Geofox requests.
"""

import secrets
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from .constants import HEADER_PLATFORM, HEADER_TRACE_ID, USER_AGENT_PREFIX

HeaderSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def generate_trace_id() -> str:
    """
    Generate a random version 4 UUID string for request tracing.

    Returns:
        Lowercase hex UUID grouped 8-4-4-4-12
    """
    raw = bytearray(secrets.token_bytes(16))

    # Version nibble (0100) and RFC 4122 variant bits (10)
    raw[6] = (raw[6] & 0x0F) | 0x40
    raw[8] = (raw[8] & 0x3F) | 0x80

    hex_value = raw.hex()
    return '-'.join((
        hex_value[0:8],
        hex_value[8:12],
        hex_value[12:16],
        hex_value[16:20],
        hex_value[20:32],
    ))


def user_agent(version: Optional[str] = None) -> str:
    """Library user agent, with a dev marker when the version is unknown."""
    return f"{USER_AGENT_PREFIX}/{version or 'dev'}"


def merge_headers(*groups: HeaderSource) -> Dict[str, str]:
    """
    Merge header groups in order.

    Names compare case-insensitively; the last occurrence of a name wins
    and keeps its own spelling.
    """
    merged: Dict[str, Tuple[str, str]] = {}
    for group in groups:
        items = group.items() if isinstance(group, Mapping) else group
        for name, value in items:
            key = name.lower()
            # Re-insert so the entry takes the position of its last occurrence
            merged.pop(key, None)
            merged[key] = (name, value)
    return dict(merged.values())


def build_default_headers(
    extra_headers: HeaderSource = (),
    platform: Optional[str] = None,
    version: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build the header set for a single request.

    Args:
        extra_headers: Caller headers, merged last so they win on collision
        platform: Optional X-Platform value
        version: Library version for the User-Agent

    Returns:
        Ordered header mapping including a fresh X-TraceId
    """
    defaults = [
        ('Content-Type', 'application/json; charset=UTF-8'),
        ('Accept', 'application/json'),
        ('Accept-Encoding', 'gzip, deflate'),
        ('User-Agent', user_agent(version)),
        ('Connection', 'Keep-Alive'),
    ]
    if platform:
        defaults.append((HEADER_PLATFORM, platform))
    defaults.append((HEADER_TRACE_ID, generate_trace_id()))

    return merge_headers(defaults, extra_headers)


def header_value(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Look a header up by name, ignoring case."""
    key = name.lower()
    for header, value in headers.items():
        if header.lower() == key:
            return value
    return None
