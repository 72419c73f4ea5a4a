"""Shared request fields for the endpoint builders."""

from typing import Any, Dict

from ..client import GeofoxClient
from ..constants import DEFAULT_API_VERSION, DEFAULT_FILTER_TYPE, DEFAULT_LANGUAGE
from ..response import ApiResult


def send(
    client: GeofoxClient,
    path: str,
    fields: Dict[str, Any],
    language: str = DEFAULT_LANGUAGE,
    version: int = DEFAULT_API_VERSION,
    filter_type: str = DEFAULT_FILTER_TYPE,
) -> ApiResult:
    """POST language, version, filterType and the non-None fields to path."""
    return client.call(
        path,
        language=language,
        version=version,
        filterType=filter_type,
        **fields
    )
