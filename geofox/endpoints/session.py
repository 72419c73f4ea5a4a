"""Session initialisation."""

from typing import List, Optional

from ._base import send


def init(client, *, properties: Optional[List[str]] = None, **common):
    """
    Initialise a session: returns server time, data validity and build info.

    Args:
        client: GeofoxClient
        properties: Property names to request, empty by default
    """
    return send(client, "/gti/public/init", {
        "properties": [] if properties is None else properties,
    }, **common)
