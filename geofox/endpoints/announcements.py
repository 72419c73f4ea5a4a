"""Service announcements and disruptions."""

from ._base import send


def get_announcements(
    client,
    *,
    names=None,
    time_range=None,
    full=False,
    filter_planned=None,
    show_broadcast_relevant=False,
    **common
):
    """
    Get service announcements.

    Args:
        names: Line names to filter on, e.g. ["U1", "S3"]
        time_range: {"begin": ..., "end": ...} with ISO 8601 timestamps
        full: Include the complete announcement text
        filter_planned: "ONLY_PLANNED" or "NO_PLANNED"
    """
    return send(client, "/gti/public/getAnnouncements", {
        "names": names,
        "timeRange": time_range,
        "full": full,
        "filterPlanned": filter_planned,
        "showBroadcastRelevant": show_broadcast_relevant,
    }, **common)
