"""Line listing."""

from ._base import send


def list_lines(
    client,
    *,
    with_sublines=False,
    data_release_id=None,
    modification_types=None,
    **common
):
    """
    List all lines, optionally with their sublines.

    Pass the dataReleaseID of a previous call with modification_types
    (e.g. ["MAIN", "SEQUENCE"]) to receive only changes since that release.
    """
    return send(client, "/gti/public/listLines", {
        "withSublines": with_sublines,
        "dataReleaseID": data_release_id,
        "modificationTypes": modification_types,
    }, **common)
