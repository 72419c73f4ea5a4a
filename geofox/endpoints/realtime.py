"""Real-time vehicle positions and track geometry."""

from ..constants import DEFAULT_COORDINATE_TYPE
from ._base import send


def get_vehicle_map(
    client,
    bounding_box,
    *,
    period_begin=None,
    period_end=None,
    without_coords=None,
    coordinate_type=DEFAULT_COORDINATE_TYPE,
    vehicle_types=None,
    realtime=None,
    **common
):
    """
    Get vehicle journeys inside a bounding box.

    Args:
        bounding_box: See helpers.bounding_box
        period_begin: Unix timestamp, start of the period
        period_end: Unix timestamp, end of the period
        vehicle_types: e.g. ["U_BAHN", "S_BAHN", "METROBUS"]
    """
    return send(client, "/gti/public/getVehicleMap", {
        "boundingBox": bounding_box,
        "periodBegin": period_begin,
        "periodEnd": period_end,
        "withoutCoords": without_coords,
        "coordinateType": coordinate_type,
        "vehicleTypes": vehicle_types,
        "realtime": realtime,
    }, **common)


def get_track_coordinates(client, stop_point_keys, *, coordinate_type=DEFAULT_COORDINATE_TYPE, **common):
    """Get the track geometry between stop points."""
    return send(client, "/gti/public/getTrackCoordinates", {
        "coordinateType": coordinate_type,
        "stopPointKeys": stop_point_keys,
    }, **common)
