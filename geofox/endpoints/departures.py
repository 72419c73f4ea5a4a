"""Departure boards and departure courses."""

from ..constants import DEFAULT_COORDINATE_TYPE
from ._base import send


def departure_list(
    client,
    station,
    time,
    *,
    stations=None,
    max_list=None,
    max_time_offset=120,
    all_stations_in_changing_node=True,
    use_realtime=False,
    return_filters=False,
    filter=None,
    service_types=None,
    departure=True,
    coordinate_type=DEFAULT_COORDINATE_TYPE,
    **common
):
    """
    Get departures for a station.

    Args:
        client: GeofoxClient
        station: Station (see helpers.station), or None to query the
            stations list instead
        time: GTI time of the first departure
        max_time_offset: Minutes after time to look ahead
        service_types: e.g. ["ZUG", "UBAHN"]
    """
    fields = {
        "time": time,
        "maxList": max_list,
        "maxTimeOffset": max_time_offset,
        "allStationsInChangingNode": all_stations_in_changing_node,
        "useRealtime": use_realtime,
        "returnFilters": return_filters,
        "filter": filter,
        "serviceTypes": service_types,
        "departure": departure,
        "coordinateType": coordinate_type,
    }
    # A single station takes precedence over a station list
    if station is not None:
        fields["station"] = station
    else:
        fields["stations"] = stations
    return send(client, "/gti/public/departureList", fields, **common)


def departure_list_multi(client, stations, time, **options):
    """Get departures for several stations at once."""
    return departure_list(client, None, time, stations=stations, **options)


def departure_course(
    client,
    line_key,
    station,
    time,
    *,
    direction=None,
    origin=None,
    service_id=-1,
    segments="ALL",
    show_path=False,
    coordinate_type=DEFAULT_COORDINATE_TYPE,
    **common
):
    """
    Get the stops of a specific departure.

    Args:
        line_key: Line identifier, e.g. "HHA-U:U1_HHA-U"
        station: Station the departure leaves from
        time: ISO 8601 departure time string
        segments: "BEFORE", "AFTER" or "ALL"
    """
    return send(client, "/gti/public/departureCourse", {
        "lineKey": line_key,
        "station": station,
        "time": time,
        "direction": direction,
        "origin": origin,
        "serviceId": service_id,
        "segments": segments,
        "showPath": show_path,
        "coordinateType": coordinate_type,
    }, **common)
