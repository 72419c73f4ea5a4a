"""Route planning."""

from ..constants import DEFAULT_COORDINATE_TYPE
from ._base import send


def get_route(
    client,
    start,
    dest,
    time,
    *,
    time_is_departure=True,
    with_paths=False,
    number_of_schedules=3,
    realtime="AUTO",
    intermediate_stops=False,
    tariff_details=False,
    return_reduced=False,
    return_partial_tickets=True,
    via=None,
    penalties=None,
    schedules_before=0,
    schedules_after=0,
    coordinate_type=DEFAULT_COORDINATE_TYPE,
    use_bike_and_ride=False,
    tariff_info_selector=None,
    continuous_search=False,
    cont_search_by_service_id=None,
    use_station_position=True,
    forced_start=None,
    forced_dest=None,
    to_start_by=None,
    to_dest_by=None,
    return_cont_search_data=None,
    **common
):
    """
    Get public transport routes between two locations.

    Args:
        client: GeofoxClient
        start: Start location (see helpers.station)
        dest: Destination location
        time: GTI time (see helpers.gti_time)

    Example:
        start = station("Hauptbahnhof", "Master:9910910")
        dest = station("Flughafen", "Master:3690")
        result = get_route(client, start, dest, gti_time("15.01.2024", "14:30"))
    """
    return send(client, "/gti/public/getRoute", {
        "start": start,
        "dest": dest,
        "time": time,
        "timeIsDeparture": time_is_departure,
        "withPaths": with_paths,
        "numberOfSchedules": number_of_schedules,
        "realtime": realtime,
        "intermediateStops": intermediate_stops,
        "tariffDetails": tariff_details,
        "returnReduced": return_reduced,
        "returnPartialTickets": return_partial_tickets,
        "via": via,
        "penalties": penalties,
        "schedulesBefore": schedules_before,
        "schedulesAfter": schedules_after,
        "coordinateType": coordinate_type,
        "useBikeAndRide": use_bike_and_ride,
        "tariffInfoSelector": tariff_info_selector,
        # Field name is misspelled in the API itself
        "continousSearch": continuous_search,
        "contSearchByServiceId": cont_search_by_service_id,
        "useStationPosition": use_station_position,
        "forcedStart": forced_start,
        "forcedDest": forced_dest,
        "toStartBy": to_start_by,
        "toDestBy": to_dest_by,
        "returnContSearchData": return_cont_search_data,
    }, **common)


def get_individual_route(
    client,
    starts,
    dests,
    *,
    max_length=None,
    max_results=None,
    type=DEFAULT_COORDINATE_TYPE,
    service_type="FOOTPATH",
    profile="FOOT_NORMAL",
    speed="NORMAL",
    **common
):
    """Get walking or cycling routes between lists of start and destination points."""
    return send(client, "/gti/public/getIndividualRoute", {
        "starts": starts,
        "dests": dests,
        "maxLength": max_length,
        "maxResults": max_results,
        "type": type,
        "serviceType": service_type,
        "profile": profile,
        "speed": speed,
    }, **common)
