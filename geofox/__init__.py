"""
Geofox Client Library

A Python client for the HVV Geofox GTI API (Hamburg public transport):
route planning, departures, stations, lines, tariffs, tickets,
announcements and real-time vehicle positions. Requests are signed with
HMAC-SHA1 and responses come back as ApiResult values.

Example usage:
    import geofox

    client = geofox.GeofoxClient(user="my-app", password="my-secret")
    start = geofox.station("Hauptbahnhof", "Master:9910910")
    dest = geofox.station("Flughafen", "Master:3690")
    result = geofox.get_route(client, start, dest, geofox.gti_time("15.01.2024", "14:30"))
    if result.ok:
        schedules = result.data["schedules"]
    else:
        print(result.error)
"""

from .client import GeofoxClient, SignedRequest
from .config import ClientConfig, Credentials
from .constants import VERSION
from .endpoints import (
    check_name,
    check_postal_code,
    departure_course,
    departure_list,
    departure_list_multi,
    get_announcements,
    get_individual_route,
    get_metadata,
    get_route,
    get_station_information,
    get_tariff,
    get_track_coordinates,
    get_vehicle_map,
    get_zone_neighbours,
    init,
    list_lines,
    list_stations,
    list_tickets,
    single_ticket_optimizer,
    tariff_meta_data,
    tariff_zone_neighbours,
)
from .exceptions import (
    GeofoxError,
    ApiError,
    ConfigurationError,
    HttpError,
    TransportError,
    UnrecognizedResponse,
)
from .helpers import bounding_box, coordinate, gti_time, gti_time_from_datetime, station
from .response import ApiResult, check_response, extract_data

__version__ = VERSION
__all__ = [
    "GeofoxClient",
    "SignedRequest",
    "ClientConfig",
    "Credentials",
    "ApiResult",
    "check_response",
    "extract_data",
    "GeofoxError",
    "ApiError",
    "ConfigurationError",
    "HttpError",
    "TransportError",
    "UnrecognizedResponse",
    "bounding_box",
    "coordinate",
    "gti_time",
    "gti_time_from_datetime",
    "station",
    "check_name",
    "check_postal_code",
    "departure_course",
    "departure_list",
    "departure_list_multi",
    "get_announcements",
    "get_individual_route",
    "get_metadata",
    "get_route",
    "get_station_information",
    "get_tariff",
    "get_track_coordinates",
    "get_vehicle_map",
    "get_zone_neighbours",
    "init",
    "list_lines",
    "list_stations",
    "list_tickets",
    "single_ticket_optimizer",
    "tariff_meta_data",
    "tariff_zone_neighbours",
]
