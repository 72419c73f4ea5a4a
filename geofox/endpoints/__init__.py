"""
Request builders for the Geofox GTI endpoints.

Each builder takes the client, the endpoint's required fields and keyword
options, drops options that are None and returns the ApiResult.
Every builder also accepts language, version and filter_type.
"""

from .announcements import get_announcements
from .departures import departure_course, departure_list, departure_list_multi
from .lines import list_lines
from .realtime import get_track_coordinates, get_vehicle_map
from .route import get_individual_route, get_route
from .session import init
from .stations import check_name, get_station_information, list_stations
from .tariff import get_metadata, get_tariff, get_zone_neighbours, tariff_meta_data, tariff_zone_neighbours
from .tickets import list_tickets, single_ticket_optimizer
from .validation import check_postal_code

__all__ = [
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
