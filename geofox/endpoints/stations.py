"""Station lookup."""

from ..constants import DEFAULT_COORDINATE_TYPE
from ._base import send


def check_name(
    client,
    name,
    *,
    max_list=None,
    max_distance=None,
    coordinate_type=DEFAULT_COORDINATE_TYPE,
    tariff_details=False,
    allow_type_switch=True,
    **common
):
    """
    Search stations, addresses and points of interest by name.

    Args:
        name: Location to resolve (see helpers.station); type may be
            STATION, ADDRESS, POI, COORDINATE or UNKNOWN
        max_distance: Search radius in meters for coordinate lookups
    """
    return send(client, "/gti/public/checkName", {
        "theName": name,
        "maxList": max_list,
        "maxDistance": max_distance,
        "coordinateType": coordinate_type,
        "tariffDetails": tariff_details,
        "allowTypeSwitch": allow_type_switch,
    }, **common)


def get_station_information(client, station, **common):
    """Get station details such as elevators and accessibility."""
    return send(client, "/gti/public/getStationInformation", {
        "station": station,
    }, **common)


def list_stations(
    client,
    *,
    data_release_id=None,
    modification_types=None,
    coordinate_type=DEFAULT_COORDINATE_TYPE,
    filter_equivalent=False,
    **common
):
    return send(client, "/gti/public/listStations", {
        "dataReleaseID": data_release_id,
        "modificationTypes": modification_types,
        "coordinateType": coordinate_type,
        "filterEquivalent": filter_equivalent,
    }, **common)
