"""
Helpers for building Geofox request structures.
"""

import datetime
from typing import Any, Dict, List, Optional

from .client import drop_none
from .constants import DEFAULT_COORDINATE_TYPE


def coordinate(x: float, y: float, type: str = DEFAULT_COORDINATE_TYPE) -> Dict[str, Any]:
    """
    Create a coordinate structure.

    >>> coordinate(53.5511, 9.9937)
    {'x': 53.5511, 'y': 9.9937, 'type': 'EPSG_4326'}
    """
    return {"x": x, "y": y, "type": type}


def bounding_box(lower_left: Dict[str, Any], upper_right: Dict[str, Any]) -> Dict[str, Any]:
    """Create a bounding box from two coordinates."""
    return {"lowerLeft": lower_left, "upperRight": upper_right}


def gti_time(date: str, time: str) -> Dict[str, str]:
    """
    Create a GTI time structure.

    The API expects date as dd.MM.yyyy and time as HH:mm.

    >>> gti_time("15.01.2024", "14:30")
    {'date': '15.01.2024', 'time': '14:30'}
    """
    return {"date": date, "time": time}


def gti_time_from_datetime(value: datetime.datetime) -> Dict[str, str]:
    """Create a GTI time structure (dd.MM.yyyy, HH:mm) from a datetime, truncated to minutes."""
    return gti_time(value.strftime("%d.%m.%Y"), value.strftime("%H:%M"))


def station(
    name: str,
    id: Optional[str] = None,
    type: str = "STATION",
    city: Optional[str] = None,
    combined_name: Optional[str] = None,
    global_id: Optional[str] = None,
    provider: Optional[str] = None,
    coordinate: Optional[Dict[str, Any]] = None,
    layer: Optional[int] = None,
    tariff_details: Optional[Dict[str, Any]] = None,
    service_types: Optional[List[str]] = None,
    has_station_information: Optional[bool] = None,
    address: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a station/location structure (SDName), leaving out unset fields.

    >>> station("Hauptbahnhof", "Master:1")
    {'name': 'Hauptbahnhof', 'id': 'Master:1', 'type': 'STATION'}
    """
    return drop_none({
        "name": name,
        "id": id,
        "type": type,
        "city": city,
        "combinedName": combined_name,
        "globalId": global_id,
        "provider": provider,
        "coordinate": coordinate,
        "layer": layer,
        "tariffDetails": tariff_details,
        "serviceTypes": service_types,
        "hasStationInformation": has_station_information,
        "address": address,
    })
