"""Tariff calculation and tariff metadata."""

from ._base import send


def get_tariff(
    client,
    schedule_elements,
    departure,
    arrival,
    *,
    return_reduced=False,
    return_partial_tickets=True,
    tariff_info_selector=None,
    **common
):
    """
    Calculate the tariff for a journey.

    Args:
        schedule_elements: Route segments, each with departureStationId,
            arrivalStationId and lineId
        departure: GTI time of departure
        arrival: GTI time of arrival
    """
    return send(client, "/gti/public/getTariff", {
        "scheduleElements": schedule_elements,
        "departure": departure,
        "arrival": arrival,
        "returnReduced": return_reduced,
        "returnPartialTickets": return_partial_tickets,
        "tariffInfoSelector": tariff_info_selector,
    }, **common)


def tariff_meta_data(client, **common):
    """Get tariff zones, counties, rings and kinds."""
    return send(client, "/gti/public/tariffMetaData", {}, **common)


def tariff_zone_neighbours(client, **common):
    """Get the neighbouring zones of every tariff zone."""
    return send(client, "/gti/public/tariffZoneNeighbours", {}, **common)


# Descriptive aliases
get_metadata = tariff_meta_data
get_zone_neighbours = tariff_zone_neighbours
