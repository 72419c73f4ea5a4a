"""Ticket listing and ticket optimisation."""

from ._base import send


def list_tickets(client, *, station_key=None, **common):
    """List available tickets, optionally those valid from a station."""
    return send(client, "/gti/public/ticketList", {
        "stationKey": station_key,
    }, **common)


def single_ticket_optimizer(
    client,
    route,
    *,
    with_return_journey=None,
    number_of_adults=None,
    number_of_children=None,
    tickets=None,
    **common
):
    """
    Find the cheapest ticket combination for a journey.

    Args:
        route: Route description with trip, departure, arrival and
            tariffRegions, as returned by get_route
        tickets: Tickets the passengers already own
    """
    return send(client, "/gti/public/singleTicketOptimizer", {
        "withReturnJourney": with_return_journey,
        "numberOfAdults": number_of_adults,
        "numberOfChildren": number_of_children,
        "tickets": tickets,
        "route": route,
    }, **common)
