#!/usr/bin/env python3
"""
Basic usage examples for the Geofox client library.

Credentials are read from GEOFOX_USER and GEOFOX_PASSWORD. Without them
the requests are sent unsigned and the API answers with an error, which
this script prints.
"""

import datetime
import logging
import sys

import geofox


def show(label, result):
    """Print the outcome of a call."""
    if result.ok:
        print(f"   ✓ {label}: {result.data['returnCode']}")
    else:
        print(f"   ✗ {label}: {result.error}")


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.INFO)

    print("=== Geofox Python Client Basic Usage Examples ===\n")

    print("1. Creating client...")
    client = geofox.GeofoxClient(platform="web")
    print(f"   Client created for: {client.base_url}")
    print(f"   Authenticated: {client.config.authenticated}\n")

    with client:
        print("2. Initialising session...")
        result = geofox.init(client)
        show("init", result)
        if result.ok:
            print(f"   Service period: {result.data.get('beginOfService')} - {result.data.get('endOfService')}")
        print()

        print("3. Resolving a station name...")
        result = geofox.check_name(client, geofox.station("Jungfernstieg"), max_list=3)
        show("checkName", result)
        if result.ok:
            for match in result.data.get("results", []):
                print(f"   {match['name']} ({match.get('id')})")
        print()

        print("4. Planning a route...")
        departure = datetime.datetime.now() + datetime.timedelta(minutes=15)
        result = geofox.get_route(
            client,
            geofox.station("Hauptbahnhof", "Master:9910910"),
            geofox.station("Flughafen", "Master:3690"),
            geofox.gti_time_from_datetime(departure),
            number_of_schedules=1,
        )
        show("getRoute", result)
        print()

        print("5. Raising on failure with unwrap()...")
        try:
            data = geofox.check_postal_code(client, 20095).unwrap()
            print(f"   20095 in HVV area: {data.get('isHVV')}")
        except geofox.GeofoxError as e:
            print(f"   ✗ {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
