"""Service area checks."""

from ._base import send


def check_postal_code(client, postal_code, **common):
    """Check whether a postal code lies in the HVV area; the envelope carries isHVV."""
    return send(client, "/gti/public/checkPostalCode", {
        "postalCode": postal_code,
    }, **common)
