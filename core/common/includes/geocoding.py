"""
Geocoding utilities for Agora application.

Coordinates always travel as a pair: after geocoding, latitude and longitude
are either both set or both empty.
"""

import logging
from typing import Any, Optional, Tuple

from django.conf import settings

from core.common.includes.third_party_services.interfaces.geocoding import GeocoderError, GeocoderInterface
from core.common.utils.third_party_services.implementations.geocoding.factory import GeocoderFactory

logger = logging.getLogger("agora")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def get_geocoder() -> Optional[GeocoderInterface]:
    return GeocoderFactory.get_provider(getattr(settings, "GEOCODING", {}).get("PROVIDER"))


def geocode_address(address: str, geocoder: Optional[GeocoderInterface] = None) -> Optional[Tuple[float, float]]:
    """Resolve an address, None when geocoding is disabled, fails, or finds nothing."""
    try:
        geocoder = geocoder or get_geocoder()
        if geocoder is None:
            return None
        return geocoder.geocode(address)
    except GeocoderError as e:
        logger.warning(f"Geocoding failed for address {address!r}: {e}")
        return None


def attach_coordinates(data: dict[str, Any], geocoder: Optional[GeocoderInterface] = None) -> dict[str, Any]:
    """
    Fill latitude and longitude from the address when both are empty.

    Args:
        data: Submitted meeting payload
        geocoder: Provider to use instead of the configured one

    Returns:
        A copy of the payload of the same type, so form-encoded QueryDicts
        keep their nested keys, with coordinates when the address resolved
    """
    data = data.copy()
    for key in ("latitude", "longitude"):
        if key in data and _is_blank(data.get(key)):
            data[key] = None

    address = data.get("address")
    if _is_blank(address) or data.get("latitude") is not None or data.get("longitude") is not None:
        return data

    coordinates = geocode_address(address, geocoder)
    if coordinates is None:
        return data

    data["latitude"], data["longitude"] = coordinates
    logger.info(f"Geocoded meeting address to {coordinates}")
    return data
