"""Resolve a "city, state" pair to coordinates."""

import logging
from types import MappingProxyType
from typing import Optional

from nosite_leads.models import Coordinates
from nosite_leads.vendors import google_geocoding

logger = logging.getLogger(__name__)

KNOWN_LOCATIONS = MappingProxyType(
    {
        "detroit, mi": Coordinates(42.3314, -83.0458),
        "chicago, il": Coordinates(41.8781, -87.6298),
        "new york, ny": Coordinates(40.7128, -74.0060),
        "los angeles, ca": Coordinates(34.0522, -118.2437),
        "miami, fl": Coordinates(25.7617, -80.1918),
        "traverse city, mi": Coordinates(44.7631, -85.6206),
        "cadillac, mi": Coordinates(44.2519, -85.4012),
        "grand rapids, mi": Coordinates(42.9634, -85.6681),
        "kalamazoo, mi": Coordinates(42.2917, -85.5872),
        "lansing, mi": Coordinates(42.7325, -84.5555),
    }
)

EXAMPLE_LOCATIONS = (
    "Detroit, MI",
    "Chicago, IL",
    "New York, NY",
    "Los Angeles, CA",
    "Miami, FL",
    "Traverse City, MI",
)


class LocationNotFoundError(LookupError):
    """Raised when neither the static table nor the geocoder knows the location."""

    def __init__(self, location: str) -> None:
        self.location = location
        examples = ", ".join(EXAMPLE_LOCATIONS[:-1]) + f", or {EXAMPLE_LOCATIONS[-1]}"
        super().__init__(f'Location "{location}" not found. Please try: {examples}')


def format_location(city: str, state: str) -> str:
    return f"{city}, {state}"


def location_key(city: str, state: str) -> str:
    return format_location(city, state).lower().strip()


def lookup_known_location(city: str, state: str) -> Optional[Coordinates]:
    return KNOWN_LOCATIONS.get(location_key(city, state))


def resolve_location(city: str, state: str, api_key: str, timeout: Optional[float] = 10) -> Coordinates:
    """Return coordinates from the static table, falling back to one geocoding call."""
    full_location = format_location(city, state)

    known = lookup_known_location(city, state)
    if known is not None:
        logger.info("Using fallback coordinates for %s: %s, %s", full_location, known.latitude, known.longitude)
        return known

    logger.info("Using Geocoding API for %s", full_location)
    results = google_geocoding.geocode(full_location, api_key=api_key, timeout=timeout)
    if not results:
        raise LocationNotFoundError(full_location)

    location = results[0].get("geometry", {}).get("location", {})
    coordinates = Coordinates(float(location["lat"]), float(location["lng"]))
    logger.info("Geocoded coordinates for %s: %s, %s", full_location, coordinates.latitude, coordinates.longitude)
    return coordinates
