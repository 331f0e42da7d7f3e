"""Client utilities for the Google Places API (New) nearby search."""

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_SEARCH_NEARBY_URL = "https://places.googleapis.com/v1/places:searchNearby"

MAX_RESULT_COUNT = 20
FIELD_MASK = ",".join(
    (
        "places.displayName",
        "places.formattedAddress",
        "places.websiteUri",
        "places.nationalPhoneNumber",
        "places.rating",
        "places.location",
        "places.types",
    )
)


class GooglePlacesError(RuntimeError):
    """Raised when the Places API returns a non-successful response."""

    def __init__(self, status_code: int, text: str) -> None:
        super().__init__(f"Places API returned HTTP {status_code}: {text}")
        self.status_code = status_code
        self.text = text


def build_nearby_request(
    included_type: str,
    latitude: float,
    longitude: float,
    radius_meters: int,
    max_results: int = MAX_RESULT_COUNT,
) -> Dict[str, Any]:
    # One provider type per call.
    return {
        "includedTypes": [included_type],
        "maxResultCount": max_results,
        "locationRestriction": {
            "circle": {
                "center": {"latitude": latitude, "longitude": longitude},
                "radius": radius_meters,
            }
        },
    }


def search_nearby(
    included_type: str,
    latitude: float,
    longitude: float,
    radius_meters: int,
    api_key: str,
    timeout: Optional[float] = 10,
    max_results: int = MAX_RESULT_COUNT,
) -> List[Dict[str, Any]]:
    headers = {
        "Content-Type": "application/json",
        "X-Goog-Api-Key": api_key,
        "X-Goog-FieldMask": FIELD_MASK,
    }
    body = build_nearby_request(included_type, latitude, longitude, radius_meters, max_results)
    response = _SESSION.post(_SEARCH_NEARBY_URL, json=body, headers=headers, timeout=timeout)
    if not response.ok:
        logger.error(
            "search_nearby failed: type=%s status=%s body=%s",
            included_type,
            response.status_code,
            response.text[:500],
        )
        raise GooglePlacesError(response.status_code, response.text)
    payload = response.json() or {}
    return payload.get("places") or []
