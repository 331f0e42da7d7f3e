"""Client utilities for the Google Geocoding API."""

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


def geocode(address: str, api_key: str, timeout: Optional[float] = 10) -> List[Dict[str, Any]]:
    """Return the candidate results for ``address``; an empty list means no match."""
    params = {"address": address, "key": api_key}
    response = _SESSION.get(_GEOCODE_URL, params=params, timeout=timeout)
    response.raise_for_status()
    payload = response.json() or {}
    status = payload.get("status")
    if status not in {"OK", "ZERO_RESULTS"}:
        logger.error("geocode failed: status=%s, error_message=%s", status, payload.get("error_message"))
    return payload.get("results") or []
