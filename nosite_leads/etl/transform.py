"""Utilities for transforming Places responses into Business records."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from nosite_leads.models import Business

logger = logging.getLogger(__name__)


def _safe_float(value: Any) -> Optional[float]:
    try:
        if value is None:
            return None
        return float(value)
    except (TypeError, ValueError):
        return None


def to_business(place: Dict[str, Any], category: str) -> Business:
    location = place.get("location") or {}
    display_name = place.get("displayName") or {}
    return Business(
        name=display_name.get("text") or "",
        address=place.get("formattedAddress") or "",
        latitude=_safe_float(location.get("latitude")),
        longitude=_safe_float(location.get("longitude")),
        category=category,
        phone=place.get("nationalPhoneNumber") or None,
        rating=_safe_float(place.get("rating")),
    )


def dedupe_businesses(businesses: Iterable[Business]) -> List[Business]:
    """Drop repeats of an exact (name, address) pair, keeping the first one seen."""
    seen: Set[Tuple[str, str]] = set()
    unique: List[Business] = []
    for business in businesses:
        key = (business.name, business.address)
        if key in seen:
            logger.debug("Dropping duplicate %s at %s", business.name, business.address)
            continue
        seen.add(key)
        unique.append(business)
    return unique


def business_to_payload(business: Business) -> Dict[str, Any]:
    return {
        "name": business.name,
        "phone": business.phone,
        "address": business.address,
        "rating": business.rating,
        "lat": business.latitude,
        "lng": business.longitude,
        "category": business.category,
    }
