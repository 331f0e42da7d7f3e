"""Heuristics deciding whether a Places record is a service business without a website."""

from typing import Any, Dict

SERVICE_KEYWORDS = (
    "electric", "hvac", "plumb", "roof", "repair", "contract",
    "heat", "cool", "paint", "landscap", "service", "maintenance",
    "wire", "electrical", "heating", "cooling", "plumbing", "roofing",
    "contractor", "contractors", "construction", "install", "installation",
    "air", "conditioning", "furnace",
    "plumber", "pipe", "drain", "sewer", "water",
    "roofer", "shingle", "gutter", "siding",
    "painting", "painter", "interior", "exterior",
    "landscaping", "landscaper", "lawn", "yard", "garden", "tree",
    "auto", "automotive", "mechanic", "garage", "tire", "brake",
    "handyman", "handy", "fix",
)

SERVICE_TYPES = ("electrician", "plumber", "painter", "car_repair", "establishment", "point_of_interest")

BUSINESS_SUFFIXES = ("llc", "inc", "corp", "company", "services", "service")


def _name(place: Dict[str, Any]) -> str:
    display_name = place.get("displayName") or {}
    return (display_name.get("text") or "").lower()


def _types(place: Dict[str, Any]) -> str:
    return " ".join(place.get("types") or []).lower()


def has_website(place: Dict[str, Any]) -> bool:
    return bool(place.get("websiteUri"))


def has_service_keyword(place: Dict[str, Any]) -> bool:
    search_text = f"{_name(place)} {_types(place)}"
    return any(keyword in search_text for keyword in SERVICE_KEYWORDS)


def has_service_type(place: Dict[str, Any]) -> bool:
    types = _types(place)
    return any(type_name in types for type_name in SERVICE_TYPES)


def has_business_suffix(place: Dict[str, Any]) -> bool:
    name = _name(place)
    return any(suffix in name for suffix in BUSINESS_SUFFIXES)


def is_candidate(place: Dict[str, Any]) -> bool:
    """Keep places without a website that show at least one service-business signal.

    The three signals are OR-ed: ``establishment`` and ``point_of_interest``
    are on almost every Places record, so in practice nearly every
    website-less result is kept.
    """
    if has_website(place):
        return False
    return has_service_keyword(place) or has_service_type(place) or has_business_suffix(place)
