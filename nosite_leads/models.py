"""Data models shared by the search pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

METERS_PER_MILE = 1609


@dataclass(frozen=True, slots=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Business:
    """A service business without a website, as returned to the caller."""

    name: str
    address: str
    latitude: float
    longitude: float
    category: str
    phone: Optional[str] = None
    rating: Optional[float] = None


@dataclass(slots=True)
class SearchRequest:
    city: str = "Detroit"
    state: str = "MI"
    radius_miles: float = 10.0
    categories: List[str] = field(default_factory=lambda: ["electrician"])

    @property
    def location(self) -> str:
        return f"{self.city}, {self.state}"

    @property
    def radius_meters(self) -> int:
        # Round half up; Python's round() would send 0.5 to the even neighbour.
        return int(math.floor(self.radius_miles * METERS_PER_MILE + 0.5))


@dataclass(slots=True)
class SearchSummary:
    total_searched: int
    without_websites: int
    city: str
    state: str
    location: str
    radius_miles: float
    categories: List[str]

    def to_payload(self) -> Dict[str, Any]:
        return {
            "totalSearched": self.total_searched,
            "withoutWebsites": self.without_websites,
            "city": self.city,
            "state": self.state,
            "location": self.location,
            "radiusMiles": self.radius_miles,
            "categories": list(self.categories),
        }


@dataclass(slots=True)
class SearchResult:
    businesses: List[Business]
    summary: SearchSummary
    debug: Dict[str, Any] = field(default_factory=dict, repr=False)
