"""User-facing service categories and the Places types searched for each."""

from types import MappingProxyType
from typing import Iterable, List, Union

# Places has no hvac/roofing/landscaping types, so those borrow nearby trades.
SERVICE_CATEGORIES = MappingProxyType(
    {
        "electrician": ("electrician",),
        "hvac": ("electrician", "plumber"),
        "plumber": ("plumber",),
        "roofer": ("electrician", "painter"),
        "contractor": ("electrician", "plumber", "painter"),
        "painter": ("painter",),
        "landscaper": ("painter", "electrician"),
        "auto_repair": ("car_repair",),
    }
)

CATEGORY_LABELS = MappingProxyType(
    {
        "electrician": "Electrician",
        "hvac": "HVAC Contractor",
        "plumber": "Plumber",
        "roofer": "Roofer",
        "contractor": "General Contractor",
        "painter": "Painter",
        "landscaper": "Landscaper",
        "auto_repair": "Auto Repair",
    }
)

DEFAULT_CATEGORIES = ("electrician",)


def expand_category(category: str) -> List[str]:
    """Return the Places types to query for ``category``; unknown categories expand to nothing."""
    return list(SERVICE_CATEGORIES.get(category, ()))


def parse_categories(raw: Union[str, Iterable[str], None]) -> List[str]:
    if raw is None:
        return list(DEFAULT_CATEGORIES)
    values = raw.split(",") if isinstance(raw, str) else raw

    categories: List[str] = []
    for value in values:
        category = str(value).strip()
        if category and category not in categories:
            categories.append(category)
    return categories
