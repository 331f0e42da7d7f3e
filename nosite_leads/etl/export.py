"""CSV export of search results."""

import csv
from datetime import datetime, timezone
from io import StringIO
from pathlib import Path
from typing import Any, Iterable, Optional, Tuple

from nosite_leads.core.categories import CATEGORY_LABELS
from nosite_leads.models import Business

CSV_FIELDNAMES = ["Name", "Category", "Phone", "Address", "Rating", "Latitude", "Longitude"]


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def businesses_to_csv(businesses: Iterable[Business]) -> str:
    buffer = StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_FIELDNAMES, lineterminator="\n")
    writer.writeheader()
    for business in businesses:
        writer.writerow(
            {
                "Name": business.name,
                "Category": CATEGORY_LABELS.get(business.category, business.category),
                "Phone": _cell(business.phone),
                "Address": business.address,
                "Rating": _cell(business.rating),
                "Latitude": _cell(business.latitude),
                "Longitude": _cell(business.longitude),
            }
        )
    return buffer.getvalue()


def export_filename(city: str, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    return f"service-businesses-{city.replace(',', '-')}-{millis}.csv"


def write_csv(businesses: Iterable[Business], output_path: Path) -> Tuple[str, Path]:
    """Write the CSV to ``output_path`` and return ``(content, path)``."""
    content = businesses_to_csv(businesses)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return content, output_path
