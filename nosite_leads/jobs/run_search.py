"""CLI job to run one search and export the results as CSV."""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from nosite_leads.core.categories import SERVICE_CATEGORIES, parse_categories
from nosite_leads.core.config import ConfigError
from nosite_leads.core.locations import LocationNotFoundError
from nosite_leads.core.search import run_search
from nosite_leads.etl.export import export_filename, write_csv
from nosite_leads.models import SearchRequest

logger = logging.getLogger(__name__)


def run_search_job(
    *,
    city: str,
    state: str,
    radius_miles: float,
    categories: List[str],
    output: Optional[Path] = None,
) -> Path:
    search_request = SearchRequest(city=city, state=state, radius_miles=radius_miles, categories=categories)
    result = run_search(search_request)

    output_path = output or Path(export_filename(city))
    write_csv(result.businesses, output_path)
    logger.info(
        "Completed run: searched=%d without_websites=%d csv=%s",
        result.summary.total_searched,
        result.summary.without_websites,
        output_path,
    )
    return output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find service businesses without a website")
    parser.add_argument("--city", dest="city", default="Detroit", help="City to search around")
    parser.add_argument("--state", dest="state", default="MI", help="Two-letter state code")
    parser.add_argument(
        "--radius-miles",
        dest="radius_miles",
        type=float,
        default=10.0,
        help="Search radius in miles",
    )
    parser.add_argument(
        "--categories",
        dest="categories",
        type=parse_categories,
        default=["electrician"],
        help=f"Comma-separated categories ({', '.join(SERVICE_CATEGORIES)})",
    )
    parser.add_argument("--output", dest="output", type=Path, help="CSV file to write")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    args = build_parser().parse_args(argv)

    try:
        run_search_job(
            city=args.city,
            state=args.state,
            radius_miles=args.radius_miles,
            categories=args.categories,
            output=args.output,
        )
    except ConfigError as exc:
        logger.error("Configuration error: %s", exc)
        return 2
    except LocationNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
