"""Search orchestration: resolve, query Places per type, filter, dedupe, assemble."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from nosite_leads.core.categories import expand_category
from nosite_leads.core.config import Settings, get_settings, require_google_api_key
from nosite_leads.core.locations import location_key, resolve_location
from nosite_leads.etl.filters import has_website, is_candidate
from nosite_leads.etl.transform import business_to_payload, dedupe_businesses, to_business
from nosite_leads.models import Business, SearchRequest, SearchResult, SearchSummary
from nosite_leads.vendors import google_places

logger = logging.getLogger(__name__)


def run_search(request: SearchRequest, settings: Optional[Settings] = None) -> SearchResult:
    """Run one search end to end.

    Raises ``ConfigError`` when no server key is configured and
    ``LocationNotFoundError`` when the location cannot be resolved. A failed
    Places call only removes that call's results; the remaining calls still run.
    """
    settings = settings or get_settings()
    api_key = require_google_api_key(settings)

    coordinates = resolve_location(request.city, request.state, api_key=api_key, timeout=settings.http_timeout)
    radius_meters = request.radius_meters

    all_businesses: List[Business] = []
    total_searched = 0
    debug_entries: List[Dict[str, Any]] = []

    logger.info("Starting search for categories=%s location=%s", request.categories, request.location)

    for category in request.categories:
        google_types = expand_category(category)
        entry: Dict[str, Any] = {"category": category, "googleTypes": google_types, "step": "start"}
        debug_entries.append(entry)

        if not google_types:
            logger.warning("Skipping unknown category: %s", category)
            entry["step"] = "skipped - unknown category"
            continue

        category_count = 0
        for google_type in google_types:
            logger.info(
                "Searching %s (%s) around %s, %s with radius %dm",
                category,
                google_type,
                coordinates.latitude,
                coordinates.longitude,
                radius_meters,
            )
            try:
                places = google_places.search_nearby(
                    google_type,
                    coordinates.latitude,
                    coordinates.longitude,
                    radius_meters,
                    api_key=api_key,
                    timeout=settings.http_timeout,
                )
            except google_places.GooglePlacesError as exc:
                logger.error("Places API error for %s (%s): %s", category, google_type, exc.text)
                entry["step"] = f"API error for {google_type}"
                entry["error"] = exc.text
                continue

            logger.info("Found %d places for %s (%s)", len(places), category, google_type)
            total_searched += len(places)
            entry["step"] = f"API success for {google_type}"
            entry["placesFound"] = entry.get("placesFound", 0) + len(places)
            entry.setdefault("places", []).extend(
                {"name": (place.get("displayName") or {}).get("text"), "hasWebsite": has_website(place)}
                for place in places
            )

            kept = [to_business(place, category) for place in places if is_candidate(place)]
            category_count += len(kept)
            all_businesses.extend(kept)

        entry["filteredBusinesses"] = category_count

    unique_businesses = dedupe_businesses(all_businesses)
    logger.info(
        "Search complete: searched=%d kept=%d unique=%d",
        total_searched,
        len(all_businesses),
        len(unique_businesses),
    )

    summary = SearchSummary(
        total_searched=total_searched,
        without_websites=len(unique_businesses),
        city=request.city,
        state=request.state,
        location=request.location,
        radius_miles=request.radius_miles,
        categories=list(request.categories),
    )
    debug = {
        "selectedCategories": list(request.categories),
        "categories": debug_entries,
        "totalSearched": total_searched,
        "allBusinessesCount": len(all_businesses),
        "uniqueBusinessesCount": len(unique_businesses),
        "coordinates": {"lat": coordinates.latitude, "lng": coordinates.longitude},
        "radiusMeters": radius_meters,
        "locationKey": location_key(request.city, request.state),
    }
    return SearchResult(businesses=unique_businesses, summary=summary, debug=debug)


def result_to_payload(result: SearchResult) -> Dict[str, Any]:
    return {
        "businesses": [business_to_payload(business) for business in result.businesses],
        "summary": result.summary.to_payload(),
        "debug": result.debug,
    }
