"""HTTP entrypoint serving the search API and the map page."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import Flask, Response, jsonify, render_template, request

from nosite_leads.core.categories import CATEGORY_LABELS, DEFAULT_CATEGORIES, parse_categories
from nosite_leads.core.config import ConfigError, get_settings, require_google_api_key
from nosite_leads.core.locations import LocationNotFoundError
from nosite_leads.core.search import result_to_payload, run_search
from nosite_leads.etl.export import businesses_to_csv, export_filename
from nosite_leads.models import SearchRequest

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)


class InvalidSearchParams(ValueError):
    """Raised when query parameters cannot be turned into a SearchRequest."""


def parse_search_request(args: Mapping[str, str]) -> SearchRequest:
    radius_raw = args.get("radiusMiles", "10")
    try:
        radius_miles = float(radius_raw)
    except (TypeError, ValueError) as exc:
        raise InvalidSearchParams("radiusMiles must be numeric") from exc

    return SearchRequest(
        city=args.get("city", "Detroit"),
        state=args.get("state", "MI"),
        radius_miles=radius_miles,
        categories=parse_categories(args.get("categories", ",".join(DEFAULT_CATEGORIES))),
    )


def _search_or_error(handler):
    """Run ``handler(result, search_request)`` and map failures onto JSON errors."""
    settings = get_settings()
    try:
        require_google_api_key(settings)
    except ConfigError as exc:
        logger.error("Search rejected: %s", exc)
        return jsonify({"error": str(exc)}), 500

    try:
        search_request = parse_search_request(request.args)
    except InvalidSearchParams as exc:
        return jsonify({"error": str(exc)}), 400

    logger.info(
        "Request params: city=%s state=%s radiusMiles=%s categories=%s",
        search_request.city,
        search_request.state,
        search_request.radius_miles,
        search_request.categories,
    )
    try:
        result = run_search(search_request, settings)
    except LocationNotFoundError as exc:
        logger.info("Location not resolved: %s", exc.location)
        return jsonify({"error": str(exc)}), 400
    except Exception as exc:  # noqa: BLE001
        logger.exception("Search error: %s", exc)
        return jsonify({"error": "Internal server error"}), 500
    return handler(result, search_request)


# ---------- Routes ----------


@app.get("/")
def index() -> Any:
    settings = get_settings()
    return render_template(
        "index.html",
        categories=CATEGORY_LABELS,
        maps_js_api_key=settings.maps_js_api_key,
    )


@app.get("/healthz")
def healthcheck() -> Any:
    settings = get_settings()
    return jsonify({"status": "ok", "google_api_key_configured": bool(settings.google_api_key)}), 200


@app.get("/api/search")
def search() -> Any:
    return _search_or_error(lambda result, _: (jsonify(result_to_payload(result)), 200))


@app.get("/api/search.csv")
def search_csv() -> Any:
    def _as_csv(result, search_request):
        filename = export_filename(search_request.city)
        return Response(
            businesses_to_csv(result.businesses),
            status=200,
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return _search_or_error(_as_csv)


@app.errorhandler(405)
def method_not_allowed(_exc) -> Any:
    return jsonify({"error": "Method not allowed"}), 405


def main() -> None:
    settings = get_settings()
    logger.info("[BOOT] Binding on 0.0.0.0:%d", settings.server_port)
    app.run(host="0.0.0.0", port=settings.server_port)


if __name__ == "__main__":
    main()
