import pytest

from nosite_leads.core import locations, search
from nosite_leads.core.config import ConfigError, Settings
from nosite_leads.core.locations import LocationNotFoundError
from nosite_leads.models import SearchRequest
from nosite_leads.vendors.google_places import GooglePlacesError

SETTINGS = Settings(google_api_key="test-key", http_timeout=10)


def place(name, address="1 Main St", types=None, website=None):
    record = {
        "displayName": {"text": name},
        "formattedAddress": address,
        "location": {"latitude": 44.7, "longitude": -85.6},
        "types": types or [],
    }
    if website:
        record["websiteUri"] = website
    return record


class FakePlaces:
    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def __call__(self, included_type, latitude, longitude, radius_meters, api_key, timeout=None):
        self.calls.append((included_type, latitude, longitude, radius_meters))
        response = self.responses.get(included_type, [])
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_places(monkeypatch):
    fake = FakePlaces()
    monkeypatch.setattr(search.google_places, "search_nearby", fake)
    return fake


@pytest.fixture
def geocode_calls(monkeypatch):
    calls = []

    def fake_geocode(address, api_key, timeout=None):
        calls.append(address)
        return []

    monkeypatch.setattr(locations.google_geocoding, "geocode", fake_geocode)
    return calls


def test_requires_api_key(fake_places):
    with pytest.raises(ConfigError):
        search.run_search(SearchRequest(), Settings(google_api_key=""))
    assert fake_places.calls == []


def test_traverse_city_electrician(fake_places, geocode_calls):
    request = SearchRequest(city="Traverse City", state="MI", radius_miles=10, categories=["electrician"])

    result = search.run_search(request, SETTINGS)

    assert geocode_calls == []
    assert fake_places.calls == [("electrician", 44.7631, -85.6206, 16090)]
    assert result.debug["radiusMeters"] == 16090
    assert result.debug["coordinates"] == {"lat": 44.7631, "lng": -85.6206}


def test_hvac_issues_both_type_calls_in_order(fake_places, geocode_calls):
    search.run_search(SearchRequest(categories=["hvac"]), SETTINGS)

    assert [call[0] for call in fake_places.calls] == ["electrician", "plumber"]


def test_unknown_category_is_skipped(fake_places, geocode_calls):
    result = search.run_search(SearchRequest(categories=["astronaut", "plumber"]), SETTINGS)

    assert [call[0] for call in fake_places.calls] == ["plumber"]
    assert result.debug["categories"][0]["step"] == "skipped - unknown category"
    assert result.summary.categories == ["astronaut", "plumber"]


def test_filters_counts_and_dedupes(fake_places, geocode_calls):
    shared = place("Sparky Electric", "10 Oak St", ["electrician"])
    fake_places.responses = {
        "electrician": [
            shared,
            place("Has Site Electric", "11 Oak St", ["electrician"], website="https://example.com"),
            place("Acme LLC", "123 Main St"),
        ],
        "plumber": [shared, place("Bakery", "5 Elm St", ["bakery"])],
    }

    result = search.run_search(SearchRequest(categories=["hvac"]), SETTINGS)

    assert [(b.name, b.address) for b in result.businesses] == [
        ("Sparky Electric", "10 Oak St"),
        ("Acme LLC", "123 Main St"),
    ]
    assert all(b.category == "hvac" for b in result.businesses)
    assert result.summary.total_searched == 5
    assert result.summary.without_websites == 2
    assert result.debug["allBusinessesCount"] == 3
    assert result.debug["uniqueBusinessesCount"] == 2
    assert result.debug["categories"][0]["placesFound"] == 5


def test_failed_places_call_does_not_abort(fake_places, geocode_calls, caplog):
    fake_places.responses = {
        "electrician": GooglePlacesError(500, "backend error"),
        "plumber": [place("Joe's Plumbing", "2 Pine St")],
    }

    result = search.run_search(SearchRequest(categories=["hvac"]), SETTINGS)

    assert [b.name for b in result.businesses] == ["Joe's Plumbing"]
    assert result.summary.total_searched == 1
    assert "backend error" in caplog.text
    assert result.debug["categories"][0]["error"] == "backend error"


def test_unresolved_location_propagates(fake_places, geocode_calls):
    with pytest.raises(LocationNotFoundError):
        search.run_search(SearchRequest(city="Nowhereville", state="ZZ"), SETTINGS)

    assert geocode_calls == ["Nowhereville, ZZ"]
    assert fake_places.calls == []


def test_repeat_runs_are_order_stable(fake_places, geocode_calls):
    fake_places.responses = {
        "electrician": [place("B Electric", "2 St"), place("A Electric", "1 St")],
        "painter": [place("C Painting", "3 St"), place("B Electric", "2 St")],
    }
    request = SearchRequest(categories=["roofer", "electrician"])

    first = search.run_search(request, SETTINGS)
    second = search.run_search(request, SETTINGS)

    assert first.businesses == second.businesses
    assert [b.name for b in first.businesses] == ["B Electric", "A Electric", "C Painting"]


def test_result_to_payload_shape(fake_places, geocode_calls):
    fake_places.responses = {"electrician": [place("Acme LLC", "123 Main St")]}

    payload = search.result_to_payload(search.run_search(SearchRequest(), SETTINGS))

    assert payload["businesses"][0]["name"] == "Acme LLC"
    assert payload["summary"] == {
        "totalSearched": 1,
        "withoutWebsites": 1,
        "city": "Detroit",
        "state": "MI",
        "location": "Detroit, MI",
        "radiusMiles": 10.0,
        "categories": ["electrician"],
    }
    assert payload["debug"]["locationKey"] == "detroit, mi"


@pytest.mark.parametrize("miles, meters", [(10, 16090), (0.1, 161), (2.5, 4023), (50, 80450)])
def test_radius_conversion(miles, meters):
    assert SearchRequest(radius_miles=miles).radius_meters == meters
