"""Free-text place search via Nominatim (US only, first result)."""

from __future__ import annotations

from typing import Any

from forecast_dashboard.datasources.geocoding.client import (
    CONTACT_EMAIL,
    COUNTRY_CODES,
    NOMINATIM_SEARCH_URL,
)
from forecast_dashboard.errors import FetchError, GeocodeError
from forecast_dashboard.schemas import GeocodeResult
from forecast_dashboard.services.http import fetch_json


def search_place(query: str) -> GeocodeResult:
    """
    Resolve a place name such as ``"Boulder, CO"``.

    Raises:
        GeocodeError: If the search request fails, finds nothing or returns
            a malformed result.
    """
    params: dict[str, Any] = {
        "format": "jsonv2",
        "limit": 1,
        "countrycodes": COUNTRY_CODES,
        "q": query,
        "addressdetails": 1,
        "email": CONTACT_EMAIL,
    }
    try:
        results = fetch_json(NOMINATIM_SEARCH_URL, params=params, accept="application/json")
    except FetchError as exc:
        raise GeocodeError("Place search failed.") from exc

    if not results:
        raise GeocodeError("No results.")
    try:
        first = results[0]
        return GeocodeResult(
            lat=float(first["lat"]),
            lon=float(first["lon"]),
            label=first.get("display_name") or query,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise GeocodeError("Place search returned an unexpected response.") from exc
