"""US ZIP code lookup via Zippopotam.us."""

from __future__ import annotations

from forecast_dashboard.datasources.geocoding.client import ZIPPOPOTAM_URL
from forecast_dashboard.errors import FetchError, GeocodeError
from forecast_dashboard.schemas import GeocodeResult
from forecast_dashboard.services.http import fetch_json


def lookup_zip(zip_code: str) -> GeocodeResult:
    """
    Resolve a 5-digit ZIP to coordinates.

    Returns:
        GeocodeResult labelled ``"80202 Denver, CO"``.

    Raises:
        GeocodeError: If the ZIP is unknown or the response is malformed.
    """
    try:
        data = fetch_json(ZIPPOPOTAM_URL.format(zip=zip_code), accept="application/json")
    except FetchError as exc:
        if exc.status == 404:
            raise GeocodeError("ZIP not found.") from exc
        raise

    places = (data.get("places") if isinstance(data, dict) else None) or []
    if not places:
        raise GeocodeError("ZIP not found.")
    place = places[0]
    try:
        return GeocodeResult(
            lat=float(place["latitude"]),
            lon=float(place["longitude"]),
            label=f"{data.get('post code', zip_code)} {place['place name']}, "
            f"{place['state abbreviation']}",
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise GeocodeError("ZIP lookup returned an unexpected response.") from exc
