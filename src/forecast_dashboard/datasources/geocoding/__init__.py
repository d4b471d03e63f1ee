"""Geocoding data source.

A 5-digit query goes to the ZIP lookup, anything else to place search.

Public API:
  - geocode_query: route a free-form query
  - postal: lookup_zip (Zippopotam.us)
  - places: search_place (Nominatim, US only)
"""

from forecast_dashboard.datasources.geocoding.client import ZIP_RE
from forecast_dashboard.datasources.geocoding.places import search_place
from forecast_dashboard.datasources.geocoding.postal import lookup_zip
from forecast_dashboard.errors import GeocodeError
from forecast_dashboard.schemas import GeocodeResult

__all__ = [
    "geocode_query",
    "lookup_zip",
    "search_place",
]


def geocode_query(query: str) -> GeocodeResult:
    """Resolve a ZIP code or place name to coordinates and a display label."""
    q = query.strip()
    if not q:
        raise GeocodeError("Enter a ZIP code or place name.")
    if ZIP_RE.match(q):
        return lookup_zip(q)
    return search_place(q)
