"""NWS API client constants and payload helpers.

API docs: https://www.weather.gov/documentation/services-web-api
"""

from typing import Any

from forecast_dashboard.errors import PayloadError

NWS_API = "https://api.weather.gov"
POINTS_URL = NWS_API + "/points/{lat:.4f},{lon:.4f}"


def properties(data: Any, url: str | None = None) -> dict[str, Any]:
    """Return the GeoJSON ``properties`` mapping, or raise PayloadError."""
    props = data.get("properties", {}) if isinstance(data, dict) else None
    if not isinstance(props, dict):
        raise PayloadError(url, "missing GeoJSON properties")
    return props
