"""NWS ``/points`` lookup: coordinates -> forecast endpoints + place metadata."""

from __future__ import annotations

from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from forecast_dashboard.datasources.nws.client import POINTS_URL, properties
from forecast_dashboard.errors import PayloadError
from forecast_dashboard.schemas import PointMetadata
from forecast_dashboard.services.http import fetch_json


def parse_point(data: dict[str, Any], url: str | None = None) -> PointMetadata:
    """
    Normalize a ``/points`` response into PointMetadata.

    Raises:
        PayloadError: If the forecast endpoints are missing (marine and
            out-of-coverage points) or the time zone is unknown.
    """
    props = properties(data, url)
    forecast_url = props.get("forecast")
    grid_url = props.get("forecastGridData")
    if not forecast_url or not grid_url:
        raise PayloadError(url, "no forecast available for this point")

    time_zone = props.get("timeZone") or "UTC"
    try:
        ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise PayloadError(url, f"unknown time zone {time_zone!r}") from exc

    relative = (props.get("relativeLocation") or {}).get("properties") or {}
    return PointMetadata(
        forecast_url=forecast_url,
        grid_url=grid_url,
        hourly_url=props.get("forecastHourly"),
        city=relative.get("city"),
        state=relative.get("state"),
        time_zone=time_zone,
    )


def fetch_point(lat: float, lon: float) -> PointMetadata:
    """
    Look up NWS metadata for a coordinate.

    Args:
        lat: Latitude (US only).
        lon: Longitude.

    Returns:
        PointMetadata with forecast, grid and hourly URLs.
    """
    url = POINTS_URL.format(lat=lat, lon=lon)
    return parse_point(fetch_json(url), url)
