"""
Prefect flow for loading a forecast for one location.

Stages (each waits for the previous one):
  1. geocode (search_forecast only) - aborts before any NWS request on failure
  2. NWS point lookup
  3. daily, grid and hourly endpoints, fetched concurrently and joined
  4. series construction + sun events (pure)

No task retries: any failed fetch aborts the whole load.

Run locally:
    python -m forecast_dashboard.flows.load
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from prefect import flow, task
from prefect.futures import wait

from forecast_dashboard.analysis.series import build_series, grid_channels_from_payload
from forecast_dashboard.analysis.sun import sun_events
from forecast_dashboard.dashboard import LoadedForecast
from forecast_dashboard.datasources import geocoding, nws
from forecast_dashboard.schemas import DailyPeriod, GeocodeResult, HourlyPeriod, PointMetadata

logger = logging.getLogger(__name__)


@task(name="geocode")
def geocode(query: str) -> GeocodeResult:
    """Resolve a ZIP code or place name."""
    return geocoding.geocode_query(query)


@task(name="fetch-point")
def fetch_point(lat: float, lon: float) -> PointMetadata:
    """Look up NWS endpoints for a coordinate."""
    return nws.fetch_point(lat, lon)


@task(name="fetch-grid")
def fetch_grid(url: str) -> dict[str, Any]:
    """Fetch raw grid data."""
    return nws.fetch_grid(url)


@task(name="fetch-hourly")
def fetch_hourly(url: str) -> list[HourlyPeriod]:
    """Fetch hourly day/night periods."""
    return nws.fetch_hourly_periods(url)


@task(name="fetch-daily")
def fetch_daily(url: str) -> tuple[list[DailyPeriod], str | None]:
    """Fetch the day/night textual forecast."""
    return nws.fetch_daily_periods(url)


def _parse_updated(*candidates: str | None) -> datetime | None:
    for value in candidates:
        if not value:
            continue
        try:
            return datetime.fromisoformat(value)
        except (TypeError, ValueError):
            logger.debug("Ignoring unparseable update time %r", value)
    return None


@task(name="build-forecast")
def build_forecast(
    label: str,
    lat: float,
    lon: float,
    point: PointMetadata,
    grid: dict[str, Any],
    hourly: list[HourlyPeriod],
    daily: list[DailyPeriod],
    daily_updated: str | None = None,
) -> LoadedForecast:
    """Normalize grid channels into an aligned series and derive sun events."""
    tz = ZoneInfo(point.time_zone)
    channels = grid_channels_from_payload(grid)
    series = build_series(channels, hourly, tz=tz)
    return LoadedForecast(
        label=label,
        lat=lat,
        lon=lon,
        time_zone=point.time_zone,
        series=series,
        sun=sun_events(series.time_axis, lat, lon, tz),
        daily_periods=daily,
        hourly_periods=hourly,
        updated=_parse_updated(grid.get("properties", {}).get("updateTime"), daily_updated),
    )


@flow(name="load-forecast", log_prints=True)
def load_forecast(lat: float, lon: float, label: str | None = None) -> LoadedForecast:
    """
    Fetch and normalize the forecast for a coordinate.

    Args:
        lat: Latitude.
        lon: Longitude.
        label: Display label; defaults to the NWS city/state.
    """
    print(f"Looking up NWS point for ({lat:.4f}, {lon:.4f})...")
    point = fetch_point(lat, lon)

    daily_future = fetch_daily.submit(point.forecast_url)
    grid_future = fetch_grid.submit(point.grid_url)
    hourly_future = fetch_hourly.submit(point.hourly_url) if point.hourly_url else None

    # Resolve all fetches before reading any result.
    wait([f for f in (daily_future, grid_future, hourly_future) if f is not None])
    daily, daily_updated = daily_future.result()
    grid = grid_future.result()
    hourly = hourly_future.result() if hourly_future is not None else []

    forecast = build_forecast(
        label or point.place_label,
        lat,
        lon,
        point,
        grid,
        hourly,
        daily,
        daily_updated,
    )
    print(
        f"Built {len(forecast.series)} hourly samples, "
        f"{len(forecast.series.night_intervals)} night bands, {len(forecast.sun)} days"
    )
    return forecast


@flow(name="search-forecast", log_prints=True)
def search_forecast(query: str) -> LoadedForecast:
    """Geocode ``query`` and load its forecast."""
    place = geocode(query)
    print(f"Resolved {query!r} to {place.label}")
    return load_forecast(place.lat, place.lon, place.label)


if __name__ == "__main__":
    result = load_forecast(39.7392, -104.9903)
    print(f"Flow complete: {result.label}, {len(result.series)} hours")
