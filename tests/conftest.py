"""Shared sample payloads shaped like NWS API responses."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from forecast_dashboard.analysis.series import (
    AlignedSeries,
    build_series,
    grid_channels_from_payload,
)
from forecast_dashboard.analysis.sun import sun_events
from forecast_dashboard.dashboard import LoadedForecast
from forecast_dashboard.datasources.nws import parse_daily_periods, parse_hourly_periods

DENVER = (39.7392, -104.9903)
START = datetime(2026, 1, 5, 0, 0, tzinfo=UTC)


def grid_payload_data(with_pressure: bool = True, with_snow: bool = False) -> dict[str, Any]:
    """24 hours of grid data starting 2026-01-05T00:00Z, mixed durations."""
    props: dict[str, Any] = {
        "updateTime": "2026-01-04T22:15:00+00:00",
        "temperature": {
            "uom": "wmoUnit:degC",
            "values": [
                {"validTime": "2026-01-05T00:00:00+00:00/PT3H", "value": 5.0},
                {"validTime": "2026-01-05T03:00:00+00:00/PT21H", "value": 10.0},
            ],
        },
        "dewpoint": {
            "values": [{"validTime": "2026-01-05T00:00:00+00:00/P1D", "value": -2.0}],
        },
        "relativeHumidity": {
            "values": [{"validTime": "2026-01-05T00:00:00+00:00/P1D", "value": 60}],
        },
        "skyCover": {
            "values": [
                {"validTime": "2026-01-05T00:00:00+00:00/PT12H", "value": 20},
                {"validTime": "2026-01-05T12:00:00+00:00/PT12H", "value": 80},
            ],
        },
        "probabilityOfPrecipitation": {
            "values": [
                {"validTime": "2026-01-05T00:00:00+00:00/PT6H", "value": 0},
                {"validTime": "2026-01-05T06:00:00+00:00/PT18H", "value": 40},
            ],
        },
        "quantitativePrecipitation": {
            "values": [
                {"validTime": "2026-01-05T00:00:00+00:00/PT6H", "value": 0.0},
                {"validTime": "2026-01-05T06:00:00+00:00/PT6H", "value": 2.54},
                {"validTime": "2026-01-05T12:00:00+00:00/PT12H", "value": None},
            ],
        },
        "windSpeed": {
            "values": [{"validTime": "2026-01-05T00:00:00+00:00/P1D", "value": 16.0934}],
        },
    }
    if with_pressure:
        props["pressure"] = {
            "values": [{"validTime": "2026-01-05T00:00:00+00:00/P1D", "value": 101325}],
        }
    if with_snow:
        props["snowfallAmount"] = {
            "values": [{"validTime": "2026-01-05T00:00:00+00:00/P1D", "value": 0.0}],
        }
    return {"properties": props}


def point_payload_data() -> dict[str, Any]:
    return {
        "properties": {
            "forecast": "https://api.weather.gov/gridpoints/BOU/63,62/forecast",
            "forecastHourly": "https://api.weather.gov/gridpoints/BOU/63,62/forecast/hourly",
            "forecastGridData": "https://api.weather.gov/gridpoints/BOU/63,62",
            "timeZone": "America/Denver",
            "relativeLocation": {"properties": {"city": "Denver", "state": "CO"}},
        }
    }


def hourly_payload_data() -> dict[str, Any]:
    """24 hourly periods; daytime 14:00-23:00Z (7 AM-4 PM MST)."""
    periods = []
    for i in range(24):
        start = START + timedelta(hours=i)
        periods.append(
            {
                "number": i + 1,
                "startTime": start.isoformat(),
                "endTime": (start + timedelta(hours=1)).isoformat(),
                "isDaytime": 14 <= i <= 23,
            }
        )
    return {"properties": {"periods": periods}}


def daily_payload_data() -> dict[str, Any]:
    return {
        "properties": {
            "updated": "2026-01-04T22:00:00+00:00",
            "periods": [
                {
                    "number": 1,
                    "name": "Monday",
                    "startTime": "2026-01-05T06:00:00-07:00",
                    "isDaytime": True,
                    "temperature": 50,
                    "shortForecast": "Mostly Sunny",
                    "icon": "https://api.weather.gov/icons/land/day/few?size=medium",
                },
                {
                    "number": 2,
                    "name": "Monday Night",
                    "startTime": "2026-01-05T18:00:00-07:00",
                    "isDaytime": False,
                    "temperature": 28,
                    "shortForecast": "Partly Cloudy",
                    "icon": "https://api.weather.gov/icons/land/night/sct?size=medium",
                },
                {
                    "number": 3,
                    "name": "Tuesday",
                    "startTime": "2026-01-06T06:00:00-07:00",
                    "isDaytime": True,
                    "temperature": 55,
                    "shortForecast": "Sunny",
                    "icon": None,
                },
            ],
        }
    }


@pytest.fixture
def grid_payload() -> dict[str, Any]:
    return grid_payload_data()


@pytest.fixture
def point_payload() -> dict[str, Any]:
    return point_payload_data()


@pytest.fixture
def hourly_payload() -> dict[str, Any]:
    return hourly_payload_data()


@pytest.fixture
def daily_payload() -> dict[str, Any]:
    return daily_payload_data()


@pytest.fixture
def sample_series(grid_payload: dict[str, Any], hourly_payload: dict[str, Any]) -> AlignedSeries:
    channels = grid_channels_from_payload(grid_payload)
    return build_series(
        channels, parse_hourly_periods(hourly_payload), tz=ZoneInfo("America/Denver")
    )


@pytest.fixture
def dry_grid_series() -> AlignedSeries:
    """Series from a grid with neither pressure nor snowfall."""
    return build_series(grid_channels_from_payload(grid_payload_data(with_pressure=False)))


@pytest.fixture
def snow_grid_series() -> AlignedSeries:
    """Series from a grid with snowfall but no pressure."""
    return build_series(
        grid_channels_from_payload(grid_payload_data(with_pressure=False, with_snow=True))
    )


@pytest.fixture
def sample_forecast(
    sample_series: AlignedSeries,
    hourly_payload: dict[str, Any],
    daily_payload: dict[str, Any],
) -> LoadedForecast:
    lat, lon = DENVER
    return LoadedForecast(
        label="Denver, CO",
        lat=lat,
        lon=lon,
        time_zone="America/Denver",
        series=sample_series,
        sun=sun_events(sample_series.time_axis, lat, lon, ZoneInfo("America/Denver")),
        daily_periods=parse_daily_periods(daily_payload),
        hourly_periods=parse_hourly_periods(hourly_payload),
        updated=datetime(2026, 1, 4, 22, 15, tzinfo=UTC),
    )
