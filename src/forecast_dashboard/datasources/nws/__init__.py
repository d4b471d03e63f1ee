"""National Weather Service (api.weather.gov) data source.

Public API:
  - points: fetch_point (coordinates -> endpoint URLs, city/state, time zone)
  - gridpoints: fetch_grid (raw grid fields), fetch_hourly_periods,
    fetch_daily_periods
  - client: API URLs
"""

from forecast_dashboard.datasources.nws.client import NWS_API, POINTS_URL
from forecast_dashboard.datasources.nws.gridpoints import (
    fetch_daily_periods,
    fetch_grid,
    fetch_hourly_periods,
    parse_daily_periods,
    parse_hourly_periods,
)
from forecast_dashboard.datasources.nws.points import fetch_point, parse_point

__all__ = [
    "NWS_API",
    "POINTS_URL",
    "fetch_daily_periods",
    "fetch_grid",
    "fetch_hourly_periods",
    "fetch_point",
    "parse_daily_periods",
    "parse_hourly_periods",
    "parse_point",
]
