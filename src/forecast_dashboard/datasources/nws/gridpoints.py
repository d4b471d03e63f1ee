"""NWS gridpoint endpoints: raw grid data, hourly and daily textual forecasts."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from forecast_dashboard.datasources.nws.client import properties
from forecast_dashboard.errors import PayloadError
from forecast_dashboard.schemas import DailyPeriod, HourlyPeriod
from forecast_dashboard.services.http import fetch_json

PeriodT = TypeVar("PeriodT", bound=BaseModel)


def fetch_grid(url: str) -> dict[str, Any]:
    """
    Fetch ``forecastGridData``.

    Returns:
        Raw GeoJSON dict; ``properties`` holds one ``{"values": [...]}``
        entry per field, each value a ``validTime``/``value`` record.
    """
    result: dict[str, Any] = fetch_json(url)
    properties(result, url)
    return result


def _periods(data: dict[str, Any], model: type[PeriodT], url: str | None) -> list[PeriodT]:
    periods = properties(data, url).get("periods") or []
    if not isinstance(periods, list):
        raise PayloadError(url, "periods is not a list")
    try:
        return [model.model_validate(p) for p in periods]
    except ValidationError as exc:
        raise PayloadError(url, f"malformed forecast period ({exc.error_count()} errors)") from exc


def parse_hourly_periods(data: dict[str, Any], url: str | None = None) -> list[HourlyPeriod]:
    return _periods(data, HourlyPeriod, url)


def parse_daily_periods(data: dict[str, Any], url: str | None = None) -> list[DailyPeriod]:
    return _periods(data, DailyPeriod, url)


def fetch_hourly_periods(url: str) -> list[HourlyPeriod]:
    """Fetch the hourly textual forecast (used for day/night flags only)."""
    return parse_hourly_periods(fetch_json(url), url)


def fetch_daily_periods(url: str) -> tuple[list[DailyPeriod], str | None]:
    """
    Fetch the 12-hour day/night textual forecast.

    Returns:
        Tuple of (periods, ``updated`` timestamp string if present).
    """
    data = fetch_json(url)
    periods = parse_daily_periods(data, url)
    return periods, properties(data, url).get("updated")
