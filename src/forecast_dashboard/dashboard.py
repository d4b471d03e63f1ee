"""The single live forecast and its replacement protocol.

At most one ``LoadedForecast`` is live at a time. Loads are not cancelled, so
a slow earlier request can finish after a newer one; the session hands out a
token per load and only the latest token may install its result. Anything
rendered from the previous forecast (charts, listeners, open files) registers
a disposer via ``on_teardown`` and is torn down before new state appears.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from zoneinfo import ZoneInfo

from forecast_dashboard.analysis.series import AlignedSeries
from forecast_dashboard.analysis.sun import SunEvents
from forecast_dashboard.errors import GeocodeError
from forecast_dashboard.schemas import DailyPeriod, HourlyPeriod

logger = logging.getLogger(__name__)

LOADING = "Loading…"


@dataclass
class LoadedForecast:
    """Everything the renderers need for one location."""

    label: str
    lat: float
    lon: float
    time_zone: str
    series: AlignedSeries
    sun: dict[str, SunEvents]
    daily_periods: list[DailyPeriod] = field(default_factory=list)
    hourly_periods: list[HourlyPeriod] = field(default_factory=list)
    updated: datetime | None = None

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)


class DashboardSession:
    """Owns the live forecast slot; swaps it atomically with explicit teardown."""

    def __init__(self) -> None:
        self._current: LoadedForecast | None = None
        self._disposers: list[Callable[[], None]] = []
        self._generation = 0
        self._status = ""

    @property
    def current(self) -> LoadedForecast | None:
        return self._current

    @property
    def status(self) -> str:
        return self._status

    def on_teardown(self, callback: Callable[[], None]) -> None:
        """Register a disposer for state derived from the current forecast."""
        self._disposers.append(callback)

    def _teardown(self) -> None:
        disposers, self._disposers = self._disposers, []
        for dispose in reversed(disposers):
            dispose()
        self._current = None

    def begin_load(self, label: str | None = None) -> int:
        """Clear the live forecast and return the token for a new load."""
        self._teardown()
        self._generation += 1
        self._status = f"{LOADING} {label}" if label else LOADING
        return self._generation

    def complete_load(self, token: int, forecast: LoadedForecast) -> bool:
        """
        Install ``forecast`` if ``token`` is from the most recent load.

        Returns:
            True if installed, False if a newer load superseded this one.
        """
        if token != self._generation:
            logger.info("Discarding stale forecast for %s (load %d)", forecast.label, token)
            return False
        self._teardown()
        self._current = forecast
        self._status = forecast.label
        return True

    def fail_load(self, token: int, error: Exception) -> None:
        """Clear state and show the error, unless a newer load is in flight."""
        if token != self._generation:
            return
        self._teardown()
        if isinstance(error, GeocodeError):
            self._status = f"Search error: {error}"
        else:
            self._status = f"Error loading forecast: {error}"
