"""
Domain models for the forecast dashboard.

Pydantic models for data from external APIs. These define the canonical
schema - datasources normalize API responses to these.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Location
# =============================================================================


class GeocodeResult(BaseModel):
    """A resolved search query."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    label: str


class PointMetadata(BaseModel):
    """NWS ``/points`` lookup result: endpoint URLs plus location metadata."""

    forecast_url: str
    grid_url: str
    hourly_url: str | None = None
    city: str | None = None
    state: str | None = None
    time_zone: str = "UTC"

    @property
    def place_label(self) -> str:
        """``"City, ST"`` when known, else a generic label."""
        label = (self.city or "") + (f", {self.state}" if self.state else "")
        return label or "Selected location"


# =============================================================================
# Grid
# =============================================================================


class ObservationRecord(BaseModel):
    """One value + validity interval from a grid channel."""

    model_config = ConfigDict(populate_by_name=True)

    valid_time: str | None = Field(default=None, alias="validTime")
    value: float | None = None


# =============================================================================
# Textual forecasts
# =============================================================================


class HourlyPeriod(BaseModel):
    """One period of the hourly textual forecast; only the day/night flag is used."""

    model_config = ConfigDict(populate_by_name=True)

    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime | None = Field(default=None, alias="endTime")
    is_daytime: bool = Field(..., alias="isDaytime")


class DailyPeriod(BaseModel):
    """One day or night period of the daily forecast, shown in the day strip."""

    model_config = ConfigDict(populate_by_name=True)

    number: int
    name: str = ""
    start_time: datetime = Field(..., alias="startTime")
    is_daytime: bool = Field(..., alias="isDaytime")
    temperature: float | None = None
    short_forecast: str = Field(default="", alias="shortForecast")
    icon: str | None = None
