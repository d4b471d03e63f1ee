"""Sunrise/sunset from solar-elevation zero crossings.

For each consecutive pair of hourly timestamps the solar elevation is
computed at both ends; a change of sign (below horizon vs. at/above it)
marks a crossing, which is then refined by bisection. Ten halvings of a
one-hour bracket pin the instant to within about four seconds.

Days are keyed in the *location's* time zone, not the viewer's.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from typing import Literal

from forecast_dashboard.analysis.intervals import from_epoch_ms

PLACEHOLDER = "—"

CrossingKind = Literal["sunrise", "sunset"]


@dataclass(frozen=True)
class SunCrossing:
    """A refined horizon crossing."""

    time_ms: float
    kind: CrossingKind


@dataclass
class SunEvents:
    """Sunrise/sunset for one local calendar day; either may be absent."""

    sunrise: datetime | None = None
    sunset: datetime | None = None

    @property
    def sunrise_label(self) -> str:
        return format_clock(self.sunrise)

    @property
    def sunset_label(self) -> str:
        return format_clock(self.sunset)


def format_clock(dt: datetime | None) -> str:
    """``"6:42 AM"`` style local time, or a dash placeholder."""
    if dt is None:
        return PLACEHOLDER
    return dt.strftime("%I:%M %p").lstrip("0")


def _equation_of_time(day_of_year: int) -> float:
    """Equation of time in minutes."""
    b = 2 * math.pi * (day_of_year - 81) / 365
    return 9.87 * math.sin(2 * b) - 7.53 * math.cos(b) - 1.5 * math.sin(b)


def solar_elevation(when: datetime, lat: float, lon: float) -> float:
    """
    Solar elevation angle in degrees (negative below the horizon).

    Args:
        when: Instant (naive values are taken as UTC).
        lat: Latitude in degrees, north positive.
        lon: Longitude in degrees, east positive.
    """
    utc = when.replace(tzinfo=UTC) if when.tzinfo is None else when.astimezone(UTC)
    day_of_year = utc.timetuple().tm_yday
    declination = 23.45 * math.sin(math.radians(360 * (284 + day_of_year) / 365))

    solar_time = utc.hour + utc.minute / 60.0 + utc.second / 3600.0
    solar_noon = 12 - (lon / 15) - (_equation_of_time(day_of_year) / 60)
    hour_angle = 15 * (solar_time - solar_noon)

    lat_rad = math.radians(lat)
    decl_rad = math.radians(declination)
    ha_rad = math.radians(hour_angle)
    sin_elev = math.sin(lat_rad) * math.sin(decl_rad) + math.cos(lat_rad) * math.cos(
        decl_rad
    ) * math.cos(ha_rad)
    return math.degrees(math.asin(max(-1.0, min(1.0, sin_elev))))


def find_crossings(
    times: Sequence[float],
    elevation_fn: Callable[[float], float],
    iterations: int = 10,
) -> list[SunCrossing]:
    """
    Locate horizon crossings between consecutive timestamps.

    Args:
        times: Ascending epoch-ms timestamps.
        elevation_fn: Elevation (degrees) at an epoch-ms instant.
        iterations: Bisection steps per crossing.

    Returns:
        Crossings in time order; ``sunrise`` for below->above, ``sunset``
        for above->below.
    """
    crossings: list[SunCrossing] = []
    if len(times) < 2:
        return crossings

    prev_t = times[0]
    prev_up = elevation_fn(prev_t) >= 0
    for cur_t in times[1:]:
        cur_up = elevation_fn(cur_t) >= 0
        if cur_up != prev_up:
            lo, hi = float(prev_t), float(cur_t)
            for _ in range(iterations):
                mid = (lo + hi) / 2
                if (elevation_fn(mid) >= 0) == prev_up:
                    lo = mid
                else:
                    hi = mid
            kind: CrossingKind = "sunrise" if cur_up else "sunset"
            crossings.append(SunCrossing(time_ms=(lo + hi) / 2, kind=kind))
        prev_t, prev_up = cur_t, cur_up
    return crossings


def sun_events(
    time_axis: Sequence[int],
    lat: float,
    lon: float,
    tz: tzinfo = UTC,
) -> dict[str, SunEvents]:
    """
    Sunrise/sunset per local calendar day covered by ``time_axis``.

    The first sunrise and first sunset found on a day win. Days with no
    crossing (polar day/night) keep an entry with absent fields.

    Returns:
        Dict keyed by local ISO date (``YYYY-MM-DD``).
    """
    events: dict[str, SunEvents] = {}
    for t in time_axis:
        events.setdefault(from_epoch_ms(t, tz).date().isoformat(), SunEvents())

    def elevation_at(ms: float) -> float:
        return solar_elevation(from_epoch_ms(ms), lat, lon)

    for crossing in find_crossings(time_axis, elevation_at):
        local = from_epoch_ms(crossing.time_ms, tz)
        day = events.setdefault(local.date().isoformat(), SunEvents())
        if crossing.kind == "sunrise" and day.sunrise is None:
            day.sunrise = local
        elif crossing.kind == "sunset" and day.sunset is None:
            day.sunset = local
    return events
