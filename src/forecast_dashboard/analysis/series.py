"""Aligned hourly series: the dense multi-channel output of the core.

Pipeline::

    grid JSON ──expand_hourly──▶ GridChannels ──merge_time_axis──▶ time_axis
                                      │                              │
                                      └──────── sample per hour ◀────┘
                                                     │
             precip accumulation, per-day precip, day boundaries,
             label centers, favorability ◀───────────┘
    hourly periods ──night_intervals──▶ night shading bands

Each physical quantity keeps its own gaps: a missing sample is ``None`` and
is never filled from neighbours or other channels.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, tzinfo
from typing import Any

from forecast_dashboard.analysis.favorability import score_series
from forecast_dashboard.analysis.intervals import (
    HOUR_MS,
    Channel,
    expand_hourly,
    from_epoch_ms,
    to_epoch_ms,
)
from forecast_dashboard.analysis.timeline import merge_time_axis, sample_at
from forecast_dashboard.analysis.units import c_to_f, identity, kmh_to_mph, mm_to_in, pa_to_inhg
from forecast_dashboard.errors import NoForecastDataError
from forecast_dashboard.schemas import HourlyPeriod

Interval = tuple[int, int]


@dataclass
class GridChannels:
    """Expanded hourly channels, already converted to display units.

    ``pressure`` and ``snowfall`` are optional: ``None`` means the source
    grid has no such field at all.
    """

    temperature: Channel = field(default_factory=dict)
    dewpoint: Channel = field(default_factory=dict)
    humidity: Channel = field(default_factory=dict)
    cloud: Channel = field(default_factory=dict)
    precip_probability: Channel = field(default_factory=dict)
    precip_hourly: Channel = field(default_factory=dict)
    wind_speed: Channel = field(default_factory=dict)
    pressure: Channel | None = None
    snowfall: Channel | None = None

    def all(self) -> list[Channel | None]:
        return [
            self.temperature,
            self.dewpoint,
            self.humidity,
            self.cloud,
            self.precip_probability,
            self.precip_hourly,
            self.wind_speed,
            self.pressure,
            self.snowfall,
        ]


@dataclass
class AlignedSeries:
    """Dense hourly series; every list is index-aligned with ``time_axis``."""

    time_axis: list[int]
    temperature: list[float | None]
    dewpoint: list[float | None]
    humidity: list[float | None]
    cloud: list[float | None]
    precip_probability: list[float | None]
    precip_hourly: list[float | None]
    wind_speed: list[float | None]
    precip_accumulated: list[float]
    pressure: list[float | None] | None = None
    snowfall: list[float | None] | None = None
    night_intervals: list[Interval] = field(default_factory=list)
    day_boundaries: list[int] = field(default_factory=list)
    label_centers: list[float] = field(default_factory=list)
    precip_by_day: dict[str, float] = field(default_factory=dict)
    favorability: list[float | None] = field(default_factory=list)
    tz: tzinfo = UTC

    def __len__(self) -> int:
        return len(self.time_axis)

    @property
    def has_pressure(self) -> bool:
        return self.pressure is not None

    @property
    def has_snowfall(self) -> bool:
        return self.snowfall is not None


# Grid property name -> (GridChannels attribute, converter)
REQUIRED_FIELDS: dict[str, tuple[str, Any]] = {
    "temperature": ("temperature", c_to_f),
    "dewpoint": ("dewpoint", c_to_f),
    "relativeHumidity": ("humidity", identity),
    "skyCover": ("cloud", identity),
    "probabilityOfPrecipitation": ("precip_probability", identity),
    "quantitativePrecipitation": ("precip_hourly", mm_to_in),
    "windSpeed": ("wind_speed", kmh_to_mph),
}
OPTIONAL_FIELDS: dict[str, tuple[str, Any]] = {
    "pressure": ("pressure", pa_to_inhg),
    "snowfallAmount": ("snowfall", mm_to_in),
}


def _values(prop: Mapping[str, Any] | None) -> list[Any] | None:
    if not isinstance(prop, Mapping):
        return None
    values = prop.get("values")
    return values if isinstance(values, list) else None


def grid_channels_from_payload(grid: Mapping[str, Any]) -> GridChannels:
    """
    Expand an NWS ``forecastGridData`` payload into hourly channels.

    Accepts either the full GeoJSON document or its ``properties`` mapping.
    A missing required field gives an empty channel; a missing optional
    field (pressure, snowfall) stays ``None``.
    """
    props: Mapping[str, Any] = grid.get("properties", grid)
    channels = GridChannels()

    for name, (attr, convert) in REQUIRED_FIELDS.items():
        values = _values(props.get(name))
        setattr(channels, attr, expand_hourly(values or [], convert))

    for name, (attr, convert) in OPTIONAL_FIELDS.items():
        values = _values(props.get(name))
        if values is not None:
            setattr(channels, attr, expand_hourly(values, convert))

    return channels


def night_intervals(periods: Iterable[HourlyPeriod]) -> list[Interval]:
    """
    Coalesce consecutive night hours into half-open ``[start, end)`` ranges.

    ``end`` is the start of the hour after the last night hour in the run.
    A gap in the period sequence also ends a run.
    """
    intervals: list[Interval] = []
    run_start: int | None = None
    run_end = 0

    for period in sorted(periods, key=lambda p: p.start_time):
        start_ms = to_epoch_ms(period.start_time)
        if period.is_daytime:
            if run_start is not None:
                intervals.append((run_start, run_end))
                run_start = None
            continue
        if run_start is not None and start_ms != run_end:
            intervals.append((run_start, run_end))
            run_start = None
        if run_start is None:
            run_start = start_ms
        run_end = start_ms + HOUR_MS

    if run_start is not None:
        intervals.append((run_start, run_end))
    return intervals


def day_boundaries(time_axis: Sequence[int], tz: tzinfo = UTC) -> list[int]:
    """Timestamps on the axis that fall on local midnight."""
    boundaries = []
    for t in time_axis:
        local = from_epoch_ms(t, tz)
        if local.hour == 0 and local.minute == 0:
            boundaries.append(t)
    return boundaries


def label_centers(boundaries: Sequence[int]) -> list[float]:
    """Midpoints between adjacent day boundaries (for date labels)."""
    return [(a + b) / 2 for a, b in zip(boundaries, boundaries[1:], strict=False)]


def accumulate(values: Sequence[float | None]) -> list[float]:
    """Running sum with missing values counted as zero."""
    total = 0.0
    out = []
    for v in values:
        total += v or 0
        out.append(total)
    return out


def precip_by_day(
    time_axis: Sequence[int], precip: Sequence[float | None], tz: tzinfo = UTC
) -> dict[str, float]:
    """Sum hourly precip per local calendar date (ISO string keys)."""
    totals: dict[str, float] = {}
    for t, q in zip(time_axis, precip, strict=True):
        key = from_epoch_ms(t, tz).date().isoformat()
        totals[key] = totals.get(key, 0.0) + (q or 0)
    return totals


def _sample(channel: Channel | None, axis: Sequence[int]) -> list[float | None]:
    return [sample_at(channel, t) for t in axis]


def build_series(
    channels: GridChannels,
    hourly_periods: Iterable[HourlyPeriod] = (),
    tz: tzinfo = UTC,
) -> AlignedSeries:
    """
    Build the aligned hourly series from expanded channels.

    Args:
        channels: Expanded, unit-converted grid channels.
        hourly_periods: Hourly textual forecast periods (day/night flags).
        tz: Location time zone used for day partitioning.

    Raises:
        NoForecastDataError: If no channel has any sample.
    """
    axis = merge_time_axis(*channels.all())
    if not axis:
        raise NoForecastDataError

    # Negative precip is invalid input; clamp the sample itself.
    precip = [None if q is None else max(0.0, q) for q in _sample(channels.precip_hourly, axis)]
    boundaries = day_boundaries(axis, tz)

    series = AlignedSeries(
        time_axis=axis,
        temperature=_sample(channels.temperature, axis),
        dewpoint=_sample(channels.dewpoint, axis),
        humidity=_sample(channels.humidity, axis),
        cloud=_sample(channels.cloud, axis),
        precip_probability=_sample(channels.precip_probability, axis),
        precip_hourly=precip,
        wind_speed=_sample(channels.wind_speed, axis),
        precip_accumulated=accumulate(precip),
        pressure=_sample(channels.pressure, axis) if channels.pressure is not None else None,
        snowfall=_sample(channels.snowfall, axis) if channels.snowfall is not None else None,
        night_intervals=night_intervals(hourly_periods),
        day_boundaries=boundaries,
        label_centers=label_centers(boundaries),
        precip_by_day=precip_by_day(axis, precip, tz),
        tz=tz,
    )
    series.favorability = score_series(series)
    return series
